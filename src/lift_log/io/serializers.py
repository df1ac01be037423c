"""
JSON serialization for workout data models.

Handles conversion between dataclasses and the JSON blobs kept in
storage, plus the permissive parsing of raw form input.
"""

import json
import math
from typing import Any

from ..core.models import PersonalRecord, WorkoutEntry


class ValidationError(Exception):
    """Raised when persisted data cannot be decoded."""

    pass


def parse_weight(raw: str | None) -> float | None:
    """
    Parse a weight field as typed by the user.

    Args:
        raw: Raw input, e.g. "135" or " 92.5 "

    Returns:
        Positive finite float, or None if the field is empty or unparseable
    """
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def parse_reps(raw: str | None) -> int | None:
    """
    Parse a reps field as typed by the user.

    Args:
        raw: Raw input, e.g. "8"

    Returns:
        Positive int, or None if the field is empty or unparseable
    """
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if value <= 0:
        return None
    return value


def entry_to_dict(entry: WorkoutEntry) -> dict[str, Any]:
    """
    Convert WorkoutEntry to JSON-compatible dict.

    Args:
        entry: Entry to convert

    Returns:
        Dict representation
    """
    return {
        "id": entry.id,
        "date": entry.date,
        "exercise": entry.exercise,
        "weight": entry.weight,
        "reps": entry.reps,
    }


def dict_to_entry(data: dict[str, Any]) -> WorkoutEntry:
    """
    Convert dict to WorkoutEntry.

    Args:
        data: Dict representation

    Returns:
        WorkoutEntry instance

    Raises:
        ValidationError: If a field is missing or invalid
    """
    try:
        return WorkoutEntry(
            id=int(data["id"]),
            date=str(data["date"]),
            exercise=str(data["exercise"]),
            weight=float(data["weight"]),
            reps=int(data["reps"]),
        )
    except KeyError as e:
        raise ValidationError(f"Workout entry missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid workout entry {data!r}: {e}") from e


def record_to_dict(record: PersonalRecord) -> dict[str, Any]:
    """Convert PersonalRecord to JSON-compatible dict."""
    return {"weight": record.weight, "reps": record.reps}


def dict_to_record(data: dict[str, Any]) -> PersonalRecord:
    """
    Convert dict to PersonalRecord.

    Raises:
        ValidationError: If a field is missing or invalid
    """
    try:
        return PersonalRecord(weight=float(data["weight"]), reps=int(data["reps"]))
    except KeyError as e:
        raise ValidationError(f"Personal record missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid personal record {data!r}: {e}") from e


def entries_to_json(entries: list[WorkoutEntry] | tuple[WorkoutEntry, ...]) -> str:
    """Serialize entries (newest first) to the ``workouts`` blob."""
    return json.dumps([entry_to_dict(e) for e in entries], separators=(",", ":"))


def records_to_json(records: dict[str, PersonalRecord]) -> str:
    """Serialize the record map to the ``prs`` blob."""
    return json.dumps(
        {name: record_to_dict(r) for name, r in records.items()},
        separators=(",", ":"),
    )


def entries_from_json(blob: str | None) -> list[WorkoutEntry]:
    """
    Decode the ``workouts`` blob.

    Args:
        blob: JSON text, or None when the key has never been written

    Returns:
        Entries in stored order (newest first)

    Raises:
        ValidationError: If the blob is not a JSON array of valid entries
    """
    if blob is None:
        return []
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Corrupt workouts data: {e}") from e
    if not isinstance(data, list):
        raise ValidationError(f"Workouts data must be a JSON array, got {type(data).__name__}")
    return [dict_to_entry(item) for item in data]


def records_from_json(blob: str | None) -> dict[str, PersonalRecord]:
    """
    Decode the ``prs`` blob.

    Raises:
        ValidationError: If the blob is not a JSON object of valid records
    """
    if blob is None:
        return {}
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Corrupt records data: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError(f"Records data must be a JSON object, got {type(data).__name__}")
    return {str(name): dict_to_record(item) for name, item in data.items()}
