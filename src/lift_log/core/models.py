"""
Data models for lift-log.

A WorkoutEntry is one logged set; a PersonalRecord is the heaviest set
seen for an exercise.
"""

import math
import re
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WorkoutEntry:
    """
    A single logged set.

    Entries are immutable once created; the store only ever adds or
    removes whole entries.
    """

    id: int  # milliseconds since epoch, unique within a store
    date: str  # ISO format: YYYY-MM-DD
    exercise: str
    weight: float  # pounds
    reps: int

    def __post_init__(self) -> None:
        """Validate entry data."""
        _validate_date(self.date)

        if not self.exercise:
            raise ValueError("exercise must be non-empty")
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise ValueError(f"weight must be positive, got {self.weight}")
        if self.reps <= 0:
            raise ValueError(f"reps must be positive, got {self.reps}")


@dataclass(frozen=True)
class PersonalRecord:
    """
    Heaviest weight logged for one exercise.

    ``reps`` is the rep count of the set that set the record, not the
    highest rep count ever logged for the exercise.
    """

    weight: float
    reps: int


@dataclass(frozen=True)
class SeriesPoint:
    """One point of a per-exercise progress series."""

    date: str
    weight: float


# Placeholder for an exercise with no record yet
NO_RECORD = PersonalRecord(weight=0.0, reps=0)


def _validate_date(date_str: str) -> None:
    """Validate date string is ISO format YYYY-MM-DD."""
    if not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        raise ValueError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")

    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError as e:
        raise ValueError(f"Invalid date: {date_str}") from e
