"""
Workout store: logged sets plus personal records, persisted as two blobs.

State is read once from the injected storage when the store is created and
both blobs are rewritten in full after every mutation.
"""

from datetime import datetime
from typing import Callable

from ..core.config import PRS_KEY, SERIES_POINT_LIMIT, WORKOUTS_KEY
from ..core.models import NO_RECORD, PersonalRecord, SeriesPoint, WorkoutEntry
from .serializers import (
    entries_from_json,
    entries_to_json,
    parse_reps,
    parse_weight,
    records_from_json,
    records_to_json,
)
from .storage import KeyValueStorage


class WorkoutStore:
    """
    Owns the logged sets (newest first) and the personal-record map.

    Personal records only ever go up: deleting the set that set a record
    leaves the record in place, so a record can be higher than every
    remaining set for that exercise. Pass ``recompute_prs_on_delete=True``
    to rebuild the exercise's record from the remaining sets instead.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        series_limit: int = SERIES_POINT_LIMIT,
        recompute_prs_on_delete: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the store and load persisted state.

        Args:
            storage: Blob storage (read now, written after every mutation)
            series_limit: Maximum points returned by series_for()
            recompute_prs_on_delete: Rebuild records when a set is deleted
            clock: Source of the current time for ids and dates

        Raises:
            ValidationError: If a persisted blob is corrupt
        """
        self.storage = storage
        self.series_limit = series_limit
        self.recompute_prs_on_delete = recompute_prs_on_delete
        self._clock = clock

        self._entries: list[WorkoutEntry] = entries_from_json(storage.get_item(WORKOUTS_KEY))
        self._records: dict[str, PersonalRecord] = records_from_json(storage.get_item(PRS_KEY))

    # ── Snapshots ────────────────────────────────────────────────────────────

    @property
    def entries(self) -> tuple[WorkoutEntry, ...]:
        """All entries, newest first."""
        return tuple(self._entries)

    @property
    def records(self) -> dict[str, PersonalRecord]:
        """Copy of the exercise → record map."""
        return dict(self._records)

    # ── Mutations ────────────────────────────────────────────────────────────

    def add_entry(self, exercise: str, weight_input: str, reps_input: str) -> WorkoutEntry | None:
        """
        Log a set from raw form fields.

        Does nothing unless all three fields are filled in and the numbers
        parse; no error is raised for incomplete input.

        Args:
            exercise: Exercise name
            weight_input: Weight as typed, e.g. "135"
            reps_input: Reps as typed, e.g. "10"

        Returns:
            The new entry, or None if the input was incomplete
        """
        if not exercise:
            return None
        weight = parse_weight(weight_input)
        reps = parse_reps(reps_input)
        if weight is None or reps is None:
            return None

        now = self._clock()
        entry = WorkoutEntry(
            id=self._next_id(now),
            date=now.strftime("%Y-%m-%d"),
            exercise=exercise,
            weight=weight,
            reps=reps,
        )

        current = self._records.get(exercise, NO_RECORD)
        if entry.weight > current.weight:
            self._records[exercise] = PersonalRecord(weight=entry.weight, reps=entry.reps)

        self._entries.insert(0, entry)
        self._save()
        return entry

    def remove_entry(self, entry_id: int) -> bool:
        """
        Delete the entry with the given id.

        Args:
            entry_id: Id of the entry to delete

        Returns:
            True if an entry was removed, False if no entry had that id
        """
        for i, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[i]
                if self.recompute_prs_on_delete:
                    self._recompute_record(entry.exercise)
                self._save()
                return True
        return False

    # ── Derived views ────────────────────────────────────────────────────────

    def exercise_names(self) -> list[str]:
        """Distinct exercise names, in first-seen order of the newest-first log."""
        return list(dict.fromkeys(e.exercise for e in self._entries))

    def series_for(self, exercise_name: str) -> list[SeriesPoint]:
        """
        Progress series for one exercise.

        Returns:
            The most recent ``series_limit`` sets as (date, weight) points,
            oldest first; empty if the exercise was never logged
        """
        points = [
            SeriesPoint(date=e.date, weight=e.weight)
            for e in reversed(self._entries)
            if e.exercise == exercise_name
        ]
        return points[-self.series_limit:]

    def record_for(self, exercise_name: str) -> PersonalRecord | None:
        """Return the personal record for an exercise, or None if never logged."""
        return self._records.get(exercise_name)

    def is_record_entry(self, entry: WorkoutEntry) -> bool:
        """True if the entry's weight matches its exercise's current record."""
        record = self._records.get(entry.exercise)
        return record is not None and record.weight == entry.weight

    # ── Internals ────────────────────────────────────────────────────────────

    def _next_id(self, now: datetime) -> int:
        """Millisecond timestamp, bumped past the newest existing id if needed."""
        candidate = int(now.timestamp() * 1000)
        if self._entries:
            candidate = max(candidate, max(e.id for e in self._entries) + 1)
        return candidate

    def _recompute_record(self, exercise: str) -> None:
        """Rebuild one exercise's record by replaying its remaining sets oldest first."""
        best: PersonalRecord | None = None
        for e in reversed(self._entries):
            if e.exercise != exercise:
                continue
            if best is None or e.weight > best.weight:
                best = PersonalRecord(weight=e.weight, reps=e.reps)
        if best is None:
            self._records.pop(exercise, None)
        else:
            self._records[exercise] = best

    def _save(self) -> None:
        """Rewrite both blobs."""
        self.storage.set_item(WORKOUTS_KEY, entries_to_json(self._entries))
        self.storage.set_item(PRS_KEY, records_to_json(self._records))
