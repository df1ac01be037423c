"""Tests for form-input parsing and the persisted JSON layout."""

import json

import pytest

from lift_log.core.models import PersonalRecord, WorkoutEntry
from lift_log.io.serializers import (
    ValidationError,
    dict_to_entry,
    entries_from_json,
    entries_to_json,
    parse_reps,
    parse_weight,
    records_from_json,
    records_to_json,
)


class TestParseInput:

    @pytest.mark.parametrize("raw,expected", [("135", 135.0), ("92.5", 92.5), (" 45 ", 45.0)])
    def test_parse_weight_valid(self, raw, expected):
        assert parse_weight(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "heavy", "0", "-10", "inf", "nan"])
    def test_parse_weight_rejects(self, raw):
        assert parse_weight(raw) is None

    @pytest.mark.parametrize("raw,expected", [("8", 8), (" 12 ", 12)])
    def test_parse_reps_valid(self, raw, expected):
        assert parse_reps(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "eight", "8.5", "0", "-3"])
    def test_parse_reps_rejects(self, raw):
        assert parse_reps(raw) is None


class TestJsonLayout:

    def test_entries_serialize_with_expected_keys(self):
        entry = WorkoutEntry(id=1700000000000, date="2026-03-01", exercise="Squats", weight=225.0, reps=5)
        data = json.loads(entries_to_json([entry]))
        assert data == [
            {"id": 1700000000000, "date": "2026-03-01", "exercise": "Squats", "weight": 225.0, "reps": 5}
        ]

    def test_records_serialize_as_object(self):
        blob = records_to_json({"Squats": PersonalRecord(weight=225.0, reps=5)})
        assert json.loads(blob) == {"Squats": {"weight": 225.0, "reps": 5}}

    def test_round_trip_preserves_order_and_keys(self):
        entries = [
            WorkoutEntry(id=3, date="2026-03-03", exercise="Rows", weight=95.5, reps=12),
            WorkoutEntry(id=2, date="2026-03-02", exercise="Squats", weight=235.0, reps=3),
            WorkoutEntry(id=1, date="2026-03-01", exercise="Squats", weight=225.0, reps=5),
        ]
        records = {
            "Squats": PersonalRecord(weight=235.0, reps=3),
            "Rows": PersonalRecord(weight=95.5, reps=12),
        }

        assert entries_from_json(entries_to_json(entries)) == entries
        assert records_from_json(records_to_json(records)) == records

    def test_integer_weights_load_as_float(self):
        entry = dict_to_entry({"id": 1, "date": "2026-03-01", "exercise": "Squats", "weight": 225, "reps": 5})
        assert isinstance(entry.weight, float)

    def test_none_blob_is_empty(self):
        assert entries_from_json(None) == []
        assert records_from_json(None) == {}


class TestValidation:

    def test_missing_field(self):
        with pytest.raises(ValidationError, match="missing field"):
            dict_to_entry({"id": 1, "date": "2026-03-01", "weight": 100, "reps": 5})

    def test_bad_date(self):
        with pytest.raises(ValidationError):
            dict_to_entry({"id": 1, "date": "3/1/2026", "exercise": "Rows", "weight": 100, "reps": 5})

    def test_workouts_must_be_array(self):
        with pytest.raises(ValidationError, match="array"):
            entries_from_json(json.dumps({"id": 1}))

    def test_records_must_be_object(self):
        with pytest.raises(ValidationError, match="object"):
            records_from_json(json.dumps([1, 2]))

    def test_corrupt_json(self):
        with pytest.raises(ValidationError, match="Corrupt"):
            records_from_json("{")

    def test_bad_record_value(self):
        with pytest.raises(ValidationError):
            records_from_json(json.dumps({"Rows": {"weight": "heavy", "reps": 5}}))
