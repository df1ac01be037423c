"""Tests for blob storage backends."""

from pathlib import Path

from lift_log.io.storage import JsonFileStorage, MemoryStorage, get_default_data_dir
from lift_log.io.workout_store import WorkoutStore


class TestMemoryStorage:

    def test_get_missing_returns_none(self):
        assert MemoryStorage().get_item("workouts") is None

    def test_set_then_get(self):
        storage = MemoryStorage()
        storage.set_item("prs", "{}")
        assert storage.get_item("prs") == "{}"
        assert storage.keys() == ["prs"]

    def test_initial_items_are_copied(self):
        initial = {"prs": "{}"}
        storage = MemoryStorage(initial)
        storage.set_item("prs", "[]")
        assert initial == {"prs": "{}"}


class TestJsonFileStorage:

    def test_each_key_is_its_own_file(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "data")
        storage.set_item("workouts", "[]")
        storage.set_item("prs", "{}")

        assert (tmp_path / "data" / "workouts.json").read_text() == "[]"
        assert (tmp_path / "data" / "prs.json").read_text() == "{}"
        assert not list((tmp_path / "data").glob("*.tmp"))

    def test_missing_directory_reads_as_empty(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "nope")
        assert storage.get_item("workouts") is None
        assert not storage.exists()

    def test_overwrite_replaces_content(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.set_item("prs", '{"a": 1}')
        storage.set_item("prs", "{}")
        assert storage.get_item("prs") == "{}"

    def test_store_survives_reopen(self, tmp_path):
        store = WorkoutStore(JsonFileStorage(tmp_path))
        store.add_entry("Leg Press", "360", "12")

        reopened = WorkoutStore(JsonFileStorage(tmp_path))
        assert reopened.entries == store.entries
        assert reopened.records == store.records


class TestDefaultDataDir:

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LIFT_LOG_HOME", str(tmp_path / "custom"))
        assert get_default_data_dir() == tmp_path / "custom"

    def test_home_fallback(self, monkeypatch):
        monkeypatch.delenv("LIFT_LOG_HOME", raising=False)
        assert get_default_data_dir() == Path.home() / ".lift-log"
