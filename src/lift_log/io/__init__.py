"""Persistence: blob storage, serializers and the workout store."""

from .storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from .workout_store import WorkoutStore

__all__ = [
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "WorkoutStore",
]
