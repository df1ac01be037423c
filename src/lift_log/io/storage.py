"""
Key-value blob storage used to persist the workout store.

The store only needs two operations, read a blob and write a blob, so any
object providing ``get_item``/``set_item`` can be injected.
"""

import os
from pathlib import Path
from typing import Protocol

from ..core.config import DATA_DIR_ENV_VAR, DEFAULT_DATA_DIRNAME


class KeyValueStorage(Protocol):
    """Read/write access to named string blobs."""

    def get_item(self, key: str) -> str | None:
        """Return the blob stored under ``key``, or None if never written."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Replace the blob stored under ``key``."""
        ...


class MemoryStorage:
    """Dict-backed storage, for tests and embedding."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def keys(self) -> list[str]:
        return list(self._items)


class JsonFileStorage:
    """
    Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary sibling file which is then renamed over the
    target, so a crash mid-write leaves the previous blob intact.
    I/O errors are not caught here; they propagate to the caller.
    """

    def __init__(self, directory: str | Path):
        """
        Initialize the storage.

        Args:
            directory: Directory holding the blob files (created on first write)
        """
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """Return the file path used for ``key``."""
        return self.directory / f"{key}.json"

    def exists(self) -> bool:
        """Check if the storage directory exists."""
        return self.directory.is_dir()

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)


def get_default_data_dir() -> Path:
    """
    Get the default data directory.

    ``$LIFT_LOG_HOME`` wins when set; otherwise ``~/.lift-log``.

    Returns:
        Default data directory path
    """
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_DATA_DIRNAME
