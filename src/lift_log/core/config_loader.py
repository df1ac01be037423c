"""
YAML → typed settings loader.

Loads defaults from settings.yaml (bundled with the package) and merges
user overrides from ~/.lift-log/settings.yaml (or $LIFT_LOG_HOME).

Usage:
    from lift_log.core.config_loader import load_settings
    settings = load_settings()
    settings.series_limit

If the user override file has parse errors or wrong value types, a
warning is issued and the offending file or key is ignored.
"""

from __future__ import annotations

import importlib.resources
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .config import CHART_HEIGHT, CHART_WIDTH, SERIES_POINT_LIMIT

SETTINGS_FILENAME = "settings.yaml"


@dataclass(frozen=True)
class Settings:
    """Tunable behaviour of the store and the charts."""

    series_limit: int = SERIES_POINT_LIMIT
    recompute_prs_on_delete: bool = False
    chart_width: int = CHART_WIDTH
    chart_height: int = CHART_HEIGHT

    def __post_init__(self) -> None:
        if self.series_limit <= 0:
            raise ValueError("series_limit must be positive")
        if self.chart_width < 20:
            raise ValueError("chart_width must be at least 20")
        if self.chart_height < 5:
            raise ValueError("chart_height must be at least 5")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML file; warn and return {} if it cannot be parsed."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as e:
        warnings.warn(f"lift-log: ignoring settings file {path}: {e}", stacklevel=2)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        warnings.warn(
            f"lift-log: ignoring settings file {path}: top level must be a mapping",
            stacklevel=2,
        )
        return {}
    return data


def _coerce(raw: dict[str, Any]) -> dict[str, Any]:
    """Keep only known keys whose values have the expected type."""
    expected = {
        "series_limit": int,
        "recompute_prs_on_delete": bool,
        "chart_width": int,
        "chart_height": int,
    }
    result: dict[str, Any] = {}
    for key, value in raw.items():
        kind = expected.get(key)
        if kind is None:
            warnings.warn(f"lift-log: unknown setting {key!r} ignored", stacklevel=3)
            continue
        # bool is a subclass of int; reject True/False for numeric settings
        if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
            warnings.warn(
                f"lift-log: setting {key!r} must be {kind.__name__}, got {value!r}; ignored",
                stacklevel=3,
            )
            continue
        result[key] = value
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_bundled_settings_path() -> Path | None:
    """Return the path to the bundled settings.yaml, or None if not found."""
    ref = importlib.resources.files("lift_log").joinpath(SETTINGS_FILENAME)
    if not ref.is_file():
        return None
    return Path(str(ref))


def get_user_settings_path(data_dir: Path) -> Path | None:
    """Return <data_dir>/settings.yaml if it exists, else None."""
    p = data_dir / SETTINGS_FILENAME
    return p if p.exists() else None


def load_settings(data_dir: Path | None = None) -> Settings:
    """
    Load and merge settings from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/lift_log/settings.yaml
    2. User override at <data_dir>/settings.yaml

    Args:
        data_dir: Data directory holding the user override (default: the
            standard data directory)

    Returns:
        Settings with defaults for anything not configured
    """
    from ..io.storage import get_default_data_dir

    merged: dict[str, Any] = {}

    bundled = get_bundled_settings_path()
    if bundled is not None:
        merged.update(_coerce(_load_yaml_file(bundled)))

    user = get_user_settings_path(data_dir if data_dir is not None else get_default_data_dir())
    if user is not None:
        merged.update(_coerce(_load_yaml_file(user)))

    try:
        return Settings(**merged)
    except ValueError as e:
        warnings.warn(f"lift-log: invalid settings ({e}); using defaults", stacklevel=2)
        return Settings()
