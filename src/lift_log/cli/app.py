"""Shared Typer app object, shared option types, and store utility."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..core.config_loader import Settings, load_settings
from ..io.serializers import ValidationError
from ..io.storage import JsonFileStorage, get_default_data_dir
from ..io.workout_store import WorkoutStore
from . import views

# Shared --data-dir option type used across all commands
DataDirOption = Annotated[
    Optional[Path],
    typer.Option("--data-dir", "-p", help="Directory holding workouts.json and prs.json"),
]

# Shared --json option type for machine-readable output
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="lift-log",
    help="Log gym sets, track personal records, and chart your progress.",
    no_args_is_help=False,
    invoke_without_command=True,
)


def resolve_data_dir(data_dir: Path | None) -> Path:
    """Return the given data directory, or the default one."""
    return data_dir if data_dir is not None else get_default_data_dir()


def get_settings(data_dir: Path | None) -> Settings:
    """Load settings for the given or default data directory."""
    return load_settings(resolve_data_dir(data_dir))


def get_store(data_dir: Path | None) -> WorkoutStore:
    """
    Open the workout store in the given or default data directory.

    Prints the problem and exits with code 1 if the stored data cannot be read.
    """
    path = resolve_data_dir(data_dir)
    settings = load_settings(path)
    try:
        return WorkoutStore(
            JsonFileStorage(path),
            series_limit=settings.series_limit,
            recompute_prs_on_delete=settings.recompute_prs_on_delete,
        )
    except (ValidationError, OSError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)
