"""Log commands: add, log, delete, status."""

import json
from typing import Annotated, Optional

import typer

from ...core.models import WorkoutEntry
from ...core.templates import load_template
from ...io.serializers import entry_to_dict
from ...io.workout_store import WorkoutStore
from .. import views
from ..app import DataDirOption, JsonOption, app, get_store, resolve_data_dir
from ..connectivity import is_online


def _record_ids(store: WorkoutStore, entries: list[WorkoutEntry]) -> set[int]:
    return {e.id for e in entries if store.is_record_entry(e)}


def prompt_entry_fields(
    exercise: str | None,
    weight: str | None,
    reps: str | None,
    suggestion: str | None = None,
) -> tuple[str, str, str]:
    """
    Ask for any field not supplied on the command line.

    Blank answers are passed through unchanged; the store decides whether
    the set is complete.
    """
    if exercise is None:
        hint = f" [{suggestion}]" if suggestion else ""
        raw = views.console.input(f"Exercise{views.escape(hint)}: ").strip()
        exercise = raw or (suggestion or "")
    if weight is None:
        weight = views.console.input("Weight (lbs): ").strip()
    if reps is None:
        reps = views.console.input("Reps: ").strip()
    return exercise, weight, reps


@app.command()
def add(
    exercise: Annotated[
        Optional[str],
        typer.Argument(help="Exercise name, e.g. 'Bench Press'"),
    ] = None,
    weight: Annotated[
        Optional[str],
        typer.Argument(help="Weight in lbs"),
    ] = None,
    reps: Annotated[
        Optional[str],
        typer.Argument(help="Reps performed"),
    ] = None,
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Suggest the exercise from a template"),
    ] = None,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Log a set.

    Missing values are prompted for. For one-liner use:

      lift-log add "Bench Press" 135 10
    """
    suggestion = None
    if template is not None:
        try:
            suggestion = load_template(template)
        except ValueError as e:
            views.print_error(str(e))
            raise typer.Exit(1)

    store = get_store(data_dir)
    exercise, weight, reps = prompt_entry_fields(exercise, weight, reps, suggestion)

    previous = store.record_for(exercise)
    try:
        entry = store.add_entry(exercise, weight, reps)
    except OSError as e:
        views.print_error(f"Could not save: {e}")
        raise typer.Exit(1)

    if entry is None:
        views.print_warning(
            "Set not logged. Exercise, weight and reps are all required "
            "(weight must be a positive number, reps a positive whole number)."
        )
        raise typer.Exit(1)

    new_record = previous is None or entry.weight > previous.weight

    if json_out:
        print(json.dumps({**entry_to_dict(entry), "new_record": new_record}, indent=2))
        return

    views.print_success(
        f"Logged {entry.exercise}: {entry.weight:g} lbs × {entry.reps} reps (id {entry.id})"
    )
    if new_record:
        views.console.print(f"{views.TROPHY} [bold yellow]New personal record![/bold yellow]")


@app.command("log")
def show_log(
    exercise: Annotated[
        Optional[str],
        typer.Option("--exercise", "-e", help="Only show sets for this exercise"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Show at most this many sets", min=1),
    ] = None,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show logged sets, newest first. Record-setting sets are marked.
    """
    store = get_store(data_dir)

    entries = list(store.entries)
    if exercise is not None:
        entries = [e for e in entries if e.exercise == exercise]
    if limit is not None:
        entries = entries[:limit]

    if json_out:
        print(json.dumps(
            [{**entry_to_dict(e), "is_record": store.is_record_entry(e)} for e in entries],
            indent=2,
        ))
        return

    views.print_log(entries, _record_ids(store, entries))


@app.command()
def delete(
    entry_id: Annotated[
        int,
        typer.Argument(help="Set ID to delete (see the ID column in 'log')"),
    ],
    data_dir: DataDirOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """
    Remove a logged set by its ID.

    Personal records are kept even if the deleted set was the record.
    """
    store = get_store(data_dir)

    target = next((e for e in store.entries if e.id == entry_id), None)
    if target is None:
        views.print_error(f"No set with ID {entry_id}")
        raise typer.Exit(1)

    views.console.print(
        f"Set to delete: [bold]{views.escape(target.exercise)}[/bold] "
        f"{target.weight:g} lbs × {target.reps} ({target.date})"
    )

    if not force and not views.confirm_action("Delete this set?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)

    try:
        store.remove_entry(entry_id)
    except OSError as e:
        views.print_error(f"Could not save: {e}")
        raise typer.Exit(1)

    views.print_success(f"Deleted set {entry_id}")


@app.command()
def status(
    data_dir: DataDirOption = None,
    check_online: Annotated[
        bool,
        typer.Option("--check-online/--no-check-online", help="Probe network connectivity"),
    ] = True,
    json_out: JsonOption = False,
) -> None:
    """
    Show a summary of the log and the online/offline indicator.
    """
    store = get_store(data_dir)
    online = is_online() if check_online else False

    summary = {
        "data_dir": str(resolve_data_dir(data_dir)),
        "sets": len(store.entries),
        "exercises": len(store.exercise_names()),
        "records": len(store.records),
        "online": online,
    }

    if json_out:
        print(json.dumps(summary, indent=2))
        return

    views.print_header(online)
    views.console.print(f"Data:      {views.escape(summary['data_dir'])}")
    views.console.print(f"Sets:      {summary['sets']}")
    views.console.print(f"Exercises: {summary['exercises']}")
    views.console.print(f"Records:   {summary['records']}")
