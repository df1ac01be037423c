"""
CLI entry point using Typer.

Provides commands for the workout log:
- add: Log a set
- log: Show logged sets
- delete: Remove a set
- charts: ASCII progress charts per exercise
- records: Personal records
- templates / template: Built-in workout templates
- status: Summary and online/offline indicator
"""

import typer

from ..core.config import EXERCISE_TEMPLATES
from ..core.templates import load_template
from . import views
from .app import app, get_store
from .commands import templates as _template_commands  # noqa: F401  (registers commands)
from .commands.log import prompt_entry_fields, show_log
from .commands.progress import charts, records
from .connectivity import is_online


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """
    Gym set logger. Run without a command for interactive mode.
    """
    if ctx.invoked_subcommand is not None:
        return  # A sub-command was given; let it handle things

    # ── Interactive main menu ───────────────────────────────────────────────
    views.console.print()
    views.print_header(is_online())
    views.console.print()

    menu = {
        "1": ("log",      "Log"),
        "2": ("charts",   "Progress"),
        "3": ("records",  "Records"),
        "a": ("add",      "Add a set"),
        "t": ("template", "Add a set from a template"),
        "d": ("delete",   "Delete a set"),
        "0": ("quit",     "Quit"),
    }

    for key, (_, desc) in menu.items():
        views.console.print(f"  \\[{key}] {desc}")

    views.console.print()
    choice = views.console.input("Choose [1]: ").strip() or "1"

    if choice == "0":
        raise typer.Exit(0)

    chosen = {k: v[0] for k, v in menu.items()}.get(choice)

    if chosen is None:
        views.print_error(f"Unknown choice: {choice}")
        raise typer.Exit(1)

    if chosen == "log":
        ctx.invoke(show_log)
    elif chosen == "charts":
        ctx.invoke(charts)
    elif chosen == "records":
        ctx.invoke(records)
    elif chosen == "add":
        _menu_add(None)
    elif chosen == "template":
        _menu_add(_pick_template())
    elif chosen == "delete":
        _menu_delete()


def _pick_template() -> str | None:
    """Let the user choose a template; returns its suggested exercise."""
    names = list(EXERCISE_TEMPLATES)
    for i, name in enumerate(names, 1):
        views.console.print(f"  \\[{i}] {name}")
    raw = views.console.input("Template #: ").strip()
    try:
        idx = int(raw)
    except ValueError:
        views.print_error("Enter a number")
        return None
    if idx < 1 or idx > len(names):
        views.print_error(f"Enter a number between 1 and {len(names)}")
        return None
    return load_template(names[idx - 1])


def _menu_add(suggestion: str | None) -> None:
    """Interactive add-set helper called from the main menu."""
    store = get_store(None)
    exercise, weight, reps = prompt_entry_fields(None, None, None, suggestion)
    entry = store.add_entry(exercise, weight, reps)
    if entry is None:
        views.print_warning("Set not logged. Fill in exercise, weight and reps.")
        return
    views.print_success(f"Logged {entry.exercise}: {entry.weight:g} lbs × {entry.reps} reps")


def _menu_delete() -> None:
    """Interactive delete-set helper called from the main menu."""
    store = get_store(None)
    entries = list(store.entries)

    if not entries:
        views.print_info("No sets to delete.")
        return

    views.print_log(entries, {e.id for e in entries if store.is_record_entry(e)})

    while True:
        raw = views.console.input("Delete set ID (Enter to cancel): ").strip()
        if not raw:
            views.print_info("Cancelled.")
            return
        try:
            entry_id = int(raw)
        except ValueError:
            views.print_error("Enter a number")
            continue

        if store.remove_entry(entry_id):
            views.print_success(f"Deleted set {entry_id}")
        else:
            views.print_error(f"No set with ID {entry_id}")
            continue
        return


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
