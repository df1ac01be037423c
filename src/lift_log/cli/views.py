"""
CLI view formatters using Rich for pretty console output.

Renders the three views of the log (sets, progress charts, records) plus
the shared status messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.ascii_plot import create_simple_bar_chart, create_weight_plot
from ..core.config import CHART_HEIGHT, CHART_WIDTH, WEIGHT_UNIT
from ..core.models import PersonalRecord, SeriesPoint, WorkoutEntry

console = Console()

TROPHY = "🏆"


def _fmt_weight(weight: float) -> str:
    return f"{weight:g} {WEIGHT_UNIT}"


def print_header(online: bool) -> None:
    """Print the app title with the connectivity indicator."""
    indicator = "[green]Online[/green]" if online else "[dim]Offline[/dim]"
    console.print(f"[bold cyan]lift-log[/bold cyan]: exercise tracker   {indicator}")


def format_log_table(entries: list[WorkoutEntry], record_ids: set[int]) -> Table:
    """
    Create a Rich table of logged sets.

    Args:
        entries: Entries to display, newest first
        record_ids: Ids of entries that match their exercise's record

    Returns:
        Rich Table object
    """
    table = Table(title="Workout Log", show_header=True, header_style="bold")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Exercise", style="bold")
    table.add_column("Weight", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("PR", justify="center")

    for entry in entries:
        table.add_row(
            str(entry.id),
            entry.date,
            escape(entry.exercise),
            _fmt_weight(entry.weight),
            str(entry.reps),
            TROPHY if entry.id in record_ids else "",
        )

    return table


def print_log(entries: list[WorkoutEntry], record_ids: set[int]) -> None:
    """Print the workout log, or a hint when it is empty."""
    if not entries:
        console.print("[yellow]No sets logged yet.[/yellow]")
        return
    console.print(format_log_table(entries, record_ids))


def format_records_table(records: dict[str, PersonalRecord]) -> Table:
    """Create a Rich table of personal records."""
    table = Table(title="Personal Records", show_header=True, header_style="bold")
    table.add_column("Exercise", style="bold")
    table.add_column("Weight", justify="right", style="yellow")
    table.add_column("Reps", justify="right")

    for exercise, record in records.items():
        table.add_row(escape(exercise), _fmt_weight(record.weight), str(record.reps))

    return table


def print_records(records: dict[str, PersonalRecord], chart: bool = False) -> None:
    """
    Print personal records.

    Args:
        records: Exercise → record map
        chart: Also print a bar chart comparing record weights
    """
    if not records:
        console.print("[yellow]No personal records yet.[/yellow]")
        return

    console.print(format_records_table(records))
    if chart:
        console.print()
        bars = create_simple_bar_chart(
            list(records),
            [r.weight for r in records.values()],
            title=f"Record Weights ({WEIGHT_UNIT})",
        )
        console.print(bars, markup=False, highlight=False)


def print_series_chart(
    exercise: str,
    series: list[SeriesPoint],
    width: int = CHART_WIDTH,
    height: int = CHART_HEIGHT,
) -> None:
    """Print the ASCII progress chart for one exercise."""
    plot = create_weight_plot(series, exercise, width=width, height=height)
    console.print(plot, markup=False, highlight=False)
    console.print()


def print_templates(templates: dict[str, tuple[str, ...]]) -> None:
    """Print the template registry."""
    table = Table(title="Templates", show_header=True, header_style="bold")
    table.add_column("Template", style="cyan")
    table.add_column("Exercises")

    for name, exercises in templates.items():
        table.add_row(name, ", ".join(exercises))

    console.print(table)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{escape(message)} \\[y/N]: ")
    return response.lower() in ("y", "yes")
