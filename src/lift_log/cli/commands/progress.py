"""Progress and record commands: charts, records."""

import json
from typing import Annotated, Optional

import typer

from ...io.serializers import record_to_dict
from .. import views
from ..app import DataDirOption, JsonOption, app, get_settings, get_store


@app.command()
def charts(
    exercise: Annotated[
        Optional[str],
        typer.Argument(help="Exercise to chart (default: every logged exercise)"),
    ] = None,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show weight progress charts for the most recent sets of each exercise.
    """
    store = get_store(data_dir)
    settings = get_settings(data_dir)

    names = [exercise] if exercise is not None else store.exercise_names()

    if json_out:
        print(json.dumps(
            {
                name: [{"date": p.date, "weight": p.weight} for p in store.series_for(name)]
                for name in names
            },
            indent=2,
        ))
        return

    if not names:
        views.print_info("No sets logged yet. Use 'add' to log your first set.")
        return

    for name in names:
        views.print_series_chart(
            name,
            store.series_for(name),
            width=settings.chart_width,
            height=settings.chart_height,
        )


@app.command()
def records(
    chart: Annotated[
        bool,
        typer.Option("--chart", "-c", help="Also show a bar chart of record weights"),
    ] = False,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show personal records: heaviest weight per exercise and the reps done with it.
    """
    store = get_store(data_dir)
    prs = store.records

    if json_out:
        print(json.dumps({name: record_to_dict(r) for name, r in prs.items()}, indent=2))
        return

    views.print_records(prs, chart=chart)
