"""Template commands: templates, template."""

import json
from typing import Annotated

import typer

from ...core.config import EXERCISE_TEMPLATES
from ...core.templates import get_template, load_template
from .. import views
from ..app import JsonOption, app


@app.command("templates")
def list_templates(json_out: JsonOption = False) -> None:
    """
    List the built-in workout templates.
    """
    if json_out:
        print(json.dumps({name: list(ex) for name, ex in EXERCISE_TEMPLATES.items()}, indent=2))
        return
    views.print_templates(EXERCISE_TEMPLATES)


@app.command("template")
def show_template(
    name: Annotated[str, typer.Argument(help="Template name, e.g. 'Push Day'")],
    json_out: JsonOption = False,
) -> None:
    """
    Show which exercise a template suggests next.
    """
    try:
        exercises = get_template(name)
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    suggestion = load_template(name)

    if json_out:
        print(json.dumps({"template": name, "suggested": suggestion, "exercises": list(exercises)}, indent=2))
        return

    views.console.print(f"[bold]{views.escape(name)}[/bold]: {', '.join(exercises)}")
    views.print_success(f"Suggested exercise: {suggestion}")
