"""
Workout templates.

A template is a named, fixed list of exercises. Selecting one suggests its
first exercise for the next set; the remaining exercises are listed for
reference only.
"""

from .config import EXERCISE_TEMPLATES


def template_names() -> list[str]:
    """Return template names in display order."""
    return list(EXERCISE_TEMPLATES)


def get_template(name: str) -> tuple[str, ...]:
    """
    Return the exercises of a template.

    Args:
        name: Template name, e.g. "Push Day"

    Returns:
        Exercise names in template order

    Raises:
        ValueError: If the template does not exist
    """
    if name not in EXERCISE_TEMPLATES:
        valid = ", ".join(EXERCISE_TEMPLATES)
        raise ValueError(f"Unknown template '{name}'. Valid templates: {valid}")
    return EXERCISE_TEMPLATES[name]


def load_template(name: str) -> str:
    """Return the exercise a template suggests first."""
    return get_template(name)[0]
