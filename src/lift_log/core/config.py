"""
Configuration constants for lift-log.

Fixed values live here; tunable settings are loaded from YAML by
config_loader.py and default to the values below.
"""

from typing import Final

# =============================================================================
# PERSISTENCE LAYOUT
# =============================================================================

WORKOUTS_KEY: Final[str] = "workouts"  # JSON array of entries, newest first
PRS_KEY: Final[str] = "prs"  # JSON object: exercise -> {weight, reps}

DEFAULT_DATA_DIRNAME: Final[str] = ".lift-log"
DATA_DIR_ENV_VAR: Final[str] = "LIFT_LOG_HOME"

# =============================================================================
# DERIVED VIEWS
# =============================================================================

SERIES_POINT_LIMIT: Final[int] = 10  # Most recent points kept per chart
WEIGHT_UNIT: Final[str] = "lbs"

# =============================================================================
# CHART RENDERING
# =============================================================================

CHART_WIDTH: Final[int] = 60
CHART_HEIGHT: Final[int] = 16

# =============================================================================
# WORKOUT TEMPLATES
# =============================================================================

EXERCISE_TEMPLATES: Final[dict[str, tuple[str, ...]]] = {
    "Push Day": ("Bench Press", "Overhead Press", "Tricep Extensions", "Lateral Raises"),
    "Pull Day": ("Pull-ups", "Barbell Rows", "Bicep Curls", "Face Pulls"),
    "Leg Day": ("Squats", "Deadlifts", "Leg Press", "Calf Raises"),
    "Full Body": ("Squats", "Bench Press", "Rows", "Shoulder Press"),
}
