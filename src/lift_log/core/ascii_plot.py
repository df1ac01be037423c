"""
ASCII plotting for per-exercise weight progress.

Creates terminal-friendly charts of a progress series. Points are spaced
evenly by set, not by calendar date, so several sets logged on one day
each get their own column.
"""

from .config import CHART_HEIGHT, CHART_WIDTH, WEIGHT_UNIT
from .models import SeriesPoint


def create_weight_plot(
    series: list[SeriesPoint],
    exercise_name: str,
    width: int = CHART_WIDTH,
    height: int = CHART_HEIGHT,
) -> str:
    """
    Create an ASCII plot of weight progress for one exercise.

    Args:
        series: Points oldest first (as returned by WorkoutStore.series_for)
        exercise_name: Display name shown in chart title
        width: Plot width in characters, including the y-axis labels
        height: Plot height in lines, including title and x-axis

    Returns:
        ASCII art string
    """
    if not series:
        return f"No sets logged for {exercise_name} yet."

    weights = [p.weight for p in series]

    # Y-axis range with a little headroom; flat series still get a band
    y_min = max(0.0, min(weights) - 5)
    y_max = max(weights) + 5
    y_range = y_max - y_min

    label_width = 7  # "  135 ┤"
    plot_width = width - label_width
    plot_height = height - 4  # title, rule, x-axis rule, x labels

    grid = [[" " for _ in range(plot_width)] for _ in range(plot_height)]

    # Convert points to grid coordinates
    plot_points: list[tuple[int, int]] = []
    n = len(series)
    for i, weight in enumerate(weights):
        x = int(i / (n - 1) * (plot_width - 1)) if n > 1 else 0
        y = int(round((weight - y_min) / y_range * (plot_height - 1)))
        y = plot_height - 1 - y  # Flip y-axis
        plot_points.append((x, y))

    # Draw connecting segments by linear interpolation between points
    for (x1, y1), (x2, y2) in zip(plot_points, plot_points[1:]):
        for x in range(x1 + 1, x2):
            t = (x - x1) / (x2 - x1)
            y = int(round(y1 + (y2 - y1) * t))
            if y2 < y1:
                ch = "╱"
            elif y2 > y1:
                ch = "╲"
            else:
                ch = "─"
            if grid[y][x] == " ":
                grid[y][x] = ch

    # Draw data points last so they sit on top of the lines
    for x, y in plot_points:
        grid[y][x] = "●"

    lines = []
    lines.append(f"{exercise_name} Progress ({WEIGHT_UNIT})")
    lines.append("─" * width)

    for i, row in enumerate(grid):
        y_val = y_max - (i / (plot_height - 1)) * y_range if plot_height > 1 else y_max
        lines.append(f"{y_val:5.0f} ┤" + "".join(row))

    lines.append(" " * (label_width - 1) + "└" + "─" * plot_width)

    # X-axis date labels: first and last point
    label_line = [" "] * plot_width
    first, last = series[0].date[5:], series[-1].date[5:]  # MM-DD
    for i, c in enumerate(first):
        label_line[i] = c
    if n > 1:
        start = max(len(first) + 1, plot_width - len(last))
        for i, c in enumerate(last):
            if start + i < plot_width:
                label_line[start + i] = c
    lines.append(" " * label_width + "".join(label_line))

    return "\n".join(lines)


def create_simple_bar_chart(
    labels: list[str],
    values: list[float],
    width: int = 40,
    title: str = "",
) -> str:
    """
    Create a simple horizontal bar chart.

    Args:
        labels: Labels for each bar
        values: Values for each bar
        width: Maximum bar width
        title: Chart title

    Returns:
        ASCII bar chart string
    """
    if not values:
        return "No data to display."

    max_val = max(values)
    max_label_len = max(len(l) for l in labels) if labels else 0

    lines = []

    if title:
        lines.append(title)
        lines.append("─" * (max_label_len + width + 5))

    for label, value in zip(labels, values):
        bar_len = int((value / max_val) * width) if max_val > 0 else 0
        bar = "█" * bar_len
        lines.append(f"{label:>{max_label_len}} │{bar} {value:g}")

    return "\n".join(lines)
