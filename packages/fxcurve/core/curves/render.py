"""Plain-text curve rendering.

Produces the console views of the effect editor: a table of byte values, a
coarse bar plot and a one-line sparkline. Functions return lines of text;
printing is left to the caller.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from fxcurve.core.curves.models import CURVE_LENGTH

VALUES_PER_ROW = 16
MAX_PLOT_COLUMNS = 80
PLOT_ROWS = 8
PLOT_ROW_SPAN = 32

# Partial-row fill levels for the plot, in steps of 8 value units
_PLOT_LEVELS = (".", ":", "=", "#")

# Sparkline levels, one per 32 value units
_PREVIEW_LEVELS = (" ", ".", ":", "-", "=", "+", "#", "@")
_PREVIEW_STEP = 4


def _clamp_end_frame(end_frame: int) -> int:
    return max(1, min(CURVE_LENGTH, end_frame))


def format_value_table(
    curve: Sequence[int],
    end_frame: int = CURVE_LENGTH,
    values_per_row: int = VALUES_PER_ROW,
) -> list[str]:
    """Format curve values as rows, each prefixed with its first frame.

    Args:
        curve: Curve to format.
        end_frame: Number of leading frames to include (1-160).
        values_per_row: Values per row.

    Returns:
        One string per row, e.g. ``"    0:   0   1   2 ..."``.
    """
    end_frame = _clamp_end_frame(end_frame)
    rows: list[str] = []
    for row_start in range(0, end_frame, values_per_row):
        row_end = min(row_start + values_per_row, end_frame)
        vals = " ".join(f"{curve[frame]:3d}" for frame in range(row_start, row_end))
        rows.append(f"  {row_start:3d}: {vals}")
    return rows


def _plot_char(value: int, row_min: int, row_max: int) -> str:
    if value >= row_max:
        return "#"
    if value >= row_min:
        level = min((value - row_min) // 8, len(_PLOT_LEVELS) - 1)
        return _PLOT_LEVELS[level]
    return " "


def format_ascii_plot(
    curve: Sequence[int],
    end_frame: int = CURVE_LENGTH,
    max_columns: int = MAX_PLOT_COLUMNS,
) -> list[str]:
    """Render the first ``end_frame`` frames as an 8-row bar plot.

    Each row covers 32 value units. The curve is subsampled so the plot is at
    most ``max_columns`` wide.

    Returns:
        Plot lines from the top row down, then the axis and frame labels.
    """
    end_frame = _clamp_end_frame(end_frame)
    target_cols = min(max_columns, end_frame)
    step = max(1, end_frame // target_cols)
    samples = [curve[frame] for frame in range(0, end_frame, step)]

    lines: list[str] = []
    for row in range(PLOT_ROWS, 0, -1):
        row_min = (row - 1) * PLOT_ROW_SPAN
        row_max = row * PLOT_ROW_SPAN
        line = "".join(_plot_char(v, row_min, row_max) for v in samples)
        lines.append(f"{row_max:3d}|{line}|")

    lines.append("   +" + "-" * len(samples) + "+")
    end_label = str(end_frame - 1)
    padding = max(0, len(samples) - len(end_label) - 1)
    lines.append("    0" + " " * padding + end_label)
    return lines


def format_curve_dump(
    curve: Sequence[int],
    curve_num: int = 1,
    end_frame: int = CURVE_LENGTH,
    suffix: str = "",
    truncate_bytes: bool = False,
) -> list[str]:
    """Format the full console dump of a curve: values then plot.

    Args:
        curve: Curve to dump.
        curve_num: 1-based curve number used in the header.
        end_frame: Frames shown in the plot (1-160).
        suffix: Extra header text, e.g. "(Generated)".
        truncate_bytes: If True, also limit the value table to ``end_frame``.

    Returns:
        Dump lines.
    """
    end_frame = _clamp_end_frame(end_frame)
    byte_end = end_frame if truncate_bytes else CURVE_LENGTH

    lines = [
        "",
        f"========== CURVE {curve_num} {suffix} (frames 0-{byte_end - 1}) ==========",
    ]
    lines.extend(format_value_table(curve, byte_end))
    lines.append("")
    lines.append("ASCII visualization:")
    lines.extend(format_ascii_plot(curve, end_frame))
    lines.append("=================================")
    return lines


def format_preview(curve: Sequence[int]) -> str:
    """Render a compact 40-character sparkline of a curve."""
    chars = []
    for frame in range(0, CURVE_LENGTH, _PREVIEW_STEP):
        level = min(math.floor(curve[frame] / PLOT_ROW_SPAN), len(_PREVIEW_LEVELS) - 1)
        chars.append(_PREVIEW_LEVELS[level])
    return "[" + "".join(chars) + "]"
