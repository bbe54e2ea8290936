"""Curve sampling infrastructure.

This module provides the frame grid every generator walks, the frame-window
classification shared by all windowed families, and the quantization rule
that turns a float evaluation into a byte sample.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Literal

from fxcurve.core.curves.models import CURVE_LENGTH, SAMPLE_MAX, SAMPLE_MIN
from fxcurve.core.utils.math import clamp

BEFORE: Literal["before"] = "before"
AFTER: Literal["after"] = "after"


def frame_range() -> range:
    """Return the frame indices covered by a curve: 0 .. CURVE_LENGTH - 1."""
    return range(CURVE_LENGTH)


def window_position(
    frame: float, start_frame: float, end_frame: float
) -> Literal["before", "after"] | float:
    """Classify a frame against the active window ``[start_frame, end_frame)``.

    The before-check runs first and the after-check second, so when
    ``end_frame <= start_frame`` no frame ever reaches the interior branch and
    the division below cannot see a zero denominator.

    Args:
        frame: Frame index being sampled.
        start_frame: First frame of the window.
        end_frame: Frame at which the window ends (exclusive).

    Returns:
        ``"before"`` for frames ahead of the window, ``"after"`` for frames at
        or past its end, otherwise the normalized position ``t`` in [0, 1).

    Example:
        >>> window_position(5, 10, 20)
        'before'
        >>> window_position(15, 10, 20)
        0.5
        >>> window_position(20, 10, 20)
        'after'
    """
    if frame < start_frame:
        return BEFORE
    if frame >= end_frame:
        return AFTER
    return (frame - start_frame) / (end_frame - start_frame)


def clamp_value(value: float) -> float:
    """Clamp a value parameter to the byte range [0, 255]."""
    return clamp(value, SAMPLE_MIN, SAMPLE_MAX)


def quantize(value: float) -> int:
    """Floor a float evaluation and clamp it into [0, 255].

    Infinite values saturate to the nearest bound and NaN maps to 0, so
    exotic shape parameters never raise.

    Example:
        >>> quantize(127.9)
        127
        >>> quantize(300.0)
        255
    """
    if math.isnan(value):
        return SAMPLE_MIN
    # Bounds are integral, so clamping before flooring matches floor-then-clamp.
    return math.floor(clamp_value(value))


def sample_window(
    start_frame: float,
    end_frame: float,
    before: float,
    after: float,
    evaluate: Callable[[float], float],
) -> list[int]:
    """Sample a windowed curve over every frame.

    Args:
        start_frame: First frame of the window.
        end_frame: Frame at which the window ends (exclusive).
        before: Value held by frames ahead of the window.
        after: Value held by frames at or past the window end.
        evaluate: Shaping function mapping ``t`` in [0, 1) to a value.

    Returns:
        A full-length curve of quantized samples.
    """
    curve: list[int] = []
    for frame in frame_range():
        pos = window_position(frame, start_frame, end_frame)
        if pos == BEFORE:
            curve.append(quantize(before))
        elif pos == AFTER:
            curve.append(quantize(after))
        else:
            curve.append(quantize(evaluate(pos)))
    return curve


def safe_pow(base: float, exponent: float) -> float:
    """Float power returning ``inf`` where the operation overflows or divides by zero.

    Example:
        >>> safe_pow(0.5, 2.0)
        0.25
        >>> safe_pow(0.0, -1.0)
        inf
    """
    try:
        return float(base**exponent)
    except (OverflowError, ZeroDivisionError):
        return math.inf
