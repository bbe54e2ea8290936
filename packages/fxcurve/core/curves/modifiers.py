"""Curve manipulation operations.

Every operation reads an existing curve and returns a brand-new full-length
curve; inputs are never mutated. Samples missing from a short input, or
stored as ``None``, read as 0.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from fxcurve.core.curves.models import CURVE_LENGTH, SAMPLE_MAX, Curve
from fxcurve.core.curves.sampling import frame_range, quantize


class CurveModifier(str, Enum):
    """Curve manipulation operations.

    Applied to existing curves to create variations without regenerating them.
    Parameterless modifiers can be chained with :func:`apply_modifiers`.
    """

    INVERT = "invert"  # Flip values vertically (255 - v)
    REVERSE = "reverse"  # Flip curve horizontally (reverse time)
    SCALE = "scale"  # Stretch values around a midpoint
    SHIFT = "shift"  # Offset all values
    COPY = "copy"  # Independent duplicate


def _sample_at(curve: Sequence[int | None], index: int) -> int:
    if index >= len(curve):
        return 0
    value = curve[index]
    return 0 if value is None else value


def invert_curve(curve: Sequence[int | None]) -> Curve:
    """Invert curve values (255 - v)."""
    return [SAMPLE_MAX - _sample_at(curve, i) for i in frame_range()]


def reverse_curve(curve: Sequence[int | None]) -> Curve:
    """Reverse curve in time: output frame i reads input frame 159 - i."""
    return [_sample_at(curve, CURVE_LENGTH - 1 - i) for i in frame_range()]


def scale_curve(curve: Sequence[int | None], factor: float, midpoint: float = 128) -> Curve:
    """Scale curve values around a midpoint.

    Formula:
        v' = midpoint + (v - midpoint) * factor, floored and clamped to [0, 255]

    Args:
        curve: Input curve.
        factor: Scale factor (1.0 = unchanged, 0.0 = flat at midpoint).
        midpoint: Value that stays fixed.

    Returns:
        A new 160-sample curve.

    Example:
        >>> scale_curve([100] * 160, 2.0)[0]
        72
    """
    return [
        quantize(midpoint + (_sample_at(curve, i) - midpoint) * factor) for i in frame_range()
    ]


def shift_curve(curve: Sequence[int | None], offset: float) -> Curve:
    """Shift all values by ``offset``, clamped to [0, 255].

    Integral offsets on integral curves never need flooring; fractional
    offsets are floored so the result stays integral.
    """
    return [quantize(_sample_at(curve, i) + offset) for i in frame_range()]


def copy_curve(curve: Sequence[int | None]) -> Curve:
    """Return an independent full-length copy of a curve."""
    return [_sample_at(curve, i) for i in frame_range()]


def apply_modifiers(
    curve: Sequence[int | None], modifiers: Iterable[CurveModifier | str]
) -> Curve:
    """Apply parameterless modifiers in order.

    Args:
        curve: Input curve.
        modifiers: Sequence of ``invert``, ``reverse`` or ``copy``.

    Returns:
        A new curve with every modifier applied.

    Raises:
        ValueError: If a modifier is unknown or needs parameters.
    """
    result = copy_curve(curve)
    for modifier in modifiers:
        try:
            name = CurveModifier(modifier)
        except ValueError as exc:
            raise ValueError(f"Unknown curve modifier '{modifier}'") from exc

        if name is CurveModifier.INVERT:
            result = invert_curve(result)
        elif name is CurveModifier.REVERSE:
            result = reverse_curve(result)
        elif name is CurveModifier.COPY:
            result = copy_curve(result)
        else:
            raise ValueError(f"Curve modifier '{name.value}' requires parameters")
    return result
