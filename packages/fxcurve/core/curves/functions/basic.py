"""Basic curve generators."""

from __future__ import annotations

from fxcurve.core.curves.models import CURVE_LENGTH, Curve
from fxcurve.core.curves.sampling import quantize


def generate_constant(value: float, **kwargs) -> Curve:
    """Generate a constant (flat) curve.

    The frame window does not apply: every sample holds the same value.

    Args:
        value: Constant value (floored, clamped to [0, 255]).
        **kwargs: Ignored parameters (e.g. a timing window), for compatibility.

    Returns:
        A 160-sample curve.

    Example:
        >>> generate_constant(128)[:3]
        [128, 128, 128]
    """
    return [quantize(value)] * CURVE_LENGTH
