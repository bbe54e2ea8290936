"""Public entry points for curve generation and manipulation.

``generate`` and ``manipulate`` route a family or operation name to the
matching function. They are the only layer that raises for bad input: an
unknown name is an interface-usage error. The curve functions themselves
resolve every numeric edge case by clamping.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from fxcurve.core.curves.library import CurveLibrary, build_default_registry
from fxcurve.core.curves.models import CURVE_LENGTH, Curve, GeneratorParams
from fxcurve.core.curves.modifiers import (
    CurveModifier,
    copy_curve,
    invert_curve,
    reverse_curve,
    scale_curve,
    shift_curve,
)
from fxcurve.core.curves.presets import resolve_preset
from fxcurve.core.curves.registry import CurveRegistry

logger = logging.getLogger(__name__)

_default_registry: CurveRegistry | None = None

_OPERATIONS: dict[CurveModifier, Callable[..., Curve]] = {
    CurveModifier.INVERT: invert_curve,
    CurveModifier.REVERSE: reverse_curve,
    CurveModifier.SCALE: scale_curve,
    CurveModifier.SHIFT: shift_curve,
    CurveModifier.COPY: copy_curve,
}


def get_default_registry() -> CurveRegistry:
    """Return the shared registry of built-in families (built on first use)."""
    global _default_registry

    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry


def generate(family: CurveLibrary | str, **params: Any) -> Curve:
    """Generate a curve from a named family.

    Args:
        family: Family identifier (e.g. "linear", CurveLibrary.PULSE).
        **params: Family parameters. Omitted ones take the editor defaults
            (window 0-160, values 0-255, power 2, strength 10, one cycle).

    Returns:
        A 160-sample curve.

    Raises:
        ValueError: If the family is unknown.

    Example:
        >>> generate("constant", value=128)[0]
        128
    """
    return get_default_registry().generate(family, **params)


def generate_from_params(family: CurveLibrary | str, params: GeneratorParams) -> Curve:
    """Generate a curve from a full editor parameter set.

    Only the parameters relevant to ``family`` are used.

    Raises:
        ValueError: If the family is unknown.
    """
    return generate(family, **params.for_family(family))


def generate_preset(
    name: str, start_frame: float = 0, end_frame: float = CURVE_LENGTH
) -> Curve:
    """Generate a named preset over a timing window.

    Raises:
        ValueError: If the preset is unknown.
    """
    return resolve_preset(get_default_registry(), name, start_frame, end_frame)


def manipulate(
    operation: CurveModifier | str, curve: Sequence[int | None], **params: Any
) -> Curve:
    """Apply a named manipulation to a curve.

    Args:
        operation: One of "invert", "reverse", "scale", "shift", "copy".
        curve: Input curve (not modified).
        **params: Operation parameters (``factor``/``midpoint`` for scale,
            ``offset`` for shift).

    Returns:
        A new 160-sample curve.

    Raises:
        ValueError: If the operation is unknown.

    Example:
        >>> manipulate("shift", [250] * 160, offset=10)[0]
        255
    """
    try:
        name = CurveModifier(operation)
    except ValueError as exc:
        raise ValueError(f"Unknown curve operation '{operation}'") from exc

    logger.debug("Applying '%s' with %s", name.value, params)
    return _OPERATIONS[name](curve, **params)
