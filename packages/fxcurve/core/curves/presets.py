"""Built-in curve presets.

Presets are one-click shapes from the effect editor. They pick a family and
its values but reuse the caller's timing window, so "Ramp Up" over frames
20-80 is a linear 0 -> 255 ramp across exactly those frames.
"""

from __future__ import annotations

import logging
from enum import Enum

from fxcurve.core.curves.library import CurveLibrary
from fxcurve.core.curves.models import CURVE_LENGTH, Curve
from fxcurve.core.curves.registry import CurveDefinition, CurveRegistry

logger = logging.getLogger(__name__)


class CurvePreset(str, Enum):
    """Identifiers for built-in presets."""

    RAMP_UP = "ramp_up"
    RAMP_DOWN = "ramp_down"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    S_CURVE = "s_curve"
    SINE = "sine"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"
    PULSE = "pulse"
    FLAT_0 = "flat_0"
    FLAT_128 = "flat_128"
    FLAT_255 = "flat_255"


def _ramp(
    preset: CurvePreset, family: CurveLibrary, start: int, end: int, **extra
) -> CurveDefinition:
    return CurveDefinition(
        curve_id=preset.value,
        base_curve_id=family.value,
        params={"start_val": start, "end_val": end, **extra},
    )


def _flat(preset: CurvePreset, value: int) -> CurveDefinition:
    return CurveDefinition(
        curve_id=preset.value,
        base_curve_id=CurveLibrary.CONSTANT.value,
        params={"value": value},
        description=f"Constant {value}",
    )


PRESETS: dict[CurvePreset, CurveDefinition] = {
    # Row 1: ramps and easing
    CurvePreset.RAMP_UP: _ramp(CurvePreset.RAMP_UP, CurveLibrary.LINEAR, 0, 255),
    CurvePreset.RAMP_DOWN: _ramp(CurvePreset.RAMP_DOWN, CurveLibrary.LINEAR, 255, 0),
    CurvePreset.EASE_IN: _ramp(CurvePreset.EASE_IN, CurveLibrary.EASE_IN, 0, 255, power=2.0),
    CurvePreset.EASE_OUT: _ramp(CurvePreset.EASE_OUT, CurveLibrary.EASE_OUT, 0, 255, power=2.0),
    CurvePreset.S_CURVE: _ramp(CurvePreset.S_CURVE, CurveLibrary.S_CURVE, 0, 255, power=2.0),
    # Row 2: waves and constants
    CurvePreset.SINE: CurveDefinition(
        curve_id=CurvePreset.SINE.value,
        base_curve_id=CurveLibrary.SINE_WAVE.value,
        params={"min_val": 0, "max_val": 255, "cycles": 1.0, "phase": 0.0},
    ),
    CurvePreset.TRIANGLE: CurveDefinition(
        curve_id=CurvePreset.TRIANGLE.value,
        base_curve_id=CurveLibrary.TRIANGLE_WAVE.value,
        params={"min_val": 0, "max_val": 255, "cycles": 1.0, "phase": 0.0},
    ),
    CurvePreset.SAWTOOTH: CurveDefinition(
        curve_id=CurvePreset.SAWTOOTH.value,
        base_curve_id=CurveLibrary.SAWTOOTH.value,
        params={"min_val": 0, "max_val": 255, "teeth": 1},
    ),
    CurvePreset.PULSE: CurveDefinition(
        curve_id=CurvePreset.PULSE.value,
        base_curve_id=CurveLibrary.PULSE.value,
        params={"low_val": 0, "high_val": 255, "pulses": 1, "duty_cycle": 0.5},
    ),
    CurvePreset.FLAT_0: _flat(CurvePreset.FLAT_0, 0),
    CurvePreset.FLAT_128: _flat(CurvePreset.FLAT_128, 128),
    CurvePreset.FLAT_255: _flat(CurvePreset.FLAT_255, 255),
}


def get_preset(name: str) -> CurveDefinition:
    """Look up a preset definition by name.

    Raises:
        ValueError: If the preset is unknown.
    """
    try:
        return PRESETS[CurvePreset(name)]
    except ValueError as exc:
        raise ValueError(f"Unknown curve preset '{name}'") from exc


def resolve_preset(
    registry: CurveRegistry,
    name: str,
    start_frame: float = 0,
    end_frame: float = CURVE_LENGTH,
) -> Curve:
    """Generate a preset over the given timing window.

    Args:
        registry: Registry holding the built-in families.
        name: Preset identifier (e.g. "ramp_up", "flat_128").
        start_frame: First frame of the caller's window.
        end_frame: End of the caller's window (exclusive). Ignored by flat presets.

    Returns:
        A 160-sample curve.

    Raises:
        ValueError: If the preset is unknown.
    """
    definition = get_preset(name)
    logger.debug("Resolving preset '%s' over frames [%s, %s)", name, start_frame, end_frame)
    return registry.resolve(
        definition, overrides={"start_frame": start_frame, "end_frame": end_frame}
    )
