"""Curve library for registering built-in curve generators."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from fxcurve.core.curves.defaults import (
    DEFAULT_CONSTANT_PARAMS,
    DEFAULT_EASE_PARAMS,
    DEFAULT_EXPONENTIAL_PARAMS,
    DEFAULT_PULSE_PARAMS,
    DEFAULT_RAMP_PARAMS,
    DEFAULT_SAWTOOTH_PARAMS,
    DEFAULT_WAVE_PARAMS,
)
from fxcurve.core.curves.functions import (
    generate_constant,
    generate_ease_in,
    generate_ease_out,
    generate_exponential_in,
    generate_exponential_out,
    generate_linear,
    generate_pulse,
    generate_s_curve,
    generate_sawtooth,
    generate_sine_wave,
    generate_triangle_wave,
)
from fxcurve.core.curves.models import Curve
from fxcurve.core.curves.registry import CurveGeneratorSpec, CurveRegistry


class CurveLibrary(str, Enum):
    """Identifiers for built-in curve families."""

    # Start/end transitions
    LINEAR = "linear"
    EASE_IN = "ease_in"  # t^power
    EASE_OUT = "ease_out"  # 1 - (1-t)^power
    S_CURVE = "s_curve"  # Ease-in-out

    # Exponential transitions
    EXPONENTIAL_IN = "exponential_in"  # 2^(strength*(t-1))
    EXPONENTIAL_OUT = "exponential_out"  # 1 - 2^(-strength*t)

    # Oscillating
    SINE_WAVE = "sine_wave"
    TRIANGLE_WAVE = "triangle_wave"
    SAWTOOTH = "sawtooth"  # Repeating ramps
    PULSE = "pulse"  # Square wave with duty cycle

    # Flat
    CONSTANT = "constant"

    @property
    def label(self) -> str:
        """Human-readable family name as shown in the effect editor."""
        return _LABELS[self]


_LABELS: dict[CurveLibrary, str] = {
    CurveLibrary.LINEAR: "Linear",
    CurveLibrary.EASE_IN: "Ease In",
    CurveLibrary.EASE_OUT: "Ease Out",
    CurveLibrary.S_CURVE: "S-Curve",
    CurveLibrary.EXPONENTIAL_IN: "Exponential In",
    CurveLibrary.EXPONENTIAL_OUT: "Exponential Out",
    CurveLibrary.SINE_WAVE: "Sine Wave",
    CurveLibrary.TRIANGLE_WAVE: "Triangle Wave",
    CurveLibrary.SAWTOOTH: "Sawtooth",
    CurveLibrary.PULSE: "Pulse",
    CurveLibrary.CONSTANT: "Constant",
}


def family_from_label(label: str) -> CurveLibrary:
    """Look up a family by its editor label (e.g. "S-Curve").

    Raises:
        ValueError: If no family has that label.
    """
    for family, family_label in _LABELS.items():
        if family_label == label:
            return family
    raise ValueError(f"Unknown curve family label '{label}'")


def build_default_registry() -> CurveRegistry:
    """Construct a registry containing all built-in curve families."""
    registry = CurveRegistry()

    def register(
        curve_id: CurveLibrary,
        generator: Callable[..., Curve],
        params: dict[str, Any],
        windowed: bool = True,
    ) -> None:
        registry.register(
            CurveGeneratorSpec(
                curve_id=curve_id.value,
                generator=generator,
                label=curve_id.label,
                default_params=params,
                windowed=windowed,
            )
        )

    # Start/end transitions
    register(CurveLibrary.LINEAR, generate_linear, DEFAULT_RAMP_PARAMS)
    register(CurveLibrary.EASE_IN, generate_ease_in, DEFAULT_EASE_PARAMS)
    register(CurveLibrary.EASE_OUT, generate_ease_out, DEFAULT_EASE_PARAMS)
    register(CurveLibrary.S_CURVE, generate_s_curve, DEFAULT_EASE_PARAMS)
    register(CurveLibrary.EXPONENTIAL_IN, generate_exponential_in, DEFAULT_EXPONENTIAL_PARAMS)
    register(CurveLibrary.EXPONENTIAL_OUT, generate_exponential_out, DEFAULT_EXPONENTIAL_PARAMS)

    # Oscillating
    register(CurveLibrary.SINE_WAVE, generate_sine_wave, DEFAULT_WAVE_PARAMS)
    register(CurveLibrary.TRIANGLE_WAVE, generate_triangle_wave, DEFAULT_WAVE_PARAMS)
    register(CurveLibrary.SAWTOOTH, generate_sawtooth, DEFAULT_SAWTOOTH_PARAMS)
    register(CurveLibrary.PULSE, generate_pulse, DEFAULT_PULSE_PARAMS)

    # Flat
    register(CurveLibrary.CONSTANT, generate_constant, DEFAULT_CONSTANT_PARAMS, windowed=False)

    return registry
