"""Curve generator functions, one per family."""

from fxcurve.core.curves.functions.basic import generate_constant
from fxcurve.core.curves.functions.easing import (
    generate_ease_in,
    generate_ease_out,
    generate_exponential_in,
    generate_exponential_out,
    generate_linear,
    generate_s_curve,
)
from fxcurve.core.curves.functions.waves import (
    generate_pulse,
    generate_sawtooth,
    generate_sine_wave,
    generate_triangle_wave,
)

__all__ = [
    "generate_constant",
    "generate_ease_in",
    "generate_ease_out",
    "generate_exponential_in",
    "generate_exponential_out",
    "generate_linear",
    "generate_pulse",
    "generate_s_curve",
    "generate_sawtooth",
    "generate_sine_wave",
    "generate_triangle_wave",
]
