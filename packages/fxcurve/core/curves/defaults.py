"""Default parameters for curve generation.

These match the initial state of the effect editor's generator controls.
Defined separately from the library to avoid circular imports.
"""

from fxcurve.core.curves.models import CURVE_LENGTH

DEFAULT_WINDOW_PARAMS = {
    "start_frame": 0,
    "end_frame": CURVE_LENGTH,
}

# Start/end families (linear, easing, exponential)
DEFAULT_RAMP_PARAMS = DEFAULT_WINDOW_PARAMS | {
    "start_val": 0,
    "end_val": 255,
}

DEFAULT_EASE_PARAMS = DEFAULT_RAMP_PARAMS | {"power": 2.0}

DEFAULT_EXPONENTIAL_PARAMS = DEFAULT_RAMP_PARAMS | {"strength": 10}

# Oscillating families
DEFAULT_SPAN_PARAMS = DEFAULT_WINDOW_PARAMS | {
    "min_val": 0,
    "max_val": 255,
}

DEFAULT_WAVE_PARAMS = DEFAULT_SPAN_PARAMS | {
    "cycles": 1.0,
    "phase": 0.0,
}

DEFAULT_SAWTOOTH_PARAMS = DEFAULT_SPAN_PARAMS | {"teeth": 1}

DEFAULT_PULSE_PARAMS = DEFAULT_WINDOW_PARAMS | {
    "low_val": 0,
    "high_val": 255,
    "pulses": 1,
    "duty_cycle": 0.5,
}

DEFAULT_CONSTANT_PARAMS = {"value": 0}
