"""Oscillating curve generators: sine, triangle, sawtooth and pulse.

Waves run between ``min_val`` and ``max_val`` inside the window. Sine and
triangle waves hold the wave's own value at the extrapolated phase outside
the window (``phase`` before, ``cycles + phase`` after), so the settle value
depends on where the wave is, not on the value range. Sawtooth holds
``min_val`` before and ``max_val`` after. Pulse holds ``low_val`` on both
sides.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from fxcurve.core.curves.models import Curve
from fxcurve.core.curves.sampling import clamp_value, quantize, sample_window
from fxcurve.core.utils.math import clamp


def _sine_unit(cycle_pos: float) -> float:
    # math.sin raises on infinities; NaN quantizes to 0 downstream
    angle = cycle_pos * 2 * math.pi
    if math.isinf(angle):
        return math.nan
    return math.sin(angle)


def _triangle_unit(cycle_pos: float) -> float:
    """Unit triangle over one cycle: 0 -> 1 -> -1 -> 0."""
    pos = cycle_pos % 1
    if pos < 0.25:
        return pos * 4
    if pos < 0.75:
        return 2 - pos * 4
    return pos * 4 - 4


def _sample_wave(
    start_frame: float,
    end_frame: float,
    min_val: float,
    max_val: float,
    cycles: float,
    phase: float,
    shape: Callable[[float], float],
) -> Curve:
    min_val = clamp_value(min_val)
    max_val = clamp_value(max_val)

    amplitude = (max_val - min_val) / 2
    offset = (max_val + min_val) / 2

    def wave_value(wave_t: float) -> float:
        return offset + amplitude * shape(wave_t)

    return sample_window(
        start_frame,
        end_frame,
        before=wave_value(phase),
        after=wave_value(cycles + phase),
        evaluate=lambda t: wave_value(t * cycles + phase),
    )


def generate_sine_wave(
    start_frame: float,
    end_frame: float,
    min_val: float,
    max_val: float,
    cycles: float = 1,
    phase: float = 0,
) -> Curve:
    """Generate a sine wave oscillating between ``min_val`` and ``max_val``.

    Formula:
        v(t) = offset + amplitude * sin((t * cycles + phase) * 2π)

    where amplitude = (max - min) / 2 and offset = (max + min) / 2.

    Args:
        start_frame: First frame of the wave.
        end_frame: Frame at which the wave ends (exclusive).
        min_val: Trough value (clamped to [0, 255]).
        max_val: Peak value (clamped to [0, 255]).
        cycles: Number of complete cycles within the window.
        phase: Phase offset as a fraction of a cycle (1.0 = full cycle).

    Returns:
        A 160-sample curve.

    Example:
        >>> curve = generate_sine_wave(0, 160, 0, 255)
        >>> curve[0], curve[40], curve[120]
        (127, 255, 0)
    """
    return _sample_wave(
        start_frame,
        end_frame,
        min_val,
        max_val,
        cycles,
        phase,
        _sine_unit,
    )


def generate_triangle_wave(
    start_frame: float,
    end_frame: float,
    min_val: float,
    max_val: float,
    cycles: float = 1,
    phase: float = 0,
) -> Curve:
    """Generate a triangle wave oscillating between ``min_val`` and ``max_val``.

    Each cycle starts at the midpoint, rises to the peak over the first
    quarter, falls to the trough over the middle half and returns to the
    midpoint over the last quarter.
    """
    return _sample_wave(start_frame, end_frame, min_val, max_val, cycles, phase, _triangle_unit)


def generate_sawtooth(
    start_frame: float,
    end_frame: float,
    min_val: float,
    max_val: float,
    teeth: float = 1,
) -> Curve:
    """Generate repeating ramps from ``min_val`` to ``max_val``.

    Formula:
        v(t) = min + (max - min) * ((t * teeth) mod 1)

    Args:
        start_frame: First frame of the first ramp.
        end_frame: Frame at which the ramps end (exclusive).
        min_val: Ramp start value, held before the window.
        max_val: Ramp end value, held from ``end_frame`` on.
        teeth: Number of complete ramps within the window.

    Returns:
        A 160-sample curve.
    """
    min_val = clamp_value(min_val)
    max_val = clamp_value(max_val)

    return sample_window(
        start_frame,
        end_frame,
        before=min_val,
        after=max_val,
        evaluate=lambda t: min_val + (max_val - min_val) * ((t * teeth) % 1),
    )


def generate_pulse(
    start_frame: float,
    end_frame: float,
    low_val: float,
    high_val: float,
    pulses: float = 1,
    duty_cycle: float = 0.5,
) -> Curve:
    """Generate a pulse (square) wave.

    Inside the window each pulse is high for the first ``duty_cycle`` fraction
    of its period and low for the rest. Outside the window the curve holds
    ``low_val`` on both sides, even after a window that ended high.

    Args:
        start_frame: First frame of the first pulse.
        end_frame: Frame at which the pulses end (exclusive).
        low_val: Low value (floored, clamped to [0, 255]).
        high_val: High value (floored, clamped to [0, 255]).
        pulses: Number of complete pulses within the window.
        duty_cycle: Fraction of each pulse that is high (clamped to [0, 1]).

    Returns:
        A 160-sample curve.

    Example:
        >>> curve = generate_pulse(0, 160, 10, 200)
        >>> curve[79], curve[80]
        (200, 10)
    """
    low = quantize(low_val)
    high = quantize(high_val)
    duty_cycle = clamp(duty_cycle, 0.0, 1.0)

    return sample_window(
        start_frame,
        end_frame,
        before=low,
        after=low,
        evaluate=lambda t: high if (t * pulses) % 1 < duty_cycle else low,
    )
