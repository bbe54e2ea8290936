"""Start/end curve generators: linear ramps, easing and exponential curves.

Every generator here interpolates from ``start_val`` to ``end_val`` inside the
window ``[start_frame, end_frame)``, holds ``start_val`` ahead of the window
and ``end_val`` at and past its end. Values are clamped to [0, 255] before
interpolation and each sample is floored.
"""

from __future__ import annotations

from collections.abc import Callable

from fxcurve.core.curves.models import Curve
from fxcurve.core.curves.sampling import clamp_value, safe_pow, sample_window


def _sample_eased(
    start_frame: float,
    end_frame: float,
    start_val: float,
    end_val: float,
    easing: Callable[[float], float],
) -> Curve:
    start_val = clamp_value(start_val)
    end_val = clamp_value(end_val)
    delta = end_val - start_val

    return sample_window(
        start_frame,
        end_frame,
        before=start_val,
        after=end_val,
        evaluate=lambda t: start_val + delta * easing(t),
    )


def generate_linear(
    start_frame: float,
    end_frame: float,
    start_val: float,
    end_val: float,
) -> Curve:
    """Generate a linear ramp from ``start_val`` to ``end_val``.

    Args:
        start_frame: First frame of the ramp.
        end_frame: Frame at which the ramp ends (exclusive).
        start_val: Value at the start of the ramp (clamped to [0, 255]).
        end_val: Value held from ``end_frame`` on (clamped to [0, 255]).

    Returns:
        A 160-sample curve.

    Example:
        >>> curve = generate_linear(50, 50, 0, 255)
        >>> curve[49], curve[50]
        (0, 255)
    """
    return _sample_eased(start_frame, end_frame, start_val, end_val, lambda t: t)


def generate_ease_in(
    start_frame: float,
    end_frame: float,
    start_val: float,
    end_val: float,
    power: float = 2.0,
) -> Curve:
    """Generate an ease-in curve: slow start, accelerating toward the end.

    Formula:
        v(t) = start + (end - start) * t^power

    Args:
        start_frame: First frame of the transition.
        end_frame: Frame at which the transition ends (exclusive).
        start_val: Start value (clamped to [0, 255]).
        end_val: End value (clamped to [0, 255]).
        power: Exponent (1 = linear, 2 = quadratic, 3 = cubic, ...).

    Returns:
        A 160-sample curve.
    """
    return _sample_eased(
        start_frame, end_frame, start_val, end_val, lambda t: safe_pow(t, power)
    )


def generate_ease_out(
    start_frame: float,
    end_frame: float,
    start_val: float,
    end_val: float,
    power: float = 2.0,
) -> Curve:
    """Generate an ease-out curve: fast start, decelerating toward the end.

    Formula:
        v(t) = start + (end - start) * (1 - (1 - t)^power)
    """
    return _sample_eased(
        start_frame, end_frame, start_val, end_val, lambda t: 1 - safe_pow(1 - t, power)
    )


def _s_curve_easing(power: float) -> Callable[[float], float]:
    def easing(t: float) -> float:
        if t < 0.5:
            return safe_pow(2, power - 1) * safe_pow(t, power)
        return 1 - safe_pow(-2 * t + 2, power) / 2

    return easing


def generate_s_curve(
    start_frame: float,
    end_frame: float,
    start_val: float,
    end_val: float,
    power: float = 2.0,
) -> Curve:
    """Generate an S-curve (ease-in-out): slow start and end, fast middle.

    Formula:
        eased(t) = 2^(power-1) * t^power            for t < 0.5
        eased(t) = 1 - (-2t + 2)^power / 2          otherwise
    """
    return _sample_eased(start_frame, end_frame, start_val, end_val, _s_curve_easing(power))


def generate_exponential_in(
    start_frame: float,
    end_frame: float,
    start_val: float,
    end_val: float,
    strength: float = 10,
) -> Curve:
    """Generate an exponential ease-in: very slow start, explosive end.

    Formula:
        eased(t) = 2^(strength * (t - 1)), with eased(0) = 0 exactly

    The first frame of the window therefore lands exactly on ``start_val``.
    """

    def easing(t: float) -> float:
        if t == 0:
            return 0.0
        return safe_pow(2, strength * (t - 1))

    return _sample_eased(start_frame, end_frame, start_val, end_val, easing)


def generate_exponential_out(
    start_frame: float,
    end_frame: float,
    start_val: float,
    end_val: float,
    strength: float = 10,
) -> Curve:
    """Generate an exponential ease-out: explosive start, very slow end.

    Formula:
        eased(t) = 1 - 2^(-strength * t), with eased(1) = 1 exactly
    """

    def easing(t: float) -> float:
        if t == 1:
            return 1.0
        return 1 - safe_pow(2, -strength * t)

    return _sample_eased(start_frame, end_frame, start_val, end_val, easing)
