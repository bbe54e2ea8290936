"""Tests for start/end curve generators."""

from __future__ import annotations

import pytest

from fxcurve.core.curves.functions.easing import (
    generate_ease_in,
    generate_ease_out,
    generate_exponential_in,
    generate_exponential_out,
    generate_linear,
    generate_s_curve,
)
from fxcurve.core.curves.models import CURVE_LENGTH

START_END_GENERATORS = [
    generate_linear,
    generate_ease_in,
    generate_ease_out,
    generate_s_curve,
    generate_exponential_in,
    generate_exponential_out,
]


class TestLinear:
    """Tests for generate_linear."""

    def test_full_window_ramp(self) -> None:
        """A full-window ramp floors 255 * i / 160."""
        curve = generate_linear(0, 160, 0, 255)
        assert curve[0] == 0
        assert curve[80] == 127
        assert curve[159] == 253

    def test_ramp_below_unit_slope_floors(self) -> None:
        """Values 0-159 over 160 frames floor to i - 1 past frame 0."""
        curve = generate_linear(0, 160, 0, 159)
        assert curve[0] == 0
        assert curve[1] == 0
        assert curve[80] == 79
        assert curve[159] == 158

    def test_unit_slope_ramp_is_exact(self) -> None:
        """Window 0-128 with values 0-128 gives sample[i] == i, then holds 128."""
        curve = generate_linear(0, 128, 0, 128)
        assert curve[:128] == list(range(128))
        assert curve[128:] == [128] * 32

    def test_holds_outside_window(self) -> None:
        """Holds start_val before the window and end_val from end_frame on."""
        curve = generate_linear(20, 80, 50, 200)
        assert curve[:20] == [50] * 20
        assert curve[20] == 50
        assert curve[80:] == [200] * 80

    def test_descending_ramp(self) -> None:
        """A ramp from 255 down to 0 decreases monotonically."""
        curve = generate_linear(0, 160, 255, 0)
        assert curve[0] == 255
        assert all(a >= b for a, b in zip(curve, curve[1:], strict=False))

    def test_values_clamped_before_interpolation(self) -> None:
        """Out-of-range values clamp to [0, 255] before the ramp is built."""
        assert generate_linear(0, 160, -100, 400) == generate_linear(0, 160, 0, 255)


class TestDegenerateWindow:
    """Windows where end_frame <= start_frame."""

    def test_zero_width_window_is_a_step(self) -> None:
        """start == end gives a step from start_val to end_val at that frame."""
        curve = generate_linear(50, 50, 0, 255)
        assert curve[:50] == [0] * 50
        assert curve[50:] == [255] * 110

    def test_inverted_window_steps_at_start(self) -> None:
        """end < start holds start_val until start_frame, then end_val."""
        curve = generate_linear(100, 50, 0, 255)
        assert curve[:100] == [0] * 100
        assert curve[100:] == [255] * 60

    @pytest.mark.parametrize("generator", START_END_GENERATORS)
    def test_degenerate_window_never_raises(self, generator) -> None:
        """Every start/end family handles an empty window."""
        curve = generator(80, 80, 10, 20)
        assert curve[79] == 10
        assert curve[80] == 20


class TestOutOfRangeWindow:
    """Windows lying wholly outside frames 0-159."""

    @pytest.mark.parametrize("generator", START_END_GENERATORS)
    @pytest.mark.parametrize("window", [(200, 300), (160, 161), (1e9, float("inf"))])
    def test_window_past_last_frame_holds_start(self, generator, window) -> None:
        """Every frame precedes the window, so the curve is all start_val."""
        start_frame, end_frame = window
        assert generator(start_frame, end_frame, 7, 99) == [7] * CURVE_LENGTH

    @pytest.mark.parametrize("generator", START_END_GENERATORS)
    @pytest.mark.parametrize("window", [(-300, -200), (-10, 0), (float("-inf"), -1)])
    def test_negative_window_holds_end(self, generator, window) -> None:
        """Every frame is at or past the window end, so the curve is all end_val."""
        start_frame, end_frame = window
        assert generator(start_frame, end_frame, 7, 99) == [99] * CURVE_LENGTH


class TestEasing:
    """Tests for power-based easing."""

    def test_ease_in_midpoint(self) -> None:
        """Quadratic ease-in is at a quarter of the range at the midpoint."""
        assert generate_ease_in(0, 160, 0, 255, power=2)[80] == 63

    def test_ease_out_midpoint(self) -> None:
        """Quadratic ease-out is at three quarters of the range at the midpoint."""
        assert generate_ease_out(0, 160, 0, 255, power=2)[80] == 191

    def test_ease_in_power_one_is_linear(self) -> None:
        """power=1 reduces ease-in to a linear ramp."""
        assert generate_ease_in(0, 160, 0, 255, power=1) == generate_linear(0, 160, 0, 255)

    def test_s_curve_shape(self) -> None:
        """S-curve is slow at the ends and crosses the middle at the midpoint."""
        curve = generate_s_curve(0, 160, 0, 255, power=2)
        assert curve[40] == 31
        assert curve[80] == 127
        assert curve[120] == 223

    def test_ease_in_below_linear(self) -> None:
        """Ease-in stays at or below the linear ramp."""
        eased = generate_ease_in(0, 160, 0, 255)
        linear = generate_linear(0, 160, 0, 255)
        assert all(e <= lin for e, lin in zip(eased, linear, strict=True))


class TestExponential:
    """Tests for exponential transitions."""

    def test_exponential_in_starts_exactly(self) -> None:
        """The first frame of the window lands on start_val."""
        curve = generate_exponential_in(10, 100, 37, 200, strength=1)
        assert curve[10] == 37
        assert curve[100:] == [200] * 60

    def test_exponential_out_ends_exactly(self) -> None:
        """Frames from end_frame on hold end_val exactly."""
        curve = generate_exponential_out(10, 100, 37, 200, strength=1)
        assert curve[10] == 37
        assert curve[100] == 200

    def test_exponential_in_slow_start(self) -> None:
        """Default strength keeps the first half near start_val."""
        curve = generate_exponential_in(0, 160, 0, 255)
        assert curve[80] < 10

    def test_exponential_out_fast_start(self) -> None:
        """Default strength reaches most of the range by the midpoint."""
        curve = generate_exponential_out(0, 160, 0, 255)
        assert curve[80] > 245


class TestTotality:
    """Exotic shape parameters never raise and stay in range."""

    @pytest.mark.parametrize("power", [0.0, -3.0, 1e6, float("inf"), float("nan")])
    def test_extreme_power(self, power: float) -> None:
        """Any power yields a valid curve."""
        for generator in (generate_ease_in, generate_ease_out, generate_s_curve):
            curve = generator(0, 160, 0, 255, power=power)
            assert len(curve) == CURVE_LENGTH
            assert all(0 <= v <= 255 for v in curve)

    @pytest.mark.parametrize("strength", [0.0, -50.0, 5000.0])
    def test_extreme_strength(self, strength: float) -> None:
        """Any strength yields a valid curve."""
        for generator in (generate_exponential_in, generate_exponential_out):
            curve = generator(0, 160, 0, 255, strength=strength)
            assert len(curve) == CURVE_LENGTH
            assert all(0 <= v <= 255 for v in curve)

    def test_fractional_window(self) -> None:
        """Fractional frame bounds are accepted."""
        curve = generate_linear(10.5, 20.25, 0, 255)
        assert curve[10] == 0
        assert curve[21] == 255
