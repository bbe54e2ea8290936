"""Tests for curve models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fxcurve.core.curves.library import CurveLibrary
from fxcurve.core.curves.models import CURVE_LENGTH, AnimCurve, GeneratorParams


class TestAnimCurve:
    """Tests for AnimCurve."""

    def test_valid_curve(self) -> None:
        curve = AnimCurve(samples=[128] * CURVE_LENGTH)
        assert curve.samples[0] == 128

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AnimCurve(samples=[0] * 10)

    def test_out_of_range_rejected(self) -> None:
        samples = [0] * CURVE_LENGTH
        samples[5] = 256
        with pytest.raises(ValidationError, match="sample 5 out of range"):
            AnimCurve(samples=samples)

    def test_bytes_round_trip(self) -> None:
        samples = [i % 256 for i in range(CURVE_LENGTH)]
        data = AnimCurve(samples=samples).to_bytes()
        assert len(data) == CURVE_LENGTH
        assert AnimCurve.from_bytes(data).as_list() == samples

    def test_frozen(self) -> None:
        curve = AnimCurve(samples=[0] * CURVE_LENGTH)
        with pytest.raises(ValidationError):
            curve.samples = [1] * CURVE_LENGTH  # type: ignore[misc]


class TestGeneratorParams:
    """Tests for GeneratorParams."""

    def test_editor_defaults(self) -> None:
        params = GeneratorParams()
        assert params.start_frame == 0
        assert params.end_frame == CURVE_LENGTH
        assert params.start_val == 0
        assert params.end_val == 255
        assert params.power == 2.0
        assert params.duty_cycle == 0.5

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            GeneratorParams(wobble=1)  # type: ignore[call-arg]

    def test_for_family_ramp(self) -> None:
        kwargs = GeneratorParams(start_val=10, end_val=20).for_family("ease_in")
        assert kwargs == {
            "start_frame": 0,
            "end_frame": CURVE_LENGTH,
            "start_val": 10,
            "end_val": 20,
            "power": 2.0,
        }

    def test_for_family_wave_uses_min_max(self) -> None:
        kwargs = GeneratorParams(start_val=10, end_val=20).for_family(CurveLibrary.SINE_WAVE)
        assert kwargs["min_val"] == 10
        assert kwargs["max_val"] == 20
        assert "start_val" not in kwargs

    def test_for_family_pulse_uses_low_high(self) -> None:
        kwargs = GeneratorParams(start_val=5, end_val=250).for_family("pulse")
        assert kwargs["low_val"] == 5
        assert kwargs["high_val"] == 250

    def test_for_family_constant(self) -> None:
        assert GeneratorParams(start_val=77).for_family("constant") == {"value": 77}

    def test_unknown_family(self) -> None:
        with pytest.raises(ValueError, match="Unknown curve family"):
            GeneratorParams().for_family("wobble")
