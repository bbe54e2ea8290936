"""Curve schema models for the effect curve engine.

This module defines the core curve primitives used throughout the package:
- Curve: A plain list of 160 integer samples in [0, 255]
- AnimCurve: Validated, immutable wrapper used at I/O boundaries
- GeneratorParams: The full parameter set a caller collects for a generator

Generators and modifiers return plain ``Curve`` lists. The pydantic models
validate data coming in from files, configs and the command line.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

CURVE_LENGTH = 160
SAMPLE_MIN = 0
SAMPLE_MAX = 255

# One sample per animation frame, index 0 = frame 0.
Curve = list[int]


class AnimCurve(BaseModel):
    """A validated animation curve.

    Holds exactly ``CURVE_LENGTH`` samples, each in [0, 255].
    This model is immutable (frozen=True).

    Attributes:
        samples: Per-frame sample values.

    Example:
        >>> curve = AnimCurve(samples=[128] * 160)
        >>> curve.samples[0]
        128
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    samples: list[int] = Field(..., min_length=CURVE_LENGTH, max_length=CURVE_LENGTH)

    @field_validator("samples")
    @classmethod
    def _validate_sample_range(cls, samples: list[int]) -> list[int]:
        """Validate that every sample fits in one byte."""
        for i, v in enumerate(samples):
            if not SAMPLE_MIN <= v <= SAMPLE_MAX:
                raise ValueError(f"sample {i} out of range [0, 255]: {v}")
        return samples

    def to_bytes(self) -> bytes:
        """Return the curve as its 160-byte wire form."""
        return bytes(self.samples)

    @classmethod
    def from_bytes(cls, data: bytes) -> AnimCurve:
        """Build a curve from exactly 160 bytes."""
        return cls(samples=list(data))

    def as_list(self) -> Curve:
        """Return a mutable copy of the samples."""
        return list(self.samples)


class GeneratorParams(BaseModel):
    """Parameter set for curve generation.

    Mirrors the controls of the effect editor: a timing window, a pair of
    values whose meaning depends on the family (start/end, min/max, low/high,
    or a single constant value) and the shape parameters. Nothing here is
    range-checked; generators clamp values themselves and leave shape
    parameters as given.

    Attributes:
        start_frame: First frame of the active window.
        end_frame: Frame at which the window ends (exclusive).
        start_val: Start value (or min/low/constant value, by family).
        end_val: End value (or max/high value, by family).
        power: Exponent for ease curves.
        strength: Steepness for exponential curves.
        cycles: Wave repetitions for sine and triangle.
        phase: Fractional phase offset for sine and triangle.
        teeth: Ramp repetitions for sawtooth.
        pulses: Pulse repetitions for pulse.
        duty_cycle: Fraction of each pulse spent high.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_frame: float = 0
    end_frame: float = CURVE_LENGTH
    start_val: float = SAMPLE_MIN
    end_val: float = SAMPLE_MAX
    power: float = 2.0
    strength: float = 10.0
    cycles: float = 1.0
    phase: float = 0.0
    teeth: float = 1.0
    pulses: float = 1.0
    duty_cycle: float = 0.5

    def for_family(self, family: str) -> dict[str, Any]:
        """Map this parameter set onto a family's keyword arguments.

        Args:
            family: Family identifier (e.g. "linear", "sine_wave").

        Returns:
            Keyword arguments accepted by the family's generator.

        Raises:
            ValueError: If the family is unknown.
        """
        window = {"start_frame": self.start_frame, "end_frame": self.end_frame}
        ramp = {**window, "start_val": self.start_val, "end_val": self.end_val}
        span = {**window, "min_val": self.start_val, "max_val": self.end_val}

        mapping: dict[str, dict[str, Any]] = {
            "linear": ramp,
            "ease_in": {**ramp, "power": self.power},
            "ease_out": {**ramp, "power": self.power},
            "s_curve": {**ramp, "power": self.power},
            "exponential_in": {**ramp, "strength": self.strength},
            "exponential_out": {**ramp, "strength": self.strength},
            "sine_wave": {**span, "cycles": self.cycles, "phase": self.phase},
            "triangle_wave": {**span, "cycles": self.cycles, "phase": self.phase},
            "sawtooth": {**span, "teeth": self.teeth},
            "pulse": {
                **window,
                "low_val": self.start_val,
                "high_val": self.end_val,
                "pulses": self.pulses,
                "duty_cycle": self.duty_cycle,
            },
            "constant": {"value": self.start_val},
        }
        try:
            return mapping[getattr(family, "value", family)]
        except KeyError as exc:
            raise ValueError(f"Unknown curve family '{family}'") from exc
