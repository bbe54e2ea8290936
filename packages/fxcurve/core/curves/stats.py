"""Curve statistics."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict

from fxcurve.core.curves.models import CURVE_LENGTH


class CurveStats(BaseModel):
    """Summary statistics over a full curve.

    Attributes:
        min: Lowest sample.
        max: Highest sample.
        avg: Mean sample value.
        range: max - min.
        start: Sample at frame 0.
        end: Sample at the last frame.
    """

    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    avg: float
    range: int
    start: int
    end: int

    @classmethod
    def from_curve(cls, curve: Sequence[int]) -> CurveStats:
        """Compute statistics for a curve.

        Raises:
            ValueError: If the curve is shorter than 160 samples.
        """
        if len(curve) < CURVE_LENGTH:
            raise ValueError(f"curve must have {CURVE_LENGTH} samples, got {len(curve)}")

        values = np.asarray(curve[:CURVE_LENGTH], dtype=np.int64)
        lo = int(values.min())
        hi = int(values.max())
        return cls(
            min=lo,
            max=hi,
            avg=float(values.mean()),
            range=hi - lo,
            start=int(values[0]),
            end=int(values[-1]),
        )

    def summary(self) -> str:
        """One-line summary as shown under the curve editor."""
        return (
            f"Stats: min={self.min}  max={self.max}  avg={self.avg:.1f}  "
            f"range={self.range}  start={self.start}  end={self.end}"
        )
