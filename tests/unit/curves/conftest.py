"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from fxcurve.core.curves.functions import generate_linear
from fxcurve.core.curves.models import CURVE_LENGTH, Curve


@pytest.fixture
def ramp_curve() -> Curve:
    """Full-window linear ramp from 0 to 255."""
    return generate_linear(0, CURVE_LENGTH, 0, 255)


@pytest.fixture
def index_curve() -> Curve:
    """Curve whose sample at frame i is i."""
    return list(range(CURVE_LENGTH))


@pytest.fixture
def flat_zero() -> Curve:
    """All-zero curve."""
    return [0] * CURVE_LENGTH


@pytest.fixture
def flat_max() -> Curve:
    """All-255 curve."""
    return [255] * CURVE_LENGTH
