"""Shared utilities for fxcurve."""

from fxcurve.core.utils.json import read_json, write_json
from fxcurve.core.utils.math import clamp

__all__ = [
    "clamp",
    "read_json",
    "write_json",
]
