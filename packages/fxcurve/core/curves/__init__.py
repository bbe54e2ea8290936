"""Curve generation and manipulation for 160-frame effect animation curves."""

from fxcurve.core.curves.generator import (
    generate,
    generate_from_params,
    generate_preset,
    get_default_registry,
    manipulate,
)
from fxcurve.core.curves.library import CurveLibrary, build_default_registry
from fxcurve.core.curves.models import CURVE_LENGTH, AnimCurve, Curve, GeneratorParams
from fxcurve.core.curves.modifiers import CurveModifier
from fxcurve.core.curves.presets import CurvePreset

__all__ = [
    "CURVE_LENGTH",
    "AnimCurve",
    "Curve",
    "CurveLibrary",
    "CurveModifier",
    "CurvePreset",
    "GeneratorParams",
    "build_default_registry",
    "generate",
    "generate_from_params",
    "generate_preset",
    "get_default_registry",
    "manipulate",
]
