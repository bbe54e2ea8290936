"""Curve registry and preset resolution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fxcurve.core.curves.models import Curve
from fxcurve.core.curves.modifiers import apply_modifiers
from fxcurve.core.utils.logging import get_logger


@dataclass(frozen=True)
class CurveDefinition:
    """Curve definition or preset."""

    curve_id: str
    base_curve_id: str | None = None
    params: dict[str, Any] | None = None
    modifiers: list[str] | None = None
    description: str | None = None

@dataclass(frozen=True)
class CurveGeneratorSpec:
    """Registry entry for curve generation."""

    curve_id: str
    generator: Callable[..., Curve]
    label: str
    default_params: dict[str, Any] | None = None
    windowed: bool = True

class CurveRegistry:
    """Registry for curve generators and preset resolution."""

    def __init__(self) -> None:
        self._registry: dict[str, CurveGeneratorSpec] = {}

    def __contains__(self, curve_id: object) -> bool:
        return getattr(curve_id, "value", curve_id) in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def register(self, spec: CurveGeneratorSpec) -> None:
        if spec.curve_id in self._registry:
            raise ValueError(f"Curve '{spec.curve_id}' already registered")
        self._registry[spec.curve_id] = spec

    def get(self, curve_id: str) -> CurveGeneratorSpec:
        key = getattr(curve_id, "value", curve_id)
        try:
            return self._registry[key]
        except KeyError as exc:
            raise ValueError(f"Curve '{key}' is not registered") from exc

    def specs(self) -> list[CurveGeneratorSpec]:
        """Return registered specs in registration order."""
        return list(self._registry.values())

    def generate(self, curve_id: str, **params: Any) -> Curve:
        """Generate a curve from a registered family.

        Args:
            curve_id: Registered family identifier.
            **params: Family parameters; override the registered defaults.
        """
        spec = self.get(curve_id)
        merged = dict(spec.default_params or {})
        merged.update(params)
        get_logger(__name__, curve_id=spec.curve_id).debug("Generating curve with %s", merged)
        return spec.generator(**merged)

    def resolve(
        self, definition: CurveDefinition, *, overrides: dict[str, Any] | None = None
    ) -> Curve:
        """Resolve a curve definition into a curve.

        Args:
            definition: Curve definition or preset.
            overrides: Optional parameters applied on top of the definition's
                (e.g. the caller's timing window).
        """
        curve_id = definition.base_curve_id or definition.curve_id
        params = dict(definition.params or {})
        params.update(overrides or {})
        curve = self.generate(curve_id, **params)

        modifiers = definition.modifiers or []
        if modifiers:
            curve = apply_modifiers(curve, modifiers)

        return curve

def resolve_curve(
    registry: CurveRegistry,
    definition: CurveDefinition,
    *,
    overrides: dict[str, Any] | None = None,
) -> Curve:
    """Convenience wrapper for resolving a curve definition."""
    return registry.resolve(definition, overrides=overrides)
