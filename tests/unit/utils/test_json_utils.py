"""Tests for JSON utilities."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fxcurve.core.curves.models import CURVE_LENGTH, AnimCurve
from fxcurve.core.curves.stats import CurveStats
from fxcurve.core.utils.json import dumps_json, read_json, write_json


def test_dumps_curve_models() -> None:
    """AnimCurve and CurveStats serialize as their field dicts."""
    curve = [0] * 80 + [255] * 80
    data = json.loads(
        dumps_json({"curve": AnimCurve(samples=curve), "stats": CurveStats.from_curve(curve)})
    )
    assert data["curve"] == {"samples": curve}
    assert data["stats"]["max"] == 255
    assert data["stats"]["start"] == 0


def test_dumps_path() -> None:
    assert json.loads(dumps_json({"p": Path("x/y")})) == {"p": str(Path("x/y"))}


def test_dumps_unknown_type() -> None:
    with pytest.raises(TypeError, match="not JSON serializable"):
        dumps_json({"s": {1, 2}})


def test_write_and_read(tmp_path: Path) -> None:
    """write_json creates parent directories."""
    path = tmp_path / "nested" / "curve.json"
    write_json(path, {"curve": AnimCurve(samples=[9] * CURVE_LENGTH)})
    assert read_json(path) == {"curve": {"samples": [9] * CURVE_LENGTH}}


def test_read_non_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="Expected JSON object"):
        read_json(path)
