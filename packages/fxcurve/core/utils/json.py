"""JSON helpers for curve documents and config files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def _json_default(obj: Any) -> Any:
    """Serialize pydantic models (AnimCurve, CurveStats) and paths.

    Raises:
        TypeError: For any other non-JSON type.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps_json(obj: Any) -> str:
    """Serialize to indented JSON; pydantic models are dumped in JSON mode."""
    return json.dumps(obj, indent=2, default=_json_default)


def write_json(path: str | Path, obj: Any) -> None:
    """Write ``obj`` as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_json(obj) + "\n", encoding="utf-8")


def read_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON document whose top level is an object.

    Raises:
        ValueError: If the file is not valid JSON or not an object.
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
