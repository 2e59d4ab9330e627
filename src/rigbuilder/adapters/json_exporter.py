"""JSON export of fetched records.

Lets CLI results feed other tools without re-querying the backend.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def to_jsonable(payload: Any) -> Any:
    """Turn pydantic models (or lists of them) into plain JSON data."""

    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    if isinstance(payload, list):
        return [to_jsonable(item) for item in payload]
    return payload


def dumps_records(payload: Any) -> str:
    """Serialize with a stable layout (sorted keys, 2-space indent)."""

    return json.dumps(to_jsonable(payload), ensure_ascii=False, indent=2, sort_keys=True, default=str)


def export_records_json(*, payload: Any, output_path: Path) -> Path:
    """Write `payload` to `output_path` as UTF-8 JSON."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_records(payload) + "\n", encoding="utf-8")
    return output_path
