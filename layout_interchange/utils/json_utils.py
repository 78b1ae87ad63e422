"""Helper functions to read and write JSON documents."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULT_INDENT = 2


def read_json_text(path: Path) -> str:
    """Return the raw text of a JSON file, raising if it does not exist."""
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")
    return path.read_text(encoding="utf-8")


def dumps(payload: Any, indent: int = DEFAULT_INDENT) -> str:
    """Serialize a payload with stable formatting and unicode preserved."""
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def write_json(path: Path, payload: Any, indent: int = DEFAULT_INDENT) -> None:
    """Write a payload as JSON, creating parent directories on demand."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(payload, indent) + "\n", encoding="utf-8")
