"""Helpers to persist intermediate representations for debugging."""
from __future__ import annotations

from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Mapping

from layout_interchange.utils.json_utils import write_json


class DebugDumper:
    """Writes intermediate trees and batches onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, artifacts: Mapping[str, Any]) -> None:
        """Persist each named artifact as ``<name>.json``."""
        for name, value in artifacts.items():
            write_json(self.directory / f"{name}.json", self._serialize(value))

    def _serialize(self, value: Any) -> Any:
        if hasattr(value, "to_dict"):
            return self._serialize(value.to_dict())
        if is_dataclass(value) and not isinstance(value, type):
            return {k: self._serialize(v) for k, v in asdict(value).items()}
        if isinstance(value, Mapping):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value
