"""Layout loader responsible for decoding YOOtheme JSON into the foreign model."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from layout_interchange.model.foreign_model import ForeignElement, ForeignLayout, PropValue
from layout_interchange.parser.validator import LayoutValidationError, require_valid_layout
from layout_interchange.utils.json_utils import read_json_text
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)

_SCALAR_TYPES = (str, int, float, bool, type(None))


@dataclass(slots=True)
class LayoutSource:
    """Decoded but not yet validated JSON value of a layout document."""

    raw: Any

    @classmethod
    def from_text(cls, text: str) -> "LayoutSource":
        try:
            return cls(raw=json.loads(text))
        except json.JSONDecodeError as exc:
            raise LayoutValidationError(f"Layout is not valid JSON: {exc.msg} (line {exc.lineno})") from exc

    @classmethod
    def from_path(cls, path: Path) -> "LayoutSource":
        """Read a layout file exported from YOOtheme Pro."""
        source = cls.from_text(read_json_text(path))
        LOGGER.debug("Read layout JSON from %s", path.name)
        return source

    def to_layout(self) -> ForeignLayout:
        """Validate the root and build the immutable element tree."""
        require_valid_layout(self.raw)
        children = self._build_children(self.raw["children"])
        return ForeignLayout(children=children)

    # ------------------------------------------------------------------
    # Internal helpers
    def _build_children(self, nodes: List[Any]) -> List[ForeignElement]:
        children: List[ForeignElement] = []
        for node in nodes:
            if not isinstance(node, dict):
                LOGGER.debug("Skipping non-object child node: %r", node)
                continue
            children.append(self._build_element(node))
        return children

    def _build_element(self, node: Dict[str, Any]) -> ForeignElement:
        raw_children = node.get("children")
        children = self._build_children(raw_children) if isinstance(raw_children, list) else []
        return ForeignElement(
            type=str(node.get("type") or ""),
            props=self._scalar_props(node.get("props")),
            children=tuple(children),
        )

    def _scalar_props(self, props: Any) -> Dict[str, PropValue]:
        if not isinstance(props, dict):
            return {}
        scalars: Dict[str, PropValue] = {}
        for key, value in props.items():
            if isinstance(value, _SCALAR_TYPES):
                scalars[str(key)] = value
            else:
                LOGGER.debug("Dropping non-scalar prop %s (%s)", key, type(value).__name__)
        return scalars


def load_layout(value: Any) -> ForeignLayout:
    """Build a :class:`ForeignLayout` from an already decoded JSON value."""
    if isinstance(value, ForeignLayout):
        return value
    return LayoutSource(raw=value).to_layout()
