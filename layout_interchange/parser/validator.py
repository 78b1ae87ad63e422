"""Structural guard run before any layout transformation."""
from __future__ import annotations

from typing import Any, Optional

from layout_interchange.model.foreign_model import LAYOUT_TYPE


class LayoutValidationError(ValueError):
    """Raised when input is not shaped like a YOOtheme layout document."""


def describe_problem(value: Any) -> Optional[str]:
    """Return why ``value`` is not a layout document, or ``None`` when it is one."""
    if not isinstance(value, dict):
        return f"expected a JSON object, got {type(value).__name__}"
    if value.get("type") != LAYOUT_TYPE:
        return f"expected type {LAYOUT_TYPE!r}, got {value.get('type')!r}"
    if not isinstance(value.get("children"), list):
        return "expected 'children' to be an array"
    return None


def is_valid_layout(value: Any) -> bool:
    """Shallow check: an object with ``type == "layout"`` and a ``children`` array."""
    return describe_problem(value) is None


def require_valid_layout(value: Any) -> None:
    problem = describe_problem(value)
    if problem is not None:
        raise LayoutValidationError(
            f'Invalid YOOtheme layout format: {problem}. Expected {{ type: "layout", children: [...] }}'
        )
