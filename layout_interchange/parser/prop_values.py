"""Explicit coercions from the closed prop value variant."""
from __future__ import annotations

from typing import Mapping, Optional

from layout_interchange.model.foreign_model import PropValue


def prop_text(props: Mapping[str, PropValue], key: str) -> Optional[str]:
    """Return a prop as text.

    Strings pass through and numbers are stringified. Booleans, ``None``,
    empty strings and absent keys all read as missing.
    """
    value = props.get(key)
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return value or None


def prop_flag(props: Mapping[str, PropValue], key: str) -> bool:
    return bool(props.get(key))
