"""Conversion helpers for CSS-like length values."""
from __future__ import annotations

import re
from typing import Optional

_NUMBER_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(px|%)?\s*$")


def parse_px(value: object) -> Optional[float]:
    """Return the numeric part of ``"20px"`` (or a bare number), ``None`` if unparsable."""
    return _parse_length(value, "px")


def parse_percent(value: object) -> Optional[float]:
    """Return the numeric part of ``"33.333%"``, ``None`` if unparsable."""
    return _parse_length(value, "%")


def _parse_length(value: object, unit: str) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None
    match = _NUMBER_PATTERN.match(value)
    if match is None:
        return None
    if match.group(2) not in (None, unit):
        return None
    return float(match.group(1))
