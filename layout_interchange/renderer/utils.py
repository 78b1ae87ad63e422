"""Inverse style rules shared by the export renderers."""
from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional

from layout_interchange.model.mapping_tables import (
    FONT_SIZE_BY_TITLE_STYLE,
    MARGIN_BY_TOKEN,
    PADDING_BY_TOKEN,
    WIDTH_BY_FRACTION,
    invert,
)
from layout_interchange.utils.units import parse_percent, parse_px

TITLE_STYLE_BY_PX = invert(FONT_SIZE_BY_TITLE_STYLE)
MARGIN_TOKEN_BY_PX = invert(MARGIN_BY_TOKEN)
PADDING_TOKEN_BY_PX = invert(PADDING_BY_TOKEN)
WIDTH_TOKEN_BY_PERCENT = invert(WIDTH_BY_FRACTION)


def nearest_token(
    value: Optional[float],
    tokens_by_length: Mapping[str, str],
    parse: Callable[[object], Optional[float]],
) -> Optional[str]:
    """Return the token whose length is closest to ``value``; first listed wins ties.

    Zero or negative lengths have no token.
    """
    if value is None or value <= 0:
        return None
    best_token: Optional[str] = None
    best_distance = float("inf")
    for length, token in tokens_by_length.items():
        candidate = parse(length)
        if candidate is None:
            continue
        distance = abs(candidate - value)
        if distance < best_distance:
            best_token, best_distance = token, distance
    return best_token


def style_to_props(styles: Mapping[str, str]) -> Dict[str, object]:
    """Convert a native style map back into YOOtheme props."""
    props: Dict[str, object] = {}

    if styles.get("textAlign"):
        props["text_align"] = styles["textAlign"]
    if styles.get("color"):
        props["title_color"] = styles["color"]
    if styles.get("backgroundColor"):
        props["background_color"] = styles["backgroundColor"]

    title_style = nearest_token(parse_px(styles.get("fontSize")), TITLE_STYLE_BY_PX, parse_px)
    if title_style:
        props["title_style"] = title_style

    margin_source = styles.get("marginTop") or styles.get("marginBottom")
    margin = nearest_token(parse_px(margin_source), MARGIN_TOKEN_BY_PX, parse_px)
    if margin:
        props["margin"] = margin

    padding = nearest_token(parse_px(styles.get("padding")), PADDING_TOKEN_BY_PX, parse_px)
    if padding:
        props["padding"] = padding

    width = nearest_token(parse_percent(styles.get("width")), WIDTH_TOKEN_BY_PERCENT, parse_percent)
    if width:
        props["width_default"] = width

    if styles.get("position") == "sticky":
        props["position_sticky"] = True

    return props
