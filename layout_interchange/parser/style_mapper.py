"""Translate YOOtheme presentation props into a flat native style map."""
from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Tuple

from layout_interchange.model.foreign_model import PropValue
from layout_interchange.model.mapping_tables import (
    DEFAULT_FONT_SIZE,
    DEFAULT_WIDTH,
    FONT_SIZE_BY_TITLE_STYLE,
    MARGIN_BY_TOKEN,
    PADDING_BY_TOKEN,
    WIDTH_BY_FRACTION,
)
from layout_interchange.parser.prop_values import prop_flag, prop_text

Styles = Dict[str, str]
StyleRule = Callable[[str], Styles]


def _font_size(token: str) -> Styles:
    return {"fontSize": FONT_SIZE_BY_TITLE_STYLE.get(token, DEFAULT_FONT_SIZE)}


def _text_align(token: str) -> Styles:
    return {"textAlign": token}


def _color(token: str) -> Styles:
    return {"color": token}


def _background_color(token: str) -> Styles:
    return {"backgroundColor": token}


def _margin(token: str) -> Styles:
    size = MARGIN_BY_TOKEN.get(token)
    if size is None:
        return {}
    return {"marginTop": size, "marginBottom": size}


def _padding(token: str) -> Styles:
    size = PADDING_BY_TOKEN.get(token)
    if size is None:
        return {}
    return {"padding": size}


def _width(token: str) -> Styles:
    return {"width": WIDTH_BY_FRACTION.get(token, DEFAULT_WIDTH)}


# Each rule owns a disjoint set of output keys, so evaluation order is irrelevant.
STYLE_RULES: Tuple[Tuple[str, StyleRule], ...] = (
    ("title_style", _font_size),
    ("text_align", _text_align),
    ("title_color", _color),
    ("background_color", _background_color),
    ("margin", _margin),
    ("padding", _padding),
    ("width_default", _width),
)

STICKY_PROP = "position_sticky"

# Rules with a default: any truthy value they do not recognise still writes it.
FALLBACK_PROPS = frozenset({"title_style", "width_default"})


def _token(props: Mapping[str, PropValue], key: str) -> Optional[str]:
    token = prop_text(props, key)
    if token is None and key in FALLBACK_PROPS and prop_flag(props, key):
        return ""
    return token


def map_styles(props: Mapping[str, PropValue]) -> Styles:
    """Apply every recognised rule; unknown props are ignored."""
    styles: Styles = {}
    for key, rule in STYLE_RULES:
        token = _token(props, key)
        if token is not None:
            styles.update(rule(token))
    if prop_flag(props, STICKY_PROP):
        styles["position"] = "sticky"
        styles["top"] = "0"
    return styles
