"""Per-type extraction of primary content and structural attributes."""
from __future__ import annotations

import re
from typing import Callable, Dict, Mapping

from layout_interchange.model.foreign_model import PropValue
from layout_interchange.parser.prop_values import prop_text

Props = Mapping[str, PropValue]
Attributes = Dict[str, object]

DEFAULT_BUTTON_TEXT = "Button"
BLANK_TARGET = "_blank"

_HEADING_LEVEL = re.compile(r"h(\d)")


def _field(key: str, default: str = "") -> Callable[[Props], str]:
    def extract(props: Props) -> str:
        return prop_text(props, key) or default

    return extract


def _content_or_text(props: Props) -> str:
    return prop_text(props, "content") or prop_text(props, "text") or ""


CONTENT_RULES: Dict[str, Callable[[Props], str]] = {
    "headline": _field("content"),
    "text": _field("content"),
    "code": _field("content"),
    "button": _field("text", DEFAULT_BUTTON_TEXT),
    "image": _field("src"),
    "icon": _field("icon"),
}


def extract_content(foreign_type: str, props: Props) -> str:
    """Pull the element's primary text, media source or value."""
    rule = CONTENT_RULES.get(foreign_type, _content_or_text)
    return rule(props)


# ----------------------------------------------------------------------
# Attributes
def _heading_attributes(props: Props) -> Attributes:
    token = prop_text(props, "title_element")
    if token is None:
        return {}
    match = _HEADING_LEVEL.fullmatch(token.strip().lower())
    if match is None:
        return {}
    return {"level": int(match.group(1))}


def _link_attributes(props: Props) -> Attributes:
    attrs: Attributes = {}
    href = prop_text(props, "link")
    if href:
        attrs["href"] = href
    if props.get("link_target") == BLANK_TARGET:
        attrs["target"] = BLANK_TARGET
    return attrs


def _image_attributes(props: Props) -> Attributes:
    alt = prop_text(props, "alt")
    return {"alt": alt} if alt else {}


ATTRIBUTE_RULES: Dict[str, Callable[[Props], Attributes]] = {
    "headline": _heading_attributes,
    "button": _link_attributes,
    "link": _link_attributes,
    "image": _image_attributes,
}


def extract_attributes(foreign_type: str, props: Props) -> Attributes:
    """Type-gated attributes; malformed values simply contribute nothing."""
    rule = ATTRIBUTE_RULES.get(foreign_type)
    if rule is None:
        return {}
    return rule(props)
