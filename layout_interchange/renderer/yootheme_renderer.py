"""Render native elements as YOOtheme Pro nodes."""
from __future__ import annotations

from typing import Callable, Dict, Mapping

from layout_interchange.model.elements import NativeElement
from layout_interchange.model.foreign_model import ForeignElement
from layout_interchange.model.mapping_tables import DEFAULT_FOREIGN_TYPE, NATIVE_TO_FOREIGN_TYPE
from layout_interchange.model.options import ExportOptions
from layout_interchange.renderer.utils import style_to_props
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)

Props = Dict[str, object]

DEFAULT_LINK_TEXT = "Link"
DEFAULT_BUTTON_TEXT = "Button"
LINK_STYLE = "text"


def map_native_type(native_type: str) -> str:
    """Inverse type lookup; unknown native types export as plain text."""
    foreign = NATIVE_TO_FOREIGN_TYPE.get(native_type)
    if foreign is None:
        LOGGER.debug("No YOOtheme type for %r, exporting as %s", native_type, DEFAULT_FOREIGN_TYPE)
        return DEFAULT_FOREIGN_TYPE
    return foreign


class YOOthemeRenderer:
    """Map one native element (and its subtree) onto a YOOtheme node."""

    def __init__(self, options: ExportOptions | None = None) -> None:
        self._options = options or ExportOptions()
        self._content_rules: Dict[str, Callable[[NativeElement], Props]] = {
            "heading": self._heading_props,
            "text": self._content_props,
            "button": self._button_props,
            "link": self._link_props,
            "image": self._image_props,
            "video": self._content_props,
        }

    def render(self, element: NativeElement) -> ForeignElement:
        props = style_to_props(element.styles)
        rule = self._content_rules.get(element.element_type, self._optional_content_props)
        props.update(rule(element))
        return ForeignElement(
            type=map_native_type(element.element_type),
            props=props,
            children=tuple(self.render(child) for child in element.children),
        )

    # ------------------------------------------------------------------
    # Content rules
    def _heading_props(self, element: NativeElement) -> Props:
        return {"content": element.content, "title_element": self._heading_element(element.attributes)}

    def _content_props(self, element: NativeElement) -> Props:
        return {"content": element.content}

    def _optional_content_props(self, element: NativeElement) -> Props:
        return {"content": element.content} if element.content else {}

    def _button_props(self, element: NativeElement) -> Props:
        props: Props = {"text": element.content or DEFAULT_BUTTON_TEXT, "style": self._options.button_style}
        props.update(self._link_target_props(element.attributes))
        return props

    def _link_props(self, element: NativeElement) -> Props:
        props: Props = {"text": element.content or DEFAULT_LINK_TEXT, "style": LINK_STYLE}
        props.update(self._link_target_props(element.attributes))
        return props

    def _image_props(self, element: NativeElement) -> Props:
        alt = element.attributes.get("alt")
        return {"src": element.content, "alt": alt if isinstance(alt, str) else ""}

    def _heading_element(self, attributes: Mapping[str, object]) -> str:
        level = attributes.get("level")
        if isinstance(level, int) and not isinstance(level, bool) and 1 <= level <= 6:
            return f"h{level}"
        return self._options.default_heading_element

    @staticmethod
    def _link_target_props(attributes: Mapping[str, object]) -> Props:
        props: Props = {}
        if attributes.get("href"):
            props["link"] = attributes["href"]
        if attributes.get("target") == "_blank":
            props["link_target"] = "_blank"
        return props
