"""Rebuild a YOOtheme element tree as a native element tree."""
from __future__ import annotations

from typing import Any, List

from layout_interchange.model.elements import NativeElement
from layout_interchange.model.foreign_model import ForeignElement
from layout_interchange.parser.content_extractor import extract_attributes, extract_content
from layout_interchange.parser.layout_loader import load_layout
from layout_interchange.parser.style_mapper import map_styles
from layout_interchange.parser.type_mapper import is_wrapper_type, map_element_type
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)


def transform_element(element: ForeignElement, order: int) -> NativeElement:
    """Transform one content-bearing node and, recursively, all of its children.

    Children are not passed through wrapper elision: once a node carries
    content, its descendants are treated as sub-content.
    """
    props = element.props
    return NativeElement(
        element_type=map_element_type(element.type),
        content=extract_content(element.type, props),
        styles=map_styles(props),
        attributes=extract_attributes(element.type, props),
        order=order,
        children=[transform_element(child, index) for index, child in enumerate(element.children)],
    )


def extract_content_elements(element: ForeignElement, order: int) -> List[NativeElement]:
    """Skip structural wrappers and return the content elements beneath them.

    Each wrapper re-indexes its children from zero, so orders are only
    meaningful within one wrapper's child list.
    """
    if not is_wrapper_type(element.type):
        return [transform_element(element, order)]

    extracted: List[NativeElement] = []
    for index, child in enumerate(element.children):
        extracted.extend(extract_content_elements(child, index))
    return extracted


def import_from_yootheme(layout: Any) -> List[NativeElement]:
    """Validate a layout document and return its native element tree roots."""
    document = load_layout(layout)
    elements = extract_content_elements(document.as_element(), 0)
    LOGGER.debug(
        "Transformed %d root element(s), %d in total",
        len(elements),
        sum(element.count() for element in elements),
    )
    return elements
