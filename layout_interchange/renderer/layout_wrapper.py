"""Wrap rendered elements in YOOtheme section/row/column structure."""
from __future__ import annotations

from typing import List, Sequence

from layout_interchange.model.elements import NativeElement
from layout_interchange.model.foreign_model import ForeignElement, ForeignLayout
from layout_interchange.model.mapping_tables import CONTAINER, TEXT
from layout_interchange.model.options import ExportOptions
from layout_interchange.renderer.utils import style_to_props
from layout_interchange.renderer.yootheme_renderer import YOOthemeRenderer

ROW_PROPS = {"column_gap": "default", "row_gap": "default"}
COLUMN_PROPS = {"width_default": "1-1"}
SECTION_PROPS = {"style": "default", "width": "default", "padding": "default"}


def wrap_section(children: Sequence[ForeignElement], section_props: dict | None = None) -> ForeignElement:
    """Build one ``section > row > column`` chain around ``children``."""
    column = ForeignElement(type="column", props=dict(COLUMN_PROPS), children=tuple(children))
    row = ForeignElement(type="row", props=dict(ROW_PROPS), children=(column,))
    return ForeignElement(type="section", props=dict(section_props or SECTION_PROPS), children=(row,))


def is_section_container(element: NativeElement) -> bool:
    """A top-level container with children and no content of its own becomes a section."""
    return element.element_type == CONTAINER and bool(element.children) and not element.content


class LayoutWrapper:
    """Group top-level elements into sections.

    Each top-level section container gets its own section whose column holds
    the container's children. Consecutive other elements share one section.
    """

    def __init__(self, options: ExportOptions | None = None) -> None:
        self._options = options or ExportOptions()
        self._renderer = YOOthemeRenderer(self._options)

    def wrap(self, roots: Sequence[NativeElement]) -> ForeignLayout:
        if not roots:
            roots = [NativeElement(element_type=TEXT, content=self._options.empty_page_text)]

        sections: List[ForeignElement] = []
        pending: List[ForeignElement] = []
        for element in roots:
            if is_section_container(element):
                if pending:
                    sections.append(wrap_section(pending))
                    pending = []
                children = [self._renderer.render(child) for child in element.children]
                section_props = dict(SECTION_PROPS)
                section_props.update(style_to_props(element.styles))
                sections.append(wrap_section(children, section_props))
            else:
                pending.append(self._renderer.render(element))
        if pending:
            sections.append(wrap_section(pending))
        return ForeignLayout(children=tuple(sections))
