"""Export stored page elements as YOOtheme Pro layout documents."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from layout_interchange.model.document_model import ExportResult
from layout_interchange.model.elements import PageInfo, ProjectInfo, StoredElement
from layout_interchange.model.foreign_model import ForeignElement, ForeignLayout
from layout_interchange.model.options import ExportOptions
from layout_interchange.renderer.hierarchy_builder import build_hierarchy
from layout_interchange.renderer.layout_wrapper import LayoutWrapper
from layout_interchange.utils.filenames import page_filename, project_filename
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)

PageElements = Tuple[PageInfo, Sequence[StoredElement]]


def export_layout(elements: Sequence[StoredElement], options: ExportOptions | None = None) -> ForeignLayout:
    """Rebuild the hierarchy of a flat element set and wrap it for YOOtheme."""
    roots = build_hierarchy(elements)
    return LayoutWrapper(options).wrap(roots)


def export_to_yootheme(
    page: PageInfo,
    elements: Sequence[StoredElement],
    options: ExportOptions | None = None,
) -> ExportResult:
    layout = export_layout(elements, options)
    LOGGER.info("Exported page %s with %d element(s)", page.id, len(elements))
    return ExportResult(layout=layout, filename=page_filename(page.slug))


def export_project_to_yootheme(
    project: ProjectInfo,
    pages: Sequence[PageElements],
    options: ExportOptions | None = None,
) -> ExportResult:
    """Concatenate the sections of every page into one layout document."""
    sections: List[ForeignElement] = []
    for _page, elements in pages:
        sections.extend(export_layout(elements, options).children)
    LOGGER.info("Exported project %s with %d page(s)", project.id, len(pages))
    return ExportResult(layout=ForeignLayout(children=tuple(sections)), filename=project_filename(project.name))
