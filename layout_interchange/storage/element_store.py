"""Page-scoped element store contract and store-backed import/export."""
from __future__ import annotations

from dataclasses import replace
from itertools import count
from typing import Any, Dict, List, Optional, Protocol

from layout_interchange.model.document_model import ExportResult, ImportSummary
from layout_interchange.model.elements import FlatElement, PageInfo, StoredElement
from layout_interchange.model.options import ExportOptions, ImportOptions
from layout_interchange.parser.flattener import import_from_yootheme_flat
from layout_interchange.parser.layout_loader import load_layout
from layout_interchange.renderer.exporter import export_to_yootheme
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)


class ElementStore(Protocol):
    """Persistence collaborator holding each page's element rows."""

    def list_elements(self, page_id: int) -> List[StoredElement]:
        ...

    def create_element(
        self, page_id: int, record: FlatElement, parent_id: Optional[int], order: int
    ) -> StoredElement:
        ...

    def delete_element(self, element_id: int) -> None:
        ...


class InMemoryElementStore:
    """Dictionary-backed store handing out increasing integer ids."""

    def __init__(self, first_id: int = 1) -> None:
        self._rows: Dict[int, StoredElement] = {}
        self._ids = count(first_id)

    def list_elements(self, page_id: int) -> List[StoredElement]:
        rows = [row for row in self._rows.values() if row.page_id == page_id]
        return [replace(row) for row in rows]

    def create_element(
        self, page_id: int, record: FlatElement, parent_id: Optional[int], order: int
    ) -> StoredElement:
        if parent_id is not None and parent_id not in self._rows:
            raise KeyError(f"Parent element {parent_id} does not exist")
        row = StoredElement(
            id=next(self._ids),
            page_id=page_id,
            parent_id=parent_id,
            element_type=record.element_type,
            content=record.content,
            styles=dict(record.styles),
            attributes=dict(record.attributes),
            order=order,
        )
        self._rows[row.id] = row
        return replace(row)

    def delete_element(self, element_id: int) -> None:
        self._rows.pop(element_id, None)


def import_into_page(
    store: ElementStore,
    page_id: int,
    layout: Any,
    options: ImportOptions | None = None,
) -> ImportSummary:
    """Import a YOOtheme layout into a page, inserting records in batch order.

    Placeholders are resolved through a ``local_id -> id`` table filled as
    rows are created; a parent is always created before its children. The
    whole batch is built before the page is touched, so a layout that fails
    to load or transform leaves existing rows in place.
    """
    options = options or ImportOptions()
    batch = import_from_yootheme_flat(load_layout(layout))

    if options.replace:
        for existing in store.list_elements(page_id):
            store.delete_element(existing.id)
        root_offset = 0
    else:
        root_offset = sum(1 for row in store.list_elements(page_id) if row.parent_id is None)

    assigned_ids: Dict[int, int] = {}
    root_index = 0
    for record in batch:
        parent_local_id = record.parent_local_id
        if parent_local_id is None:
            parent_id = None
            order = root_offset + root_index
            root_index += 1
        else:
            parent_id = assigned_ids[parent_local_id]
            order = record.order
        created = store.create_element(page_id, record, parent_id, order)
        assigned_ids[record.local_id] = created.id

    summary = ImportSummary(imported=len(batch), element_ids=[assigned_ids[record.local_id] for record in batch])
    LOGGER.info("%s into page %s", summary.message, page_id)
    return summary


def export_page_from_store(
    store: ElementStore, page: PageInfo, options: ExportOptions | None = None
) -> ExportResult:
    return export_to_yootheme(page, store.list_elements(page.id), options)
