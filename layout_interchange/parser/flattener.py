"""Flatten a native element tree into an insertion-ordered batch."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from layout_interchange.model.elements import FlatElement, NativeElement, StoredElement
from layout_interchange.parser.tree_transformer import import_from_yootheme
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)


class ElementFlattener:
    """Depth-first pre-order walk that records parents by placeholder.

    A record's ``local_id`` is its 1-based position in the whole batch and a
    child's ``parent_id`` is the negated ``local_id`` of its parent, so every
    placeholder it creates points at an earlier record. Top-level records take
    the caller's starting ``parent_id``, ``None`` by default.
    """

    def __init__(self) -> None:
        self._batch: List[FlatElement] = []

    def flatten(self, elements: Sequence[NativeElement], parent_id: Optional[int] = None) -> List[FlatElement]:
        self._batch = []
        self._emit_all(elements, parent_id)
        batch, self._batch = self._batch, []
        return batch

    def _emit_all(self, elements: Sequence[NativeElement], parent_id: Optional[int]) -> None:
        for element in elements:
            local_id = len(self._batch) + 1
            self._batch.append(
                FlatElement(
                    element_type=element.element_type,
                    content=element.content,
                    styles=dict(element.styles),
                    attributes=dict(element.attributes),
                    order=element.order,
                    local_id=local_id,
                    parent_id=parent_id,
                )
            )
            if element.children:
                self._emit_all(element.children, -local_id)


def flatten_elements(elements: Sequence[NativeElement], parent_id: Optional[int] = None) -> List[FlatElement]:
    """Flatten ``elements``; their own records take ``parent_id`` as given."""
    return ElementFlattener().flatten(elements, parent_id)


def import_from_yootheme_flat(layout: Any) -> List[FlatElement]:
    """Import a layout document straight into a flattened batch."""
    batch = flatten_elements(import_from_yootheme(layout))
    LOGGER.debug("Flattened layout into %d record(s)", len(batch))
    return batch


def resolve_parent_ids(batch: Sequence[FlatElement], assigned_ids: Mapping[int, int]) -> List[StoredElement]:
    """Swap placeholders for real ids using a ``local_id -> id`` table.

    Resolution goes through the correlation table rather than array
    positions, so the store may assign ids in any order. Raises ``KeyError``
    if a record or its parent has no assigned id.
    """
    resolved: List[StoredElement] = []
    for record in batch:
        parent_local_id = record.parent_local_id
        resolved.append(
            StoredElement(
                id=assigned_ids[record.local_id],
                element_type=record.element_type,
                content=record.content,
                styles=dict(record.styles),
                attributes=dict(record.attributes),
                order=record.order,
                parent_id=assigned_ids[parent_local_id] if parent_local_id is not None else None,
            )
        )
    return resolved


def batch_to_dicts(batch: Sequence[FlatElement]) -> List[Dict[str, object]]:
    return [record.to_dict() for record in batch]
