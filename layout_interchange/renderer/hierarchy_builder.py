"""Rebuild a nested element tree from a page's flat element set."""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set

from layout_interchange.model.elements import NativeElement, StoredElement
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)


class HierarchyBuilder:
    """Group stored rows by parent and walk them from the page roots."""

    def __init__(self, elements: Sequence[StoredElement]) -> None:
        self._elements = list(elements)
        self._groups = self._group_by_parent(self._elements)

    def build(self) -> List[NativeElement]:
        visited: Set[int] = set()
        roots = self._build_children(None, visited)
        dropped = [element.id for element in self._elements if element.id not in visited]
        if dropped:
            LOGGER.warning("Dropping %d element(s) unreachable from the page root: %s", len(dropped), dropped)
        return roots

    def _build_children(self, parent_id: Optional[int], visited: Set[int]) -> List[NativeElement]:
        children: List[NativeElement] = []
        for element in self._groups.get(parent_id, []):
            if element.id in visited:
                continue
            visited.add(element.id)
            children.append(
                NativeElement(
                    element_type=element.element_type,
                    content=element.content,
                    styles=dict(element.styles),
                    attributes=dict(element.attributes),
                    order=element.order,
                    children=self._build_children(element.id, visited),
                )
            )
        return children

    @staticmethod
    def _group_by_parent(elements: Sequence[StoredElement]) -> Dict[Optional[int], List[StoredElement]]:
        groups: Dict[Optional[int], List[StoredElement]] = {}
        for element in elements:
            groups.setdefault(element.parent_id, []).append(element)
        for siblings in groups.values():
            siblings.sort(key=lambda element: element.order)
        return groups


def build_hierarchy(elements: Sequence[StoredElement]) -> List[NativeElement]:
    return HierarchyBuilder(elements).build()
