"""Native builder elements in nested, flattened and stored form."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional


@dataclass(slots=True)
class NativeElement:
    """Builder element while still in tree form."""

    element_type: str
    content: str = ""
    styles: Dict[str, str] = field(default_factory=dict)
    attributes: Dict[str, object] = field(default_factory=dict)
    order: int = 0
    children: List["NativeElement"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "elementType": self.element_type,
            "content": self.content,
            "styles": dict(self.styles),
            "attributes": dict(self.attributes),
            "order": self.order,
        }
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload

    def count(self) -> int:
        """Number of nodes in this subtree, the node itself included."""
        return 1 + sum(child.count() for child in self.children)


@dataclass(slots=True)
class FlatElement:
    """Flattened record with a placeholder parent reference.

    ``local_id`` is the 1-based position of the record in its batch. A child
    refers to its parent through ``parent_id == -parent.local_id`` until the
    store hands out real identifiers.
    """

    element_type: str
    content: str
    styles: Dict[str, str]
    attributes: Dict[str, object]
    order: int
    local_id: int
    parent_id: Optional[int] = None

    @property
    def parent_local_id(self) -> Optional[int]:
        if self.parent_id is None:
            return None
        return -self.parent_id

    def to_dict(self) -> Dict[str, object]:
        return {
            "elementType": self.element_type,
            "content": self.content,
            "styles": dict(self.styles),
            "attributes": dict(self.attributes),
            "order": self.order,
            "parentId": self.parent_id,
            "localId": self.local_id,
        }


def _mapping_field(payload: Mapping[str, object], key: str) -> Dict[str, object]:
    value = payload.get(key) or {}
    if not isinstance(value, Mapping):
        raise ValueError(f"Element {payload.get('id')!r}: {key} must be an object, got {type(value).__name__}")
    return dict(value)


@dataclass(slots=True)
class StoredElement:
    """Element row as held by a page-scoped element store."""

    id: int
    element_type: str
    content: str = ""
    styles: Dict[str, str] = field(default_factory=dict)
    attributes: Dict[str, object] = field(default_factory=dict)
    order: int = 0
    parent_id: Optional[int] = None
    page_id: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "StoredElement":
        """Build a record from the store's wire names (``elementType``, ``parentId``...)."""
        parent_id = payload.get("parentId")
        page_id = payload.get("pageId")
        return cls(
            id=int(payload["id"]),  # type: ignore[arg-type]
            element_type=str(payload.get("elementType") or "container"),
            content=str(payload.get("content") or ""),
            styles=_mapping_field(payload, "styles"),  # type: ignore[arg-type]
            attributes=_mapping_field(payload, "attributes"),
            order=int(payload.get("order") or 0),  # type: ignore[arg-type]
            parent_id=int(parent_id) if parent_id is not None else None,  # type: ignore[arg-type]
            page_id=int(page_id) if page_id is not None else None,  # type: ignore[arg-type]
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "pageId": self.page_id,
            "parentId": self.parent_id,
            "elementType": self.element_type,
            "content": self.content,
            "styles": dict(self.styles),
            "attributes": dict(self.attributes),
            "order": self.order,
        }


@dataclass(frozen=True, slots=True)
class PageInfo:
    """Page identity needed to name an export."""

    id: int
    name: str = ""
    slug: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ProjectInfo:
    """Project identity needed to name a multi-page export."""

    id: int
    name: str
