"""In-memory representation of a YOOtheme Pro layout document."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

PropValue = Union[str, int, float, bool, None]

LAYOUT_TYPE = "layout"


def _frozen_props(props: Mapping[str, PropValue]) -> Mapping[str, PropValue]:
    return MappingProxyType(dict(props))


@dataclass(frozen=True, slots=True)
class ForeignElement:
    """A single YOOtheme node: a type tag, a property bag and ordered children."""

    type: str
    props: Mapping[str, PropValue] = field(default_factory=dict)
    children: Tuple["ForeignElement", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", _frozen_props(self.props))
        object.__setattr__(self, "children", tuple(self.children))

    def to_dict(self) -> Dict[str, object]:
        """Return the JSON shape, omitting empty ``props`` and ``children``."""
        payload: Dict[str, object] = {"type": self.type}
        if self.props:
            payload["props"] = dict(self.props)
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload


@dataclass(frozen=True, slots=True)
class ForeignLayout:
    """Document root; its type is always ``layout``."""

    children: Tuple[ForeignElement, ...] = ()
    type: str = LAYOUT_TYPE

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def as_element(self) -> ForeignElement:
        """View the root as an ordinary node so wrapper elision can start from it."""
        return ForeignElement(type=self.type, children=self.children)

    def to_dict(self) -> Dict[str, object]:
        return {"type": self.type, "children": [child.to_dict() for child in self.children]}
