"""Read-only vocabulary tables shared by the import and export directions."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping

# Native vocabulary
HEADING = "heading"
TEXT = "text"
BUTTON = "button"
IMAGE = "image"
VIDEO = "video"
CONTAINER = "container"

NATIVE_TYPES: FrozenSet[str] = frozenset({HEADING, TEXT, BUTTON, IMAGE, VIDEO, CONTAINER})
DEFAULT_NATIVE_TYPE = CONTAINER

# Foreign structural wrappers that have no native counterpart.
WRAPPER_TYPES: FrozenSet[str] = frozenset({"layout", "section", "row", "column"})

FOREIGN_TO_NATIVE_TYPE: Mapping[str, str] = MappingProxyType(
    {
        "headline": HEADING,
        "text": TEXT,
        "button": BUTTON,
        "image": IMAGE,
        "section": CONTAINER,
        "row": CONTAINER,
        "column": CONTAINER,
        "grid": CONTAINER,
        "gallery": CONTAINER,
        "list": CONTAINER,
        "accordion": CONTAINER,
        "switcher": CONTAINER,
        "divider": CONTAINER,
        "video": VIDEO,
        "icon": TEXT,
        "panel": CONTAINER,
        "card": CONTAINER,
        "overlay": CONTAINER,
        "slider": CONTAINER,
        "table": CONTAINER,
        "map": CONTAINER,
        "countdown": TEXT,
        "code": TEXT,
        "description_list": CONTAINER,
        "nav": CONTAINER,
        "social": CONTAINER,
        "totop": BUTTON,
    }
)

# Export direction. Nested containers become panels; top-level containers are
# re-wrapped into sections by the layout wrapper instead.
NATIVE_TO_FOREIGN_TYPE: Mapping[str, str] = MappingProxyType(
    {
        HEADING: "headline",
        TEXT: "text",
        BUTTON: "button",
        IMAGE: "image",
        VIDEO: "video",
        CONTAINER: "panel",
        "link": "button",
        "input": "text",
        "textarea": "text",
        "select": "list",
        "grid": "grid",
    }
)
DEFAULT_FOREIGN_TYPE = "text"

# heading-* tokens come first so the inverse lookup prefers them.
FONT_SIZE_BY_TITLE_STYLE: Mapping[str, str] = MappingProxyType(
    {
        "heading-2xlarge": "72px",
        "heading-xlarge": "48px",
        "heading-large": "36px",
        "heading-medium": "28px",
        "heading-small": "24px",
        "h1": "48px",
        "h2": "36px",
        "h3": "28px",
        "h4": "24px",
        "h5": "20px",
        "h6": "18px",
    }
)
DEFAULT_FONT_SIZE = "24px"

MARGIN_BY_TOKEN: Mapping[str, str] = MappingProxyType({"default": "20px", "small": "10px", "large": "40px"})
PADDING_BY_TOKEN: Mapping[str, str] = MappingProxyType({"default": "20px", "small": "10px", "large": "40px"})

WIDTH_BY_FRACTION: Mapping[str, str] = MappingProxyType(
    {
        "1-1": "100%",
        "1-2": "50%",
        "1-3": "33.333%",
        "2-3": "66.666%",
        "1-4": "25%",
        "3-4": "75%",
        "1-5": "20%",
        "2-5": "40%",
        "3-5": "60%",
        "4-5": "80%",
        "1-6": "16.666%",
        "5-6": "83.333%",
    }
)
DEFAULT_WIDTH = "100%"


def invert(table: Mapping[str, str]) -> Mapping[str, str]:
    """Return a value → key view, keeping the first key listed for each value."""
    inverted: Dict[str, str] = {}
    for key, value in table.items():
        inverted.setdefault(value, key)
    return MappingProxyType(inverted)
