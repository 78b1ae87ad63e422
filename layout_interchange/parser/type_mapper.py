"""Map YOOtheme element types onto the native element vocabulary."""
from __future__ import annotations

from layout_interchange.model.mapping_tables import DEFAULT_NATIVE_TYPE, FOREIGN_TO_NATIVE_TYPE, WRAPPER_TYPES
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)


def map_element_type(foreign_type: str) -> str:
    """Total lookup: unknown foreign types become the generic container."""
    native = FOREIGN_TO_NATIVE_TYPE.get(foreign_type)
    if native is None:
        LOGGER.debug("Unknown YOOtheme type %r mapped to %s", foreign_type, DEFAULT_NATIVE_TYPE)
        return DEFAULT_NATIVE_TYPE
    return native


def is_wrapper_type(foreign_type: str) -> bool:
    """Whether the type is a purely structural wrapper (layout, section, row, column)."""
    return foreign_type in WRAPPER_TYPES
