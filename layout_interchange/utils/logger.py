"""Central logging configuration for the interchange engine."""
from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "LAYOUT_INTERCHANGE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DEFAULT_LEVEL = logging.INFO


def resolve_level(value: Optional[str]) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    if not value:
        return _DEFAULT_LEVEL
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger, configuring the root handler on first use."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=resolve_level(os.environ.get(LOG_LEVEL_ENV)), format=LOG_FORMAT)
    return logger
