"""Suggested download names for exported layouts."""
from __future__ import annotations

import re
from typing import Optional

EXPORT_SUFFIX = "-yootheme.json"
DEFAULT_PAGE_SLUG = "page"

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]")


def page_filename(slug: Optional[str]) -> str:
    """Return ``<slug>-yootheme.json``, falling back to ``page`` for blank slugs."""
    return f"{slug or DEFAULT_PAGE_SLUG}{EXPORT_SUFFIX}"


def project_filename(project_name: str) -> str:
    """Lower-case the project name and replace every non ``[a-z0-9]`` character with a dash."""
    return f"{_NON_SLUG_CHARS.sub('-', project_name.lower())}{EXPORT_SUFFIX}"
