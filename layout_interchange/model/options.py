"""Keyword options accepted by the import and export pipelines."""
from __future__ import annotations

from dataclasses import dataclass

EMPTY_PAGE_TEXT = "Empty page"


@dataclass(frozen=True, slots=True)
class ImportOptions:
    """Controls how an imported batch lands in an existing page.

    ``replace`` deletes the page's current elements first. Otherwise the
    imported root elements are ordered after the page's existing roots.
    """

    replace: bool = False


@dataclass(frozen=True, slots=True)
class ExportOptions:
    """Controls the YOOtheme document produced for a page."""

    empty_page_text: str = EMPTY_PAGE_TEXT
    default_heading_element: str = "h2"
    button_style: str = "primary"
