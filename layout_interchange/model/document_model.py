"""Aggregate results handed back to callers of the pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from layout_interchange.model.foreign_model import ForeignLayout


@dataclass(slots=True)
class ExportResult:
    """YOOtheme document plus the file name suggested for downloading it."""

    layout: ForeignLayout
    filename: str


@dataclass(slots=True)
class ImportSummary:
    """Outcome of importing a layout into a page's element store."""

    imported: int
    element_ids: List[int] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Imported {self.imported} element(s) from YOOtheme layout"
