"""Error and outcome types shared by the catalog and graph layers."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class CatalogLoadError(Exception):
    """Raised when a catalog source cannot be read or is malformed."""

    def __init__(self, message: str, *, source: str | Path | None = None, line_number: int | None = None) -> None:
        self.source = str(source) if source is not None else None
        self.line_number = line_number
        location = ""
        if self.source is not None:
            location = f"{self.source}:{line_number}: " if line_number is not None else f"{self.source}: "
        super().__init__(f"{location}{message}")


class AddOutcome(str, Enum):
    """Result of adding a characteristic or solution to a graph."""

    ADDED = "added"
    ALREADY_PRESENT = "already_present"
    NOT_IN_CATALOG = "not_in_catalog"

    @property
    def added(self) -> bool:
        return self is AddOutcome.ADDED
