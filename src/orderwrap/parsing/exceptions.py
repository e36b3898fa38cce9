"""Order export loading errors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..exceptions import OrderwrapError


class ParsingError(OrderwrapError):
    """Base class for order export issues."""


@dataclass
class SourceFormatError(ParsingError):
    """Raised when the export file cannot be read at all."""

    path: Path
    message: str

    def __post_init__(self) -> None:
        super().__init__(f"{self.message} ({self.path})")
