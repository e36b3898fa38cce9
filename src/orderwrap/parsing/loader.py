"""Read an order export into a raw grid of text cells."""

from __future__ import annotations

import csv
import io
from pathlib import Path

from .exceptions import SourceFormatError
from .models import RawGrid


def parse_grid(text: str) -> RawGrid:
    """Parse CSV *text* into rows of cells, keeping blank rows."""

    if text.startswith("\ufeff"):
        text = text[1:]
    reader = csv.reader(io.StringIO(text, newline=""))
    return [list(row) for row in reader]


def read_grid(path: Path) -> RawGrid:
    path = Path(path)
    if not path.is_file():
        raise SourceFormatError(path=path, message="order export not found")
    try:
        with path.open("r", newline="", encoding="utf-8-sig") as fh:
            return [list(row) for row in csv.reader(fh)]
    except UnicodeDecodeError as exc:
        raise SourceFormatError(path=path, message=f"not valid UTF-8 ({exc.reason})") from exc
    except (OSError, csv.Error) as exc:
        raise SourceFormatError(path=path, message=f"failed to read CSV ({exc})") from exc
