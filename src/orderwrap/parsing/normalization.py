"""Primitive parsers for money amounts, free text and column headers."""

from __future__ import annotations

import math
import re
from typing import Dict, Iterable, Mapping, Optional

from .models import RawRecord


_NULL_TOKENS = {"nan", "none"}
_MONEY_STRIP_RE = re.compile(r"[$€£¥,\s]")
_HEADER_SEPARATOR_RE = re.compile(r"[_\-]")
_HEADER_DROP_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")

RECORD_FIELDS = (
    "to",
    "payments",
    "date",
    "total",
    "refund",
    "gift",
    "order_id",
    "order_url",
    "items",
    "category",
)


def parse_money(value: Optional[str]) -> float:
    """Parse *value* as a money amount, returning ``0.0`` when it is not one."""

    if value is None:
        return 0.0
    text = str(value).strip()
    if text == "" or text.lower() in _NULL_TOKENS:
        return 0.0
    cleaned = _MONEY_STRIP_RE.sub("", text)
    try:
        amount = float(cleaned)
    except ValueError:
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def normalize_text(value: Optional[str]) -> str:
    if value is None:
        return ""
    text = str(value).strip()
    if text.lower() in _NULL_TOKENS:
        return ""
    return text


def normalize_header(value: Optional[str]) -> str:
    """Collapse a header to lowercase alphanumeric tokens joined by ``_``.

    Underscores and hyphens separate tokens, other punctuation is dropped,
    so ``"Order ID"``, ``"order-id "`` and ``"order_id"`` all become
    ``order_id``.
    """

    if value is None:
        return ""
    lowered = _HEADER_SEPARATOR_RE.sub(" ", str(value).lower())
    stripped = _HEADER_DROP_RE.sub("", lowered)
    return "_".join(stripped.split())


def normalize_row(
    row: Mapping[str, str],
    required: Iterable[str],
    dropped: Iterable[str] = (),
) -> Dict[str, str]:
    """Normalize header keys and values, fill required keys, remove dropped ones."""

    normalized: Dict[str, str] = {}
    for key, value in row.items():
        normalized[normalize_header(key)] = normalize_text(value)
    for column in required:
        normalized.setdefault(column, "")
    for column in dropped:
        normalized.pop(column, None)
    return normalized


def to_raw_record(
    row: Mapping[str, str],
    required: Iterable[str],
    dropped: Iterable[str] = (),
) -> RawRecord:
    """Build a record from the required columns; everything else goes to ``extra``.

    A record field that is not required is left blank even when the column
    is present. The supplied ``category`` column is always read.
    """

    required = list(required)
    normalized = normalize_row(row, required, dropped)
    readable = set(required) | {"category"}
    known = {
        name: normalized.pop(name, "") if name in readable else ""
        for name in RECORD_FIELDS
    }
    return RawRecord(**known, extra=normalized)


def normalize_name(value: str) -> str:
    """Lowercase a person name, drop ``.`` and ``,`` and collapse whitespace."""

    lowered = value.lower().replace(".", "").replace(",", "")
    return _WHITESPACE_RE.sub(" ", lowered).strip()


def title_case(value: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in value.split())
