"""Resolve which person a transaction belongs to."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Sequence

from ..config.models import AttributionConfig
from .matching import find_exact, fuzzy_match
from .models import CardRecord, RawRecord
from .normalization import normalize_name, normalize_text, title_case


_LAST4_PATTERNS = (
    re.compile(r"\b(\d{4})\s*$", re.MULTILINE),
    re.compile(r"[•*·]\s*(\d{4})\b"),
    re.compile(r"\b(\d{4})\b"),
)
_ENDING_IN_RE = re.compile(r"ending\s+in\s+(\d{4})", re.IGNORECASE)
_ANY_LAST4_RE = re.compile(r"\b(\d{4})\b")


def extract_last4(payments: Optional[str]) -> Optional[str]:
    """Pull a 4-digit card suffix out of free-text payment details."""

    if not payments:
        return None
    for pattern in _LAST4_PATTERNS:
        match = pattern.search(payments)
        if match:
            return match.group(1)
    return None


def extract_last4_ending_in(payments: Optional[str]) -> Optional[str]:
    """Like :func:`extract_last4` but prefers the ``ending in NNNN`` phrasing."""

    if not payments:
        return None
    match = _ENDING_IN_RE.search(payments)
    if match:
        return match.group(1)
    match = _ANY_LAST4_RE.search(payments)
    if match:
        return match.group(1)
    return None


def card_names(cards: Iterable[CardRecord]) -> List[str]:
    return [card.name for card in cards if card.name.strip()]


def card_lookup(cards: Iterable[CardRecord]) -> Dict[str, str]:
    """Map last-4 digits to holder name; the first card listed wins."""

    lookup: Dict[str, str] = {}
    for card in cards:
        last_4 = card.last_4.strip()
        name = card.name.strip()
        if last_4 and name:
            lookup.setdefault(last_4, name)
    return lookup


def looks_like_name(value: str) -> bool:
    normalized = normalize_name(value)
    return len(normalized.split()) >= 2 or len(normalized) > 5


def match_recipient(
    to: str, names: Sequence[str], config: AttributionConfig
) -> Optional[str]:
    """Match a free-text recipient against known card holder names."""

    exact = find_exact(to, names)
    if exact is not None:
        return exact

    for threshold in (config.strict_threshold, config.loose_threshold):
        matched = fuzzy_match(to, names, threshold, typo_ratio=config.token_typo_ratio)
        if matched is not None:
            return matched

    normalized_to = normalize_name(to)
    for name in names:
        normalized_name = normalize_name(name)
        if not normalized_name:
            continue
        if normalized_to in normalized_name or normalized_name in normalized_to:
            if (
                len(normalized_name) > config.min_containment_length
                and len(normalized_to) > config.min_containment_length
            ):
                return name
    return None


def assign_person(
    to: Optional[str],
    payments: Optional[str],
    cards: Sequence[CardRecord],
    config: Optional[AttributionConfig] = None,
) -> str:
    """Return the person label for one transaction.

    A populated recipient is matched against card holders (exact, fuzzy at
    the strict then loose threshold, substring containment) and otherwise
    title-cased when it looks like a name. Failing that, the card suffix in
    *payments* is looked up in *cards*. Anything unresolved is labelled
    ``config.unknown_label``.
    """

    config = config or AttributionConfig()
    to = (to or "").strip()
    payments = (payments or "").strip()

    if to:
        matched = match_recipient(to, card_names(cards), config)
        if matched is not None:
            return matched
        if looks_like_name(to):
            return title_case(to)

    if payments:
        last_4 = extract_last4(payments)
        if last_4:
            for card in cards:
                if card.last_4 == last_4 and card.name.strip():
                    return card.name
    return config.unknown_label


def backfill_recipients(records: Iterable[RawRecord], cards: Sequence[CardRecord]) -> int:
    """Fill blank ``to`` fields from the card named in ``payments``.

    Returns the number of records updated.
    """

    lookup = card_lookup(cards)
    if not lookup:
        return 0

    filled = 0
    for record in records:
        if normalize_text(record.to):
            continue
        payments = normalize_text(record.payments)
        last_4 = extract_last4_ending_in(payments)
        if last_4 and last_4 in lookup:
            record.to = lookup[last_4]
            filled += 1
    return filled
