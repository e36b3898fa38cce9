"""End-to-end pipeline from an order export to a :class:`ParsedDataset`."""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..config.models import ParsingConfig
from ..logging_setup import get_logger
from .attribution import backfill_recipients
from .derive import compute_total_total, derive_transaction
from .loader import parse_grid, read_grid
from .models import CardRecord, ParsedDataset, ParsingStats, RawGrid, RawRecord, Transaction
from .normalization import normalize_text, parse_money, to_raw_record
from .splitter import split_tables


logger = get_logger(__name__)


def parse_order_file(path: Path, config: Optional[ParsingConfig] = None) -> ParsedDataset:
    """Read and process the order export at *path*."""

    grid = read_grid(Path(path))
    logger.debug("read %d raw rows from %s", len(grid), path)
    return process_grid(grid, config)


def parse_order_text(text: str, config: Optional[ParsingConfig] = None) -> ParsedDataset:
    return process_grid(parse_grid(text), config)


def parse_cards(rows: Sequence[dict]) -> List[CardRecord]:
    cards: List[CardRecord] = []
    for row in rows:
        last_4 = str(row.get("last_4") or "").strip()
        name = str(row.get("name") or "").strip()
        if last_4 or name:
            cards.append(CardRecord(last_4=last_4, name=name))
    return cards


def process_grid(grid: RawGrid, config: Optional[ParsingConfig] = None) -> ParsedDataset:
    """Run every cleaning stage over an already-read grid."""

    config = config or ParsingConfig()

    tables = split_tables(grid)
    cards = parse_cards(tables.cards)

    non_empty = [
        row for row in tables.transactions
        if any(str(value or "").strip() for value in row.values())
    ]
    if not non_empty and not cards:
        logger.info("no transaction or card rows found")
        return ParsedDataset.empty()

    records = [
        to_raw_record(row, config.columns.required, config.columns.dropped)
        for row in non_empty
    ]
    logger.debug(
        "raw transaction rows: %d, non-empty: %d", len(tables.transactions), len(records)
    )
    unused = sorted({column for record in records for column in record.extra})
    if unused:
        logger.debug("columns not used: %s", ", ".join(unused))

    totalled = [(record, compute_total_total(record)) for record in records]
    non_zero = _drop_zero_totals(totalled, config.zero_tolerance)
    with_items = _drop_blank_items(non_zero)

    logger.debug(
        "sum before filters: %.2f, after filters: %.2f",
        sum(total for _, total in totalled),
        sum(total for _, total in with_items),
    )

    refunded = sum(1 for record, _ in with_items if _has_refund(record))
    logger.debug("rows with refunds: %d", refunded)

    filled = backfill_recipients((record for record, _ in with_items), cards)
    logger.debug("recipients filled from payment cards: %d", filled)

    transactions: List[Transaction] = []
    invalid_dates = 0
    unknown_people = 0
    people = set()
    for record, total_total in with_items:
        transaction = derive_transaction(record, cards, config, total_total=total_total)
        if transaction.date is None:
            invalid_dates += 1
        if transaction.person == config.attribution.unknown_label:
            unknown_people += 1
        people.add(transaction.person)
        transactions.append(transaction)

    stats = ParsingStats(
        transactions_loaded=len(records),
        rows_removed=len(records) - len(transactions),
        cards_loaded=len(cards),
        people_detected=tuple(sorted(people)),
        invalid_date_count=invalid_dates,
        unknown_person_count=unknown_people,
        final_transaction_count=len(transactions),
    )
    logger.info(
        "parsed %d transactions (%d removed), %d cards, %d people",
        stats.final_transaction_count,
        stats.rows_removed,
        stats.cards_loaded,
        len(stats.people_detected),
    )
    return ParsedDataset(transactions=tuple(transactions), cards=tuple(cards), stats=stats)


def _drop_zero_totals(
    rows: List[Tuple[RawRecord, float]], tolerance: float
) -> List[Tuple[RawRecord, float]]:
    kept: List[Tuple[RawRecord, float]] = []
    for record, total_total in rows:
        if total_total is None or math.isnan(total_total) or abs(total_total) <= tolerance:
            logger.debug(
                "dropping order %r: total=%r gift=%r total_total=%r",
                record.order_id,
                record.total,
                record.gift,
                total_total,
            )
            continue
        kept.append((record, total_total))
    return kept


def _drop_blank_items(
    rows: List[Tuple[RawRecord, float]]
) -> List[Tuple[RawRecord, float]]:
    kept: List[Tuple[RawRecord, float]] = []
    for record, total_total in rows:
        if not normalize_text(record.items):
            logger.debug("dropping order %r: blank items", record.order_id)
            continue
        kept.append((record, total_total))
    return kept


def _has_refund(record: RawRecord) -> bool:
    return parse_money(record.refund) != 0
