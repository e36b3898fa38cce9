"""Recover the transaction and card tables embedded in one raw grid."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .models import RawGrid, SplitTables


def _cell(row: Sequence[str], index: int) -> str:
    if index < len(row):
        value = row[index]
        return "" if value is None else str(value)
    return ""


def is_blank_row(row: Sequence[str]) -> bool:
    return all(str(cell if cell is not None else "").strip() == "" for cell in row)


def is_last4_cell(value: str) -> bool:
    lowered = value.strip().lower()
    return "last_4" in lowered or "last4" in lowered


def is_name_cell(value: str) -> bool:
    return value.strip().lower() == "name"


def is_card_header(row: Sequence[str]) -> bool:
    """True when *row* names both a last-4 column and a ``name`` column."""

    cells = [str(cell if cell is not None else "") for cell in row]
    return any(is_last4_cell(cell) for cell in cells) and any(
        is_name_cell(cell) for cell in cells
    )


def find_transaction_header(grid: RawGrid) -> Optional[int]:
    for index, row in enumerate(grid):
        if not is_blank_row(row):
            return index
    return None


def find_card_header(grid: RawGrid, start: int) -> Optional[int]:
    for index in range(start, len(grid)):
        if is_card_header(grid[index]):
            return index
    return None


def card_columns(header: Sequence[str]) -> Tuple[int, int]:
    last4_col = -1
    name_col = -1
    for index, cell in enumerate(header):
        value = "" if cell is None else str(cell)
        if last4_col == -1 and is_last4_cell(value):
            last4_col = index
        if name_col == -1 and is_name_cell(value):
            name_col = index
    return last4_col, name_col


def split_tables(grid: RawGrid) -> SplitTables:
    """Split *grid* into header-keyed transaction rows and card rows.

    The first non-blank row is the transaction header. The card table starts
    at the first later row naming both a last-4 column and a ``name`` column;
    without one, every remaining row is a transaction row.
    """

    header_index = find_transaction_header(grid)
    if header_index is None:
        return SplitTables()

    tx_header = [_cell(grid[header_index], idx) for idx in range(len(grid[header_index]))]
    card_index = find_card_header(grid, header_index + 1)
    tx_end = card_index if card_index is not None else len(grid)

    transactions = [
        _zip_row(tx_header, grid[index]) for index in range(header_index + 1, tx_end)
    ]
    if card_index is None:
        return SplitTables(transactions=transactions)

    last4_col, name_col = card_columns(grid[card_index])
    cards: List[Dict[str, str]] = []
    for index in range(card_index + 1, len(grid)):
        row = grid[index]
        last_4 = _cell(row, last4_col).strip()
        name = _cell(row, name_col).strip()
        if not last_4 and not name:
            continue
        cards.append({"last_4": last_4, "name": name})
    return SplitTables(transactions=transactions, cards=cards)


def _zip_row(header: Sequence[str], row: Sequence[str]) -> Dict[str, str]:
    mapped: Dict[str, str] = {}
    for index, column in enumerate(header):
        mapped[column] = _cell(row, index)
    return mapped
