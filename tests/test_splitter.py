"""Tests for locating the transaction and card tables in one grid."""

from __future__ import annotations

from orderwrap.parsing import parse_grid, split_tables
from orderwrap.parsing.splitter import card_columns, find_card_header, is_card_header


def test_is_card_header_needs_both_markers() -> None:
    assert is_card_header(["Last_4", "Name"])
    assert is_card_header(["card_last4_digits", " NAME ", "notes"])
    assert not is_card_header(["last_4", "names"])
    assert not is_card_header(["to", "name"])
    assert not is_card_header([])


def test_card_columns_take_first_marker() -> None:
    assert card_columns(["", "name", "last_4", "last4", "name"]) == (2, 1)


def test_empty_and_blank_grids_split_to_nothing() -> None:
    assert split_tables([]).transactions == []
    tables = split_tables([[], ["", "  "], [""]])
    assert tables.transactions == []
    assert tables.cards == []


def test_split_without_card_table() -> None:
    grid = [
        [],
        ["to", "total", "items"],
        ["John Smith", "$10.00", "Widget"],
        ["Jane Doe", "$5.00"],
        [],
    ]
    tables = split_tables(grid)
    assert tables.cards == []
    assert tables.transactions == [
        {"to": "John Smith", "total": "$10.00", "items": "Widget"},
        {"to": "Jane Doe", "total": "$5.00", "items": ""},
        {"to": "", "total": "", "items": ""},
    ]


def test_split_with_card_table() -> None:
    grid = parse_grid(
        "order id,to,total,items\n"
        "1,John Smith,$10.00,Widget\n"
        ",,,\n"
        "card,Last_4,Name\n"
        "Visa,1234,Jane Doe\n"
        ",,\n"
        "Amex,5678,\n"
        "Visa,,\n"
    )
    tables = split_tables(grid)
    assert tables.transactions == [
        {"order id": "1", "to": "John Smith", "total": "$10.00", "items": "Widget"},
        {"order id": "", "to": "", "total": "", "items": ""},
    ]
    assert tables.cards == [
        {"last_4": "1234", "name": "Jane Doe"},
        {"last_4": "5678", "name": ""},
    ]


def test_card_header_search_starts_after_transaction_header() -> None:
    grid = [["last_4", "name"], ["1234", "Jane Doe"]]
    assert find_card_header(grid, 1) is None
    tables = split_tables(grid)
    assert tables.cards == []
    assert tables.transactions == [{"last_4": "1234", "name": "Jane Doe"}]


def test_parse_grid_handles_quotes_and_bom() -> None:
    grid = parse_grid('\ufeffto,items\n"Smith, John","Widget, large"\n\n')
    assert grid[0] == ["to", "items"]
    assert grid[1] == ["Smith, John", "Widget, large"]
    assert grid[2] == []
