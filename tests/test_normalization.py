"""Tests for money, text and header normalization."""

from __future__ import annotations

import pytest

from orderwrap.parsing import normalize_header, normalize_text, parse_money
from orderwrap.parsing.normalization import normalize_name, normalize_row, title_case, to_raw_record


@pytest.mark.parametrize(
    "value, expected",
    [
        ("$10.00", 10.0),
        (" $1,234.56 ", 1234.56),
        ("-$5.25", -5.25),
        ("42", 42.0),
        ("", 0.0),
        (None, 0.0),
        ("nan", 0.0),
        ("NaN", 0.0),
        ("None", 0.0),
        ("abc", 0.0),
        ("$12.00 USD", 0.0),
        ("inf", 0.0),
    ],
)
def test_parse_money(value, expected) -> None:
    assert parse_money(value) == pytest.approx(expected)


def test_normalize_text_treats_null_tokens_as_blank() -> None:
    assert normalize_text("  Widget ") == "Widget"
    assert normalize_text("nan") == ""
    assert normalize_text(" NONE ") == ""
    assert normalize_text(None) == ""


def test_normalize_header_collapses_variants() -> None:
    assert normalize_header("Order ID") == "order_id"
    assert normalize_header("order-id ") == "order_id"
    assert normalize_header("  Order   ID ") == "order_id"
    assert normalize_header("Shipping Refund") == "shipping_refund"
    assert normalize_header("order_url") == "order_url"
    assert normalize_header("Item(s)") == "items"
    assert normalize_header("Total ($)") == "total"
    assert normalize_header("TO") == "to"


def test_normalize_row_fills_required_and_drops_columns() -> None:
    row = normalize_row(
        {"To": " Jane ", "Tax": "$1.00", "Shipping": "$2.00", "Items": "nan"},
        required=["to", "items", "total"],
        dropped=["tax", "shipping", "shipping_refund"],
    )
    assert row == {"to": "Jane", "items": "", "total": ""}


def test_to_raw_record_keeps_unknown_columns_as_extra() -> None:
    record = to_raw_record(
        {"to": "Jane", "total": "$3.00", "Gift Wrap": "yes", "tax": "$0.20"},
        required=["to", "total"],
        dropped=["tax"],
    )
    assert record.to == "Jane"
    assert record.total == "$3.00"
    assert record.items == ""
    assert record.extra == {"gift_wrap": "yes"}


def test_to_raw_record_reads_only_required_fields() -> None:
    record = to_raw_record(
        {"to": "Jane", "total": "$3.00", "items": "Widget", "Category": "Gifts"},
        required=["to", "total"],
    )
    assert record.items == ""
    assert record.category == "Gifts"
    assert record.extra == {"items": "Widget"}


def test_name_helpers() -> None:
    assert normalize_name("  Smith,  John Q. ") == "smith john q"
    assert title_case("mARY   ann o'neil") == "Mary Ann O'neil"
