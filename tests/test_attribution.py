"""Tests for person attribution and card-suffix extraction."""

from __future__ import annotations

from orderwrap.config import AttributionConfig
from orderwrap.parsing import CardRecord, RawRecord, assign_person, backfill_recipients, extract_last4
from orderwrap.parsing.attribution import card_lookup, card_names, extract_last4_ending_in, looks_like_name
from orderwrap.parsing.matching import find_exact


CARDS = [
    CardRecord(last_4="1234", name="Jane Doe"),
    CardRecord(last_4="5678", name="Bill Lally"),
    CardRecord(last_4="9999", name="Marian Lally"),
    CardRecord(last_4="4321", name=""),
]


def test_extract_last4_patterns() -> None:
    assert extract_last4("Visa ending in 1234") == "1234"
    assert extract_last4("Visa ****5678 (primary)") == "5678"
    assert extract_last4("Card 2020 • 4321 charged") == "4321"
    assert extract_last4("Gift card 2023 balance") == "2023"
    assert extract_last4("Gift card balance") is None
    assert extract_last4("") is None


def test_extract_last4_ending_in_prefers_phrase() -> None:
    assert extract_last4_ending_in("2021 order, Visa ending in 1234") == "1234"
    assert extract_last4_ending_in("Mastercard 5678") == "5678"
    assert extract_last4_ending_in("Gift card") is None


def test_exact_match_wins() -> None:
    assert find_exact("jane doe", card_names(CARDS)) == "Jane Doe"
    assert assign_person("jane doe", "", CARDS) == "Jane Doe"


def test_reordered_name_matches_through_token_overlap() -> None:
    assert find_exact("Lally, Bill", card_names(CARDS)) is None
    assert assign_person("Lally, Bill", "", CARDS) == "Bill Lally"


def test_fuzzy_match_resolves_typo() -> None:
    assert assign_person("Bil Lally", "", CARDS) == "Bill Lally"


def test_extra_middle_initial_matches() -> None:
    assert assign_person("Marian V Lally", "", CARDS) == "Marian Lally"


def test_containment_match() -> None:
    cards = [CardRecord(last_4="1111", name="Robert Fitzgerald-Jones")]
    assert assign_person("Fitzgerald", "", cards) == "Robert Fitzgerald-Jones"


def test_unmatched_name_like_recipient_is_title_cased() -> None:
    assert assign_person("john SMITH", "", CARDS) == "John Smith"
    assert assign_person("Christopher", "", CARDS) == "Christopher"


def test_short_recipient_falls_back_to_payments() -> None:
    assert assign_person("Bo", "Visa ending in 5678", CARDS) == "Bill Lally"
    assert assign_person("Bo", "", CARDS) == "Unknown"


def test_payments_lookup_when_recipient_blank() -> None:
    assert assign_person("", "Visa ending in 1234", CARDS) == "Jane Doe"
    assert assign_person("  ", "Mastercard ****9999", CARDS) == "Marian Lally"


def test_card_without_name_does_not_resolve() -> None:
    assert assign_person("", "Visa ending in 4321", CARDS) == "Unknown"
    assert assign_person(None, None, CARDS) == "Unknown"


def test_unknown_label_is_configurable() -> None:
    config = AttributionConfig(unknown_label="Nobody")
    assert assign_person("", "", CARDS, config) == "Nobody"


def test_assignment_is_deterministic() -> None:
    results = {assign_person("Bil Lally", "Visa 1234", CARDS) for _ in range(5)}
    assert results == {"Bill Lally"}


def test_backfill_recipients_uses_card_table() -> None:
    records = [
        RawRecord(to="", payments="Visa ending in 1234"),
        RawRecord(to="Someone Else", payments="Visa ending in 1234"),
        RawRecord(to="nan", payments="Amex 5678"),
        RawRecord(to="", payments="Visa ending in 0000"),
    ]
    filled = backfill_recipients(records, CARDS)
    assert filled == 2
    assert [record.to for record in records] == ["Jane Doe", "Someone Else", "Bill Lally", ""]


def test_card_lookup_keeps_first_named_card() -> None:
    cards = [CardRecord("1234", "Jane Doe"), CardRecord("1234", "John Doe"), CardRecord("", "Ann")]
    assert card_lookup(cards) == {"1234": "Jane Doe"}


def test_looks_like_name() -> None:
    assert looks_like_name("Jo Li")
    assert looks_like_name("Christopher")
    assert not looks_like_name("Bob")
