"""Tests for token-set name similarity and candidate search."""

from __future__ import annotations

import pytest

from orderwrap.parsing import fuzzy_match, token_set_similarity


def test_exact_normalized_names_score_100() -> None:
    assert token_set_similarity("John Smith", "  john   SMITH. ") == 100.0


def test_similarity_is_token_jaccard() -> None:
    assert token_set_similarity("Marian V Lally", "Marian Lally") == pytest.approx(200 / 3)
    assert token_set_similarity("John Smith", "Jane Smith") == pytest.approx(100 / 3)
    assert token_set_similarity("Bill Lally", "Ann Jones") == 0.0


def test_single_typo_tokens_count_as_shared() -> None:
    assert token_set_similarity("Bil Lally", "Bill Lally") == 100.0
    assert token_set_similarity("Tom Lee", "Tim Lee") == pytest.approx(100 / 3)


def test_blank_names_score_zero() -> None:
    assert token_set_similarity("", "Bill Lally") == 0.0


def test_similarity_is_symmetric() -> None:
    pairs = [("Bil Lally", "Bill Lally"), ("Marian V Lally", "Marian Lally"), ("a b c", "c d")]
    for left, right in pairs:
        assert token_set_similarity(left, right) == token_set_similarity(right, left)


def test_fuzzy_match_rejects_blank_target() -> None:
    assert fuzzy_match("   ", ["Bill Lally"]) is None
    assert fuzzy_match("", ["Bill Lally"]) is None


def test_fuzzy_match_prefers_exact_candidate() -> None:
    candidates = ["John Smith Jr", "john smith"]
    assert fuzzy_match("John Smith", candidates, 40) == "john smith"


def test_fuzzy_match_threshold_and_ties() -> None:
    candidates = ["Marian Lally", "Bill Lally"]
    assert fuzzy_match("Marian V Lally", candidates, 60) == "Marian Lally"
    assert fuzzy_match("Jane Lally", candidates, 60) is None
    assert fuzzy_match("Jane Lally", candidates, 30) == "Marian Lally"


def test_fuzzy_match_skips_blank_candidates() -> None:
    assert fuzzy_match("Bill Lally", ["", "  ", "Bill Lally"]) == "Bill Lally"
