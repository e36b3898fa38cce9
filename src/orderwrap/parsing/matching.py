"""Token-set similarity between free-text person names."""

from __future__ import annotations

from typing import Optional, Sequence, Set

from rapidfuzz import fuzz

from .normalization import normalize_name


DEFAULT_TYPO_RATIO = 80.0
MIN_TYPO_TOKEN_LENGTH = 3


def name_tokens(value: str) -> Set[str]:
    return set(normalize_name(value).split())


def token_set_similarity(
    left: str, right: str, *, typo_ratio: float = DEFAULT_TYPO_RATIO
) -> float:
    """Return the Jaccard overlap of the two names' tokens as a 0..100 score.

    Tokens pair up when they are equal, or when both have at least three
    characters and their ``fuzz.ratio`` reaches *typo_ratio*, so a single
    typo ("bil" / "bill") still counts as a shared token. Each token pairs at
    most once.
    """

    norm_left = normalize_name(left)
    norm_right = normalize_name(right)
    if norm_left == norm_right:
        return 100.0

    tokens_left = set(norm_left.split())
    tokens_right = set(norm_right.split())
    if not tokens_left or not tokens_right:
        return 0.0

    shared = _count_shared_tokens(tokens_left, tokens_right, typo_ratio)
    union = len(tokens_left) + len(tokens_right) - shared
    return shared / union * 100.0


def _count_shared_tokens(left: Set[str], right: Set[str], typo_ratio: float) -> int:
    exact = left & right
    rest_left = sorted(left - exact)
    rest_right = sorted(right - exact)

    shared = len(exact)
    for token in rest_left:
        if len(token) < MIN_TYPO_TOKEN_LENGTH:
            continue
        best_index = -1
        best_score = 0.0
        for index, other in enumerate(rest_right):
            if len(other) < MIN_TYPO_TOKEN_LENGTH:
                continue
            score = fuzz.ratio(token, other)
            if score >= typo_ratio and score > best_score:
                best_index = index
                best_score = score
        if best_index >= 0:
            rest_right.pop(best_index)
            shared += 1
    return shared


def find_exact(target: str, candidates: Sequence[str]) -> Optional[str]:
    normalized = normalize_name(target)
    if not normalized:
        return None
    for candidate in candidates:
        if candidate.strip() and normalize_name(candidate) == normalized:
            return candidate
    return None


def fuzzy_match(
    target: str,
    candidates: Sequence[str],
    threshold: float = 60,
    *,
    typo_ratio: float = DEFAULT_TYPO_RATIO,
) -> Optional[str]:
    """Return the candidate that best matches *target* at or above *threshold*.

    An exact normalized match short-circuits the scan. Ties keep the first
    candidate seen.
    """

    if not target or not target.strip():
        return None

    exact = find_exact(target, candidates)
    if exact is not None:
        return exact

    best_match: Optional[str] = None
    best_score = 0.0
    for candidate in candidates:
        if not candidate.strip():
            continue
        score = token_set_similarity(target, candidate, typo_ratio=typo_ratio)
        if score > best_score and score >= threshold:
            best_match = candidate
            best_score = score
    return best_match

