"""Keyword classifier for order item descriptions."""

from __future__ import annotations

from typing import Optional

from ..config.models import CategoryConfig


def infer_category(
    items: Optional[str],
    existing: Optional[str] = None,
    config: Optional[CategoryConfig] = None,
) -> str:
    """Classify *items* into a spending category.

    A non-blank *existing* category is returned lowercased and trimmed.
    Otherwise the rules are scanned in order and the first one with a
    keyword contained in the description wins.
    """

    if existing and existing.strip():
        return existing.strip().lower()

    config = config or CategoryConfig()
    if not items or not items.strip():
        return config.default

    text = items.lower()
    for rule in config.rules:
        for keyword in rule.keywords:
            if keyword in text:
                return rule.name
    return config.default
