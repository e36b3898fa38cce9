"""Per-row derivation of transaction fields."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..config.models import ParsingConfig
from .attribution import assign_person
from .categorize import infer_category
from .models import CardRecord, RawRecord, Transaction
from .normalization import normalize_text, parse_money


def parse_date(value: Optional[str], fmt: str = "%Y-%m-%d") -> Optional[date]:
    text = normalize_text(value)
    if not text:
        return None
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError:
        return None


def compute_total_total(record: RawRecord) -> float:
    """Charge amount before refunds: card total plus gift card, to the cent."""

    return round(parse_money(record.total) + parse_money(record.gift), 2)


def derive_transaction(
    record: RawRecord,
    cards: Sequence[CardRecord],
    config: ParsingConfig,
    total_total: Optional[float] = None,
) -> Transaction:
    if total_total is None:
        total_total = compute_total_total(record)

    total = parse_money(record.total)
    gift = parse_money(record.gift)
    refund = parse_money(record.refund)
    observed = parse_date(record.date, config.date_format)

    person = assign_person(record.to, record.payments, cards, config.attribution)
    category = infer_category(record.items, record.category, config.categories)

    return Transaction(
        order_id=record.order_id,
        order_url=record.order_url,
        items=record.items,
        payments=record.payments,
        to=normalize_text(record.to),
        date=observed,
        total=total,
        gift=gift,
        refund=refund,
        total_total=total_total,
        net_spend=total_total - refund,
        is_return=refund > 0,
        person=person,
        year=observed.year if observed else None,
        month=observed.month if observed else None,
        category=category,
    )
