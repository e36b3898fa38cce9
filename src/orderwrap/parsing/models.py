"""Data models for order export parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

RawGrid = List[List[str]]


@dataclass
class RawRecord:
    """One transaction row after header normalization, before derivation."""

    to: str = ""
    payments: str = ""
    date: str = ""
    total: str = ""
    refund: str = ""
    gift: str = ""
    order_id: str = ""
    order_url: str = ""
    items: str = ""
    category: str = ""
    extra: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CardRecord:
    last_4: str
    name: str


@dataclass
class SplitTables:
    """Header-keyed transaction rows and card rows recovered from one grid."""

    transactions: List[Dict[str, str]] = field(default_factory=list)
    cards: List[Dict[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class Transaction:
    order_id: str
    order_url: str
    items: str
    payments: str
    to: str
    date: Optional[date]
    total: float
    gift: float
    refund: float
    total_total: float
    net_spend: float
    is_return: bool
    person: str
    year: Optional[int]
    month: Optional[int]
    category: str
    order_count: int = 1

    @property
    def month_start(self) -> Optional[date]:
        if self.date is None:
            return None
        return self.date.replace(day=1)

    def as_dict(self) -> dict:
        return {
            "order_id": self.order_id,
            "order_url": self.order_url,
            "items": self.items,
            "payments": self.payments,
            "to": self.to,
            "date": self.date.isoformat() if self.date else None,
            "total": self.total,
            "gift": self.gift,
            "refund": self.refund,
            "total_total": self.total_total,
            "net_spend": self.net_spend,
            "is_return": self.is_return,
            "person": self.person,
            "year": self.year,
            "month": self.month,
            "order_count": self.order_count,
            "category": self.category,
        }


@dataclass(frozen=True)
class ParsingStats:
    transactions_loaded: int = 0
    rows_removed: int = 0
    cards_loaded: int = 0
    people_detected: Tuple[str, ...] = ()
    invalid_date_count: int = 0
    unknown_person_count: int = 0
    final_transaction_count: int = 0

    def as_dict(self) -> dict:
        return {
            "transactions_loaded": self.transactions_loaded,
            "rows_removed": self.rows_removed,
            "cards_loaded": self.cards_loaded,
            "people_detected": list(self.people_detected),
            "invalid_date_count": self.invalid_date_count,
            "unknown_person_count": self.unknown_person_count,
            "final_transaction_count": self.final_transaction_count,
        }


@dataclass(frozen=True)
class ParsedDataset:
    """Cleaned transactions, card metadata and parse statistics for one file."""

    transactions: Tuple[Transaction, ...] = ()
    cards: Tuple[CardRecord, ...] = ()
    stats: ParsingStats = field(default_factory=ParsingStats)

    @classmethod
    def empty(cls) -> "ParsedDataset":
        return cls()

    def as_dict(self, include_transactions: bool = True) -> dict:
        payload: dict = {
            "stats": self.stats.as_dict(),
            "cards": [{"last_4": card.last_4, "name": card.name} for card in self.cards],
        }
        if include_transactions:
            payload["transactions"] = [tx.as_dict() for tx in self.transactions]
        return payload

