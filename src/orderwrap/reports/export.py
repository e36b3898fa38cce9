"""Write transaction and summary exports to disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

import pandas as pd

from ..exceptions import OrderwrapError
from ..parsing.models import Transaction


EXPORT_COLUMNS = [
    "date",
    "person",
    "items",
    "total",
    "refund",
    "net_spend",
    "is_return",
    "payments",
    "order_id",
    "category",
]


class ReportError(OrderwrapError):
    pass


def export_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    records = [
        {
            "date": tx.date.isoformat() if tx.date else "",
            "person": tx.person,
            "items": tx.items,
            "total": f"{tx.total:.2f}",
            "refund": f"{tx.refund:.2f}",
            "net_spend": f"{tx.net_spend:.2f}",
            "is_return": "Yes" if tx.is_return else "No",
            "payments": tx.payments,
            "order_id": tx.order_id,
            "category": tx.category,
        }
        for tx in transactions
    ]
    return pd.DataFrame(records, columns=EXPORT_COLUMNS)


def write_transactions_csv(transactions: Sequence[Transaction], path: Path) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        export_frame(transactions).to_csv(path, index=False)
    except OSError as exc:
        raise ReportError(f"failed to write {path}: {exc}") from exc
    return path


def write_summary_json(summary: dict, path: Path) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(summary, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"failed to write {path}: {exc}") from exc
    return path
