"""Aggregates over cleaned transactions for dashboards and exports."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from ..parsing.models import Transaction


ALL_PEOPLE = "All"

FRAME_COLUMNS = [
    "order_id",
    "order_url",
    "items",
    "payments",
    "to",
    "date",
    "total",
    "gift",
    "refund",
    "total_total",
    "net_spend",
    "is_return",
    "person",
    "year",
    "month",
    "order_count",
    "category",
]


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    records = [
        {column: getattr(tx, column) for column in FRAME_COLUMNS}
        for tx in transactions
    ]
    return pd.DataFrame(records, columns=FRAME_COLUMNS)


def filter_transactions(
    transactions: Sequence[Transaction],
    *,
    person: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    exclude_returns: bool = False,
) -> List[Transaction]:
    """Apply the dashboard filters; undated rows fail any date bound."""

    selected: List[Transaction] = []
    for tx in transactions:
        if person and person != ALL_PEOPLE and tx.person != person:
            continue
        if start is not None and (tx.date is None or tx.date < start):
            continue
        if end is not None and (tx.date is None or tx.date > end):
            continue
        if exclude_returns and tx.is_return:
            continue
        selected.append(tx)
    return selected


def compute_kpis(transactions: Sequence[Transaction]) -> dict:
    frame = transactions_frame(transactions)
    total_spend = float(frame["total_total"].sum()) if not frame.empty else 0.0
    orders = int(frame["order_count"].sum()) if not frame.empty else 0
    returns = int(frame["is_return"].sum()) if not frame.empty else 0
    return {
        "total_spend": round(total_spend, 2),
        "orders": orders,
        "returns": returns,
        "return_rate": round(returns / orders * 100, 2) if orders else 0.0,
        "avg_order_value": round(total_spend / orders, 2) if orders else 0.0,
    }


def monthly_series(transactions: Sequence[Transaction]) -> List[dict]:
    frame = transactions_frame(transactions)
    frame = frame[frame["date"].notna()]
    if frame.empty:
        return []
    frame = frame.assign(
        month_label=frame["date"].map(lambda value: value.strftime("%Y-%m"))
    )
    grouped = (
        frame.groupby(["month_label", "person"], sort=True)
        .agg(spend=("total_total", "sum"), orders=("order_count", "sum"))
        .reset_index()
    )
    return [
        {
            "month": row.month_label,
            "spend": round(float(row.spend), 2),
            "orders": int(row.orders),
            "person": row.person,
        }
        for row in grouped.itertuples(index=False)
    ]


def top_spenders(transactions: Sequence[Transaction], limit: int = 10) -> List[dict]:
    return _rollup(transactions, "person", limit=limit)


def category_rollup(transactions: Sequence[Transaction]) -> List[dict]:
    return _rollup(transactions, "category")


def _rollup(
    transactions: Sequence[Transaction], key: str, limit: Optional[int] = None
) -> List[dict]:
    frame = transactions_frame(transactions)
    if frame.empty:
        return []
    grouped = (
        frame.groupby(key, sort=False)
        .agg(spend=("total_total", "sum"), orders=("order_count", "sum"))
        .reset_index()
    )
    grouped["spend"] = grouped["spend"].round(2)
    grouped = grouped.sort_values(["spend", key], ascending=[False, True], kind="mergesort")
    if limit is not None:
        grouped = grouped.head(limit)
    return [
        {key: getattr(row, key), "spend": float(row.spend), "orders": int(row.orders)}
        for row in grouped.itertuples(index=False)
    ]


def build_summary(transactions: Sequence[Transaction]) -> dict:
    """Assemble the JSON summary: KPIs, monthly series, top spenders, categories."""

    return {
        "kpis": compute_kpis(transactions),
        "monthly_series": monthly_series(transactions),
        "top_spenders": top_spenders(transactions),
        "categories": category_rollup(transactions),
    }
