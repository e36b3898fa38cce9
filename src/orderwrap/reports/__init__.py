"""Aggregations and exports over a parsed order dataset."""

from .export import ReportError, export_frame, write_summary_json, write_transactions_csv
from .summary import (
    ALL_PEOPLE,
    build_summary,
    category_rollup,
    compute_kpis,
    filter_transactions,
    monthly_series,
    top_spenders,
    transactions_frame,
)

__all__ = [
    "ALL_PEOPLE",
    "ReportError",
    "build_summary",
    "category_rollup",
    "compute_kpis",
    "export_frame",
    "filter_transactions",
    "monthly_series",
    "top_spenders",
    "transactions_frame",
    "write_summary_json",
    "write_transactions_csv",
]
