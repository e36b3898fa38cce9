"""Order export parsing: table splitting, normalization and attribution."""

from .attribution import assign_person, backfill_recipients, extract_last4
from .categorize import infer_category
from .exceptions import ParsingError, SourceFormatError
from .loader import parse_grid, read_grid
from .matching import fuzzy_match, token_set_similarity
from .models import (
    CardRecord,
    ParsedDataset,
    ParsingStats,
    RawGrid,
    RawRecord,
    SplitTables,
    Transaction,
)
from .normalization import normalize_header, normalize_text, parse_money
from .pipeline import parse_order_file, parse_order_text, process_grid
from .splitter import split_tables

__all__ = [
    "CardRecord",
    "ParsedDataset",
    "ParsingError",
    "ParsingStats",
    "RawGrid",
    "RawRecord",
    "SourceFormatError",
    "SplitTables",
    "Transaction",
    "assign_person",
    "backfill_recipients",
    "extract_last4",
    "fuzzy_match",
    "infer_category",
    "normalize_header",
    "normalize_text",
    "parse_grid",
    "parse_money",
    "parse_order_file",
    "parse_order_text",
    "process_grid",
    "read_grid",
    "split_tables",
    "token_set_similarity",
]
