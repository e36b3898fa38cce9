"""Order history export parsing and person attribution."""

from .parsing import ParsedDataset, parse_order_file, parse_order_text, process_grid

__all__ = ["ParsedDataset", "parse_order_file", "parse_order_text", "process_grid"]

__version__ = "0.1.0"
