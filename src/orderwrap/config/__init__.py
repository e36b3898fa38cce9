"""Public configuration API."""

from .loader import ConfigFiles, load_parsing_config
from .models import AttributionConfig, CategoryConfig, CategoryRule, ColumnsConfig, ParsingConfig

__all__ = [
    "AttributionConfig",
    "CategoryConfig",
    "CategoryRule",
    "ColumnsConfig",
    "ConfigFiles",
    "ParsingConfig",
    "load_parsing_config",
]
