"""
Core package — schema definitions, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    TRANSACTION_COLUMNS,
    PROJECTION_COLUMNS,
    TRANSACTION_TYPES,
    CATEGORY_LABELS,
    MONTH_NAMES,
    category_name,
)
from .config import ForecastConfig
from .utils import require_columns, month_start, month_starts, month_label
from .logging_setup import setup_logging

__all__ = [
    "TRANSACTION_COLUMNS",
    "PROJECTION_COLUMNS",
    "TRANSACTION_TYPES",
    "CATEGORY_LABELS",
    "MONTH_NAMES",
    "category_name",
    "ForecastConfig",
    "require_columns",
    "month_start",
    "month_starts",
    "month_label",
    "setup_logging",
]
