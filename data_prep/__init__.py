"""
Data preparation — loading transaction exports, normalising them, validation.
"""

from .loader import load_transactions_csv, load_transactions_excel, load_transactions_json
from .records import TransactionRecord, parse_records
from .repository import (
    TransactionRepository,
    InMemoryTransactionRepository,
    FileTransactionRepository,
    resolve_transactions,
)
from .transactions import (
    canonicalize_columns,
    prepare_transactions,
    filter_transactions,
)
from .validators import ValidationResult, validate_transactions

__all__ = [
    "load_transactions_csv",
    "load_transactions_excel",
    "load_transactions_json",
    "TransactionRecord",
    "parse_records",
    "TransactionRepository",
    "InMemoryTransactionRepository",
    "FileTransactionRepository",
    "resolve_transactions",
    "canonicalize_columns",
    "prepare_transactions",
    "filter_transactions",
    "ValidationResult",
    "validate_transactions",
]
