"""
Transaction store interface.

The forecast only ever reads transactions; where they live (browser storage,
a hosted database, a CSV export) is the store's business.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union, runtime_checkable

import pandas as pd

from .loader import load_transactions_csv, load_transactions_excel, load_transactions_json
from .transactions import TransactionsLike, prepare_transactions


@runtime_checkable
class TransactionRepository(Protocol):
    """Read-only source of transactions."""

    def list(self) -> pd.DataFrame:
        ...


class InMemoryTransactionRepository:
    """Holds a fixed snapshot. list() returns a fresh copy each call."""

    def __init__(self, transactions: TransactionsLike = ()):
        self._frame = prepare_transactions(transactions)

    def list(self) -> pd.DataFrame:
        return self._frame.copy()

    def __len__(self) -> int:
        return len(self._frame)


class FileTransactionRepository:
    """Reads a CSV, JSON or Excel export on every list() call."""

    _LOADERS = {
        ".csv": load_transactions_csv,
        ".json": load_transactions_json,
        ".xlsx": load_transactions_excel,
    }

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        if self.path.suffix.lower() not in self._LOADERS:
            raise ValueError(f"Unsupported transaction file type: {self.path.suffix!r}")

    def list(self) -> pd.DataFrame:
        return self._LOADERS[self.path.suffix.lower()](self.path)


def resolve_transactions(source: Union[TransactionRepository, TransactionsLike]) -> pd.DataFrame:
    """Accept either a repository or a raw collection and return the canonical frame."""
    if isinstance(source, TransactionRepository) and not isinstance(source, pd.DataFrame):
        return prepare_transactions(source.list())
    return prepare_transactions(source)
