from __future__ import annotations

import json
from pathlib import Path
from typing import Union

import pandas as pd

from .records import parse_records
from .transactions import prepare_transactions

PathLike = Union[str, Path]


def load_transactions_csv(path: PathLike) -> pd.DataFrame:
    """Load a transaction export (one row per transaction) from CSV."""
    return prepare_transactions(pd.read_csv(path))


def load_transactions_excel(path: PathLike, *, sheet_name: Union[str, int] = 0) -> pd.DataFrame:
    """Load a transaction export from an .xlsx workbook (openpyxl engine)."""
    return prepare_transactions(pd.read_excel(path, sheet_name=sheet_name, engine="openpyxl"))


def load_transactions_json(path: PathLike) -> pd.DataFrame:
    """
    Load a JSON array of transaction objects (the browser store's export format).
    Each object is validated as a TransactionRecord first.
    """
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if isinstance(raw, dict):
        raw = raw.get("transactions", [])
    return prepare_transactions(parse_records(raw))
