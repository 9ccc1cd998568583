"""
Normalise transaction collections into the canonical DataFrame the engine reads.

Accepts whatever the store hands over (DataFrame, list of dicts, list of
TransactionRecord) and returns a copy with:
  - camelCase aliases renamed (isRecurring -> is_recurring, ...)
  - `date` as datetime64 (normalised to midnight)
  - `amount` as float, `type` lower-cased, `is_recurring` as bool
The input is never mutated.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from core.schema import TRANSACTION_COLUMNS, TRANSACTION_TYPES
from core.utils import require_columns

from .records import TransactionRecord

logger = logging.getLogger(__name__)

TransactionsLike = Union[pd.DataFrame, Iterable[Dict[str, Any]], Iterable[TransactionRecord]]

_COLUMN_ALIASES: Dict[str, str] = {
    "isRecurring": "is_recurring",
    "recurring": "is_recurring",
    "isPaid": "is_paid",
    "dueDate": "due_date",
    "isVariable": "is_variable",
    "transaction_id": "id",
    "value": "amount",
    "kind": "type",
}

_TRUTHY = {"true", "1", "1.0", "yes", "y", "t"}


def canonicalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy with known column aliases renamed to their canonical names.

    Mixed input (pydantic records next to raw camelCase store dicts) yields both
    `is_recurring` and `isRecurring`; after renaming, duplicates are coalesced
    by taking the first non-null value per row.
    """
    ren = {c: _COLUMN_ALIASES.get(c, c) for c in df.columns}
    out = df.rename(columns=ren).copy()

    if out.columns.duplicated().any():
        new_cols: List[str] = []
        parts: List[pd.Series] = []
        seen: set[str] = set()
        cols = list(out.columns)
        for name in cols:
            if name in seen:
                continue
            idxs = [i for i, c in enumerate(cols) if c == name]
            s = out.iloc[:, idxs[0]]
            for j in idxs[1:]:
                s = s.combine_first(out.iloc[:, j])
            new_cols.append(name)
            parts.append(s)
            seen.add(name)
        out = pd.concat(parts, axis=1)
        out.columns = new_cols

    return out


def _to_frame(transactions: TransactionsLike) -> pd.DataFrame:
    if isinstance(transactions, pd.DataFrame):
        return transactions
    rows = [
        t.to_row() if isinstance(t, TransactionRecord) else dict(t)
        for t in transactions
    ]
    return pd.DataFrame(rows)


def _coerce_bool(s: pd.Series) -> pd.Series:
    if s.dtype == bool:
        return s
    return s.map(lambda v: str(v).strip().lower() in _TRUTHY if pd.notna(v) else False).astype(bool)


def empty_transactions() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "id": pd.Series(dtype=object),
            "amount": pd.Series(dtype=float),
            "type": pd.Series(dtype=object),
            "category": pd.Series(dtype=object),
            "date": pd.Series(dtype="datetime64[ns]"),
            "is_recurring": pd.Series(dtype=bool),
        }
    )


def prepare_transactions(transactions: TransactionsLike) -> pd.DataFrame:
    """
    Coerce a transaction collection into the canonical frame.

    Raises ValueError on missing columns, unparseable dates, unparseable or
    non-positive amounts and unknown types: the engine assumes clean input,
    so bad rows stop here.
    """
    raw = _to_frame(transactions)
    if raw.empty and len(raw.columns) == 0:
        return empty_transactions()

    df = canonicalize_columns(raw)
    if "is_recurring" not in df.columns:
        df["is_recurring"] = False
    require_columns(df, TRANSACTION_COLUMNS)

    df["id"] = df["id"].astype(str)

    amounts = pd.to_numeric(df["amount"], errors="coerce")
    if amounts.isna().any():
        bad = df.loc[amounts.isna(), "id"].tolist()
        raise ValueError(f"Unparseable amount for transactions: {bad}")
    if (amounts <= 0).any():
        bad = df.loc[amounts <= 0, "id"].tolist()
        raise ValueError(f"Non-positive amount for transactions (amounts are magnitudes): {bad}")
    df["amount"] = amounts.astype(float)

    dates = pd.to_datetime(df["date"], errors="coerce")
    if dates.isna().any():
        bad = df.loc[dates.isna(), "id"].tolist()
        raise ValueError(f"Unparseable date for transactions: {bad}")
    if getattr(dates.dt, "tz", None) is not None:
        dates = dates.dt.tz_localize(None)
    df["date"] = dates.dt.normalize()

    df["type"] = df["type"].astype(str).str.strip().str.lower()
    unknown = sorted(set(df["type"]) - set(TRANSACTION_TYPES))
    if unknown:
        raise ValueError(f"Unknown transaction types: {unknown}")

    df["category"] = df["category"].astype(str).str.strip()
    df["is_recurring"] = _coerce_bool(df["is_recurring"])

    logger.debug("Prepared %d transactions", len(df))
    return df.reset_index(drop=True)


def filter_transactions(
    transactions: pd.DataFrame,
    *,
    type: Optional[str] = None,
    category: Optional[str] = None,
    is_paid: Optional[bool] = None,
    is_variable: Optional[bool] = None,
    source: Optional[str] = None,
    start_date: Optional[Union[str, pd.Timestamp]] = None,
    end_date: Optional[Union[str, pd.Timestamp]] = None,
) -> pd.DataFrame:
    """
    Apply each filter that is given; all given filters must match.
    Date bounds are inclusive. Optional columns that are absent never match
    a filter on them.
    """
    df = prepare_transactions(transactions)
    mask = pd.Series(True, index=df.index)

    if type is not None:
        mask &= df["type"] == type
    if category is not None:
        mask &= df["category"] == category
    for col, want in (("is_paid", is_paid), ("is_variable", is_variable), ("source", source)):
        if want is None:
            continue
        if col not in df.columns:
            mask &= False
        else:
            mask &= df[col] == want
    if start_date is not None:
        mask &= df["date"] >= pd.Timestamp(start_date)
    if end_date is not None:
        mask &= df["date"] <= pd.Timestamp(end_date)

    return df.loc[mask].reset_index(drop=True)
