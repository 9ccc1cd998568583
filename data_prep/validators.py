"""
Data quality validation for transaction sets before they enter the engine.

Catches problems early:
- Missing required fields
- Non-positive or unparseable amounts
- Unknown transaction types / categories, categories filed under the wrong type
- Unparseable or future-dated entries
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from core.schema import (
    CATEGORY_LABELS,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    TRANSACTION_COLUMNS,
    TRANSACTION_TYPES,
)
from .transactions import canonicalize_columns


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a transaction set."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_transactions(
    transactions: pd.DataFrame,
    *,
    as_of_date: Optional[pd.Timestamp] = None,
) -> ValidationResult:
    """
    Run all validation checks on a raw transaction frame.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    df = canonicalize_columns(transactions)
    required = [c for c in TRANSACTION_COLUMNS if c != "is_recurring"]

    # --- Schema checks ---
    missing = [c for c in required if c not in df.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        return result

    if len(df) == 0:
        result.warnings.append("No transactions; forecast will be flat.")
        return result

    if "is_recurring" not in df.columns:
        result.warnings.append("No is_recurring column; all transactions treated as one-off.")

    # --- IDs ---
    if df["id"].isna().any():
        result.errors.append(f"{int(df['id'].isna().sum())} rows have null id.")
    n_dup = int(df["id"].duplicated().sum())
    if n_dup > 0:
        result.warnings.append(f"{n_dup} duplicate transaction ids found.")

    # --- Amounts ---
    amounts = pd.to_numeric(df["amount"], errors="coerce")
    n_null = int(amounts.isna().sum())
    n_non_pos = int((amounts <= 0).sum())
    if n_null > 0:
        result.errors.append(f"{n_null} rows have null/unparseable amount.")
    if n_non_pos > 0:
        result.errors.append(
            f"{n_non_pos} rows have zero or negative amount (amounts are magnitudes; "
            f"use type to mark expenses)."
        )

    # --- Types ---
    types = df["type"].astype(str).str.strip().str.lower()
    n_bad_type = int((~types.isin(TRANSACTION_TYPES)).sum())
    if n_bad_type > 0:
        result.errors.append(f"{n_bad_type} rows have a type other than {list(TRANSACTION_TYPES)}.")

    # --- Categories ---
    unknown = sorted(set(df["category"].dropna().astype(str)) - set(CATEGORY_LABELS))
    if unknown:
        result.warnings.append(f"Unknown categories: {unknown}")
    category = df["category"].astype(str).str.strip()
    mismatched = ((types == "income") & category.isin(EXPENSE_CATEGORIES)) | (
        (types == "expense") & category.isin(INCOME_CATEGORIES)
    )
    n_mismatch = int(mismatched.sum())
    if n_mismatch > 0:
        result.warnings.append(
            f"{n_mismatch} rows have a category that belongs to the other transaction type."
        )

    # --- Dates ---
    dates = pd.to_datetime(df["date"], errors="coerce")
    n_bad_date = int(dates.isna().sum())
    if n_bad_date > 0:
        result.errors.append(f"{n_bad_date} rows have null/unparseable date.")
    if as_of_date is not None:
        n_future = int((dates > pd.Timestamp(as_of_date)).sum())
        if n_future > 0:
            result.warnings.append(
                f"{n_future} rows are dated after {pd.Timestamp(as_of_date).date()}; "
                f"they are ignored by the historical averages."
            )

    return result
