"""Shared fixtures. Lives at the repo root so the flat packages import without install."""

from __future__ import annotations

import pandas as pd
import pytest

NOW = pd.Timestamp("2026-10-18 14:30")


def tx(id, amount, type, date, category=None, recurring=False, **extra):
    row = {
        "id": id,
        "amount": amount,
        "type": type,
        "category": category or ("salary" if type == "income" else "food"),
        "date": date,
        "isRecurring": recurring,
    }
    row.update(extra)
    return row


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def history():
    """Three active months inside the window plus noise outside it."""
    return [
        tx("t1", 100, "income", "2026-05-10"),
        tx("t2", 200, "income", "2026-07-03"),
        tx("t3", 300, "income", "2026-09-20"),
        tx("t4", 60, "expense", "2026-05-11", "food"),
        tx("t5", 30, "expense", "2026-07-15", "utilities"),
        tx("t6", 90, "expense", "2026-09-01", "housing"),
        # outside the window: before Apr 1st and after "now"
        tx("t7", 5000, "income", "2026-03-31"),
        tx("t8", 5000, "expense", "2026-10-25", "debt"),
    ]


@pytest.fixture
def history_df(history):
    from data_prep.transactions import prepare_transactions
    return prepare_transactions(history)
