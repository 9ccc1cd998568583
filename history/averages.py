"""
Trailing-window monthly averages from transaction history.

The window covers the `window_months` calendar months before the as-of month
(from the 1st of the earliest one) up to and including the as-of date itself:

    [month_start(now) - window_months, now]

Transactions are bucketed by (year, month). The average divides the summed
totals by the number of buckets that actually hold a transaction; a month with
no activity does not drag the average down. With no buckets at all the
denominator is 1, so both averages come out as 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from core.utils import add_months, as_timestamp, month_start
from data_prep.transactions import TransactionsLike, prepare_transactions

logger = logging.getLogger(__name__)

MONTHLY_TOTAL_COLUMNS = ("year", "month", "income", "expense", "balance", "n_transactions")


@dataclass(frozen=True)
class MonthlyAverages:
    avg_income: float
    avg_expense: float
    n_months: int  # distinct (year, month) buckets in the window
    window_start: pd.Timestamp
    window_end: pd.Timestamp
    monthly: pd.DataFrame  # per-bucket totals, see monthly_totals()

    def __repr__(self) -> str:
        return (
            f"MonthlyAverages(income={self.avg_income:.2f}, "
            f"expense={self.avg_expense:.2f}, n_months={self.n_months})"
        )


def monthly_totals(transactions: TransactionsLike) -> pd.DataFrame:
    """
    Income / expense totals per calendar month, one row per month that has at
    least one transaction, sorted oldest first.
    """
    df = prepare_transactions(transactions)
    if df.empty:
        return pd.DataFrame({c: pd.Series(dtype=float) for c in MONTHLY_TOTAL_COLUMNS})

    df = df.assign(
        year=df["date"].dt.year,
        month=df["date"].dt.month,
        income=df["amount"].where(df["type"] == "income", 0.0),
        expense=df["amount"].where(df["type"] == "expense", 0.0),
    )
    out = (
        df.groupby(["year", "month"], as_index=False)
        .agg(
            income=("income", "sum"),
            expense=("expense", "sum"),
            n_transactions=("id", "count"),
        )
        .sort_values(["year", "month"])
        .reset_index(drop=True)
    )
    out["balance"] = out["income"] - out["expense"]
    return out.loc[:, list(MONTHLY_TOTAL_COLUMNS)]


def compute_monthly_averages(
    transactions: TransactionsLike,
    now: pd.Timestamp,
    *,
    window_months: int = 6,
) -> MonthlyAverages:
    """Average monthly income and expense over the trailing window ending at `now`."""
    df = prepare_transactions(transactions)
    now = as_timestamp(now)
    start = add_months(month_start(now), -window_months)

    in_window = df[(df["date"] >= start) & (df["date"] <= now)]
    monthly = monthly_totals(in_window)

    n_months = len(monthly)
    denom = n_months or 1
    avg_income = float(monthly["income"].sum()) / denom
    avg_expense = float(monthly["expense"].sum()) / denom

    logger.debug(
        "Window %s..%s: %d transactions in %d months, avg income %.2f, avg expense %.2f",
        start.date(), now.date(), len(in_window), n_months, avg_income, avg_expense,
    )
    return MonthlyAverages(
        avg_income=avg_income,
        avg_expense=avg_expense,
        n_months=n_months,
        window_start=start,
        window_end=now,
        monthly=monthly,
    )


def current_month_balance(transactions: TransactionsLike, now: pd.Timestamp) -> float:
    """
    Actual income minus expense for the calendar month containing `now`.
    This seeds the projection's accumulated balance.
    """
    df = prepare_transactions(transactions)
    now = as_timestamp(now)
    in_month = df[(df["date"].dt.year == now.year) & (df["date"].dt.month == now.month)]
    income = float(in_month.loc[in_month["type"] == "income", "amount"].sum())
    expense = float(in_month.loc[in_month["type"] == "expense", "amount"].sum())
    return income - expense
