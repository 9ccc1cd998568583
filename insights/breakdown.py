"""
Dashboard breakdowns over actual (not projected) transactions:
  - month_overview:     current vs previous month totals with % trends
  - category_breakdown: per-category totals for one month, largest first
  - budget_usage:       current-month spending against per-category limits
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import pandas as pd

from core.schema import category_name
from core.utils import add_months, as_timestamp, pct_change, round_half_up
from data_prep.transactions import TransactionsLike, prepare_transactions

DEFAULT_BUDGET_LIMITS: Dict[str, float] = {
    "food": 1500.0,
    "housing": 2000.0,
    "transportation": 700.0,
    "utilities": 600.0,
    "entertainment": 400.0,
    "healthcare": 500.0,
    "personal": 300.0,
    "education": 250.0,
    "debt": 1000.0,
    "other_expense": 200.0,
}

# usage percentage below which a budget is "ok", then "near", else "over"
BUDGET_BANDS = (70, 90)


@dataclass(frozen=True)
class MonthOverview:
    income: float
    expense: float
    balance: float
    prev_income: float
    prev_expense: float
    prev_balance: float
    income_trend: int   # % change vs previous month
    expense_trend: int
    balance_trend: int


def _month_rows(df: pd.DataFrame, year: int, month: int) -> pd.DataFrame:
    return df[(df["date"].dt.year == year) & (df["date"].dt.month == month)]


def _totals(df: pd.DataFrame) -> tuple[float, float]:
    income = float(df.loc[df["type"] == "income", "amount"].sum())
    expense = float(df.loc[df["type"] == "expense", "amount"].sum())
    return income, expense


def month_overview(transactions: TransactionsLike, now: pd.Timestamp) -> MonthOverview:
    """
    Totals for the month containing `now` and the month before it.

    Trends with a zero previous value: income → 100, expense → 0,
    balance → 100 when the current balance is positive, else 0.
    """
    df = prepare_transactions(transactions)
    now = as_timestamp(now)
    prev = add_months(now, -1)

    income, expense = _totals(_month_rows(df, now.year, now.month))
    prev_income, prev_expense = _totals(_month_rows(df, prev.year, prev.month))
    balance = income - expense
    prev_balance = prev_income - prev_expense

    income_trend = 100 if prev_income == 0 else pct_change(income, prev_income)
    expense_trend = 0 if prev_expense == 0 else pct_change(expense, prev_expense)
    if prev_balance == 0:
        balance_trend = 100 if balance > 0 else 0
    else:
        balance_trend = pct_change(balance, prev_balance)

    return MonthOverview(
        income=income,
        expense=expense,
        balance=balance,
        prev_income=prev_income,
        prev_expense=prev_expense,
        prev_balance=prev_balance,
        income_trend=income_trend,
        expense_trend=expense_trend,
        balance_trend=balance_trend,
    )


def category_breakdown(
    transactions: TransactionsLike,
    year: int,
    month: int,
) -> Dict[str, pd.DataFrame]:
    """
    Returns
    -------
    {"income": DataFrame, "expense": DataFrame}, each with columns
    category, label, total, sorted by total descending.
    """
    df = _month_rows(prepare_transactions(transactions), year, month)
    out: Dict[str, pd.DataFrame] = {}
    for kind in ("income", "expense"):
        sub = df[df["type"] == kind]
        table = (
            sub.groupby("category", as_index=False)["amount"].sum()
            .rename(columns={"amount": "total"})
            .sort_values("total", ascending=False, kind="stable")
            .reset_index(drop=True)
        )
        table.insert(1, "label", table["category"].map(category_name))
        out[kind] = table
    return out


def budget_status(percentage: float) -> str:
    ok, near = BUDGET_BANDS
    if percentage < ok:
        return "ok"
    if percentage < near:
        return "near"
    return "over"


def _usage_pct(spent: float, limit: float) -> int:
    if limit <= 0:
        return 0
    return min(round_half_up(spent / limit * 100), 100)


def budget_usage(
    transactions: TransactionsLike,
    now: pd.Timestamp,
    *,
    limits: Optional[Dict[str, float]] = None,
) -> pd.DataFrame:
    """
    Current-month expense per budgeted category.

    Returns one row per limit (in the limits' order) with columns
    category, label, limit, spent, remaining, percentage (capped at 100), status.
    """
    limits = DEFAULT_BUDGET_LIMITS if limits is None else limits
    df = prepare_transactions(transactions)
    now = as_timestamp(now)
    month = _month_rows(df, now.year, now.month)
    spent_by_cat = month[month["type"] == "expense"].groupby("category")["amount"].sum()

    rows = []
    for cat, limit in limits.items():
        spent = float(spent_by_cat.get(cat, 0.0))
        pct = _usage_pct(spent, limit)
        rows.append({
            "category": cat,
            "label": category_name(cat),
            "limit": float(limit),
            "spent": spent,
            "remaining": float(limit) - spent,
            "percentage": pct,
            "status": budget_status(pct),
        })
    return pd.DataFrame(
        rows, columns=["category", "label", "limit", "spent", "remaining", "percentage", "status"]
    )


def overall_budget(usage: pd.DataFrame) -> Dict[str, float]:
    """Total limit vs total spent across the rows of budget_usage()."""
    total_limit = float(usage["limit"].sum())
    total_spent = float(usage["spent"].sum())
    pct = _usage_pct(total_spent, total_limit)
    return {
        "total_limit": total_limit,
        "total_spent": total_spent,
        "percentage": pct,
        "status": budget_status(pct),
        "n_over_90": int((usage["percentage"] > BUDGET_BANDS[1]).sum()),
    }
