"""
Deterministic monthly cash-flow projection.

For each future month i = 1..horizon:
  income  = avg_income  × income%/100  + recurring_income
  expense = avg_expense × expense%/100 + recurring_expense (+ extra expense iff i == extra month)
  balance = income − expense

Running totals:
  accumulated_balance[i] = accumulated_balance[i−1] + balance[i], seeded with the
                           current month's actual balance (the anchor)
  accumulated_savings[i] = accumulated_savings[i−1] + max(balance[i], 0)

Averages and recurring sums are held constant across the horizon; the model
does not compound growth between projected months. The generator does not
validate its inputs: horizon < 1 gives an empty frame and an extra-expense
month outside [1, horizon] is never applied.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from core.schema import MONTH_NAMES, PROJECTION_COLUMNS
from core.utils import as_timestamp, month_label, month_starts
from history.averages import MonthlyAverages
from history.recurring import RecurringTotals
from scenarios.base import ScenarioParameters

logger = logging.getLogger(__name__)


def empty_projection() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "month_index": pd.Series(dtype=int),
            "date": pd.Series(dtype="datetime64[ns]"),
            "month_label": pd.Series(dtype=object),
            "income": pd.Series(dtype=float),
            "expense": pd.Series(dtype=float),
            "balance": pd.Series(dtype=float),
            "accumulated_balance": pd.Series(dtype=float),
            "accumulated_savings": pd.Series(dtype=float),
        }
    )


def running_total(seed: float, values: np.ndarray) -> np.ndarray:
    """seed + values[0], then + values[1], ... added strictly left to right."""
    return np.cumsum(np.concatenate(([float(seed)], values.astype(float))))[1:]


def generate_projection(
    averages: MonthlyAverages,
    recurring: RecurringTotals,
    scenario: ScenarioParameters,
    *,
    anchor_balance: float,
    now: pd.Timestamp,
    month_names: Sequence[str] = MONTH_NAMES,
) -> pd.DataFrame:
    """
    Build the month-by-month projection.

    Parameters
    ----------
    averages : MonthlyAverages
        Historical averages (held constant across all months)
    recurring : RecurringTotals
        Fixed monthly contributions from recurring transactions
    scenario : ScenarioParameters
        Multipliers, horizon and one-off extra expense
    anchor_balance : float
        Actual income − expense of the current month; seeds accumulated_balance
    now : pd.Timestamp
        As-of date; month 1 is the calendar month after it

    Returns
    -------
    DataFrame with PROJECTION_COLUMNS, one row per month, month_index ascending.
    """
    horizon = int(scenario.horizon_months)
    if horizon < 1:
        return empty_projection()

    month_index = np.arange(1, horizon + 1)
    dates = month_starts(as_timestamp(now), horizon)

    adjusted_income = averages.avg_income * scenario.income_factor
    adjusted_expense = averages.avg_expense * scenario.expense_factor

    income = np.full(horizon, adjusted_income + recurring.recurring_income, dtype=float)
    expense = np.full(horizon, adjusted_expense + recurring.recurring_expense, dtype=float)
    expense = expense + np.where(
        month_index == scenario.extra_expense_month, float(scenario.extra_expense_amount), 0.0
    )

    balance = income - expense
    accumulated_balance = running_total(anchor_balance, balance)
    accumulated_savings = running_total(0.0, np.where(balance > 0, balance, 0.0))

    projection = pd.DataFrame(
        {
            "month_index": month_index,
            "date": dates,
            "month_label": [month_label(d, month_names) for d in dates],
            "income": income,
            "expense": expense,
            "balance": balance,
            "accumulated_balance": accumulated_balance,
            "accumulated_savings": accumulated_savings,
        }
    )
    logger.debug(
        "Projected %d months from %s: end balance %.2f",
        horizon, dates[0].date(), float(accumulated_balance[-1]),
    )
    return projection.loc[:, list(PROJECTION_COLUMNS)]
