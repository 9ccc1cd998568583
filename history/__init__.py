"""
History package — derive the model's inputs from past transactions:
  1. averages.py  — trailing-window monthly income/expense averages, current-month anchor
  2. recurring.py — fixed monthly contributions from recurring transactions
"""

from .averages import (
    MonthlyAverages,
    compute_monthly_averages,
    current_month_balance,
    monthly_totals,
)
from .recurring import RecurringTotals, compute_recurring_totals

__all__ = [
    "MonthlyAverages",
    "compute_monthly_averages",
    "current_month_balance",
    "monthly_totals",
    "RecurringTotals",
    "compute_recurring_totals",
]
