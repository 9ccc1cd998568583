"""
Recurring transaction totals.

Every transaction flagged is_recurring is assumed to repeat each future month
at its recorded amount, whatever its original date.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from data_prep.transactions import TransactionsLike, prepare_transactions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecurringTotals:
    recurring_income: float
    recurring_expense: float
    n_income: int
    n_expense: int

    @property
    def net(self) -> float:
        return self.recurring_income - self.recurring_expense


def compute_recurring_totals(transactions: TransactionsLike) -> RecurringTotals:
    df = prepare_transactions(transactions)
    rec = df[df["is_recurring"]]
    income = rec[rec["type"] == "income"]
    expense = rec[rec["type"] == "expense"]

    totals = RecurringTotals(
        recurring_income=float(income["amount"].sum()),
        recurring_expense=float(expense["amount"].sum()),
        n_income=len(income),
        n_expense=len(expense),
    )
    logger.debug(
        "Recurring: %d income (%.2f), %d expense (%.2f)",
        totals.n_income, totals.recurring_income, totals.n_expense, totals.recurring_expense,
    )
    return totals
