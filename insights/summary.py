"""
Scalar summary of a projection: the numbers behind the forecast's summary cards.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from core.utils import require_columns


@dataclass(frozen=True)
class ForecastSummary:
    end_balance: float       # accumulated_balance of the last month
    total_savings: float     # accumulated_savings of the last month
    months_negative: int     # months with balance < 0
    horizon_months: int
    avg_monthly_expense: float  # total projected expense / horizon

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Accumulated Balance", "Value": f"{self.end_balance:,.2f}",
             "Unit": f"after {self.horizon_months} months"},
            {"Metric": "Potential Savings", "Value": f"{self.total_savings:,.2f}",
             "Unit": "if every surplus is saved"},
            {"Metric": "Negative Months", "Value": f"{self.months_negative} of {self.horizon_months}",
             "Unit": "months"},
            {"Metric": "Avg Monthly Expense", "Value": f"{self.avg_monthly_expense:,.2f}",
             "Unit": "per month"},
        ]
        return pd.DataFrame(rows)


def summarize_projection(projection: pd.DataFrame, horizon_months: int) -> ForecastSummary:
    """
    Parameters
    ----------
    projection : pd.DataFrame
        Output of engine.projection.generate_projection()
    horizon_months : int
        Horizon the projection was generated for; denominator of the
        average monthly expense (floored at 1)
    """
    require_columns(projection, ["expense", "balance", "accumulated_balance", "accumulated_savings"])

    if projection.empty:
        return ForecastSummary(
            end_balance=0.0,
            total_savings=0.0,
            months_negative=0,
            horizon_months=horizon_months,
            avg_monthly_expense=0.0,
        )

    last = projection.iloc[-1]
    return ForecastSummary(
        end_balance=float(last["accumulated_balance"]),
        total_savings=float(last["accumulated_savings"]),
        months_negative=int((projection["balance"] < 0).sum()),
        horizon_months=horizon_months,
        avg_monthly_expense=float(projection["expense"].sum()) / max(horizon_months, 1),
    )
