"""
Advice cards shown under the forecast, derived from the summary and scenario.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from scenarios.base import ScenarioParameters

from .summary import ForecastSummary


@dataclass(frozen=True)
class Tip:
    key: str
    title: str
    message: str


def generate_tips(summary: ForecastSummary, scenario: ScenarioParameters) -> List[Tip]:
    """Tips in display order. The large-expense planning tip is always present."""
    tips: List[Tip] = []

    if summary.end_balance < 0:
        tips.append(Tip(
            key="reduce_spending",
            title="Cut back on non-essential spending",
            message=(
                "Your projection shows an accumulated deficit. Consider trimming categories "
                "such as entertainment or finding extra sources of income."
            ),
        ))

    if summary.months_negative > 0:
        tips.append(Tip(
            key="emergency_fund",
            title="Build an emergency fund",
            message=(
                "Some months will end negative. Save now to cover those periods "
                "(recommended: 3-6 months of expenses)."
            ),
        ))

    if summary.total_savings > 0:
        tips.append(Tip(
            key="invest_savings",
            title="Put your savings potential to work",
            message=(
                f"You could save {summary.total_savings:,.2f} over the next "
                f"{summary.horizon_months} months. Consider investing it."
            ),
        ))

    tips.append(Tip(
        key="plan_large_expenses",
        title="Plan large expenses ahead",
        message=(
            f"For planned expenses (such as {scenario.extra_expense_amount:,.2f}), set a little "
            f"aside every month instead of absorbing it all at once."
        ),
    ))

    if scenario.expense_multiplier_pct > 100:
        tips.append(Tip(
            key="expense_growth",
            title="Watch the expense increase",
            message=(
                f"You projected a {scenario.expense_multiplier_pct - 100}% increase in expenses. "
                f"Keeping that growth in check will improve your financial health."
            ),
        ))

    return tips
