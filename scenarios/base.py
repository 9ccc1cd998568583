"""
ScenarioParameters: the user-adjustable knobs of a forecast run.

All multipliers are whole percentages (100 = no change). The extra expense is
a one-off amount landing in a single future month, 1-based.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Tuple

# Dashboard slider ranges; used by clamp_scenario(), never by the engine.
SCENARIO_BOUNDS: Dict[str, Tuple[float, float]] = {
    "horizon_months": (3, 36),
    "income_multiplier_pct": (50, 150),
    "expense_multiplier_pct": (50, 150),
    "extra_expense_amount": (0.0, 10_000.0),
}


@dataclass(frozen=True)
class ScenarioParameters:
    horizon_months: int = 12
    income_multiplier_pct: int = 100
    expense_multiplier_pct: int = 100
    extra_expense_amount: float = 0.0
    extra_expense_month: int = 6

    @property
    def income_factor(self) -> float:
        return self.income_multiplier_pct / 100.0

    @property
    def expense_factor(self) -> float:
        return self.expense_multiplier_pct / 100.0

    @property
    def has_extra_expense(self) -> bool:
        return self.extra_expense_amount > 0 and 1 <= self.extra_expense_month <= self.horizon_months

    def with_changes(self, **changes) -> "ScenarioParameters":
        return replace(self, **changes)


def _clip(value, lo, hi):
    return max(lo, min(hi, value))


def clamp_scenario(
    params: ScenarioParameters,
    bounds: Dict[str, Tuple[float, float]] = SCENARIO_BOUNDS,
) -> ScenarioParameters:
    """
    Clip every knob into its allowed range. The extra-expense month is clipped
    to [1, horizon] after the horizon itself is clipped.
    """
    h_lo, h_hi = bounds["horizon_months"]
    horizon = int(_clip(params.horizon_months, max(int(h_lo), 1), int(h_hi)))
    inc_lo, inc_hi = bounds["income_multiplier_pct"]
    exp_lo, exp_hi = bounds["expense_multiplier_pct"]
    x_lo, x_hi = bounds["extra_expense_amount"]
    return ScenarioParameters(
        horizon_months=horizon,
        income_multiplier_pct=int(_clip(params.income_multiplier_pct, inc_lo, inc_hi)),
        expense_multiplier_pct=int(_clip(params.expense_multiplier_pct, exp_lo, exp_hi)),
        extra_expense_amount=float(_clip(params.extra_expense_amount, x_lo, x_hi)),
        extra_expense_month=int(_clip(params.extra_expense_month, 1, horizon)),
    )
