"""
Named what-if scenarios for quick comparison on the forecast page.

Each preset only overrides the knobs it cares about; the horizon comes from
the caller so presets can be compared over the same period.
"""

from __future__ import annotations

from typing import Dict

from .base import ScenarioParameters

NAMED_SCENARIOS: Dict[str, Dict[str, float]] = {
    "baseline": {
        "income_multiplier_pct": 100,
        "expense_multiplier_pct": 100,
        "extra_expense_amount": 0.0,
    },
    "income_drop": {
        "income_multiplier_pct": 70,
        "expense_multiplier_pct": 100,
        "extra_expense_amount": 0.0,
    },
    "lean_budget": {
        "income_multiplier_pct": 100,
        "expense_multiplier_pct": 80,
        "extra_expense_amount": 0.0,
    },
    "emergency_expense": {
        "income_multiplier_pct": 100,
        "expense_multiplier_pct": 100,
        "extra_expense_amount": 5000.0,
        "extra_expense_month": 3,
    },
    "raise": {
        "income_multiplier_pct": 115,
        "expense_multiplier_pct": 105,
        "extra_expense_amount": 0.0,
    },
}


def get_scenario(name: str, *, horizon_months: int = 12) -> ScenarioParameters:
    """
    Build ScenarioParameters for a named preset.

    Raises KeyError for unknown names.
    """
    key = name.lower()
    if key not in NAMED_SCENARIOS:
        raise KeyError(
            f"Unknown scenario {name!r}. Available: {sorted(NAMED_SCENARIOS)}"
        )
    overrides = dict(NAMED_SCENARIOS[key])
    for k in ("income_multiplier_pct", "expense_multiplier_pct", "extra_expense_month"):
        if k in overrides:
            overrides[k] = int(overrides[k])
    return ScenarioParameters(horizon_months=horizon_months, **overrides)
