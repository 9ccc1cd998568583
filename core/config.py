"""
Forecast configuration.
Scenario knobs (income/expense multipliers, extra expense) live in
scenarios/base.py (ScenarioParameters); this holds the run anchor and
the model's fixed heuristics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from .schema import MONTH_NAMES


@dataclass(frozen=True)
class ForecastConfig:
    as_of_date: pd.Timestamp
    history_months: int = 6

    # health heuristics: share of negative months that triggers "warning",
    # and months of expenses the savings buffer should cover
    negative_month_ratio: float = 0.25
    savings_buffer_months: float = 3.0

    month_names: Tuple[str, ...] = MONTH_NAMES

    @classmethod
    def now(cls, **kwargs) -> "ForecastConfig":
        return cls(as_of_date=pd.Timestamp.now(), **kwargs)
