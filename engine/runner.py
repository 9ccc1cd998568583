"""
Forecast runner — orchestrates one full forecast from raw transactions.

    transactions ─┬─ compute_monthly_averages ─┐
                  ├─ compute_recurring_totals ─┼─ generate_projection ─ summarize ─ assess_health ─ tips
                  └─ current_month_balance ────┘        (+ scenario)

run_forecast() recomputes everything from scratch on every call. ForecastRunner
wraps it with an optional cache keyed by a hash of all inputs, for callers that
re-render the same forecast repeatedly.
"""

from __future__ import annotations

import hashlib
import logging
from collections import OrderedDict
from dataclasses import astuple, dataclass, replace
from typing import Optional, Tuple, Union

import pandas as pd

from core.config import ForecastConfig
from core.utils import as_timestamp
from data_prep.repository import TransactionRepository, resolve_transactions
from data_prep.transactions import TransactionsLike
from history.averages import MonthlyAverages, compute_monthly_averages, current_month_balance
from history.recurring import RecurringTotals, compute_recurring_totals
from insights.health import HealthAssessment, assess_health
from insights.summary import ForecastSummary, summarize_projection
from insights.tips import Tip, generate_tips
from scenarios.base import ScenarioParameters

from .projection import generate_projection

logger = logging.getLogger(__name__)

TransactionSource = Union[TransactionRepository, TransactionsLike]


@dataclass(frozen=True)
class ForecastResult:
    projection: pd.DataFrame
    averages: MonthlyAverages
    recurring: RecurringTotals
    anchor_balance: float
    scenario: ScenarioParameters
    summary: ForecastSummary
    health: HealthAssessment
    tips: Tuple[Tip, ...]

    def copy(self) -> "ForecastResult":
        """Detached copy: the DataFrames are copied, everything else is immutable."""
        return replace(
            self,
            projection=self.projection.copy(),
            averages=replace(self.averages, monthly=self.averages.monthly.copy()),
        )


def run_forecast(
    transactions: TransactionSource,
    now: Optional[pd.Timestamp] = None,
    scenario: Optional[ScenarioParameters] = None,
    *,
    config: Optional[ForecastConfig] = None,
) -> ForecastResult:
    """
    Run a complete forecast.

    Parameters
    ----------
    transactions : repository, DataFrame or list of records
        Read-only transaction history
    now : pd.Timestamp, optional
        As-of date; defaults to config.as_of_date, else the current time
    scenario : ScenarioParameters, optional
        Defaults to ScenarioParameters() (12 months, no adjustments)
    config : ForecastConfig, optional
        Window length, health thresholds and month names

    Raises ValueError if scenario.horizon_months < 1; clamp first.
    """
    scenario = scenario or ScenarioParameters()
    if now is None:
        now = config.as_of_date if config is not None else pd.Timestamp.now()
    now = as_timestamp(now)
    config = config or ForecastConfig(as_of_date=now)

    if scenario.horizon_months < 1:
        raise ValueError(
            f"horizon_months must be >= 1, got {scenario.horizon_months}. "
            f"Use scenarios.clamp_scenario() before running."
        )

    df = resolve_transactions(transactions)

    averages = compute_monthly_averages(df, now, window_months=config.history_months)
    recurring = compute_recurring_totals(df)
    anchor = current_month_balance(df, now)

    projection = generate_projection(
        averages,
        recurring,
        scenario,
        anchor_balance=anchor,
        now=now,
        month_names=config.month_names,
    )
    summary = summarize_projection(projection, scenario.horizon_months)
    health = assess_health(
        summary,
        negative_month_ratio=config.negative_month_ratio,
        savings_buffer_months=config.savings_buffer_months,
    )
    tips = tuple(generate_tips(summary, scenario))

    logger.info(
        "Forecast %s: %d transactions, %d months, end balance %.2f (%s)",
        now.date(), len(df), scenario.horizon_months, summary.end_balance, health.status,
    )
    return ForecastResult(
        projection=projection,
        averages=averages,
        recurring=recurring,
        anchor_balance=anchor,
        scenario=scenario,
        summary=summary,
        health=health,
        tips=tips,
    )


def forecast_key(
    transactions: pd.DataFrame,
    now: pd.Timestamp,
    scenario: ScenarioParameters,
    config: ForecastConfig,
) -> str:
    """Stable hash of every input that affects a forecast."""
    h = hashlib.sha256()
    row_hashes = pd.util.hash_pandas_object(transactions, index=False)
    h.update(row_hashes.to_numpy().tobytes())
    h.update(repr(sorted(transactions.columns)).encode())
    h.update(str(as_timestamp(now)).encode())
    h.update(repr(astuple(scenario)).encode())
    h.update(repr((config.history_months, config.negative_month_ratio,
                   config.savings_buffer_months, tuple(config.month_names))).encode())
    return h.hexdigest()


class ForecastRunner:
    """
    Memoising wrapper around run_forecast.

    Identical inputs return equal results without recomputing; any change to
    transactions, as-of date, scenario or config recomputes from scratch.
    Every call hands out its own copy, so callers may modify what they get
    without affecting later hits.
    """

    def __init__(
        self,
        source: TransactionSource,
        *,
        config: Optional[ForecastConfig] = None,
        max_entries: int = 32,
    ):
        self.source = source
        self.config = config
        self.max_entries = max_entries
        self._cache: "OrderedDict[str, ForecastResult]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def run(
        self,
        scenario: Optional[ScenarioParameters] = None,
        now: Optional[pd.Timestamp] = None,
    ) -> ForecastResult:
        scenario = scenario or ScenarioParameters()
        if now is None:
            now = self.config.as_of_date if self.config is not None else pd.Timestamp.now()
        now = as_timestamp(now)
        config = self.config or ForecastConfig(as_of_date=now)

        df = resolve_transactions(self.source)
        key = forecast_key(df, now, scenario, config)
        if key in self._cache:
            self.hits += 1
            self._cache.move_to_end(key)
            return self._cache[key].copy()

        self.misses += 1
        result = run_forecast(df, now, scenario, config=config)
        self._cache[key] = result
        if len(self._cache) > self.max_entries:
            self._cache.popitem(last=False)
        return result.copy()

    def clear(self) -> None:
        self._cache.clear()
