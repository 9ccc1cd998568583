from __future__ import annotations

import math
from typing import Iterable, Sequence

import pandas as pd
from dateutil.relativedelta import relativedelta

from .schema import MONTH_NAMES


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def month_start(ts: pd.Timestamp) -> pd.Timestamp:
    """First day (midnight) of the month containing ts."""
    ts = pd.Timestamp(ts)
    return pd.Timestamp(year=ts.year, month=ts.month, day=1)


def add_months(ts: pd.Timestamp, n: int) -> pd.Timestamp:
    """Calendar month arithmetic; day is clipped to the target month's length."""
    return pd.Timestamp(pd.Timestamp(ts).to_pydatetime() + relativedelta(months=n))


def month_starts(as_of_date: pd.Timestamp, n_months: int) -> pd.DatetimeIndex:
    """
    Generate month-start dates for projection periods after as_of_date.
    If as_of_date is mid-month, we still project starting next month-start.
    """
    as_of = pd.Timestamp(as_of_date)
    first = (as_of.to_period("M") + 1).to_timestamp(how="start")
    return pd.date_range(first, periods=max(n_months, 0), freq="MS")


def month_label(ts: pd.Timestamp, month_names: Sequence[str] = MONTH_NAMES) -> str:
    """'<MonthName> <year>' using a 12-entry rotating name table."""
    ts = pd.Timestamp(ts)
    return f"{month_names[(ts.month - 1) % 12]} {ts.year}"


def round_half_up(x: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return int(math.floor(x + 0.5))


def pct_change(current: float, previous: float) -> int:
    """Whole-number percentage change; caller handles a zero previous value."""
    return round_half_up((current - previous) / abs(previous) * 100)


def as_timestamp(ts) -> pd.Timestamp:
    """pd.Timestamp without timezone, so it compares against naive transaction dates."""
    out = pd.Timestamp(ts)
    if out.tzinfo is not None:
        out = out.tz_localize(None)
    return out
