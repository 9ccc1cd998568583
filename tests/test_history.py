import pandas as pd
import pytest

from conftest import tx
from history.averages import compute_monthly_averages, current_month_balance, monthly_totals
from history.recurring import compute_recurring_totals


def test_average_over_active_months(history, now):
    avg = compute_monthly_averages(history, now)

    # 100, 200, 300 across three distinct months
    assert avg.avg_income == pytest.approx(200.0)
    assert avg.avg_expense == pytest.approx(60.0)
    assert avg.n_months == 3
    assert avg.window_start == pd.Timestamp("2026-04-01")


def test_empty_history_averages_to_zero(now):
    avg = compute_monthly_averages([], now)
    assert avg.avg_income == 0
    assert avg.avg_expense == 0
    assert avg.n_months == 0


def test_window_bounds_are_inclusive(now):
    rows = [
        tx("first-day", 60, "income", "2026-04-01"),
        tx("today", 30, "income", "2026-10-18"),
        tx("day-before-window", 999, "income", "2026-03-31"),
        tx("tomorrow", 999, "income", "2026-10-19"),
    ]
    avg = compute_monthly_averages(rows, now)
    assert avg.n_months == 2
    assert avg.avg_income == pytest.approx(45.0)


def test_window_length_is_configurable(history, now):
    avg = compute_monthly_averages(history, now, window_months=2)
    # only September falls in [Aug 1st, now]
    assert avg.n_months == 1
    assert avg.avg_income == pytest.approx(300.0)
    assert avg.avg_expense == pytest.approx(90.0)


def test_month_with_only_expenses_counts_as_a_bucket(now):
    rows = [
        tx("i", 600, "income", "2026-08-05"),
        tx("e", 300, "expense", "2026-09-05"),
    ]
    avg = compute_monthly_averages(rows, now)
    assert avg.n_months == 2
    assert avg.avg_income == pytest.approx(300.0)
    assert avg.avg_expense == pytest.approx(150.0)


def test_tz_aware_now(history):
    avg = compute_monthly_averages(history, pd.Timestamp("2026-10-18 10:00", tz="UTC"))
    assert avg.avg_income == pytest.approx(200.0)


def test_monthly_totals(history_df):
    totals = monthly_totals(history_df)
    assert list(totals.columns) == ["year", "month", "income", "expense", "balance", "n_transactions"]
    sept = totals[(totals["year"] == 2026) & (totals["month"] == 9)].iloc[0]
    assert sept["income"] == 300
    assert sept["expense"] == 90
    assert sept["balance"] == 210
    # sorted oldest first
    assert totals["month"].tolist() == [3, 5, 7, 9, 10]


def test_current_month_balance_uses_whole_calendar_month(now):
    rows = [
        tx("a", 1000, "income", "2026-10-01"),
        tx("b", 250, "expense", "2026-10-10"),
        tx("c", 100, "expense", "2026-10-30"),
        tx("d", 5000, "income", "2026-09-30"),
    ]
    assert current_month_balance(rows, now) == pytest.approx(650.0)
    assert current_month_balance([], now) == 0


def test_recurring_totals_ignore_dates():
    rows = [
        tx("rent", 1200, "expense", "2019-01-01", "housing", recurring=True),
        tx("gym", 50, "expense", "2030-06-01", "personal", recurring=True),
        tx("pay", 3000, "income", "2024-05-05", recurring=True),
        tx("once", 700, "expense", "2026-09-09"),
    ]
    rec = compute_recurring_totals(rows)
    assert rec.recurring_income == 3000
    assert rec.recurring_expense == 1250
    assert (rec.n_income, rec.n_expense) == (1, 2)
    assert rec.net == 1750


def test_recurring_totals_empty():
    rec = compute_recurring_totals([])
    assert rec.recurring_income == 0
    assert rec.recurring_expense == 0
