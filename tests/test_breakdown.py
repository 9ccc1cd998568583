import pytest

from conftest import tx
from insights.breakdown import (
    budget_status,
    budget_usage,
    category_breakdown,
    month_overview,
    overall_budget,
)


def test_month_overview_trends(now):
    rows = [
        tx("a", 1200, "income", "2026-10-01"),
        tx("b", 600, "expense", "2026-10-05"),
        tx("c", 1000, "income", "2026-09-01"),
        tx("d", 800, "expense", "2026-09-05"),
    ]
    ov = month_overview(rows, now)
    assert (ov.income, ov.expense, ov.balance) == (1200, 600, 600)
    assert (ov.prev_income, ov.prev_expense, ov.prev_balance) == (1000, 800, 200)
    assert ov.income_trend == 20
    assert ov.expense_trend == -25
    assert ov.balance_trend == 200


def test_month_overview_zero_previous_month(now):
    ov = month_overview([tx("a", 100, "income", "2026-10-02")], now)
    assert ov.income_trend == 100
    assert ov.expense_trend == 0
    assert ov.balance_trend == 100

    ov = month_overview([tx("a", 100, "expense", "2026-10-02")], now)
    assert ov.balance_trend == 0


def test_month_overview_january_looks_at_december():
    import pandas as pd
    rows = [tx("a", 300, "income", "2025-12-20"), tx("b", 150, "income", "2026-01-10")]
    ov = month_overview(rows, pd.Timestamp("2026-01-31"))
    assert ov.prev_income == 300
    assert ov.income_trend == -50


def test_category_breakdown_sorted():
    rows = [
        tx("a", 50, "expense", "2026-10-01", "food"),
        tx("b", 70, "expense", "2026-10-02", "food"),
        tx("c", 300, "expense", "2026-10-03", "housing"),
        tx("d", 900, "income", "2026-10-03", "salary"),
        tx("e", 999, "expense", "2026-09-03", "debt"),
    ]
    out = category_breakdown(rows, 2026, 10)
    assert out["expense"]["category"].tolist() == ["housing", "food"]
    assert out["expense"]["total"].tolist() == [300, 120]
    assert out["expense"]["label"].tolist() == ["Housing", "Food"]
    assert out["income"]["category"].tolist() == ["salary"]


def test_budget_usage(now):
    rows = [
        tx("a", 1200, "expense", "2026-10-02", "food"),
        tx("b", 2500, "expense", "2026-10-03", "housing"),
        tx("c", 100, "expense", "2026-09-03", "education"),
    ]
    usage = budget_usage(rows, now, limits={"food": 1500, "housing": 2000, "education": 250})

    food = usage.set_index("category").loc["food"]
    assert food["percentage"] == 80
    assert food["status"] == "near"
    housing = usage.set_index("category").loc["housing"]
    assert housing["percentage"] == 100  # capped
    assert housing["remaining"] == -500
    assert housing["status"] == "over"
    assert usage.set_index("category").loc["education", "spent"] == 0

    overall = overall_budget(usage)
    assert overall["total_limit"] == 3750
    assert overall["total_spent"] == 3700
    assert overall["percentage"] == 99
    assert overall["n_over_90"] == 1


def test_budget_usage_default_limits(now):
    usage = budget_usage([], now)
    assert len(usage) == 10
    assert (usage["percentage"] == 0).all()


@pytest.mark.parametrize("pct, status", [(0, "ok"), (69, "ok"), (70, "near"), (89, "near"), (90, "over"), (100, "over")])
def test_budget_status_bands(pct, status):
    assert budget_status(pct) == status
