import numpy as np
import pandas as pd
import pytest

from core.schema import PROJECTION_COLUMNS
from engine.projection import generate_projection
from history.averages import MonthlyAverages
from history.recurring import RecurringTotals
from scenarios.base import ScenarioParameters

NOW = pd.Timestamp("2026-10-18")


def averages(income, expense):
    return MonthlyAverages(
        avg_income=income,
        avg_expense=expense,
        n_months=1,
        window_start=pd.Timestamp("2026-04-01"),
        window_end=NOW,
        monthly=pd.DataFrame(),
    )


def recurring(income=0.0, expense=0.0):
    return RecurringTotals(recurring_income=income, recurring_expense=expense, n_income=0, n_expense=0)


def project(avg=(1000.0, 800.0), rec=(0.0, 0.0), anchor=0.0, **scenario):
    return generate_projection(
        averages(*avg),
        recurring(*rec),
        ScenarioParameters(**scenario),
        anchor_balance=anchor,
        now=NOW,
    )


def test_flat_scenario():
    proj = project(anchor=150.0, horizon_months=3, extra_expense_amount=0.0)

    assert list(proj.columns) == list(PROJECTION_COLUMNS)
    assert proj["month_index"].tolist() == [1, 2, 3]
    assert proj["balance"].tolist() == [200.0, 200.0, 200.0]
    assert proj["accumulated_balance"].tolist() == [350.0, 550.0, 750.0]
    assert proj["accumulated_savings"].tolist() == [200.0, 400.0, 600.0]


def test_month_labels_roll_over_the_year():
    proj = project(horizon_months=4)
    assert proj["month_label"].tolist() == [
        "November 2026", "December 2026", "January 2027", "February 2027",
    ]
    assert proj["date"].iloc[0] == pd.Timestamp("2026-11-01")


def test_custom_month_names():
    names = ("Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez")
    proj = generate_projection(
        averages(1.0, 1.0), recurring(), ScenarioParameters(horizon_months=2),
        anchor_balance=0.0, now=NOW, month_names=names,
    )
    assert proj["month_label"].tolist() == ["Nov 2026", "Dez 2026"]


def test_multipliers_apply_to_averages_not_recurring():
    proj = project(avg=(1000.0, 800.0), rec=(500.0, 50.0), horizon_months=2,
                   income_multiplier_pct=80, expense_multiplier_pct=150)
    assert proj["income"].tolist() == [1300.0, 1300.0]
    assert proj["expense"].tolist() == [1250.0, 1250.0]


def test_recurring_expense_in_every_month():
    proj = project(avg=(0.0, 0.0), rec=(0.0, 50.0), horizon_months=24)
    assert (proj["expense"] == 50.0).all()


def test_extra_expense_lands_in_one_month():
    proj = project(horizon_months=6, extra_expense_amount=1000.0, extra_expense_month=3)
    expected = [800.0, 800.0, 1800.0, 800.0, 800.0, 800.0]
    assert proj["expense"].tolist() == expected
    assert proj.loc[proj["month_index"] == 3, "balance"].item() == -800.0


@pytest.mark.parametrize("month", [0, 7, -1, 100])
def test_out_of_range_extra_month_is_ignored(month):
    proj = project(horizon_months=6, extra_expense_amount=1000.0, extra_expense_month=month)
    assert (proj["expense"] == 800.0).all()


def test_horizon_below_one_gives_empty_frame():
    proj = project(horizon_months=0)
    assert proj.empty
    assert list(proj.columns) == list(PROJECTION_COLUMNS)


def test_accumulation_invariant_and_savings_monotonic():
    proj = project(avg=(900.0, 850.0), anchor=-300.0, horizon_months=12,
                   extra_expense_amount=2500.0, extra_expense_month=5,
                   expense_multiplier_pct=110)

    acc = proj["accumulated_balance"].to_numpy()
    bal = proj["balance"].to_numpy()
    prev = np.concatenate(([-300.0], acc[:-1]))
    assert np.array_equal(acc, prev + bal)

    savings = proj["accumulated_savings"].to_numpy()
    assert (np.diff(savings) >= 0).all()
    assert savings[-1] == pytest.approx(bal[bal > 0].sum())


def test_negative_months_do_not_touch_savings():
    proj = project(avg=(500.0, 800.0), horizon_months=3, anchor=1000.0)
    assert proj["balance"].tolist() == [-300.0, -300.0, -300.0]
    assert proj["accumulated_savings"].tolist() == [0.0, 0.0, 0.0]
    assert proj["accumulated_balance"].tolist() == [700.0, 400.0, 100.0]


def test_repeated_calls_are_identical():
    a = project(horizon_months=5, extra_expense_amount=10.0, extra_expense_month=2)
    b = project(horizon_months=5, extra_expense_amount=10.0, extra_expense_month=2)
    pd.testing.assert_frame_equal(a, b)
