import pytest

from scenarios.base import ScenarioParameters, clamp_scenario
from scenarios.presets import NAMED_SCENARIOS, get_scenario


def test_defaults():
    s = ScenarioParameters()
    assert (s.horizon_months, s.income_multiplier_pct, s.expense_multiplier_pct) == (12, 100, 100)
    assert s.extra_expense_amount == 0
    assert s.extra_expense_month == 6
    assert not s.has_extra_expense
    assert s.income_factor == 1.0


def test_scenario_is_immutable():
    s = ScenarioParameters()
    with pytest.raises(AttributeError):
        s.horizon_months = 3
    t = s.with_changes(horizon_months=3)
    assert t.horizon_months == 3 and s.horizon_months == 12


def test_clamp_scenario():
    s = clamp_scenario(ScenarioParameters(
        horizon_months=60,
        income_multiplier_pct=10,
        expense_multiplier_pct=400,
        extra_expense_amount=-1,
        extra_expense_month=50,
    ))
    assert s.horizon_months == 36
    assert s.income_multiplier_pct == 50
    assert s.expense_multiplier_pct == 150
    assert s.extra_expense_amount == 0.0
    assert s.extra_expense_month == 36


def test_clamp_pulls_extra_month_into_new_horizon():
    s = clamp_scenario(ScenarioParameters(horizon_months=0, extra_expense_month=6))
    assert s.horizon_months == 3
    assert s.extra_expense_month == 3


def test_has_extra_expense():
    assert ScenarioParameters(extra_expense_amount=500, extra_expense_month=2).has_extra_expense
    assert not ScenarioParameters(extra_expense_amount=500, extra_expense_month=13).has_extra_expense


@pytest.mark.parametrize("name", sorted(NAMED_SCENARIOS))
def test_presets_build(name):
    s = get_scenario(name, horizon_months=24)
    assert s.horizon_months == 24
    assert isinstance(s.income_multiplier_pct, int)


def test_emergency_preset():
    s = get_scenario("Emergency_Expense")
    assert s.extra_expense_amount == 5000
    assert s.extra_expense_month == 3


def test_unknown_preset():
    with pytest.raises(KeyError, match="Available"):
        get_scenario("lottery")
