"""
Scenario parameters — user-adjustable multipliers and one-off expenses.
"""

from .base import SCENARIO_BOUNDS, ScenarioParameters, clamp_scenario
from .presets import NAMED_SCENARIOS, get_scenario

__all__ = [
    "SCENARIO_BOUNDS",
    "ScenarioParameters",
    "clamp_scenario",
    "NAMED_SCENARIOS",
    "get_scenario",
]
