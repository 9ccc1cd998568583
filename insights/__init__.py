"""
Insights — summary metrics, health verdict, tips and dashboard breakdowns.
"""

from .summary import ForecastSummary, summarize_projection
from .health import HEALTH_STATUSES, HealthAssessment, assess_health
from .tips import Tip, generate_tips
from .breakdown import (
    DEFAULT_BUDGET_LIMITS,
    MonthOverview,
    budget_usage,
    category_breakdown,
    month_overview,
    overall_budget,
)

__all__ = [
    "ForecastSummary",
    "summarize_projection",
    "HEALTH_STATUSES",
    "HealthAssessment",
    "assess_health",
    "Tip",
    "generate_tips",
    "DEFAULT_BUDGET_LIMITS",
    "MonthOverview",
    "budget_usage",
    "category_breakdown",
    "month_overview",
    "overall_budget",
]
