"""
Financial health verdict for a projection.

Rules are evaluated in order and the first match wins:
  1. end balance < 0                                   → critical
  2. negative months > negative_month_ratio × horizon  → warning
  3. total savings < avg monthly expense × buffer      → caution
  4. otherwise                                         → good

The 25% / 3-month defaults are rules of thumb kept for parity with the
dashboard, not calibrated thresholds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from .summary import ForecastSummary

logger = logging.getLogger(__name__)

CRITICAL = "critical"
WARNING = "warning"
CAUTION = "caution"
GOOD = "good"

HEALTH_STATUSES: Tuple[str, ...] = (CRITICAL, WARNING, CAUTION, GOOD)

HEALTH_MESSAGES: Dict[str, Tuple[str, str]] = {
    CRITICAL: (
        "Critical Situation",
        "Your projected balance is negative. Cut expenses or raise income urgently.",
    ),
    WARNING: (
        "Attention",
        "You will have {months_negative} months with a negative balance. Review your budget.",
    ),
    CAUTION: (
        "Insufficient Reserve",
        "Your savings will not reach {buffer:g} months of expenses. Try to raise your savings rate.",
    ),
    GOOD: (
        "Stable Situation",
        "Your finances are on track. Keep saving and planning ahead.",
    ),
}


@dataclass(frozen=True)
class HealthAssessment:
    status: str
    title: str
    message: str

    @property
    def is_good(self) -> bool:
        return self.status == GOOD


def _assessment(status: str, **fmt) -> HealthAssessment:
    title, message = HEALTH_MESSAGES[status]
    return HealthAssessment(status=status, title=title, message=message.format(**fmt))


def assess_health(
    summary: ForecastSummary,
    *,
    negative_month_ratio: float = 0.25,
    savings_buffer_months: float = 3.0,
) -> HealthAssessment:
    if summary.end_balance < 0:
        result = _assessment(CRITICAL)
    elif summary.months_negative > negative_month_ratio * summary.horizon_months:
        result = _assessment(WARNING, months_negative=summary.months_negative)
    elif summary.total_savings < summary.avg_monthly_expense * savings_buffer_months:
        result = _assessment(CAUTION, buffer=savings_buffer_months)
    else:
        result = _assessment(GOOD)

    logger.info("Forecast health: %s", result.status)
    return result
