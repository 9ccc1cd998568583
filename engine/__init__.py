"""
Forecast engine — deterministic monthly projection math + orchestration.
"""

from .projection import generate_projection
from .runner import ForecastResult, ForecastRunner, run_forecast

__all__ = ["generate_projection", "ForecastResult", "ForecastRunner", "run_forecast"]
