import logging
import math
from dataclasses import dataclass

from models.series_model import ItemForecast, series_average
from utils.advisory_config import (
    DEFAULT_THRESHOLDS, HIGH_GROWTH, MODERATE_GROWTH, STABLE, DECLINING, INSUFFICIENT_DATA,
    GROWTH_CATEGORY_LABELS, MODEL_VERSION,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReorderSuggestion:
    suggested_point: int
    category: str
    growth_rate_percent: float
    current_point: int
    reason: str
    model_version: str = MODEL_VERSION

    def to_dict(self) -> dict:
        return {
            "suggested_reorder_point": self.suggested_point,
            "current_reorder_point": self.current_point,
            "category": self.category,
            "growth_rate_percent": round(self.growth_rate_percent, 3),
            "reason": self.reason,
            "model_version": self.model_version,
        }


def classify_growth(rate: float, thresholds=DEFAULT_THRESHOLDS) -> str:
    if rate > thresholds.high_growth:
        return HIGH_GROWTH
    if rate > thresholds.moderate_growth:
        return MODERATE_GROWTH
    if rate >= 0:
        return STABLE
    return DECLINING


def _suggested_point(current: int, category: str, thresholds) -> int:
    floor_point = thresholds.min_reorder_point
    if category == DECLINING:
        return max(floor_point, math.floor(current * thresholds.multipliers[DECLINING]))

    # no prediction data keeps the stable nudge
    key = STABLE if category == INSUFFICIENT_DATA else category
    return max(floor_point, math.ceil(current * thresholds.multipliers[key]))


def advise_reorder_point(
        current_reorder_point: int,
        historical_average: float | None,
        predicted_average: float | None,
        thresholds=DEFAULT_THRESHOLDS,
) -> ReorderSuggestion:
    """
    Suggests a new reorder point from the historical vs. predicted average demand.
    Advisory only; the inventory record is never touched.
    A missing predicted average means no prediction data (insufficient-data).
    """
    current = max(0, int(current_reorder_point or 0))

    if predicted_average is None:
        rate = 0.0
        category = INSUFFICIENT_DATA
    else:
        hist = float(historical_average or 0.0)
        rate = (float(predicted_average) - hist) / hist if hist > 0 else 0.0
        category = classify_growth(rate, thresholds)

    suggested = _suggested_point(current, category, thresholds)
    percent = rate * 100.0

    return ReorderSuggestion(
        suggested_point=int(suggested),
        category=category,
        growth_rate_percent=percent,
        current_point=current,
        reason=f"Based on {GROWTH_CATEGORY_LABELS[category]} ({percent:.1f}%)",
    )


def suggest_reorder_from_forecast(
        current_reorder_point: int,
        forecast: ItemForecast,
        thresholds=DEFAULT_THRESHOLDS,
) -> ReorderSuggestion:
    historical_avg = series_average(forecast.historical) or 0.0
    predicted_avg = series_average(forecast.predicted)

    if predicted_avg is None:
        logger.debug("No prediction points for %s forecast; reporting insufficient data",
                     forecast.time_frame.value)

    return advise_reorder_point(current_reorder_point, historical_avg, predicted_avg, thresholds)
