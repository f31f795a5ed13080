from dataclasses import dataclass, asdict

from models.growth_model import GrowthResult, UP, DOWN, NEUTRAL
from models.series_model import ItemForecast
from utils.advisory_config import DEFAULT_THRESHOLDS, HIGH_GROWTH, MODERATE_GROWTH, STABLE, DECLINING
from utils.time_frames import period_label, period_sort_key

SUCCESS = "success"
WARNING = "warning"
DANGER = "danger"
SECONDARY = "secondary"

INSUFFICIENT_DATA_TEXT = "Insufficient data"


@dataclass(frozen=True)
class MetricRecord:
    title: str
    value: str
    trend: str
    color: str
    percentage: float | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        if self.percentage is None:
            data.pop("percentage")
        return data


def format_currency(value: float) -> str:
    return f"${value:,.0f}"


def format_signed_percent(percent: float) -> str:
    percent = percent + 0.0  # drop negative zero
    sign = "+" if percent >= 0 else ""
    return f"{sign}{percent:.1f}%"


def _favorable(growth: GrowthResult):
    # zero growth reads as "up" on the headline cards
    return (UP, SUCCESS) if growth.rate >= 0 else (DOWN, DANGER)


def insufficient_metric(title: str) -> MetricRecord:
    return MetricRecord(title=title, value=INSUFFICIENT_DATA_TEXT, trend=NEUTRAL, color=SECONDARY)


def predicted_value_metric(title: str, growth: GrowthResult) -> MetricRecord:
    trend, color = _favorable(growth)
    return MetricRecord(
        title=title,
        value=format_currency(growth.current or 0.0),
        trend=trend,
        color=color,
        percentage=abs(growth.percent),
    )


def growth_metric(title: str, growth: GrowthResult) -> MetricRecord:
    trend, color = _favorable(growth)
    return MetricRecord(title=title, value=format_signed_percent(growth.percent), trend=trend, color=color)


def margin_trend_metric(growth: GrowthResult) -> MetricRecord:
    color = {UP: SUCCESS, DOWN: DANGER}.get(growth.direction, WARNING)
    return MetricRecord(
        title="Profit Margin Trend",
        value=format_signed_percent(growth.percent),
        trend=growth.direction,
        color=color,
    )


def confidence_metric(confidence, thresholds=DEFAULT_THRESHOLDS) -> MetricRecord:
    pct = confidence.percentage
    if pct > thresholds.confidence_high:
        trend, color = UP, SUCCESS
    elif pct > thresholds.confidence_medium:
        trend, color = NEUTRAL, WARNING
    else:
        trend, color = DOWN, DANGER
    return MetricRecord(title="Forecast Confidence", value=f"{pct:.0f}%", trend=trend, color=color)


def top_growth_metric(product) -> MetricRecord:
    return MetricRecord(title="Top Growth Product", value=product.name, trend=UP, color=SUCCESS)


def reorder_metric(suggestion) -> MetricRecord:
    trend, color = {
        HIGH_GROWTH: (UP, SUCCESS),
        MODERATE_GROWTH: (UP, SUCCESS),
        STABLE: (NEUTRAL, WARNING),
        DECLINING: (DOWN, DANGER),
    }.get(suggestion.category, (NEUTRAL, SECONDARY))
    return MetricRecord(
        title="Reorder Point Suggestion",
        value=str(suggestion.suggested_point),
        trend=trend,
        color=color,
        percentage=abs(suggestion.growth_rate_percent),
    )


def prepare_chart_rows(forecast: ItemForecast) -> list:
    """
    Historical and predicted records merged into chart rows sorted by (year, period).
    Bounds are passed through only for predicted rows when intervals are flagged.
    """
    tf = forecast.time_frame
    rows = []
    for rec in forecast.historical_records:
        rows.append({
            "time": period_label(rec, tf),
            "historical": rec.get(tf.value_field),
            "predicted": None,
            "lower": None,
            "upper": None,
        })
    for rec in forecast.predicted_records:
        with_bounds = forecast.has_confidence_intervals
        rows.append({
            "time": period_label(rec, tf),
            "historical": None,
            "predicted": rec.get(tf.value_field),
            "lower": rec.get(tf.lower_field) if with_bounds else None,
            "upper": rec.get(tf.upper_field) if with_bounds else None,
        })

    rows.sort(key=lambda r: period_sort_key(r["time"]))
    return rows
