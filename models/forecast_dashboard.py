"""
Forecast view metrics as a pure function of whatever inputs have arrived.

The sales series, the profit series and the top products list are fetched
independently and may land in any order. Each one is held in a snapshot as
either NOT_LOADED or Loaded(data); every time an input arrives the caller
swaps it into the snapshot and recomputes the full metric set. Nothing is
patched or appended incrementally, so the result only depends on the
snapshot, never on arrival order.
"""
from dataclasses import dataclass, replace

from models.confidence_model import score_series_confidence
from models.growth_model import analyze_growth
from models.metric_presenter import (
    predicted_value_metric, growth_metric, margin_trend_metric, confidence_metric,
    top_growth_metric, insufficient_metric,
)
from models.series_model import parse_chart_series
from models.top_growth_model import coerce_products, select_top_growth_product
from utils.advisory_config import DEFAULT_THRESHOLDS
from utils.errors import InvalidInput
from utils.time_frames import TimeFrame

SALES = "sales"
PROFITS = "profits"
TOP_PRODUCTS = "top_products"


@dataclass(frozen=True)
class NotLoaded:
    pass


@dataclass(frozen=True)
class Loaded:
    data: object


NOT_LOADED = NotLoaded()


@dataclass(frozen=True)
class ForecastSnapshot:
    time_frame: TimeFrame = TimeFrame.WEEK
    sales: object = NOT_LOADED
    profits: object = NOT_LOADED
    top_products: object = NOT_LOADED

    def with_input(self, name: str, data):
        if name not in (SALES, PROFITS, TOP_PRODUCTS):
            raise InvalidInput(f"unknown forecast input {name!r}")
        # inputs are normalised on arrival so malformed payloads fail here
        if name != TOP_PRODUCTS:
            data = parse_chart_series(data)
        else:
            data = tuple(coerce_products(data if data is not None else []))
        return replace(self, **{name: Loaded(data)})

    @classmethod
    def from_payload(cls, payload: dict, default_time_frame=TimeFrame.WEEK):
        """Keys that are absent or null stay NOT_LOADED."""
        tf = TimeFrame.parse(payload.get("time_frame"), default=default_time_frame)
        snapshot = cls(time_frame=tf)
        for name in (SALES, PROFITS, TOP_PRODUCTS):
            if payload.get(name) is not None:
                snapshot = snapshot.with_input(name, payload[name])
        return snapshot


@dataclass(frozen=True)
class ForecastMetrics:
    sales: tuple
    profits: tuple

    def to_dict(self) -> dict:
        return {
            "sales_metrics": [m.to_dict() for m in self.sales],
            "profit_metrics": [m.to_dict() for m in self.profits],
        }


def _sales_metrics(series, time_frame, thresholds) -> tuple:
    if not series:
        return (
            insufficient_metric("Predicted Sales"),
            insufficient_metric("Sales Growth"),
            insufficient_metric("Forecast Confidence"),
        )

    growth = analyze_growth(series)
    try:
        confidence = confidence_metric(score_series_confidence(series, time_frame, thresholds), thresholds)
    except InvalidInput:
        confidence = insufficient_metric("Forecast Confidence")

    return (
        predicted_value_metric("Predicted Sales", growth),
        growth_metric("Sales Growth", growth),
        confidence,
    )


def _profit_metrics(series) -> tuple:
    if not series:
        return insufficient_metric("Predicted Profit"), insufficient_metric("Profit Margin Trend")
    growth = analyze_growth(series)
    return predicted_value_metric("Predicted Profit", growth), margin_trend_metric(growth)


def compute_forecast_metrics(snapshot: ForecastSnapshot, thresholds=DEFAULT_THRESHOLDS) -> ForecastMetrics:
    sales = ()
    if isinstance(snapshot.sales, Loaded):
        sales = _sales_metrics(snapshot.sales.data, snapshot.time_frame, thresholds)

    profits = ()
    if isinstance(snapshot.profits, Loaded):
        profits = _profit_metrics(snapshot.profits.data)

    if isinstance(snapshot.top_products, Loaded):
        try:
            top = top_growth_metric(select_top_growth_product(snapshot.top_products.data))
        except InvalidInput:
            top = insufficient_metric("Top Growth Product")
        profits = profits + (top,)

    return ForecastMetrics(sales=sales, profits=profits)
