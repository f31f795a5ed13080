import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from utils.errors import InvalidInput
from utils.time_frames import TimeFrame, period_label


@dataclass(frozen=True)
class TimeSeriesPoint:
    period: str
    value: float


@dataclass(frozen=True)
class SeriesStatistics:
    mean: float
    variance: float
    cv: float
    count: int


@dataclass(frozen=True)
class ItemForecast:
    """Historical actuals and predicted points for one item in one time frame."""
    time_frame: TimeFrame
    historical: tuple
    predicted: tuple
    has_confidence_intervals: bool = False
    historical_records: tuple = ()
    predicted_records: tuple = ()


def series_values(series) -> list:
    return [p.value if isinstance(p, TimeSeriesPoint) else p for p in series]


def _as_float_array(values) -> np.ndarray:
    try:
        arr = np.asarray(series_values(values), dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"series contains non-numeric values: {e}") from e
    if not np.all(np.isfinite(arr)):
        raise InvalidInput("series contains missing or non-finite values")
    return arr


def compute_series_statistics(values: Sequence) -> SeriesStatistics:
    """
    Population mean / variance (ddof=0) and coefficient of variation.
    A non-positive mean yields cv = 1 (maximal uncertainty).
    """
    if values is None or len(values) == 0:
        raise InvalidInput("cannot compute statistics over an empty series")

    arr = _as_float_array(values)
    mean = float(np.mean(arr))
    variance = float(np.var(arr, ddof=0))
    cv = math.sqrt(variance) / mean if mean > 0 else 1.0

    return SeriesStatistics(mean=mean, variance=variance, cv=cv, count=int(arr.size))


def series_from_values(values, labels=None) -> tuple:
    arr = _as_float_array(values if values is not None else [])
    labels = list(labels or [])
    points = []
    for i, v in enumerate(arr):
        label = str(labels[i]) if i < len(labels) else str(i + 1)
        points.append(TimeSeriesPoint(period=label, value=float(v)))
    return tuple(points)


def series_from_records(records, time_frame: TimeFrame) -> tuple:
    """
    Provider records -> TimeSeriesPoint tuple, keeping provider order.
    Values are read from the time frame's field (total_sales_in_week, ...).
    """
    if not records:
        return ()

    df = pd.DataFrame(list(records))
    field = time_frame.value_field
    if field not in df.columns:
        raise InvalidInput(f"forecast records are missing the '{field}' field")

    values = pd.to_numeric(df[field], errors="coerce")
    if values.isna().any():
        raise InvalidInput(f"forecast records contain non-numeric '{field}' values")

    return tuple(
        TimeSeriesPoint(period=period_label(rec, time_frame), value=float(v))
        for rec, v in zip(df.to_dict("records"), values)
    )


def parse_chart_series(payload) -> tuple:
    """Aggregate payload {"labels": [...], "values": [...]}; the last value is the prediction."""
    if payload is None:
        return ()
    if isinstance(payload, (list, tuple)):
        return series_from_values(payload)
    if not isinstance(payload, dict):
        raise InvalidInput(f"series payload must be an object, got {type(payload).__name__}")
    values = payload.get("values")
    if not values:
        return ()
    if not isinstance(values, (list, tuple)):
        raise InvalidInput("series 'values' must be a list")
    labels = payload.get("labels")
    if labels is not None and not isinstance(labels, (list, tuple)):
        raise InvalidInput("series 'labels' must be a list")
    return series_from_values(values, labels)


def _record_list(payload, key):
    records = payload.get(key) or []
    if not isinstance(records, (list, tuple)) or not all(isinstance(r, dict) for r in records):
        raise InvalidInput(f"'{key}' must be a list of objects")
    return records


def parse_item_forecast(payload, time_frame=None) -> ItemForecast:
    if not payload:
        raise InvalidInput("no forecast data available")
    if not isinstance(payload, dict):
        raise InvalidInput(f"forecast payload must be an object, got {type(payload).__name__}")
    if payload.get("error"):
        raise InvalidInput(str(payload["error"]))

    # an unrecognised frame in the payload defers to the caller's frame
    fallback = TimeFrame.parse(time_frame, default=TimeFrame.WEEK)
    tf = TimeFrame.parse(payload.get("time_frame"), default=fallback)
    historical = _record_list(payload, "historical_data")
    predicted = _record_list(payload, "prediction_data")

    return ItemForecast(
        time_frame=tf,
        historical=series_from_records(historical, tf),
        predicted=series_from_records(predicted, tf),
        has_confidence_intervals=bool(payload.get("has_confidence_intervals")),
        historical_records=tuple(historical),
        predicted_records=tuple(predicted),
    )


def series_average(series) -> float | None:
    if not series:
        return None
    return float(np.mean(_as_float_array(series)))
