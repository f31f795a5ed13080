import pytest

from models.confidence_model import ConfidenceResult, score_confidence
from models.growth_model import analyze_growth
from models.metric_presenter import (
    confidence_metric, growth_metric, margin_trend_metric, predicted_value_metric,
    format_currency, format_signed_percent, prepare_chart_rows, reorder_metric, MetricRecord,
)
from models.reorder_model import advise_reorder_point
from models.series_model import parse_item_forecast


def test_formatting():
    assert format_currency(1234567.4) == "$1,234,567"
    assert format_signed_percent(12.345) == "+12.3%"
    assert format_signed_percent(-3) == "-3.0%"
    assert format_signed_percent(-0.0) == "+0.0%"


def test_predicted_value_metric():
    m = predicted_value_metric("Predicted Sales", analyze_growth([200, 150]))
    assert m.value == "$150"
    assert m.trend == "down"
    assert m.color == "danger"
    assert m.percentage == 25


def test_zero_growth_reads_as_favorable():
    m = growth_metric("Sales Growth", analyze_growth([100, 100]))
    assert (m.value, m.trend, m.color) == ("+0.0%", "up", "success")


def test_margin_trend_is_three_way():
    assert margin_trend_metric(analyze_growth([100, 100])).color == "warning"
    assert margin_trend_metric(analyze_growth([100, 90])).trend == "down"
    assert margin_trend_metric(analyze_growth([100, 110])).color == "success"


def test_confidence_bands():
    assert confidence_metric(score_confidence(0, "week", 10)).color == "success"
    assert confidence_metric(score_confidence(0.1, "month", 10)).color == "warning"
    m = confidence_metric(score_confidence(0.2, "year", 10))
    assert (m.value, m.trend, m.color) == ("0%", "down", "danger")


def test_confidence_band_edges():
    # exactly 70 and 40 fall into the lower band
    assert confidence_metric(ConfidenceResult(70.0, 0.1, 3, 10)).color == "warning"
    assert confidence_metric(ConfidenceResult(40.0, 0.12, 5, 10)).color == "danger"
    assert confidence_metric(ConfidenceResult(70.5, 0.1, 3, 10)).color == "success"


def test_to_dict_drops_empty_percentage():
    assert "percentage" not in MetricRecord("t", "v", "up", "success").to_dict()


def test_chart_rows(weekly_forecast):
    rows = prepare_chart_rows(parse_item_forecast(weekly_forecast))
    assert [r["time"] for r in rows] == ["2024-1", "2024-2", "2024-3", "2024-4"]
    assert rows[0]["historical"] == 100 and rows[0]["lower"] is None
    assert rows[2]["predicted"] == 120
    assert (rows[2]["lower"], rows[2]["upper"]) == (110, 130)


def test_chart_rows_without_intervals(weekly_forecast):
    weekly_forecast["has_confidence_intervals"] = False
    rows = prepare_chart_rows(parse_item_forecast(weekly_forecast))
    assert all(r["lower"] is None and r["upper"] is None for r in rows)


def test_chart_rows_sort_across_years():
    payload = {
        "time_frame": "month",
        "historical_data": [{"year": 2023, "month_number": 12, "total_sales_in_month": 5}],
        "prediction_data": [{"year": 2023, "month_number": 2, "total_sales_in_month": 6}],
    }
    rows = prepare_chart_rows(parse_item_forecast(payload))
    assert [r["time"] for r in rows] == ["2023-2", "2023-12"]


def test_reorder_metric():
    m = reorder_metric(advise_reorder_point(10, 100, 80))
    assert (m.value, m.trend, m.color) == ("9", "down", "danger")
    assert m.percentage == pytest.approx(20)
    assert reorder_metric(advise_reorder_point(10, 100, 102)).color == "warning"
    assert reorder_metric(advise_reorder_point(10, 100, None)).color == "secondary"
