import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from config import config
from models.confidence_model import score_series_confidence
from models.forecast_dashboard import ForecastSnapshot, compute_forecast_metrics
from models.growth_model import analyze_growth
from models.metric_presenter import prepare_chart_rows, reorder_metric
from models.reorder_model import suggest_reorder_from_forecast
from models.series_model import compute_series_statistics, parse_item_forecast, series_from_values
from models.top_growth_model import select_top_growth_product, rank_top_growth_products
from utils.advisory_config import MODEL_VERSION
from utils.errors import InvalidInput
from utils.time_frames import TimeFrame

# ✅ Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger("StockSightAdvisory")

app = Flask(__name__)
CORS(app)

THRESHOLDS = config.thresholds
DEFAULT_TIME_FRAME = TimeFrame.parse(config.DEFAULT_TIME_FRAME, default=TimeFrame.WEEK)

logger.info("🚀 StockSight advisory service initialized (model %s).", MODEL_VERSION)


def _error(message: str, status: int = 400):
    return jsonify({"status": "error", "message": message}), status


@app.errorhandler(InvalidInput)
def handle_invalid_input(e):
    logger.info(f"Rejected advisory request: {e}")
    return _error(str(e))


def _body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInput("request body must be a JSON object")
    return data


def _time_frame(data):
    return TimeFrame.parse(data.get("time_frame"), default=DEFAULT_TIME_FRAME)


@app.route("/api/v1/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@app.route("/api/v1/forecast/statistics", methods=["POST"])
def forecast_statistics():
    """
    Body:
    {
      "values": [120, 140, 135]    # historical values only
    }
    """
    data = _body()
    if data.get("values") is None:
        return _error("values is required")

    stats = compute_series_statistics(series_from_values(data["values"]))
    return jsonify({
        "status": "success",
        "mean": stats.mean,
        "variance": stats.variance,
        "cv": stats.cv,
        "count": stats.count,
    })


@app.route("/api/v1/forecast/confidence", methods=["POST"])
def forecast_confidence():
    """
    Body:
    {
      "values": [120, 140, 135, 150],   # last value is the prediction
      "time_frame": "week"              # optional; week | month | year
    }
    """
    data = _body()
    if data.get("values") is None:
        return _error("values is required")

    result = score_series_confidence(series_from_values(data["values"]), _time_frame(data), THRESHOLDS)
    return jsonify({
        "status": "success",
        "percentage": result.percentage,
        "cv": result.cv,
        "scaling_factor": result.scaling_factor,
        "sample_count": result.sample_count,
        "low_evidence": result.low_evidence,
    })


@app.route("/api/v1/forecast/growth", methods=["POST"])
def forecast_growth():
    data = _body()
    if data.get("values") is None:
        return _error("values is required")

    growth = analyze_growth(series_from_values(data["values"]))
    return jsonify({
        "status": "success",
        "rate": growth.rate,
        "percent": growth.percent,
        "direction": growth.direction,
    })


@app.route("/api/v1/forecast/metrics", methods=["POST"])
def forecast_metrics():
    """
    Body (any input may be omitted or null while it is still loading):
    {
      "time_frame": "month",
      "sales": {"labels": [...], "values": [...]},
      "profits": {"labels": [...], "values": [...]},
      "top_products": [{"name": "...", "sku": "...", "predicted_increase": 12.5}]
    }
    """
    data = _body()
    snapshot = ForecastSnapshot.from_payload(data, default_time_frame=DEFAULT_TIME_FRAME)
    metrics = compute_forecast_metrics(snapshot, THRESHOLDS)

    return jsonify({"status": "success", "time_frame": snapshot.time_frame.value, **metrics.to_dict()})


@app.route("/api/v1/forecast/chart", methods=["POST"])
def forecast_chart():
    data = _body()
    if not data.get("forecast"):
        return _error("forecast is required")

    forecast = parse_item_forecast(data["forecast"], _time_frame(data))
    rows = prepare_chart_rows(forecast)
    return jsonify({"status": "success", "time_frame": forecast.time_frame.value, "count": len(rows), "rows": rows})


@app.route("/api/v1/reorder-point/suggest", methods=["POST"])
def suggest_reorder_point():
    """
    Body:
    {
      "current_reorder_point": 10,
      "time_frame": "week",
      "forecast": {"historical_data": [...], "prediction_data": [...]}
    }
    Advisory only: nothing is written back to the inventory record.
    """
    data = _body()
    if "current_reorder_point" not in data or not data.get("forecast"):
        return _error("current_reorder_point and forecast are required")

    try:
        current = int(data.get("current_reorder_point") or 0)
    except (TypeError, ValueError, OverflowError):
        return _error("current_reorder_point must be an integer")
    if current < 0:
        return _error("current_reorder_point must be >= 0")

    forecast = parse_item_forecast(data["forecast"], _time_frame(data))
    suggestion = suggest_reorder_from_forecast(current, forecast, THRESHOLDS)
    return jsonify({"status": "success", **suggestion.to_dict(), "metric": reorder_metric(suggestion).to_dict()})


@app.route("/api/v1/products/top-growth", methods=["POST"])
def top_growth_products():
    """
    Body:
    {
      "products": [{"name": "...", "sku": "...", "predicted_increase": 9}],
      "limit": 5     # optional
    }
    """
    data = _body()
    products = data.get("products")
    if products is None:
        return _error("products is required")

    try:
        limit = int(data.get("limit", 5))
    except (TypeError, ValueError):
        return _error("limit must be an integer")

    top = select_top_growth_product(products)
    ranked = rank_top_growth_products(products, limit=limit)
    return jsonify({
        "status": "success",
        "top_product": top.to_dict(),
        "count": len(ranked),
        "products": [p.to_dict() for p in ranked],
    })


if __name__ == "__main__":
    app.run(host=config.FLASK_HOST, port=config.FLASK_PORT, debug=config.FLASK_ENV == "development")
