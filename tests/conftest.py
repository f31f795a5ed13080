import pytest

from app import app as flask_app


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture
def weekly_forecast():
    return {
        "item_name": "Widget",
        "sku": "W-1",
        "time_frame": "week",
        "has_confidence_intervals": True,
        "historical_data": [
            {"year": 2024, "week_number": 1, "total_sales_in_week": 100},
            {"year": 2024, "week_number": 2, "total_sales_in_week": 100},
        ],
        "prediction_data": [
            {"year": 2024, "week_number": 3, "total_sales_in_week": 120,
             "total_sales_in_week_lower": 110, "total_sales_in_week_upper": 130},
            {"year": 2024, "week_number": 4, "total_sales_in_week": 130,
             "total_sales_in_week_lower": 115, "total_sales_in_week_upper": 145},
        ],
    }
