import pytest

from config import Config
from utils.advisory_config import DEFAULT_THRESHOLDS, AdvisoryThresholds
from utils.time_frames import TimeFrame, period_sort_key


def test_default_thresholds():
    t = DEFAULT_THRESHOLDS
    assert (t.high_growth, t.moderate_growth) == (0.20, 0.05)
    assert t.scaling_factor_for("week") == 3
    assert t.scaling_factor_for("decade") == t.default_scaling_factor == 5


def test_with_overrides_ignores_none():
    t = DEFAULT_THRESHOLDS.with_overrides(high_growth=None)
    assert t is DEFAULT_THRESHOLDS
    t = DEFAULT_THRESHOLDS.with_overrides(high_growth=0.3, moderate_growth=None)
    assert t.high_growth == 0.3
    assert t.moderate_growth == 0.05


def test_config_thresholds_from_env(monkeypatch):
    monkeypatch.setattr(Config, "GROWTH_HIGH_THRESHOLD", 0.4)
    monkeypatch.setattr(Config, "CONFIDENCE_SAMPLE_SATURATION", 20.0)
    t = Config().thresholds
    assert isinstance(t, AdvisoryThresholds)
    assert t.high_growth == 0.4
    assert t.sample_saturation == 20.0


def test_time_frame_fields():
    assert TimeFrame.parse("Month") is TimeFrame.MONTH
    assert TimeFrame.parse("fortnight") is None
    assert TimeFrame.WEEK.value_field == "total_sales_in_week"
    assert TimeFrame.YEAR.period_field == "year"
    assert TimeFrame.MONTH.upper_field == "total_sales_in_month_upper"


def test_period_sort_key():
    assert period_sort_key("2024-3") == (2024, 3)
    assert period_sort_key("garbage") == (0, 0)


def test_threshold_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_THRESHOLDS.multipliers["stable"] = 2.0
    with pytest.raises(TypeError):
        DEFAULT_THRESHOLDS.scaling_factors["week"] = 1.0


def test_overrides_do_not_share_tables():
    table = {"week": 1.0, "month": 2.0, "year": 3.0}
    t = AdvisoryThresholds(scaling_factors=table)
    table["week"] = 99.0
    assert t.scaling_factor_for("week") == 1.0
    copy = t.with_overrides(high_growth=0.3)
    assert copy.scaling_factors == t.scaling_factors
    assert copy.multipliers == DEFAULT_THRESHOLDS.multipliers
