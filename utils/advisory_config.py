from dataclasses import dataclass, field, replace
from types import MappingProxyType

MODEL_VERSION = "v1.0"

HIGH_GROWTH = "high-growth"
MODERATE_GROWTH = "moderate-growth"
STABLE = "stable"
DECLINING = "declining"
INSUFFICIENT_DATA = "insufficient-data"

GROWTH_CATEGORY_LABELS = {
    HIGH_GROWTH: "high growth",
    MODERATE_GROWTH: "moderate growth",
    STABLE: "stable demand",
    DECLINING: "declining demand",
    INSUFFICIENT_DATA: "insufficient forecast data",
}


@dataclass(frozen=True)
class AdvisoryThresholds:
    # confidence erosion per time frame; yearly data is expected to be smooth
    scaling_factors: dict = field(default_factory=lambda: {"week": 3.0, "month": 5.0, "year": 8.0})
    default_scaling_factor: float = 5.0
    sample_saturation: float = 10.0  # points at which sample count stops damping the penalty

    high_growth: float = 0.20
    moderate_growth: float = 0.05

    multipliers: dict = field(default_factory=lambda: {
        HIGH_GROWTH: 1.50,
        MODERATE_GROWTH: 1.20,
        STABLE: 1.05,
        DECLINING: 0.90,
    })
    min_reorder_point: int = 1

    confidence_high: float = 70.0
    confidence_medium: float = 40.0

    def __post_init__(self):
        # read-only copies of the tables
        object.__setattr__(self, "scaling_factors", MappingProxyType(dict(self.scaling_factors)))
        object.__setattr__(self, "multipliers", MappingProxyType(dict(self.multipliers)))

    def scaling_factor_for(self, time_frame) -> float:
        key = getattr(time_frame, "value", time_frame)
        return float(self.scaling_factors.get(key, self.default_scaling_factor))

    def with_overrides(self, **overrides):
        clean = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **clean) if clean else self


DEFAULT_THRESHOLDS = AdvisoryThresholds()
