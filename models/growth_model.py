from dataclasses import dataclass

from models.series_model import series_values

UP = "up"
DOWN = "down"
NEUTRAL = "neutral"


@dataclass(frozen=True)
class GrowthResult:
    rate: float
    direction: str
    current: float | None = None
    previous: float | None = None

    @property
    def percent(self) -> float:
        return self.rate * 100.0


def _direction(rate: float) -> str:
    if rate > 0:
        return UP
    if rate < 0:
        return DOWN
    return NEUTRAL


def growth_rate(current: float, previous: float) -> float:
    if not previous:
        return 0.0
    return (current - previous) / previous


def analyze_growth(series) -> GrowthResult:
    """
    Fractional change between the last value and the one before it.
    Missing or zero previous values give a neutral 0 rate rather than an error.
    """
    values = series_values(series or [])
    if not values:
        return GrowthResult(rate=0.0, direction=NEUTRAL)

    current = float(values[-1])
    previous = float(values[-2]) if len(values) >= 2 else 0.0
    rate = growth_rate(current, previous)

    return GrowthResult(rate=rate, direction=_direction(rate), current=current, previous=previous)
