import logging
import math
from dataclasses import dataclass

from models.series_model import compute_series_statistics, series_values
from utils.advisory_config import DEFAULT_THRESHOLDS
from utils.errors import InvalidInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfidenceResult:
    percentage: float
    cv: float
    scaling_factor: float
    sample_count: int
    low_evidence: bool = False


def _data_point_factor(sample_count: int, saturation: float) -> float:
    if saturation <= 0:
        return 1.0
    return max(0.0, min(1.0, sample_count / saturation))


def score_confidence(cv: float, time_frame, sample_count: int, thresholds=DEFAULT_THRESHOLDS) -> ConfidenceResult:
    """
    confidence = clamp(100 - cv * scaling * 100 * min(1, n / saturation), 0, 100)

    Unknown time frames use the default scaling factor. Zero samples collapse
    the penalty to nothing (confidence 100); the result is flagged low_evidence.
    """
    cv = float(cv)
    if math.isnan(cv):
        cv = 1.0

    scaling = thresholds.scaling_factor_for(time_frame)
    factor = _data_point_factor(int(sample_count), thresholds.sample_saturation)

    penalty = cv * scaling * 100.0 * factor if factor > 0 else 0.0
    percentage = max(0.0, min(100.0, 100.0 - penalty))

    low_evidence = sample_count <= 0
    if low_evidence:
        logger.warning("Confidence scored from %s samples; result of %.0f%% carries no evidence",
                       sample_count, percentage)

    return ConfidenceResult(
        percentage=percentage,
        cv=cv,
        scaling_factor=scaling,
        sample_count=int(sample_count),
        low_evidence=low_evidence,
    )


def score_series_confidence(values, time_frame, thresholds=DEFAULT_THRESHOLDS) -> ConfidenceResult:
    """
    Confidence for an aggregate series whose final value is the prediction.
    Statistics run over the historical part only; fewer than two values raise InvalidInput.
    """
    values = series_values(values or [])
    historical = values[:-1]
    if not historical:
        raise InvalidInput("at least one historical value is required besides the prediction")

    stats = compute_series_statistics(historical)
    return score_confidence(stats.cv, time_frame, stats.count, thresholds)
