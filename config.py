import os

from dotenv import load_dotenv

from utils.advisory_config import DEFAULT_THRESHOLDS

load_dotenv()


def _optional_float(name):
    raw = os.getenv(name)
    return float(raw) if raw not in (None, "") else None


class Config:
    FLASK_ENV = os.getenv("FLASK_ENV", "production")
    FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
    FLASK_PORT = int(os.getenv("FLASK_PORT", "6000"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    DEFAULT_TIME_FRAME = os.getenv("DEFAULT_TIME_FRAME", "week")

    GROWTH_HIGH_THRESHOLD = _optional_float("GROWTH_HIGH_THRESHOLD")
    GROWTH_MODERATE_THRESHOLD = _optional_float("GROWTH_MODERATE_THRESHOLD")
    CONFIDENCE_SAMPLE_SATURATION = _optional_float("CONFIDENCE_SAMPLE_SATURATION")

    @property
    def thresholds(self):
        return DEFAULT_THRESHOLDS.with_overrides(
            high_growth=self.GROWTH_HIGH_THRESHOLD,
            moderate_growth=self.GROWTH_MODERATE_THRESHOLD,
            sample_saturation=self.CONFIDENCE_SAMPLE_SATURATION,
        )


config = Config()
