from enum import Enum


class TimeFrame(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value, default=None):
        """
        Lenient lookup: returns `default` for unknown values instead of raising,
        so callers can fall back to the default scaling factor.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return default

    @property
    def period_field(self) -> str:
        return {
            TimeFrame.WEEK: "week_number",
            TimeFrame.MONTH: "month_number",
            TimeFrame.YEAR: "year",
        }[self]

    @property
    def value_field(self) -> str:
        return f"total_sales_in_{self.value}"

    @property
    def lower_field(self) -> str:
        return f"{self.value_field}_lower"

    @property
    def upper_field(self) -> str:
        return f"{self.value_field}_upper"


def period_label(record: dict, time_frame: TimeFrame) -> str:
    # yearly records carry the year twice, once as the period
    return f"{record.get('year')}-{record.get(time_frame.period_field)}"


def period_sort_key(label: str):
    year, _, period = str(label).partition("-")
    try:
        return int(year), int(period or 0)
    except ValueError:
        return 0, 0
