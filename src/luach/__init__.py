"""luach public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard attributes on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    parse_date,
    compute_daily_record,
    daily_records,
    zmanim,
    year_observances,
    upcoming_observances,
    weekly_reading,
    to_hebrew,
    to_solar,
    format_display_date,
)
from .attributes.observances import Observance, observances_for, omer_count
from .attributes.registry import register_attribute, compute_attributes
from .engines.parsha import WeeklyReading, reading_for, reading_on
from .core.errors import LuachError
from .core.types import (
    SolarDate,
    HebrewDate,
    HebrewMonth,
    YearLengthClass,
    GeoLocation,
    DailyTimes,
    DailyRecord,
)

__all__ = [
    "parse_date",
    "compute_daily_record",
    "daily_records",
    "zmanim",
    "year_observances",
    "upcoming_observances",
    "weekly_reading",
    "to_hebrew",
    "to_solar",
    "format_display_date",
    "Observance",
    "observances_for",
    "omer_count",
    "register_attribute",
    "compute_attributes",
    "WeeklyReading",
    "reading_for",
    "reading_on",
    "LuachError",
    "SolarDate",
    "HebrewDate",
    "HebrewMonth",
    "YearLengthClass",
    "GeoLocation",
    "DailyTimes",
    "DailyRecord",
]
