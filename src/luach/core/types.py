from __future__ import annotations
from dataclasses import dataclass, fields, replace
from datetime import date, time
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from .errors import CalculationError, InvalidDateFormatError, InvalidLatitudeError, InvalidLocationError, InvalidLongitudeError

if TYPE_CHECKING:
    from ..attributes.observances import Observance
    from ..engines.parsha import WeeklyReading


@dataclass(frozen=True, order=True)
class SolarDate:
    """Proleptic Gregorian date; year 0 is 1 BCE (astronomical numbering)."""
    year: int
    month: int
    day: int

    def __post_init__(self):
        from .time import days_in_month
        if not 1 <= self.month <= 12:
            raise InvalidDateFormatError(f"month must be 1..12, got {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise InvalidDateFormatError(f"day {self.day} out of range for {self.year:04d}-{self.month:02d}")

    @classmethod
    def from_date(cls, d: date) -> "SolarDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        if self.year < 1:
            raise InvalidDateFormatError(f"year {self.year} is not representable as datetime.date")
        return date(self.year, self.month, self.day)

    @property
    def epoch_day(self) -> int:
        from .time import to_epoch_day
        return to_epoch_day(self)

    @property
    def weekday(self) -> int:
        """0=Sunday..6=Saturday."""
        from .time import weekday
        return weekday(self.epoch_day)

    def plus_days(self, n: int) -> "SolarDate":
        from .time import from_epoch_day
        return from_epoch_day(self.epoch_day + n)

    def isoformat(self) -> str:
        if 0 <= self.year <= 9999:
            return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        sign = "-" if self.year < 0 else "+"
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


class HebrewMonth(Enum):
    """Hebrew months in canonical (Nisan-first) numbering.

    ADAR is Adar in a common year and Adar II in a leap year; ADAR_I only
    exists in leap years.
    """
    NISAN = 1
    IYAR = 2
    SIVAN = 3
    TAMMUZ = 4
    AV = 5
    ELUL = 6
    TISHREI = 7
    CHESHVAN = 8
    KISLEV = 9
    TEVET = 10
    SHEVAT = 11
    ADAR = 12
    ADAR_I = 13

    def number(self, is_leap: bool) -> int:
        """Month number within the year's 12 or 13 months (Nisan = 1)."""
        if self is HebrewMonth.ADAR:
            return 13 if is_leap else 12
        if self is HebrewMonth.ADAR_I:
            if not is_leap:
                raise CalculationError("Adar I does not exist in a common year")
            return 12
        return self.value

    @classmethod
    def from_number(cls, n: int, is_leap: bool) -> "HebrewMonth":
        if 1 <= n <= 11:
            return cls(n)
        if n == 12:
            return cls.ADAR_I if is_leap else cls.ADAR
        if n == 13:
            if not is_leap:
                raise CalculationError("Month 13 invalid in common year")
            return cls.ADAR
        raise CalculationError(f"Invalid Hebrew month number: {n}")

    def display_name(self, is_leap: bool = False) -> str:
        if self is HebrewMonth.ADAR:
            return "Adar II" if is_leap else "Adar"
        if self is HebrewMonth.ADAR_I:
            return "Adar I"
        return self.name.capitalize()


@dataclass(frozen=True)
class HebrewDate:
    year: int
    month: HebrewMonth
    day: int

    def __post_init__(self):
        if not isinstance(self.month, HebrewMonth):
            raise CalculationError(f"month must be a HebrewMonth, got {self.month!r}")
        if self.year < 1:
            raise CalculationError(f"Hebrew year must be positive, got {self.year}")
        if not 1 <= self.day <= 30:
            raise CalculationError(f"Hebrew day must be 1..30, got {self.day}")

    def __str__(self) -> str:
        from ..engines.hebrew import is_leap_year
        return f"{self.day} {self.month.display_name(is_leap_year(self.year))} {self.year}"


class YearLengthClass(Enum):
    DEFICIENT = "deficient"  # Cheshvan and Kislev both 29
    REGULAR = "regular"      # Cheshvan 29, Kislev 30
    COMPLETE = "complete"    # Cheshvan and Kislev both 30


@dataclass(frozen=True)
class GeoLocation:
    latitude: float
    longitude: float
    elevation_m: float = 0.0
    tz_offset_minutes: int = 0  # fixed offset from UTC, no DST
    name: Optional[str] = None

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidLatitudeError(self.latitude)
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidLongitudeError(self.longitude)
        if self.elevation_m < 0:
            raise InvalidLocationError(f"elevation must be >= 0, got {self.elevation_m}")

    @classmethod
    def jerusalem(cls) -> "GeoLocation":
        return cls(31.7683, 35.2137, elevation_m=754.0, tz_offset_minutes=120, name="Jerusalem")

    @classmethod
    def new_york(cls) -> "GeoLocation":
        return cls(40.7128, -74.0060, elevation_m=10.0, tz_offset_minutes=-300, name="New York")

    def with_elevation(self, elevation_m: float) -> "GeoLocation":
        return replace(self, elevation_m=elevation_m)

    def with_timezone(self, tz_offset_minutes: int) -> "GeoLocation":
        return replace(self, tz_offset_minutes=tz_offset_minutes)

    def with_name(self, name: str) -> "GeoLocation":
        return replace(self, name=name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "elevation_m": self.elevation_m,
            "tz_offset_minutes": self.tz_offset_minutes,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GeoLocation":
        return cls(
            float(d["latitude"]),
            float(d["longitude"]),
            elevation_m=float(d.get("elevation_m", 0.0)),
            tz_offset_minutes=int(d.get("tz_offset_minutes", 0)),
            name=d.get("name"),
        )


def format_hhmm(t: Optional[time]) -> Optional[str]:
    return None if t is None else t.strftime("%H:%M")


@dataclass(frozen=True)
class DailyTimes:
    """Halachic times of day in local clock time (minute resolution)."""
    alot_hashachar: Optional[time]       # 16.1 deg below horizon
    misheyakir: Optional[time]           # 11.5 deg
    sunrise: Optional[time]
    sof_zman_shema_mga: Optional[time]
    sof_zman_shema_gra: Optional[time]
    sof_zman_tefila_mga: Optional[time]
    sof_zman_tefila_gra: Optional[time]
    chatzot: Optional[time]
    mincha_gedola: Optional[time]
    mincha_ketana: Optional[time]
    plag_hamincha: Optional[time]
    sunset: Optional[time]
    tzeit_hakochavim: Optional[time]     # 8.5 deg
    dawn_72: Optional[time] = None       # sunrise - 72 min
    tzeit_72: Optional[time] = None      # sunset + 72 min

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {f.name: format_hhmm(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class Molad:
    """Mean conjunction, counted in the traditional weekday/hour/parts scheme."""
    weekday: int  # 0=Sunday..6=Saturday
    hours: int    # 0..23, hour 0 = 6 pm of the preceding civil evening
    minutes: int
    parts: int    # 0..17 (18 parts per minute)


@dataclass(frozen=True)
class DailyRecord:
    solar: SolarDate
    hebrew: HebrewDate
    weekly_reading: Optional["WeeklyReading"]
    observances: Tuple["Observance", ...]
    times: Optional[DailyTimes]
    candle_lighting: Optional[time]
    is_restriction_day: bool
    attributes: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        from ..engines.hebrew import is_leap_year
        leap = is_leap_year(self.hebrew.year)
        return {
            "solar": self.solar.isoformat(),
            "weekday": self.solar.weekday,
            "hebrew": {
                "year": self.hebrew.year,
                "month": self.hebrew.month.display_name(leap),
                "month_number": self.hebrew.month.number(leap),
                "day": self.hebrew.day,
            },
            "weekly_reading": None if self.weekly_reading is None else self.weekly_reading.label,
            "observances": [o.label for o in self.observances],
            "times": None if self.times is None else self.times.as_dict(),
            "candle_lighting": format_hhmm(self.candle_lighting),
            "is_restriction_day": self.is_restriction_day,
            "attributes": self.attributes,
        }
