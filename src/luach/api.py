from __future__ import annotations

import logging
import re
from dataclasses import replace
from datetime import date
from typing import List, Optional, Sequence, Tuple, Union

from .attributes.observances import Observance, observances_in_year, observances_for
from .attributes.registry import compute_attributes
from .core.errors import DateOutOfRangeError, DateRangeError, InvalidDateFormatError
from .core.time import from_epoch_day, to_epoch_day
from .core.types import DailyRecord, DailyTimes, GeoLocation, HebrewDate, SolarDate
from .engines import hebrew as heb
from .engines import parsha
from .engines.astro import zmanim as zm

logger = logging.getLogger(__name__)

MIN_DATE = SolarDate(0, 1, 1)
MAX_DATE = SolarDate(2050, 12, 31)
DEFAULT_CANDLE_OFFSET = 18
DEFAULT_MAX_RANGE_DAYS = 366

FRIDAY = 5
SATURDAY = 6

_DATE_RE = re.compile(r"^([+-]?)([0-9]{4,})-([0-9]{2})-([0-9]{2})$")

DateInput = Union[SolarDate, date, str]


def parse_date(text: str) -> SolarDate:
    """
    Parse ``YYYY-MM-DD`` or the ISO-8601 expanded form ``[+-]YYYY[Y...]-MM-DD``.
    Year 0 is 1 BCE, so "+0000-01-01" and "0000-01-01" are the same day.
    """
    m = _DATE_RE.match(text.strip())
    if m is None:
        raise InvalidDateFormatError(f"Invalid date format: {text!r}")
    sign, y, mo, d = m.groups()
    if not sign and len(y) != 4:
        raise InvalidDateFormatError(f"Years beyond four digits need a sign: {text!r}")
    year = -int(y) if sign == "-" else int(y)
    return SolarDate(year, int(mo), int(d))


def _solar(d: DateInput) -> SolarDate:
    if isinstance(d, SolarDate):
        return d
    if isinstance(d, str):
        return parse_date(d)
    return SolarDate.from_date(d)


def check_range(d: SolarDate) -> None:
    if d < MIN_DATE or d > MAX_DATE:
        raise DateOutOfRangeError(f"Date {d.isoformat()} is outside supported range ({MIN_DATE} to {MAX_DATE})")


def to_hebrew(d: DateInput) -> HebrewDate:
    return heb.to_hebrew(_solar(d))

def to_solar(d: HebrewDate) -> SolarDate:
    return heb.to_solar(d)


def zmanim(d: DateInput, location: GeoLocation, *, use_elevation: bool = False) -> DailyTimes:
    s = _solar(d)
    check_range(s)
    return zm.daily_times(s.epoch_day, location, use_elevation=use_elevation)


def compute_daily_record(
    d: DateInput,
    location: Optional[GeoLocation] = None,
    candle_offset_minutes: int = DEFAULT_CANDLE_OFFSET,
    *,
    attributes: Sequence[str] = (),
    use_elevation: bool = False,
) -> DailyRecord:
    s = _solar(d)
    check_range(s)

    ed = s.epoch_day
    hdate = heb.from_epoch_day(ed)
    wd = s.weekday

    reading = parsha.reading_for(hdate) if wd == SATURDAY else None
    obs = observances_for(hdate)
    restricted = wd == SATURDAY or any(o.is_yom_tov for o in obs)

    times = None
    candles = None
    if location is not None:
        times = zm.daily_times(ed, location, use_elevation=use_elevation)
        if wd == FRIDAY or any(o.requires_candles for o in obs):
            candles = zm.candle_lighting(times, candle_offset_minutes)

    logger.debug("day %s -> %s (%d observances)", s, hdate, len(obs))

    record = DailyRecord(
        solar=s,
        hebrew=hdate,
        weekly_reading=reading,
        observances=obs,
        times=times,
        candle_lighting=candles,
        is_restriction_day=restricted,
    )
    if attributes:
        record = replace(record, attributes=compute_attributes(record, attributes))
    return record


def daily_records(
    start: DateInput,
    end: DateInput,
    location: Optional[GeoLocation] = None,
    candle_offset_minutes: int = DEFAULT_CANDLE_OFFSET,
    *,
    max_days: int = DEFAULT_MAX_RANGE_DAYS,
    attributes: Sequence[str] = (),
) -> List[DailyRecord]:
    """Records for every day in [start, end] (inclusive)."""
    s, e = _solar(start), _solar(end)
    if e < s:
        raise DateRangeError(f"End date {e} precedes start date {s}")
    n = e.epoch_day - s.epoch_day + 1
    if n > max_days:
        raise DateRangeError(f"Date range too large ({n} days, max {max_days})")
    check_range(s)
    check_range(e)
    logger.debug("computing %d daily records from %s", n, s)
    return [
        compute_daily_record(from_epoch_day(ed), location, candle_offset_minutes, attributes=attributes)
        for ed in range(s.epoch_day, e.epoch_day + 1)
    ]


def year_observances(hebrew_year: int) -> List[Tuple[SolarDate, HebrewDate, Tuple[Observance, ...]]]:
    """All observance days of a Hebrew year, in date order."""
    return list(observances_in_year(hebrew_year))


def upcoming_observances(
    d: DateInput, days: int = 30, *, include_minor: bool = False
) -> List[Tuple[SolarDate, HebrewDate, Tuple[Observance, ...]]]:
    """
    Observances in the ``days`` days starting at ``d``. Omer days and Rosh
    Chodesh are left out unless ``include_minor`` is set.
    """
    s = _solar(d)
    check_range(s)
    out = []
    for ed in range(s.epoch_day, s.epoch_day + days):
        hdate = heb.from_epoch_day(ed)
        obs = observances_for(hdate)
        if not include_minor:
            obs = tuple(o for o in obs if o.omer_day is None and o is not Observance.ROSH_CHODESH)
        if obs:
            out.append((from_epoch_day(ed), hdate, obs))
    return out


def weekly_reading(d: DateInput) -> parsha.WeeklyReading:
    """Reading of the week containing ``d`` (the Shabbat on or after it)."""
    return parsha.reading_for(heb.from_epoch_day(to_epoch_day(_solar(d))))


def format_display_date(d: SolarDate) -> str:
    """Human-readable date with BCE/AD year (year 0 is 1 BCE)."""
    era = f"{1 - d.year} BCE" if d.year <= 0 else f"{d.year} AD"
    return f"{d.month} {d.day}, {era}"
