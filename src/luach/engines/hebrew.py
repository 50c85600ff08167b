"""
luach.engines.hebrew
--------------------
Fixed arithmetic Hebrew calendar.

Year starts come from molad arithmetic (months of 29d 12h 793p, 25920 parts
per day) plus the postponement rules; everything else (month lengths, date
conversion, weekday) is derived from ``year_start``.

Conventions:
  * epoch day: days since 0000-12-30 (see ``luach.core.time``)
  * months use canonical numbering (Nisan = 1), but the year runs
    Tishrei .. Elul
  * weekdays are 0=Sunday..6=Saturday
"""

from __future__ import annotations

import math
from datetime import date
from functools import lru_cache
from typing import Dict, List, Union

from ..core.errors import CalculationError
from ..core.time import from_epoch_day as solar_from_epoch_day
from ..core.time import to_epoch_day as solar_to_epoch_day
from ..core.time import weekday as weekday_of
from ..core.types import HebrewDate, HebrewMonth, Molad, SolarDate, YearLengthClass

# 1 Tishrei AM 1 (Monday, 3761 BCE Oct 7 Julian)
HEBREW_EPOCH = -1373426

PARTS_PER_DAY = 25920
PARTS_PER_HOUR = 1080
MONTH_PARTS = 29 * PARTS_PER_DAY + 13753  # 765433

VALID_YEAR_LENGTHS = (353, 354, 355, 383, 384, 385)

_FIXED_MONTH_LENGTHS: Dict[HebrewMonth, int] = {
    HebrewMonth.NISAN: 30,
    HebrewMonth.IYAR: 29,
    HebrewMonth.SIVAN: 30,
    HebrewMonth.TAMMUZ: 29,
    HebrewMonth.AV: 30,
    HebrewMonth.ELUL: 29,
    HebrewMonth.TISHREI: 30,
    HebrewMonth.TEVET: 29,
    HebrewMonth.SHEVAT: 30,
}

# Guard for the year search in from_epoch_day; the 365.25-day estimate is
# never more than one year off inside any realistic range.
_MAX_YEAR_STEPS = 4


# ---------------------------------------------------------------------
# Year structure
# ---------------------------------------------------------------------

def is_leap_year(year: int) -> bool:
    return (7 * year + 1) % 19 < 7

def months_in_year(year: int) -> int:
    return 13 if is_leap_year(year) else 12

def months_elapsed(year: int) -> int:
    """Lunar months from the epoch molad to the molad of Tishrei of ``year``."""
    return (235 * year - 234) // 19

def elapsed_days(year: int) -> int:
    """Days from the epoch to Rosh Hashanah of ``year`` before the length correction."""
    months = months_elapsed(year)
    parts = 12084 + 13753 * months
    days = 29 * months + parts // PARTS_PER_DAY
    # no Rosh Hashanah on Sunday, Wednesday or Friday
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days

def year_length_correction(year: int) -> int:
    """Delay (0, 1 or 2 days) that keeps year lengths away from 356 and 382."""
    ny0 = elapsed_days(year - 1)
    ny1 = elapsed_days(year)
    ny2 = elapsed_days(year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0

@lru_cache(maxsize=4096)
def year_start(year: int) -> int:
    """Epoch day of 1 Tishrei of ``year``."""
    if year < 1:
        raise CalculationError(f"Hebrew year must be positive, got {year}")
    return HEBREW_EPOCH + elapsed_days(year) + year_length_correction(year)

def days_in_year(year: int) -> int:
    return year_start(year + 1) - year_start(year)

def year_length_class(year: int) -> YearLengthClass:
    n = days_in_year(year)
    if n not in VALID_YEAR_LENGTHS:
        raise CalculationError(f"Hebrew year {year} has impossible length {n}")
    r = n % 10  # 3/4/5 for both 35x and 38x
    if r == 3:
        return YearLengthClass.DEFICIENT
    if r == 5:
        return YearLengthClass.COMPLETE
    return YearLengthClass.REGULAR

def year_type(year: int) -> Dict[str, Union[int, bool, str]]:
    """Summary of a year's configuration (leap flag, length, class, first weekday)."""
    return {
        "year": year,
        "is_leap": is_leap_year(year),
        "days": days_in_year(year),
        "length_class": year_length_class(year).value,
        "start_weekday": weekday_of(year_start(year)),
    }


# ---------------------------------------------------------------------
# Months
# ---------------------------------------------------------------------

def months_of_year(year: int) -> List[HebrewMonth]:
    """Months of ``year`` in calendar order, Tishrei first."""
    out = [HebrewMonth.TISHREI, HebrewMonth.CHESHVAN, HebrewMonth.KISLEV, HebrewMonth.TEVET, HebrewMonth.SHEVAT]
    if is_leap_year(year):
        out.append(HebrewMonth.ADAR_I)
    out.append(HebrewMonth.ADAR)
    out.extend([HebrewMonth.NISAN, HebrewMonth.IYAR, HebrewMonth.SIVAN,
                HebrewMonth.TAMMUZ, HebrewMonth.AV, HebrewMonth.ELUL])
    return out

def month_length(year: int, month: HebrewMonth) -> int:
    leap = is_leap_year(year)
    if month is HebrewMonth.ADAR_I:
        if not leap:
            raise CalculationError(f"Adar I does not exist in common year {year}")
        return 30
    if month is HebrewMonth.ADAR:
        return 29
    if month is HebrewMonth.CHESHVAN:
        return 30 if year_length_class(year) is YearLengthClass.COMPLETE else 29
    if month is HebrewMonth.KISLEV:
        return 29 if year_length_class(year) is YearLengthClass.DEFICIENT else 30
    return _FIXED_MONTH_LENGTHS[month]

def validate(d: HebrewDate) -> None:
    """Raise CalculationError unless ``d`` names a real day of its year."""
    n = month_length(d.year, d.month)
    if d.day > n:
        raise CalculationError(f"{d.month.display_name(is_leap_year(d.year))} {d.year} has {n} days, got day {d.day}")


# ---------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------

def to_epoch_day(d: HebrewDate) -> int:
    validate(d)
    ed = year_start(d.year)
    for m in months_of_year(d.year):
        if m is d.month:
            break
        ed += month_length(d.year, m)
    return ed + d.day - 1

def from_epoch_day(epoch_day: int) -> HebrewDate:
    if epoch_day < HEBREW_EPOCH:
        raise CalculationError(f"epoch day {epoch_day} precedes the Hebrew epoch")

    year = math.floor((epoch_day - HEBREW_EPOCH) / 365.25) + 1
    year = max(year, 1)
    steps = 0
    while year > 1 and year_start(year) > epoch_day:
        year -= 1
        steps += 1
        if steps > _MAX_YEAR_STEPS:
            raise CalculationError(f"year search did not converge for epoch day {epoch_day}")
    while year_start(year + 1) <= epoch_day:
        year += 1
        steps += 1
        if steps > _MAX_YEAR_STEPS:
            raise CalculationError(f"year search did not converge for epoch day {epoch_day}")

    offset = epoch_day - year_start(year)
    for m in months_of_year(year):
        n = month_length(year, m)
        if offset < n:
            return HebrewDate(year, m, offset + 1)
        offset -= n
    raise CalculationError(f"epoch day {epoch_day} fell past the end of year {year}")

def to_hebrew(d: Union[SolarDate, date]) -> HebrewDate:
    return from_epoch_day(solar_to_epoch_day(d))

def to_solar(d: HebrewDate) -> SolarDate:
    return solar_from_epoch_day(to_epoch_day(d))

def day_of_week(d: HebrewDate) -> int:
    """0=Sunday..6=Saturday."""
    return weekday_of(to_epoch_day(d))

def new_year(year: int) -> SolarDate:
    return solar_from_epoch_day(year_start(year))


# ---------------------------------------------------------------------
# Molad
# ---------------------------------------------------------------------

def _months_to(year: int, month: HebrewMonth) -> int:
    months = months_of_year(year)
    if month not in months:
        raise CalculationError(f"{month.name} does not occur in year {year}")
    return months_elapsed(year) + months.index(month)

def molad_moment(year: int, month: HebrewMonth) -> float:
    """Mean conjunction as a fractional epoch day (local mean time of Jerusalem, midnight based)."""
    return HEBREW_EPOCH + (-876 + _months_to(year, month) * MONTH_PARTS) / PARTS_PER_DAY

def molad(year: int, month: HebrewMonth) -> Molad:
    """Mean conjunction in the traditional day/hour/parts form (hours counted from 6 pm)."""
    t = -876 + _months_to(year, month) * MONTH_PARTS + 6 * PARTS_PER_HOUR
    day, r = divmod(t, PARTS_PER_DAY)
    hours, r = divmod(r, PARTS_PER_HOUR)
    minutes, parts = divmod(r, 18)
    return Molad(weekday=weekday_of(HEBREW_EPOCH + day), hours=hours, minutes=minutes, parts=parts)
