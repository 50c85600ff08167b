from __future__ import annotations
from datetime import date
from typing import Union

from .types import SolarDate

# Epoch day 0 = Saturday, 0000-12-30 (proleptic Gregorian) = JDN 1721424
EPOCH_JDN = 1721424

DateLike = Union[date, SolarDate]


def to_jdn(d: DateLike) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def from_jdn(jdn: int) -> SolarDate:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return SolarDate(year, month, day)

def to_epoch_day(d: DateLike) -> int:
    return to_jdn(d) - EPOCH_JDN

def from_epoch_day(epoch_day: int) -> SolarDate:
    return from_jdn(epoch_day + EPOCH_JDN)

def weekday(epoch_day: int) -> int:
    """Day of week, 0=Sunday..6=Saturday. Epoch day 0 is a Saturday."""
    return (epoch_day + 6) % 7

def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _MONTH_DAYS[month - 1]
