# tests/test_time.py

import pytest
import random
from datetime import date

from luach.core.errors import InvalidDateFormatError
from luach.core.time import EPOCH_JDN, from_epoch_day, from_jdn, is_gregorian_leap, to_epoch_day, to_jdn, weekday
from luach.core.types import SolarDate

FIRST = SolarDate(0, 1, 1)
LAST = SolarDate(2050, 12, 31)


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert from_epoch_day(0) == SolarDate(0, 12, 30)
    assert to_epoch_day(SolarDate(0, 12, 30)) == 0
    assert to_jdn(SolarDate(0, 12, 30)) == EPOCH_JDN
    assert FIRST.epoch_day == -364

def test_weekday_alignment():
    assert weekday(0) == 6  # Saturday
    assert SolarDate(2024, 1, 1).weekday == 1  # Monday
    assert SolarDate(2023, 9, 16).weekday == 6

def test_year_zero_boundary():
    # year 0 is 1 BCE and is a leap year
    assert is_gregorian_leap(0)
    assert SolarDate(0, 2, 29).plus_days(1) == SolarDate(0, 3, 1)
    assert SolarDate(0, 12, 31).plus_days(1) == SolarDate(1, 1, 1)
    assert SolarDate(1, 1, 1).epoch_day - SolarDate(0, 12, 31).epoch_day == 1

def test_roundtrip_whole_horizon():
    for ed in range(FIRST.epoch_day, LAST.epoch_day + 1):
        assert to_epoch_day(from_epoch_day(ed)) == ed

def test_matches_datetime():
    random.seed(42)
    for _ in range(5000):
        jdn_in = random.randint(1721426, 2470000)
        d = from_jdn(jdn_in)
        assert d.to_date().toordinal() == jdn_in - 1721425
        assert to_jdn(d.to_date()) == jdn_in

def test_invalid_dates_rejected():
    with pytest.raises(InvalidDateFormatError):
        SolarDate(1900, 2, 29)
    with pytest.raises(InvalidDateFormatError):
        SolarDate(2024, 13, 1)
    with pytest.raises(InvalidDateFormatError):
        SolarDate(2024, 4, 31)
    with pytest.raises(InvalidDateFormatError):
        SolarDate(0, 1, 1).to_date()

def test_isoformat_expanded_years():
    assert SolarDate(0, 1, 1).isoformat() == "0000-01-01"
    assert SolarDate(2024, 3, 5).isoformat() == "2024-03-05"
    assert SolarDate(-5, 12, 31).isoformat() == "-0005-12-31"
    assert SolarDate(12345, 1, 1).isoformat() == "+12345-01-01"

def test_ordering():
    assert SolarDate(0, 12, 31) < SolarDate(1, 1, 1)
    assert SolarDate(2024, 2, 1) > SolarDate(2024, 1, 31)
