# tests/test_hebrew_calendar.py

import math
import pytest
import random
from datetime import date

from luach.core.errors import CalculationError
from luach.core.time import to_epoch_day, weekday
from luach.core.types import HebrewDate, HebrewMonth, Molad, SolarDate, YearLengthClass
from luach.engines import hebrew as heb

M = HebrewMonth

FIRST_YEAR = heb.to_hebrew(SolarDate(0, 1, 1)).year
LAST_YEAR = heb.to_hebrew(SolarDate(2050, 12, 31)).year


def test_leap_years():
    assert heb.is_leap_year(5784)
    assert heb.is_leap_year(5782)
    assert not heb.is_leap_year(5783)
    assert heb.months_in_year(5784) == 13
    assert heb.months_in_year(5785) == 12

def test_leap_cycle():
    for y in range(1, 6000):
        assert heb.is_leap_year(y) == heb.is_leap_year(y + 19)
    for start in range(3700, 3719):
        assert sum(heb.is_leap_year(y) for y in range(start, start + 19)) == 7

def test_rosh_hashanah_dates():
    assert heb.new_year(5783) == SolarDate(2022, 9, 26)
    assert heb.new_year(5784) == SolarDate(2023, 9, 16)
    assert heb.new_year(5785) == SolarDate(2024, 10, 3)
    assert heb.new_year(5786) == SolarDate(2025, 9, 23)
    assert heb.new_year(5787) == SolarDate(2026, 9, 12)

def test_epoch_is_year_one():
    assert heb.year_start(1) == heb.HEBREW_EPOCH
    assert weekday(heb.HEBREW_EPOCH) == 1  # Monday
    with pytest.raises(CalculationError):
        heb.year_start(0)

def test_year_lengths():
    assert heb.days_in_year(5784) == 383
    assert heb.year_length_class(5784) is YearLengthClass.DEFICIENT
    assert heb.days_in_year(5783) == 355
    assert heb.year_length_class(5783) is YearLengthClass.COMPLETE
    assert heb.days_in_year(5785) == 355
    assert heb.month_length(5784, M.CHESHVAN) == 29
    assert heb.month_length(5784, M.KISLEV) == 29
    assert heb.month_length(5783, M.CHESHVAN) == 30
    assert heb.month_length(5784, M.ADAR_I) == 30
    assert heb.month_length(5784, M.ADAR) == 29

def test_year_starts_monotonic_and_lengths_legal():
    prev = heb.year_start(FIRST_YEAR - 1)
    for y in range(FIRST_YEAR, LAST_YEAR + 2):
        cur = heb.year_start(y)
        assert cur > prev
        assert cur - prev in heb.VALID_YEAR_LENGTHS
        prev = cur

def test_rosh_hashanah_weekdays():
    # never Sunday, Wednesday or Friday
    for y in range(FIRST_YEAR, LAST_YEAR + 1):
        assert weekday(heb.year_start(y)) in (1, 2, 4, 6)

def test_months_sum_to_year_length():
    for y in range(5700, 5800):
        assert sum(heb.month_length(y, m) for m in heb.months_of_year(y)) == heb.days_in_year(y)

def test_concrete_conversions():
    assert heb.to_hebrew(date(2023, 9, 16)) == HebrewDate(5784, M.TISHREI, 1)
    assert heb.to_hebrew(date(1973, 10, 6)) == HebrewDate(5734, M.TISHREI, 10)
    assert heb.to_hebrew(date(2024, 1, 1)) == HebrewDate(5784, M.TEVET, 20)
    assert heb.to_hebrew(date(2024, 4, 23)) == HebrewDate(5784, M.NISAN, 15)
    assert heb.to_hebrew(date(2024, 3, 24)) == HebrewDate(5784, M.ADAR, 14)
    assert heb.to_solar(HebrewDate(5784, M.TISHREI, 1)) == SolarDate(2023, 9, 16)
    assert heb.to_solar(HebrewDate(5734, M.TISHREI, 10)) == SolarDate(1973, 10, 6)

def test_year_zero_is_covered():
    a = heb.to_hebrew(SolarDate(0, 12, 31))
    b = heb.to_hebrew(SolarDate(1, 1, 1))
    assert heb.to_epoch_day(b) - heb.to_epoch_day(a) == 1

def test_random_roundtrip():
    random.seed(42)
    lo = SolarDate(0, 1, 1).epoch_day
    hi = SolarDate(2050, 12, 31).epoch_day
    for _ in range(20000):
        ed = random.randint(lo, hi)
        h = heb.from_epoch_day(ed)
        assert heb.to_epoch_day(h) == ed

def test_every_date_roundtrip():
    for y in range(5770, 5800):
        ed = heb.year_start(y)
        for m in heb.months_of_year(y):
            for day in range(1, heb.month_length(y, m) + 1):
                d = HebrewDate(y, m, day)
                assert heb.to_epoch_day(d) == ed
                assert heb.from_epoch_day(ed) == d
                ed += 1

def test_day_of_week():
    assert heb.day_of_week(HebrewDate(5784, M.TISHREI, 1)) == 6
    assert heb.day_of_week(HebrewDate(5784, M.TISHREI, 28)) == 5

def test_month_numbering():
    assert M.ADAR.number(is_leap=True) == 13
    assert M.ADAR.number(is_leap=False) == 12
    assert M.ADAR_I.number(is_leap=True) == 12
    assert M.from_number(12, True) is M.ADAR_I
    assert M.from_number(13, True) is M.ADAR
    assert M.from_number(7, False) is M.TISHREI
    assert M.ADAR.display_name(True) == "Adar II"
    with pytest.raises(CalculationError):
        M.from_number(13, False)
    with pytest.raises(CalculationError):
        M.from_number(14, True)
    with pytest.raises(CalculationError):
        M.ADAR_I.number(is_leap=False)

def test_invalid_dates_are_calculation_errors():
    with pytest.raises(CalculationError):
        heb.to_epoch_day(HebrewDate(5785, M.ADAR_I, 1))
    with pytest.raises(CalculationError):
        heb.to_epoch_day(HebrewDate(5784, M.KISLEV, 30))
    with pytest.raises(CalculationError):
        HebrewDate(5784, M.NISAN, 31)
    with pytest.raises(CalculationError):
        HebrewDate(5784, 7, 1)

def test_molad_of_creation():
    # BaHaRaD: Monday, 5 hours, 204 parts
    assert heb.molad(1, M.TISHREI) == Molad(weekday=1, hours=5, minutes=11, parts=6)

def test_rosh_hashanah_follows_molad():
    for y in range(5600, 5900):
        delay = heb.year_start(y) - math.floor(heb.molad_moment(y, M.TISHREI))
        assert delay in (0, 1, 2)

def test_molad_months_advance():
    a = heb.molad_moment(5784, M.TISHREI)
    b = heb.molad_moment(5784, M.CHESHVAN)
    assert b - a == pytest.approx(29 + 13753 / 25920)

def test_year_type():
    t = heb.year_type(5784)
    assert t == {"year": 5784, "is_leap": True, "days": 383, "length_class": "deficient", "start_weekday": 6}

def test_str():
    assert str(HebrewDate(5784, M.ADAR, 14)) == "14 Adar II 5784"
    assert str(HebrewDate(5785, M.ADAR, 14)) == "14 Adar 5785"
