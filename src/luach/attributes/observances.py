"""
luach.attributes.observances
----------------------------
Annual observance table.

``observances_for`` maps a Hebrew date to the observances falling on it.
Most entries are fixed (month, day) pairs; a few depend on the year:

  * Chanukah spills from Kislev into Tevet by the length of Kislev
  * the Omer is counted from 16 Nisan by day offset (49 days)
  * fasts that would fall on Shabbat move (to Sunday, or back to Thursday
    for Ta'anit Esther)
  * Israeli civic days shift by weekday and only exist after their founding

Static flags (candle lighting, yom tov, fast) are intrinsic to each member.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from ..core.time import from_epoch_day as solar_from_epoch_day
from ..core.time import weekday as weekday_of
from ..core.types import HebrewDate, HebrewMonth, SolarDate, YearLengthClass
from ..engines import hebrew as heb

FRIDAY, SATURDAY, SUNDAY, MONDAY = 5, 6, 0, 1

OMER_DAYS = 49


class _ObservanceBase(Enum):
    """Flags live in module tables keyed by member; see CANDLE_LIGHTING etc."""

    @property
    def label(self) -> str:
        return self.value

    @property
    def requires_candles(self) -> bool:
        return self in CANDLE_LIGHTING

    @property
    def is_yom_tov(self) -> bool:
        return self in YOM_TOV

    @property
    def is_fast_day(self) -> bool:
        return self in FAST_DAYS

    @property
    def omer_day(self) -> Optional[int]:
        return _OMER_NUMBER.get(self)


def _members() -> List[Tuple[str, str]]:
    out = [
        ("ROSH_HASHANAH_1", "Rosh Hashanah (Day 1)"),
        ("ROSH_HASHANAH_2", "Rosh Hashanah (Day 2)"),
        ("TZOM_GEDALIAH", "Tzom Gedaliah"),
        ("YOM_KIPPUR", "Yom Kippur"),
        ("SUKKOT_1", "Sukkot (Day 1)"),
        ("SUKKOT_2", "Sukkot (Day 2)"),
    ]
    out += [(f"SUKKOT_CHOL_HAMOED_{i}", f"Sukkot (Chol HaMoed Day {i})") for i in range(1, 5)]
    out += [
        ("HOSHANA_RABBAH", "Hoshana Rabbah"),
        ("SHEMINI_ATZERET", "Shemini Atzeret"),
        ("SIMCHAT_TORAH", "Simchat Torah"),
    ]
    out += [(f"CHANUKAH_{i}", f"Chanukah (Day {i} - {i} Candle{'s' if i > 1 else ''})") for i in range(1, 9)]
    out += [
        ("ASARA_BTEVET", "Asara B'Tevet"),
        ("TU_BISHVAT", "Tu B'Shevat"),
        ("TAANIT_ESTHER", "Ta'anit Esther"),
        ("PURIM", "Purim"),
        ("SHUSHAN_PURIM", "Shushan Purim"),
        ("PESACH_1", "Pesach (Day 1)"),
        ("PESACH_2", "Pesach (Day 2)"),
    ]
    out += [(f"PESACH_CHOL_HAMOED_{i}", f"Pesach (Chol HaMoed Day {i})") for i in range(1, 5)]
    out += [
        ("PESACH_7", "Pesach (Day 7)"),
        ("PESACH_8", "Pesach (Day 8)"),
    ]
    out += [
        (f"OMER_DAY_{i}", f"Omer Day {i} (Lag BaOmer)" if i == 33 else f"Omer Day {i}")
        for i in range(1, OMER_DAYS + 1)
    ]
    out += [
        ("LAG_BAOMER", "Lag BaOmer"),
        ("YOM_HASHOAH", "Yom HaShoah"),
        ("YOM_HAZIKARON", "Yom HaZikaron"),
        ("YOM_HAATZMAUT", "Yom HaAtzmaut"),
        ("YOM_YERUSHALAYIM", "Yom Yerushalayim"),
        ("SHAVUOT_1", "Shavuot (Day 1)"),
        ("SHAVUOT_2", "Shavuot (Day 2)"),
        ("SHIVA_ASAR_BTAMMUZ", "Shiva Asar B'Tammuz"),
        ("TISHA_BAV", "Tisha B'Av"),
        ("TU_BAV", "Tu B'Av"),
        ("ROSH_CHODESH", "Rosh Chodesh"),
    ]
    return out


Observance = _ObservanceBase("Observance", _members(), module=__name__, qualname="Observance")
O = Observance

YOM_TOV = frozenset({
    O.ROSH_HASHANAH_1, O.ROSH_HASHANAH_2, O.YOM_KIPPUR,
    O.SUKKOT_1, O.SUKKOT_2, O.SHEMINI_ATZERET, O.SIMCHAT_TORAH,
    O.PESACH_1, O.PESACH_2, O.PESACH_7, O.PESACH_8,
    O.SHAVUOT_1, O.SHAVUOT_2,
})

CHANUKAH: Tuple[Observance, ...] = tuple(O[f"CHANUKAH_{i}"] for i in range(1, 9))

CANDLE_LIGHTING = YOM_TOV | frozenset(CHANUKAH)

FAST_DAYS = frozenset({
    O.TZOM_GEDALIAH, O.YOM_KIPPUR, O.ASARA_BTEVET, O.TAANIT_ESTHER,
    O.SHIVA_ASAR_BTAMMUZ, O.TISHA_BAV,
})

OMER: Tuple[Observance, ...] = tuple(O[f"OMER_DAY_{i}"] for i in range(1, OMER_DAYS + 1))
_OMER_NUMBER: Dict[Observance, int] = {o: i for i, o in enumerate(OMER, start=1)}


M = HebrewMonth

# (month, day) -> observances; ADAR is Adar II in leap years
FIXED_DATES: Dict[Tuple[HebrewMonth, int], Tuple[Observance, ...]] = {
    (M.TISHREI, 1): (O.ROSH_HASHANAH_1,),
    (M.TISHREI, 2): (O.ROSH_HASHANAH_2,),
    (M.TISHREI, 10): (O.YOM_KIPPUR,),
    (M.TISHREI, 15): (O.SUKKOT_1,),
    (M.TISHREI, 16): (O.SUKKOT_2,),
    (M.TISHREI, 17): (O.SUKKOT_CHOL_HAMOED_1,),
    (M.TISHREI, 18): (O.SUKKOT_CHOL_HAMOED_2,),
    (M.TISHREI, 19): (O.SUKKOT_CHOL_HAMOED_3,),
    (M.TISHREI, 20): (O.SUKKOT_CHOL_HAMOED_4,),
    (M.TISHREI, 21): (O.HOSHANA_RABBAH,),
    (M.TISHREI, 22): (O.SHEMINI_ATZERET,),
    (M.TISHREI, 23): (O.SIMCHAT_TORAH,),
    (M.SHEVAT, 15): (O.TU_BISHVAT,),
    (M.ADAR, 14): (O.PURIM,),
    (M.ADAR, 15): (O.SHUSHAN_PURIM,),
    (M.NISAN, 15): (O.PESACH_1,),
    (M.NISAN, 16): (O.PESACH_2,),
    (M.NISAN, 17): (O.PESACH_CHOL_HAMOED_1,),
    (M.NISAN, 18): (O.PESACH_CHOL_HAMOED_2,),
    (M.NISAN, 19): (O.PESACH_CHOL_HAMOED_3,),
    (M.NISAN, 20): (O.PESACH_CHOL_HAMOED_4,),
    (M.NISAN, 21): (O.PESACH_7,),
    (M.NISAN, 22): (O.PESACH_8,),
    (M.SIVAN, 6): (O.SHAVUOT_1,),
    (M.SIVAN, 7): (O.SHAVUOT_2,),
    (M.AV, 15): (O.TU_BAV,),
}

# fast -> (month, day, days to move when the date is Shabbat)
FASTS: Dict[Observance, Tuple[HebrewMonth, int, int]] = {
    O.TZOM_GEDALIAH: (M.TISHREI, 3, 1),
    O.ASARA_BTEVET: (M.TEVET, 10, 0),
    O.TAANIT_ESTHER: (M.ADAR, 13, -2),
    O.SHIVA_ASAR_BTAMMUZ: (M.TAMMUZ, 17, 1),
    O.TISHA_BAV: (M.AV, 9, 1),
}

# first Hebrew year each civic day was observed
CIVIC_FROM_YEAR: Dict[Observance, int] = {
    O.YOM_HAATZMAUT: 5708,
    O.YOM_HASHOAH: 5711,
    O.YOM_HAZIKARON: 5711,
    O.YOM_YERUSHALAYIM: 5728,
}

# Yom HaAtzmaut moves off Monday only from this year on
_ATZMAUT_MONDAY_RULE_FROM = 5764


# ---------------------------------------------------------------------
# Year-dependent dates (all as epoch days)
# ---------------------------------------------------------------------

def _ed(year: int, month: HebrewMonth, day: int) -> int:
    return heb.to_epoch_day(HebrewDate(year, month, day))

def fast_day(year: int, fast: Observance) -> int:
    month, day, shift = FASTS[fast]
    ed = _ed(year, month, day)
    if weekday_of(ed) == SATURDAY:
        ed += shift
    return ed

def yom_haatzmaut(year: int) -> int:
    ed = _ed(year, M.IYAR, 5)
    wd = weekday_of(ed)
    if wd == FRIDAY:
        return ed - 1
    if wd == SATURDAY:
        return ed - 2
    if wd == MONDAY and year >= _ATZMAUT_MONDAY_RULE_FROM:
        return ed + 1
    return ed

def yom_hashoah(year: int) -> int:
    ed = _ed(year, M.NISAN, 27)
    wd = weekday_of(ed)
    if wd == FRIDAY:
        return ed - 1
    if wd == SUNDAY:
        return ed + 1
    return ed

def civic_day(year: int, obs: Observance) -> Optional[int]:
    if year < CIVIC_FROM_YEAR[obs]:
        return None
    if obs is O.YOM_HAATZMAUT:
        return yom_haatzmaut(year)
    if obs is O.YOM_HAZIKARON:
        return yom_haatzmaut(year) - 1
    if obs is O.YOM_HASHOAH:
        return yom_hashoah(year)
    return _ed(year, M.IYAR, 28)

def chanukah_day(d: HebrewDate) -> Optional[int]:
    """1..8 during Chanukah, else None."""
    if d.month is M.KISLEV and d.day >= 25:
        return d.day - 24
    if d.month is M.TEVET:
        kislev = 29 if heb.year_length_class(d.year) is YearLengthClass.DEFICIENT else 30
        n = kislev - 24 + d.day
        if n <= 8:
            return n
    return None

def omer_count(d: HebrewDate) -> Optional[int]:
    """Day of the Omer (1..49) counted from 16 Nisan, else None."""
    if d.month not in (M.NISAN, M.IYAR, M.SIVAN):
        return None
    n = heb.to_epoch_day(d) - _ed(d.year, M.NISAN, 16) + 1
    if 1 <= n <= OMER_DAYS:
        return n
    return None


# ---------------------------------------------------------------------
# Table lookup
# ---------------------------------------------------------------------

def observances_for(d: HebrewDate) -> Tuple[Observance, ...]:
    heb.validate(d)
    ed = heb.to_epoch_day(d)
    out: List[Observance] = list(FIXED_DATES.get((d.month, d.day), ()))

    for fast in FASTS:
        month = FASTS[fast][0]
        # observed date stays within the nominal month
        if d.month is month and fast_day(d.year, fast) == ed:
            out.append(fast)

    if d.month in (M.NISAN, M.IYAR):
        for obs in CIVIC_FROM_YEAR:
            if civic_day(d.year, obs) == ed:
                out.append(obs)

    n = chanukah_day(d)
    if n is not None:
        out.append(CHANUKAH[n - 1])

    n = omer_count(d)
    if n is not None:
        out.append(OMER[n - 1])
        if n == 33:
            out.append(O.LAG_BAOMER)

    if d.day in (1, 30):
        out.append(O.ROSH_CHODESH)
    return tuple(out)

def observances_in_year(year: int) -> Iterator[Tuple[SolarDate, HebrewDate, Tuple[Observance, ...]]]:
    """Yield every day of Hebrew ``year`` that has at least one observance."""
    for ed in range(heb.year_start(year), heb.year_start(year + 1)):
        d = heb.from_epoch_day(ed)
        obs = observances_for(d)
        if obs:
            yield solar_from_epoch_day(ed), d, obs
