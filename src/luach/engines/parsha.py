"""
luach.engines.parsha
--------------------
Weekly Torah reading (parsha) for a Hebrew date.

The reading cycle restarts on the first Shabbat after 23 Tishrei (Simchat
Torah in the diaspora). Each later Shabbat advances one step through
``READING_SEQUENCE``; in years with fewer Shabbatot some adjacent pairs are
read together, as listed in ``MERGE_TABLE``.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from ..core.time import from_epoch_day as solar_from_epoch_day
from ..core.time import weekday as weekday_of
from ..core.types import HebrewDate, HebrewMonth
from . import hebrew as heb

SATURDAY = 6


class WeeklyReading(Enum):
    # (label, hebrew_name)
    BERESHIT = ("Bereshit", "בראשית")
    NOACH = ("Noach", "נח")
    LECH_LECHA = ("Lech Lecha", "לך לך")
    VAYERA = ("Vayera", "וירא")
    CHAYEI_SARA = ("Chayei Sara", "חיי שרה")
    TOLDOT = ("Toldot", "תולדות")
    VAYETZEI = ("Vayetzei", "ויצא")
    VAYISHLACH = ("Vayishlach", "וישלח")
    VAYESHEV = ("Vayeshev", "וישב")
    MIKETZ = ("Miketz", "מקץ")
    VAYIGASH = ("Vayigash", "ויגש")
    VAYECHI = ("Vayechi", "ויחי")
    SHEMOT = ("Shemot", "שמות")
    VAERA = ("Vaera", "וארא")
    BO = ("Bo", "בא")
    BESHALACH = ("Beshalach", "בשלח")
    YITRO = ("Yitro", "יתרו")
    MISHPATIM = ("Mishpatim", "משפטים")
    TERUMAH = ("Terumah", "תרומה")
    TETZAVEH = ("Tetzaveh", "תצוה")
    KI_TISA = ("Ki Tisa", "כי תשא")
    VAYAKHEL = ("Vayakhel", "ויקהל")
    PEKUDEI = ("Pekudei", "פקודי")
    VAYIKRA = ("Vayikra", "ויקרא")
    TZAV = ("Tzav", "צו")
    SHEMINI = ("Shemini", "שמיני")
    TAZRIA = ("Tazria", "תזריע")
    METZORA = ("Metzora", "מצורע")
    ACHREI_MOT = ("Achrei Mot", "אחרי מות")
    KEDOSHIM = ("Kedoshim", "קדושים")
    EMOR = ("Emor", "אמור")
    BEHAR = ("Behar", "בהר")
    BECHUKOTAI = ("Bechukotai", "בחקותי")
    BAMIDBAR = ("Bamidbar", "במדבר")
    NASSO = ("Nasso", "נשא")
    BEHAALOTECHA = ("Behaalotecha", "בהעלותך")
    SHELACH = ("Shelach", "שלח")
    KORACH = ("Korach", "קרח")
    CHUKAT = ("Chukat", "חקת")
    BALAK = ("Balak", "בלק")
    PINCHAS = ("Pinchas", "פינחס")
    MATOT = ("Matot", "מטות")
    MASEI = ("Masei", "מסעי")
    DEVARIM = ("Devarim", "דברים")
    VAETCHANAN = ("Vaetchanan", "ואתחנן")
    EIKEV = ("Eikev", "עקב")
    REEH = ("Reeh", "ראה")
    SHOFTIM = ("Shoftim", "שופטים")
    KI_TEITZEI = ("Ki Teitzei", "כי תצא")
    KI_TAVO = ("Ki Tavo", "כי תבוא")
    NITZAVIM = ("Nitzavim", "נצבים")
    VAYEILECH = ("Vayeilech", "וילך")
    HAAZINU = ("HaAzinu", "האזינו")
    VEZOT_HABERACHA = ("Vezot Haberacha", "וזאת הברכה")
    # combined readings
    VAYAKHEL_PEKUDEI = ("Vayakhel-Pekudei", "ויקהל-פקודי")
    TAZRIA_METZORA = ("Tazria-Metzora", "תזריע-מצורע")
    ACHREI_MOT_KEDOSHIM = ("Achrei Mot-Kedoshim", "אחרי מות-קדושים")
    BEHAR_BECHUKOTAI = ("Behar-Bechukotai", "בהר-בחקותי")
    CHUKAT_BALAK = ("Chukat-Balak", "חקת-בלק")
    MATOT_MASEI = ("Matot-Masei", "מטות-מסעי")
    NITZAVIM_VAYEILECH = ("Nitzavim-Vayeilech", "נצבים-וילך")
    NO_READING = ("No regular reading", "")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def hebrew_name(self) -> str:
        return self.value[1]

    @property
    def is_combined(self) -> bool:
        return self in _COMBINED_READINGS


R = WeeklyReading

# 54 standard readings in cycle order
READING_SEQUENCE: Tuple[WeeklyReading, ...] = (
    R.BERESHIT, R.NOACH, R.LECH_LECHA, R.VAYERA, R.CHAYEI_SARA, R.TOLDOT,
    R.VAYETZEI, R.VAYISHLACH, R.VAYESHEV, R.MIKETZ, R.VAYIGASH, R.VAYECHI,
    R.SHEMOT, R.VAERA, R.BO, R.BESHALACH, R.YITRO, R.MISHPATIM,
    R.TERUMAH, R.TETZAVEH, R.KI_TISA, R.VAYAKHEL, R.PEKUDEI, R.VAYIKRA,
    R.TZAV, R.SHEMINI, R.TAZRIA, R.METZORA, R.ACHREI_MOT, R.KEDOSHIM,
    R.EMOR, R.BEHAR, R.BECHUKOTAI, R.BAMIDBAR, R.NASSO, R.BEHAALOTECHA,
    R.SHELACH, R.KORACH, R.CHUKAT, R.BALAK, R.PINCHAS, R.MATOT,
    R.MASEI, R.DEVARIM, R.VAETCHANAN, R.EIKEV, R.REEH, R.SHOFTIM,
    R.KI_TEITZEI, R.KI_TAVO, R.NITZAVIM, R.VAYEILECH, R.HAAZINU, R.VEZOT_HABERACHA,
)

# sequence position of the first reading of each pair -> combined reading
COMBINED: Dict[int, WeeklyReading] = {
    READING_SEQUENCE.index(R.VAYAKHEL): R.VAYAKHEL_PEKUDEI,
    READING_SEQUENCE.index(R.TAZRIA): R.TAZRIA_METZORA,
    READING_SEQUENCE.index(R.ACHREI_MOT): R.ACHREI_MOT_KEDOSHIM,
    READING_SEQUENCE.index(R.BEHAR): R.BEHAR_BECHUKOTAI,
    READING_SEQUENCE.index(R.CHUKAT): R.CHUKAT_BALAK,
    READING_SEQUENCE.index(R.MATOT): R.MATOT_MASEI,
    READING_SEQUENCE.index(R.NITZAVIM): R.NITZAVIM_VAYEILECH,
}

_COMBINED_READINGS = frozenset(COMBINED.values())

_COMMON_MERGES = (21, 26, 28, 31, 41, 50)

# read on Simchat Torah, never on a Shabbat
_LAST_SHABBAT_POSITION = READING_SEQUENCE.index(R.HAAZINU)

# (is_leap, weekday of 1 Tishrei) -> sequence positions read together with
# the following reading. Rosh Hashanah only falls on Mon/Tue/Thu/Sat.
MERGE_TABLE: Dict[Tuple[bool, int], Tuple[int, ...]] = {
    (False, 1): _COMMON_MERGES,
    (False, 2): _COMMON_MERGES,
    # 48 Shabbatot from Bereshit on; Nitzavim and Vayeilech stay apart
    (False, 4): (21, 26, 28, 31, 41),
    (False, 6): _COMMON_MERGES,
    (True, 1): (41,),
    (True, 2): (41,),
    (True, 4): (),
    (True, 6): (41,),
}


def merges_for_year(year: int) -> Tuple[int, ...]:
    key = (heb.is_leap_year(year), weekday_of(heb.year_start(year)))
    return MERGE_TABLE.get(key, ())

def reading_at_week(week: int, merges: Tuple[int, ...]) -> WeeklyReading:
    """Reading for the ``week``-th Shabbat of the cycle (0 = Bereshit)."""
    if week < 0:
        return R.NO_READING
    idx = week
    for pos in sorted(merges):
        if idx == pos:
            return COMBINED[pos]
        if idx > pos:
            idx += 1
    if idx > _LAST_SHABBAT_POSITION:
        return R.NO_READING
    return READING_SEQUENCE[idx]


def shabbat_on_or_after(d: HebrewDate) -> HebrewDate:
    ed = heb.to_epoch_day(d)
    ed += (SATURDAY - weekday_of(ed)) % 7
    return heb.from_epoch_day(ed)

def cycle_start(year: int) -> int:
    """Epoch day of Shabbat Bereshit of ``year``."""
    st = heb.to_epoch_day(HebrewDate(year, HebrewMonth.TISHREI, 23))
    ahead = (SATURDAY - weekday_of(st)) % 7
    return st + (ahead or 7)

def reading_for(d: HebrewDate) -> WeeklyReading:
    """Reading of the week containing ``d`` (read on the Shabbat on or after it)."""
    shabbat = heb.to_epoch_day(shabbat_on_or_after(d))
    year = heb.from_epoch_day(shabbat).year
    week = (shabbat - cycle_start(year)) // 7
    return reading_at_week(week, merges_for_year(year))

def reading_on(d: HebrewDate) -> WeeklyReading:
    """Reading read on ``d`` itself; only Shabbat has one."""
    if heb.day_of_week(d) != SATURDAY:
        return R.NO_READING
    return reading_for(d)

def year_readings(year: int):
    """Yield (solar date, reading) for every Shabbat of Hebrew ``year``."""
    ed = heb.year_start(year)
    end = heb.year_start(year + 1)
    ed += (SATURDAY - weekday_of(ed)) % 7
    while ed < end:
        yield solar_from_epoch_day(ed), reading_for(heb.from_epoch_day(ed))
        ed += 7
