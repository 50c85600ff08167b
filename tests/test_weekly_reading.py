# tests/test_weekly_reading.py

import luach
from luach.core.time import weekday
from luach.core.types import HebrewDate, HebrewMonth, SolarDate
from luach.engines import hebrew as heb
from luach.engines import parsha
from luach.engines.parsha import MERGE_TABLE, READING_SEQUENCE, WeeklyReading, reading_at_week, reading_for, reading_on

M = HebrewMonth
R = WeeklyReading


def test_sequence():
    assert len(READING_SEQUENCE) == 54
    assert len(set(READING_SEQUENCE)) == 54
    assert READING_SEQUENCE[0] is R.BERESHIT
    assert READING_SEQUENCE[-1] is R.VEZOT_HABERACHA
    assert not any(r.is_combined for r in READING_SEQUENCE)
    assert R.VAYAKHEL_PEKUDEI.is_combined

def test_names():
    assert R.BERESHIT.label == "Bereshit"
    assert R.BERESHIT.hebrew_name == "בראשית"
    assert R.MATOT_MASEI.label == "Matot-Masei"
    assert R.NO_READING.hebrew_name == ""

def test_bereshit_5784():
    # Tishrei 28, 5784 is a Friday; its Shabbat (Tishrei 29) reads Bereshit
    assert reading_for(HebrewDate(5784, M.TISHREI, 28)) is R.BERESHIT
    assert reading_for(HebrewDate(5784, M.TISHREI, 29)) is R.BERESHIT
    assert reading_on(HebrewDate(5784, M.TISHREI, 29)) is R.BERESHIT

def test_weekday_queried_directly():
    assert reading_on(HebrewDate(5784, M.TISHREI, 28)) is R.NO_READING
    assert reading_on(HebrewDate(5784, M.CHESHVAN, 2)) is R.NO_READING

def test_noach_5784():
    assert reading_for(HebrewDate(5784, M.CHESHVAN, 6)) is R.NOACH

def test_before_cycle_start():
    # Shabbatot of the Tishrei festival season
    assert reading_for(HebrewDate(5784, M.TISHREI, 15)) is R.NO_READING
    assert reading_for(HebrewDate(5784, M.TISHREI, 22)) is R.NO_READING

def test_shabbat_on_or_after():
    assert parsha.shabbat_on_or_after(HebrewDate(5784, M.TISHREI, 16)) == HebrewDate(5784, M.TISHREI, 22)
    assert parsha.shabbat_on_or_after(HebrewDate(5784, M.TISHREI, 3)) == HebrewDate(5784, M.TISHREI, 8)
    assert parsha.shabbat_on_or_after(HebrewDate(5784, M.TISHREI, 15)) == HebrewDate(5784, M.TISHREI, 15)

def test_cycle_start_is_shabbat_after_simchat_torah():
    for y in range(5700, 5820):
        st = heb.to_epoch_day(HebrewDate(y, M.TISHREI, 23))
        start = parsha.cycle_start(y)
        assert weekday(start) == 6
        assert 1 <= start - st <= 7

def test_merge_table_covers_every_year():
    for y in range(3700, 5820):
        key = (heb.is_leap_year(y), weekday(heb.year_start(y)))
        assert key in MERGE_TABLE

def test_merges_name_pairs():
    for merges in MERGE_TABLE.values():
        for pos in merges:
            assert pos in parsha.COMBINED

def test_reading_at_week_without_merges():
    assert reading_at_week(-1, ()) is R.NO_READING
    assert reading_at_week(0, ()) is R.BERESHIT
    assert reading_at_week(21, ()) is R.VAYAKHEL
    assert reading_at_week(52, ()) is R.HAAZINU
    assert reading_at_week(53, ()) is R.NO_READING
    assert reading_at_week(54, ()) is R.NO_READING

def test_reading_at_week_merges_are_cumulative():
    merges = MERGE_TABLE[(False, 1)]
    assert reading_at_week(20, merges) is R.KI_TISA
    assert reading_at_week(21, merges) is R.VAYAKHEL_PEKUDEI
    assert reading_at_week(22, merges) is R.VAYIKRA
    assert reading_at_week(25, merges) is R.TAZRIA_METZORA
    assert reading_at_week(26, merges) is R.ACHREI_MOT_KEDOSHIM
    assert reading_at_week(27, merges) is R.EMOR
    assert reading_at_week(28, merges) is R.BEHAR_BECHUKOTAI
    assert reading_at_week(29, merges) is R.BAMIDBAR
    assert reading_at_week(37, merges) is R.MATOT_MASEI
    assert reading_at_week(38, merges) is R.DEVARIM
    assert reading_at_week(45, merges) is R.NITZAVIM_VAYEILECH
    assert reading_at_week(46, merges) is R.HAAZINU

def test_leap_year_keeps_spring_readings_separate():
    merges = MERGE_TABLE[(True, 6)]
    assert reading_at_week(21, merges) is R.VAYAKHEL
    assert reading_at_week(22, merges) is R.PEKUDEI

def test_full_year_listing():
    rows = list(parsha.year_readings(5784))
    assert rows[0][0] == SolarDate(2023, 9, 16)
    assert rows[0][1] is R.NO_READING
    first = next(i for i, (_, r) in enumerate(rows) if r is not R.NO_READING)
    assert rows[first] == (SolarDate(2023, 10, 14), R.BERESHIT)
    assert rows[first + 1][1] is R.NOACH
    assert all(isinstance(r, WeeklyReading) for _, r in rows)
    assert all(s.weekday == 6 for s, _ in rows)

def test_thursday_common_year_reads_nitzavim_and_vayeilech_apart():
    # 5785: common year, Rosh Hashanah on Thursday
    readings = [r for _, r in parsha.year_readings(5785)]
    assert readings[-1] is R.HAAZINU
    assert R.NITZAVIM in readings and R.VAYEILECH in readings
    assert R.NITZAVIM_VAYEILECH not in readings
    assert luach.compute_daily_record("2025-09-20").weekly_reading is R.HAAZINU

def test_no_year_reads_vezot_haberacha_on_shabbat():
    for year in range(3761, 5812):
        start = parsha.cycle_start(year)
        last = heb.year_start(year + 1) - 1
        week = (last - start) // 7
        reading = parsha.reading_at_week(week, parsha.merges_for_year(year))
        assert reading is not R.VEZOT_HABERACHA, year
        assert reading is not R.NO_READING, year
