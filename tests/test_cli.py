# tests/test_cli.py

import json
import pytest

from luach import cli


@pytest.fixture(autouse=True)
def _no_user_config(tmp_path, monkeypatch):
    monkeypatch.setenv("LUACH_CONFIG", str(tmp_path / "missing.json"))


def test_bare_date(capsys):
    assert cli.main(["2023-10-14", "--no-location"]) == 0
    out = capsys.readouterr().out
    assert "2023-10-14" in out
    assert "Bereshit" in out
    assert "Tishrei 5784" in out

def test_day_json(capsys):
    assert cli.main(["day", "2024-04-23", "--json", "--preset", "new-york", "--attr", "omer"]) == 0
    d = json.loads(capsys.readouterr().out)
    assert d["observances"] == ["Pesach (Day 1)"]
    assert d["times"]["sunset"] is not None
    assert d["attributes"] == {"omer": None}

def test_day_default_location_from_config(capsys):
    assert cli.main(["day", "2024-06-21", "--json"]) == 0
    d = json.loads(capsys.readouterr().out)
    assert d["candle_lighting"] is not None

def test_out_of_range(capsys):
    assert cli.main(["day", "2051-01-01"]) == 2
    assert capsys.readouterr().err.startswith("error:")

def test_range(capsys):
    assert cli.main(["range", "2023-12-07", "2023-12-09", "--no-location"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert "Chanukah (Day 1" in lines[1]

def test_range_too_long(capsys):
    assert cli.main(["range", "2020-01-01", "2024-01-01", "--no-location"]) == 2

def test_zmanim(capsys):
    assert cli.main(["zmanim", "2024-06-21", "--lat", "31.7683", "--lon", "35.2137", "--tz", "120", "--json"]) == 0
    d = json.loads(capsys.readouterr().out)
    assert d["location"]["tz_offset_minutes"] == 120
    assert d["times"]["sunrise"].startswith("04:")

def test_hebrew(capsys):
    assert cli.main(["hebrew", "5784", "nisan", "15"]) == 0
    assert capsys.readouterr().out.strip() == "2024-04-23"

def test_hebrew_missing_month(capsys):
    assert cli.main(["hebrew", "5785", "adar_i", "1"]) == 2

def test_holidays(capsys):
    assert cli.main(["holidays", "5784", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    labels = [label for r in rows for label in r["observances"]]
    assert "Yom Kippur" in labels
    assert "Rosh Chodesh" not in labels
    assert cli.main(["holidays", "5784", "--all", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert any("Rosh Chodesh" in r["observances"] for r in rows)

def test_reading(capsys):
    assert cli.main(["reading", "5784"]) == 0
    out = capsys.readouterr().out
    assert "2023-10-14  Bereshit" in out

def test_new_years(capsys):
    assert cli.main(["new-years", "--from-year", "5784", "--to-year", "5785"]) == 0
    out = capsys.readouterr().out
    assert "2023-09-16" in out and "2024-10-03" in out

def test_pretty_month(capsys):
    assert cli.main(["pretty-month", "--hebrew", "5784", "KISLEV"]) == 0
    assert "Kislev 5784" in capsys.readouterr().out

def test_non_ascii_digits_are_not_a_date(capsys):
    with pytest.raises(SystemExit):
        cli.main(["２０２４-０３-２４"])
