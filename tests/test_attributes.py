# tests/test_attributes.py

import pytest

import luach
from luach.attributes import registry


def test_standard_attributes_registered():
    assert {"weekday", "year_type", "omer", "molad", "days_to_rosh_hashanah"} <= set(registry.available_attributes())

def test_custom_attribute(monkeypatch):
    monkeypatch.setattr(registry, "_REGISTRY", dict(registry._REGISTRY))
    luach.register_attribute("day_of_month", lambda r: {"day_of_month": r.hebrew.day})
    rec = luach.compute_daily_record("2024-04-23", attributes=("day_of_month",))
    assert rec.attributes == {"day_of_month": 15}

def test_unknown_attribute():
    rec = luach.compute_daily_record("2024-04-23")
    with pytest.raises(KeyError):
        registry.compute_attributes(rec, ["weekday", "not_an_attribute"])

def test_molad_attribute():
    rec = luach.compute_daily_record("2023-09-16", attributes=("molad",))
    m = rec.attributes["molad"]
    # Friday molad pushes Rosh Hashanah 5784 to Shabbat
    assert m["weekday"] == 5
    assert 0 <= m["hours"] < 24 and 0 <= m["minutes"] < 60
    assert 0 <= m["parts"] < 18

def test_days_to_rosh_hashanah():
    rec = luach.compute_daily_record("2024-10-02", attributes=("days_to_rosh_hashanah",))
    assert rec.attributes == {"days_to_rosh_hashanah": 1}

def test_duplicate_registration(monkeypatch):
    monkeypatch.setattr(registry, "_REGISTRY", dict(registry._REGISTRY))
    with pytest.raises(ValueError):
        registry.register_attribute("weekday", lambda r: {})
    registry.register_attribute("weekday", lambda r: {"weekday": "x"}, replace=True)
    assert registry.compute_attributes(luach.compute_daily_record("2024-04-23"), ["weekday"]) == {"weekday": "x"}
