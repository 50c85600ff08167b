from __future__ import annotations
from typing import Any, Dict

from ..engines import hebrew as heb
from .observances import omer_count
from .registry import register_attribute

_WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Shabbat")

def weekday(record) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat
    wd = record.solar.weekday
    return {"weekday": wd, "weekday_name": _WEEKDAY_NAMES[wd]}

def year_type(record) -> Dict[str, Any]:
    return {"year_type": heb.year_type(record.hebrew.year)}

def omer(record) -> Dict[str, Any]:
    return {"omer": omer_count(record.hebrew)}

def molad(record) -> Dict[str, Any]:
    # molad of the month the day belongs to
    m = heb.molad(record.hebrew.year, record.hebrew.month)
    return {
        "molad": {
            "weekday": m.weekday,
            "hours": m.hours,
            "minutes": m.minutes,
            "parts": m.parts,
        }
    }

def days_to_rosh_hashanah(record) -> Dict[str, Any]:
    y = record.hebrew.year
    return {"days_to_rosh_hashanah": heb.year_start(y + 1) - record.solar.epoch_day}

register_attribute("weekday", weekday)
register_attribute("year_type", year_type)
register_attribute("omer", omer)
register_attribute("molad", molad)
register_attribute("days_to_rosh_hashanah", days_to_rosh_hashanah)
