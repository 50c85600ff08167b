"""
luach.engines.astro.zmanim
--------------------------
Halachic times of day for one civil date and location.

Two kinds of time points:
  * depression-angle events straight from the solar calculator
    (alot, misheyakir, sunrise, sunset, tzeit)
  * proportional-hour times: anchor + scale * hours, where the GRA day runs
    sunrise..sunset and the MGA day runs (sunrise - 72m)..(sunset + 72m)

All arithmetic is done in unwrapped local minutes; conversion to clock time
happens once at the end.
"""

from __future__ import annotations

from datetime import time
from typing import Dict, Optional, Tuple

from ...core.types import DailyTimes, GeoLocation
from .solar import SUNRISE_ALTITUDE_DEG, event_minutes, horizon_dip_deg, minutes_to_time

ALOT_DEG = -16.1
MISHEYAKIR_DEG = -11.5
TZEIT_DEG = -8.5
FIXED_72_MINUTES = 72

# name -> (anchor, scale, proportional hours)
PROPORTIONAL_TIMES: Dict[str, Tuple[str, str, float]] = {
    "sof_zman_shema_mga": ("dawn_72", "mga", 3.0),
    "sof_zman_shema_gra": ("sunrise", "gra", 3.0),
    "sof_zman_tefila_mga": ("dawn_72", "mga", 4.0),
    "sof_zman_tefila_gra": ("sunrise", "gra", 4.0),
    "chatzot": ("sunrise", "gra", 6.0),
    "mincha_gedola": ("sunrise", "gra", 6.5),
    "mincha_ketana": ("sunrise", "gra", 9.5),
    "plag_hamincha": ("sunrise", "gra", 10.75),
}


def _to_time(m: Optional[float]) -> Optional[time]:
    return None if m is None else minutes_to_time(m)


def daily_minutes(epoch_day: int, location: GeoLocation, *, use_elevation: bool = False) -> Dict[str, Optional[float]]:
    """Every time point as unwrapped local minutes (None when undefined)."""
    horizon = SUNRISE_ALTITUDE_DEG
    if use_elevation:
        horizon -= horizon_dip_deg(location.elevation_m)

    out: Dict[str, Optional[float]] = {
        "alot_hashachar": event_minutes(epoch_day, location, ALOT_DEG, True),
        "misheyakir": event_minutes(epoch_day, location, MISHEYAKIR_DEG, True),
        "sunrise": event_minutes(epoch_day, location, horizon, True),
        "sunset": event_minutes(epoch_day, location, horizon, False),
        "tzeit_hakochavim": event_minutes(epoch_day, location, TZEIT_DEG, False),
    }

    sunrise, sunset = out["sunrise"], out["sunset"]
    if sunrise is None or sunset is None:
        out["dawn_72"] = out["tzeit_72"] = None
        for name in PROPORTIONAL_TIMES:
            out[name] = None
        return out

    anchors = {"sunrise": sunrise, "dawn_72": sunrise - FIXED_72_MINUTES}
    scales = {
        "gra": (sunset - sunrise) / 12.0,
        "mga": ((sunset + FIXED_72_MINUTES) - (sunrise - FIXED_72_MINUTES)) / 12.0,
    }
    out["dawn_72"] = anchors["dawn_72"]
    out["tzeit_72"] = sunset + FIXED_72_MINUTES
    for name, (anchor, scale, hours) in PROPORTIONAL_TIMES.items():
        out[name] = anchors[anchor] + scales[scale] * hours
    return out


def daily_times(epoch_day: int, location: GeoLocation, *, use_elevation: bool = False) -> DailyTimes:
    m = daily_minutes(epoch_day, location, use_elevation=use_elevation)
    return DailyTimes(**{name: _to_time(v) for name, v in m.items()})


def candle_lighting(times: DailyTimes, offset_minutes: int = 18) -> Optional[time]:
    """Sunset minus ``offset_minutes``; None without a sunset."""
    if times.sunset is None:
        return None
    return minutes_to_time(times.sunset.hour * 60 + times.sunset.minute - offset_minutes)
