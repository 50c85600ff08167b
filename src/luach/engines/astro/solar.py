# engines/astro/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import time
from typing import Optional

from ...core.time import EPOCH_JDN
from ...core.types import GeoLocation

JD_J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
MINUTES_PER_DAY = 1440

# standard altitude of the upper limb at sunrise/sunset (refraction + semidiameter)
SUNRISE_ALTITUDE_DEG = -0.833


@dataclass(frozen=True)
class SolarPosition:
    """Low-precision solar coordinates (degrees unless noted)."""
    L0_deg: float              # geometric mean longitude
    M_deg: float               # mean anomaly
    e: float                   # orbital eccentricity
    C_deg: float               # equation of center
    L_true_deg: float
    L_app_deg: float
    eps_deg: float             # corrected obliquity
    decl_deg: float
    eot_minutes: float         # equation of time


def julian_century(jd: float) -> float:
    return (jd - JD_J2000) / DAYS_PER_CENTURY

def julian_century_for_epoch_day(epoch_day: int) -> float:
    # noon of the civil day
    return julian_century(float(epoch_day + EPOCH_JDN))


def solar_position(T: float) -> SolarPosition:
    """
    NOAA solar-position series at Julian century ``T`` (accurate to ~0.01 deg).
    """
    L0 = (280.46646 + T * (36000.76983 + T * 0.0003032)) % 360.0
    M = 357.52911 + T * (35999.05029 - 0.0001537 * T)
    e = 0.016708634 - T * (0.000042037 + 0.0000001267 * T)

    M_rad = math.radians(M)
    C = (
        math.sin(M_rad) * (1.914602 - T * (0.004817 + 0.000014 * T))
        + math.sin(2.0 * M_rad) * (0.019993 - 0.000101 * T)
        + math.sin(3.0 * M_rad) * 0.000289
    )
    L_true = L0 + C

    # aberration and leading nutation term
    Omega = 125.04 - 1934.136 * T
    L_app = L_true - 0.00569 - 0.00478 * math.sin(math.radians(Omega))

    eps0 = 23.0 + (26.0 + (21.448 - T * (46.815 + T * (0.00059 - T * 0.001813))) / 60.0) / 60.0
    eps = eps0 + 0.00256 * math.cos(math.radians(Omega))
    eps_rad = math.radians(eps)

    decl = math.degrees(math.asin(math.sin(eps_rad) * math.sin(math.radians(L_app))))

    y = math.tan(eps_rad / 2.0) ** 2
    L0_rad = math.radians(L0)
    eot = 4.0 * math.degrees(
        y * math.sin(2.0 * L0_rad)
        - 2.0 * e * math.sin(M_rad)
        + 4.0 * e * y * math.sin(M_rad) * math.cos(2.0 * L0_rad)
        - 0.5 * y * y * math.sin(4.0 * L0_rad)
        - 1.25 * e * e * math.sin(2.0 * M_rad)
    )

    return SolarPosition(
        L0_deg=L0, M_deg=M, e=e, C_deg=C,
        L_true_deg=L_true, L_app_deg=L_app,
        eps_deg=eps, decl_deg=decl, eot_minutes=eot,
    )


def solar_noon_minutes(location: GeoLocation, eot_minutes: float) -> float:
    """Local clock minutes after midnight of apparent noon."""
    return 720.0 - 4.0 * location.longitude - eot_minutes + location.tz_offset_minutes


def hour_angle_deg(lat_deg: float, decl_deg: float, altitude_deg: float) -> Optional[float]:
    """
    Hour angle at which the sun stands at ``altitude_deg``.
    None when the sun never reaches that altitude on this day.
    """
    lat = math.radians(lat_deg)
    decl = math.radians(decl_deg)
    denom = math.cos(lat) * math.cos(decl)
    if denom == 0.0:
        return None
    cos_h = (math.sin(math.radians(altitude_deg)) - math.sin(lat) * math.sin(decl)) / denom
    if cos_h < -1.0 or cos_h > 1.0:
        return None
    return math.degrees(math.acos(cos_h))


def event_minutes(epoch_day: int, location: GeoLocation, altitude_deg: float, rising: bool) -> Optional[float]:
    """Unwrapped local clock minutes of the event (may fall outside [0, 1440))."""
    pos = solar_position(julian_century_for_epoch_day(epoch_day))
    h = hour_angle_deg(location.latitude, pos.decl_deg, altitude_deg)
    if h is None:
        return None
    noon = solar_noon_minutes(location, pos.eot_minutes)
    return noon - 4.0 * h if rising else noon + 4.0 * h


def minutes_to_time(minutes: float) -> time:
    """Round to the nearest minute and wrap into one day."""
    m = int(round(minutes)) % MINUTES_PER_DAY
    return time(m // 60, m % 60)


def time_at_solar_angle(epoch_day: int, location: GeoLocation, altitude_deg: float, rising: bool) -> Optional[time]:
    """
    Local clock time at which the sun crosses ``altitude_deg`` (negative =
    below the horizon) rising or setting; None if it never does.
    """
    m = event_minutes(epoch_day, location, altitude_deg, rising)
    return None if m is None else minutes_to_time(m)


def horizon_dip_deg(elevation_m: float) -> float:
    """Geometric dip of the horizon for an observer ``elevation_m`` above it."""
    return 0.0347 * math.sqrt(max(elevation_m, 0.0))
