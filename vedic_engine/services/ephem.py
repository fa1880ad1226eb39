"""Swiss Ephemeris helpers supplying tropical positions to the Vedic core."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Dict, List
from zoneinfo import ZoneInfo

import swisseph as swe

from ..schemas.vedic import TropicalPosition
from .ayanamsa import normalize_degrees


# Engine version for API responses
try:
    ENGINE_VERSION = f"swisseph-{swe.version}"
except AttributeError:
    ENGINE_VERSION = "swisseph-2.10"  # Fallback if version not available

# Output order of the grahas; the true node stands in for Rahu.
BODIES: Dict[str, int] = {
    "Sun": swe.SUN,
    "Moon": swe.MOON,
    "Mars": swe.MARS,
    "Mercury": swe.MERCURY,
    "Jupiter": swe.JUPITER,
    "Venus": swe.VENUS,
    "Saturn": swe.SATURN,
    "Rahu": swe.TRUE_NODE,
}


def backend_name() -> str:
    raw_backend = os.getenv("EPHEMERIS_BACKEND")
    backend = raw_backend.strip().lower() if raw_backend else "swieph"
    return "moseph" if backend == "moseph" else "swieph"


def _backend_flag() -> int:
    """Return the Swiss Ephemeris backend flag based on environment configuration."""

    return swe.FLG_MOSEPH if backend_name() == "moseph" else swe.FLG_SWIEPH


def init_paths(ephe_dir: str | os.PathLike[str] | None) -> None:
    """Set the Swiss Ephemeris file search path when available."""

    if not ephe_dir:
        return

    path = os.fspath(ephe_dir)
    if os.path.isdir(path):
        swe.set_ephe_path(path)


def local_datetime(date_str: str, time_str: str, tz: str) -> datetime:
    return datetime.fromisoformat(f"{date_str}T{time_str}").replace(tzinfo=ZoneInfo(tz))


def to_jd_utc(moment: datetime) -> float:
    """Convert an aware datetime to a Julian day in UTC."""

    dt_utc = moment.astimezone(ZoneInfo("UTC"))
    hour = (
        dt_utc.hour
        + dt_utc.minute / 60
        + dt_utc.second / 3600
        + dt_utc.microsecond / 3_600_000_000
    )
    return swe.julday(dt_utc.year, dt_utc.month, dt_utc.day, hour, swe.GREG_CAL)


def tropical_positions(jd_utc: float) -> List[TropicalPosition]:
    """Return tropical longitude, latitude and speed for the nine grahas.

    Ketu is not computed by the ephemeris: it sits 180° from Rahu with the same
    speed and retrograde state.
    """

    flag = _backend_flag() | swe.FLG_SPEED
    out: List[TropicalPosition] = []
    for name, code in BODIES.items():
        values, _ = swe.calc_ut(jd_utc, code, flag)
        lon, lat, _dist, lon_speed, _lat_speed, _dist_speed = values
        out.append(
            TropicalPosition(
                planet=name,
                longitude=normalize_degrees(lon),
                latitude=lat,
                speed=lon_speed,
                is_retrograde=lon_speed < 0,
            )
        )

    rahu = out[-1]
    out.append(
        TropicalPosition(
            planet="Ketu",
            longitude=normalize_degrees(rahu.longitude + 180.0),
            latitude=-rahu.latitude,
            speed=rahu.speed,
            is_retrograde=rahu.is_retrograde,
        )
    )
    return out
