"""Lahiri ayanamsa and tropical → sidereal conversion.

Kept free of the Swiss Ephemeris bindings: the ayanamsa is a linear
precession model anchored at 2000-01-01, so the sidereal core can run and be
tested without ephemeris data files.
"""

from __future__ import annotations

import math
from datetime import date as Date, datetime
from typing import Union

from .errors import InvalidInputError

LAHIRI_AYANAMSA_2000 = 23.8583
AYANAMSA_EPOCH = Date(2000, 1, 1)
EPOCH_JDN = 2451545  # Julian day number of 2000-01-01
PRECESSION_RATE = 0.0139692  # degrees per tropical year
TROPICAL_YEAR = 365.2422
FORMULA = "Lahiri Ayanamsa"

DateLike = Union[Date, datetime]


def julian_day_number(day: DateLike) -> int:
    """Julian day number of a proleptic Gregorian calendar date."""

    a = (14 - day.month) // 12
    y = day.year + 4800 - a
    m = day.month + 12 * a - 3
    return day.day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def lahiri_ayanamsa(day: DateLike) -> float:
    """Return the ayanamsa in degrees for the calendar date of ``day``.

    Only the date participates; the time of day is ignored.
    """

    years = (julian_day_number(day) - EPOCH_JDN) / TROPICAL_YEAR
    return LAHIRI_AYANAMSA_2000 + PRECESSION_RATE * years


def normalize_degrees(value: float) -> float:
    """Fold ``value`` into [0, 360)."""

    out = value % 360.0
    # -1e-17 % 360 rounds to 360.0
    if out >= 360.0:
        out -= 360.0
    return out


def tropical_to_sidereal(tropical_longitude: float, day: DateLike) -> float:
    if not math.isfinite(tropical_longitude):
        raise InvalidInputError("longitude", tropical_longitude)
    return normalize_degrees(tropical_longitude - lahiri_ayanamsa(day))


__all__ = [
    "AYANAMSA_EPOCH",
    "FORMULA",
    "julian_day_number",
    "lahiri_ayanamsa",
    "normalize_degrees",
    "tropical_to_sidereal",
]
