"""Partially computed Panchanga.

Only the nakshatra element is derived from the chart (the Moon's mansion);
tithi, vara, yoga and karana are fixed placeholder segments anchored at the
calculation instant.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..schemas.vedic import Karana, NakshatraInfo, Panchanga, PanchangaYoga, Tithi, Vara, VedicPlanetaryPosition
from .constants import NAKSHATRAS


def default_nakshatra() -> NakshatraInfo:
    return NakshatraInfo(**NAKSHATRAS[0].model_dump(), pada=1, degree=0.0)


def build_panchanga(when: datetime, moon: Optional[VedicPlanetaryPosition]) -> Panchanga:
    return Panchanga(
        tithi=Tithi(
            name="Pratipada", number=1, paksha="Shukla",
            end_time=when + timedelta(hours=24), deity="Agni", nature="Nanda",
        ),
        vara=Vara(name="Sunday", number=1, lord="Sun", color="Red"),
        nakshatra=moon.nakshatra if moon is not None else default_nakshatra(),
        yoga=PanchangaYoga(
            name="Vishkumbha", number=1, deity="Yama", nature="Malefic",
            end_time=when + timedelta(hours=24),
        ),
        karana=Karana(
            name="Kinstughna", number=1, type="Chara", deity="Shiva",
            end_time=when + timedelta(hours=6),
        ),
    )
