"""Assemble a full Vedic chart from tropical positions.

``calculate_vedic_astrology`` is the entry point used by the routers. It is a
pure function of its arguments: the only shared state is the read-only tables
in :mod:`.constants`.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from ..schemas.vedic import (
    Ascendant,
    Ayanamsa,
    Charts,
    Location,
    TropicalPosition,
    VedicCalculationResult,
    VedicChart,
    VedicPlanetaryPosition,
)
from .aspects import find_vedic_aspects
from .ayanamsa import AYANAMSA_EPOCH, FORMULA, lahiri_ayanamsa, tropical_to_sidereal
from .bhavas import build_bhavas
from .constants import RASHIS
from .dashas_vimshottari import calculate_vimshottari_dasha, fallback_dasha
from .errors import InvalidInputError
from .panchanga import build_panchanga, default_nakshatra
from .transits import detect_transits
from .vedic import resolve_bhava, resolve_nakshatra, resolve_rashi

logger = logging.getLogger(__name__)


def _check_finite(pos: TropicalPosition) -> None:
    for field in ("longitude", "latitude", "speed"):
        value = getattr(pos, field)
        if not math.isfinite(value):
            raise InvalidInputError(field, value, planet=pos.planet)


def calculate_vedic_positions(
    tropical_positions: Iterable[TropicalPosition], when: datetime
) -> List[VedicPlanetaryPosition]:
    out = []
    for pos in tropical_positions:
        _check_finite(pos)
        lon_sid = tropical_to_sidereal(pos.longitude, when)
        out.append(
            VedicPlanetaryPosition(
                planet=pos.planet,
                longitude=lon_sid,
                latitude=pos.latitude,
                rashi=resolve_rashi(lon_sid),
                nakshatra=resolve_nakshatra(lon_sid),
                bhava=resolve_bhava(lon_sid),
                is_retrograde=pos.is_retrograde,
                speed=pos.speed,
            )
        )
    return out


def _find(positions: Sequence[VedicPlanetaryPosition], planet: str) -> Optional[VedicPlanetaryPosition]:
    return next((p for p in positions if p.planet == planet), None)


def _placeholder_ascendant() -> Ascendant:
    return Ascendant(rashi=RASHIS[0], nakshatra=default_nakshatra(), degree=0.0)


def calculate_vedic_astrology(
    tropical_positions: Sequence[TropicalPosition],
    when: datetime,
    latitude: float,
    longitude: float,
    timezone: str,
    previous_positions: Optional[Sequence[VedicPlanetaryPosition]] = None,
    upcoming_dashas: int = 0,
) -> VedicCalculationResult:
    """Build the full chart for ``tropical_positions`` observed at ``when``.

    ``latitude``/``longitude``/``timezone`` only label the result. Transits are
    detected against ``previous_positions`` (an already resolved snapshot) when
    given. A missing Moon yields :func:`fallback_dasha` instead of an error.
    """
    planets = calculate_vedic_positions(tropical_positions, when)
    aspects = find_vedic_aspects(planets)
    moon = _find(planets, "Moon")
    sun = _find(planets, "Sun")

    if moon is not None:
        dashas = calculate_vimshottari_dasha(moon.longitude, when, upcoming=upcoming_dashas)
    else:
        logger.info("vedic_moon_missing_dasha_fallback", extra={"planets": len(planets)})
        dashas = fallback_dasha(when)

    transits = detect_transits(planets, previous_positions, when) if previous_positions else []
    houses = build_bhavas(planets)

    if planets:
        first = planets[0]
        ascendant = Ascendant(rashi=first.rashi, nakshatra=first.nakshatra, degree=0.0)
    else:
        ascendant = _placeholder_ascendant()

    rashi_chart = VedicChart(
        chart_type="Rashi",
        houses=tuple(houses),
        planets=tuple(planets),
        aspects=tuple(aspects),
        ascendant=ascendant,
        moon_sign=moon.rashi if moon else RASHIS[0],
        sun_sign=sun.rashi if sun else RASHIS[0],
    )
    # Divisional charts are not computed; navamsa keeps the result shape only.
    navamsa_chart = VedicChart(
        chart_type="Navamsa",
        ascendant=_placeholder_ascendant(),
        moon_sign=RASHIS[0],
        sun_sign=RASHIS[0],
    )

    return VedicCalculationResult(
        timestamp=when,
        location=Location(latitude=latitude, longitude=longitude, timezone=timezone),
        ayanamsa=Ayanamsa(value=lahiri_ayanamsa(when), epoch=AYANAMSA_EPOCH, formula=FORMULA),
        sidereal_time=0.0,
        planets=tuple(planets),
        houses=tuple(houses),
        aspects=tuple(aspects),
        dashas=dashas,
        transits=tuple(transits),
        panchanga=build_panchanga(when, moon),
        charts=Charts(rashi=rashi_chart, navamsa=navamsa_chart),
    )
