from datetime import datetime
from typing import Dict, List, Sequence

from ..schemas.vedic import TransitEffects, VedicPlanetaryPosition, VedicTransit
from .vedic import sign_index


def detect_transits(
    current: Sequence[VedicPlanetaryPosition],
    previous: Sequence[VedicPlanetaryPosition],
    when: datetime,
) -> List[VedicTransit]:
    """Return one sign-ingress event per planet whose Rashi changed.

    Planets present in only one snapshot are skipped.
    """

    before: Dict[str, VedicPlanetaryPosition] = {}
    for p in previous:
        before.setdefault(p.planet, p)

    events: List[VedicTransit] = []
    for cur in current:
        prev = before.get(cur.planet)
        if prev is None or sign_index(cur.longitude) == sign_index(prev.longitude):
            continue
        events.append(
            VedicTransit(
                planet=cur.planet,
                from_rashi=prev.rashi.name,
                to_rashi=cur.rashi.name,
                from_nakshatra=prev.nakshatra.name,
                to_nakshatra=cur.nakshatra.name,
                transit_date=when,
                significance=(f"{cur.planet} transits from {prev.rashi.name} to {cur.rashi.name}",),
                effects=TransitEffects(general=(f"{cur.planet} enters {cur.rashi.name}",)),
                duration="Variable",
                intensity="Moderate",
            )
        )
    return events
