from typing import List, Optional, Sequence, Tuple

from ..schemas.vedic import VedicAspect, VedicPlanetaryPosition

CONJUNCTION_ORB = 10.0
OPPOSITION_RANGE = (170.0, 190.0)
SQUARE_RANGE = (80.0, 100.0)

EXCLUDED_BODIES = {"Earth"}


def _separation(a: float, b: float) -> float:
    """Shortest arc between two longitudes, in [0, 180]."""

    angle = abs(a - b)
    return min(angle, 360.0 - angle)


def classify_separation(sep: float) -> Optional[Tuple[str, int]]:
    """Map a separation to ``(aspect_type, strength)`` or None when no aspect.

    Angular thresholds stand in for graha drishti; oppositions share the
    ``Full`` type with conjunctions and only differ in strength.
    """

    if sep <= CONJUNCTION_ORB:
        return "Full", 100
    if OPPOSITION_RANGE[0] <= sep <= OPPOSITION_RANGE[1]:
        return "Full", 75
    if SQUARE_RANGE[0] <= sep <= SQUARE_RANGE[1]:
        return "Half", 50
    return None


def find_vedic_aspects(positions: Sequence[VedicPlanetaryPosition]) -> List[VedicAspect]:
    planets = [p for p in positions if p.planet not in EXCLUDED_BODIES]
    res: List[VedicAspect] = []
    for i in range(len(planets)):
        for j in range(i + 1, len(planets)):
            p1, p2 = planets[i], planets[j]
            sep = _separation(p1.longitude, p2.longitude)
            matched = classify_separation(sep)
            if matched is None:
                continue
            aspect_type, strength = matched
            # Orb is measured from 0° inside the conjunction band, from 180° otherwise (squares included).
            reference = 0.0 if sep <= CONJUNCTION_ORB else 180.0
            res.append(
                VedicAspect(
                    aspecting_planet=p1.planet,
                    aspected_planet=p2.planet,
                    aspect_type=aspect_type,
                    strength=strength,
                    orb=abs(sep - reference),
                )
            )
    return res
