from typing import Dict, List, Sequence

from ..schemas.vedic import BhavaInfo, LordPosition, VedicPlanetaryPosition
from .constants import BHAVA_KARAKAS, BHAVA_NAMES, BHAVA_SIGNIFICANCES, RASHIS


def build_bhavas(positions: Sequence[VedicPlanetaryPosition]) -> List[BhavaInfo]:
    """House table matching the simplified bhava rule.

    With no ascendant, house N holds the N-th Rashi (Mesha = 1st house), so the
    lord of a house is that Rashi's ruler.
    """

    occupants: Dict[int, List[str]] = {n: [] for n in range(1, 13)}
    by_planet: Dict[str, VedicPlanetaryPosition] = {}
    for p in positions:
        occupants[p.bhava].append(p.planet)
        by_planet.setdefault(p.planet, p)

    out = []
    for i, rashi in enumerate(RASHIS):
        lord = rashi.ruler
        lord_pos = by_planet.get(lord)
        out.append(
            BhavaInfo(
                number=i + 1,
                name=BHAVA_NAMES[i],
                significance=BHAVA_SIGNIFICANCES[i],
                body_parts=tuple(part.strip() for part in rashi.body_part.split(",")),
                karaka=BHAVA_KARAKAS[i],
                planets=tuple(occupants[i + 1]),
                lord=lord,
                lord_position=(
                    LordPosition(bhava=lord_pos.bhava, rashi=lord_pos.rashi.name) if lord_pos else None
                ),
            )
        )
    return out
