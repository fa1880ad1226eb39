from datetime import datetime, timedelta
from typing import Dict, List, Tuple

from ..schemas.vedic import DashaInfo, DashaLevel, DashaPeriod
from .constants import (
    DASHA_ORDER,
    DASHA_TOTAL_YEARS,
    DASHA_YEAR_DAYS,
    NAKSHATRA_SPAN,
    dasha_lord,
    dasha_years,
)

# Short keyword themes per Mahadasha lord, attached to upcoming periods.
DASHA_EFFECTS: Dict[str, Tuple[str, ...]] = {
    "Ketu": ("Detachment", "Spiritual inquiry", "Sudden change"),
    "Venus": ("Relationships", "Comfort", "Creative pursuits"),
    "Sun": ("Authority", "Recognition", "Health of father"),
    "Moon": ("Emotional focus", "Home and mother", "Public dealings"),
    "Mars": ("Energy", "Property matters", "Conflict and courage"),
    "Rahu": ("Ambition", "Foreign connections", "Unconventional gains"),
    "Jupiter": ("Learning", "Children", "Wisdom and expansion"),
    "Saturn": ("Discipline", "Hard work", "Delays and endurance"),
    "Mercury": ("Communication", "Trade", "Intellectual growth"),
}


def _nakshatra_progress(moon_lon_sid: float) -> Tuple[int, float]:
    """Return (nakshatra index 0..26, fraction traversed in it)."""

    idx = int(moon_lon_sid // NAKSHATRA_SPAN) % 27
    frac = (moon_lon_sid % NAKSHATRA_SPAN) / NAKSHATRA_SPAN
    return idx, frac


def _after_days(start: datetime, days: float) -> datetime:
    return start + timedelta(days=days)


def _upcoming_mahadashas(current_lord: str, start: datetime, count: int) -> List[DashaPeriod]:
    periods = []
    lord_idx = DASHA_ORDER.index(current_lord)
    for _ in range(count):
        lord_idx = (lord_idx + 1) % 9
        lord = DASHA_ORDER[lord_idx]
        years = dasha_years(lord)
        end = _after_days(start, years * DASHA_YEAR_DAYS)
        periods.append(DashaPeriod(
            level="Mahadasha", planet=lord,
            start_date=start, end_date=end,
            duration=float(years), effects=DASHA_EFFECTS[lord],
        ))
        start = end
    return periods


def calculate_vimshottari_dasha(moon_lon_sid: float, reference: datetime, upcoming: int = 0) -> DashaInfo:
    """
    Current Vimshottari Maha/Antar/Pratyantar dasha for a Moon position.
    Algorithm:
      - Moon's sidereal lon -> nakshatra index 0..26 and fraction traversed
      - Maha lord = order[idx % 9]; remaining = (1 - fraction) * years
      - Antar lord = order[(idx + 1) % 9], Pratyantar lord = order[(idx + 2) % 9]

    The Antar/Pratyantar lords are the *next* planets in the fixed cycle and
    all three levels start at ``reference``. Classical Vimshottari instead
    restarts the sub-period sequence from the Maha lord itself and chains the
    sub-periods; the offset rule is kept as-is until the intended behaviour is
    settled.
    """
    idx, frac = _nakshatra_progress(moon_lon_sid)
    remaining = 1.0 - frac

    maha_lord = dasha_lord(idx)
    maha_years = dasha_years(maha_lord)
    maha_end = _after_days(reference, maha_years * DASHA_YEAR_DAYS)
    maha = DashaLevel(
        planet=maha_lord, start_date=reference, end_date=maha_end,
        total_duration=float(maha_years), remaining_duration=maha_years * remaining,
        unit="years",
    )

    antar_lord = dasha_lord(idx + 1)
    antar_years = dasha_years(antar_lord)
    antar_months = antar_years / 9
    antar = DashaLevel(
        planet=antar_lord, start_date=reference,
        end_date=_after_days(reference, antar_years * DASHA_YEAR_DAYS / 9),
        total_duration=antar_months, remaining_duration=antar_months * remaining,
        unit="months",
    )

    pratyantar_lord = dasha_lord(idx + 2)
    pratyantar_days = dasha_years(pratyantar_lord) * DASHA_YEAR_DAYS / DASHA_TOTAL_YEARS
    pratyantar = DashaLevel(
        planet=pratyantar_lord, start_date=reference,
        end_date=_after_days(reference, pratyantar_days),
        total_duration=pratyantar_days, remaining_duration=pratyantar_days * remaining,
        unit="days",
    )

    return DashaInfo(
        current_mahadasha=maha,
        current_antardasha=antar,
        current_pratyantardasha=pratyantar,
        upcoming_periods=tuple(_upcoming_mahadashas(maha_lord, maha_end, upcoming)),
    )


def fallback_dasha(reference: datetime) -> DashaInfo:
    """Moon-lord placeholder used when no Moon position is available.

    Every level starts and ends at ``reference``.
    """
    years = dasha_years("Moon")
    days = years * DASHA_YEAR_DAYS / DASHA_TOTAL_YEARS

    def level(total: float, unit: str) -> DashaLevel:
        return DashaLevel(
            planet="Moon", start_date=reference, end_date=reference,
            total_duration=total, remaining_duration=total, unit=unit,
        )

    return DashaInfo(
        current_mahadasha=level(float(years), "years"),
        current_antardasha=level(years / 9, "months"),
        current_pratyantardasha=level(days, "days"),
    )
