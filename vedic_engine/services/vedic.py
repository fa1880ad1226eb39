from ..schemas.vedic import NakshatraInfo, Rashi
from .constants import NAKSHATRA_SPAN, PADA_SPAN, SIGN_SPAN, nakshatra_by_index, rashi_by_index


def sign_index(lon_sid: float) -> int:
    # Callers pass [0, 360); the clamp only absorbs float noise at 360.
    return min(max(int(lon_sid // SIGN_SPAN), 0), 11)


def resolve_rashi(lon_sid: float) -> Rashi:
    return rashi_by_index(sign_index(lon_sid))


def resolve_nakshatra(lon_sid: float) -> NakshatraInfo:
    # Each nakshatra = 13°20′, each pada = 3°20′
    idx = min(max(int(lon_sid // NAKSHATRA_SPAN), 0), 26)
    degree = lon_sid - idx * NAKSHATRA_SPAN
    pada = min(int(degree // PADA_SPAN) + 1, 4)
    return NakshatraInfo(**nakshatra_by_index(idx).model_dump(), pada=pada, degree=degree)


def resolve_bhava(lon_sid: float) -> int:
    """Simplified house number with no ascendant.

    Reproduces ``((floor(lon/30) + 1) mod 12) or 12``. This is not a real house
    system; an ascendant-based resolver would live beside this one under its
    own name.
    """
    return ((int(lon_sid // SIGN_SPAN) + 1) % 12) or 12
