from datetime import datetime, timedelta, timezone

import pytest

from vedic_engine.services.constants import DASHA_ORDER, NAKSHATRA_SPAN, YEARS
from vedic_engine.services.dashas_vimshottari import calculate_vimshottari_dasha, fallback_dasha

REF = datetime(1990, 8, 18, 9, 2, tzinfo=timezone.utc)


def test_vimshottari_allocations_sum_to_120():
    assert sum(YEARS) == 120
    assert len(DASHA_ORDER) == 9


def test_ashwini_half_traversed_gives_ketu_balance():
    d = calculate_vimshottari_dasha(NAKSHATRA_SPAN / 2, REF)
    maha = d.current_mahadasha
    assert maha.planet == "Ketu"
    assert maha.total_duration == 7
    assert maha.remaining_duration == pytest.approx(3.5)
    assert maha.unit == "years"
    assert maha.start_date == REF
    assert maha.end_date == REF + timedelta(days=7 * 365.25)


def test_sub_periods_scale_by_same_fraction():
    d = calculate_vimshottari_dasha(NAKSHATRA_SPAN / 2, REF)
    antar = d.current_antardasha
    assert antar.planet == "Venus"
    assert antar.total_duration == pytest.approx(20 / 9)
    assert antar.remaining_duration == pytest.approx(10 / 9)
    assert antar.end_date == REF + timedelta(days=20 * 365.25 / 9)

    pratyantar = d.current_pratyantardasha
    assert pratyantar.planet == "Sun"
    assert pratyantar.unit == "days"
    assert pratyantar.total_duration == pytest.approx(6 * 365.25 / 120)
    assert pratyantar.remaining_duration == pytest.approx(6 * 365.25 / 240)


def test_sub_periods_use_next_lords_in_cycle_not_classical_nesting():
    # Classical Vimshottari would open Mercury's Mahadasha with a Mercury
    # Antardasha; this engine takes the next lords in the fixed cycle instead.
    d = calculate_vimshottari_dasha(26 * NAKSHATRA_SPAN + 1.0, REF)  # Revati
    assert d.current_mahadasha.planet == "Mercury"
    assert d.current_antardasha.planet == "Ketu"
    assert d.current_pratyantardasha.planet == "Venus"


def test_lord_depends_on_nakshatra_index_mod_nine():
    for idx in range(27):
        d = calculate_vimshottari_dasha(idx * NAKSHATRA_SPAN + 0.5, REF)
        assert d.current_mahadasha.planet == DASHA_ORDER[idx % 9]


@pytest.mark.parametrize("lon", [0.0, 33.3, 101.5, 250.0, 359.9])
def test_remaining_never_exceeds_total(lon):
    d = calculate_vimshottari_dasha(lon, REF)
    for level in (d.current_mahadasha, d.current_antardasha, d.current_pratyantardasha):
        assert 0.0 < level.remaining_duration <= level.total_duration


def test_upcoming_periods_empty_by_default():
    assert calculate_vimshottari_dasha(101.5, REF).upcoming_periods == ()


def test_upcoming_mahadashas_chain_from_current_end():
    d = calculate_vimshottari_dasha(NAKSHATRA_SPAN / 2, REF, upcoming=3)
    upcoming = d.upcoming_periods
    assert [p.planet for p in upcoming] == ["Venus", "Sun", "Moon"]
    assert all(p.level == "Mahadasha" for p in upcoming)
    assert upcoming[0].start_date == d.current_mahadasha.end_date
    assert upcoming[0].duration == 20.0
    for prev, nxt in zip(upcoming, upcoming[1:]):
        assert nxt.start_date == prev.end_date
    assert all(p.effects for p in upcoming)


def test_upcoming_wraps_around_cycle():
    d = calculate_vimshottari_dasha(8 * NAKSHATRA_SPAN + 1.0, REF, upcoming=2)  # Ashlesha
    assert d.current_mahadasha.planet == "Mercury"
    assert [p.planet for p in d.upcoming_periods] == ["Ketu", "Venus"]


def test_fallback_is_moon_with_zero_span():
    d = fallback_dasha(REF)
    levels = (d.current_mahadasha, d.current_antardasha, d.current_pratyantardasha)
    assert {lvl.planet for lvl in levels} == {"Moon"}
    assert all(lvl.start_date == lvl.end_date == REF for lvl in levels)
    assert d.current_mahadasha.total_duration == 10
    assert d.current_antardasha.total_duration == pytest.approx(10 / 9)
    assert d.current_pratyantardasha.total_duration == pytest.approx(10 * 365.25 / 120)
    assert d.upcoming_periods == ()
