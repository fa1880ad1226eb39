import math
from datetime import datetime

import pytest
from pydantic import ValidationError

from vedic_engine.schemas.vedic import TropicalPosition
from vedic_engine.services.calculator import calculate_vedic_astrology, calculate_vedic_positions
from vedic_engine.services.errors import InvalidInputError

# Ayanamsa on 2000-01-01 is exactly the epoch value.
WHEN = datetime(2000, 1, 1, 12, 0)
AYAN = 23.8583


def _tropical(planet, sid, speed=1.0, retro=False):
    return TropicalPosition(planet=planet, longitude=sid + AYAN, latitude=0.5, speed=speed, is_retrograde=retro)


def _chart(positions, **kwargs):
    return calculate_vedic_astrology(positions, WHEN, 17.385, 78.4867, "Asia/Kolkata", **kwargs)


def _sample():
    return [
        _tropical("Sun", 10.0),
        _tropical("Moon", 101.5, speed=13.2),
        _tropical("Mars", 185.0, speed=-0.2, retro=True),
    ]


def test_positions_are_sidereal_and_resolved():
    planets = calculate_vedic_positions(_sample(), WHEN)
    moon = planets[1]
    assert moon.longitude == pytest.approx(101.5)
    assert moon.rashi.name == "Karka"
    assert moon.nakshatra.name == "Pushya" and moon.nakshatra.pada == 3
    assert moon.bhava == 4
    mars = planets[2]
    assert mars.is_retrograde is True
    assert mars.speed == -0.2
    assert mars.latitude == 0.5


def test_full_result_shape():
    res = _chart(_sample())
    assert res.timestamp == WHEN
    assert res.location.timezone == "Asia/Kolkata"
    assert res.ayanamsa.name == "Lahiri"
    assert res.ayanamsa.value == pytest.approx(AYAN)
    assert res.sidereal_time == 0.0
    assert [p.planet for p in res.planets] == ["Sun", "Moon", "Mars"]
    assert res.yogas == () and res.muhurtas == ()
    assert res.transits == ()
    assert len(res.houses) == 12


def test_aspects_cover_all_qualifying_pairs():
    res = _chart(_sample())
    pairs = {(a.aspecting_planet, a.aspected_planet): a for a in res.aspects}
    assert set(pairs) == {("Sun", "Moon"), ("Sun", "Mars"), ("Moon", "Mars")}
    assert pairs[("Sun", "Mars")].aspect_type == "Full"
    assert pairs[("Sun", "Mars")].strength == 75
    assert pairs[("Sun", "Moon")].aspect_type == "Half"


def test_dasha_from_moon_nakshatra():
    res = _chart(_sample())
    # Pushya is the 8th mansion, ruled by Saturn.
    assert res.dashas.current_mahadasha.planet == "Saturn"
    assert res.dashas.current_antardasha.planet == "Mercury"
    assert res.dashas.current_pratyantardasha.planet == "Ketu"
    assert res.dashas.current_mahadasha.remaining_duration == pytest.approx(19 * (1 - 8.1667 / 13.3333), abs=1e-3)


def test_panchanga_uses_moon_nakshatra_only():
    res = _chart(_sample())
    assert res.panchanga.nakshatra.name == "Pushya"
    assert res.panchanga.tithi.name == "Pratipada"
    assert res.panchanga.vara.name == "Sunday"
    assert res.panchanga.karana.end_time == datetime(2000, 1, 1, 18, 0)


def test_rashi_chart_signs_and_placeholder_navamsa():
    res = _chart(_sample())
    rashi = res.charts.rashi
    assert rashi.chart_type == "Rashi"
    assert rashi.moon_sign.name == "Karka"
    assert rashi.sun_sign.name == "Mesha"
    assert rashi.ascendant.rashi.name == "Mesha"  # first planet in the input
    assert len(rashi.planets) == 3
    assert rashi.aspects == res.aspects
    navamsa = res.charts.navamsa
    assert navamsa.planets == () and navamsa.houses == ()
    assert navamsa.ascendant.nakshatra.name == "Ashwini"


def test_missing_moon_falls_back_without_error():
    res = _chart([_tropical("Sun", 10.0)])
    assert res.dashas.current_mahadasha.planet == "Moon"
    assert res.dashas.current_mahadasha.start_date == res.dashas.current_mahadasha.end_date == WHEN
    assert res.panchanga.nakshatra.name == "Ashwini"
    assert res.charts.rashi.moon_sign.name == "Mesha"


def test_empty_input_still_produces_a_result():
    res = _chart([])
    assert res.planets == () and res.aspects == ()
    assert all(h.planets == () for h in res.houses)
    assert res.charts.rashi.ascendant.rashi.name == "Mesha"


def test_transits_against_previous_snapshot():
    previous = calculate_vedic_positions([_tropical("Sun", 355.0), _tropical("Moon", 101.0)], WHEN)
    res = _chart(_sample(), previous_positions=previous)
    assert [(t.planet, t.from_rashi, t.to_rashi) for t in res.transits] == [("Sun", "Meena", "Mesha")]


def test_upcoming_dashas_passed_through():
    res = _chart(_sample(), upcoming_dashas=2)
    assert [p.planet for p in res.dashas.upcoming_periods] == ["Mercury", "Ketu"]


@pytest.mark.parametrize("field", ["longitude", "latitude", "speed"])
def test_non_finite_numeric_field_raises(field):
    values = {"planet": "Moon", "longitude": 10.0, "latitude": 0.0, "speed": 13.0, "is_retrograde": False}
    values[field] = math.nan
    with pytest.raises(InvalidInputError) as exc:
        _chart([TropicalPosition(**values)])
    assert exc.value.field == field
    assert exc.value.planet == "Moon"


def test_result_is_immutable_and_deterministic():
    first = _chart(_sample())
    with pytest.raises(ValidationError):
        first.planets[0].longitude = 1.0
    assert _chart(_sample()) == first
