from vedic_engine.schemas.vedic import VedicPlanetaryPosition
from vedic_engine.services import aspects
from vedic_engine.services.vedic import resolve_bhava, resolve_nakshatra, resolve_rashi


def _pos(planet: str, lon: float) -> VedicPlanetaryPosition:
    return VedicPlanetaryPosition(
        planet=planet, longitude=lon, latitude=0.0,
        rashi=resolve_rashi(lon), nakshatra=resolve_nakshatra(lon), bhava=resolve_bhava(lon),
        is_retrograde=False, speed=1.0,
    )


def test_separation_wraps_around_zero():
    assert aspects._separation(355.0, 3.0) == 8.0
    assert aspects._separation(10.0, 185.0) == 175.0


def test_opposition_is_full_with_strength_75():
    found = aspects.find_vedic_aspects([_pos("Sun", 10.0), _pos("Mars", 185.0)])
    assert len(found) == 1
    a = found[0]
    assert (a.aspecting_planet, a.aspected_planet) == ("Sun", "Mars")
    assert a.aspect_type == "Full" and a.strength == 75
    assert a.orb == 5.0


def test_conjunction_across_pisces_aries_cusp():
    found = aspects.find_vedic_aspects([_pos("Moon", 355.0), _pos("Venus", 3.0)])
    assert [(a.aspect_type, a.strength, a.orb) for a in found] == [("Full", 100, 8.0)]


def test_square_orb_is_measured_from_180():
    found = aspects.find_vedic_aspects([_pos("Moon", 10.0), _pos("Saturn", 100.0)])
    assert found[0].aspect_type == "Half"
    assert found[0].strength == 50
    assert found[0].orb == 90.0


def test_pairs_outside_every_band_are_dropped():
    assert aspects.find_vedic_aspects([_pos("Sun", 10.0), _pos("Jupiter", 70.0)]) == []
    assert aspects.find_vedic_aspects([_pos("Sun", 10.0), _pos("Jupiter", 20.5)]) == []
    assert aspects.find_vedic_aspects([_pos("Sun", 10.0), _pos("Jupiter", 140.0)]) == []


def test_earth_is_ignored():
    assert aspects.find_vedic_aspects([_pos("Earth", 0.0), _pos("Sun", 0.0)]) == []


def test_unmodelled_fields_have_constant_defaults():
    a = aspects.find_vedic_aspects([_pos("Sun", 0.0), _pos("Mercury", 4.0)])[0]
    assert a.is_applying is False
    assert a.nature == "Neutral"


def test_output_follows_pair_evaluation_order():
    found = aspects.find_vedic_aspects([_pos("A", 0.0), _pos("B", 5.0), _pos("C", 180.0)])
    assert [(a.aspecting_planet, a.aspected_planet) for a in found] == [("A", "B"), ("A", "C"), ("B", "C")]
    assert [a.strength for a in found] == [100, 75, 75]


def test_classification_symmetric_under_reordering():
    lons = {"Sun": 12.0, "Moon": 97.0, "Mars": 188.0, "Venus": 18.0}
    forward = aspects.find_vedic_aspects([_pos(n, l) for n, l in lons.items()])
    backward = aspects.find_vedic_aspects([_pos(n, l) for n, l in reversed(list(lons.items()))])

    def key(a):
        return frozenset((a.aspecting_planet, a.aspected_planet)), a.aspect_type, a.strength

    assert {key(a) for a in forward} == {key(a) for a in backward}
    assert len(forward) == len(backward)
