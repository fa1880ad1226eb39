"""Fixed Jyotish reference tables.

Built once at import time as tuples of frozen models; callers go through the
lookup helpers at the bottom of the module.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..schemas.vedic import NakshatraBase, Rashi

SIGN_SPAN = 30.0
NAKSHATRA_SPAN = 360.0 / 27  # 13°20′
PADA_SPAN = NAKSHATRA_SPAN / 4  # 3°20′

RASHIS: Tuple[Rashi, ...] = (
    Rashi(name="Mesha", number=1, element="Fire", quality="Cardinal", ruler="Mars",
          exaltation="Sun", debilitation="Saturn", symbol="Ram", body_part="Head", nature="Movable"),
    Rashi(name="Vrishabha", number=2, element="Earth", quality="Fixed", ruler="Venus",
          exaltation="Moon", debilitation="Mars", symbol="Bull", body_part="Face, Neck", nature="Fixed"),
    Rashi(name="Mithuna", number=3, element="Air", quality="Mutable", ruler="Mercury",
          exaltation="Rahu", debilitation="Ketu", symbol="Twins", body_part="Arms, Shoulders", nature="Dual"),
    Rashi(name="Karka", number=4, element="Water", quality="Cardinal", ruler="Moon",
          exaltation="Jupiter", debilitation="Mars", symbol="Crab", body_part="Chest", nature="Movable"),
    Rashi(name="Simha", number=5, element="Fire", quality="Fixed", ruler="Sun",
          exaltation="Pluto", debilitation="Venus", symbol="Lion", body_part="Heart, Upper Back", nature="Fixed"),
    Rashi(name="Kanya", number=6, element="Earth", quality="Mutable", ruler="Mercury",
          exaltation="Mercury", debilitation="Venus", symbol="Virgin", body_part="Stomach, Intestines", nature="Dual"),
    Rashi(name="Tula", number=7, element="Air", quality="Cardinal", ruler="Venus",
          exaltation="Saturn", debilitation="Sun", symbol="Balance", body_part="Lower Back, Kidneys", nature="Movable"),
    Rashi(name="Vrishchika", number=8, element="Water", quality="Fixed", ruler="Mars",
          exaltation="Ketu", debilitation="Moon", symbol="Scorpion", body_part="Reproductive Organs", nature="Fixed"),
    Rashi(name="Dhanu", number=9, element="Fire", quality="Mutable", ruler="Jupiter",
          exaltation="Ketu", debilitation="Mercury", symbol="Archer", body_part="Thighs", nature="Dual"),
    Rashi(name="Makara", number=10, element="Earth", quality="Cardinal", ruler="Saturn",
          exaltation="Mars", debilitation="Jupiter", symbol="Goat", body_part="Knees", nature="Movable"),
    Rashi(name="Kumbha", number=11, element="Air", quality="Fixed", ruler="Saturn",
          exaltation="Rahu", debilitation="Sun", symbol="Water Bearer", body_part="Calves, Ankles", nature="Fixed"),
    Rashi(name="Meena", number=12, element="Water", quality="Mutable", ruler="Jupiter",
          exaltation="Venus", debilitation="Mercury", symbol="Fish", body_part="Feet", nature="Dual"),
)


def _nak(number, name, ruler, deity, symbol, nature, gana, yoni, tatva, varna, gotra, nadi, *traits):
    return NakshatraBase(
        name=name, number=number, ruler=ruler, deity=deity, symbol=symbol, nature=nature,
        gana=gana, yoni=yoni, tatva=tatva, varna=varna, gotra=gotra, nadi=nadi,
        characteristics=traits,
    )


NAKSHATRAS: Tuple[NakshatraBase, ...] = (
    _nak(1, "Ashwini", "Ketu", "Ashwini Kumaras", "Horse Head", "Swift, Light", "Deva", "Horse",
         "Prithvi", "Vaishya", "Marichi", "Adi", "Healing", "Speed", "Initiative", "Medicine"),
    _nak(2, "Bharani", "Venus", "Yama", "Yoni", "Fierce, Severe", "Manushya", "Elephant",
         "Prithvi", "Kshatriya", "Marichi", "Adi", "Transformation", "Restraint", "Moral Values", "Justice"),
    _nak(3, "Krittika", "Sun", "Agni", "Razor/Flame", "Sharp, Cutting", "Rakshasa", "Sheep",
         "Prithvi", "Brahmin", "Angiras", "Adi", "Purification", "Cutting Through", "Fame", "Leadership"),
    _nak(4, "Rohini", "Moon", "Brahma", "Cart/Chariot", "Fixed, Stable", "Manushya", "Serpent",
         "Prithvi", "Shudra", "Angiras", "Adi", "Growth", "Beauty", "Fertility", "Material Prosperity"),
    _nak(5, "Mrigashira", "Mars", "Soma", "Deer Head", "Soft, Tender", "Deva", "Serpent",
         "Prithvi", "Kshatriya", "Angiras", "Adi", "Searching", "Curiosity", "Gentleness", "Creativity"),
    _nak(6, "Ardra", "Rahu", "Rudra", "Teardrop", "Sharp, Destructive", "Manushya", "Dog",
         "Jal", "Kshatriya", "Angiras", "Adi", "Destruction", "Renewal", "Storms", "Transformation"),
    _nak(7, "Punarvasu", "Jupiter", "Aditi", "Bow and Quiver", "Movable, Changeable", "Deva", "Cat",
         "Jal", "Vaishya", "Angiras", "Adi", "Return", "Renewal", "Repetition", "Safety"),
    _nak(8, "Pushya", "Saturn", "Brihaspati", "Cow Udder", "Light, Swift", "Deva", "Sheep",
         "Jal", "Kshatriya", "Angiras", "Adi", "Nourishment", "Spirituality", "Protection", "Prosperity"),
    _nak(9, "Ashlesha", "Mercury", "Nagas", "Serpent", "Sharp, Harsh", "Rakshasa", "Cat",
         "Jal", "Kshatriya", "Angiras", "Adi", "Hypnotic Power", "Kundalini", "Mysticism", "Poison/Medicine"),
    _nak(10, "Magha", "Ketu", "Pitrs", "Throne", "Fierce, Severe", "Rakshasa", "Rat",
         "Jal", "Shudra", "Angiras", "Madhya", "Ancestral Power", "Tradition", "Authority", "Respect"),
    _nak(11, "Purva Phalguni", "Venus", "Bhaga", "Hammock", "Fierce, Severe", "Manushya", "Rat",
         "Jal", "Brahmin", "Angiras", "Madhya", "Pleasure", "Procreation", "Rest", "Relaxation"),
    _nak(12, "Uttara Phalguni", "Sun", "Aryaman", "Bed", "Fixed, Permanent", "Manushya", "Cow",
         "Agni", "Kshatriya", "Angiras", "Madhya", "Patronage", "Friendship", "Contracts", "Marriage"),
    _nak(13, "Hasta", "Moon", "Savitar", "Hand", "Light, Swift", "Deva", "Buffalo",
         "Agni", "Vaishya", "Angiras", "Madhya", "Skill", "Craft", "Laughter", "Dexterity"),
    _nak(14, "Chitra", "Mars", "Tvashtar", "Pearl", "Soft, Mild", "Rakshasa", "Tiger",
         "Agni", "Kshatriya", "Angiras", "Madhya", "Beauty", "Illusion", "Creativity", "Variety"),
    _nak(15, "Swati", "Rahu", "Vayu", "Coral", "Movable, Changeable", "Deva", "Buffalo",
         "Agni", "Kshatriya", "Angiras", "Madhya", "Independence", "Movement", "Flexibility", "Trade"),
    _nak(16, "Vishakha", "Jupiter", "Indra-Agni", "Triumphal Arch", "Mixed", "Rakshasa", "Tiger",
         "Agni", "Kshatriya", "Angiras", "Madhya", "Achievement", "Goal-oriented", "Determination", "Success"),
    _nak(17, "Anuradha", "Saturn", "Mitra", "Lotus", "Soft, Mild", "Deva", "Deer",
         "Agni", "Shudra", "Angiras", "Madhya", "Friendship", "Cooperation", "Balance", "Devotion"),
    _nak(18, "Jyeshtha", "Mercury", "Indra", "Earring", "Sharp, Harsh", "Rakshasa", "Deer",
         "Agni", "Kshatriya", "Angiras", "Madhya", "Seniority", "Protection", "Responsibility", "Generosity"),
    _nak(19, "Mula", "Ketu", "Nirriti", "Bunch of Roots", "Sharp, Harsh", "Rakshasa", "Dog",
         "Vayu", "Kshatriya", "Angiras", "Antya", "Investigation", "Destruction", "Foundation", "Research"),
    _nak(20, "Purva Ashadha", "Venus", "Apas", "Fan", "Fierce, Severe", "Manushya", "Monkey",
         "Vayu", "Brahmin", "Angiras", "Antya", "Invincibility", "Purification", "Strength", "Pride"),
    _nak(21, "Uttara Ashadha", "Sun", "Vishvadevas", "Elephant Tusk", "Fixed, Permanent", "Manushya", "Mongoose",
         "Vayu", "Kshatriya", "Angiras", "Antya", "Victory", "Final Attainment", "Permanence", "Support"),
    _nak(22, "Shravana", "Moon", "Vishnu", "Ear", "Movable, Changeable", "Deva", "Monkey",
         "Vayu", "Kshatriya", "Angiras", "Antya", "Learning", "Listening", "Connection", "Fame"),
    _nak(23, "Dhanishtha", "Mars", "Vasus", "Drum", "Movable, Changeable", "Rakshasa", "Lion",
         "Vayu", "Kshatriya", "Angiras", "Antya", "Wealth", "Music", "Rhythm", "Adaptability"),
    _nak(24, "Shatabhisha", "Rahu", "Varuna", "Empty Circle", "Movable, Changeable", "Rakshasa", "Horse",
         "Vayu", "Kshatriya", "Angiras", "Antya", "Healing", "Secrecy", "Research", "Mysticism"),
    _nak(25, "Purva Bhadrapada", "Jupiter", "Aja Ekapada", "Sword", "Fierce, Severe", "Manushya", "Lion",
         "Vayu", "Brahmin", "Angiras", "Antya", "Transformation", "Spirituality", "Sacrifice", "Idealism"),
    _nak(26, "Uttara Bhadrapada", "Saturn", "Ahir Budhnya", "Twin", "Fixed, Permanent", "Manushya", "Cow",
         "Vayu", "Kshatriya", "Angiras", "Antya", "Depth", "Kundalini", "Mysticism", "Stability"),
    _nak(27, "Revati", "Mercury", "Pushan", "Fish", "Soft, Mild", "Deva", "Elephant",
         "Akash", "Shudra", "Angiras", "Antya", "Completion", "Journey", "Nourishment", "Prosperity"),
)

# Vimshottari order and full years per Maha
DASHA_ORDER: Tuple[str, ...] = ("Ketu", "Venus", "Sun", "Moon", "Mars", "Rahu", "Jupiter", "Saturn", "Mercury")
YEARS: Tuple[int, ...] = (7, 20, 6, 10, 7, 18, 16, 19, 17)
DASHA_TOTAL_YEARS = 120
DASHA_YEAR_DAYS = 365.25

BHAVA_NAMES: Tuple[str, ...] = (
    "Tanu Bhava", "Dhana Bhava", "Sahaja Bhava", "Sukha Bhava",
    "Putra Bhava", "Ari Bhava", "Kalatra Bhava", "Ayu Bhava",
    "Dharma Bhava", "Karma Bhava", "Labha Bhava", "Vyaya Bhava",
)

BHAVA_SIGNIFICANCES: Tuple[Tuple[str, ...], ...] = (
    ("Self", "Personality", "Physical Body", "Appearance"),
    ("Wealth", "Family", "Speech", "Food"),
    ("Siblings", "Courage", "Short Journeys", "Communication"),
    ("Mother", "Home", "Happiness", "Property"),
    ("Children", "Education", "Intelligence", "Creativity"),
    ("Enemies", "Disease", "Service", "Obstacles"),
    ("Spouse", "Partnership", "Business", "Marriage"),
    ("Longevity", "Transformation", "Occult", "Inheritance"),
    ("Religion", "Philosophy", "Higher Learning", "Long Journeys"),
    ("Career", "Reputation", "Authority", "Father"),
    ("Gains", "Friends", "Hopes", "Elder Siblings"),
    ("Losses", "Expenses", "Foreign Lands", "Spirituality"),
)

# Primary natural significator (karaka) of each house
BHAVA_KARAKAS: Tuple[str, ...] = (
    "Sun", "Jupiter", "Mars", "Moon", "Jupiter", "Mars",
    "Venus", "Saturn", "Jupiter", "Sun", "Jupiter", "Saturn",
)

_YEARS_BY_LORD: Dict[str, int] = dict(zip(DASHA_ORDER, YEARS))


def rashi_by_index(idx: int) -> Rashi:
    return RASHIS[idx % 12]


def nakshatra_by_index(idx: int) -> NakshatraBase:
    return NAKSHATRAS[idx % 27]


def dasha_lord(idx: int) -> str:
    return DASHA_ORDER[idx % 9]


def dasha_years(lord: str) -> int:
    return _YEARS_BY_LORD[lord]
