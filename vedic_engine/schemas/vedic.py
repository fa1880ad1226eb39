from datetime import date as Date, datetime
from typing import Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict

Element = Literal["Fire", "Earth", "Air", "Water"]
Quality = Literal["Cardinal", "Fixed", "Mutable"]
SignNature = Literal["Movable", "Fixed", "Dual"]
Gana = Literal["Deva", "Manushya", "Rakshasa"]
Tatva = Literal["Prithvi", "Jal", "Agni", "Vayu", "Akash"]
Varna = Literal["Brahmin", "Kshatriya", "Vaishya", "Shudra"]
Nadi = Literal["Adi", "Madhya", "Antya"]
AspectType = Literal["Full", "Half", "Quarter", "Special"]
AspectNature = Literal["Benefic", "Malefic", "Neutral"]
DashaLevelName = Literal["Mahadasha", "Antardasha", "Pratyantardasha"]
DurationUnit = Literal["years", "months", "days"]
Intensity = Literal["Major", "Moderate", "Minor"]
ChartType = Literal["Rashi", "Navamsa"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Rashi(_Frozen):
    name: str
    number: int  # 1-12
    element: Element
    quality: Quality
    ruler: str
    exaltation: Optional[str] = None
    debilitation: Optional[str] = None
    symbol: str
    body_part: str
    nature: SignNature


class NakshatraBase(_Frozen):
    name: str
    number: int  # 1-27
    ruler: str
    deity: str
    symbol: str
    nature: str
    gana: Gana
    yoni: str
    tatva: Tatva
    varna: Varna
    gotra: str
    nadi: Nadi
    characteristics: Tuple[str, ...]


class NakshatraInfo(NakshatraBase):
    pada: int  # 1-4
    degree: float  # position inside the mansion, 0-13.33


class TropicalPosition(_Frozen):
    planet: str
    longitude: float
    latitude: float
    speed: float
    is_retrograde: bool


class VedicPlanetaryPosition(_Frozen):
    planet: str
    longitude: float  # sidereal
    latitude: float
    rashi: Rashi
    nakshatra: NakshatraInfo
    bhava: int
    is_retrograde: bool
    speed: float


class VedicAspect(_Frozen):
    aspecting_planet: str
    aspected_planet: str
    aspect_type: AspectType
    strength: int
    orb: float
    # Not modelled: always False / Neutral.
    is_applying: bool = False
    nature: AspectNature = "Neutral"


class DashaLevel(_Frozen):
    planet: str
    start_date: datetime
    end_date: datetime
    total_duration: float
    remaining_duration: float
    unit: DurationUnit


class DashaPeriod(_Frozen):
    level: DashaLevelName
    planet: str
    start_date: datetime
    end_date: datetime
    duration: float  # years for Mahadasha entries
    effects: Tuple[str, ...] = ()


class DashaInfo(_Frozen):
    system: Literal["Vimshottari"] = "Vimshottari"
    current_mahadasha: DashaLevel
    current_antardasha: DashaLevel
    current_pratyantardasha: DashaLevel
    upcoming_periods: Tuple[DashaPeriod, ...] = ()


class TransitEffects(_Frozen):
    general: Tuple[str, ...] = ()
    for_rashis: Dict[str, Tuple[str, ...]] = {}


class VedicTransit(_Frozen):
    planet: str
    from_rashi: str
    to_rashi: str
    from_nakshatra: str
    to_nakshatra: str
    transit_date: datetime
    significance: Tuple[str, ...]
    effects: TransitEffects
    duration: str
    intensity: Intensity


class Ayanamsa(_Frozen):
    name: Literal["Lahiri"] = "Lahiri"
    value: float
    epoch: Date
    formula: str


class LordPosition(_Frozen):
    bhava: int
    rashi: str


class BhavaInfo(_Frozen):
    number: int
    name: str
    significance: Tuple[str, ...]
    body_parts: Tuple[str, ...]
    karaka: str
    planets: Tuple[str, ...]
    lord: str
    lord_position: Optional[LordPosition] = None


class Tithi(_Frozen):
    name: str
    number: int
    paksha: Literal["Shukla", "Krishna"]
    end_time: datetime
    deity: str
    nature: Literal["Nanda", "Bhadra", "Jaya", "Rikta", "Poorna"]


class Vara(_Frozen):
    name: str
    number: int
    lord: str
    color: str


class PanchangaYoga(_Frozen):
    name: str
    number: int
    deity: str
    nature: str
    end_time: datetime


class Karana(_Frozen):
    name: str
    number: int
    type: Literal["Chara", "Sthira"]
    deity: str
    end_time: datetime


class Panchanga(_Frozen):
    tithi: Tithi
    vara: Vara
    nakshatra: NakshatraInfo
    yoga: PanchangaYoga
    karana: Karana


class Ascendant(_Frozen):
    rashi: Rashi
    nakshatra: NakshatraInfo
    degree: float


class VedicChart(_Frozen):
    chart_type: ChartType
    houses: Tuple[BhavaInfo, ...] = ()
    planets: Tuple[VedicPlanetaryPosition, ...] = ()
    aspects: Tuple[VedicAspect, ...] = ()
    yogas: Tuple[dict, ...] = ()
    ascendant: Ascendant
    moon_sign: Rashi
    sun_sign: Rashi


class Charts(_Frozen):
    rashi: VedicChart
    navamsa: VedicChart


class Location(_Frozen):
    latitude: float
    longitude: float
    timezone: str


class VedicCalculationResult(_Frozen):
    timestamp: datetime
    location: Location
    ayanamsa: Ayanamsa
    sidereal_time: float = 0.0
    planets: Tuple[VedicPlanetaryPosition, ...]
    houses: Tuple[BhavaInfo, ...]
    aspects: Tuple[VedicAspect, ...]
    yogas: Tuple[dict, ...] = ()  # yoga detection is not performed
    dashas: DashaInfo
    transits: Tuple[VedicTransit, ...] = ()
    panchanga: Panchanga
    muhurtas: Tuple[dict, ...] = ()  # muhurta windows are not computed
    charts: Charts


__all__ = [
    "Rashi",
    "NakshatraBase",
    "NakshatraInfo",
    "TropicalPosition",
    "VedicPlanetaryPosition",
    "VedicAspect",
    "DashaLevel",
    "DashaPeriod",
    "DashaInfo",
    "TransitEffects",
    "VedicTransit",
    "Ayanamsa",
    "LordPosition",
    "BhavaInfo",
    "Tithi",
    "Vara",
    "PanchangaYoga",
    "Karana",
    "Panchanga",
    "Ascendant",
    "VedicChart",
    "Charts",
    "Location",
    "VedicCalculationResult",
]
