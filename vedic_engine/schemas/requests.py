from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .vedic import TropicalPosition, VedicCalculationResult


class Place(BaseModel):
    lat: float
    lon: float
    tz: str


class VedicOptions(BaseModel):
    compare_date: Optional[str] = None  # YYYY-MM-DD, earlier snapshot for transits
    compare_time: str = "00:00:00"
    upcoming_dashas: int = Field(0, ge=0, le=27)


class VedicComputeRequest(BaseModel):
    date: str  # YYYY-MM-DD
    time: str  # HH:MM:SS
    place: Place
    options: VedicOptions = VedicOptions()


class PositionsComputeRequest(BaseModel):
    timestamp: datetime
    place: Place
    positions: List[TropicalPosition]
    previous_positions: Optional[List[TropicalPosition]] = None
    upcoming_dashas: int = Field(0, ge=0, le=27)


class VedicComputeResponse(BaseModel):
    meta: Dict[str, Any]
    result: VedicCalculationResult
