from .vedic import (
    NakshatraInfo,
    Rashi,
    TropicalPosition,
    VedicAspect,
    VedicCalculationResult,
    VedicPlanetaryPosition,
    VedicTransit,
)
from .requests import Place, PositionsComputeRequest, VedicComputeRequest, VedicComputeResponse
