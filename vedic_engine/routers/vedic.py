import logging
import os
from zoneinfo import ZoneInfoNotFoundError

from fastapi import APIRouter, HTTPException

from ..schemas import PositionsComputeRequest, VedicComputeRequest, VedicComputeResponse
from ..services import ephem
from ..services.calculator import calculate_vedic_astrology, calculate_vedic_positions
from ..services.errors import InvalidInputError

router = APIRouter(prefix="/v1/vedic", tags=["vedic"])

logger = logging.getLogger(__name__)


def _meta(**extra):
    return {"system": "vedic", "ayanamsha": "lahiri", "house_system": "sign_from_aries", **extra}


@router.post("/compute", response_model=VedicComputeResponse)
def compute_vedic(req: VedicComputeRequest):
    ephem.init_paths(os.getenv("EPHEMERIS_DIR"))
    try:
        moment = ephem.local_datetime(req.date, req.time, req.place.tz)
        before = None
        if req.options.compare_date:
            before = ephem.local_datetime(req.options.compare_date, req.options.compare_time, req.place.tz)
    except (ValueError, ZoneInfoNotFoundError) as exc:
        logger.info("vedic_bad_moment", extra={"tz": req.place.tz, "date": req.date})
        raise HTTPException(status_code=422, detail=f"invalid date, time or timezone: {exc}") from exc

    positions = ephem.tropical_positions(ephem.to_jd_utc(moment))
    previous = None
    if before is not None:
        previous = calculate_vedic_positions(ephem.tropical_positions(ephem.to_jd_utc(before)), before)

    result = calculate_vedic_astrology(
        positions, moment, req.place.lat, req.place.lon, req.place.tz,
        previous_positions=previous, upcoming_dashas=req.options.upcoming_dashas,
    )
    return VedicComputeResponse(
        meta=_meta(
            engine_version=ephem.ENGINE_VERSION,
            backend=ephem.backend_name(),
            compare_date=req.options.compare_date,
        ),
        result=result,
    )


@router.post("/compute/positions", response_model=VedicComputeResponse)
def compute_vedic_from_positions(req: PositionsComputeRequest):
    try:
        previous = (
            calculate_vedic_positions(req.previous_positions, req.timestamp)
            if req.previous_positions
            else None
        )
        result = calculate_vedic_astrology(
            req.positions, req.timestamp, req.place.lat, req.place.lon, req.place.tz,
            previous_positions=previous, upcoming_dashas=req.upcoming_dashas,
        )
    except InvalidInputError as exc:
        logger.info("vedic_invalid_input", extra={"field": exc.field, "planet": exc.planet})
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return VedicComputeResponse(meta=_meta(), result=result)
