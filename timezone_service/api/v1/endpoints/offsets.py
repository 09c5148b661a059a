from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from starlette.responses import JSONResponse

from shared.constants import (
    MAX_PLAUSIBLE_EPOCH_MILLIS,
    MIN_PLAUSIBLE_EPOCH_MILLIS,
)
from shared.core.api_response import api_response
from shared.dependencies.world_clock import get_world_clock
from shared.utils.exception_handlers import exception_handler
from timezone_service.schemas.converter import ZoneOffset
from timezone_service.services.offset_resolver import offset_hours
from world_clock_service.services.context import WorldClockContext
from world_clock_service.services.display_state import format_utc_offset

router = APIRouter()


@router.get("/offset")
@exception_handler
async def get_zone_offset(
    zone_id: str = Query(..., description="IANA zone, e.g. Asia/Kolkata"),
    at: Optional[int] = Query(
        None,
        ge=MIN_PLAUSIBLE_EPOCH_MILLIS,
        le=MAX_PLAUSIBLE_EPOCH_MILLIS,
        description="Epoch millis; defaults to now",
    ),
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    instant = context.now() if at is None else at
    hours = offset_hours(zone_id, instant)
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Offset resolved successfully",
        data=ZoneOffset(
            zone_id=zone_id,
            at=instant,
            offset_hours=hours,
            offset_label=format_utc_offset(hours),
        ),
    )
