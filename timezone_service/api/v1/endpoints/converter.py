from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from starlette.responses import JSONResponse

from shared.constants import COMMON_TIMEZONES
from shared.core.api_response import api_response
from shared.dependencies.world_clock import get_world_clock
from shared.utils.exception_handlers import exception_handler
from shared.utils.timezone_utils import list_available_timezones
from timezone_service.schemas.converter import (
    ConvertRequest,
    ZoneList,
    ZoneOption,
)
from timezone_service.services.converter_service import (
    convert_civil_time,
    convert_unix_timestamp,
)
from world_clock_service.schemas.snapshot import RelativeDayOut
from world_clock_service.services.context import WorldClockContext

router = APIRouter()


@router.get("/zones")
@exception_handler
async def get_converter_zones() -> JSONResponse:
    data = ZoneList(
        common=[ZoneOption(**zone) for zone in COMMON_TIMEZONES],
        total=len(list_available_timezones()),
    )
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Timezones fetched successfully",
        data=data,
    )


@router.post("/convert")
@exception_handler
async def convert_civil(
    payload: ConvertRequest,
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    viewer_zone = payload.viewer_zone or context.viewer_zone_id
    result = convert_civil_time(payload, viewer_zone, context.now())
    if result.valid and result.instant is not None:
        # Day of the converted time as the viewer sees it
        result.relative_day = RelativeDayOut.from_label(
            context.relative_day_label(result.instant, viewer_zone, viewer_zone)
        )
    return api_response(
        status_code=status.HTTP_200_OK,
        message=(
            "Time converted successfully" if result.valid else "Invalid input"
        ),
        data=result,
    )


@router.get("/unix")
@exception_handler
async def convert_unix(
    value: str = Query(..., description="UNIX timestamp, seconds or millis"),
    viewer_zone: Optional[str] = Query(None),
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    result = convert_unix_timestamp(
        value, viewer_zone or context.viewer_zone_id, context.now()
    )
    return api_response(
        status_code=status.HTTP_200_OK,
        message=(
            "Timestamp converted successfully"
            if result.valid
            else "Invalid input"
        ),
        data=result,
    )
