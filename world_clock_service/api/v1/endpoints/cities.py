from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from starlette.responses import JSONResponse

from shared.core.api_response import api_response
from shared.core.exceptions import NotFoundError
from shared.dependencies.world_clock import get_world_clock
from shared.utils.exception_handlers import exception_handler
from world_clock_service.schemas.city import City
from world_clock_service.services.context import WorldClockContext
from world_clock_service.services.display_state import build_snapshot

router = APIRouter()


def _get_city_or_404(context: WorldClockContext, city_id: str) -> City:
    city = context.board.get_city(city_id)
    if city is None:
        raise NotFoundError(
            f"City {city_id!r} not found", details={"city_id": city_id}
        )
    return city


@router.get("")
@exception_handler
async def list_cities(
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Cities fetched successfully",
        data=context.board.cities,
    )


@router.get("/{city_id}")
@exception_handler
async def get_city(
    city_id: str,
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    return api_response(
        status_code=status.HTTP_200_OK,
        message="City fetched successfully",
        data=_get_city_or_404(context, city_id),
    )


@router.get("/{city_id}/snapshot")
@exception_handler
async def get_city_snapshot(
    city_id: str,
    viewer_zone: Optional[str] = Query(
        None, description="Viewer IANA zone; the configured viewer zone if omitted"
    ),
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    city = _get_city_or_404(context, city_id)
    snapshot = build_snapshot(
        city, viewer_zone or context.viewer_zone_id, context.now()
    )
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Snapshot built successfully",
        data=snapshot,
    )
