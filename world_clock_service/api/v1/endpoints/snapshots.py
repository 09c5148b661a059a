from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from starlette.responses import JSONResponse

from shared.core.api_response import api_response
from shared.dependencies.world_clock import get_world_clock
from shared.utils.exception_handlers import exception_handler
from world_clock_service.services.context import WorldClockContext
from world_clock_service.services.display_state import (
    build_coordinate_snapshot,
)

router = APIRouter()


@router.get("")
@exception_handler
async def get_board(
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    """Latest tick; ticks once on demand if the ticker has not run yet."""
    if context.board.last_tick_at is None:
        context.board.tick()
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Snapshots fetched successfully",
        data=context.board.to_out(),
    )


@router.get("/coordinates")
@exception_handler
async def get_coordinate_snapshot(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    viewer_zone: Optional[str] = Query(None),
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    snapshot = build_coordinate_snapshot(
        latitude,
        longitude,
        viewer_zone or context.viewer_zone_id,
        context.now(),
    )
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Coordinate snapshot built successfully",
        data=snapshot,
    )
