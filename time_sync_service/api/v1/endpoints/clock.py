from fastapi import APIRouter, Depends, status
from starlette.responses import JSONResponse

from shared.core.api_response import api_response
from shared.dependencies.world_clock import get_world_clock
from shared.utils.exception_handlers import exception_handler
from time_sync_service.schemas.reference_time import ClockStatus, SyncResult
from timezone_service.services.civil_converter import utc_iso
from world_clock_service.services.context import WorldClockContext

router = APIRouter()


@router.get("/status")
@exception_handler
async def get_clock_status(
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    now = context.now()
    reading = context.clock_state.reading
    data = ClockStatus(
        offset_millis=reading.offset_millis,
        synchronized=reading.synchronized,
        now=now,
        now_iso=utc_iso(now),
    )
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Clock status fetched successfully",
        data=data,
    )


@router.post("/sync")
@exception_handler
async def synchronize_clock(
    context: WorldClockContext = Depends(get_world_clock),
) -> JSONResponse:
    """Run synchronization now; a no-op once the clock is synchronized."""
    outcome = await context.synchronizer.synchronize()
    data = SyncResult(
        ok=outcome.ok,
        synchronized=context.synchronizer.is_synchronized(),
        offset_millis=context.clock_state.offset_millis,
        round_trip_millis=outcome.round_trip_millis,
        error=outcome.error.message if outcome.error else None,
    )
    # Degraded, not failed: the local clock keeps serving.
    message = (
        "Clock synchronized"
        if outcome.ok
        else "Reference clock unavailable, using local clock"
    )
    return api_response(
        status_code=status.HTTP_200_OK,
        message=message,
        data=data,
    )
