from fastapi import APIRouter, Depends

from time_sync_service.schemas.reference_time import ReferenceTime
from time_sync_service.services.reference_clock import (
    current_reference_time,
    verify_request_origin,
)

router = APIRouter()


@router.get(
    "/time",
    response_model=ReferenceTime,
    dependencies=[Depends(verify_request_origin)],
    summary="Authoritative server time",
)
async def get_reference_time() -> ReferenceTime:
    # Plain body (no envelope): clients read ``timestamp`` directly.
    return current_reference_time()
