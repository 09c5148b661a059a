from fastapi import APIRouter

from time_sync_service.api.v1.endpoints import clock, reference_time

time_sync_router = APIRouter()

# Reference endpoint lives outside /api/v1 so clients can hard-code it
time_sync_router.include_router(
    reference_time.router, prefix="/api", tags=["Reference Time"]
)
time_sync_router.include_router(
    clock.router, prefix="/api/v1/clock", tags=["Clock"]
)
