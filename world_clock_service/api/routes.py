from fastapi import APIRouter

from world_clock_service.api import websocket
from world_clock_service.api.v1.endpoints import cities, snapshots

world_clock_router = APIRouter()

world_clock_router.include_router(
    cities.router, prefix="/api/v1/cities", tags=["Cities"]
)
world_clock_router.include_router(
    snapshots.router, prefix="/api/v1/snapshots", tags=["Snapshots"]
)
world_clock_router.include_router(websocket.router, tags=["Snapshots"])
