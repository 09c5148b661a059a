from fastapi import APIRouter

from time_sync_service.api.routes import time_sync_router
from timezone_service.api.routes import timezone_router
from world_clock_service.api.routes import world_clock_router

api_router = APIRouter()

api_router.include_router(time_sync_router)
api_router.include_router(timezone_router)
api_router.include_router(world_clock_router)
