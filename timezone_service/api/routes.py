from fastapi import APIRouter

from timezone_service.api.v1.endpoints import converter, offsets

timezone_router = APIRouter(prefix="/api/v1")

timezone_router.include_router(
    offsets.router, prefix="/timezones", tags=["Timezones"]
)
timezone_router.include_router(
    converter.router, prefix="/converter", tags=["Converter"]
)
