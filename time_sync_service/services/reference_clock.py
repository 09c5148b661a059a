from typing import Optional
from urllib.parse import urlsplit

from fastapi import Request, status
from fastapi.exceptions import HTTPException

from shared.core.logging_config import get_logger
from time_sync_service.schemas.reference_time import ReferenceTime
from time_sync_service.services.clock_state import system_clock_millis
from timezone_service.services.civil_converter import utc_iso

logger = get_logger(__name__)

LOOPBACK_PREFIXES = ("http://localhost", "http://127.0.0.1")


def current_reference_time() -> ReferenceTime:
    """This host is the authority for the reference endpoint."""
    instant = system_clock_millis()
    return ReferenceTime(time=utc_iso(instant), timestamp=instant)


def request_origin(origin: Optional[str], referer: Optional[str]) -> str:
    """
    Scheme://host[:port] of the referer, falling back to the origin header.

    Raises ValueError when the header has no usable scheme and host.
    """
    raw = referer or origin or ""
    parts = urlsplit(raw)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Unparseable origin header: {raw!r}")
    return f"{parts.scheme}://{parts.netloc}"


def is_origin_allowed(request_origin_value: str, allowed: list[str]) -> bool:
    return request_origin_value in allowed or request_origin_value.startswith(
        LOOPBACK_PREFIXES
    )


async def verify_request_origin(request: Request) -> None:
    """
    Dependency guarding the reference endpoint against cross-origin reads.
    Requests carrying neither ``Origin`` nor ``Referer`` pass.
    """
    origin = request.headers.get("origin")
    referer = request.headers.get("referer")
    if not origin and not referer:
        return

    try:
        value = request_origin(origin, referer)
    except ValueError as e:
        logger.warning("Rejected reference time request: %s", e)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "Forbidden"},
        ) from e

    allowed = request.app.state.settings.reference_allowed_origins
    if not is_origin_allowed(value, allowed):
        logger.warning(
            "Rejected reference time request from origin %s", value
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "Forbidden"},
        )
