from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from shared.core.logging_config import get_logger
from shared.core.request_context import current_request

logger = get_logger("api_response")


def api_response(
    status_code: int,
    message: str,
    data: Optional[Any] = None,
    error_code: Optional[str] = None,
    log_error: bool = False,
    suppress_raise: bool = False,
) -> JSONResponse:
    """
    Unified API response envelope.

    Client errors (4xx) are raised as ``HTTPException`` carrying the
    envelope unless ``suppress_raise`` is set, which exception handlers use
    to avoid raising from inside a handler.
    """
    request = current_request()
    method = request.method if request is not None else None
    path = request.url.path if request is not None else None

    response_body: dict[str, Any] = {
        "statusCode": status_code,
        "message": message,
        # Envelope metadata only, never a displayed clock value
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "method": method,
        "path": path,
    }
    if error_code is not None:
        response_body["errorCode"] = error_code
    if data is not None:
        response_body["data"] = jsonable_encoder(data)

    if log_error or status_code >= 500:
        logger.error(
            "%s %s -> %d %s: %s", method, path, status_code, error_code, message
        )
    elif status_code >= 400:
        logger.warning(
            "%s %s -> %d %s: %s", method, path, status_code, error_code, message
        )
    else:
        logger.debug("%s %s -> %d: %s", method, path, status_code, message)

    if 400 <= status_code < 500 and not suppress_raise:
        raise HTTPException(status_code=status_code, detail=response_body)

    return JSONResponse(status_code=status_code, content=response_body)
