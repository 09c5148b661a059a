# utils/exception_handlers.py

from functools import wraps
from typing import Any, Callable

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.core.api_response import api_response
from shared.core.exceptions import BaseAPIException
from shared.core.logging_config import get_logger

logger = get_logger(__name__)


def handle_general_exception(e: Exception) -> JSONResponse:
    """
    Handles unhandled server-side exceptions.
    Logs and returns a standard API response.
    """
    logger.exception("Unhandled error: %s", e)
    return api_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=f"Something went wrong. {e}",
        log_error=True,
    )


async def handle_api_exception(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """
    Renders domain exceptions (invalid zone, unparseable input, sync
    failures, catalog errors) in the standard envelope.
    """
    logger.warning(
        "%s on %s: %s", exc.error_code, request.url.path, exc.message
    )
    return api_response(
        status_code=exc.status_code,
        message=exc.message,
        data=exc.details or None,
        error_code=exc.error_code,
        suppress_raise=True,
    )


async def handle_422_exception(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handles Pydantic validation errors raised at runtime.
    """
    logger.warning("Validation error on %s: %s", request.url, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "statusCode": status.HTTP_422_UNPROCESSABLE_ENTITY,
            "message": "Validation error",
            "details": jsonable_errors(exc),
            "method": request.method,
            "path": request.url.path,
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {
            "loc": list(error.get("loc", ())),
            "msg": str(error.get("msg", "")),
            "type": str(error.get("type", "")),
        }
        for error in exc.errors()
    ]


async def handle_404_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handles unmatched routes at the application level. Other HTTP errors
    keep the shape they were raised with.
    """
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        path = request.url.path
        return JSONResponse(
            status_code=exc.status_code,
            content=(
                exc.detail
                if isinstance(exc.detail, dict)
                else {"message": str(exc.detail), "path": path}
            ),
            headers=getattr(exc, "headers", None),
        )

    if isinstance(exc.detail, dict):
        return JSONResponse(status_code=exc.status_code, content=exc.detail)

    logger.warning(
        "404 Not Found: %s | Detail: %s",
        request.url,
        getattr(exc, "detail", None),
    )
    return api_response(
        status_code=status.HTTP_404_NOT_FOUND,
        message=(
            str(exc.detail)
            if getattr(exc, "detail", None)
            else "Resource not found."
        ),
        suppress_raise=True,
    )


def exception_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for endpoints to standardize exception handling.
    Domain and HTTP exceptions propagate to the app-level handlers;
    anything else becomes a logged 500 envelope.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except (HTTPException, BaseAPIException):
            raise
        except Exception as e:
            return handle_general_exception(e)

    return wrapper
