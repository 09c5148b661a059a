import asyncio
import functools
import time
from typing import Any, Awaitable, Callable, Tuple, Type

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from shared.core.logging_config import get_logger

logger = get_logger(__name__)

# Hit on every client sync, logged at debug
QUIET_PATHS = ("/api/time", "/health")


class ExecutionTimeMiddleware(BaseHTTPMiddleware):
    """
    Times each request and reports it in a ``Server-Timing`` header, which
    lets a client tell server processing apart from network latency when
    it measures a reference-time round trip.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        log = logger.debug if request.url.path in QUIET_PATHS else logger.info
        log(
            "[API] %s %s -> %d in %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        response.headers["Server-Timing"] = f"app;dur={elapsed_ms:.2f}"
        return response


def retry_on_exception(
    retries: int = 3,
    delay: int = 2,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
) -> Callable[..., Any]:
    """
    Decorator to retry an asynchronous function call if it raises an exception.

    Args:
        retries (int): Number of attempts, at least one.
        delay (int): Delay in seconds between retries.
        exceptions (tuple): Exception types that trigger a retry.

    Returns:
        Callable: Wrapped function that will retry on exception.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            attempts = max(1, retries)
            for attempt in range(1, attempts + 1):
                try:
                    logger.info(
                        "Attempt %d of %d for %s",
                        attempt,
                        attempts,
                        func.__name__,
                    )
                    return await func(*args, **kwargs)
                except exceptions as e:
                    logger.warning(
                        "%s attempt %d failed: %s", func.__name__, attempt, e
                    )
                    if attempt < attempts:
                        logger.info(
                            "Retrying %s in %d seconds...", func.__name__, delay
                        )
                        await asyncio.sleep(delay)
                    else:
                        logger.error(
                            "All %d attempts failed for %s",
                            attempts,
                            func.__name__,
                        )
                        raise

        return wrapper

    return decorator
