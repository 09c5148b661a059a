from contextvars import ContextVar
from typing import Optional

from fastapi import Request

# Request being served; set by RequestLoggingMiddleware
request_context: ContextVar[Request] = ContextVar("request_context")


def current_request() -> Optional[Request]:
    """The request in flight, or None outside a request (ticks, startup)."""
    return request_context.get(None)
