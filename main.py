from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from lifespan import lifespan
from routes import api_router
from shared.core.config import Settings, settings
from shared.core.exceptions import BaseAPIException
from shared.core.request_context import request_context
from shared.utils.exception_handlers import (
    handle_404_exception,
    handle_422_exception,
    handle_api_exception,
)
from shared.utils.execution_time import ExecutionTimeMiddleware
from world_clock_service.services.context import (
    WorldClockContext,
    build_context,
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        method: str = request.method
        path: str = request.url.path
        request_context.set(request)  # store current request for api_response
        response: Response = await call_next(request)

        response.headers["X-Method"] = method
        response.headers["X-Path"] = path
        return response


def create_app(
    app_settings: Optional[Settings] = None,
    context: Optional[WorldClockContext] = None,
) -> FastAPI:
    app_settings = app_settings or settings
    context = context or build_context(app_settings)

    fastapi_app: FastAPI = FastAPI(
        title=app_settings.APP_NAME,
        openapi_url="/world-clock.json",
        version=app_settings.VERSION,
        description=app_settings.DESCRIPTION,
        lifespan=lifespan,
        debug=app_settings.ENVIRONMENT == "development",
        redirect_slashes=True,
        swagger_ui_parameters={
            "filter": True,
            "tryItOutEnabled": True,
            "docExpansion": "none",
            "displayRequestDuration": True,
        },
    )
    fastapi_app.state.settings = app_settings
    fastapi_app.state.world_clock = context

    @fastapi_app.get(path="/", tags=["System"])
    async def root() -> dict[str, str]:
        return {
            "message": "Welcome to the World Clock Sync API",
            "version": app_settings.VERSION,
            "docs_url": "/docs",
            "redoc_url": "/redoc",
        }

    @fastapi_app.get(path="/health", tags=["System"])
    async def health_check() -> dict[str, object]:
        return {
            "status": "healthy",
            "message": "API is running fine!",
            "clock_synchronized": context.synchronizer.is_synchronized(),
        }

    fastapi_app.include_router(router=api_router)

    fastapi_app.add_exception_handler(BaseAPIException, handle_api_exception)
    fastapi_app.add_exception_handler(
        RequestValidationError, handle_422_exception
    )
    fastapi_app.add_exception_handler(
        StarletteHTTPException, handle_404_exception
    )

    fastapi_app.add_middleware(
        middleware_class=CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.add_middleware(middleware_class=GZipMiddleware, minimum_size=1000)
    fastapi_app.add_middleware(ExecutionTimeMiddleware)
    fastapi_app.add_middleware(middleware_class=RequestLoggingMiddleware)

    return fastapi_app


app: FastAPI = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app="main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.ENVIRONMENT == "development",
        use_colors=True,
    )
