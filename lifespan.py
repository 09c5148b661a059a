from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI

from shared.core.exceptions import SyncUnavailable
from shared.core.logging_config import get_logger
from shared.utils.execution_time import retry_on_exception
from world_clock_service.services.context import WorldClockContext

logger = get_logger(__name__)


async def synchronize_reference_clock(context: WorldClockContext) -> bool:
    """
    Startup synchronization with the configured retry policy.

    Never fatal: when every attempt fails the service keeps running on the
    local clock.
    """
    if context.synchronizer.provider is None:
        logger.info(
            "No REFERENCE_TIME_URL configured, skipping clock synchronization"
        )
        return False

    app_settings = context.settings

    @retry_on_exception(
        retries=app_settings.REFERENCE_SYNC_ATTEMPTS,
        delay=app_settings.REFERENCE_SYNC_RETRY_DELAY_SECONDS,
        exceptions=(SyncUnavailable,),
    )
    async def synchronize_once() -> None:
        outcome = await context.synchronizer.synchronize()
        if not outcome.ok and outcome.error is not None:
            raise outcome.error

    try:
        await synchronize_once()
    except SyncUnavailable as e:
        logger.warning(
            "Clock synchronization unavailable, serving local time: %s",
            e.message,
        )
        return False
    return True


# Lifespan event manager
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[Any, None]:
    """Synchronize the clock, then run the shared tick until shutdown."""
    context: WorldClockContext = app.state.world_clock
    logger.info(msg="Starting up FastAPI application...")

    await synchronize_reference_clock(context)
    context.board.tick()
    context.ticker.start()

    yield

    logger.info(msg="Shutting down FastAPI application...")
    await context.ticker.stop()
