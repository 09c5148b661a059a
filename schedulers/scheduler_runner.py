import asyncio
from typing import Awaitable, Callable, List, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from shared.core.exceptions import CatalogIntegrityError
from shared.core.logging_config import get_logger
from world_clock_service.schemas.snapshot import DisplaySnapshot
from world_clock_service.services.snapshot_board import SnapshotBoard

logger = get_logger(__name__)

WORLD_CLOCK_TICK_JOB_ID = "world_clock_tick"

TickListener = Callable[[List[DisplaySnapshot]], Awaitable[None]]


class SnapshotTicker:
    """
    One interval job shared by every city on the board.

    Listeners are awaited after each refresh; ``stop()`` cancels the job
    and returns once the scheduler has shut down, so the ticker can be
    started again.
    """

    def __init__(
        self,
        board: SnapshotBoard,
        interval_seconds: float = 1.0,
        scheduler: Optional[AsyncIOScheduler] = None,
    ) -> None:
        self.board = board
        self.interval_seconds = interval_seconds
        self._scheduler = scheduler or AsyncIOScheduler()
        self._listeners: List[TickListener] = []

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def add_listener(self, listener: TickListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TickListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def run_tick(self) -> List[DisplaySnapshot]:
        try:
            snapshots = self.board.tick()
        except CatalogIntegrityError as e:
            logger.error("World clock tick aborted: %s", e.message)
            raise

        for listener in list(self._listeners):
            try:
                await listener(snapshots)
            except Exception as e:
                logger.error("Tick listener %r failed: %s", listener, e)
        return snapshots

    def start(self) -> None:
        if self._scheduler.get_job(WORLD_CLOCK_TICK_JOB_ID) is None:
            self._scheduler.add_job(
                self.run_tick,
                "interval",
                seconds=self.interval_seconds,
                id=WORLD_CLOCK_TICK_JOB_ID,
                replace_existing=True,
                max_instances=1,
                coalesce=True,
            )
        if not self._scheduler.running:
            self._scheduler.start()
            logger.info(
                "World clock ticker started (every %ss, %d cities)",
                self.interval_seconds,
                len(self.board.cities),
            )

    async def stop(self) -> None:
        if self._scheduler.get_job(WORLD_CLOCK_TICK_JOB_ID) is not None:
            self._scheduler.remove_job(WORLD_CLOCK_TICK_JOB_ID)
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
            # The scheduler queues its shutdown on the event loop
            await asyncio.sleep(0)
            logger.info("World clock ticker stopped")
