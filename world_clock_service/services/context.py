from dataclasses import dataclass
from typing import List, Optional

from schedulers.scheduler_runner import SnapshotTicker
from shared.core.config import Settings
from time_sync_service.services.clock_state import (
    ClockState,
    LocalClock,
    system_clock_millis,
)
from time_sync_service.services.reference_provider import (
    HttpReferenceClockProvider,
    ReferenceClockProvider,
)
from time_sync_service.services.synchronizer import ClockSynchronizer
from timezone_service.services.relative_day import (
    RelativeDayLabel,
    relative_day_label,
)
from world_clock_service.api.websocket import SnapshotBroadcaster
from world_clock_service.data.catalog import load_catalog
from world_clock_service.schemas.city import City
from world_clock_service.services.snapshot_board import SnapshotBoard


@dataclass
class WorldClockContext:
    """
    Per-application bundle of the clock state and everything reading it.

    Built once by the app factory and kept on ``app.state``; tests build
    their own with fake clocks and providers.
    """

    settings: Settings
    clock_state: ClockState
    synchronizer: ClockSynchronizer
    cities: List[City]
    board: SnapshotBoard
    ticker: SnapshotTicker
    broadcaster: SnapshotBroadcaster

    @property
    def viewer_zone_id(self) -> str:
        return self.settings.VIEWER_TIMEZONE

    def now(self) -> int:
        return self.synchronizer.now()

    def relative_day_label(
        self, target: int, target_zone_id: str, viewer_zone_id: str
    ) -> RelativeDayLabel:
        """Relative day against the viewer's today at corrected now."""
        return relative_day_label(
            target, target_zone_id, viewer_zone_id, self.now()
        )


def build_context(
    settings: Settings,
    provider: Optional[ReferenceClockProvider] = None,
    local_clock: LocalClock = system_clock_millis,
    cities: Optional[List[City]] = None,
) -> WorldClockContext:
    if provider is None and settings.REFERENCE_TIME_URL:
        provider = HttpReferenceClockProvider(
            settings.REFERENCE_TIME_URL,
            timeout=settings.REFERENCE_TIME_TIMEOUT_SECONDS,
        )

    clock_state = ClockState()
    synchronizer = ClockSynchronizer(clock_state, provider, local_clock)
    if cities is None:
        cities = load_catalog(settings.CITY_CATALOG_PATH)

    board = SnapshotBoard(cities, settings.VIEWER_TIMEZONE, synchronizer.now)
    ticker = SnapshotTicker(board, settings.TICK_INTERVAL_SECONDS)
    broadcaster = SnapshotBroadcaster()
    ticker.add_listener(broadcaster.broadcast)

    return WorldClockContext(
        settings=settings,
        clock_state=clock_state,
        synchronizer=synchronizer,
        cities=cities,
        board=board,
        ticker=ticker,
        broadcaster=broadcaster,
    )
