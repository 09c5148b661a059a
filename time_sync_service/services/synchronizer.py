import asyncio
from dataclasses import dataclass
from typing import Optional

from shared.core.exceptions import SyncUnavailable
from shared.core.logging_config import get_logger
from time_sync_service.services.clock_state import (
    ClockState,
    LocalClock,
    system_clock_millis,
)
from time_sync_service.services.reference_provider import (
    ReferenceClockProvider,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class SyncOutcome:
    ok: bool
    offset_millis: int = 0
    round_trip_millis: Optional[int] = None
    error: Optional[SyncUnavailable] = None


class ClockSynchronizer:
    """
    Estimates the reference-minus-local clock offset once and serves a
    corrected ``now()`` from it.

    The reference instant is assumed to be taken halfway through the round
    trip, so the server clock at the moment the response arrives is
    ``server + rtt / 2``. Failures leave the offset at zero; ``now()`` then
    falls back to the host clock. Retrying is left to the caller.
    """

    def __init__(
        self,
        state: ClockState,
        provider: Optional[ReferenceClockProvider] = None,
        local_clock: LocalClock = system_clock_millis,
    ) -> None:
        self.state = state
        self.provider = provider
        self._local_clock = local_clock
        self._lock = asyncio.Lock()
        self.last_outcome: Optional[SyncOutcome] = None

    def now(self) -> int:
        return self._local_clock() + self.state.offset_millis

    def is_synchronized(self) -> bool:
        return self.state.synchronized

    async def synchronize(self) -> SyncOutcome:
        if self.state.synchronized:
            return SyncOutcome(ok=True, offset_millis=self.state.offset_millis)

        async with self._lock:
            # Another caller may have finished while we waited on the lock.
            if self.state.synchronized:
                return SyncOutcome(
                    ok=True, offset_millis=self.state.offset_millis
                )
            outcome = await self._exchange()
            self.last_outcome = outcome
            return outcome

    async def _exchange(self) -> SyncOutcome:
        if self.provider is None:
            error = SyncUnavailable("No reference clock configured")
            logger.warning("[TimeSync] %s, using local clock", error.message)
            return SyncOutcome(ok=False, error=error)

        sent_at = self._local_clock()
        try:
            reference = await self.provider.fetch()
        except SyncUnavailable as e:
            logger.warning(
                "[TimeSync] Synchronization failed, using local clock: %s",
                e.message,
            )
            return SyncOutcome(ok=False, error=e)
        received_at = self._local_clock()

        round_trip = received_at - sent_at
        estimated_server_time = reference.timestamp + round_trip // 2
        offset = estimated_server_time - received_at

        self.state.apply(offset)
        logger.info(
            "[TimeSync] Synchronized with reference clock, offset: %dms, "
            "latency: %dms",
            offset,
            round_trip,
        )
        return SyncOutcome(
            ok=True, offset_millis=offset, round_trip_millis=round_trip
        )
