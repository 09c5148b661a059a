import time
from dataclasses import dataclass
from typing import Callable

LocalClock = Callable[[], int]


def system_clock_millis() -> int:
    """Raw host clock in epoch milliseconds. Only ClockSynchronizer reads it."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class ClockReading:
    offset_millis: int = 0
    synchronized: bool = False


class ClockState:
    """
    Offset between the host clock and the reference clock.

    One instance per application context. The reading is swapped as a whole
    value, so readers always see a matching offset/synchronized pair.
    """

    def __init__(self) -> None:
        self._reading = ClockReading()

    @property
    def reading(self) -> ClockReading:
        return self._reading

    @property
    def offset_millis(self) -> int:
        return self._reading.offset_millis

    @property
    def synchronized(self) -> bool:
        return self._reading.synchronized

    def apply(self, offset_millis: int) -> None:
        self._reading = ClockReading(
            offset_millis=int(offset_millis), synchronized=True
        )

    def __repr__(self) -> str:
        return (
            f"ClockState(offset_millis={self.offset_millis}, "
            f"synchronized={self.synchronized})"
        )
