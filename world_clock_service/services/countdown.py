from dataclasses import dataclass
from typing import List, Tuple

from shared.constants import (
    ELAPSED_LABEL,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from timezone_service.schemas.civil_time import CivilTime
from timezone_service.services.civil_converter import to_instant


@dataclass(frozen=True)
class Countdown:
    remaining_millis: int
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def elapsed(self) -> bool:
        return self.remaining_millis <= 0

    @property
    def parts(self) -> List[Tuple[str, int]]:
        """Units shown, coarsest non-zero unit first, three at most."""
        if self.elapsed:
            return []
        if self.days > 0:
            return [("d", self.days), ("h", self.hours), ("m", self.minutes)]
        if self.hours > 0:
            return [("h", self.hours), ("m", self.minutes), ("s", self.seconds)]
        if self.minutes > 0:
            return [("m", self.minutes), ("s", self.seconds)]
        return [("s", self.seconds)]

    @property
    def text(self) -> str:
        if self.elapsed:
            return ELAPSED_LABEL
        return " ".join(f"{value}{unit}" for unit, value in self.parts)


def countdown_to(target: int, now: int) -> Countdown:
    remaining = max(0, target - now)
    if remaining == 0:
        return Countdown(remaining_millis=0)
    return Countdown(
        remaining_millis=remaining,
        days=remaining // MILLIS_PER_DAY,
        hours=remaining % MILLIS_PER_DAY // MILLIS_PER_HOUR,
        minutes=remaining % MILLIS_PER_HOUR // MILLIS_PER_MINUTE,
        seconds=remaining % MILLIS_PER_MINUTE // MILLIS_PER_SECOND,
    )


def countdown(target: CivilTime, now: int) -> Countdown:
    """Time left until a civil time in its own zone, from corrected ``now``."""
    return countdown_to(to_instant(target), now)
