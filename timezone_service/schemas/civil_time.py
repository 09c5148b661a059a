from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class CivilTime:
    """Wall-clock reading in a named zone. Not an instant until resolved."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    zone_id: str

    def __post_init__(self) -> None:
        # Raises ValueError for impossible calendar fields (Feb 30, 25:00).
        datetime(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def naive(self) -> datetime:
        return datetime(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    def isoformat(self) -> str:
        return self.naive().isoformat()
