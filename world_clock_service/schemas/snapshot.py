from typing import List, Optional

from pydantic import BaseModel

from timezone_service.services.relative_day import (
    RelativeDay,
    RelativeDayLabel,
)


class RelativeDayOut(BaseModel):
    kind: RelativeDay
    days: int
    label: str

    @classmethod
    def from_label(cls, label: RelativeDayLabel) -> "RelativeDayOut":
        return cls(kind=label.kind, days=label.days, label=label.text)


class DisplaySnapshot(BaseModel):
    """Everything a surface needs to draw one city for one tick."""

    city_id: str
    zone_id: str
    instant: int
    valid: bool = True
    error: Optional[str] = None
    time: str
    date: str
    is_daytime: bool
    utc_offset_hours: Optional[float]
    utc_offset_label: str
    relative_day: RelativeDayOut
    hour_delta_from_viewer: Optional[float]
    time_diff_label: str


class CoordinateSnapshot(BaseModel):
    """Open-ocean estimate from longitude alone."""

    latitude: float
    longitude: float
    instant: int
    time: str
    date: str
    utc_offset_hours: int
    utc_offset_label: str
    relative_day: RelativeDayOut


class BoardOut(BaseModel):
    viewer_zone_id: str
    tick_count: int
    last_tick_at: Optional[int]
    snapshots: List[DisplaySnapshot]


class CountdownOut(BaseModel):
    elapsed: bool
    remaining_millis: int
    days: int
    hours: int
    minutes: int
    seconds: int
    text: str
