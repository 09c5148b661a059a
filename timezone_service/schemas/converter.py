from typing import List, Optional

from pydantic import BaseModel, Field

from shared.constants import DEFAULT_CONVERTER_TIME
from world_clock_service.schemas.snapshot import CountdownOut, RelativeDayOut


class ZoneOption(BaseModel):
    label: str
    value: str
    abbr: str


class ConvertRequest(BaseModel):
    source_zone: str = Field(default="America/Los_Angeles")
    date: Optional[str] = Field(
        default=None, description="YYYY-MM-DD; today in the source zone if omitted"
    )
    time: str = Field(default=DEFAULT_CONVERTER_TIME, description="HH:MM[:SS]")
    viewer_zone: Optional[str] = None


class ConvertResult(BaseModel):
    valid: bool
    source_zone: str
    viewer_zone: str
    source_civil: Optional[str] = None
    instant: Optional[int] = None
    utc: Optional[str] = None
    viewer_local: str
    countdown: Optional[CountdownOut] = None
    relative_day: Optional[RelativeDayOut] = None


class UnixTimestampResult(BaseModel):
    valid: bool
    input: str
    instant: Optional[int] = None
    utc: Optional[str] = None
    viewer_zone: str
    viewer_local: str
    current_unix_seconds: int


class ZoneOffset(BaseModel):
    zone_id: str
    at: int
    offset_hours: float
    offset_label: str


class ZoneList(BaseModel):
    common: List[ZoneOption]
    total: int
