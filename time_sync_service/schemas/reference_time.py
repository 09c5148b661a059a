from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReferenceTime(BaseModel):
    """Body of the reference time endpoint."""

    time: str = Field(..., description="ISO-8601 UTC form of the instant")
    timestamp: int = Field(..., description="Milliseconds since the epoch")

    model_config = ConfigDict(extra="ignore")


class ClockStatus(BaseModel):
    offset_millis: int
    synchronized: bool
    now: int
    now_iso: str


class SyncResult(BaseModel):
    ok: bool
    synchronized: bool
    offset_millis: int
    round_trip_millis: Optional[int] = None
    error: Optional[str] = None
