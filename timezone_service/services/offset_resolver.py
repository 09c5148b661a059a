from datetime import datetime, timedelta, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from shared.constants import (
    MAX_PLAUSIBLE_EPOCH_MILLIS,
    MILLIS_PER_HOUR,
    MILLIS_PER_SECOND,
    MIN_PLAUSIBLE_EPOCH_MILLIS,
    UTC_ZONE_ID,
)
from shared.core.exceptions import InvalidZoneId

UTC_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@lru_cache(maxsize=512)
def load_zone(zone_id: str) -> ZoneInfo:
    """
    Look up a zone in the tz database.

    Raises InvalidZoneId for empty, malformed or unknown identifiers.
    """
    if not isinstance(zone_id, str) or not zone_id.strip():
        raise InvalidZoneId(zone_id)
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidZoneId(zone_id) from e


def is_valid_zone(zone_id: str) -> bool:
    if zone_id == UTC_ZONE_ID:
        return True
    try:
        load_zone(zone_id)
    except InvalidZoneId:
        return False
    return True


def offset_millis(zone_id: str, at: int) -> int:
    """
    UTC offset of ``zone_id`` at the instant ``at`` (epoch millis).

    The zone's rules are evaluated at that instant, so daylight saving is
    reflected. An instant exactly on a transition gets the offset that
    applies after it. Instants outside years 1-9999 take the offset at the
    nearest edge of that range.
    """
    if zone_id == UTC_ZONE_ID:
        return 0
    zone = load_zone(zone_id)
    at = min(max(at, MIN_PLAUSIBLE_EPOCH_MILLIS), MAX_PLAUSIBLE_EPOCH_MILLIS)
    moment = (
        UTC_EPOCH + timedelta(seconds=at // MILLIS_PER_SECOND)
    ).astimezone(zone)
    delta = moment.utcoffset()
    if delta is None:
        raise InvalidZoneId(zone_id)
    return int(delta.total_seconds() * 1000)


def offset_hours(zone_id: str, at: int) -> float:
    """Signed offset in hours; fractional for zones like Asia/Kolkata (+5.5)."""
    return offset_millis(zone_id, at) / MILLIS_PER_HOUR
