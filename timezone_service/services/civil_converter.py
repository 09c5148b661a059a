"""
Conversion between civil (wall-clock) time in a named zone and instants.

``to_civil`` is a direct lookup: instant plus the zone's offset at that
instant. ``to_instant`` has to solve for an instant whose own offset is
unknown, so it iterates from a first guess:

1. read the civil fields as if they were UTC (``wall``);
2. take the zone's offset at ``wall`` and step back by it (``guess``);
3. take the offset at ``guess`` and use that one as authoritative.

Daylight-saving edges are resolved by fixed rules, never by raising:

* gap (spring forward, the wall time never shows): the wall time is carried
  past the jump using the offset in force before it, so 02:30 on a
  02:00 -> 03:00 night becomes the instant of 03:30;
* overlap (fall back, the wall time shows twice): the later occurrence,
  which uses the post-transition standard offset.
"""

import re
from datetime import date, datetime, timedelta, timezone

from shared.constants import (
    MAX_PLAUSIBLE_EPOCH_MILLIS,
    MILLIS_PER_DAY,
    MILLIS_PER_SECOND,
    MIN_PLAUSIBLE_EPOCH_MILLIS,
    UTC_ZONE_ID,
)
from shared.core.exceptions import UnparseableInput
from timezone_service.schemas.civil_time import CivilTime
from timezone_service.services.offset_resolver import load_zone, offset_millis

EPOCH = datetime(1970, 1, 1)
UTC_EPOCH = EPOCH.replace(tzinfo=timezone.utc)

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def wall_millis(civil: CivilTime) -> int:
    """The civil fields read as UTC, in epoch millis."""
    delta = civil.naive() - EPOCH
    return (delta.days * 86400 + delta.seconds) * MILLIS_PER_SECOND


def _ensure_in_range(millis: int, civil: CivilTime) -> None:
    if not MIN_PLAUSIBLE_EPOCH_MILLIS <= millis <= MAX_PLAUSIBLE_EPOCH_MILLIS:
        raise UnparseableInput(
            f"Date is out of range: {civil.isoformat()}",
            details={"date": civil.date.isoformat()},
        )


def _civil_from_wall(wall: int, zone_id: str) -> CivilTime:
    moment = EPOCH + timedelta(milliseconds=wall - wall % MILLIS_PER_SECOND)
    return CivilTime(
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        zone_id,
    )


def to_civil(instant: int, zone_id: str) -> CivilTime:
    return _civil_from_wall(instant + offset_millis(zone_id, instant), zone_id)


def to_civil_at_offset(instant: int, offset: int, label: str) -> CivilTime:
    """Civil time under a fixed offset (millis), tagged with ``label``."""
    return _civil_from_wall(instant + offset, label)


def to_instant(civil: CivilTime) -> int:
    """
    The instant ``civil`` denotes in its zone.

    Raises UnparseableInput when that instant falls outside years 1-9999.
    """
    instant = _resolve_instant(civil)
    _ensure_in_range(instant, civil)
    return instant


def _resolve_instant(civil: CivilTime) -> int:
    zone_id = civil.zone_id
    wall = wall_millis(civil)

    guess = wall - offset_millis(zone_id, wall)
    offset = offset_millis(zone_id, guess)
    instant = wall - offset

    settled = offset_millis(zone_id, instant)
    if settled != offset:
        # Nonexistent wall time. Offsets only grow across a gap, so the
        # smaller one is the offset before the jump.
        return wall - min(offset, settled)

    return _later_occurrence(zone_id, wall, instant)


def _later_occurrence(zone_id: str, wall: int, instant: int) -> int:
    """Second reading of a repeated wall time, or ``instant`` if unique."""
    offset_after = offset_millis(zone_id, instant + MILLIS_PER_DAY)
    candidate = wall - offset_after
    if candidate > instant and offset_millis(zone_id, candidate) == offset_after:
        return candidate
    return instant


def today_in_zone(instant: int, zone_id: str) -> date:
    return to_civil(instant, zone_id).date


def parse_civil(date_text: str, time_text: str, zone_id: str) -> CivilTime:
    """
    Build a CivilTime from ``YYYY-MM-DD`` and ``HH:MM[:SS]`` text.

    Raises UnparseableInput for malformed or impossible values and for
    dates within a day of the ends of years 1-9999. Raises InvalidZoneId
    for an unknown zone.
    """
    if zone_id != UTC_ZONE_ID:
        load_zone(zone_id)
    try:
        day = date.fromisoformat((date_text or "").strip())
    except ValueError as e:
        raise UnparseableInput(
            f"Invalid date: {date_text!r}", details={"date": date_text}
        ) from e

    match = _TIME_PATTERN.match((time_text or "").strip())
    if not match:
        raise UnparseableInput(
            f"Invalid time: {time_text!r}", details={"time": time_text}
        )
    hour, minute, second = (int(part or 0) for part in match.groups())
    try:
        civil = CivilTime(
            day.year, day.month, day.day, hour, minute, second, zone_id
        )
    except ValueError as e:
        raise UnparseableInput(
            f"Invalid time: {time_text!r}", details={"time": time_text}
        ) from e
    _ensure_in_range(wall_millis(civil), civil)
    return civil


def format_civil(civil: CivilTime) -> str:
    """``Sunday, March 10, 2024 03:30:00`` style long form."""
    return civil.naive().strftime("%A, %B %d, %Y %H:%M:%S")


def utc_iso(instant: int) -> str:
    return (
        (UTC_EPOCH + timedelta(milliseconds=instant))
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
