import math

from shared.constants import (
    DAYTIME_END_HOUR,
    DAYTIME_START_HOUR,
    DEGREES_PER_OFFSET_HOUR,
    INVALID_DATE_TEXT,
    INVALID_TIME_TEXT,
    MILLIS_PER_HOUR,
    SYNCED_LABEL,
)
from shared.core.exceptions import CatalogIntegrityError, InvalidZoneId
from shared.core.logging_config import get_logger
from timezone_service.schemas.civil_time import CivilTime
from timezone_service.services.civil_converter import (
    to_civil,
    to_civil_at_offset,
    today_in_zone,
)
from timezone_service.services.offset_resolver import offset_hours
from timezone_service.services.relative_day import (
    classify_day_difference,
    label_dates,
    relative_day_label,
)
from world_clock_service.schemas.city import City
from world_clock_service.schemas.snapshot import (
    CoordinateSnapshot,
    DisplaySnapshot,
    RelativeDayOut,
)

logger = get_logger(__name__)

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)  # fmt: skip


def format_hours(hours: float) -> str:
    """``9``, ``5.5``, ``-3.75``: whole hours without a trailing ``.0``."""
    if float(hours).is_integer():
        return str(int(hours))
    return f"{hours:g}"


def format_utc_offset(hours: float) -> str:
    sign = "+" if hours >= 0 else "-"
    return f"UTC{sign}{format_hours(abs(hours))}"


def format_time_diff(delta_hours: float) -> str:
    if delta_hours == 0:
        return SYNCED_LABEL
    sign = "+" if delta_hours > 0 else "-"
    return f"{sign}{format_hours(abs(delta_hours))}h"


def format_clock(civil: CivilTime) -> str:
    return f"{civil.hour:02d}:{civil.minute:02d}:{civil.second:02d}"


def format_date(civil: CivilTime) -> str:
    weekday = WEEKDAYS[civil.date.weekday()]
    return f"{weekday}, {MONTHS[civil.month - 1]} {civil.day}"


def is_daytime(civil: CivilTime) -> bool:
    return DAYTIME_START_HOUR <= civil.hour < DAYTIME_END_HOUR


def invalid_snapshot(city: City, now: int, error: str) -> DisplaySnapshot:
    return DisplaySnapshot(
        city_id=city.city_id,
        zone_id=city.zone_id,
        instant=now,
        valid=False,
        error=error,
        time=INVALID_TIME_TEXT,
        date=INVALID_DATE_TEXT,
        is_daytime=False,
        utc_offset_hours=None,
        utc_offset_label=INVALID_DATE_TEXT,
        relative_day=RelativeDayOut.from_label(classify_day_difference(0)),
        hour_delta_from_viewer=None,
        time_diff_label=INVALID_DATE_TEXT,
    )


def build_snapshot(city: City, viewer_zone_id: str, now: int) -> DisplaySnapshot:
    """
    Display state of ``city`` at the corrected instant ``now``.

    A bad zone id (city or viewer) gives a snapshot flagged ``valid=False``
    instead of an error. A city with no zone id at all is a catalog fault
    and raises CatalogIntegrityError.
    """
    if not city.zone_id:
        raise CatalogIntegrityError(
            f"City {city.city_id!r} has no zone identifier",
            details={"city_id": city.city_id},
        )

    try:
        civil = to_civil(now, city.zone_id)
        city_offset = offset_hours(city.zone_id, now)
        viewer_offset = offset_hours(viewer_zone_id, now)
        day_label = relative_day_label(now, city.zone_id, viewer_zone_id, now)
    except InvalidZoneId as e:
        logger.error(
            "Cannot build snapshot for %s: %s", city.city_id, e.message
        )
        return invalid_snapshot(city, now, e.message)

    delta = city_offset - viewer_offset
    return DisplaySnapshot(
        city_id=city.city_id,
        zone_id=city.zone_id,
        instant=now,
        time=format_clock(civil),
        date=format_date(civil),
        is_daytime=is_daytime(civil),
        utc_offset_hours=city_offset,
        utc_offset_label=format_utc_offset(city_offset),
        relative_day=RelativeDayOut.from_label(day_label),
        hour_delta_from_viewer=delta,
        time_diff_label=format_time_diff(delta),
    )


def estimate_offset_from_longitude(longitude: float) -> int:
    """Nautical offset ``round(longitude / 15)``, halves rounding up."""
    return math.floor(longitude / DEGREES_PER_OFFSET_HOUR + 0.5)


def build_coordinate_snapshot(
    latitude: float, longitude: float, viewer_zone_id: str, now: int
) -> CoordinateSnapshot:
    """
    Time at a point no named zone covers, from the longitude estimate.
    Raises InvalidZoneId for a bad viewer zone.
    """
    hours = estimate_offset_from_longitude(longitude)
    label = format_utc_offset(hours)
    civil = to_civil_at_offset(now, hours * MILLIS_PER_HOUR, label)
    day_label = label_dates(civil.date, today_in_zone(now, viewer_zone_id))
    return CoordinateSnapshot(
        latitude=latitude,
        longitude=longitude,
        instant=now,
        time=format_clock(civil),
        date=format_date(civil),
        utc_offset_hours=hours,
        utc_offset_label=label,
        relative_day=RelativeDayOut.from_label(day_label),
    )
