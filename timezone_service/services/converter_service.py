from shared.constants import (
    INVALID_INPUT_TEXT,
    MILLIS_PER_SECOND,
)
from shared.core.exceptions import InvalidZoneId, UnparseableInput
from shared.core.logging_config import get_logger
from timezone_service.schemas.converter import (
    ConvertRequest,
    ConvertResult,
    UnixTimestampResult,
)
from timezone_service.services.civil_converter import (
    format_civil,
    parse_civil,
    to_civil,
    to_instant,
    today_in_zone,
    utc_iso,
)
from timezone_service.services.offset_resolver import is_valid_zone
from timezone_service.services.unix_timestamp import parse_unix_timestamp
from world_clock_service.schemas.snapshot import CountdownOut
from world_clock_service.services.countdown import Countdown, countdown

logger = get_logger(__name__)


def _ensure_zone(zone_id: str) -> None:
    if not is_valid_zone(zone_id):
        raise InvalidZoneId(zone_id)


def countdown_out(value: Countdown) -> CountdownOut:
    return CountdownOut(
        elapsed=value.elapsed,
        remaining_millis=value.remaining_millis,
        days=value.days,
        hours=value.hours,
        minutes=value.minutes,
        seconds=value.seconds,
        text=value.text,
    )


def convert_civil_time(
    request: ConvertRequest, viewer_zone: str, now: int
) -> ConvertResult:
    """
    Resolve a civil time in the source zone and show it in the viewer zone,
    with the countdown from corrected ``now``.

    Unknown zones raise InvalidZoneId. Bad date/time text, and times that
    resolve outside years 1-9999, are reported as the ``invalid input``
    display value.
    """
    _ensure_zone(request.source_zone)
    _ensure_zone(viewer_zone)

    date_text = request.date or today_in_zone(now, request.source_zone).isoformat()
    try:
        civil = parse_civil(date_text, request.time, request.source_zone)
        instant = to_instant(civil)
    except UnparseableInput as e:
        logger.info("Converter input rejected: %s", e.message)
        return ConvertResult(
            valid=False,
            source_zone=request.source_zone,
            viewer_zone=viewer_zone,
            viewer_local=INVALID_INPUT_TEXT,
        )

    return ConvertResult(
        valid=True,
        source_zone=request.source_zone,
        viewer_zone=viewer_zone,
        source_civil=civil.isoformat(),
        instant=instant,
        utc=utc_iso(instant),
        viewer_local=format_civil(to_civil(instant, viewer_zone)),
        countdown=countdown_out(countdown(civil, now)),
    )


def convert_unix_timestamp(
    text: str, viewer_zone: str, now: int
) -> UnixTimestampResult:
    _ensure_zone(viewer_zone)
    current = now // MILLIS_PER_SECOND
    try:
        instant = parse_unix_timestamp(text)
    except UnparseableInput as e:
        logger.info("Timestamp input rejected: %s", e.message)
        return UnixTimestampResult(
            valid=False,
            input=text,
            viewer_zone=viewer_zone,
            viewer_local=INVALID_INPUT_TEXT,
            current_unix_seconds=current,
        )

    return UnixTimestampResult(
        valid=True,
        input=text,
        instant=instant,
        utc=utc_iso(instant),
        viewer_zone=viewer_zone,
        viewer_local=format_civil(to_civil(instant, viewer_zone)),
        current_unix_seconds=current,
    )
