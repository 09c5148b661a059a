from typing import List
from zoneinfo import available_timezones

from tzlocal import get_localzone_name


def get_local_timezone() -> str:
    """Return the host's current local timezone name."""
    try:
        return get_localzone_name() or "UTC"
    except Exception:  # tzlocal raises on hosts with a broken tz setup
        return "UTC"


def list_available_timezones(limit: int = 0) -> List[str]:
    """Return the sorted IANA zone names, optionally capped at ``limit``."""
    zones = sorted(available_timezones())
    return zones[:limit] if limit else zones
