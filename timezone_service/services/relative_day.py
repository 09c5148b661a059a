from dataclasses import dataclass
from datetime import date
from enum import Enum

from timezone_service.services.civil_converter import today_in_zone


class RelativeDay(str, Enum):
    NONE = "none"
    TOMORROW = "tomorrow"
    YESTERDAY = "yesterday"
    PLUS_N = "plus_n"
    MINUS_N = "minus_n"


@dataclass(frozen=True)
class RelativeDayLabel:
    kind: RelativeDay
    days: int

    @property
    def text(self) -> str:
        if self.kind is RelativeDay.NONE:
            return ""
        if self.kind is RelativeDay.TOMORROW:
            return "Tomorrow"
        if self.kind is RelativeDay.YESTERDAY:
            return "Yesterday"
        return f"{self.days:+d}d"


def classify_day_difference(days: int) -> RelativeDayLabel:
    if days == 0:
        kind = RelativeDay.NONE
    elif days == 1:
        kind = RelativeDay.TOMORROW
    elif days == -1:
        kind = RelativeDay.YESTERDAY
    elif days > 0:
        kind = RelativeDay.PLUS_N
    else:
        kind = RelativeDay.MINUS_N
    return RelativeDayLabel(kind=kind, days=days)


def label_dates(target_date: date, viewer_today: date) -> RelativeDayLabel:
    """Whole calendar days between two dates; time of day plays no part."""
    return classify_day_difference((target_date - viewer_today).days)


def relative_day_label(
    target: int,
    target_zone_id: str,
    viewer_zone_id: str,
    reference: int,
) -> RelativeDayLabel:
    """
    Where ``target`` falls, as a date in ``target_zone_id``, relative to the
    viewer's today: the date of ``reference`` (normally corrected now) in
    ``viewer_zone_id``.
    """
    return label_dates(
        today_in_zone(target, target_zone_id),
        today_in_zone(reference, viewer_zone_id),
    )
