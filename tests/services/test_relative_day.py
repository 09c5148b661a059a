from datetime import date

import pytest

from shared.constants import MILLIS_PER_DAY
from timezone_service.services.relative_day import (
    RelativeDay,
    classify_day_difference,
    label_dates,
    relative_day_label,
)
from tests.utils.fakes import utc_millis


class TestClassifyDayDifference:
    """Test cases for mapping a day difference to a label."""

    @pytest.mark.parametrize(
        "days,kind,text",
        [
            (0, RelativeDay.NONE, ""),
            (1, RelativeDay.TOMORROW, "Tomorrow"),
            (-1, RelativeDay.YESTERDAY, "Yesterday"),
            (2, RelativeDay.PLUS_N, "+2d"),
            (-3, RelativeDay.MINUS_N, "-3d"),
        ],
    )
    def test_mapping(self, days, kind, text):
        label = classify_day_difference(days)
        assert label.kind is kind
        assert label.days == days
        assert label.text == text


class TestRelativeDayLabel:
    """Test cases for labelling a city's date against the viewer's."""

    def test_only_calendar_dates_count(self):
        label = label_dates(date(2024, 6, 16), date(2024, 6, 15))
        assert label.kind is RelativeDay.TOMORROW

    def test_tokyo_seen_from_los_angeles(self):
        now = utc_millis(2024, 6, 15, 20)  # Tokyo 05:00 16th, LA 13:00 15th
        tokyo, los_angeles = "Asia/Tokyo", "America/Los_Angeles"
        ahead = relative_day_label(now, tokyo, los_angeles, now)
        behind = relative_day_label(now, los_angeles, tokyo, now)

        assert ahead.kind is RelativeDay.TOMORROW
        assert behind.kind is RelativeDay.YESTERDAY

    @pytest.mark.parametrize("hour", [0, 6, 12, 18, 23])
    def test_swapping_zones_negates_the_difference(self, hour):
        now = utc_millis(2024, 6, 15, hour)
        pairs = [
            ("Pacific/Kiritimati", "Pacific/Honolulu"),
            ("Asia/Kolkata", "America/New_York"),
            ("Australia/Sydney", "Europe/London"),
        ]
        for left, right in pairs:
            forward = relative_day_label(now, left, right, now)
            backward = relative_day_label(now, right, left, now)
            assert forward.days == -backward.days

    def test_kiritimati_is_always_a_day_ahead_of_honolulu(self):
        for hour in range(24):
            now = utc_millis(2024, 6, 15, hour)
            label = relative_day_label(
                now, "Pacific/Kiritimati", "Pacific/Honolulu", now
            )
            assert label.kind is RelativeDay.TOMORROW

    def test_same_zone_same_day(self):
        now = utc_millis(2024, 6, 15, 12)
        label = relative_day_label(now, "Europe/Paris", "Europe/Paris", now)
        assert label.kind is RelativeDay.NONE
        assert label.text == ""

    def test_future_target_beyond_tomorrow(self):
        now = utc_millis(2024, 6, 15, 12)
        label = relative_day_label(
            now + 3 * MILLIS_PER_DAY, "UTC", "UTC", now
        )
        assert label.kind is RelativeDay.PLUS_N
        assert label.text == "+3d"

    def test_context_uses_corrected_now(self, world_clock, fixed_now):
        # Shanghai is on the 15th at 20:00; Tokyo reaches the 16th at 15:00Z
        tomorrow = world_clock.relative_day_label(
            fixed_now + 4 * 3_600_000, "Asia/Tokyo", "Asia/Shanghai"
        )
        today = world_clock.relative_day_label(
            fixed_now, "Asia/Tokyo", "Asia/Shanghai"
        )

        assert tomorrow.kind is RelativeDay.TOMORROW
        assert today.kind is RelativeDay.NONE
