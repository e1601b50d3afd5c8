from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from goteborgco.models.schedule import CurrentInTime, EventDate


class TestEventDate:
    def test_active_within_range(self) -> None:
        date = EventDate(start="2024-06-01T10:00:00", end="2024-06-30T18:00:00")

        assert date.is_active(datetime(2024, 6, 15, 12, 0)) is True
        assert date.is_active(datetime(2024, 7, 1)) is False
        assert date.is_active(datetime(2024, 5, 31)) is False

    def test_open_bounds(self) -> None:
        assert EventDate(start="2024-06-01").is_active(datetime(2030, 1, 1)) is True
        assert EventDate(end="2024-06-01").is_active(datetime(2020, 1, 1)) is True
        assert EventDate().is_active() is True

    def test_future_start_without_end_is_not_active_yet(self) -> None:
        start = (datetime.now() + timedelta(days=30)).isoformat(timespec="seconds")

        assert EventDate(start=start).is_active() is False

    def test_aware_timestamps_compare_against_aware_now(self) -> None:
        date = EventDate(start="2024-06-01T10:00:00+00:00", end="2024-06-01T12:00:00+00:00")

        assert date.is_active(datetime(2024, 6, 1, 11, 0, tzinfo=UTC)) is True

    def test_blank_values_are_treated_as_missing(self) -> None:
        assert EventDate(start="", end="  ").get_formatted_range() is None

    def test_invalid_timestamp_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EventDate(start="next tuesday")

    def test_formatted_range(self) -> None:
        assert EventDate(start="2024-06-01T10:00:00", end="2024-06-03").get_formatted_range() == (
            "2024-06-01 - 2024-06-03"
        )
        assert EventDate(end="2024-06-03").get_formatted_range() == "2024-06-03"


class TestCurrentInTime:
    def test_string_numbers_are_coerced(self) -> None:
        schedule = CurrentInTime.model_validate({"months": ["1", "3"], "weekdays": "nope"})

        assert schedule.months == (1, 3)
        assert schedule.weekdays == ()
        assert schedule.has_month(3) is True
        assert schedule.has_month(2) is False

    def test_active_when_month_and_weekday_match(self) -> None:
        schedule = CurrentInTime(months=(6,), weekdays=(0, 6))

        # 2024-06-15 is a Saturday, 2024-06-17 a Monday.
        assert schedule.is_currently_active(datetime(2024, 6, 15)) is True
        assert schedule.is_currently_active(datetime(2024, 6, 17)) is False
        assert schedule.is_currently_active(datetime(2024, 7, 13)) is False

    def test_sunday_is_weekday_zero(self) -> None:
        assert CurrentInTime(weekdays=(0,)).is_currently_active(datetime(2024, 6, 16)) is True

    def test_empty_lists_match_everything(self) -> None:
        assert CurrentInTime().is_currently_active(datetime(2024, 2, 29)) is True

    def test_formatted_schedule(self) -> None:
        schedule = CurrentInTime(months=(1, 3), weekdays=(1,))

        assert schedule.get_formatted_schedule() == "Months: January, March | Days: Monday"
        assert CurrentInTime().get_formatted_schedule() is None
