"""Time-based availability: event date ranges and recurring month/weekday patterns."""

from __future__ import annotations

import calendar
from datetime import UTC, datetime

from pydantic import Field, field_validator

from goteborgco.models.base import Entity

# CurrentInTime weekdays count from Sunday (0) to Saturday (6).
_WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime string as returned by the API."""
    return datetime.fromisoformat(value)


def _now_for(moment: datetime, now: datetime | None) -> datetime:
    # Compare naive timestamps against local time and aware ones against UTC.
    if now is None:
        now = datetime.now(UTC) if moment.tzinfo is not None else datetime.now()
    if moment.tzinfo is not None and now.tzinfo is None:
        return now.astimezone(UTC)
    if moment.tzinfo is None and now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


class EventDate(Entity):
    """A start/end range; either bound may be open."""

    start: str | None = None
    end: str | None = None

    @field_validator("start", "end")
    @classmethod
    def validate_timestamp(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not value.strip():
            return None
        parse_timestamp(value)
        return value

    @property
    def starts_at(self) -> datetime | None:
        return parse_timestamp(self.start) if self.start else None

    @property
    def ends_at(self) -> datetime | None:
        return parse_timestamp(self.end) if self.end else None

    def is_active(self, now: datetime | None = None) -> bool:
        """Return True if *now* (default: current time) falls within the range."""
        start = self.starts_at
        end = self.ends_at
        if start is not None and start > _now_for(start, now):
            return False
        if end is not None and end < _now_for(end, now):
            return False
        return True

    def get_formatted_range(self) -> str | None:
        start = self.starts_at
        end = self.ends_at
        if start is not None and end is not None:
            return f"{start.date().isoformat()} - {end.date().isoformat()}"
        if start is not None:
            return start.date().isoformat()
        if end is not None:
            return end.date().isoformat()
        return None


class CurrentInTime(Entity):
    """Recurring availability. An empty list matches any month/weekday."""

    months: tuple[int, ...] = Field(default_factory=tuple)
    weekdays: tuple[int, ...] = Field(default_factory=tuple)

    @field_validator("months", "weekdays", mode="before")
    @classmethod
    def normalize_numbers(cls, value: object) -> tuple[int, ...]:
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(int(item) for item in value)

    def has_month(self, month: int) -> bool:
        """Return True if *month* (1-12) is listed."""
        return month in self.months

    def has_weekday(self, weekday: int) -> bool:
        """Return True if *weekday* (0 = Sunday) is listed."""
        return weekday in self.weekdays

    def is_currently_active(self, now: datetime | None = None) -> bool:
        now = now or datetime.now()
        # datetime.weekday() counts from Monday.
        weekday = (now.weekday() + 1) % 7
        month_match = not self.months or self.has_month(now.month)
        weekday_match = not self.weekdays or self.has_weekday(weekday)
        return month_match and weekday_match

    def get_formatted_schedule(self) -> str | None:
        parts: list[str] = []
        if self.months:
            names = [calendar.month_name[month] for month in self.months if 1 <= month <= 12]
            parts.append(f"Months: {', '.join(names)}")
        if self.weekdays:
            names = [_WEEKDAY_NAMES[day] for day in self.weekdays if 0 <= day <= 6]
            parts.append(f"Days: {', '.join(names)}")
        return " | ".join(parts) if parts else None
