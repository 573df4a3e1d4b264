"""
DateRange Value Object

Membership window of a patron: from the renovation date to the ending date.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Optional

from patron_api.core.domain.exceptions import ValidationError

MAX_RANGE_YEARS = 10
SECONDS_PER_DAY = 24 * 60 * 60


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(value) -> datetime:
    """
    Coerces a date or datetime into an aware UTC datetime.

    Naive datetimes are interpreted as UTC (MongoDB stores UTC without tzinfo).

    Raises:
        ValidationError: If the value is not a date/datetime.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise ValidationError("Start and end dates must be valid datetime values")


def add_years(value: datetime, years: int) -> datetime:
    """Shifts a datetime by whole calendar years (Feb 29 falls back to Feb 28)."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


@dataclass(frozen=True)
class DateRange:
    """
    Immutable date range value object.

    Start must be strictly before end and the range may not span
    more than ten calendar years.
    """

    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start is None or self.end is None:
            raise ValidationError("Both start and end dates are required")

        start = to_utc(self.start)
        end = to_utc(self.end)

        if start >= end:
            raise ValidationError("Start date must be before end date")

        if end > add_years(start, MAX_RANGE_YEARS):
            raise ValidationError(f"Date range cannot exceed {MAX_RANGE_YEARS} years")

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    # --- Durations ---

    def duration_in_days(self) -> int:
        return math.ceil((self.end - self.start).total_seconds() / SECONDS_PER_DAY)

    def duration_in_months(self) -> int:
        return (self.end.year - self.start.year) * 12 + (self.end.month - self.start.month)

    def duration_in_years(self) -> float:
        return self.duration_in_months() / 12

    # --- Status relative to "now" ---

    def is_active(self, now: Optional[datetime] = None) -> bool:
        current = to_utc(now) if now else utc_now()
        return self.start <= current <= self.end

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        current = to_utc(now) if now else utc_now()
        return current > self.end

    def is_upcoming(self, now: Optional[datetime] = None) -> bool:
        current = to_utc(now) if now else utc_now()
        return current < self.start

    def days_until_expiry(self, now: Optional[datetime] = None) -> int:
        current = to_utc(now) if now else utc_now()
        if self.is_expired(current):
            return 0
        return math.ceil((self.end - current).total_seconds() / SECONDS_PER_DAY)

    def days_since_expiry(self, now: Optional[datetime] = None) -> int:
        current = to_utc(now) if now else utc_now()
        if not self.is_expired(current):
            return 0
        return math.ceil((current - self.end).total_seconds() / SECONDS_PER_DAY)

    # --- Comparisons ---

    def contains(self, moment: datetime) -> bool:
        return self.start <= to_utc(moment) <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        return self.start <= other.end and self.end >= other.start

    def __str__(self) -> str:
        return f"{self.start.date().isoformat()} to {self.end.date().isoformat()}"
