#!/usr/bin/env python3
"""
UTC Month Window Primitives

Calendar-month windows evaluated in UTC so that every device buckets a
transaction into the same month regardless of its local timezone.

Months are addressed by year and zero-based month index (January = 0).
"""

import calendar
import re
from dataclasses import dataclass
from datetime import datetime, timezone

# Fractional seconds of any length; fromisoformat before 3.11 only takes 3 or 6 digits
_FRACTION_PATTERN = re.compile(r"([T ]\d{2}:\d{2}:\d{2})\.(\d+)")


def _normalize_fraction(match: re.Match) -> str:
    return f"{match.group(1)}.{(match.group(2) + '000000')[:6]}"


def parse_instant(value: str | datetime | None) -> datetime | None:
    """
    Parse an ISO-8601 instant into an aware UTC datetime.

    Args:
        value: ISO string such as "2026-02-01T00:00:00.000Z", or a datetime

    Returns:
        UTC datetime, or None when the value cannot be parsed

    Examples:
        parse_instant("2026-02-01T10:00:00.000Z") -> datetime(2026, 2, 1, 10, tzinfo=UTC)
        parse_instant("not a date") -> None
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        text = _FRACTION_PATTERN.sub(_normalize_fraction, text, count=1)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None

    # Naive values carry no offset; treat them as UTC
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        # Offset pushes the instant past the datetime range
        return None


def in_month(instant: str | datetime | None, year: int, month_index: int) -> bool:
    """
    Check whether an instant falls in a UTC calendar month.

    Unparseable instants and month indexes outside 0-11 never match.
    """
    parsed = parse_instant(instant)
    if parsed is None:
        return False
    return parsed.year == year and parsed.month - 1 == month_index


def days_in_month(year: int, month_index: int) -> int:
    """Number of calendar days in the month (month_index is zero-based)."""
    return calendar.monthrange(year, month_index + 1)[1]


@dataclass(frozen=True)
class MonthWindow:
    """Immutable UTC calendar month, addressed by year and zero-based month index."""

    year: int
    month_index: int

    def __post_init__(self) -> None:
        if not 0 <= self.month_index <= 11:
            raise ValueError(f"month_index must be 0-11, got {self.month_index}")

    @classmethod
    def from_key(cls, key: str) -> "MonthWindow":
        """
        Parse a month key like "2026-02" (one-based month, as budgets store it).

        Args:
            key: Month key in YYYY-MM format

        Returns:
            MonthWindow object
        """
        parsed = datetime.strptime(key.strip(), "%Y-%m")
        return cls(year=parsed.year, month_index=parsed.month - 1)

    @classmethod
    def containing(cls, instant: str | datetime) -> "MonthWindow":
        """Get the window an instant falls in."""
        parsed = parse_instant(instant)
        if parsed is None:
            raise ValueError(f"Cannot parse instant: {instant!r}")
        return cls(year=parsed.year, month_index=parsed.month - 1)

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month_index)

    @property
    def key(self) -> str:
        """Month key in YYYY-MM format."""
        return f"{self.year:04d}-{self.month_index + 1:02d}"

    @property
    def label(self) -> str:
        """Human-readable label like "February 2026"."""
        return f"{calendar.month_name[self.month_index + 1]} {self.year}"

    def contains(self, instant: str | datetime | None) -> bool:
        """Check whether an instant falls in this window (unparseable -> False)."""
        return in_month(instant, self.year, self.month_index)

    def previous(self) -> "MonthWindow":
        """Get the preceding month."""
        if self.month_index == 0:
            return MonthWindow(year=self.year - 1, month_index=11)
        return MonthWindow(year=self.year, month_index=self.month_index - 1)

    def next(self) -> "MonthWindow":
        """Get the following month."""
        if self.month_index == 11:
            return MonthWindow(year=self.year + 1, month_index=0)
        return MonthWindow(year=self.year, month_index=self.month_index + 1)

    def days_elapsed(self, now: str | datetime) -> int:
        """
        Count the days of this window that have started as of `now`.

        Args:
            now: Injected current instant

        Returns:
            0 before the window, the UTC day-of-month inside it,
            days_in_month once the window has ended
        """
        parsed = parse_instant(now)
        if parsed is None:
            raise ValueError(f"Cannot parse instant: {now!r}")

        current = (parsed.year, parsed.month - 1)
        window = (self.year, self.month_index)
        if current < window:
            return 0
        if current > window:
            return self.days_in_month
        return parsed.day

    def __str__(self) -> str:
        """String representation."""
        return self.key
