"""Calendar boundary arithmetic for timeline headers.

Every ``*_boundaries`` function takes a date range and returns the smallest
enclosing span of whole periods. Passing a single date treats it as the range
``[date, date]``, which still expands to the full period containing it.
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import date, timedelta

from .exceptions import InvalidRangeError

# Constants for date calculations
MONTHS_PER_QUARTER = 3
DECEMBER = 12
DAYS_PER_WEEK = 7


@dataclass(slots=True, frozen=True)
class PeriodBoundary:
    """Inclusive calendar span."""

    start: date
    end: date

    def __post_init__(self) -> None:
        validate_range(self.start, self.end)

    @property
    def days(self) -> int:
        """Number of calendar days in the span, counting both ends."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def validate_range(start: date, end: date) -> None:
    """Validate that start date is not after end date.

    Raises:
        InvalidRangeError: If start is after end
    """
    if start > end:
        msg = f"Start date ({start:%Y-%m-%d}) cannot be after end date ({end:%Y-%m-%d})"
        raise InvalidRangeError(msg)


def _resolve(start: date, end: date | None) -> tuple[date, date]:
    resolved_end = start if end is None else end
    validate_range(start, resolved_end)
    return start, resolved_end


# === WEEK ===


def week_start(day: date) -> date:
    """Monday of the week containing the date (regardless of locale)."""
    return day - timedelta(days=day.weekday())


def week_end(day: date) -> date:
    """Sunday of the week containing the date."""
    return week_start(day) + timedelta(days=DAYS_PER_WEEK - 1)


def week_boundaries(start: date, end: date | None = None) -> PeriodBoundary:
    """Expand a range to complete Monday-Sunday weeks."""
    start, end = _resolve(start, end)
    return PeriodBoundary(week_start(start), week_end(end))


# === MONTH ===


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    """Last calendar day of the month, accounting for leap years."""
    return day.replace(day=monthrange(day.year, day.month)[1])


def month_boundaries(start: date, end: date | None = None) -> PeriodBoundary:
    """Expand a range to complete calendar months."""
    start, end = _resolve(start, end)
    return PeriodBoundary(month_start(start), month_end(end))


# === QUARTER ===


def quarter_number(day: date) -> int:
    """Quarter (1-4) containing the date: Jan-Mar=1, Apr-Jun=2, Jul-Sep=3, Oct-Dec=4."""
    return (day.month - 1) // MONTHS_PER_QUARTER + 1


def quarter_description(day: date) -> str:
    """Human-readable quarter, e.g. "Q3 2025"."""
    return f"Q{quarter_number(day)} {day.year}"


def quarter_start(day: date) -> date:
    start_month = (quarter_number(day) - 1) * MONTHS_PER_QUARTER + 1
    return date(day.year, start_month, 1)


def quarter_end(day: date) -> date:
    """Last day of the quarter: quarter start plus three months, minus one day."""
    end_month = quarter_start(day).month + MONTHS_PER_QUARTER - 1
    return month_end(date(day.year, end_month, 1))


def quarter_boundaries(start: date, end: date | None = None) -> PeriodBoundary:
    """Expand a range to complete calendar quarters."""
    start, end = _resolve(start, end)
    return PeriodBoundary(quarter_start(start), quarter_end(end))


# === YEAR ===


def year_start(day: date) -> date:
    return date(day.year, 1, 1)


def year_end(day: date) -> date:
    return date(day.year, DECEMBER, 31)


def year_boundaries(start: date, end: date | None = None) -> PeriodBoundary:
    """Expand a range to Jan 1 of the first year through Dec 31 of the last."""
    start, end = _resolve(start, end)
    return PeriodBoundary(year_start(start), year_end(end))


# === DAY ===


def day_boundaries(start: date, end: date | None = None) -> PeriodBoundary:
    """Day is the minimum granularity, so the range is returned as-is."""
    start, end = _resolve(start, end)
    return PeriodBoundary(start, end)
