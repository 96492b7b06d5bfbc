"""Header label formatting.

Month and weekday names are fixed English strings rather than ``strftime``
output, so labels don't change with the process locale.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from .boundaries import quarter_number

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

ABBREVIATION_LENGTH = 3


class LabelFormatter(Protocol):
    """Formatting hooks used by the header generators."""

    def year(self, day: date) -> str: ...

    def quarter(self, day: date) -> str: ...

    def quarter_year(self, day: date) -> str: ...

    def month_abbr(self, day: date) -> str: ...

    def month_year(self, day: date) -> str: ...

    def week_start(self, day: date) -> str: ...

    def week_range(self, start: date, end: date) -> str: ...

    def day(self, day: date) -> str: ...


class DateLabelFormatter:
    """Default English label formatter."""

    def __init__(
        self,
        month_names: tuple[str, ...] = MONTH_NAMES,
        weekday_names: tuple[str, ...] = WEEKDAY_NAMES,
    ):
        self.month_names = month_names
        self.weekday_names = weekday_names

    def month_name(self, day: date) -> str:
        return self.month_names[day.month - 1]

    def weekday_abbr(self, day: date) -> str:
        return self.weekday_names[day.weekday()][:ABBREVIATION_LENGTH]

    def year(self, day: date) -> str:
        """Year label, e.g. "2025"."""
        return str(day.year)

    def quarter(self, day: date) -> str:
        """Quarter label without year, e.g. "Q3"."""
        return f"Q{quarter_number(day)}"

    def quarter_year(self, day: date) -> str:
        """Quarter label with year, e.g. "Q1 2025"."""
        return f"Q{quarter_number(day)} {day.year}"

    def month_abbr(self, day: date) -> str:
        """Three-letter month, e.g. "Jan"."""
        return self.month_name(day)[:ABBREVIATION_LENGTH]

    def month_year(self, day: date) -> str:
        """Full month and year, e.g. "February 2025"."""
        return f"{self.month_name(day)} {day.year}"

    def week_start(self, day: date) -> str:
        """Month/day of a week start without zero padding, e.g. "2/17"."""
        return f"{day.month}/{day.day}"

    def week_range(self, start: date, end: date) -> str:
        """Describe a week, naming both months or years when the week crosses one.

        Same month:  "February 17-23, 2025"
        Cross-month: "February 28 - March 6, 2025"
        Cross-year:  "December 30, 2024 - January 5, 2025"
        """
        if start.year != end.year:
            return (
                f"{self.month_name(start)} {start.day}, {start.year} - "
                f"{self.month_name(end)} {end.day}, {end.year}"
            )
        if start.month != end.month:
            return (
                f"{self.month_name(start)} {start.day} - "
                f"{self.month_name(end)} {end.day}, {start.year}"
            )
        return f"{self.month_name(start)} {start.day}-{end.day}, {start.year}"

    def day(self, day: date) -> str:
        """Weekday abbreviation and day number, e.g. "Mon 17"."""
        return f"{self.weekday_abbr(day)} {day.day}"
