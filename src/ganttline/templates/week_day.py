"""Week-Day template: week ranges over days ("February 17-23, 2025" / "Mon 17")."""

from __future__ import annotations

from ..boundaries import PeriodBoundary, day_boundaries, week_boundaries
from ..labels import LabelFormatter
from ..zoom import ZoomTemplate
from .base import TemplateGenerator, TierSpec


def _week_label(formatter: LabelFormatter, period: PeriodBoundary) -> str:
    return formatter.week_range(period.start, period.end)


def _day_label(formatter: LabelFormatter, period: PeriodBoundary) -> str:
    return formatter.day(period.start)


WEEK_DAY = TemplateGenerator(
    template=ZoomTemplate.WEEK_DAY,
    primary=TierSpec("week", week_boundaries, _week_label),
    secondary=TierSpec("day", day_boundaries, _day_label),
    css_class="week-day",
    description="WeekDay level with week ranges and day names",
)
