"""Month-Week template: months over weeks ("February 2025" / "2/17").

Week cells are labelled with their Monday and may straddle two months, so
the first and last week cells usually extend past the month cells.
"""

from __future__ import annotations

from ..boundaries import PeriodBoundary, month_boundaries, week_boundaries
from ..labels import LabelFormatter
from ..zoom import ZoomTemplate
from .base import TemplateGenerator, TierSpec


def _month_label(formatter: LabelFormatter, period: PeriodBoundary) -> str:
    return formatter.month_year(period.start)


def _week_label(formatter: LabelFormatter, period: PeriodBoundary) -> str:
    return formatter.week_start(period.start)


MONTH_WEEK = TemplateGenerator(
    template=ZoomTemplate.MONTH_WEEK,
    primary=TierSpec("month", month_boundaries, _month_label),
    secondary=TierSpec("week", week_boundaries, _week_label),
    css_class="month-week",
    description="MonthWeek level with month-year and week starts",
)
