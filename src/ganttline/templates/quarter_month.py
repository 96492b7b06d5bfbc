"""Quarter-Month template: quarters over months ("Q1 2025" / "Jan")."""

from __future__ import annotations

from ..boundaries import PeriodBoundary, month_boundaries, quarter_boundaries
from ..labels import LabelFormatter
from ..zoom import ZoomTemplate
from .base import TemplateGenerator, TierSpec


def _quarter_label(formatter: LabelFormatter, period: PeriodBoundary) -> str:
    return formatter.quarter_year(period.start)


def _month_label(formatter: LabelFormatter, period: PeriodBoundary) -> str:
    return formatter.month_abbr(period.start)


QUARTER_MONTH = TemplateGenerator(
    template=ZoomTemplate.QUARTER_MONTH,
    primary=TierSpec("quarter", quarter_boundaries, _quarter_label),
    secondary=TierSpec("month", month_boundaries, _month_label),
    css_class="quarter-month",
    description="QuarterMonth level with quarters and month abbreviations",
)
