"""Year-Quarter template: years over quarters ("2025" / "Q3")."""

from __future__ import annotations

from ..boundaries import PeriodBoundary, quarter_boundaries, year_boundaries
from ..labels import LabelFormatter
from ..zoom import ZoomTemplate
from .base import TemplateGenerator, TierSpec


def _year_label(formatter: LabelFormatter, period: PeriodBoundary) -> str:
    return formatter.year(period.start)


def _quarter_label(formatter: LabelFormatter, period: PeriodBoundary) -> str:
    return formatter.quarter(period.start)


YEAR_QUARTER = TemplateGenerator(
    template=ZoomTemplate.YEAR_QUARTER,
    primary=TierSpec("year", year_boundaries, _year_label),
    secondary=TierSpec("quarter", quarter_boundaries, _quarter_label),
    css_class="year-quarter",
    description="YearQuarter level with years and quarters",
)
