"""Per-template header generators and the generator selector."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from ..exceptions import UnsupportedConfigurationError
from ..zoom import ZoomTemplate
from .base import TemplateGenerator, TierSpec, generate_tier
from .month_week import MONTH_WEEK
from .quarter_month import QUARTER_MONTH
from .week_day import WEEK_DAY
from .year_quarter import YEAR_QUARTER

GENERATORS = MappingProxyType(
    {
        ZoomTemplate.YEAR_QUARTER: YEAR_QUARTER,
        ZoomTemplate.QUARTER_MONTH: QUARTER_MONTH,
        ZoomTemplate.MONTH_WEEK: MONTH_WEEK,
        ZoomTemplate.WEEK_DAY: WEEK_DAY,
    }
)


def select_generator(template: Any) -> TemplateGenerator:
    """Return the header generator for a zoom template.

    Unlike catalog lookups there is no fallback: asking for a template that
    has no generator is a caller error.

    Raises:
        UnsupportedConfigurationError: If no generator handles the template
    """
    try:
        return GENERATORS[ZoomTemplate(template)]
    except (ValueError, KeyError):
        supported = ", ".join(t.value for t in GENERATORS)
        msg = f"Unsupported zoom template: {template!r}. Supported templates: {supported}"
        raise UnsupportedConfigurationError(msg) from None


__all__ = [
    "GENERATORS",
    "MONTH_WEEK",
    "QUARTER_MONTH",
    "TemplateGenerator",
    "TierSpec",
    "WEEK_DAY",
    "YEAR_QUARTER",
    "generate_tier",
    "select_generator",
]
