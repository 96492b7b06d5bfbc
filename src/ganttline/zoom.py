"""Zoom template catalog and template-based width calculations.

Widths use duration-to-pixel mapping rather than a fixed day width:

    task_pixel_width = (duration_days / template_unit_days) * base_unit_width_px * factor
    effective_day_width = base_unit_width_px * factor / template_unit_days

Both formulas clamp the factor first, so they always agree.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .logger import get_logger

# Minimum rendered task width in pixels
MIN_TASK_WIDTH_PX = 12.0
# Minimum effective day width in pixels to keep tasks visible
MIN_EFFECTIVE_DAY_WIDTH_PX = 3.0
DEFAULT_ZOOM_FACTOR = 1.0


class ZoomTemplate(str, Enum):
    """Semantic zoom levels, each a primary/secondary header pair."""

    YEAR_QUARTER = "year_quarter"
    QUARTER_MONTH = "quarter_month"
    MONTH_WEEK = "month_week"
    WEEK_DAY = "week_day"


class ZoomTemplateConfig(BaseModel):
    """Pixel parameters for one zoom template."""

    model_config = ConfigDict(frozen=True)

    template: ZoomTemplate
    base_unit_width_px: float = Field(gt=0)  # Width of one template unit at 1.0x
    template_unit_days: float = Field(gt=0)  # Days in one template unit
    min_factor: float = 1.0
    max_factor: float = 4.0
    display_name: str = ""
    description: str = ""

    @model_validator(mode="after")
    def _check_factor_range(self) -> ZoomTemplateConfig:
        if self.max_factor < self.min_factor:
            raise ValueError(
                f"max_factor ({self.max_factor}) must be >= min_factor ({self.min_factor})"
            )
        return self

    def clamp(self, factor: float) -> float:
        return max(self.min_factor, min(self.max_factor, factor))


class ZoomState(BaseModel):
    """Current zoom template and factor, owned by the caller."""

    model_config = ConfigDict(frozen=True)

    template: ZoomTemplate = ZoomTemplate.QUARTER_MONTH
    factor: float = DEFAULT_ZOOM_FACTOR

    def clamped(self, catalog: ZoomCatalog | None = None) -> ZoomState:
        config = (catalog or DEFAULT_CATALOG).get_config(self.template)
        return self.model_copy(update={"factor": config.clamp(self.factor)})


def effective_day_width(config: ZoomTemplateConfig, factor: float) -> float:
    """Pixels per calendar day for a template at the given zoom factor."""
    return (config.base_unit_width_px * config.clamp(factor)) / config.template_unit_days


def task_pixel_width(config: ZoomTemplateConfig, duration_days: float, factor: float) -> float:
    """Pixel width of a task lasting ``duration_days`` at the given zoom factor."""
    units = duration_days / config.template_unit_days
    return units * config.base_unit_width_px * config.clamp(factor)


def clamp_factor(config: ZoomTemplateConfig, factor: float) -> float:
    return config.clamp(factor)


def is_valid_factor(config: ZoomTemplateConfig, factor: float) -> bool:
    """True if the factor is within the template's range without clamping."""
    return config.min_factor <= factor <= config.max_factor


def is_task_visible(config: ZoomTemplateConfig, duration_days: float, factor: float) -> bool:
    """True if a task of this duration renders at least MIN_TASK_WIDTH_PX wide."""
    return effective_day_width(config, factor) * duration_days >= MIN_TASK_WIDTH_PX


def display_task_width(config: ZoomTemplateConfig, duration_days: float, factor: float) -> float:
    """Task width padded up to the minimum visible width."""
    return max(task_pixel_width(config, duration_days, factor), MIN_TASK_WIDTH_PX)


REFERENCE_CONFIGS: tuple[ZoomTemplateConfig, ...] = (
    ZoomTemplateConfig(
        template=ZoomTemplate.YEAR_QUARTER,
        base_unit_width_px=24.0,
        template_unit_days=90.0,
        max_factor=4.0,
        display_name="Year / Quarter",
        description="Strategic overview across years",
    ),
    ZoomTemplateConfig(
        template=ZoomTemplate.QUARTER_MONTH,
        base_unit_width_px=20.0,
        template_unit_days=30.0,
        max_factor=3.5,
        display_name="Quarter / Month",
        description="Quarterly overview with monthly breakdown",
    ),
    ZoomTemplateConfig(
        template=ZoomTemplate.MONTH_WEEK,
        base_unit_width_px=18.0,
        template_unit_days=7.0,
        max_factor=3.0,
        display_name="Month / Week",
        description="Monthly planning with weekly breakdown",
    ),
    ZoomTemplateConfig(
        template=ZoomTemplate.WEEK_DAY,
        base_unit_width_px=12.0,
        template_unit_days=1.0,
        max_factor=2.5,
        display_name="Week / Day",
        description="Detailed weekly planning with daily breakdown",
    ),
)

DEFAULT_TEMPLATE = ZoomTemplate.QUARTER_MONTH


class ZoomCatalog(Mapping[ZoomTemplate, ZoomTemplateConfig]):
    """Read-only table of zoom template configurations.

    Built once and shared; lookups of unknown templates degrade to the
    default template's configuration instead of failing.
    """

    def __init__(
        self,
        configs: tuple[ZoomTemplateConfig, ...] = REFERENCE_CONFIGS,
        default_template: ZoomTemplate = DEFAULT_TEMPLATE,
    ):
        table = {config.template: config for config in configs}
        if default_template not in table:
            raise ValueError(f"Default template {default_template.value} missing from catalog")
        self._configs: Mapping[ZoomTemplate, ZoomTemplateConfig] = MappingProxyType(table)
        self.default_template = default_template

    def __getitem__(self, template: ZoomTemplate) -> ZoomTemplateConfig:
        return self._configs[template]

    def __iter__(self) -> Iterator[ZoomTemplate]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    @property
    def default(self) -> ZoomTemplateConfig:
        return self._configs[self.default_template]

    def get_config(self, template: Any) -> ZoomTemplateConfig:
        """Look up a template's configuration, falling back to the default."""
        try:
            return self._configs[ZoomTemplate(template)]
        except (ValueError, KeyError):
            get_logger().debug(
                "Unknown zoom template %r, using %s", template, self.default_template.value
            )
            return self.default

    def with_overrides(self, overrides: Mapping[ZoomTemplate, Mapping[str, Any]]) -> ZoomCatalog:
        """Return a new catalog with some template parameters replaced."""
        configs: list[ZoomTemplateConfig] = []
        for template, config in self._configs.items():
            update = overrides.get(template)
            if update:
                # Re-validate so overrides can't break the width invariants
                config = ZoomTemplateConfig.model_validate({**config.model_dump(), **update})
            configs.append(config)
        return ZoomCatalog(tuple(configs), self.default_template)


DEFAULT_CATALOG = ZoomCatalog()


def get_config(template: Any) -> ZoomTemplateConfig:
    """Catalog lookup against the default catalog."""
    return DEFAULT_CATALOG.get_config(template)


def default_zoom_state() -> ZoomState:
    return ZoomState(template=DEFAULT_TEMPLATE, factor=DEFAULT_ZOOM_FACTOR)
