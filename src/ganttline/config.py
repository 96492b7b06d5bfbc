"""Configuration loader for timeline rendering.

A single YAML file (ganttline.yaml) holds the default zoom state, header
geometry and optional per-template pixel overrides:

    timeline:
      template: month_week
      factor: 2.0
      header_primary_height: 32
      header_secondary_height: 24
      expansion: union
      debug_coordinates: false

    templates:
      week_day:
        base_unit_width_px: 14
        max_factor: 3.0
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .renderer import (
    DEFAULT_PRIMARY_HEIGHT,
    DEFAULT_SECONDARY_HEIGHT,
    ExpansionStrategy,
    TimelineRenderer,
)
from .zoom import DEFAULT_CATALOG, DEFAULT_ZOOM_FACTOR, ZoomCatalog, ZoomState, ZoomTemplate

DEFAULT_CONFIG_FILENAME = "ganttline.yaml"


class TemplateOverride(BaseModel):
    """Replacement pixel parameters for one zoom template."""

    base_unit_width_px: float | None = Field(default=None, gt=0)
    template_unit_days: float | None = Field(default=None, gt=0)
    min_factor: float | None = None
    max_factor: float | None = None
    display_name: str | None = None
    description: str | None = None


class TimelineConfig(BaseModel):
    """Default zoom state and header geometry."""

    template: ZoomTemplate = ZoomTemplate.QUARTER_MONTH
    factor: float = DEFAULT_ZOOM_FACTOR
    header_primary_height: int = Field(default=DEFAULT_PRIMARY_HEIGHT, gt=0)
    header_secondary_height: int = Field(default=DEFAULT_SECONDARY_HEIGHT, gt=0)
    expansion: ExpansionStrategy = ExpansionStrategy.UNION
    debug_coordinates: bool = False


class GanttlineConfig(BaseModel):
    """Top-level configuration file contents."""

    timeline: TimelineConfig = TimelineConfig()
    templates: dict[ZoomTemplate, TemplateOverride] = Field(
        default_factory=dict[ZoomTemplate, TemplateOverride]
    )

    @field_validator("templates", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def build_catalog(self) -> ZoomCatalog:
        """Reference catalog with this file's template overrides applied."""
        if not self.templates:
            return DEFAULT_CATALOG
        overrides = {
            template: override.model_dump(exclude_none=True)
            for template, override in self.templates.items()
        }
        return DEFAULT_CATALOG.with_overrides(overrides)

    def zoom_state(self) -> ZoomState:
        return ZoomState(template=self.timeline.template, factor=self.timeline.factor)

    def create_renderer(  # noqa: PLR0913 - CLI-level overrides of config values
        self,
        start: date,
        end: date,
        *,
        template: ZoomTemplate | None = None,
        factor: float | None = None,
        origin: date | None = None,
    ) -> TimelineRenderer:
        """Build a renderer from config, letting explicit arguments win."""
        state = ZoomState(
            template=template or self.timeline.template,
            factor=self.timeline.factor if factor is None else factor,
        )
        return TimelineRenderer.from_state(
            state,
            start,
            end,
            origin=origin,
            catalog=self.build_catalog(),
            primary_height=self.timeline.header_primary_height,
            secondary_height=self.timeline.header_secondary_height,
            expansion=self.timeline.expansion,
            debug=self.timeline.debug_coordinates,
        )


def load_config(config_path: Path | str) -> GanttlineConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to ganttline.yaml

    Returns:
        Validated configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file is empty, not YAML, or fails validation
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open() as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not data:
        raise ConfigError(f"Empty configuration file: {config_path}")
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping: {config_path}")

    try:
        config = GanttlineConfig.model_validate(data)
        # Catch overrides that break template invariants (e.g. max < min) at load time
        config.build_catalog()
    except (ValidationError, ValueError) as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    return config


def resolve_config(config_path: Path | None) -> GanttlineConfig:
    """Load an explicit config, else ./ganttline.yaml if present, else defaults."""
    if config_path is not None:
        return load_config(config_path)
    default_path = Path(DEFAULT_CONFIG_FILENAME)
    if default_path.exists():
        return load_config(default_path)
    return GanttlineConfig()
