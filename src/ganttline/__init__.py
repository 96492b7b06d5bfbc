"""Ganttline - zoomable Gantt timeline headers and task-bar coordinates."""

from .boundaries import (
    PeriodBoundary,
    month_boundaries,
    quarter_boundaries,
    quarter_number,
    week_boundaries,
    year_boundaries,
)
from .coordinates import CoordinateEngine
from .exceptions import (
    ConfigError,
    GanttlineError,
    InvalidRangeError,
    RenderFailure,
    UnsupportedConfigurationError,
)
from .models import HeaderCell, HeaderRender, HeaderTier
from .renderer import ExpansionStrategy, TimelineRenderer
from .templates import select_generator
from .zoom import (
    DEFAULT_CATALOG,
    ZoomCatalog,
    ZoomState,
    ZoomTemplate,
    ZoomTemplateConfig,
    effective_day_width,
    get_config,
    is_valid_factor,
    task_pixel_width,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "CoordinateEngine",
    "DEFAULT_CATALOG",
    "ExpansionStrategy",
    "GanttlineError",
    "HeaderCell",
    "HeaderRender",
    "HeaderTier",
    "InvalidRangeError",
    "PeriodBoundary",
    "RenderFailure",
    "TimelineRenderer",
    "UnsupportedConfigurationError",
    "ZoomCatalog",
    "ZoomState",
    "ZoomTemplate",
    "ZoomTemplateConfig",
    "effective_day_width",
    "get_config",
    "is_valid_factor",
    "month_boundaries",
    "quarter_boundaries",
    "quarter_number",
    "select_generator",
    "task_pixel_width",
    "week_boundaries",
    "year_boundaries",
]
