"""Timeline header rendering.

A ``TimelineRenderer`` is built for one render pass: it resolves the zoom
template's configuration, fixes the coordinate origin and produces both header
tiers for a requested date range.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from enum import Enum
from typing import Any

from .boundaries import PeriodBoundary
from .coordinates import CoordinateEngine
from .exceptions import RenderFailure
from .labels import DateLabelFormatter, LabelFormatter
from .logger import get_logger
from .models import HeaderCell, HeaderRender, HeaderTier
from .svg import render_header_group
from .templates import TemplateGenerator, select_generator
from .zoom import (
    DEFAULT_CATALOG,
    DEFAULT_ZOOM_FACTOR,
    ZoomCatalog,
    ZoomState,
    ZoomTemplate,
    effective_day_width,
    task_pixel_width,
)

DEFAULT_PRIMARY_HEIGHT = 32
DEFAULT_SECONDARY_HEIGHT = 24


class ExpansionStrategy(str, Enum):
    """How the requested range is widened so edge header cells aren't clipped."""

    UNION = "union"  # Union of whole primary-tier and secondary-tier periods
    TEMPLATE_UNIT_PADDING = "template_unit_padding"  # One template unit on each side


class TimelineRenderer:
    """Renders both header tiers for one zoom template and date range.

    Rendering never mutates the renderer, so one instance can serve repeated
    or concurrent ``render_headers()`` calls.
    """

    def __init__(  # noqa: PLR0913 - keyword-only rendering options
        self,
        start: date,
        end: date,
        *,
        template: ZoomTemplate | str = ZoomTemplate.QUARTER_MONTH,
        factor: float = DEFAULT_ZOOM_FACTOR,
        origin: date | None = None,
        catalog: ZoomCatalog | None = None,
        formatter: LabelFormatter | None = None,
        primary_height: int = DEFAULT_PRIMARY_HEIGHT,
        secondary_height: int = DEFAULT_SECONDARY_HEIGHT,
        expansion: ExpansionStrategy = ExpansionStrategy.UNION,
        debug: bool = False,
    ):
        """Create a renderer for the requested range.

        Args:
            start: First requested day (inclusive)
            end: Last requested day (inclusive)
            template: Zoom template selecting the header generator
            factor: Zoom factor, clamped into the template's range
            origin: Date drawn at X=0. Defaults to ``start``; pass the task-bar
                    painter's origin when headers and bars are drawn separately
            catalog: Template configurations (defaults to the reference catalog)
            formatter: Label formatter (defaults to English labels)
            primary_height: Height of the top header row in pixels
            secondary_height: Height of the bottom header row in pixels
            expansion: Boundary expansion strategy
            debug: Check every header cell for coordinate drift

        Raises:
            InvalidRangeError: If end is before start
            UnsupportedConfigurationError: If the template has no generator
            ValueError: If a header height is not positive
        """
        self.requested = PeriodBoundary(start, end)
        if primary_height <= 0:
            raise ValueError("primary_height must be positive")
        if secondary_height <= 0:
            raise ValueError("secondary_height must be positive")

        self.generator: TemplateGenerator = select_generator(template)
        self.template = self.generator.template
        self.config = (catalog or DEFAULT_CATALOG).get_config(self.template)
        self.factor = self.config.clamp(factor)
        self.formatter: LabelFormatter = formatter or DateLabelFormatter()
        self.primary_height = primary_height
        self.secondary_height = secondary_height
        self.expansion = ExpansionStrategy(expansion)

        # Locked for the lifetime of the renderer so headers and task bars share it
        self.engine = CoordinateEngine(
            origin or start,
            effective_day_width(self.config, self.factor),
            debug=debug,
            description=self.description,
        )

    @classmethod
    def from_state(
        cls, state: ZoomState, start: date, end: date, **kwargs: Any
    ) -> TimelineRenderer:
        """Build a renderer from a caller-owned zoom state."""
        return cls(start, end, template=state.template, factor=state.factor, **kwargs)

    @property
    def description(self) -> str:
        return self.generator.description

    @property
    def css_class(self) -> str:
        return self.generator.css_class

    @property
    def day_width(self) -> float:
        return self.engine.day_width

    @property
    def origin(self) -> date:
        return self.engine.origin

    @property
    def total_header_height(self) -> int:
        return self.primary_height + self.secondary_height

    def expanded_range(self) -> PeriodBoundary:
        """Requested range widened so no header cell is clipped at either edge."""
        if self.expansion == ExpansionStrategy.TEMPLATE_UNIT_PADDING:
            padding = timedelta(days=math.ceil(self.config.template_unit_days))
            return PeriodBoundary(self.requested.start - padding, self.requested.end + padding)
        return self.generator.union_boundaries(self.requested)

    def render_headers(self) -> HeaderRender:
        """Render both header tiers over the expanded range.

        A failure in one tier is logged and reported on the result; the other
        tier is still rendered.
        """
        expanded = self.expanded_range()
        get_logger().render(
            "Rendering %s: requested %s..%s, expanded %s..%s, day width %.3fpx",
            self.description,
            self.requested.start.isoformat(),
            self.requested.end.isoformat(),
            expanded.start.isoformat(),
            expanded.end.isoformat(),
            self.day_width,
        )

        primary, primary_error = self._render_tier(
            HeaderTier.PRIMARY, expanded, y=0, height=self.primary_height
        )
        secondary, secondary_error = self._render_tier(
            HeaderTier.SECONDARY, expanded, y=self.primary_height, height=self.secondary_height
        )

        return HeaderRender(
            description=self.description,
            css_class=self.css_class,
            requested=self.requested,
            expanded=expanded,
            day_width=self.day_width,
            primary_height=self.primary_height,
            secondary_height=self.secondary_height,
            primary=primary,
            secondary=secondary,
            primary_error=primary_error,
            secondary_error=secondary_error,
        )

    def _render_tier(
        self, tier: HeaderTier, expanded: PeriodBoundary, *, y: int, height: int
    ) -> tuple[list[HeaderCell], str | None]:
        try:
            cells = self.generator.generate(
                tier, expanded, self.engine, self.formatter, y=y, height=height
            )
        except Exception as exc:  # noqa: BLE001 - one failing tier must not blank the other
            failure = RenderFailure(tier.value, self.description, exc)
            get_logger().error("%s", failure, exc_info=exc)
            return [], str(failure)
        return cells, None

    def render_svg(self) -> str:
        """Render headers as an SVG ``<g>`` fragment."""
        return render_header_group(self.render_headers())

    # === TASK BAR ALIGNMENT ===

    def task_bar(self, start: date, end: date) -> tuple[float, float]:
        """``(x, width)`` of a task bar, in the same coordinate space as the headers."""
        return self.engine.task_bar(start, end)

    def task_width(self, duration_days: float) -> float:
        return task_pixel_width(self.config, duration_days, self.factor)
