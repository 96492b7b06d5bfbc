"""Date-to-pixel coordinate engine shared by headers and task bars."""

from __future__ import annotations

import math
from datetime import date, timedelta

from .exceptions import InvalidRangeError
from .logger import get_logger
from .models import HeaderCell, HeaderTier

# Allowed divergence between a renderer's X position and the canonical one
COORDINATE_TOLERANCE_PX = 1.0


class CoordinateEngine:
    """Maps calendar dates to X positions relative to a fixed origin.

    The origin is captured once and never moves, so boundary expansion for
    header completeness can't shift the coordinate space that task bars use.
    """

    def __init__(
        self,
        origin: date,
        day_width: float,
        *,
        debug: bool = False,
        description: str = "timeline",
    ):
        """Create an engine anchored at ``origin``.

        Args:
            origin: Date drawn at X=0
            day_width: Pixels per calendar day (must be positive)
            debug: Check every validated cell for coordinate drift
            description: Renderer description used in drift warnings
        """
        if day_width <= 0:
            raise ValueError(f"day_width must be positive, got {day_width}")
        self._origin = origin
        self.day_width = day_width
        self.debug = debug
        self.description = description

    @property
    def origin(self) -> date:
        return self._origin

    def coordinate_x(self, day: date) -> float:
        """X position of the left edge of ``day``."""
        return (day - self._origin).days * self.day_width

    def coordinate_width(self, start: date, end: date) -> float:
        """Width of the inclusive range ``[start, end]``.

        Raises:
            InvalidRangeError: If end is before start
        """
        if end < start:
            raise InvalidRangeError(
                f"End date ({end:%Y-%m-%d}) cannot be before start date ({start:%Y-%m-%d})"
            )
        return ((end - start).days + 1) * self.day_width

    def date_at(self, x: float) -> date:
        """Calendar day drawn at X position ``x``."""
        return self._origin + timedelta(days=math.floor(x / self.day_width))

    def check_consistency(self, day: date, actual_x: float, context: str = "header cell") -> bool:
        """Warn when an independently computed X drifts from ``coordinate_x``.

        Only checks when the engine runs in debug mode; returns True when the
        position is within tolerance (or unchecked).
        """
        if not self.debug:
            return True
        expected_x = self.coordinate_x(day)
        if abs(actual_x - expected_x) > COORDINATE_TOLERANCE_PX:
            get_logger().warning(
                "Coordinate inconsistency in %s: %s for %s at X=%.1f, expected X=%.1f. "
                "Use coordinate_x() for consistent positioning.",
                self.description,
                context,
                day.isoformat(),
                actual_x,
                expected_x,
            )
            return False
        return True

    def validated_header_cell(  # noqa: PLR0913 - cell geometry plus content
        self,
        start: date,
        end: date,
        y: float,
        height: float,
        label: str,
        tier: HeaderTier,
        css_class: str = "",
    ) -> HeaderCell:
        """Build a header cell with canonical position and width.

        Every generator goes through here so header geometry never diverges
        from the task-bar geometry computed by the same engine.
        """
        return HeaderCell(
            start=start,
            end=end,
            x=self.coordinate_x(start),
            width_px=self.coordinate_width(start, end),
            label=label,
            tier=tier,
            y=y,
            height=height,
            css_class=css_class,
        )

    def task_bar(self, start: date, end: date) -> tuple[float, float]:
        """``(x, width)`` of a task bar covering ``[start, end]``."""
        return self.coordinate_x(start), self.coordinate_width(start, end)
