"""Shared shape of the per-template header generators.

Each zoom template is a plain record of two tiers. A tier pairs a boundary
function from ``ganttline.boundaries`` with a label function; the iteration
that turns a date range into cells is the same for every tier.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta

from ..boundaries import PeriodBoundary
from ..coordinates import CoordinateEngine
from ..labels import LabelFormatter
from ..logger import cells_enabled, get_logger
from ..models import HeaderCell, HeaderTier
from ..zoom import ZoomTemplate

BoundaryFunction = Callable[[date, date | None], PeriodBoundary]
LabelFunction = Callable[[LabelFormatter, PeriodBoundary], str]


@dataclass(slots=True, frozen=True)
class TierSpec:
    """Period and label functions for one header tier."""

    name: str  # Period name for logging, e.g. "quarter"
    boundary_fn: BoundaryFunction
    label_fn: LabelFunction


@dataclass(slots=True, frozen=True)
class TemplateGenerator:
    """Header generator for one zoom template."""

    template: ZoomTemplate
    primary: TierSpec
    secondary: TierSpec
    css_class: str
    description: str

    def tier(self, tier: HeaderTier) -> TierSpec:
        return self.primary if tier == HeaderTier.PRIMARY else self.secondary

    def union_boundaries(self, requested: PeriodBoundary) -> PeriodBoundary:
        """Smallest range containing whole periods of both tiers.

        For composite templates the tiers disagree (a month rarely starts on
        a Monday), so the earliest start and latest end win.
        """
        primary = self.primary.boundary_fn(requested.start, requested.end)
        secondary = self.secondary.boundary_fn(requested.start, requested.end)
        return PeriodBoundary(
            min(primary.start, secondary.start), max(primary.end, secondary.end)
        )

    def generate(  # noqa: PLR0913 - tier geometry plus collaborators
        self,
        tier: HeaderTier,
        expanded: PeriodBoundary,
        engine: CoordinateEngine,
        formatter: LabelFormatter,
        *,
        y: float,
        height: float,
    ) -> list[HeaderCell]:
        return generate_tier(
            self.tier(tier),
            tier,
            expanded,
            engine,
            formatter,
            y=y,
            height=height,
            css_class=f"{self.css_class}-cell-{tier.value}",
        )


def generate_tier(  # noqa: PLR0913 - tier geometry plus collaborators
    tier_spec: TierSpec,
    tier: HeaderTier,
    expanded: PeriodBoundary,
    engine: CoordinateEngine,
    formatter: LabelFormatter,
    *,
    y: float,
    height: float,
    css_class: str,
) -> list[HeaderCell]:
    """Emit one cell per period from the period containing ``expanded.start``.

    Stops once a period starts after ``expanded.end``. In debug mode each
    cell's left edge is checked against the right edge of the previous one,
    so a boundary function that skips or repeats days is reported.
    """
    logger = get_logger()
    log_cells = cells_enabled()
    cells: list[HeaderCell] = []

    current = expanded.start
    while current <= expanded.end:
        period = tier_spec.boundary_fn(current, current)
        label = tier_spec.label_fn(formatter, period)
        if cells:
            previous = cells[-1]
            engine.check_consistency(
                period.start,
                previous.x + previous.width_px,
                f"{tier.value} cell {label!r}",
            )
        cell = engine.validated_header_cell(
            period.start, period.end, y, height, label, tier, css_class
        )
        cells.append(cell)
        if log_cells:
            logger.cells(
                "  %s %s %r: %s..%s x=%.2f width=%.2f",
                tier.value,
                tier_spec.name,
                label,
                period.start.isoformat(),
                period.end.isoformat(),
                cell.x,
                cell.width_px,
            )
        current = period.end + timedelta(days=1)

    return cells
