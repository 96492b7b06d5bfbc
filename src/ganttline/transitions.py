"""Zoom transitions for an external zoom controller.

A hybrid controller first tries a continuous factor step within the current
template and only switches template when the factor is pinned at a boundary.
These helpers answer "can the factor still move?" and "which template next?".
"""

from __future__ import annotations

from .zoom import (
    DEFAULT_CATALOG,
    MIN_EFFECTIVE_DAY_WIDTH_PX,
    ZoomCatalog,
    ZoomState,
    ZoomTemplate,
    effective_day_width,
)

# Factor changes at or below this are treated as no change
FACTOR_EPSILON = 0.001
DEFAULT_ZOOM_STEP = 0.1

# Coarsest to finest
TEMPLATE_ORDER: tuple[ZoomTemplate, ...] = (
    ZoomTemplate.YEAR_QUARTER,
    ZoomTemplate.QUARTER_MONTH,
    ZoomTemplate.MONTH_WEEK,
    ZoomTemplate.WEEK_DAY,
)


def clamp_factor(
    template: ZoomTemplate, factor: float, catalog: ZoomCatalog = DEFAULT_CATALOG
) -> float:
    return catalog.get_config(template).clamp(factor)


def _can_move(
    template: ZoomTemplate, factor: float, delta: float, catalog: ZoomCatalog
) -> bool:
    return abs(clamp_factor(template, factor + delta, catalog) - factor) > FACTOR_EPSILON


def can_zoom_in(
    template: ZoomTemplate,
    factor: float,
    step: float = DEFAULT_ZOOM_STEP,
    catalog: ZoomCatalog = DEFAULT_CATALOG,
) -> bool:
    """True if increasing the factor by ``step`` would actually change it."""
    return _can_move(template, factor, step, catalog)


def can_zoom_out(
    template: ZoomTemplate,
    factor: float,
    step: float = DEFAULT_ZOOM_STEP,
    catalog: ZoomCatalog = DEFAULT_CATALOG,
) -> bool:
    """True if decreasing the factor by ``step`` would actually change it."""
    return _can_move(template, factor, -step, catalog)


def zoom_in(
    state: ZoomState, step: float = DEFAULT_ZOOM_STEP, catalog: ZoomCatalog = DEFAULT_CATALOG
) -> ZoomState:
    """Next zoom state with the factor raised by ``step`` and clamped."""
    factor = clamp_factor(state.template, state.factor + step, catalog)
    return state.model_copy(update={"factor": factor})


def zoom_out(
    state: ZoomState, step: float = DEFAULT_ZOOM_STEP, catalog: ZoomCatalog = DEFAULT_CATALOG
) -> ZoomState:
    """Next zoom state with the factor lowered by ``step`` and clamped."""
    factor = clamp_factor(state.template, state.factor - step, catalog)
    return state.model_copy(update={"factor": factor})


def is_at_minimum_day_width(
    template: ZoomTemplate, factor: float, catalog: ZoomCatalog = DEFAULT_CATALOG
) -> bool:
    day_width = effective_day_width(catalog.get_config(template), factor)
    return abs(day_width - MIN_EFFECTIVE_DAY_WIDTH_PX) < FACTOR_EPSILON


def next_finer_template(template: ZoomTemplate) -> ZoomTemplate | None:
    """Template one level closer to daily detail, or None at Week-Day."""
    index = TEMPLATE_ORDER.index(template)
    return TEMPLATE_ORDER[index + 1] if index + 1 < len(TEMPLATE_ORDER) else None


def next_coarser_template(template: ZoomTemplate) -> ZoomTemplate | None:
    """Template one level closer to the yearly overview, or None at Year-Quarter."""
    index = TEMPLATE_ORDER.index(template)
    return TEMPLATE_ORDER[index - 1] if index > 0 else None
