"""Tests for zoom transition helpers."""

import pytest

from ganttline.transitions import (
    TEMPLATE_ORDER,
    can_zoom_in,
    can_zoom_out,
    clamp_factor,
    is_at_minimum_day_width,
    next_coarser_template,
    next_finer_template,
    zoom_in,
    zoom_out,
)
from ganttline.zoom import DEFAULT_CATALOG, ZoomState, ZoomTemplate


class TestCanZoom:
    def test_pinned_at_max(self) -> None:
        assert not can_zoom_in(ZoomTemplate.WEEK_DAY, 2.5)
        assert can_zoom_out(ZoomTemplate.WEEK_DAY, 2.5)

    def test_pinned_at_min(self) -> None:
        assert can_zoom_in(ZoomTemplate.WEEK_DAY, 1.0)
        assert not can_zoom_out(ZoomTemplate.WEEK_DAY, 1.0)

    def test_change_below_epsilon_is_no_change(self) -> None:
        """Within 0.001 of the max, a full step still barely moves the factor."""
        assert not can_zoom_in(ZoomTemplate.WEEK_DAY, 2.4995)

    def test_tiny_step(self) -> None:
        assert not can_zoom_in(ZoomTemplate.MONTH_WEEK, 2.0, step=0.0005)
        assert can_zoom_in(ZoomTemplate.MONTH_WEEK, 2.0, step=0.01)

    def test_custom_catalog(self) -> None:
        catalog = DEFAULT_CATALOG.with_overrides({ZoomTemplate.WEEK_DAY: {"max_factor": 3.0}})

        assert can_zoom_in(ZoomTemplate.WEEK_DAY, 2.5, catalog=catalog)

    def test_clamp_factor(self) -> None:
        assert clamp_factor(ZoomTemplate.QUARTER_MONTH, 9.0) == 3.5
        assert clamp_factor(ZoomTemplate.QUARTER_MONTH, 0.0) == 1.0


class TestZoomSteps:
    def test_zoom_in(self) -> None:
        state = zoom_in(ZoomState(template=ZoomTemplate.MONTH_WEEK, factor=2.0))

        assert state.template == ZoomTemplate.MONTH_WEEK
        assert state.factor == pytest.approx(2.1)

    def test_zoom_in_clamps(self) -> None:
        state = zoom_in(ZoomState(template=ZoomTemplate.WEEK_DAY, factor=2.45))

        assert state.factor == 2.5

    def test_zoom_out_clamps(self) -> None:
        state = zoom_out(ZoomState(template=ZoomTemplate.WEEK_DAY, factor=1.05), step=0.5)

        assert state.factor == 1.0

    def test_input_state_unchanged(self) -> None:
        state = ZoomState(template=ZoomTemplate.WEEK_DAY, factor=1.5)
        zoom_in(state)

        assert state.factor == 1.5


def test_minimum_day_width() -> None:
    """Month-Week at factor 7/6 draws each day exactly 3px wide."""
    assert is_at_minimum_day_width(ZoomTemplate.MONTH_WEEK, 7 / 6)
    assert not is_at_minimum_day_width(ZoomTemplate.WEEK_DAY, 1.0)


class TestTemplateOrder:
    def test_order_coarse_to_fine(self) -> None:
        assert TEMPLATE_ORDER == (
            ZoomTemplate.YEAR_QUARTER,
            ZoomTemplate.QUARTER_MONTH,
            ZoomTemplate.MONTH_WEEK,
            ZoomTemplate.WEEK_DAY,
        )

    def test_next_finer(self) -> None:
        assert next_finer_template(ZoomTemplate.YEAR_QUARTER) == ZoomTemplate.QUARTER_MONTH
        assert next_finer_template(ZoomTemplate.MONTH_WEEK) == ZoomTemplate.WEEK_DAY
        assert next_finer_template(ZoomTemplate.WEEK_DAY) is None

    def test_next_coarser(self) -> None:
        assert next_coarser_template(ZoomTemplate.WEEK_DAY) == ZoomTemplate.MONTH_WEEK
        assert next_coarser_template(ZoomTemplate.QUARTER_MONTH) == ZoomTemplate.YEAR_QUARTER
        assert next_coarser_template(ZoomTemplate.YEAR_QUARTER) is None
