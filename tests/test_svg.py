"""Tests for SVG header output."""

from datetime import date

import pytest

from ganttline.boundaries import PeriodBoundary
from ganttline.models import HeaderCell, HeaderRender, HeaderTier
from ganttline.renderer import TimelineRenderer
from ganttline.svg import format_coordinate, render_header_group, render_svg_document
from ganttline.zoom import ZoomTemplate


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, "0"),
        (-0.0, "0"),
        (-0.001, "0"),
        (12.0, "12"),
        (-48.0, "-48"),
        (5.142857, "5.14"),
        (0.5, "0.5"),
    ],
)
def test_format_coordinate(value: float, expected: str) -> None:
    assert format_coordinate(value) == expected


def make_result(label: str) -> HeaderRender:
    span = PeriodBoundary(date(2025, 8, 11), date(2025, 8, 17))
    cell = HeaderCell(
        start=span.start,
        end=span.end,
        x=0.0,
        width_px=84.0,
        label=label,
        tier=HeaderTier.PRIMARY,
        y=0,
        height=32,
        css_class="week-day-cell-primary",
    )
    return HeaderRender(
        description="WeekDay level",
        css_class="week-day",
        requested=span,
        expanded=span,
        day_width=12.0,
        primary_height=32,
        secondary_height=24,
        primary=[cell],
    )


def test_labels_escaped() -> None:
    svg = render_header_group(make_result("<b>Launch & Review</b>"))

    assert "&lt;b&gt;Launch &amp; Review&lt;/b&gt;" in svg
    assert "<b>" not in svg


def test_cell_markup() -> None:
    svg = render_header_group(make_result("August 11-17, 2025"))

    assert '<rect x="0" y="0" width="84" height="32" class="week-day-cell-primary"' in svg
    assert '<text x="42" y="16" class="week-day-primary-text"' in svg


def test_error_comment_is_well_formed() -> None:
    result = make_result("x")
    failed = HeaderRender(
        description=result.description,
        css_class=result.css_class,
        requested=result.requested,
        expanded=result.expanded,
        day_width=result.day_width,
        primary_height=32,
        secondary_height=24,
        primary=result.primary,
        secondary_error="Error in WeekDay level (secondary tier): bad -- input",
    )
    svg = render_header_group(failed)

    assert "<!-- Error in WeekDay level (secondary tier): bad - - input -->" in svg
    assert 'class="week-day-error"' in svg
    assert "Secondary header unavailable" in svg


def test_document_viewbox_starts_at_leftmost_cell() -> None:
    result = TimelineRenderer(
        date(2025, 8, 15), date(2025, 8, 20), template=ZoomTemplate.WEEK_DAY
    ).render_headers()
    svg = render_svg_document(result)

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="168" height="56"')
    assert 'viewBox="-48 0 168 56"' in svg
    assert svg.endswith("</svg>")
