"""Pytest configuration and fixtures for ganttline tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

import pytest

from ganttline.logger import reset_logger
from ganttline.models import HeaderRender
from ganttline.renderer import TimelineRenderer
from ganttline.zoom import ZoomTemplate

ALL_TEMPLATES: list[ZoomTemplate] = list(ZoomTemplate)


@pytest.fixture(autouse=True)
def clean_logger() -> None:
    """Reset the ganttline logger before each test for isolation."""
    reset_logger()


@pytest.fixture
def render() -> Callable[..., HeaderRender]:
    """Factory rendering headers for a template and inclusive date range."""

    def _render(template: ZoomTemplate, start: date, end: date, **kwargs: Any) -> HeaderRender:
        return TimelineRenderer(start, end, template=template, **kwargs).render_headers()

    return _render


def labels(cells: list[Any]) -> list[str]:
    """Labels of a list of header cells, in order."""
    return [cell.label for cell in cells]


def assert_contiguous(cells: list[Any]) -> None:
    """Assert each cell starts exactly where the previous one ends."""
    for previous, current in zip(cells, cells[1:], strict=False):
        assert (current.start - previous.end).days == 1, (
            f"Gap between {previous.label!r} and {current.label!r}"
        )
        assert current.x == pytest.approx(previous.x + previous.width_px), (
            f"{current.label!r} at x={current.x}, expected {previous.x + previous.width_px}"
        )
