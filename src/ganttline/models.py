"""Data models for rendered timeline headers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

from .boundaries import PeriodBoundary


class HeaderTier(str, Enum):
    """Header row: coarse primary on top, fine secondary below."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(slots=True, frozen=True)
class HeaderCell:
    """One header cell positioned in the shared coordinate space.

    Recomputed on every render pass and never persisted.
    """

    start: date
    end: date
    x: float
    width_px: float
    label: str
    tier: HeaderTier
    y: float = 0.0
    height: float = 0.0
    css_class: str = ""

    @property
    def label_x(self) -> float:
        """Horizontal center of the cell, where the label is anchored."""
        return self.x + self.width_px / 2

    @property
    def label_y(self) -> float:
        return self.y + self.height / 2

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "x": self.x,
            "width_px": self.width_px,
            "label": self.label,
            "tier": self.tier.value,
        }


@dataclass(slots=True, frozen=True)
class HeaderRender:
    """Result of one header render pass.

    A tier whose generation failed has an empty cell list and a message in
    the matching ``*_error`` field.
    """

    description: str
    css_class: str
    requested: PeriodBoundary
    expanded: PeriodBoundary
    day_width: float
    primary_height: float = 0.0
    secondary_height: float = 0.0
    primary: list[HeaderCell] = field(default_factory=list[HeaderCell])
    secondary: list[HeaderCell] = field(default_factory=list[HeaderCell])
    primary_error: str | None = None
    secondary_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.primary_error is None and self.secondary_error is None

    def cells(self, tier: HeaderTier) -> list[HeaderCell]:
        return self.primary if tier == HeaderTier.PRIMARY else self.secondary

    def error(self, tier: HeaderTier) -> str | None:
        return self.primary_error if tier == HeaderTier.PRIMARY else self.secondary_error

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "css_class": self.css_class,
            "requested": [self.requested.start.isoformat(), self.requested.end.isoformat()],
            "expanded": [self.expanded.start.isoformat(), self.expanded.end.isoformat()],
            "day_width": self.day_width,
            "primary": [cell.to_dict() for cell in self.primary],
            "secondary": [cell.to_dict() for cell in self.secondary],
            "primary_error": self.primary_error,
            "secondary_error": self.secondary_error,
        }
