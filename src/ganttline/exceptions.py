"""Custom exceptions for Ganttline."""


class GanttlineError(Exception):
    """Base exception for all Ganttline errors."""

    pass


class InvalidRangeError(GanttlineError, ValueError):
    """Raised when a date range ends before it starts."""

    pass


class UnsupportedConfigurationError(GanttlineError):
    """Raised when no header generator exists for a zoom template."""

    pass


class RenderFailure(GanttlineError):
    """Raised when generating one header tier fails.

    Never escapes ``TimelineRenderer.render_headers``; the failing tier is
    replaced with an inline placeholder instead.
    """

    def __init__(self, tier: str, description: str, cause: Exception):
        super().__init__(f"Error in {description} ({tier} tier): {cause}")
        self.tier = tier
        self.description = description
        self.cause = cause


class ConfigError(GanttlineError):
    """Raised when the configuration file is empty or invalid."""

    pass
