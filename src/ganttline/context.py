"""CLI-wide state: the selected config file and its loaded contents."""

from __future__ import annotations

from pathlib import Path

from .config import GanttlineConfig, resolve_config


class _Context:
    def __init__(self) -> None:
        self.config_path: Path | None = None
        self.config: GanttlineConfig | None = None


_context = _Context()


def set_config_path(path: Path | None) -> None:
    """Select the config file; the previously loaded config is discarded."""
    _context.config_path = path
    _context.config = None


def get_config() -> GanttlineConfig:
    """Loaded configuration, read from disk on first use."""
    if _context.config is None:
        _context.config = resolve_config(_context.config_path)
    return _context.config
