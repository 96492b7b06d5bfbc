"""Command-line interface for Ganttline."""

from __future__ import annotations

import json
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from . import context
from .boundaries import quarter_description
from .coordinates import CoordinateEngine
from .exceptions import GanttlineError
from .logger import setup_logger
from .models import HeaderRender, HeaderTier
from .svg import render_svg_document
from .transitions import (
    DEFAULT_ZOOM_STEP,
    can_zoom_in,
    can_zoom_out,
    is_at_minimum_day_width,
    next_coarser_template,
    next_finer_template,
)
from .zoom import (
    ZoomState,
    ZoomTemplate,
    default_zoom_state,
    display_task_width,
    effective_day_width,
    is_task_visible,
    task_pixel_width,
)

app = typer.Typer(
    name="ganttline",
    help="Zoomable Gantt timeline headers and task-bar coordinates",
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Output formats for rendered headers."""

    TEXT = "text"
    JSON = "json"
    SVG = "svg"


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=render summary, 2=header cells, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: ganttline.yaml if present)",
        ),
    ] = None,
) -> None:
    """Global options for ganttline commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _parse_date(value: str, name: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        typer.echo(f"Error: Invalid {name} '{value}', expected YYYY-MM-DD", err=True)
        raise typer.Exit(1) from None


def _quarter_span(start: date, end: date) -> str:
    first, last = quarter_description(start), quarter_description(end)
    return first if first == last else f"{first} - {last}"


def _format_text(result: HeaderRender, engine: CoordinateEngine) -> str:
    lines = [
        f"{result.description} (day width {result.day_width:.3f}px)",
        f"Requested: {result.requested.start} .. {result.requested.end}  "
        f"({_quarter_span(result.requested.start, result.requested.end)})",
        f"Expanded:  {result.expanded.start} .. {result.expanded.end}",
    ]
    cells = result.primary + result.secondary
    if cells:
        left = min(cell.x for cell in cells)
        right = max(cell.x + cell.width_px for cell in cells)
        # Sample mid-day so edges on exact day boundaries map to the right date
        half_day = engine.day_width / 2
        first, last = engine.date_at(left + half_day), engine.date_at(right - half_day)
        lines.append(f"Canvas:    {first} .. {last}  (x={left:.2f} .. {right:.2f})")
    for tier in (HeaderTier.PRIMARY, HeaderTier.SECONDARY):
        lines.append("")
        lines.append(f"{tier.value.title()}:")
        error = result.error(tier)
        if error is not None:
            lines.append(f"  ERROR: {error}")
            continue
        for cell in result.cells(tier):
            lines.append(
                f"  {cell.label:<38} {cell.start} .. {cell.end}  "
                f"x={cell.x:9.2f}  width={cell.width_px:8.2f}"
            )
    return "\n".join(lines)


@app.command()
def headers(  # noqa: PLR0913 - CLI command needs multiple options
    start: Annotated[str, typer.Argument(help="First visible day (YYYY-MM-DD)")],
    end: Annotated[str, typer.Argument(help="Last visible day (YYYY-MM-DD)")],
    *,
    template: Annotated[
        ZoomTemplate | None,
        typer.Option("--template", "-t", help="Zoom template (default from config)"),
    ] = None,
    factor: Annotated[
        float | None,
        typer.Option("--factor", "-f", help="Zoom factor, clamped to the template's range"),
    ] = None,
    origin: Annotated[
        str | None,
        typer.Option(
            "--origin",
            help="Coordinate origin drawn at X=0 (YYYY-MM-DD). Defaults to the start date",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", help="Output format")
    ] = OutputFormat.TEXT,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Render timeline header cells for a date range."""
    start_date = _parse_date(start, "start date")
    end_date = _parse_date(end, "end date")
    origin_date = _parse_date(origin, "origin") if origin else None

    try:
        config = context.get_config()
        renderer = config.create_renderer(
            start_date, end_date, template=template, factor=factor, origin=origin_date
        )
        result = renderer.render_headers()
    except (GanttlineError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if output_format == OutputFormat.JSON:
        rendered = json.dumps(result.to_dict(), indent=2)
    elif output_format == OutputFormat.SVG:
        rendered = render_svg_document(result)
    else:
        rendered = _format_text(result, renderer.engine)

    if output:
        output.write_text(rendered + "\n", encoding="utf-8")
        typer.echo(f"Headers written to {output}")
    else:
        typer.echo(rendered)

    if not result.ok:
        raise typer.Exit(1)


@app.command()
def zoom(  # noqa: PLR0913 - CLI command needs multiple options
    template: Annotated[
        ZoomTemplate | None,
        typer.Option("--template", "-t", help="Zoom template (default from config)"),
    ] = None,
    factor: Annotated[
        float | None, typer.Option("--factor", "-f", help="Zoom factor (default from config)")
    ] = None,
    step: Annotated[
        float, typer.Option("--step", help="Factor step for zoom in/out checks")
    ] = DEFAULT_ZOOM_STEP,
    duration: Annotated[
        float | None, typer.Option("--duration", "-d", help="Task duration in days")
    ] = None,
    reset: Annotated[
        bool,
        typer.Option("--reset", help="Start from the default zoom state instead of the config's"),
    ] = False,
) -> None:
    """Show zoom geometry and whether the factor can still move."""
    try:
        config = context.get_config()
    except (GanttlineError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    base = default_zoom_state() if reset else config.zoom_state()
    requested = ZoomState(
        template=template or base.template,
        factor=base.factor if factor is None else factor,
    )
    catalog = config.build_catalog()
    state = requested.clamped(catalog)
    template_config = catalog.get_config(state.template)

    typer.echo(f"Template: {state.template.value} ({template_config.display_name})")
    typer.echo(
        f"Factor: {state.factor:g} (requested {requested.factor:g}, "
        f"range {template_config.min_factor:g}-{template_config.max_factor:g})"
    )
    typer.echo(f"Day width: {effective_day_width(template_config, state.factor):.3f}px")
    zoom_in_ok = can_zoom_in(state.template, state.factor, step, catalog)
    zoom_out_ok = can_zoom_out(state.template, state.factor, step, catalog)
    typer.echo(f"Can zoom in: {'yes' if zoom_in_ok else 'no'}")
    typer.echo(f"Can zoom out: {'yes' if zoom_out_ok else 'no'}")
    if is_at_minimum_day_width(state.template, state.factor, catalog):
        typer.echo("At minimum day width")

    finer = next_finer_template(state.template)
    coarser = next_coarser_template(state.template)
    typer.echo(f"Finer template: {finer.value if finer else '-'}")
    typer.echo(f"Coarser template: {coarser.value if coarser else '-'}")

    if duration is not None:
        width = task_pixel_width(template_config, duration, state.factor)
        line = f"Task width: {width:.2f}px"
        if not is_task_visible(template_config, duration, state.factor):
            shown = display_task_width(template_config, duration, state.factor)
            line += f" (below minimum width, drawn at {shown:.2f}px)"
        typer.echo(line)


@app.command()
def templates() -> None:
    """List zoom templates and their pixel parameters."""
    try:
        catalog = context.get_config().build_catalog()
    except (GanttlineError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    for template, config in catalog.items():
        marker = " (default)" if template == catalog.default_template else ""
        typer.echo(
            f"{template.value:<14} {config.base_unit_width_px:g}px per "
            f"{config.template_unit_days:g}d, "
            f"factor {config.min_factor:g}-{config.max_factor:g}{marker}"
        )


def main() -> int:
    """Main entry point."""
    app()
    return 0


if __name__ == "__main__":
    main()
