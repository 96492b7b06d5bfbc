"""SVG serialization of rendered timeline headers."""

from __future__ import annotations

from html import escape

from .models import HeaderCell, HeaderRender, HeaderTier

# Inline styles keep headers readable when the page stylesheet fails to load
PRIMARY_RECT_STYLE = "fill: #f8f9fa; stroke: #dee2e6; stroke-width: 1px;"
SECONDARY_RECT_STYLE = "fill: #ffffff; stroke: #dee2e6; stroke-width: 1px;"
TEXT_STYLE = "fill: #333333; font-family: 'Segoe UI', Arial, sans-serif;"
ERROR_TEXT_STYLE = "fill: #c0392b; font-family: 'Segoe UI', Arial, sans-serif;"
PRIMARY_FONT = "font-size: 12px; font-weight: 600;"
SECONDARY_FONT = "font-size: 10px; font-weight: 500;"


def format_coordinate(value: float) -> str:
    """Format a coordinate with at most two decimals and no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _cell_lines(cell: HeaderCell, css_class: str) -> list[str]:
    is_primary = cell.tier == HeaderTier.PRIMARY
    rect_style = PRIMARY_RECT_STYLE if is_primary else SECONDARY_RECT_STYLE
    font = PRIMARY_FONT if is_primary else SECONDARY_FONT
    return [
        f'    <rect x="{format_coordinate(cell.x)}" y="{format_coordinate(cell.y)}" '
        f'width="{format_coordinate(cell.width_px)}" height="{format_coordinate(cell.height)}" '
        f'class="{cell.css_class}" style="{rect_style}" />',
        f'    <text x="{format_coordinate(cell.label_x)}" y="{format_coordinate(cell.label_y)}" '
        f'class="{css_class}-{cell.tier.value}-text" text-anchor="middle" '
        f'dominant-baseline="middle" style="{TEXT_STYLE} {font}">{escape(cell.label)}</text>',
    ]


def _error_lines(result: HeaderRender, tier: HeaderTier, message: str) -> list[str]:
    """Visible placeholder for a tier whose generation failed."""
    if tier == HeaderTier.PRIMARY:
        y = result.primary_height / 2
    else:
        y = result.primary_height + result.secondary_height / 2
    # "--" is not allowed inside XML comments
    comment = message.replace("--", "- -")
    return [
        f"    <!-- {escape(comment)} -->",
        f'    <text x="4" y="{format_coordinate(y)}" class="{result.css_class}-error" '
        f'dominant-baseline="middle" style="{ERROR_TEXT_STYLE}">'
        f"{escape(tier.value.title())} header unavailable</text>",
    ]


def render_header_group(result: HeaderRender) -> str:
    """Render both tiers as a ``<g>`` element scoped by the template's CSS class."""
    lines = [
        f"<!-- {escape(result.description)} Headers -->",
        f'<g class="{result.css_class}-headers">',
    ]
    for tier in (HeaderTier.PRIMARY, HeaderTier.SECONDARY):
        error = result.error(tier)
        if error is not None:
            lines.extend(_error_lines(result, tier, error))
            continue
        for cell in result.cells(tier):
            lines.extend(_cell_lines(cell, result.css_class))
    lines.append("</g>")
    return "\n".join(lines)


def render_svg_document(result: HeaderRender) -> str:
    """Standalone SVG document sized to the rendered header cells.

    The viewBox starts at the leftmost cell, which is negative when boundary
    expansion reaches before the coordinate origin.
    """
    cells = result.primary + result.secondary
    if cells:
        min_x = min(cell.x for cell in cells)
        max_x = max(cell.x + cell.width_px for cell in cells)
    else:
        min_x, max_x = 0.0, 0.0
    width = max_x - min_x
    height = result.primary_height + result.secondary_height
    view_box = " ".join(format_coordinate(v) for v in (min_x, 0, width, height))
    return "\n".join(
        [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{format_coordinate(width)}" '
            f'height="{format_coordinate(height)}" viewBox="{view_box}">',
            render_header_group(result),
            "</svg>",
        ]
    )
