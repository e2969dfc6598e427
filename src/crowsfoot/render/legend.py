"""Notation legend for ER diagram SVGs."""

from __future__ import annotations

import drawsvg as draw

from crowsfoot.layout.anchors import ResolvedAnchor
from crowsfoot.layout.notation import EndRole, Symbol, end_symbols
from crowsfoot.parser.model import AnchorSide, CardinalityEnd, Multiplicity
from crowsfoot.render.constants import (
    LEGEND_BORDER_RADIUS,
    LEGEND_CHAR_WIDTH_RATIO,
    LEGEND_LINE_HEIGHT,
    LEGEND_PADDING,
    LEGEND_SWATCH_WIDTH,
    LEGEND_TEXT_GAP,
)
from crowsfoot.render.style import Theme
from crowsfoot.render.symbols import draw_symbols

LEGEND_ENTRIES: list[tuple[str, CardinalityEnd]] = [
    ("One and only one", CardinalityEnd(Multiplicity.ONE, optional=False)),
    ("Zero or one", CardinalityEnd(Multiplicity.ONE, optional=True)),
    ("One or many", CardinalityEnd(Multiplicity.MANY, optional=False)),
    ("Zero or many", CardinalityEnd(Multiplicity.MANY, optional=True)),
]


def compute_legend_dimensions(theme: Theme) -> tuple[float, float]:
    """Compute the width and height of the legend without rendering it."""
    max_name_len = max(len(name) for name, _ in LEGEND_ENTRIES)
    char_width = theme.legend_font_size * LEGEND_CHAR_WIDTH_RATIO
    text_offset = LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP

    width = LEGEND_PADDING * 2 + text_offset + max_name_len * char_width
    height = LEGEND_PADDING * 2 + len(LEGEND_ENTRIES) * LEGEND_LINE_HEIGHT
    return (width, height)


def legend_entry_symbols(x: float, y: float, end: CardinalityEnd) -> list[Symbol]:
    """Symbols for a sample connector leaving an entity at (x, y) to the right."""
    side = AnchorSide.RIGHT
    anchor = ResolvedAnchor((x, y), side.direction, side.angle, side)
    return end_symbols(anchor, end, EndRole.SOURCE)


def render_legend(drawing: draw.Drawing, theme: Theme, x: float, y: float) -> None:
    """Render a legend of the four crow's-foot end states.

    Positioned at (x, y), drawing downward. Each entry is a short sample
    connector with the entity on its left.
    """
    legend_width, legend_height = compute_legend_dimensions(theme)

    drawing.append(
        draw.Rectangle(
            x,
            y,
            legend_width,
            legend_height,
            rx=LEGEND_BORDER_RADIUS,
            ry=LEGEND_BORDER_RADIUS,
            fill=theme.legend_background,
        )
    )

    for i, (name, end) in enumerate(LEGEND_ENTRIES):
        entry_y = y + LEGEND_PADDING + i * LEGEND_LINE_HEIGHT + LEGEND_LINE_HEIGHT / 2
        start_x = x + LEGEND_PADDING

        drawing.append(
            draw.Line(
                start_x,
                entry_y,
                start_x + LEGEND_SWATCH_WIDTH,
                entry_y,
                stroke=theme.edge_color,
                stroke_width=theme.edge_width,
            )
        )
        draw_symbols(drawing, legend_entry_symbols(start_x, entry_y, end), theme)

        drawing.append(
            draw.Text(
                name,
                theme.legend_font_size,
                start_x + LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP,
                entry_y,
                fill=theme.legend_text_color,
                font_family=theme.label_font_family,
                dominant_baseline="central",
            )
        )
