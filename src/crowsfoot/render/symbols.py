"""Drawing of crow's-foot notation symbols."""

from __future__ import annotations

import drawsvg as draw

from crowsfoot.layout.notation import Symbol, SymbolKind
from crowsfoot.render.style import Theme


def draw_symbols(d: draw.Drawing, symbols: list[Symbol], theme: Theme) -> None:
    """Append lines, hollow circles and crow's-foot prongs to ``d``."""
    line_style = dict(
        stroke=theme.symbol_color,
        stroke_width=theme.symbol_width,
        stroke_linecap="round",
    )
    for symbol in symbols:
        if symbol.kind == SymbolKind.CIRCLE:
            (cx, cy), = symbol.points
            d.append(draw.Circle(
                cx, cy, symbol.radius,
                fill=theme.node_fill,
                stroke=theme.symbol_color,
                stroke_width=2,
            ))
        elif symbol.kind == SymbolKind.LINE:
            (x1, y1), (x2, y2) = symbol.points
            d.append(draw.Line(x1, y1, x2, y2, **line_style))
        else:
            base, *tips = symbol.points
            for tx, ty in tips:
                d.append(draw.Line(base[0], base[1], tx, ty, **line_style))
