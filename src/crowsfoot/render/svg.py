"""SVG generation for ER diagrams using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from crowsfoot.layout.constants import HOP_OVER_HEIGHT, PERPENDICULAR_OFFSET
from crowsfoot.layout.geometry import ConnectorGeometry, compute_diagram_geometry
from crowsfoot.layout.routing.common import LineTo, MoveTo, QuadTo
from crowsfoot.parser.model import Diagram
from crowsfoot.render.constants import (
    CANVAS_PADDING,
    LABEL_BOX_HEIGHT,
    LABEL_BOX_RADIUS,
    LABEL_CHAR_WIDTH,
    LEGEND_GAP,
    TITLE_HEIGHT,
)
from crowsfoot.render.legend import compute_legend_dimensions, render_legend
from crowsfoot.render.style import Theme
from crowsfoot.render.symbols import draw_symbols


def _content_bounds(
    diagram: Diagram, geometries: dict[str, ConnectorGeometry]
) -> tuple[float, float, float, float]:
    xs: list[float] = []
    ys: list[float] = []
    for node in diagram.nodes.values():
        xs += [node.x, node.x + node.width]
        ys += [node.y, node.y + node.height]
    for geom in geometries.values():
        for x, y in geom.path.points():
            xs.append(x)
            ys.append(y)
    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (min(xs), min(ys), max(xs), max(ys))


def render_svg(
    diagram: Diagram,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
    legend: bool = True,
    perpendicular_offset: float = PERPENDICULAR_OFFSET,
    hop_height: float = HOP_OVER_HEIGHT,
) -> str:
    """Render a diagram to an SVG string."""
    if not diagram.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    geometries = compute_diagram_geometry(
        diagram.nodes,
        diagram.edges,
        perpendicular_offset=perpendicular_offset,
        hop_height=hop_height,
    )
    min_x, min_y, max_x, max_y = _content_bounds(diagram, geometries)

    top = min_y - padding - (TITLE_HEIGHT if diagram.title else 0)
    left = min_x - padding

    legend_w, legend_h = compute_legend_dimensions(theme) if legend else (0.0, 0.0)
    auto_width = max(max_x - min_x, legend_w) + padding * 2
    auto_height = (max_y - top) + padding
    if legend:
        auto_height += LEGEND_GAP + legend_h

    svg_width = width or int(auto_width)
    svg_height = height or int(auto_height)

    d = draw.Drawing(svg_width, svg_height, origin=(left, top))
    d.append(draw.Rectangle(left, top, svg_width, svg_height, fill=theme.background_color))

    if diagram.title:
        d.append(draw.Text(
            diagram.title,
            theme.title_font_size,
            min_x, top + padding / 2 + theme.title_font_size / 2,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    # Connectors behind entity boxes so anchors sit on the box border
    _render_connectors(d, geometries, theme)
    _render_nodes(d, diagram, theme)
    for geom in geometries.values():
        draw_symbols(d, geom.symbols, theme)
    _render_labels(d, geometries, theme)

    if legend:
        render_legend(d, theme, min_x, max_y + LEGEND_GAP)

    return d.as_svg()


def _render_nodes(d: draw.Drawing, diagram: Diagram, theme: Theme) -> None:
    """Render entity boxes with their labels centered."""
    for node in diagram.nodes.values():
        d.append(draw.Rectangle(
            node.x, node.y, node.width, node.height,
            rx=theme.node_corner_radius, ry=theme.node_corner_radius,
            fill=theme.node_fill,
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
        ))
        cx, cy = node.center
        d.append(draw.Text(
            node.label,
            theme.label_font_size + 2,
            cx, cy,
            fill=theme.node_label_color,
            font_family=theme.label_font_family,
            font_weight="bold",
            text_anchor="middle",
            dominant_baseline="central",
        ))


def _arrow_marker(theme: Theme) -> draw.Marker:
    arrow = draw.Marker(-0.1, -0.51, 0.9, 0.5, scale=theme.arrow_size / 2, orient="auto")
    arrow.append(draw.Lines(-0.1, 0.5, -0.1, -0.5, 0.9, 0, fill=theme.edge_color, close=True))
    return arrow


def _render_connectors(
    d: draw.Drawing,
    geometries: dict[str, ConnectorGeometry],
    theme: Theme,
) -> None:
    """Render connector paths, hop arcs included."""
    arrow = None
    for geom in geometries.values():
        if not geom.path.commands:
            continue

        kwargs = {}
        if geom.show_arrow:
            if arrow is None:
                arrow = _arrow_marker(theme)
            kwargs["marker_end"] = arrow

        path = draw.Path(
            stroke=theme.edge_color,
            stroke_width=theme.edge_width,
            fill="none",
            stroke_linejoin="round",
            **kwargs,
        )
        for cmd in geom.path.commands:
            if isinstance(cmd, MoveTo):
                path.M(*cmd.point)
            elif isinstance(cmd, LineTo):
                path.L(*cmd.point)
            elif isinstance(cmd, QuadTo):
                path.Q(*cmd.control, *cmd.point)
        d.append(path)


def _render_labels(
    d: draw.Drawing,
    geometries: dict[str, ConnectorGeometry],
    theme: Theme,
) -> None:
    """Render connector labels on a bordered background box."""
    for geom in geometries.values():
        if not geom.label:
            continue
        x, y = geom.label_point
        box_w = len(geom.label) * LABEL_CHAR_WIDTH
        d.append(draw.Rectangle(
            x - box_w / 2, y - LABEL_BOX_HEIGHT / 2,
            box_w, LABEL_BOX_HEIGHT,
            rx=LABEL_BOX_RADIUS, ry=LABEL_BOX_RADIUS,
            fill=theme.label_background,
            stroke=theme.label_border,
            stroke_width=1,
        ))
        d.append(draw.Text(
            geom.label,
            theme.label_font_size,
            x, y,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            font_weight=500,
            text_anchor="middle",
            dominant_baseline="middle",
        ))
