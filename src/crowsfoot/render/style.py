"""Theme and style settings for diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for an ER diagram."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    node_corner_radius: float
    node_label_color: str
    edge_color: str
    edge_width: float
    symbol_color: str
    symbol_width: float
    label_color: str
    label_background: str
    label_border: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    legend_background: str
    legend_text_color: str
    legend_font_size: float
    # Plain connectors (no notation)
    arrow_size: float = 8.0
