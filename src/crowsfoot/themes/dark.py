"""Dark grey theme."""

from crowsfoot.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_fill="#3a3a3a",
    node_stroke="#5a5a5a",
    node_stroke_width=1.5,
    node_corner_radius=8.0,
    node_label_color="#e0e0e0",
    edge_color="#bbbbbb",
    edge_width=2.0,
    symbol_color="#ffffff",
    symbol_width=2.5,
    label_color="#e0e0e0",
    label_background="#2b2b2b",
    label_border="rgba(255, 255, 255, 0.2)",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#ffffff",
    title_font_size=22.0,
    legend_background="rgba(0, 0, 0, 0.3)",
    legend_text_color="#e0e0e0",
    legend_font_size=13.0,
)
