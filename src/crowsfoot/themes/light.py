"""Light theme (black notation on white entity boxes)."""

from crowsfoot.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    node_fill="#ffffff",
    node_stroke="#d1d5db",
    node_stroke_width=2.0,
    node_corner_radius=8.0,
    node_label_color="#111827",
    edge_color="#374151",
    edge_width=2.0,
    symbol_color="#000000",
    symbol_width=3.0,
    label_color="#374151",
    label_background="#ffffff",
    label_border="#e5e7eb",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#111111",
    title_font_size=22.0,
    legend_background="rgba(0, 0, 0, 0.03)",
    legend_text_color="#333333",
    legend_font_size=13.0,
)
