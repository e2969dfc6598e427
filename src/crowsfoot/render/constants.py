"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 60.0
"""Default padding around the entire SVG canvas."""

TITLE_HEIGHT: float = 40.0
"""Vertical space reserved for the diagram title."""

LEGEND_GAP: float = 30.0
"""Gap between diagram content and the notation legend."""

# ---------------------------------------------------------------------------
# Connector labels
# ---------------------------------------------------------------------------
LABEL_CHAR_WIDTH: float = 7.0
"""Approximate pixel width per character of a connector label."""

LABEL_BOX_HEIGHT: float = 20.0
"""Height of the background box behind a connector label."""

LABEL_BOX_RADIUS: float = 4.0
"""Corner radius of the connector label box."""

# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
LEGEND_LINE_HEIGHT: float = 28.0
"""Vertical height per notation entry in legend."""

LEGEND_PADDING: float = 12.0
"""Internal padding of legend box."""

LEGEND_SWATCH_WIDTH: float = 48.0
"""Length of the sample connector drawn for each entry."""

LEGEND_TEXT_GAP: float = 12.0
"""Gap between sample connector end and label text."""

LEGEND_CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for legend text sizing."""

LEGEND_BORDER_RADIUS: int = 6
"""Corner radius for legend background rectangle."""
