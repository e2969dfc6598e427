"""Geometry constants shared by routing and notation.

Path routing and symbol placement read the same values so crow's-foot
symbols line up with the routed connector regardless of hop arcs.
"""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
PERPENDICULAR_OFFSET: float = 30.0
"""Straight run out of a node before routing turns.

Notation symbols reach about 20px from the anchor, so 30px clears them.
"""

COORD_TOLERANCE: float = 1.0
"""Tolerance for treating offset points as aligned (same X or same Y)."""

# ---------------------------------------------------------------------------
# Intersections and hop-over arcs
# ---------------------------------------------------------------------------
PARALLEL_TOLERANCE: float = 1e-10
"""Determinant magnitude below which two segments count as parallel."""

INTERSECTION_T_MIN: float = 0.1
"""Crossings closer to a segment start than this are corner artifacts."""

INTERSECTION_T_MAX: float = 0.9
"""Crossings closer to a segment end than this are corner artifacts."""

HOP_OVER_HEIGHT: float = 10.0
"""Perpendicular offset of a hop arc's control point."""

HOP_WINDOW: float = 0.15
"""Half-width (in segment parameter t) cut out around each crossing."""

# ---------------------------------------------------------------------------
# Notation
# ---------------------------------------------------------------------------
CROWFOOT_OFFSET: float = 15.0
"""Distance from the anchor to the point where crow's-foot prongs meet."""

CROWFOOT_LINE_LENGTH: float = 11.52
"""Length of each crow's-foot prong and of the mandatory 4th line."""

CROWFOOT_FAN_ANGLE: float = 40.0
"""Angle in degrees between the central prong and each side prong."""

CIRCLE_RADIUS: float = 4.86
"""Radius of the hollow optionality circle."""

CIRCLE_OFFSET: float = 8.0
"""Distance from the anchor to a circle paired with a "one" line."""

CIRCLE_CROWFOOT_GAP: float = 6.0
"""Distance past the crow's-foot base to a circle paired with it."""

ONE_LINE_LENGTH: float = 16.0
"""Length of the perpendicular "one" bar."""

ONE_LINE_OFFSET_OPTIONAL: float = 16.0
"""Distance from the anchor to the bar of a "zero or one" end."""

ONE_LINE_OFFSET_MANDATORY: float = 12.0
"""Distance from the anchor to the bar pair of a "one and only one" end."""

MANDATORY_LINE_SPACING: float = 8.0
"""Spacing between the two bars of a "one and only one" end."""
