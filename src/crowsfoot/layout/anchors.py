"""Anchor resolution: node id + anchor name -> connection point and direction.

Anchor names follow the canvas handle naming: the four sides
(``"top"``, ``"right"``...) and sub-positions along a side
(``"top-left"``, ``"left-bottom"``...). Source handles carry a ``src-``
prefix, which is ignored here.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from crowsfoot.parser.model import AnchorSide, Edge, Node

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_ANCHOR = "bottom"
DEFAULT_TARGET_ANCHOR = "top"

# Fractional positions along a side for sub-position handles
_TOP_BOTTOM_POSITIONS: dict[str, float] = {"left": 0.0, "center": 0.5, "right": 1.0}
_LEFT_RIGHT_POSITIONS: dict[str, float] = {"top": 0.25, "center": 0.5, "bottom": 0.75}


@dataclass(frozen=True)
class Anchor:
    """A side of a node plus a fractional position along that side."""

    side: AnchorSide
    fraction: float = 0.5


@dataclass(frozen=True)
class ResolvedAnchor:
    """A concrete connection point.

    ``direction`` is the unit vector the connector leaves the node along
    (zero when unresolvable). ``angle`` is the direction notation symbols
    are laid out along, in degrees. ``side`` is None for fallback anchors.
    """

    point: tuple[float, float]
    direction: tuple[float, float]
    angle: float
    side: AnchorSide | None = None


def parse_anchor(name: str | None) -> Anchor | None:
    """Parse an anchor name, returning None if it names no side."""
    if not name:
        return None
    key = name.strip().lower()
    if key.startswith("src-"):
        key = key[4:]

    side_name, _, position = key.partition("-")
    try:
        side = AnchorSide(side_name)
    except ValueError:
        return None

    if not position:
        return Anchor(side)

    positions = _LEFT_RIGHT_POSITIONS if side.is_horizontal else _TOP_BOTTOM_POSITIONS
    fraction = positions.get(position)
    if fraction is None:
        return None
    return Anchor(side, fraction)


def anchor_point(node: Node, anchor: Anchor) -> tuple[float, float]:
    """Return the boundary point of ``node`` for ``anchor``."""
    side = anchor.side
    if side == AnchorSide.TOP:
        return (node.x + node.width * anchor.fraction, node.y)
    if side == AnchorSide.BOTTOM:
        return (node.x + node.width * anchor.fraction, node.y + node.height)
    if side == AnchorSide.LEFT:
        return (node.x, node.y + node.height * anchor.fraction)
    return (node.x + node.width, node.y + node.height * anchor.fraction)


def fallback_direction(
    source: tuple[float, float],
    target: tuple[float, float],
    is_source: bool,
) -> tuple[tuple[float, float], float]:
    """Direction for an end without a side anchor.

    The routing direction is perpendicular to the straight source->target
    line (rotated one way at the source, the other way at the target).
    The notation angle follows the line itself: toward the target at the
    source, toward the source at the target.
    """
    dx = target[0] - source[0]
    dy = target[1] - source[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return (0.0, 0.0), 0.0

    base_angle = math.degrees(math.atan2(dy, dx))
    if is_source:
        return (-dy / length, dx / length), base_angle
    return (dy / length, -dx / length), (base_angle + 180) % 360


def _provisional_point(
    nodes: dict[str, Node], node_id: str, anchor_name: str | None
) -> tuple[float, float]:
    node = nodes.get(node_id)
    if node is None:
        return (0.0, 0.0)
    anchor = parse_anchor(anchor_name)
    if anchor is None:
        return node.center
    return anchor_point(node, anchor)


def resolve_anchor(
    nodes: dict[str, Node],
    node_id: str,
    anchor_name: str | None,
    other_point: tuple[float, float] | None = None,
    is_source: bool = True,
) -> ResolvedAnchor:
    """Resolve one end of a connector.

    An unknown node resolves to the origin with zero direction so the
    rest of the diagram keeps rendering. An unknown anchor name attaches
    at the node center with a direction derived from ``other_point``,
    the raw connection point of the opposite end.
    """
    node = nodes.get(node_id)
    if node is None:
        logger.warning("Unknown node '%s': connector attached at origin", node_id)
        return ResolvedAnchor((0.0, 0.0), (0.0, 0.0), 0.0)

    anchor = parse_anchor(anchor_name)
    if anchor is not None:
        side = anchor.side
        return ResolvedAnchor(anchor_point(node, anchor), side.direction, side.angle, side)

    logger.debug(
        "Anchor '%s' on node '%s' is not a side; using straight-line fallback",
        anchor_name,
        node_id,
    )
    point = node.center
    if other_point is None:
        return ResolvedAnchor(point, (0.0, 0.0), 0.0)
    if is_source:
        direction, angle = fallback_direction(point, other_point, True)
    else:
        direction, angle = fallback_direction(other_point, point, False)
    return ResolvedAnchor(point, direction, angle)


def resolve_endpoints(
    nodes: dict[str, Node], edge: Edge
) -> tuple[ResolvedAnchor, ResolvedAnchor]:
    """Resolve the source and target ends of ``edge``.

    Missing anchors default to leaving the source from the bottom and
    entering the target from the top.
    """
    source_name = edge.source_anchor or DEFAULT_SOURCE_ANCHOR
    target_name = edge.target_anchor or DEFAULT_TARGET_ANCHOR

    source_point = _provisional_point(nodes, edge.source, source_name)
    target_point = _provisional_point(nodes, edge.target, target_name)

    source = resolve_anchor(nodes, edge.source, source_name, target_point, is_source=True)
    target = resolve_anchor(nodes, edge.target, target_name, source_point, is_source=False)
    return source, target
