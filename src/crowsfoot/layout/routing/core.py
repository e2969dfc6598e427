"""Perpendicular offset routing between two anchored endpoints.

Every connector leaves its node along the anchor direction for a fixed
distance, routes between the two offset points with horizontal and
vertical runs, and enters the target node along its anchor direction:

    source -> source offset -> [corners] -> target offset -> target

The same function builds the connector being drawn and the peers it is
checked against for crossings, so both always agree on geometry.
"""

from __future__ import annotations

from crowsfoot.layout.anchors import ResolvedAnchor, resolve_endpoints
from crowsfoot.layout.constants import COORD_TOLERANCE, PERPENDICULAR_OFFSET
from crowsfoot.layout.routing.common import Point, RawPath
from crowsfoot.parser.model import Edge, Node


def offset_point(anchor: ResolvedAnchor, distance: float) -> Point:
    """Extend outward from the connection point along the anchor direction."""
    return (
        anchor.point[0] + anchor.direction[0] * distance,
        anchor.point[1] + anchor.direction[1] * distance,
    )


def _is_side(anchor: ResolvedAnchor) -> bool:
    # Fallback anchors (no side) route like top/bottom anchors
    return anchor.side is not None and anchor.side.is_horizontal


def routing_corners(
    source: ResolvedAnchor,
    target: ResolvedAnchor,
    source_offset: Point,
    target_offset: Point,
) -> list[Point]:
    """Corner points between the two offset points.

    Side-to-side routes go horizontal first, top/bottom-to-top/bottom
    routes go vertical first, and mixed routes form an L that starts
    along the side anchor's axis.
    """
    sx, sy = source_offset
    tx, ty = target_offset
    source_side = _is_side(source)
    target_side = _is_side(target)

    if source_side and target_side:
        corners = [(tx, sy)]
        if abs(sy - ty) > COORD_TOLERANCE:
            corners.append((tx, ty))
        return corners

    if not source_side and not target_side:
        corners = [(sx, ty)]
        if abs(sx - tx) > COORD_TOLERANCE:
            corners.append((tx, ty))
        return corners

    if source_side:
        return [(tx, sy), (tx, ty)]
    return [(sx, ty), (tx, ty)]


def build_raw_path(
    source: ResolvedAnchor,
    target: ResolvedAnchor,
    perpendicular_offset: float = PERPENDICULAR_OFFSET,
) -> RawPath:
    """Build the unhopped path between two resolved anchors.

    Consecutive identical points are emitted once, so the path never
    contains zero-length segments.
    """
    source_offset = offset_point(source, perpendicular_offset)
    target_offset = offset_point(target, perpendicular_offset)

    candidates = [
        source.point,
        source_offset,
        *routing_corners(source, target, source_offset, target_offset),
        target_offset,
        target.point,
    ]

    points: list[Point] = []
    for point in candidates:
        if points and points[-1] == point:
            continue
        points.append(point)

    return RawPath(points, source_offset, target_offset)


def route_edge(
    nodes: dict[str, Node],
    edge: Edge,
    perpendicular_offset: float = PERPENDICULAR_OFFSET,
) -> RawPath:
    """Resolve both ends of ``edge`` and build its raw path."""
    source, target = resolve_endpoints(nodes, edge)
    return build_raw_path(source, target, perpendicular_offset)
