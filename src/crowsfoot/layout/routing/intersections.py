"""Crossing detection between a connector and its peers.

Peers are rebuilt from their raw (unhopped) paths with the same routing
function as the connector itself. Using peers' hopped paths would make
each connector's arcs depend on the others'.

Every segment is tested against every peer segment, so the cost is
O(E^2 * S^2) over a whole diagram. That is fine for diagrams with tens
to low hundreds of connectors; larger diagrams are not a target.
"""

from __future__ import annotations

from crowsfoot.layout.constants import (
    INTERSECTION_T_MAX,
    INTERSECTION_T_MIN,
    PARALLEL_TOLERANCE,
    PERPENDICULAR_OFFSET,
)
from crowsfoot.layout.routing.common import Intersection, Point, path_segments
from crowsfoot.layout.routing.core import route_edge
from crowsfoot.parser.model import Edge, Node


def segment_intersection(
    a1: Point, a2: Point, b1: Point, b2: Point
) -> tuple[Point, float, float] | None:
    """Intersect segment a1-a2 with segment b1-b2.

    Returns ``(point, t, u)`` where ``t`` and ``u`` are the parametric
    positions on the first and second segment, or None when the
    segments are parallel or do not meet.
    """
    x1, y1 = a1
    x2, y2 = a2
    x3, y3 = b1
    x4, y4 = b2

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < PARALLEL_TOLERANCE:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return (x1 + t * (x2 - x1), y1 + t * (y2 - y1)), t, u
    return None


def find_intersections(
    points: list[Point],
    peer_paths: list[list[Point]],
    t_min: float = INTERSECTION_T_MIN,
    t_max: float = INTERSECTION_T_MAX,
) -> list[Intersection]:
    """Find where ``points`` crosses any of ``peer_paths``.

    Only crossings strictly inside ``(t_min, t_max)`` on this path's
    segment are kept; crossings near a segment end are corner artifacts.
    Results are ordered by segment index, then by ``t``.
    """
    found: list[Intersection] = []
    own_segments = path_segments(points)
    peer_segments = [path_segments(peer) for peer in peer_paths]

    for index, seg in enumerate(own_segments):
        for segments in peer_segments:
            for other in segments:
                hit = segment_intersection(seg.start, seg.end, other.start, other.end)
                if hit is None:
                    continue
                point, t, _u = hit
                if t_min < t < t_max:
                    found.append(Intersection(index, point, t))

    found.sort(key=lambda i: (i.segment_index, i.t))
    return found


def peer_raw_paths(
    nodes: dict[str, Node],
    edges: list[Edge],
    edge: Edge,
    perpendicular_offset: float = PERPENDICULAR_OFFSET,
) -> list[list[Point]]:
    """Raw paths of every other connector drawn in the same notation."""
    return [
        route_edge(nodes, other, perpendicular_offset).points
        for other in edges
        if other.id != edge.id and other.kind == edge.kind
    ]
