"""Connector routing subpackage.

Public API:
- build_raw_path: Perpendicular offset routing between two anchors
- route_edge: Resolve an edge's anchors and build its raw path
- find_intersections: Crossings of a path with peer paths
- insert_hop_arcs: Splice hop-over arcs into a raw path
- ConnectorPath / RawPath / Intersection: Routing result types
"""

from crowsfoot.layout.routing.common import (
    ConnectorPath,
    Intersection,
    LineTo,
    MoveTo,
    QuadTo,
    RawPath,
    Segment,
)
from crowsfoot.layout.routing.core import build_raw_path, route_edge
from crowsfoot.layout.routing.hops import insert_hop_arcs
from crowsfoot.layout.routing.intersections import (
    find_intersections,
    peer_raw_paths,
    segment_intersection,
)

__all__ = [
    "ConnectorPath",
    "Intersection",
    "LineTo",
    "MoveTo",
    "QuadTo",
    "RawPath",
    "Segment",
    "build_raw_path",
    "find_intersections",
    "insert_hop_arcs",
    "peer_raw_paths",
    "route_edge",
    "segment_intersection",
]
