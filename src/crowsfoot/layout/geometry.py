"""Connector geometry: routed path, hop arcs, notation and label point.

All inputs are explicit and nothing is cached, so calling these
functions again with the same nodes and edges returns identical
geometry and never touches the input records.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from crowsfoot.layout.anchors import resolve_endpoints
from crowsfoot.layout.constants import HOP_OVER_HEIGHT, PERPENDICULAR_OFFSET
from crowsfoot.layout.notation import Symbol, render_notation
from crowsfoot.layout.routing.common import ConnectorPath, Intersection, Point
from crowsfoot.layout.routing.core import build_raw_path
from crowsfoot.layout.routing.hops import insert_hop_arcs
from crowsfoot.layout.routing.intersections import find_intersections, peer_raw_paths
from crowsfoot.parser.model import Edge, Node


@dataclass
class ConnectorGeometry:
    """Everything the rendering surface needs to draw one connector."""

    edge_id: str
    path: ConnectorPath
    raw_points: list[Point]
    label_point: Point
    label: str = ""
    intersections: list[Intersection] = field(default_factory=list)
    symbols: list[Symbol] = field(default_factory=list)

    @property
    def show_arrow(self) -> bool:
        """Connectors without notation fall back to a plain arrow head."""
        return not self.symbols

    def to_dict(self) -> dict:
        return {
            "edge_id": self.edge_id,
            "path": self.path.to_svg(),
            "commands": self.path.to_dict(),
            "raw_points": [list(p) for p in self.raw_points],
            "intersections": [
                {"segment_index": i.segment_index, "point": list(i.point), "t": i.t}
                for i in self.intersections
            ],
            "symbols": [s.to_dict() for s in self.symbols],
            "label": self.label,
            "label_point": list(self.label_point),
            "show_arrow": self.show_arrow,
        }


def _find_edge(edges: list[Edge], edge_id: str) -> Edge:
    for edge in edges:
        if edge.id == edge_id:
            return edge
    raise KeyError(edge_id)


def connector_geometry(
    nodes: dict[str, Node],
    edges: list[Edge],
    edge: Edge,
    perpendicular_offset: float = PERPENDICULAR_OFFSET,
    hop_height: float = HOP_OVER_HEIGHT,
) -> ConnectorGeometry:
    """Compute the geometry of ``edge`` against the other ``edges``."""
    source, target = resolve_endpoints(nodes, edge)
    raw = build_raw_path(source, target, perpendicular_offset)

    peers = peer_raw_paths(nodes, edges, edge, perpendicular_offset)
    intersections = find_intersections(raw.points, peers)
    path = insert_hop_arcs(raw.points, intersections, hop_height=hop_height)

    symbols = []
    if edge.kind == "cardinality":
        symbols = render_notation(edge.cardinality, source, target)

    return ConnectorGeometry(
        edge_id=edge.id,
        path=path,
        raw_points=list(raw.points),
        label_point=raw.label_point,
        label=edge.label,
        intersections=intersections,
        symbols=symbols,
    )


def compute_connector_geometry(
    nodes: dict[str, Node],
    edges: list[Edge],
    target_edge_id: str,
    perpendicular_offset: float = PERPENDICULAR_OFFSET,
    hop_height: float = HOP_OVER_HEIGHT,
) -> ConnectorGeometry:
    """Compute path, symbols and label point for one connector.

    Raises ``KeyError`` if ``target_edge_id`` names no edge. Unresolvable
    nodes do not raise; see :func:`crowsfoot.layout.anchors.resolve_anchor`.
    """
    edge = _find_edge(edges, target_edge_id)
    return connector_geometry(nodes, edges, edge, perpendicular_offset, hop_height)


def compute_diagram_geometry(
    nodes: dict[str, Node],
    edges: list[Edge],
    perpendicular_offset: float = PERPENDICULAR_OFFSET,
    hop_height: float = HOP_OVER_HEIGHT,
) -> dict[str, ConnectorGeometry]:
    """Compute geometry for every connector, keyed by edge id."""
    return {
        edge.id: connector_geometry(nodes, edges, edge, perpendicular_offset, hop_height)
        for edge in edges
    }
