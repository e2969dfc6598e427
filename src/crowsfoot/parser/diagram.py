"""Loader for JSON diagram documents.

A document lists entity boxes and the relationships between them:

    {
      "title": "Orders",
      "nodes": [{"id": "customer", "x": 0, "y": 0, "width": 200, "height": 150}],
      "edges": [{"id": "r1", "source": "customer", "target": "order",
                 "source_anchor": "right", "target_anchor": "left",
                 "type": "OneToMany", "source_cardinality": "1",
                 "target_cardinality": "N", "label": "places"}]
    }

Nodes may also use ``position: {x, y}`` and ``size: {width, height}``.
Edges may give ``cardinality: {"source": {...}, "target": {...}}``
with explicit ``multiplicity`` and ``optional`` per end instead of a
relationship type.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from crowsfoot.layout.cardinality import cardinality_from_type, is_optional_code
from crowsfoot.parser.model import (
    CardinalityEnd,
    Diagram,
    Edge,
    EdgeCardinality,
    Multiplicity,
    Node,
)

_EDGE_KINDS = ("cardinality", "simple")


def _number(value: Any, field_name: str, owner: str, default: float = 0.0) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(
            f"{owner}: '{field_name}' must be a number, got {value!r}"
        ) from None


def _parse_node(raw: Any, index: int) -> Node:
    if not isinstance(raw, dict):
        raise ValueError(f"Node #{index} must be an object, got {type(raw).__name__}")
    node_id = raw.get("id")
    if not node_id:
        raise ValueError(f"Node #{index} has no 'id'")
    owner = f"Node '{node_id}'"

    position = raw.get("position") or {}
    if not isinstance(position, dict):
        raise ValueError(f"{owner}: 'position' must be an object")
    size = raw.get("size") or {}
    if not isinstance(size, dict):
        raise ValueError(f"{owner}: 'size' must be an object")
    return Node(
        id=str(node_id),
        x=_number(raw.get("x", position.get("x")), "x", owner),
        y=_number(raw.get("y", position.get("y")), "y", owner),
        width=_number(raw.get("width", size.get("width")), "width", owner),
        height=_number(raw.get("height", size.get("height")), "height", owner),
        label=str(raw.get("label") or raw.get("name") or node_id),
    )


def _parse_end(raw: Any, owner: str) -> CardinalityEnd:
    if not isinstance(raw, dict):
        raise ValueError(f"{owner}: cardinality ends must be objects")
    value = str(raw.get("multiplicity", "")).strip().lower()
    try:
        multiplicity = Multiplicity(value)
    except ValueError:
        raise ValueError(
            f"{owner}: multiplicity must be 'one' or 'many', got {value!r}"
        ) from None
    return CardinalityEnd(multiplicity, bool(raw.get("optional", False)))


def _parse_cardinality(raw: dict, owner: str) -> EdgeCardinality | None:
    explicit = raw.get("cardinality")
    if isinstance(explicit, dict):
        if "source" not in explicit or "target" not in explicit:
            raise ValueError(f"{owner}: 'cardinality' needs 'source' and 'target' ends")
        return EdgeCardinality(
            source_end=_parse_end(explicit["source"], owner),
            target_end=_parse_end(explicit["target"], owner),
        )

    relationship_type = explicit if isinstance(explicit, str) else raw.get("type")
    return cardinality_from_type(
        relationship_type,
        source_optional=is_optional_code(raw.get("source_cardinality")),
        target_optional=is_optional_code(raw.get("target_cardinality")),
    )


def _parse_edge(raw: Any, index: int) -> Edge:
    if not isinstance(raw, dict):
        raise ValueError(f"Edge #{index} must be an object, got {type(raw).__name__}")
    source = raw.get("source")
    target = raw.get("target")
    if not source or not target:
        raise ValueError(f"Edge #{index} needs both 'source' and 'target'")

    edge_id = str(raw.get("id") or f"{source}-{target}-{index}")
    owner = f"Edge '{edge_id}'"

    kind = raw.get("kind", "cardinality")
    if kind not in _EDGE_KINDS:
        raise ValueError(
            f"{owner}: kind must be one of {', '.join(_EDGE_KINDS)}, got {kind!r}"
        )

    relationship_type = raw.get("type")
    if isinstance(raw.get("cardinality"), str):
        relationship_type = raw["cardinality"]

    return Edge(
        id=edge_id,
        source=str(source),
        target=str(target),
        source_anchor=raw.get("source_anchor") or raw.get("source_handle"),
        target_anchor=raw.get("target_anchor") or raw.get("target_handle"),
        cardinality=_parse_cardinality(raw, owner),
        label=str(raw.get("label") or ""),
        kind=kind,
        relationship_type=relationship_type,
    )


def parse_diagram(data: Any) -> Diagram:
    """Build a :class:`Diagram` from a decoded JSON document."""
    if not isinstance(data, dict):
        raise ValueError("Diagram document must be a JSON object")
    nodes = data.get("nodes")
    if not isinstance(nodes, list):
        raise ValueError("Diagram document needs a 'nodes' list")
    edges = data.get("edges", [])
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    diagram = Diagram(title=str(data.get("title") or ""))

    for index, raw in enumerate(nodes):
        node = _parse_node(raw, index)
        if node.id in diagram.nodes:
            raise ValueError(f"Duplicate node id '{node.id}'")
        diagram.add_node(node)

    seen: set[str] = set()
    for index, raw in enumerate(edges):
        edge = _parse_edge(raw, index)
        if edge.id in seen:
            raise ValueError(f"Duplicate edge id '{edge.id}'")
        seen.add(edge.id)
        diagram.add_edge(edge)

    return diagram


def load_diagram(path: str | Path) -> Diagram:
    """Read and parse a JSON diagram file."""
    text = Path(path).read_text()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    return parse_diagram(data)
