"""Data model for entity-relationship diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_NODE_WIDTH: float = 200.0
DEFAULT_NODE_HEIGHT: float = 150.0


class AnchorSide(Enum):
    """Side of a node boundary where a connector attaches."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def angle(self) -> float:
        """Canonical outward direction in degrees (SVG y-down)."""
        return _SIDE_ANGLES[self]

    @property
    def direction(self) -> tuple[float, float]:
        """Canonical outward unit vector."""
        return _SIDE_DIRECTIONS[self]

    @property
    def is_horizontal(self) -> bool:
        """True for LEFT/RIGHT, where connectors leave horizontally."""
        return self in (AnchorSide.LEFT, AnchorSide.RIGHT)


_SIDE_ANGLES: dict[AnchorSide, float] = {
    AnchorSide.RIGHT: 0.0,
    AnchorSide.BOTTOM: 90.0,
    AnchorSide.LEFT: 180.0,
    AnchorSide.TOP: 270.0,
}

_SIDE_DIRECTIONS: dict[AnchorSide, tuple[float, float]] = {
    AnchorSide.RIGHT: (1.0, 0.0),
    AnchorSide.BOTTOM: (0.0, 1.0),
    AnchorSide.LEFT: (-1.0, 0.0),
    AnchorSide.TOP: (0.0, -1.0),
}


class Multiplicity(Enum):
    """How many entities may sit at one end of a relationship."""

    ONE = "one"
    MANY = "many"


class RelationshipCardinality(str, Enum):
    """Cardinality class of a relationship, in display format."""

    ONE_TO_ONE = "One-to-One"
    ONE_TO_MANY = "One-to-Many"
    MANY_TO_ONE = "Many-to-One"
    MANY_TO_MANY = "Many-to-Many"


@dataclass(frozen=True)
class CardinalityEnd:
    """Multiplicity and optionality at one end of a relationship."""

    multiplicity: Multiplicity
    optional: bool = False


@dataclass(frozen=True)
class EdgeCardinality:
    """Cardinality of both ends of a relationship."""

    source_end: CardinalityEnd
    target_end: CardinalityEnd


@dataclass
class Node:
    """An entity box on the canvas.

    ``x``/``y`` is the top-left corner. Unknown sizes fall back to the
    default 200x150 entity box.
    """

    id: str
    x: float = 0.0
    y: float = 0.0
    width: float = DEFAULT_NODE_WIDTH
    height: float = DEFAULT_NODE_HEIGHT
    label: str = ""

    def __post_init__(self) -> None:
        if not self.width or self.width <= 0:
            self.width = DEFAULT_NODE_WIDTH
        if not self.height or self.height <= 0:
            self.height = DEFAULT_NODE_HEIGHT

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Edge:
    """A relationship connector between two nodes.

    ``kind`` separates crow's-foot connectors (``"cardinality"``) from
    plain arrows (``"simple"``); only connectors of the same kind hop
    over each other.
    """

    id: str
    source: str
    target: str
    source_anchor: str | None = None
    target_anchor: str | None = None
    cardinality: EdgeCardinality | None = None
    label: str = ""
    kind: str = "cardinality"
    # Raw relationship type as supplied, kept for reporting
    relationship_type: str | None = None


@dataclass
class Diagram:
    """Complete diagram definition: nodes keyed by id plus connectors."""

    title: str = ""
    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)

    def add_node(self, node: Node) -> None:
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

