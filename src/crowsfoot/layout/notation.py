"""Crow's-foot notation symbols for relationship ends.

Each end of a relationship shows its optionality closest to the entity
and its multiplicity next to it:

    One, optional       circle + single bar        ("zero or one")
    One, mandatory      two parallel bars          ("one and only one")
    Many, optional      circle + crow's foot       ("zero or many")
    Many, mandatory     crow's foot + 4th bar      ("one or many")

Symbols are laid out from the raw connection point along the anchor's
canonical angle. The routed (and possibly hopped) path never feeds into
symbol placement, so symbols keep their shape whatever the routing does.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from crowsfoot.layout.anchors import ResolvedAnchor
from crowsfoot.layout.constants import (
    CIRCLE_CROWFOOT_GAP,
    CIRCLE_OFFSET,
    CIRCLE_RADIUS,
    CROWFOOT_FAN_ANGLE,
    CROWFOOT_LINE_LENGTH,
    CROWFOOT_OFFSET,
    MANDATORY_LINE_SPACING,
    ONE_LINE_LENGTH,
    ONE_LINE_OFFSET_MANDATORY,
    ONE_LINE_OFFSET_OPTIONAL,
)
from crowsfoot.layout.routing.common import Point
from crowsfoot.parser.model import (
    AnchorSide,
    CardinalityEnd,
    EdgeCardinality,
    Multiplicity,
    RelationshipCardinality,
)

logger = logging.getLogger(__name__)


class SymbolKind(Enum):
    LINE = "line"
    CIRCLE = "circle"
    CROWFOOT = "crowfoot"


class EndRole(Enum):
    SOURCE = "source"
    TARGET = "target"


@dataclass(frozen=True)
class Symbol:
    """A drawable notation symbol.

    ``points`` holds ``(start, end)`` for a line, ``(center,)`` for a
    circle, and ``(base, central tip, left tip, right tip)`` for a
    crow's foot.
    """

    kind: SymbolKind
    end: EndRole
    points: tuple[Point, ...] = field(default_factory=tuple)
    radius: float | None = None

    def to_dict(self) -> dict:
        data = {
            "kind": self.kind.value,
            "end": self.end.value,
            "points": [list(p) for p in self.points],
        }
        if self.radius is not None:
            data["radius"] = self.radius
        return data


_CLASSES: dict[tuple[Multiplicity, Multiplicity], RelationshipCardinality] = {
    (Multiplicity.ONE, Multiplicity.ONE): RelationshipCardinality.ONE_TO_ONE,
    (Multiplicity.ONE, Multiplicity.MANY): RelationshipCardinality.ONE_TO_MANY,
    (Multiplicity.MANY, Multiplicity.ONE): RelationshipCardinality.MANY_TO_ONE,
    (Multiplicity.MANY, Multiplicity.MANY): RelationshipCardinality.MANY_TO_MANY,
}


def cardinality_class(cardinality: EdgeCardinality) -> RelationshipCardinality:
    """Derive the relationship class from the two end multiplicities."""
    key = (cardinality.source_end.multiplicity, cardinality.target_end.multiplicity)
    return _CLASSES[key]


def _unit(angle_deg: float) -> Point:
    rad = math.radians(angle_deg)
    return (math.cos(rad), math.sin(rad))


def _along(origin: Point, direction: Point, distance: float) -> Point:
    return (origin[0] + direction[0] * distance, origin[1] + direction[1] * distance)


def _bar(center: Point, direction: Point, length: float) -> tuple[Point, Point]:
    half = length / 2
    return (_along(center, direction, -half), _along(center, direction, half))


def perpendicular_angle(angle: float, side: AnchorSide | None) -> float:
    """Angle of the bars drawn across a connector end, in degrees."""
    if side is not None and not side.is_horizontal:
        return angle + 90
    return angle - 90


def one_symbols(
    point: Point, angle: float, side: AnchorSide | None, optional: bool, role: EndRole
) -> list[Symbol]:
    """Bars (and circle) for a "one" end."""
    direction = _unit(angle)
    perp = _unit(perpendicular_angle(angle, side))
    symbols: list[Symbol] = []

    if optional:
        circle = _along(point, direction, CIRCLE_OFFSET)
        symbols.append(Symbol(SymbolKind.CIRCLE, role, (circle,), CIRCLE_RADIUS))
        center = _along(point, direction, ONE_LINE_OFFSET_OPTIONAL)
        symbols.append(Symbol(SymbolKind.LINE, role, _bar(center, perp, ONE_LINE_LENGTH)))
        return symbols

    center = _along(point, direction, ONE_LINE_OFFSET_MANDATORY)
    half_spacing = MANDATORY_LINE_SPACING / 2
    for shift in (-half_spacing, half_spacing):
        bar_center = _along(center, direction, shift)
        symbols.append(
            Symbol(SymbolKind.LINE, role, _bar(bar_center, perp, ONE_LINE_LENGTH))
        )
    return symbols


def many_symbols(
    point: Point, angle: float, side: AnchorSide | None, optional: bool, role: EndRole
) -> list[Symbol]:
    """Crow's foot (and circle or 4th bar) for a "many" end."""
    direction = _unit(angle)
    base = _along(point, direction, CROWFOOT_OFFSET)
    symbols: list[Symbol] = []

    if optional:
        # Shifted along x only: level with the crow's-foot base
        circle = (base[0] + direction[0] * CIRCLE_CROWFOOT_GAP, base[1])
        symbols.append(Symbol(SymbolKind.CIRCLE, role, (circle,), CIRCLE_RADIUS))

    central = angle + 180
    tips = tuple(
        _along(base, _unit(a), CROWFOOT_LINE_LENGTH)
        for a in (central, central - CROWFOOT_FAN_ANGLE, central + CROWFOOT_FAN_ANGLE)
    )
    symbols.append(Symbol(SymbolKind.CROWFOOT, role, (base, *tips)))

    if not optional:
        perp = _unit(perpendicular_angle(angle, side))
        symbols.append(
            Symbol(SymbolKind.LINE, role, _bar(base, perp, CROWFOOT_LINE_LENGTH))
        )
    return symbols


def end_symbols(anchor: ResolvedAnchor, end: CardinalityEnd, role: EndRole) -> list[Symbol]:
    """Symbols for one end of a relationship."""
    if end.multiplicity == Multiplicity.MANY:
        return many_symbols(anchor.point, anchor.angle, anchor.side, end.optional, role)
    return one_symbols(anchor.point, anchor.angle, anchor.side, end.optional, role)


def render_notation(
    cardinality: EdgeCardinality | None,
    source: ResolvedAnchor,
    target: ResolvedAnchor,
) -> list[Symbol]:
    """Symbols for both ends; empty when the cardinality is unknown."""
    if cardinality is None:
        logger.debug("No cardinality: connector drawn without notation")
        return []
    return end_symbols(source, cardinality.source_end, EndRole.SOURCE) + end_symbols(
        target, cardinality.target_end, EndRole.TARGET
    )
