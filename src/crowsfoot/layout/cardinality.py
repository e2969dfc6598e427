"""Relationship type normalization.

Backends report relationship types as PascalCase (``"OneToMany"``),
stored relationships use lower-case (``"one-to-many"``), and the
notation engine works with :class:`RelationshipCardinality`.
"""

from __future__ import annotations

import logging

from crowsfoot.parser.model import (
    CardinalityEnd,
    EdgeCardinality,
    Multiplicity,
    RelationshipCardinality,
)

logger = logging.getLogger(__name__)

_PASCAL_CASE: dict[str, RelationshipCardinality] = {
    "OneToOne": RelationshipCardinality.ONE_TO_ONE,
    "OneToMany": RelationshipCardinality.ONE_TO_MANY,
    "ManyToOne": RelationshipCardinality.MANY_TO_ONE,
    "ManyToMany": RelationshipCardinality.MANY_TO_MANY,
}

_RELATIONSHIP_TYPES: dict[str, str] = {
    "one-to-one": "OneToOne",
    "one-to-many": "OneToMany",
    "many-to-one": "ManyToOne",
    "many-to-many": "ManyToMany",
}

_ENDS: dict[RelationshipCardinality, tuple[Multiplicity, Multiplicity]] = {
    RelationshipCardinality.ONE_TO_ONE: (Multiplicity.ONE, Multiplicity.ONE),
    RelationshipCardinality.ONE_TO_MANY: (Multiplicity.ONE, Multiplicity.MANY),
    RelationshipCardinality.MANY_TO_ONE: (Multiplicity.MANY, Multiplicity.ONE),
    RelationshipCardinality.MANY_TO_MANY: (Multiplicity.MANY, Multiplicity.MANY),
}

# Per-end cardinality codes: "0" = optional, "1"/"N" = mandatory
OPTIONAL_CODE = "0"


def normalize_cardinality(value: str | None) -> str | None:
    """Map a PascalCase relationship type to the display format.

    Values that already contain a separator pass through unchanged, so
    normalizing twice is a no-op. Unknown values also pass through and
    simply match no :class:`RelationshipCardinality`.
    """
    if not value:
        return None
    if "-" in value:
        return value
    return _PASCAL_CASE.get(value, value)


def relationship_type_cardinality(value: str | None) -> str | None:
    """Normalize any supported relationship type spelling.

    Accepts the lower-case stored form (``"one-to-many"``) in addition
    to everything :func:`normalize_cardinality` accepts.
    """
    if not value:
        return None
    pascal = _RELATIONSHIP_TYPES.get(value)
    return normalize_cardinality(pascal or value)


def cardinality_from_type(
    relationship_type: str | None,
    source_optional: bool = False,
    target_optional: bool = False,
) -> EdgeCardinality | None:
    """Build per-end cardinality from a relationship type string.

    Returns None (no notation) for missing or unrecognized types.
    """
    normalized = relationship_type_cardinality(relationship_type)
    if normalized is None:
        return None
    try:
        kind = RelationshipCardinality(normalized)
    except ValueError:
        logger.warning("Unrecognized relationship type '%s': no notation", relationship_type)
        return None

    source_mult, target_mult = _ENDS[kind]
    return EdgeCardinality(
        source_end=CardinalityEnd(source_mult, source_optional),
        target_end=CardinalityEnd(target_mult, target_optional),
    )


def is_optional_code(code: str | None) -> bool:
    """True when a per-end cardinality code marks the end optional."""
    return code is not None and str(code).strip() == OPTIONAL_CODE
