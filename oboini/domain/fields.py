"""Field classification tables for ontology records."""

from enum import Enum
from types import MappingProxyType


class FieldKind(Enum):
    """Cardinality class of a recognized record field."""

    SCALAR = "scalar"  # overwritten on repeat
    MULTI = "multi"  # accumulates into a list
    RELATIONAL = "relational"  # list, consumed by relationship extraction


FIELD_KINDS = MappingProxyType(
    {
        "id": FieldKind.SCALAR,
        "name": FieldKind.SCALAR,
        "namespace": FieldKind.SCALAR,
        "def": FieldKind.SCALAR,
        "comment": FieldKind.SCALAR,
        "created_by": FieldKind.SCALAR,
        "creation_date": FieldKind.SCALAR,
        "is_obsolete": FieldKind.SCALAR,
        "intersection_of": FieldKind.MULTI,
        "synonym": FieldKind.MULTI,
        "alt_id": FieldKind.MULTI,
        "subset": FieldKind.MULTI,
        "is_a": FieldKind.RELATIONAL,
        "consider": FieldKind.RELATIONAL,
        "relationship": FieldKind.RELATIONAL,
        "xref": FieldKind.RELATIONAL,
    }
)

# Order in which relational fields are turned into edges
RELATIONAL_FIELDS = ("is_a", "consider", "relationship", "xref")

# Fields whose value keeps only a leading quoted span
QUOTED_SPAN_FIELDS = frozenset({"synonym", "def"})


def field_kind(name: str) -> FieldKind | None:
    """Return the cardinality class of a field, or None when it is not recognized."""
    return FIELD_KINDS.get(name)
