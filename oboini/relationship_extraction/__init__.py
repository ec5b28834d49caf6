"""Relationship extraction module for turning relational fields into edges and xrefs."""

from oboini.relationship_extraction.graph_builder import RelationshipGraphBuilder
from oboini.relationship_extraction.resolver import ReferenceResolver

__all__ = [
    "ReferenceResolver",
    "RelationshipGraphBuilder",
]
