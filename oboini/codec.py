"""Decode and encode entry points for OBO-flavoured INI documents."""

from typing import Any

from loguru import logger

from oboini.parsing.line_parser import LineParser
from oboini.relationship_extraction import RelationshipGraphBuilder
from oboini.serializer import encode


def decode(text: str, *, legacy_xref_labels: bool = False) -> dict[str, Any]:
    """Parse text and derive its relationship graph.

    Args:
        text: Raw ontology text
        legacy_xref_labels: Label every xref target "Xref", ignoring internal targets

    Returns:
        Document mapping section names to records, plus ``relationships``
        (edges per section) and ``xrefs`` (external references)
    """
    document: dict[str, Any] = LineParser().parse(text)

    graph_builder = RelationshipGraphBuilder(legacy_xref_labels=legacy_xref_labels)
    graph = graph_builder.build_relationships(document)
    relationships, xrefs = graph.as_document_tables()

    logger.debug(
        f"Decoded {sum(len(records) for records in document.values())} records, "
        f"{sum(len(edges) for edges in relationships.values())} relationships, "
        f"{len(xrefs)} xrefs"
    )

    document["relationships"] = relationships
    document["xrefs"] = xrefs
    return document


parse = decode
stringify = encode

__all__ = ["decode", "encode", "parse", "stringify"]
