"""Building relationship graphs from parsed ontology records."""

from typing import Any

from loguru import logger

from oboini.domain.fields import RELATIONAL_FIELDS
from oboini.domain.relationships import (
    XREF_LABEL,
    Edge,
    Endpoint,
    RelationshipGraph,
    XrefEntry,
)

from .resolver import ReferenceResolver

Record = dict[str, Any]


class RelationshipGraphBuilder:
    """Builds relationship graphs from parsed records, consuming their relational fields."""

    def __init__(self, *, legacy_xref_labels: bool = False):
        """Initialize the builder.

        Args:
            legacy_xref_labels: Label every xref target "Xref", even when the
                target is a record of the same section
        """
        self.legacy_xref_labels = legacy_xref_labels
        self.resolver = ReferenceResolver()

    def build_relationships(self, document: dict[str, list[Record]]) -> RelationshipGraph:
        """Build the relationship graph for a parsed document.

        Relational fields are removed from every record in place. Sections are
        visited in document order, records in insertion order, fields as
        is_a, consider, relationship, xref.

        Args:
            document: Dictionary of section name to records, as produced by LineParser

        Returns:
            RelationshipGraph with edges per section and document-wide xrefs
        """
        relationships: dict[str, list[Edge]] = {}
        xrefs: list[XrefEntry] = []
        seen_xref_ids: set[str] = set()

        for section, records in document.items():
            section_ids = self._build_section_index(records)
            edges: list[Edge] = []

            for record in records:
                source_id = record.get("id")
                values_by_field = {
                    field: self._as_values(record.pop(field))
                    for field in RELATIONAL_FIELDS
                    if field in record
                }

                if not isinstance(source_id, str):
                    if values_by_field:
                        logger.debug(f"Dropping relational fields of a record without id in {section}")
                    continue

                source = Endpoint(id=source_id, label=section)
                edges.extend(self._term_edges("IS_A", source, values_by_field.get("is_a", [])))
                edges.extend(self._term_edges("CONSIDER", source, values_by_field.get("consider", [])))
                edges.extend(self._typed_edges(source, values_by_field.get("relationship", [])))
                edges.extend(
                    self._xref_edges(
                        source,
                        values_by_field.get("xref", []),
                        section_ids=section_ids,
                        seen_xref_ids=seen_xref_ids,
                        xrefs=xrefs,
                    )
                )

            relationships[section] = edges

        return RelationshipGraph(relationships=relationships, xrefs=xrefs)

    @staticmethod
    def _build_section_index(records: list[Record]) -> set[str]:
        """Collect the ids of all records in a section."""
        return {record["id"] for record in records if isinstance(record.get("id"), str)}

    @staticmethod
    def _as_values(raw: Any) -> list[str]:
        """Keep only the string values of a relational field."""
        values = raw if isinstance(raw, list) else [raw]
        return [value for value in values if isinstance(value, str)]

    def _term_edges(self, edge_type: str, source: Endpoint, values: list[str]) -> list[Edge]:
        """Create edges for is_a and consider values."""
        edges = []
        for value in values:
            target_id = self.resolver.resolve_term(value)
            if target_id is None:
                logger.debug(f"Skipping {edge_type} value without a term id: {value!r}")
                continue
            edges.append(
                Edge(
                    type=edge_type,
                    source=source,
                    target=Endpoint(id=target_id, label=source.label),
                )
            )
        return edges

    def _typed_edges(self, source: Endpoint, values: list[str]) -> list[Edge]:
        """Create edges for generic relationship values, typed by their verb."""
        edges = []
        for value in values:
            reference = self.resolver.resolve_typed(value)
            if reference is None:
                logger.debug(f"Skipping malformed relationship: {value!r}")
                continue
            edges.append(
                Edge(
                    type=reference.verb.upper(),
                    source=source,
                    target=Endpoint(id=reference.target, label=source.label),
                )
            )
        return edges

    def _xref_edges(
        self,
        source: Endpoint,
        values: list[str],
        *,
        section_ids: set[str],
        seen_xref_ids: set[str],
        xrefs: list[XrefEntry],
    ) -> list[Edge]:
        """Create XREF edges and record first occurrences of external references."""
        edges = []
        for value in values:
            reference = self.resolver.resolve_xref(value)
            if reference is None:
                continue

            internal = reference.id in section_ids
            target_label = source.label if internal and not self.legacy_xref_labels else XREF_LABEL
            edges.append(
                Edge(
                    type="XREF",
                    source=source,
                    target=Endpoint(id=reference.id, label=target_label),
                )
            )

            if internal or reference.id in seen_xref_ids:
                continue
            seen_xref_ids.add(reference.id)
            xrefs.append(
                XrefEntry(
                    db=reference.db,
                    dbid=reference.dbid,
                    id=reference.id,
                    definition=reference.definition,
                )
            )
        return edges
