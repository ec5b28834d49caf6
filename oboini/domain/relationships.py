"""Relationship domain models."""

from pydantic import BaseModel, ConfigDict, Field

XREF_LABEL = "Xref"


class Endpoint(BaseModel):
    """One end of an edge: a term id and the section (or sentinel) it belongs to."""

    id: str
    label: str


class Edge(BaseModel):
    """Represents a typed, directed link between two terms."""

    type: str  # IS_A, CONSIDER, XREF or an uppercased relationship verb
    source: Endpoint
    target: Endpoint


class XrefEntry(BaseModel):
    """An external identifier referenced by an xref field."""

    model_config = ConfigDict(populate_by_name=True)

    db: str
    dbid: str
    id: str
    definition: str | None = Field(default=None, alias="def")


class RelationshipGraph(BaseModel):
    """Represents the edges and external references derived from a document."""

    relationships: dict[str, list[Edge]] = {}
    xrefs: list[XrefEntry] = []

    def as_document_tables(self) -> tuple[dict[str, list[dict]], list[dict]]:
        """Render edges and xrefs as the plain dicts stored on a decoded document."""
        relationships = {
            section: [edge.model_dump() for edge in edges]
            for section, edges in self.relationships.items()
        }
        xrefs = [entry.model_dump(by_alias=True, exclude_none=True) for entry in self.xrefs]
        return relationships, xrefs
