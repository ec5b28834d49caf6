"""Reference resolution for relational field values."""

import re
from typing import NamedTuple

_TRAILING_NOTE_PATTERN = re.compile(r"\s*!\s.*")
_TERM_ID_PATTERN = re.compile(r"[^\s:]+:\S+")
_TYPED_RELATIONSHIP_PATTERN = re.compile(r"(\S+)\s+([^\s:]+:\S+)")


class TypedReference(NamedTuple):
    verb: str
    target: str


class XrefReference(NamedTuple):
    id: str
    db: str
    dbid: str
    definition: str | None


class ReferenceResolver:
    """Resolves raw relational field values to target term ids.

    Every method returns None when the value does not have the expected shape;
    callers skip such values without raising.
    """

    @staticmethod
    def strip_note(value: str) -> str:
        """Remove a trailing ``! free text`` annotation."""
        return _TRAILING_NOTE_PATTERN.sub("", value)

    def resolve_term(self, value: str) -> str | None:
        """Resolve an is_a or consider value to a ``prefix:local`` term id.

        Args:
            value: Raw field value, possibly carrying a trailing annotation

        Returns:
            The term id, or None if the value is not shaped like one
        """
        match = _TERM_ID_PATTERN.match(self.strip_note(value))
        if not match:
            return None
        return match.group(0)

    def resolve_typed(self, value: str) -> TypedReference | None:
        """Resolve a ``<verb> <prefix:local>`` relationship value.

        Args:
            value: Raw relationship value

        Returns:
            The verb and target id, or None if the value does not match
        """
        match = _TYPED_RELATIONSHIP_PATTERN.match(self.strip_note(value))
        if not match:
            return None
        return TypedReference(verb=match.group(1), target=match.group(2))

    @staticmethod
    def resolve_xref(value: str) -> XrefReference | None:
        """Split an xref value into its identifier parts and optional description.

        Args:
            value: Raw xref value such as ``GO:0000001 "some description"``

        Returns:
            The parsed reference, or None for a blank value
        """
        tokens = value.split()
        if not tokens:
            return None

        xref_id = tokens[0]
        db, _, dbid = xref_id.partition(":")

        quoted_parts = value.split('"')
        definition = quoted_parts[1] if len(quoted_parts) > 2 else None

        return XrefReference(id=xref_id, db=db, dbid=dbid, definition=definition)
