"""Parsing of raw OBO/INI text into sections of records."""

import re
from typing import Any

from loguru import logger

from oboini.domain.fields import QUOTED_SPAN_FIELDS, FieldKind, field_kind

from .escaping import unsafe

Record = dict[str, Any]
Document = dict[str, list[Record]]

_LINE_BREAK_PATTERN = re.compile(r"[\r\n]+")
_COMMENT_LINE_PATTERN = re.compile(r"^\s*[;#]")
_SECTION_PATTERN = re.compile(r"^\[([^\]]*)\]$")
# key up to the first unescaped ":" (or "=" written by the serializer), then the value
_KEY_VALUE_PATTERN = re.compile(r"^((?:\\.|[^\\:=])+)(?:[:=](.*))?$")
_QUOTED_SPAN_PATTERN = re.compile(r'^"((?:[^"\\]|\\.)*)"')
_LITERALS = {"true": True, "false": False, "null": None}


class LineParser:
    """Parses line-oriented ontology text into a mapping of section name to records."""

    def parse(self, text: str) -> Document:
        """Parse text into sections of records.

        A section header always starts a new record, even when the section name
        was already seen. Key/value lines fill the record opened by the most
        recent header; lines before the first header are dropped.

        Args:
            text: Raw text, lines separated by any mix of CR and LF

        Returns:
            Dictionary mapping section names to records in source order
        """
        document: Document = {}
        current: Record | None = None

        for line in _LINE_BREAK_PATTERN.split(text):
            if not line or _COMMENT_LINE_PATTERN.match(line):
                continue

            section_match = _SECTION_PATTERN.match(line)
            if section_match:
                section = unsafe(section_match.group(1))
                current = {}
                document.setdefault(section, []).append(current)
                continue

            key_value_match = _KEY_VALUE_PATTERN.match(line)
            if not key_value_match:
                logger.debug(f"Skipping malformed line: {line!r}")
                continue

            if current is None:
                logger.debug(f"Skipping line outside of any section: {line!r}")
                continue

            key, raw_value = key_value_match.group(1), key_value_match.group(2)
            self._add_field(current, key, raw_value)

        return document

    def _add_field(self, record: Record, raw_key: str, raw_value: str | None) -> None:
        """Unescape a key/value pair and store it on the record by field kind."""
        key = unsafe(raw_key)
        if isinstance(key, str) and key.endswith("[]"):
            key = key[:-2]

        kind = field_kind(key) if isinstance(key, str) else None
        if kind is None:
            logger.debug(f"Dropping unrecognized field: {key!r}")
            return

        value = self._parse_value(key, raw_value)

        if kind is FieldKind.SCALAR:
            record[key] = value
            if key == "id":
                record.pop("label", None)
                if isinstance(value, str) and ":" in value:
                    record["label"] = value.split(":", 1)[0]
            return

        # Guard against a value previously stored without the multi-value marker
        existing = record.get(key)
        if existing is None:
            record[key] = []
        elif not isinstance(existing, list):
            record[key] = [existing]
        record[key].append(value)

    @staticmethod
    def _parse_value(key: str, raw_value: str | None) -> Any:
        """Turn raw value text into a literal, a list item or a plain string."""
        if raw_value is None:
            return True

        value = unsafe(raw_value)
        if not isinstance(value, str):
            return value

        if value in _LITERALS:
            return _LITERALS[value]

        if key in QUOTED_SPAN_FIELDS:
            span_match = _QUOTED_SPAN_PATTERN.match(value)
            if span_match:
                value = span_match.group(1)

        return value.replace("\\,", ",")
