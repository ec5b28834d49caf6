"""Serialization of nested documents back to the INI text dialect."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from oboini.parsing.escaping import safe


class EncodeOptions(BaseModel):
    """Options for encoding a document.

    Attributes:
        section: Name of the root section; a header is written when it has direct fields
        whitespace: Write ``key = value`` instead of ``key=value``
    """

    section: str | None = None
    whitespace: bool = False


def dot_split(key: str) -> list[str]:
    r"""Split a dotted key on unescaped dots.

    ``\.`` keeps a literal dot inside a segment; the returned segments are unescaped.

    Args:
        key: Key such as ``a.b\.c``

    Returns:
        Segments such as ``["a", "b.c"]``
    """
    segments = []
    current = []
    escaping = False

    for char in key:
        if escaping:
            if char != ".":
                current.append("\\")
            current.append(char)
            escaping = False
        elif char == "\\":
            escaping = True
        elif char == ".":
            segments.append("".join(current))
            current = []
        else:
            current.append(char)

    if escaping:
        current.append("\\")
    segments.append("".join(current))
    return segments


def _escape_section_key(key: str) -> str:
    """Escape every dot of a child key so it stays one segment of a section path."""
    return "\\.".join(segment.replace(".", "\\.") for segment in dot_split(key))


def coerce_options(options: EncodeOptions | Mapping[str, Any] | str | None) -> EncodeOptions:
    """Accept a section name, a mapping or EncodeOptions and return EncodeOptions."""
    if options is None:
        return EncodeOptions()
    if isinstance(options, EncodeOptions):
        return options
    if isinstance(options, str):
        return EncodeOptions(section=options)
    return EncodeOptions(**options)


def encode(
    document: Mapping[str, Any],
    options: EncodeOptions | Mapping[str, Any] | str | None = None,
    *,
    eol: str = "\n",
) -> str:
    """Encode a nested mapping as INI text.

    Scalars become ``key=value`` lines, lists become repeated ``key[]=value``
    lines and nested mappings become child sections named by their dotted path.

    Args:
        document: Mapping to encode
        options: Root section name, mapping or EncodeOptions
        eol: Line terminator

    Returns:
        Encoded text
    """
    opts = coerce_options(options)
    separator = " = " if opts.whitespace else "="

    out = ""
    children = []
    for key, value in document.items():
        if isinstance(value, list):
            for item in value:
                out += safe(f"{key}[]") + separator + safe(item) + eol
        elif isinstance(value, Mapping):
            children.append(key)
        else:
            out += safe(key) + separator + safe(value) + eol

    if opts.section and out:
        out = "[" + safe(opts.section) + "]" + eol + out

    for key in children:
        escaped_key = _escape_section_key(key)
        section = f"{opts.section}.{escaped_key}" if opts.section else escaped_key
        child = encode(
            document[key],
            EncodeOptions(section=section, whitespace=opts.whitespace),
            eol=eol,
        )
        if out and child:
            out += eol
        out += child

    return out
