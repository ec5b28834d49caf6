"""Quoting and unquoting of individual keys and values."""

import json
import re
from typing import Any

_NEEDS_JSON_PATTERN = re.compile(r"[=\r\n]")
_COMMENT_CHARS = ";#"
_ESCAPABLE_CHARS = "\\;#"


def is_quoted(value: str) -> bool:
    """Check whether a value is wrapped in matching double or single quotes."""
    return len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'"


def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity, strict JSON does not
    raise ValueError(f"Not a JSON literal: {name}")


def _loads_strict(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def safe(value: Any) -> str:
    """Escape a key or value for writing on a single line.

    Strings that cannot be written bare (containing ``=`` or line breaks,
    starting with ``[``, already quoted or padded with whitespace) and every
    non-string value are JSON-encoded. Anything else is written as-is with
    comment characters backslash-escaped.

    Args:
        value: Key or value to escape

    Returns:
        Text safe to place on either side of a ``=`` separator
    """
    if (
        not isinstance(value, str)
        or _NEEDS_JSON_PATTERN.search(value)
        or value.startswith("[")
        or is_quoted(value)
        or value != value.strip()
    ):
        return _dumps(value)
    return value.replace(";", "\\;").replace("#", "\\#")


def unsafe(value: str | None) -> Any:
    r"""Unescape a raw key or value read from a line.

    Quoted values lose one layer of quotes and are decoded as JSON literals,
    falling back to the stripped text when decoding fails. Unquoted values end
    at the first unescaped ``;`` or ``#``; only ``\\``, ``\;`` and ``\#`` are
    reduced, any other backslash is kept.

    Args:
        value: Raw text, None is treated as empty

    Returns:
        The decoded value, usually a string
    """
    value = (value or "").strip()

    if is_quoted(value):
        inner = value[1:-1]
        try:
            if value[0] == '"':
                return _loads_strict(value)
            return _loads_strict(inner)
        except ValueError:
            return inner

    unescaped = []
    escaping = False
    for char in value:
        if escaping:
            if char in _ESCAPABLE_CHARS:
                unescaped.append(char)
            else:
                unescaped.append("\\" + char)
            escaping = False
        elif char in _COMMENT_CHARS:
            break
        elif char == "\\":
            escaping = True
        else:
            unescaped.append(char)

    if escaping:
        unescaped.append("\\")

    return "".join(unescaped).strip()
