"""Tests for key/value escaping and unescaping."""

import pytest

from oboini import safe, unsafe
from oboini.parsing.escaping import is_quoted


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  plain value  ", "plain value"),
        ("a\\;b", "a;b"),
        ("a;b", "a"),
        ("value # trailing comment", "value"),
        ("a\\#b", "a#b"),
        ("a\\\\b", "a\\b"),
        ("a\\nb", "a\\nb"),
        ("dangling\\", "dangling\\"),
        ('"a\\nb"', "a\nb"),
        ('"semi;colon"', "semi;colon"),
        ("'true'", True),
        ("'42'", 42),
        ("'not json'", "not json"),
        ("'NaN'", "NaN"),
        ('"bad \\x escape"', "bad \\x escape"),
        ("", ""),
    ],
)
def test_unsafe(raw, expected):  # noqa
    assert unsafe(raw) == expected


def test_unsafe_treats_none_as_empty() -> None:
    """Test that a missing value unescapes to an empty string."""
    assert unsafe(None) == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain", "plain"),
        ("a;b#c", "a\\;b\\#c"),
        ("a=b", '"a=b"'),
        ("line\nbreak", '"line\\nbreak"'),
        ("carriage\rreturn", '"carriage\\rreturn"'),
        ("[bracketed", '"[bracketed"'),
        ('"quoted"', '"\\"quoted\\""'),
        ("'quoted'", "\"'quoted'\""),
        (" padded", '" padded"'),
        ("café=1", '"café=1"'),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        (3, "3"),
    ],
)
def test_safe(value, expected):  # noqa
    assert safe(value) == expected


def test_safe_output_unescapes_to_original() -> None:
    """Test that escaped strings read back unchanged."""
    for value in ["a;b", "x#y", "a=b", "multi\nline", " padded ", '"quoted"', "[section"]:
        assert unsafe(safe(value)) == value


def test_is_quoted() -> None:
    """Test detection of quote-wrapped values."""
    assert is_quoted('"abc"')
    assert is_quoted("'abc'")
    assert not is_quoted('"abc')
    assert not is_quoted("'abc\"")
    assert not is_quoted('"')


@pytest.mark.parametrize("raw", ["'", '"'])
def test_unsafe_keeps_lone_quote(raw: str) -> None:
    """Test that a single quote character is a plain value, not an empty quoted one."""
    assert unsafe(raw) == raw
