"""Tests for encoding documents back to text."""

import pytest

from oboini import EncodeOptions, encode
from oboini.serializer import coerce_options, dot_split


def test_encode_scalars() -> None:
    """Test that scalar fields become key=value lines in key order."""
    text = encode({"name": "foo", "is_obsolete": True, "comment": None, "count": 2})

    assert text == "name=foo\nis_obsolete=true\ncomment=null\ncount=2\n"


def test_encode_whitespace_separator() -> None:
    """Test the spaced separator option."""
    assert encode({"name": "foo"}, {"whitespace": True}) == "name = foo\n"


def test_encode_section_shorthand() -> None:
    """Test that a string option names the root section."""
    assert encode({"id": "GO:1"}, "Term") == "[Term]\nid=GO:1\n"
    assert encode({"id": "GO:1"}, EncodeOptions(section="Term", whitespace=True)) == (
        "[Term]\nid = GO:1\n"
    )


def test_encode_arrays() -> None:
    """Test that lists become repeated key[] lines."""
    text = encode({"synonym": ["foo", "bar"], "alt_id": []})

    assert text == "synonym[]=foo\nsynonym[]=bar\n"


def test_encode_escapes_values() -> None:
    """Test that values needing it are quoted or escaped."""
    text = encode({"a": "x;y", "b": "k=v", "c": " padded"})

    assert text == 'a=x\\;y\nb="k=v"\nc=" padded"\n'


def test_encode_child_sections() -> None:
    """Test that nested mappings become sections separated by blank lines."""
    text = encode({"a": "1", "child": {"b": "2"}, "other": {"c": "3"}})

    assert text == "a=1\n\n[child]\nb=2\n\n[other]\nc=3\n"


def test_encode_nested_section_paths() -> None:
    """Test dotted section paths and headers only for sections with fields."""
    document = {"outer": {"inner": {"leaf": "1"}}, "empty": {}}

    assert encode(document, "root") == "[root.outer.inner]\nleaf=1\n"


def test_encode_escapes_dots_in_child_keys() -> None:
    """Test that dots inside a key stay part of one path segment."""
    assert encode({"a.b": {"c": "1"}}) == "[a\\.b]\nc=1\n"
    assert encode({"a\\.b.c": {"d": "1"}}, "root") == "[root.a\\.b\\.c]\nd=1\n"


def test_encode_custom_eol() -> None:
    """Test that the line terminator is configurable."""
    text = encode({"a": "1", "list": ["x"], "child": {"b": "2"}}, eol="\r\n")

    assert text == "a=1\r\nlist[]=x\r\n\r\n[child]\r\nb=2\r\n"


@pytest.mark.parametrize(
    "key, expected",
    [
        ("plain", ["plain"]),
        ("a.b.c", ["a", "b", "c"]),
        ("a\\.b.c", ["a.b", "c"]),
        ("keep\\nbackslash", ["keep\\nbackslash"]),
        ("trailing\\", ["trailing\\"]),
        ("", [""]),
    ],
)
def test_dot_split(key, expected):  # noqa
    assert dot_split(key) == expected


def test_coerce_options() -> None:
    """Test the accepted option shapes."""
    assert coerce_options(None) == EncodeOptions()
    assert coerce_options("Term") == EncodeOptions(section="Term")
    assert coerce_options({"section": "Term", "whitespace": True}) == EncodeOptions(
        section="Term", whitespace=True
    )
    options = EncodeOptions(whitespace=True)
    assert coerce_options(options) is options


def test_encode_escaped_backslash_before_dot() -> None:
    """Test that an escaped backslash does not escape the following dot."""
    assert dot_split("a\\\\.b") == ["a\\\\", "b"]
    assert encode({"a\\\\.b": {"c": "1"}}) == "[a\\\\\\.b]\nc=1\n"
