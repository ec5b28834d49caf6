"""Decode and encode OBO-flavoured INI documents."""

from oboini.codec import decode, encode, parse, stringify
from oboini.parsing.escaping import safe, unsafe
from oboini.serializer import EncodeOptions

__all__ = [
    "EncodeOptions",
    "decode",
    "encode",
    "parse",
    "safe",
    "stringify",
    "unsafe",
]
