"""Line-level parsing of the OBO/INI text dialect."""

from oboini.parsing.escaping import is_quoted, safe, unsafe
from oboini.parsing.line_parser import LineParser

__all__ = [
    "LineParser",
    "is_quoted",
    "safe",
    "unsafe",
]
