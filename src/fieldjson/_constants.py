"""Tunables shared by the scanner, parser, and serializer."""

from typing import Final

# Integers are stored as 64-bit signed values
MIN_INTEGER: Final[int] = -(2**63)
MAX_INTEGER: Final[int] = 2**63 - 1

MAX_NESTING_DEPTH: Final[int] = 128
"""Default limit on object/array nesting accepted by the parser."""

ERROR_CONTEXT_WIDTH: Final[int] = 50
"""Characters of source shown on each side of a parse error."""

ERROR_MARKER: Final[str] = " *ERROR*--> "

OUT_OF_BOUNDS_CONTEXT: Final[str] = "Error position out of bounds"

INDENT: Final[str] = "\t"

WHITESPACE: Final[frozenset[str]] = frozenset(" \t\n\r")

NUMBER_CHARS: Final[frozenset[str]] = frozenset("0123456789.-+eE")

FLOAT_MARKERS: Final[frozenset[str]] = frozenset(".eE")
