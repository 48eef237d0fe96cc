"""A JSON value model with a parser, a serializer, and fluent field handles."""

from importlib.metadata import version

from ._builder import Entry, build
from ._document import Document, loads, parse
from ._exceptions import (
    BoundsError,
    FieldJSONError,
    FieldTypeError,
    JSONSyntaxError,
    LexError,
    LimitError,
    ParseError,
    ReadOnlyFieldError,
)
from ._handle import FieldHandle
from ._scanner import Scanner, Token, TokenKind
from ._serializer import serialize
from ._values import (
    JsonArray,
    JsonObject,
    Kind,
    Undefined,
    has_field,
    kind_of,
    to_python,
    to_value,
)

__version__ = version("fieldjson")

__all__ = [
    "BoundsError",
    "Document",
    "Entry",
    "FieldHandle",
    "FieldJSONError",
    "FieldTypeError",
    "JSONSyntaxError",
    "JsonArray",
    "JsonObject",
    "Kind",
    "LexError",
    "LimitError",
    "ParseError",
    "ReadOnlyFieldError",
    "Scanner",
    "Token",
    "TokenKind",
    "Undefined",
    "__version__",
    "build",
    "has_field",
    "kind_of",
    "loads",
    "parse",
    "serialize",
    "to_python",
    "to_value",
]
