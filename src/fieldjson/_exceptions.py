"""Exception hierarchy for fieldjson.

Parse errors (LexError, JSONSyntaxError, LimitError) are recorded on a
Document rather than raised by Document.parse(); callers inspect them through
has_error()/get_error() or raise them with raise_for_error(). Access errors
(FieldTypeError, BoundsError, ReadOnlyFieldError) are raised immediately at
the point of access.
"""

__all__ = [
    "BoundsError",
    "FieldJSONError",
    "FieldTypeError",
    "JSONSyntaxError",
    "LexError",
    "LimitError",
    "ParseError",
    "ReadOnlyFieldError",
]


class FieldJSONError(Exception):
    """Base exception for all fieldjson errors."""


class ParseError(FieldJSONError):
    """Error recorded while parsing text into a Document.

    Attributes:
        position: Offset of the offending token in the source text.
        token_text: Literal text of the offending token.
        reason: Short description of what went wrong.
        context: Excerpt of the source around the failure point.
    """

    position: int
    token_text: str
    reason: str
    context: str

    def __init__(
        self,
        reason: str,
        *,
        position: int = 0,
        token_text: str = "",
        context: str = "",
    ) -> None:
        self.position = position
        self.token_text = token_text
        self.reason = reason
        self.context = context
        super().__init__(self.report())

    def report(self) -> str:
        """Return the formatted error report."""
        return (
            f"Error at position {self.position}[{self.token_text}]: "
            f"{self.context} \nError Reason: {self.reason}"
        )


class LexError(ParseError):
    """The scanner produced an invalid token or a literal failed to convert."""


class JSONSyntaxError(ParseError):
    """A token appeared where the grammar does not allow it."""


class LimitError(ParseError):
    """Nesting depth exceeded the configured maximum."""


class FieldTypeError(FieldJSONError, TypeError):
    """A typed read found a value of the wrong kind, with no matching fallback.

    Also raised when a Python object that is not a JSON value is stored.
    """


class BoundsError(FieldJSONError, IndexError):
    """An array index was outside the array."""

    index: int
    length: int

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"array index {index} out of range for length {length}")


class ReadOnlyFieldError(FieldJSONError):
    """A write was attempted through a read-only or fallback handle."""
