"""Recursive-descent parser producing a Value tree rooted at a JsonObject.

Grammar:

    Document := Object
    Object   := '{' ( String ':' Value ( ',' String ':' Value )* )? '}'
    Array    := '[' ( Value ( ',' Value )* )? ']'
    Value    := Object | Array | String | Number | Boolean | Null

Errors are not raised. The first one is recorded on the parser and every
later step sees it and unwinds immediately, returning None up the call
chain; only the first report is kept.
"""

import math
from logging import getLogger
from typing import TYPE_CHECKING

from ._constants import (
    ERROR_CONTEXT_WIDTH,
    ERROR_MARKER,
    FLOAT_MARKERS,
    MAX_INTEGER,
    MAX_NESTING_DEPTH,
    MIN_INTEGER,
    OUT_OF_BOUNDS_CONTEXT,
)
from ._exceptions import JSONSyntaxError, LexError, LimitError, ParseError
from ._scanner import Scanner, Token, TokenKind
from ._values import JsonArray, JsonObject

if TYPE_CHECKING:
    from ._types import Value

__all__ = ["Parser", "error_context"]

logger = getLogger(__name__)


def error_context(text: str, position: int) -> str:
    """Return the excerpt of text around position with an inline marker.

    Up to ERROR_CONTEXT_WIDTH characters are taken before the failure point,
    and after it the same width plus however many were taken before.
    """
    if position >= len(text):
        return OUT_OF_BOUNDS_CONTEXT
    start = max(position - ERROR_CONTEXT_WIDTH, 0)
    before = position - start
    end = min(position + ERROR_CONTEXT_WIDTH + before, len(text))
    window = text[start:end]
    if before > 0:
        return window[:before] + ERROR_MARKER + window[before:]
    return window


class Parser:
    """Parses one text into a JsonObject, recording the first error."""

    __slots__ = ("_depth", "_error", "_max_depth", "_scanner")

    _scanner: Scanner
    _error: ParseError | None
    _max_depth: int
    _depth: int

    def __init__(self, text: str, *, max_depth: int = MAX_NESTING_DEPTH) -> None:
        self._scanner = Scanner(text)
        self._error = None
        self._max_depth = max_depth
        self._depth = 0

    @property
    def error(self) -> ParseError | None:
        """The first error recorded, or None."""
        return self._error

    @property
    def failed(self) -> bool:
        return self._error is not None

    def parse(self) -> JsonObject | None:
        """Parse the whole text.

        Returns:
            The root object, or None if an error was recorded.
        """
        logger.debug(f"Parsing {len(self._scanner.text)} characters")
        root = self._parse_object()
        if root is None or self._error is not None:
            return None
        logger.debug(f"Parsed root object with {len(root)} properties")
        return root

    def _fail(
        self, token: Token, reason: str, error_type: type[ParseError] = JSONSyntaxError
    ) -> None:
        if self._error is not None:
            return
        self._error = error_type(
            reason,
            position=token.position,
            token_text=token.text,
            context=error_context(self._scanner.text, token.position),
        )
        logger.debug(f"Parse failed at position {token.position}: {reason}")

    def _peek(self) -> Token:
        token = self._scanner.peek()
        if token.kind is TokenKind.INVALID:
            self._fail(token, "Invalid token", LexError)
        return token

    def _consume(self) -> Token:
        token = self._scanner.next_token()
        if token.kind is TokenKind.INVALID:
            self._fail(token, "Invalid token", LexError)
        return token

    def _enter(self, token: Token) -> bool:
        self._depth += 1
        if self._depth > self._max_depth:
            reason = f"nesting depth {self._depth} exceeds maximum {self._max_depth}"
            self._fail(token, reason, LimitError)
            return False
        return True

    def _parse_value(self) -> "Value | None":
        token = self._peek()
        if self.failed:
            return None

        kind = token.kind
        if kind is TokenKind.OBJECT_START:
            return self._parse_object()
        if kind is TokenKind.ARRAY_START:
            return self._parse_array()
        if kind is TokenKind.STRING:
            _ = self._consume()
            return token.text
        if kind is TokenKind.NUMBER:
            _ = self._consume()
            return self._convert_number(token)
        if kind is TokenKind.NULL:
            _ = self._consume()
            return None
        if kind is TokenKind.BOOLEAN:
            _ = self._consume()
            return token.text == "true"

        self._fail(token, "Unexpected token while parsing value")
        return None

    def _convert_number(self, token: Token) -> int | float | None:
        literal = token.text
        try:
            if any(char in FLOAT_MARKERS for char in literal):
                number: int | float = float(literal)
            else:
                number = int(literal)
        except ValueError:
            self._fail(token, "Invalid number", LexError)
            return None

        if isinstance(number, float):
            if math.isinf(number):
                self._fail(token, "Number out of range", LexError)
                return None
        elif not MIN_INTEGER <= number <= MAX_INTEGER:
            self._fail(token, "Number out of range", LexError)
            return None
        return number

    def _parse_array(self) -> JsonArray | None:
        token = self._consume()
        if self.failed:
            return None
        if token.kind is not TokenKind.ARRAY_START:
            self._fail(token, "Expected '['")
            return None
        try:
            if not self._enter(token):
                return None
            return self._parse_array_items()
        finally:
            self._depth -= 1

    def _parse_array_items(self) -> JsonArray | None:
        result = JsonArray()
        values = result.values

        token = self._peek()
        if self.failed:
            return None
        if token.kind is TokenKind.ARRAY_END:
            _ = self._consume()
            return result

        while True:
            value = self._parse_value()
            if self.failed:
                return None
            values.append(value)

            token = self._consume()
            if self.failed:
                return None
            if token.kind is TokenKind.ARRAY_END:
                return result
            if token.kind is not TokenKind.COMMA:
                self._fail(token, "Expected ',' or ']'")
                return None

    def _parse_object(self) -> JsonObject | None:
        token = self._consume()
        if self.failed:
            return None
        if token.kind is not TokenKind.OBJECT_START:
            self._fail(token, "Expected '{'")
            return None
        try:
            if not self._enter(token):
                return None
            return self._parse_object_members()
        finally:
            self._depth -= 1

    def _parse_object_members(self) -> JsonObject | None:
        result = JsonObject()
        properties = result.properties

        token = self._peek()
        if self.failed:
            return None
        if token.kind is TokenKind.OBJECT_END:
            _ = self._consume()
            return result

        while True:
            key_token = self._consume()
            if self.failed:
                return None
            if key_token.kind is not TokenKind.STRING:
                self._fail(key_token, "Expected string key")
                return None

            token = self._consume()
            if self.failed:
                return None
            if token.kind is not TokenKind.COLON:
                self._fail(token, "Expected ':'")
                return None

            value = self._parse_value()
            if self.failed:
                return None
            # Duplicate keys keep the first value
            _ = properties.setdefault(key_token.text, value)

            token = self._consume()
            if self.failed:
                return None
            if token.kind is TokenKind.OBJECT_END:
                return result
            if token.kind is not TokenKind.COMMA:
                self._fail(token, "Expected ',' or '}'")
                return None
