"""Token scanner.

Turns source text into a stream of tokens with one token of lookahead. The
scanner never raises: anything it cannot recognize becomes an INVALID token
and the parser decides how to report it.

String tokens keep escape sequences as written. A backslash and the
character after it are both copied into the token text, so "a\\"b" scans to
the four characters a, backslash, quote, b.
"""

from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple

from ._constants import NUMBER_CHARS, WHITESPACE

__all__ = ["Scanner", "Token", "TokenKind"]


class TokenKind(Enum):
    OBJECT_START = "{"
    OBJECT_END = "}"
    ARRAY_START = "["
    ARRAY_END = "]"
    COMMA = ","
    COLON = ":"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    END = "end"
    INVALID = "invalid"


class Token(NamedTuple):
    """A lexical token: (kind, position, text)."""

    kind: TokenKind
    position: int
    text: str


_PUNCTUATION: dict[str, TokenKind] = {
    "{": TokenKind.OBJECT_START,
    "}": TokenKind.OBJECT_END,
    "[": TokenKind.ARRAY_START,
    "]": TokenKind.ARRAY_END,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

_LITERALS: dict[str, TokenKind] = {
    "null": TokenKind.NULL,
    "true": TokenKind.BOOLEAN,
    "false": TokenKind.BOOLEAN,
}


class Scanner:
    """Lookahead-1 tokenizer over a string."""

    __slots__ = ("_lookahead", "_pos", "_text")

    _text: str
    _pos: int
    _lookahead: Token | None

    def __init__(self, text: str = "") -> None:
        self.reset(text)

    def reset(self, text: str) -> None:
        """Start scanning text from the beginning."""
        self._text = text
        self._pos = 0
        self._lookahead = None

    @property
    def text(self) -> str:
        return self._text

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self._lookahead is None:
            self._lookahead = self._scan()
        return self._lookahead

    def next_token(self) -> Token:
        """Consume and return the next token."""
        token = self.peek()
        self._lookahead = None
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, stopping after END."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END:
                return

    def _skip_whitespace(self) -> None:
        text = self._text
        pos = self._pos
        while pos < len(text) and text[pos] in WHITESPACE:
            pos += 1
        self._pos = pos

    def _scan(self) -> Token:
        self._skip_whitespace()
        start = self._pos
        if start >= len(self._text):
            return Token(TokenKind.END, start, "")

        char = self._text[start]
        kind = _PUNCTUATION.get(char)
        if kind is not None:
            self._pos += 1
            return Token(kind, start, char)
        if char == '"':
            return self._scan_string()
        if char in "ntf":
            return self._scan_literal()
        if char in NUMBER_CHARS:
            return self._scan_number()
        self._pos += 1
        return Token(TokenKind.INVALID, start, char)

    def _scan_string(self) -> Token:
        text = self._text
        start = self._pos
        pos = start + 1
        chars: list[str] = []
        while pos < len(text):
            char = text[pos]
            if char == "\\":
                if pos + 1 >= len(text):
                    break
                # Escapes are kept verbatim, backslash included
                chars.append(text[pos : pos + 2])
                pos += 2
                continue
            if char == '"':
                self._pos = pos + 1
                return Token(TokenKind.STRING, start, "".join(chars))
            chars.append(char)
            pos += 1
        # Unterminated: report at the opening quote and stop scanning
        self._pos = len(text)
        return Token(TokenKind.INVALID, start, text[start])

    def _scan_literal(self) -> Token:
        start = self._pos
        for literal, kind in _LITERALS.items():
            if self._text.startswith(literal, start):
                self._pos = start + len(literal)
                return Token(kind, start, literal)
        self._pos += 1
        return Token(TokenKind.INVALID, start, self._text[start])

    def _scan_number(self) -> Token:
        text = self._text
        start = self._pos
        pos = start
        while pos < len(text) and text[pos] in NUMBER_CHARS:
            pos += 1
        self._pos = pos
        return Token(TokenKind.NUMBER, start, text[start:pos])
