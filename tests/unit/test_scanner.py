import pytest

from fieldjson import Scanner, Token, TokenKind


def kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in Scanner(text)]


class TestPunctuation:
    def test_scans_all_punctuation(self) -> None:
        assert kinds("{}[],:") == [
            TokenKind.OBJECT_START,
            TokenKind.OBJECT_END,
            TokenKind.ARRAY_START,
            TokenKind.ARRAY_END,
            TokenKind.COMMA,
            TokenKind.COLON,
            TokenKind.END,
        ]

    def test_records_positions(self) -> None:
        tokens = list(Scanner('{ "a" : 1 }'))
        assert [t.position for t in tokens] == [0, 2, 6, 8, 10, 11]

    def test_skips_all_whitespace_kinds(self) -> None:
        tokens = list(Scanner(" \t\r\n{\n\t}\r\n"))
        assert tokens[0] == Token(TokenKind.OBJECT_START, 4, "{")
        assert tokens[1] == Token(TokenKind.OBJECT_END, 7, "}")
        assert tokens[2].kind is TokenKind.END

    def test_empty_input_is_end(self) -> None:
        assert Scanner("").next_token() == Token(TokenKind.END, 0, "")


class TestLookahead:
    def test_peek_does_not_advance(self) -> None:
        scanner = Scanner("[1]")
        first = scanner.peek()
        assert scanner.peek() == first
        assert scanner.next_token() == first
        assert scanner.next_token().kind is TokenKind.NUMBER

    def test_reset_restarts_scanning(self) -> None:
        scanner = Scanner("[")
        _ = scanner.next_token()
        scanner.reset("{")
        assert scanner.peek() == Token(TokenKind.OBJECT_START, 0, "{")
        assert scanner.text == "{"

    def test_end_repeats(self) -> None:
        scanner = Scanner("")
        assert scanner.next_token().kind is TokenKind.END
        assert scanner.next_token().kind is TokenKind.END


class TestNumbers:
    @pytest.mark.parametrize(
        "text",
        ["0", "42", "-7", "3.25", "1e10", "2E-3", "+5", "1.2.3", "--", "1-2"],
        ids=[
            "zero",
            "integer",
            "negative",
            "fraction",
            "exponent",
            "upper_exponent",
            "leading_plus",
            "two_dots",
            "dashes",
            "inner_dash",
        ],
    )
    def test_absorbs_maximal_run(self, text: str) -> None:
        token = Scanner(text + ",").next_token()
        assert token == Token(TokenKind.NUMBER, 0, text)

    def test_stops_at_non_number_char(self) -> None:
        tokens = list(Scanner("12]"))
        assert tokens[0] == Token(TokenKind.NUMBER, 0, "12")
        assert tokens[1].kind is TokenKind.ARRAY_END


class TestStrings:
    def test_plain_string(self) -> None:
        assert Scanner('"hello"').next_token() == Token(TokenKind.STRING, 0, "hello")

    def test_empty_string(self) -> None:
        assert Scanner('""').next_token() == Token(TokenKind.STRING, 0, "")

    def test_escaped_quote_kept_verbatim(self) -> None:
        token = Scanner(r'"a\"b"').next_token()
        assert token.text == 'a\\"b'
        assert len(token.text) == 4

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (r'"line\nbreak"', "line\\nbreak"),
            (r'"tab\there"', "tab\\there"),
            (r'"\u0041"', "\\u0041"),
            (r'"back\\slash"', "back\\\\slash"),
        ],
        ids=["newline", "tab", "unicode", "backslash"],
    )
    def test_escapes_are_not_decoded(self, source: str, expected: str) -> None:
        assert Scanner(source).next_token().text == expected

    def test_unicode_content(self) -> None:
        assert Scanner('"café ✓"').next_token().text == "café ✓"

    def test_unterminated_string_is_invalid(self) -> None:
        token = Scanner('"abc').next_token()
        assert token == Token(TokenKind.INVALID, 0, '"')

    def test_trailing_backslash_is_invalid(self) -> None:
        assert Scanner('"abc\\').next_token().kind is TokenKind.INVALID

    def test_continues_after_string(self) -> None:
        tokens = list(Scanner('"a":"b"'))
        assert [t.kind for t in tokens] == [
            TokenKind.STRING,
            TokenKind.COLON,
            TokenKind.STRING,
            TokenKind.END,
        ]
        assert tokens[2].position == 4


class TestLiterals:
    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("null", TokenKind.NULL),
            ("true", TokenKind.BOOLEAN),
            ("false", TokenKind.BOOLEAN),
        ],
        ids=["null", "true", "false"],
    )
    def test_literals(self, text: str, kind: TokenKind) -> None:
        assert Scanner(text).next_token() == Token(kind, 0, text)

    @pytest.mark.parametrize(
        "text", ["nul", "nil", "tru", "True", "fals", "f"], ids=str
    )
    def test_partial_literal_is_invalid(self, text: str) -> None:
        assert Scanner(text).next_token().kind is TokenKind.INVALID

    def test_unknown_character_is_invalid(self) -> None:
        token = Scanner("  @").next_token()
        assert token == Token(TokenKind.INVALID, 2, "@")

    def test_invalid_token_advances(self) -> None:
        assert kinds("@}") == [
            TokenKind.INVALID,
            TokenKind.OBJECT_END,
            TokenKind.END,
        ]
