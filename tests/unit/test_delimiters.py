"""Tests for the delimiter-scoped parsing methods."""

import pytest

from nenyr.core.delimiters import DelimiterKind
from nenyr.core.errors import ErrorKind, ErrorRule, ParseError
from nenyr.core.lexer import TokenType


def nothing(parser):
    return None


class TestCurlyBracketedDelimiter:
    """Tests for `{ ... }` scopes."""

    def test_empty_block(self, make_parser):
        """Test that `{ }` with an empty interior succeeds."""
        parser = make_parser("{ }")

        assert parser.parse_curly_bracketed_delimiter("open", "close", nothing) is None
        assert parser.current_token().type == TokenType.EOF

    def test_returns_interior_value(self, make_parser):
        """Test that the interior's result is passed back to the caller."""
        parser = make_parser("{ color }")

        value = parser.parse_curly_bracketed_delimiter(
            "open", "close", lambda p: p.advance().value
        )

        assert value == "color"

    def test_nested_blocks(self, make_parser):
        """Test that `{ { } }` succeeds when the interior opens another scope."""
        parser = make_parser("{ { } }")

        parser.parse_curly_bracketed_delimiter(
            "outer open",
            "outer close",
            lambda p: p.parse_curly_bracketed_delimiter("inner open", "inner close", nothing),
        )

        assert parser.current_token().type == TokenType.EOF

    def test_missing_open(self, make_parser):
        """Test `}` where `{` is expected."""
        parser = make_parser("}")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_curly_bracketed_delimiter(
                "Expected `{` to open the block.", "close", nothing
            )

        error = exc_info.value
        assert error.kind == ErrorKind.SYNTAX_ERROR
        assert error.rule == ErrorRule.MISSING_OPEN_DELIMITER
        assert error.delimiter == DelimiterKind.CURLY_BRACKET
        assert error.message.startswith("Expected `{` to open the block.")
        assert "`}`" in error.message
        assert (error.context.line, error.context.column) == (1, 1)

    def test_missing_open_does_not_advance(self, make_parser):
        """Test that a failed open check leaves the cursor where it was."""
        parser = make_parser("( )")

        with pytest.raises(ParseError):
            parser.parse_curly_bracketed_delimiter("open", "close", nothing)

        assert parser.current_token().type == TokenType.PARENTHESIS_OPEN

    def test_missing_open_is_repeatable(self, make_parser):
        """Test that repeating a failed open check gives the same diagnostic."""
        parser = make_parser("}")

        with pytest.raises(ParseError) as first:
            parser.parse_curly_bracketed_delimiter("open", "close", nothing)
        with pytest.raises(ParseError) as second:
            parser.parse_curly_bracketed_delimiter("open", "close", nothing)

        assert first.value == second.value

    def test_missing_close(self, make_parser):
        """Test `{` followed by the end of the document."""
        parser = make_parser("{")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_curly_bracketed_delimiter(
                "open", "Expected `}` to close the block.", nothing
            )

        error = exc_info.value
        assert error.rule == ErrorRule.MISSING_CLOSE_DELIMITER
        assert error.delimiter == DelimiterKind.CURLY_BRACKET
        assert "Expected `}` to close the block." in error.message
        assert "the end of the document" in error.message

    def test_interior_leaves_unconsumed_token(self, make_parser):
        """Test that a token left by the interior is reported at close."""
        parser = make_parser("{ stray }")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_curly_bracketed_delimiter("open", "close", nothing)

        assert exc_info.value.rule == ErrorRule.MISSING_CLOSE_DELIMITER
        assert "`stray`" in exc_info.value.message

    def test_suggestions_are_attached(self, make_parser):
        """Test that the caller's suggestions travel with the diagnostic."""
        parser = make_parser("{")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_curly_bracketed_delimiter(
                "open",
                "close",
                nothing,
                suggestion_on_open="Add `{`.",
                suggestion_on_close="Add `}`.",
            )

        assert exc_info.value.suggestion == "Add `}`."


class TestParenthesizedDelimiter:
    """Tests for `( ... )` scopes."""

    def test_empty_parentheses(self, make_parser):
        """Test that `()` succeeds."""
        parser = make_parser("()")

        parser.parse_parenthesized_delimiter("open", "close", nothing)

        assert parser.current_token().type == TokenType.EOF

    def test_parentheses_with_space(self, make_parser):
        parser = make_parser("( )")

        assert parser.parse_parenthesized_delimiter("open", "close", nothing) is None
        assert parser.current_token().type == TokenType.EOF

    def test_missing_close_with_inner_token(self, make_parser):
        """Test `(x` where the interior consumes nothing."""
        parser = make_parser("(x")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_parenthesized_delimiter("open", "Expected `)`.", nothing)

        error = exc_info.value
        assert error.rule == ErrorRule.MISSING_CLOSE_DELIMITER
        assert error.delimiter == DelimiterKind.PARENTHESIS
        assert "`x`" in error.message

    def test_missing_open(self, make_parser):
        """Test that a missing `(` reports the open message and suggestion."""
        parser = make_parser("{")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_parenthesized_delimiter(
                "Expected `(`.", "close", nothing, suggestion_on_open="Write `(`."
            )

        error = exc_info.value
        assert error.rule == ErrorRule.MISSING_OPEN_DELIMITER
        assert error.delimiter == DelimiterKind.PARENTHESIS
        assert error.suggestion == "Write `(`."

    def test_deep_nesting(self, make_parser):
        """Test fifty nested parenthesis scopes."""
        parser = make_parser("(" * 50 + ")" * 50)

        def nested(p):
            if p.match(TokenType.PARENTHESIS_OPEN):
                p.parse_parenthesized_delimiter("open", "close", nested)

        parser.parse_parenthesized_delimiter("open", "close", nested)

        assert parser.current_token().type == TokenType.EOF


class TestSquareBracketedDelimiter:
    """Tests for `[ ... ]` scopes."""

    def test_stops_after_close(self, make_parser):
        """Test that `[] ]` consumes exactly one pair."""
        parser = make_parser("[] ]")

        parser.parse_square_bracketed_delimiter("open", "close", nothing)

        token = parser.current_token()
        assert token.type == TokenType.SQUARE_BRACKET_CLOSE
        assert token.column == 4

    def test_missing_open(self, make_parser):
        parser = make_parser("]")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_square_bracketed_delimiter("open", "close", nothing)

        assert exc_info.value.rule == ErrorRule.MISSING_OPEN_DELIMITER
        assert exc_info.value.delimiter == DelimiterKind.SQUARE_BRACKET

    def test_missing_close(self, make_parser):
        parser = make_parser("[ )")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_square_bracketed_delimiter("open", "close", nothing)

        assert exc_info.value.rule == ErrorRule.MISSING_CLOSE_DELIMITER
        assert exc_info.value.delimiter == DelimiterKind.SQUARE_BRACKET


class TestInteriorErrors:
    """Tests that interior failures pass through untouched."""

    @pytest.mark.parametrize(
        "method, text",
        [
            ("parse_curly_bracketed_delimiter", "{ }"),
            ("parse_parenthesized_delimiter", "( )"),
            ("parse_square_bracketed_delimiter", "[ ]"),
        ],
    )
    def test_interior_error_propagates_unchanged(self, make_parser, method, text):
        """Test that the exact error raised by the interior reaches the caller."""
        parser = make_parser(text)
        interior_error = ParseError("interior failure")

        def failing(p):
            raise interior_error

        with pytest.raises(ParseError) as exc_info:
            getattr(parser, method)("open", "close", failing)

        assert exc_info.value is interior_error

    def test_interior_error_wins_over_close_check(self, make_parser):
        """Test that no close diagnostic is produced after an interior failure."""
        parser = make_parser("{")

        def failing(p):
            raise p.syntax_error("Expected a property.")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_curly_bracketed_delimiter("open", "close", failing)

        assert exc_info.value.rule == ErrorRule.UNEXPECTED_TOKEN
        assert exc_info.value.message.startswith("Expected a property.")


class TestColonDelimiter:
    """Tests for the `:` separator check."""

    def test_colon_without_advance(self, make_parser):
        """Test that a present colon is left in place by default."""
        parser = make_parser(":")

        parser.parse_colon_delimiter("Expected `:`.")

        assert parser.current_token().type == TokenType.COLON

    def test_colon_with_advance(self, make_parser):
        """Test that with_next_move consumes the colon."""
        parser = make_parser(': "red"')

        parser.parse_colon_delimiter("Expected `:`.", with_next_move=True)

        assert parser.current_token().type == TokenType.STRING

    def test_lone_colon_with_advance(self, make_parser):
        """Test that consuming the only token leaves the cursor at the end."""
        parser = make_parser(":")

        parser.parse_colon_delimiter("Expected `:`.", with_next_move=True)

        assert parser.current_token().type == TokenType.EOF

    def test_missing_colon(self, make_parser):
        """Test `;` where `:` is expected."""
        parser = make_parser(";")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_colon_delimiter(
                "Expected `:` after the property name.",
                suggestion="Write `name: value`.",
            )

        error = exc_info.value
        assert error.rule == ErrorRule.MISSING_SEPARATOR
        assert error.delimiter == DelimiterKind.COLON
        assert "Expected `:` after the property name." in error.message
        assert "`;`" in error.message
        assert error.suggestion == "Write `name: value`."
        assert parser.current_token().type == TokenType.SEMICOLON


class TestDiagnosticContext:
    """Tests for the context attached to delimiter diagnostics."""

    def test_context_path_is_attached(self, make_parser):
        parser = make_parser("}")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_curly_bracketed_delimiter("open", "close", nothing)

        assert exc_info.value.context_path == "test.nyr"

    def test_context_name_is_attached(self, make_parser):
        """Test that the active context name is recorded and then restored."""
        parser = make_parser("}")

        with pytest.raises(ParseError) as exc_info:
            with parser.context(name="dashboard"):
                parser.parse_curly_bracketed_delimiter("open", "close", nothing)

        assert exc_info.value.context_name == "dashboard"
        assert parser.context_name is None

    def test_trace_ends_at_offending_token(self, make_parser):
        parser = make_parser("{ a b")

        with pytest.raises(ParseError) as exc_info:
            parser.parse_curly_bracketed_delimiter("open", "close", lambda p: p.advance())

        trace = exc_info.value.trace
        assert [entry.lexeme for entry in trace] == ["{", "a", "b"]
        assert trace.last.lexeme == "b"


class TestNestingLimit:
    """Tests for the optional nesting limit."""

    @staticmethod
    def nested(parser):
        if parser.match(TokenType.CURLY_BRACKET_OPEN):
            parser.parse_curly_bracketed_delimiter("open", "close", TestNestingLimit.nested)

    def test_within_limit(self, make_parser):
        parser = make_parser("{{{}}}", max_nesting_depth=3)

        parser.parse_curly_bracketed_delimiter("open", "close", self.nested)

        assert parser.depth == 0

    def test_exceeding_limit(self, make_parser):
        """Test that opening a scope past the limit is rejected."""
        parser = make_parser("{{{}}}", max_nesting_depth=2)

        with pytest.raises(ParseError) as exc_info:
            parser.parse_curly_bracketed_delimiter("open", "close", self.nested)

        error = exc_info.value
        assert error.rule == ErrorRule.NESTING_TOO_DEEP
        assert error.delimiter == DelimiterKind.CURLY_BRACKET
        assert (error.context.line, error.context.column) == (1, 3)
        assert parser.depth == 0
