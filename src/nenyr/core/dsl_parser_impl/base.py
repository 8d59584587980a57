"""
Base parser class for the Nenyr language.

Owns the parser state shared by every construct parser: the token cursor,
the context name and context path attached to diagnostics, and the
helpers used to build those diagnostics.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from ..cursor import DEFAULT_TRACE_SIZE, TokenCursor
from ..errors import (
    ErrorRule,
    LexerError,
    ParseError,
    ValidationError,
    extract_snippet,
    make_parse_error,
    make_validation_error,
)
from ..lexer import Lexer, Token, TokenType

if TYPE_CHECKING:
    from ..delimiters import DelimiterKind


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    One instance parses one document; instances share no state.
    """

    def __init__(
        self,
        text: str,
        context_path: str | Path = "",
        *,
        trace_size: int = DEFAULT_TRACE_SIZE,
        max_nesting_depth: int | None = None,
    ):
        """
        Initialize parser and load the first token.

        Args:
            text: Nenyr source text
            context_path: Source location (for error reporting)
            trace_size: Number of recent tokens embedded in diagnostics
            max_nesting_depth: Optional limit on nested delimiter scopes

        Raises:
            LexerError: If the first token is invalid
        """
        self.text = text
        self.context_path = str(context_path)
        self.context_name: str | None = None
        self.max_nesting_depth = max_nesting_depth
        self.depth = 0
        self.cursor = TokenCursor(Lexer(text, self.context_path), trace_size)

    def current_token(self) -> Token:
        """Get current token."""
        return self.cursor.current_token()

    def advance(self) -> Token:
        """
        Consume and return current token.

        Raises:
            LexerError: If the next token is invalid or the document has ended,
                attributed to the construct being parsed
        """
        try:
            return self.cursor.advance()
        except LexerError as e:
            raise self._attribute(e) from None

    def _attribute(self, error: LexerError) -> LexerError:
        """Re-issue ``error`` with the parser's context name, path and trace."""
        context = error.context
        if context is not None:
            context = replace(
                context, context_path=self.context_path, context_name=self.context_name
            )
        return LexerError(
            error.message,
            context,
            suggestion=error.suggestion,
            rule=error.rule,
            trace=self.cursor.trace(),
        )

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    @contextmanager
    def context(self, name: str | None = None, path: str | Path | None = None) -> Iterator[None]:
        """
        Attribute diagnostics raised inside the block to ``name``/``path``.

        The previous values are restored on exit, including when a
        diagnostic propagates out of the block.
        """
        previous = (self.context_name, self.context_path)
        if name is not None:
            self.context_name = name
        if path is not None:
            self.context_path = str(path)
        try:
            yield
        finally:
            self.context_name, self.context_path = previous

    def with_offending_token(self, message: str) -> str:
        """Embed the current token in ``message``."""
        found = f"However, found {self.current_token().describe()} instead."
        return f"{message} {found}" if message else found

    def syntax_error(
        self,
        message: str,
        suggestion: str | None = None,
        *,
        rule: ErrorRule = ErrorRule.UNEXPECTED_TOKEN,
        delimiter: DelimiterKind | None = None,
    ) -> ParseError:
        """Build a syntax diagnostic located at the current token."""
        token = self.current_token()
        return make_parse_error(
            self.with_offending_token(message),
            self.context_path,
            token.line,
            token.column,
            context_name=self.context_name,
            snippet=extract_snippet(self.text, token.line),
            suggestion=suggestion,
            rule=rule,
            delimiter=delimiter,
            trace=self.cursor.trace(),
        )

    def validation_error(
        self,
        message: str,
        token: Token,
        *,
        rule: ErrorRule,
        suggestion: str | None = None,
    ) -> ValidationError:
        """Build a validation diagnostic located at ``token``."""
        return make_validation_error(
            message,
            self.context_path,
            token.line,
            token.column,
            rule=rule,
            context_name=self.context_name,
            snippet=extract_snippet(self.text, token.line),
            suggestion=suggestion,
            trace=self.cursor.trace(),
        )

    def expect(
        self, token_type: TokenType, error_message: str, suggestion: str | None = None
    ) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        if not self.match(token_type):
            raise self.syntax_error(error_message, suggestion)
        return self.advance()

    def parse_string_literal(self, error_message: str, suggestion: str | None = None) -> Token:
        """Consume a string literal, returning its token."""
        return self.expect(TokenType.STRING, error_message, suggestion)

    def parse_boolean(self, error_message: str, suggestion: str | None = None) -> bool:
        """Consume ``true`` or ``false``."""
        if self.match(TokenType.TRUE, TokenType.FALSE):
            return self.advance().type == TokenType.TRUE
        raise self.syntax_error(error_message, suggestion)

    def parse_comma_separated(self, parse_item, terminator: TokenType) -> None:
        """
        Call ``parse_item`` for each element until ``terminator``.

        Elements are separated by commas; a trailing comma and an empty
        list are accepted. The terminator itself is left for the caller.
        """
        while not self.match(terminator, TokenType.EOF):
            parse_item()
            if not self.match(TokenType.COMMA):
                break
            self.advance()
