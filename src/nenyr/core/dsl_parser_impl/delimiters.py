"""
Delimiter parser mixin for the Nenyr language.

Every construct of the language is some delimiter pair around a grammar
fragment owned by the caller. The methods here check the boundaries,
hand the interior to a caller-supplied parse function, and raise a
located diagnostic (with the caller's message and suggestion) when a
boundary is missing.

Contract shared by the three bracketed methods:

- If the current token is not the opening delimiter, a
  MISSING_OPEN_DELIMITER diagnostic is raised and the cursor does not
  move, so callers may try another construct at the same position.
- Otherwise the opening token is consumed and ``parse_fn(parser)`` runs.
  Whatever it raises propagates unchanged.
- The current token must then be the closing delimiter. It is consumed
  and ``parse_fn``'s result is returned; otherwise a
  MISSING_CLOSE_DELIMITER diagnostic is raised.

``parse_fn`` receives the same parser, so it may open nested scopes of
any kind.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from ..delimiters import DelimiterKind
from ..errors import ErrorRule

T = TypeVar("T")


class DelimiterParserMixin:
    """Parser mixin for delimiter-scoped regions and separators."""

    if TYPE_CHECKING:
        advance: Any
        match: Any
        syntax_error: Any
        depth: int
        max_nesting_depth: int | None

    def parse_curly_bracketed_delimiter(
        self,
        error_message_on_open: str,
        error_message_on_close: str,
        parse_fn: Callable[[Any], T],
        *,
        suggestion_on_open: str | None = None,
        suggestion_on_close: str | None = None,
    ) -> T:
        """
        Parse ``{ ... }`` with ``parse_fn`` handling the interior.

        Raises:
            ParseError: If ``{`` or ``}`` is missing
        """
        return self._parse_bracketed(
            DelimiterKind.CURLY_BRACKET,
            error_message_on_open,
            error_message_on_close,
            parse_fn,
            suggestion_on_open,
            suggestion_on_close,
        )

    def parse_parenthesized_delimiter(
        self,
        error_message_on_open: str,
        error_message_on_close: str,
        parse_fn: Callable[[Any], T],
        *,
        suggestion_on_open: str | None = None,
        suggestion_on_close: str | None = None,
    ) -> T:
        """
        Parse ``( ... )`` with ``parse_fn`` handling the interior.

        Raises:
            ParseError: If ``(`` or ``)`` is missing
        """
        return self._parse_bracketed(
            DelimiterKind.PARENTHESIS,
            error_message_on_open,
            error_message_on_close,
            parse_fn,
            suggestion_on_open,
            suggestion_on_close,
        )

    def parse_square_bracketed_delimiter(
        self,
        error_message_on_open: str,
        error_message_on_close: str,
        parse_fn: Callable[[Any], T],
        *,
        suggestion_on_open: str | None = None,
        suggestion_on_close: str | None = None,
    ) -> T:
        """
        Parse ``[ ... ]`` with ``parse_fn`` handling the interior.

        Raises:
            ParseError: If ``[`` or ``]`` is missing
        """
        return self._parse_bracketed(
            DelimiterKind.SQUARE_BRACKET,
            error_message_on_open,
            error_message_on_close,
            parse_fn,
            suggestion_on_open,
            suggestion_on_close,
        )

    def parse_colon_delimiter(
        self,
        error_message: str,
        *,
        suggestion: str | None = None,
        with_next_move: bool = False,
    ) -> None:
        """
        Check that the current token is ``:``.

        Args:
            error_message: Message used when the colon is missing
            suggestion: Optional fix shown with the diagnostic
            with_next_move: Consume the colon on success

        Raises:
            ParseError: If the current token is not a colon
        """
        if not self.match(DelimiterKind.COLON.open_token):
            raise self.syntax_error(
                error_message,
                suggestion,
                rule=ErrorRule.MISSING_SEPARATOR,
                delimiter=DelimiterKind.COLON,
            )
        if with_next_move:
            self.advance()

    def _parse_bracketed(
        self,
        kind: DelimiterKind,
        error_message_on_open: str,
        error_message_on_close: str,
        parse_fn: Callable[[Any], T],
        suggestion_on_open: str | None,
        suggestion_on_close: str | None,
    ) -> T:
        if not self.match(kind.open_token):
            raise self.syntax_error(
                error_message_on_open,
                suggestion_on_open,
                rule=ErrorRule.MISSING_OPEN_DELIMITER,
                delimiter=kind,
            )

        if self.max_nesting_depth is not None and self.depth >= self.max_nesting_depth:
            raise self.syntax_error(
                f"Delimiters are nested more than {self.max_nesting_depth} levels deep.",
                "Flatten the document or raise `max_nesting_depth` in nenyr.toml.",
                rule=ErrorRule.NESTING_TOO_DEEP,
                delimiter=kind,
            )

        self.advance()
        self.depth += 1
        try:
            parsed_value = parse_fn(self)
        finally:
            self.depth -= 1

        if not self.match(kind.close_token):
            raise self.syntax_error(
                error_message_on_close,
                suggestion_on_close,
                rule=ErrorRule.MISSING_CLOSE_DELIMITER,
                delimiter=kind,
            )
        self.advance()
        return parsed_value
