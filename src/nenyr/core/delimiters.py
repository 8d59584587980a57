"""Delimiter kinds recognised by the bracketed-scope and separator checks."""

from __future__ import annotations

from enum import Enum

from .lexer import TokenType


class DelimiterKind(str, Enum):
    """A delimiter pair (or, for COLON, a lone separator)."""

    CURLY_BRACKET = "curly_bracket"
    PARENTHESIS = "parenthesis"
    SQUARE_BRACKET = "square_bracket"
    COLON = "colon"

    @property
    def open_token(self) -> TokenType:
        return _TOKENS[self][0]

    @property
    def close_token(self) -> TokenType | None:
        return _TOKENS[self][1]


_TOKENS: dict[DelimiterKind, tuple[TokenType, TokenType | None]] = {
    DelimiterKind.CURLY_BRACKET: (TokenType.CURLY_BRACKET_OPEN, TokenType.CURLY_BRACKET_CLOSE),
    DelimiterKind.PARENTHESIS: (TokenType.PARENTHESIS_OPEN, TokenType.PARENTHESIS_CLOSE),
    DelimiterKind.SQUARE_BRACKET: (TokenType.SQUARE_BRACKET_OPEN, TokenType.SQUARE_BRACKET_CLOSE),
    DelimiterKind.COLON: (TokenType.COLON, None),
}
