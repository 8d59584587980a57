"""
Token cursor for the Nenyr parser.

The cursor holds exactly one current token and moves strictly forward,
pulling the next token from the lexer on each advance. It also remembers
a bounded window of recent tokens so diagnostics can embed a trace.
"""

from __future__ import annotations

from collections import deque

from .errors import ErrorRule, Trace, TraceEntry, extract_snippet, make_lexer_error
from .lexer import Lexer, Token, TokenType

DEFAULT_TRACE_SIZE = 8


class TokenCursor:
    """Forward-only cursor over a pull-based lexer."""

    def __init__(self, lexer: Lexer, trace_size: int = DEFAULT_TRACE_SIZE):
        """
        Initialize the cursor and load the first token.

        Args:
            lexer: Token source
            trace_size: Number of recent tokens kept for traces

        Raises:
            LexerError: If the first token cannot be produced
        """
        if trace_size < 1:
            raise ValueError("trace_size must be at least 1")
        self.lexer = lexer
        self._history: deque[Token] = deque(maxlen=trace_size)
        self._current = lexer.next_token()
        self._history.append(self._current)

    def current_token(self) -> Token:
        """Get current token."""
        return self._current

    def at_end(self) -> bool:
        return self._current.type == TokenType.EOF

    def advance(self) -> Token:
        """
        Consume the current token and load the next one.

        Returns:
            The token that was consumed

        Raises:
            LexerError: At end of input, or if the lexer rejects the next token
        """
        consumed = self._current
        if consumed.type == TokenType.EOF:
            raise make_lexer_error(
                "Unexpected end of input: the document ended before parsing finished.",
                self.lexer.context_path,
                consumed.line,
                consumed.column,
                rule=ErrorRule.UNEXPECTED_END_OF_INPUT,
                snippet=extract_snippet(self.lexer.text, consumed.line),
                trace=self.trace(),
            )
        self._current = self.lexer.next_token()
        self._history.append(self._current)
        return consumed

    def trace(self) -> Trace:
        """Snapshot of the recent-token window."""
        return Trace(
            tuple(
                TraceEntry(token.type.name, token.value, token.line, token.column)
                for token in self._history
            )
        )
