"""
Error types for Nenyr parsing and validation.

Every failure raised while reading a Nenyr document is a ``NenyrError``.
The error carries everything needed to present it to the author:
the failing rule, a message with the offending token embedded, an
optional suggestion supplied by the construct that failed, the context
(construct name, source path, line and column) and a trace of the most
recent tokens seen by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .delimiters import DelimiterKind


class ErrorKind(str, Enum):
    """Top-level category of a diagnostic."""

    SYNTAX_ERROR = "SyntaxError"
    VALIDATION_ERROR = "ValidationError"


class ErrorRule(str, Enum):
    """The precise rule that failed."""

    MISSING_OPEN_DELIMITER = "missing_open_delimiter"
    MISSING_CLOSE_DELIMITER = "missing_close_delimiter"
    MISSING_SEPARATOR = "missing_separator"
    UNEXPECTED_TOKEN = "unexpected_token"

    # Lexer
    INVALID_CHARACTER = "invalid_character"
    UNTERMINATED_LITERAL = "unterminated_literal"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"

    NESTING_TOO_DEEP = "nesting_too_deep"

    # Construct-level checks
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_IMPORT = "invalid_import"
    INVALID_TYPEFACE = "invalid_typeface"
    DUPLICATE_DEFINITION = "duplicate_definition"


@dataclass(frozen=True)
class TraceEntry:
    """A single token remembered by the cursor."""

    kind: str
    lexeme: str
    line: int
    column: int

    def format(self) -> str:
        shown = self.lexeme if self.lexeme else self.kind
        return f"`{shown}` ({self.line}:{self.column})"


@dataclass(frozen=True)
class Trace:
    """Bounded window of the most recent tokens, oldest first."""

    entries: tuple[TraceEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def last(self) -> TraceEntry | None:
        return self.entries[-1] if self.entries else None

    def format(self) -> str:
        return " -> ".join(entry.format() for entry in self.entries)


@dataclass(frozen=True)
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        context_path: Source location of the document (usually a file path)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        context_name: Logical construct being parsed (layout name, "Central", ...)
        snippet: Optional source lines around the error
    """

    context_path: str
    line: int
    column: int
    context_name: str | None = None
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "styles/main.nyr:10:5 in Layout"
        """
        path = self.context_path or "<input>"
        location = f"{path}:{self.line}:{self.column}"
        if self.context_name:
            location += f" in {self.context_name}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippets start at most two lines before the error (see extract_snippet)
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


class NenyrError(Exception):
    """Base exception for all Nenyr diagnostics."""

    kind: ErrorKind = ErrorKind.SYNTAX_ERROR

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        suggestion: str | None = None,
        rule: ErrorRule | None = None,
        delimiter: DelimiterKind | None = None,
        trace: Trace | None = None,
    ):
        self.message = message
        self.context = context
        self.suggestion = suggestion
        self.rule = rule
        self.delimiter = delimiter
        self.trace = trace if trace is not None else Trace()
        super().__init__(self.format())

    @property
    def context_name(self) -> str | None:
        return self.context.context_name if self.context else None

    @property
    def context_path(self) -> str | None:
        return self.context.context_path if self.context else None

    def format(self) -> str:
        """Render the full diagnostic for display."""
        parts = [f"{self.kind.value}: {self.message}"]
        if self.context:
            parts.append(f"  --> {self.context.format()}")
        if self.suggestion:
            parts.append(f"  suggestion: {self.suggestion}")
        if self.trace:
            parts.append(f"  trace: {self.trace.format()}")
        return "\n".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NenyrError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.context == other.context
            and self.suggestion == other.suggestion
            and self.rule == other.rule
            and self.delimiter == other.delimiter
            and self.trace == other.trace
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.rule))


class ParseError(NenyrError):
    """
    Raised when a construct parser or a delimiter check fails.

    Examples:
    - Missing `{` after a class declaration
    - Missing `)` after a property map
    - Missing `:` between a key and its value
    """

    kind = ErrorKind.SYNTAX_ERROR


class LexerError(ParseError):
    """
    Raised by the lexer or by the cursor when advancing fails.

    Examples:
    - Invalid character
    - Unterminated string literal or block comment
    - Advancing past the end of the document
    """


class ValidationError(NenyrError):
    """
    Raised when a syntactically valid construct carries an invalid name,
    import or typeface, or when a definition is repeated.
    """

    kind = ErrorKind.VALIDATION_ERROR


def extract_snippet(text: str, line: int, before: int = 2, after: int = 2) -> str | None:
    """Return the source lines surrounding ``line`` (1-indexed)."""
    lines = text.split("\n")
    if not text or line < 1 or line > len(lines):
        return None
    start = max(1, line - before)
    end = min(len(lines), line + after)
    return "\n".join(lines[start - 1 : end])


def make_parse_error(
    message: str,
    context_path: str,
    line: int,
    column: int,
    *,
    context_name: str | None = None,
    snippet: str | None = None,
    suggestion: str | None = None,
    rule: ErrorRule | None = None,
    delimiter: DelimiterKind | None = None,
    trace: Trace | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description, offending token already embedded
        context_path: Source path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        context_name: Construct being parsed
        snippet: Optional code snippet
        suggestion: Optional corrective hint
        rule: Rule that failed
        delimiter: Delimiter whose check failed, if any
        trace: Recent tokens

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(
        context_path=context_path,
        line=line,
        column=column,
        context_name=context_name,
        snippet=snippet,
    )
    return ParseError(
        message,
        context,
        suggestion=suggestion,
        rule=rule,
        delimiter=delimiter,
        trace=trace,
    )


def make_lexer_error(
    message: str,
    context_path: str,
    line: int,
    column: int,
    *,
    rule: ErrorRule,
    snippet: str | None = None,
    suggestion: str | None = None,
    trace: Trace | None = None,
) -> LexerError:
    """Helper to create a LexerError with context."""
    context = ErrorContext(context_path=context_path, line=line, column=column, snippet=snippet)
    return LexerError(message, context, suggestion=suggestion, rule=rule, trace=trace)


def make_validation_error(
    message: str,
    context_path: str,
    line: int,
    column: int,
    *,
    rule: ErrorRule,
    context_name: str | None = None,
    snippet: str | None = None,
    suggestion: str | None = None,
    trace: Trace | None = None,
) -> ValidationError:
    """Helper to create a ValidationError with context."""
    context = ErrorContext(
        context_path=context_path,
        line=line,
        column=column,
        context_name=context_name,
        snippet=snippet,
    )
    return ValidationError(message, context, suggestion=suggestion, rule=rule, trace=trace)
