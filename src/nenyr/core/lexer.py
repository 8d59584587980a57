"""
Lexer/Tokenizer for the Nenyr styling language.

Converts raw Nenyr text into tokens with source location tracking.
The lexer is pull-based: ``next_token()`` produces one token per call so
that the parser's cursor only ever holds the token it is looking at.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import ErrorRule, extract_snippet, make_lexer_error


class TokenType(Enum):
    """Token types in the Nenyr language."""

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"
    TRUE = "true"
    FALSE = "false"

    # Delimiters
    CURLY_BRACKET_OPEN = "{"
    CURLY_BRACKET_CLOSE = "}"
    PARENTHESIS_OPEN = "("
    PARENTHESIS_CLOSE = ")"
    SQUARE_BRACKET_OPEN = "["
    SQUARE_BRACKET_CLOSE = "]"
    COLON = ":"
    COMMA = ","
    SEMICOLON = ";"

    # Contexts
    CONSTRUCT = "Construct"
    CENTRAL = "Central"
    LAYOUT = "Layout"
    MODULE = "Module"
    EXTENDING = "Extending"

    # Central / context methods
    IMPORTS = "Imports"
    IMPORT = "Import"
    TYPEFACES = "Typefaces"
    BREAKPOINTS = "Breakpoints"
    MOBILE_FIRST = "MobileFirst"
    DESKTOP_FIRST = "DesktopFirst"
    ALIASES = "Aliases"
    VARIABLES = "Variables"
    THEMES = "Themes"
    LIGHT = "Light"
    DARK = "Dark"

    # Animations
    ANIMATION = "Animation"
    FRACTION = "Fraction"
    PROGRESSIVE = "Progressive"

    # Classes
    CLASS = "Class"
    DERIVING = "Deriving"
    IMPORTANT = "Important"
    PANORAMIC_VIEWER = "PanoramicViewer"
    STYLESHEET = "Stylesheet"

    # Style patterns (pseudo selectors)
    HOVER = "Hover"
    ACTIVE = "Active"
    FOCUS = "Focus"
    FOCUS_WITHIN = "FocusWithin"
    FOCUS_VISIBLE = "FocusVisible"
    VISITED = "Visited"
    CHECKED = "Checked"
    DISABLED = "Disabled"
    FIRST_CHILD = "FirstChild"
    LAST_CHILD = "LastChild"
    BEFORE = "Before"
    AFTER = "After"
    PLACEHOLDER = "Placeholder"
    SELECTION = "Selection"

    # Special
    EOF = "EOF"


# Reserved words mapped to their token types
KEYWORDS = {
    token_type.value: token_type
    for token_type in TokenType
    if token_type.value[0].isalpha() and token_type.value.upper() != token_type.value
}

# ASCII only; float() rejects other Unicode digits
DIGITS = "0123456789"

PUNCTUATION = {
    "{": TokenType.CURLY_BRACKET_OPEN,
    "}": TokenType.CURLY_BRACKET_CLOSE,
    "(": TokenType.PARENTHESIS_OPEN,
    ")": TokenType.PARENTHESIS_CLOSE,
    "[": TokenType.SQUARE_BRACKET_OPEN,
    "]": TokenType.SQUARE_BRACKET_CLOSE,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}

# Pattern keywords usable as keys in a class body
STYLE_PATTERNS = (
    TokenType.STYLESHEET,
    TokenType.HOVER,
    TokenType.ACTIVE,
    TokenType.FOCUS,
    TokenType.FOCUS_WITHIN,
    TokenType.FOCUS_VISIBLE,
    TokenType.VISITED,
    TokenType.CHECKED,
    TokenType.DISABLED,
    TokenType.FIRST_CHILD,
    TokenType.LAST_CHILD,
    TokenType.BEFORE,
    TokenType.AFTER,
    TokenType.PLACEHOLDER,
    TokenType.SELECTION,
)


@dataclass(frozen=True)
class Token:
    """
    A single token in a Nenyr document.

    Attributes:
        type: Type of token
        value: String value of the token (unquoted for strings)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    type: TokenType
    value: str
    line: int
    column: int

    def describe(self) -> str:
        """Human-readable rendering used inside diagnostics."""
        if self.type == TokenType.EOF:
            return "the end of the document"
        if self.type == TokenType.STRING:
            return f'"{self.value}"'
        return f"`{self.value}`"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for Nenyr documents.

    Produces tokens on demand; once the end of input is reached every
    further call returns EOF.
    """

    def __init__(self, text: str, context_path: str | Path = ""):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            context_path: Source path (for error reporting)
        """
        self.text = text
        self.context_path = str(context_path)
        self.pos = 0
        self.line = 1
        self.column = 1

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _error(self, message: str, line: int, column: int, rule: ErrorRule, suggestion: str | None = None):
        return make_lexer_error(
            message,
            self.context_path,
            line,
            column,
            rule=rule,
            snippet=extract_snippet(self.text, line),
            suggestion=suggestion,
        )

    def skip_trivia(self) -> None:
        """Skip whitespace, line comments and block comments."""
        while True:
            ch = self.current_char()
            if ch is not None and ch.isspace():
                self.advance()
            elif ch == "/" and self.peek_char() == "/":
                while self.current_char() not in (None, "\n"):
                    self.advance()
            elif ch == "/" and self.peek_char() == "*":
                start_line, start_col = self.line, self.column
                self.advance()
                self.advance()
                while not (self.current_char() == "*" and self.peek_char() == "/"):
                    if self.current_char() is None:
                        raise self._error(
                            "Unterminated block comment.",
                            start_line,
                            start_col,
                            ErrorRule.UNTERMINATED_LITERAL,
                            suggestion="Close the comment with `*/`.",
                        )
                    self.advance()
                self.advance()
                self.advance()
            else:
                return

    def read_string(self) -> str:
        """Read a quoted string."""
        start_line = self.line
        start_col = self.column
        quote = self.current_char()
        self.advance()

        chars = []
        while True:
            current = self.current_char()
            if current is None or current == quote or current == "\n":
                break

            if current == "\\":
                self.advance()
                escape_char = self.current_char()
                if escape_char == "n":
                    chars.append("\n")
                elif escape_char == "t":
                    chars.append("\t")
                elif escape_char is not None:
                    chars.append(escape_char)
                self.advance()
            else:
                chars.append(current)
                self.advance()

        if self.current_char() != quote:
            raise self._error(
                "Unterminated string literal.",
                start_line,
                start_col,
                ErrorRule.UNTERMINATED_LITERAL,
                suggestion=f"Close the string with a matching {quote} on the same line.",
            )

        self.advance()
        return "".join(chars)

    def read_number(self) -> str:
        """Read an integer or decimal, with an optional leading minus."""
        chars = []
        if self.current_char() == "-":
            chars.append("-")
            self.advance()
        current = self.current_char()
        while current is not None and (
            current in DIGITS or (current == "." and "." not in chars)
        ):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        chars = []
        current = self.current_char()
        while current is not None and (current.isalnum() or current in "_-"):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def next_token(self) -> Token:
        """
        Produce the next token.

        Raises:
            LexerError: If an invalid character or unterminated literal is found
        """
        self.skip_trivia()

        ch = self.current_char()
        token_line = self.line
        token_col = self.column

        if ch is None:
            return Token(TokenType.EOF, "", token_line, token_col)

        if ch in PUNCTUATION:
            self.advance()
            return Token(PUNCTUATION[ch], ch, token_line, token_col)

        if ch in ('"', "'"):
            return Token(TokenType.STRING, self.read_string(), token_line, token_col)

        if ch in DIGITS or (ch == "-" and (self.peek_char() or "x") in DIGITS):
            return Token(TokenType.NUMBER, self.read_number(), token_line, token_col)

        if ch.isalpha() or ch == "_":
            value = self.read_identifier()
            return Token(KEYWORDS.get(value, TokenType.IDENTIFIER), value, token_line, token_col)

        raise self._error(
            f"Unexpected character: {ch!r}.",
            token_line,
            token_col,
            ErrorRule.INVALID_CHARACTER,
        )

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens ending with EOF
        """
        tokens = [self.next_token()]
        while tokens[-1].type != TokenType.EOF:
            tokens.append(self.next_token())
        return tokens


def tokenize(text: str, context_path: str | Path = "") -> list[Token]:
    """
    Convenience function to tokenize Nenyr text.

    Args:
        text: Source text
        context_path: Source path

    Returns:
        List of tokens
    """
    return Lexer(text, context_path).tokenize()
