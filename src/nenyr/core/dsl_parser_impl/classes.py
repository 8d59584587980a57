"""
Class parser mixin for the Nenyr language.

Syntax:

    Class('button') Deriving('base') {
        Important(true),
        Stylesheet({ backgroundColor: "blue", padding: "10px" }),
        Hover({ backgroundColor: "navy" }),
        PanoramicViewer({
            onMobile({ Stylesheet({ padding: "4px" }) })
        })
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ErrorRule
from ..lexer import STYLE_PATTERNS, TokenType
from ..validators import is_valid_identifier
from .properties import NAME_RULES


class ClassParserMixin:
    """Parser mixin for style classes."""

    if TYPE_CHECKING:
        advance: Any
        match: Any
        current_token: Any
        syntax_error: Any
        validation_error: Any
        parse_boolean: Any
        parse_comma_separated: Any
        parse_declared_name: Any
        parse_property_map: Any
        parse_curly_bracketed_delimiter: Any
        parse_parenthesized_delimiter: Any

    def parse_class(self) -> ir.StyleClass:
        """
        Parse a ``Class`` declaration.

        Grammar:
            CLASS ( STRING ) (DERIVING ( STRING ))? { class_item,* }
        """
        self.advance()
        name = self.parse_declared_name("Class")

        deriving_from = None
        if self.match(TokenType.DERIVING):
            self.advance()
            deriving_from = self.parse_declared_name("Deriving")

        body: dict[str, Any] = {
            "is_important": None,
            "style_patterns": {},
            "responsive_patterns": {},
        }
        self.parse_curly_bracketed_delimiter(
            f"Expected `{{` to open the body of the class `{name}`.",
            f"Expected `}}` to close the class `{name}`.",
            lambda parser: parser._parse_class_items(name, body),
            suggestion_on_open=f"Write it as `Class('{name}') {{ Stylesheet({{ ... }}) }}`.",
            suggestion_on_close="Separate class items with commas and close the class with `}`.",
        )
        return ir.StyleClass(name=name, deriving_from=deriving_from, **body)

    def _parse_class_items(self, name: str, body: dict[str, Any]) -> None:
        def parse_item() -> None:
            if self.match(TokenType.IMPORTANT):
                self.advance()
                body["is_important"] = self.parse_parenthesized_delimiter(
                    "Expected `(` after `Important`.",
                    "Expected `)` to close `Important`.",
                    lambda parser: parser.parse_boolean(
                        "Expected `true` or `false` in `Important`.",
                        "Write it as `Important(true)`.",
                    ),
                    suggestion_on_open="Write it as `Important(true)`.",
                    suggestion_on_close="Write it as `Important(true)`.",
                )
            elif self.match(*STYLE_PATTERNS):
                pattern = self.advance().value
                body["style_patterns"][pattern] = self.parse_property_map(pattern)
            elif self.match(TokenType.PANORAMIC_VIEWER):
                self.advance()
                body["responsive_patterns"].update(self._parse_panoramic_viewer())
            else:
                raise self.syntax_error(
                    f"Unexpected item in the class `{name}`.",
                    "A class holds `Important`, `Stylesheet`, pseudo selectors such as "
                    "`Hover`, and `PanoramicViewer`.",
                )

        self.parse_comma_separated(parse_item, TokenType.CURLY_BRACKET_CLOSE)

    def _parse_panoramic_viewer(self) -> dict[str, dict[str, ir.PropertyMap]]:
        """
        Parse breakpoint-scoped patterns.

        Grammar:
            ( { (IDENTIFIER ( { (pattern property_map),* } )),* } )
        """
        responsive: dict[str, dict[str, ir.PropertyMap]] = {}

        def parse_breakpoint() -> None:
            token = self.current_token()
            if token.type != TokenType.IDENTIFIER:
                raise self.syntax_error(
                    "Expected a breakpoint name inside `PanoramicViewer`.",
                    "Use a name declared in `Breakpoints`, e.g. `onMobile({ ... })`.",
                )
            if not is_valid_identifier(token.value):
                raise self.validation_error(
                    f"`{token.value}` is not a valid breakpoint name.",
                    token,
                    rule=ErrorRule.INVALID_IDENTIFIER,
                    suggestion=NAME_RULES,
                )
            self.advance()
            responsive[token.value] = self.parse_parenthesized_delimiter(
                f"Expected `(` after the breakpoint `{token.value}`.",
                f"Expected `)` to close the breakpoint `{token.value}`.",
                lambda parser: parser.parse_curly_bracketed_delimiter(
                    f"Expected `{{` to open the patterns of `{token.value}`.",
                    f"Expected `}}` to close the patterns of `{token.value}`.",
                    lambda inner: inner._parse_responsive_patterns(token.value),
                    suggestion_on_open=f"Write it as `{token.value}({{ Stylesheet({{ ... }}) }})`.",
                    suggestion_on_close="Separate patterns with commas and close the block with `}`.",
                ),
                suggestion_on_open=f"Write it as `{token.value}({{ Stylesheet({{ ... }}) }})`.",
                suggestion_on_close="Close the breakpoint with `})`.",
            )

        self.parse_parenthesized_delimiter(
            "Expected `(` after `PanoramicViewer`.",
            "Expected `)` to close `PanoramicViewer`.",
            lambda parser: parser.parse_curly_bracketed_delimiter(
                "Expected `{` to open the breakpoints of `PanoramicViewer`.",
                "Expected `}` to close the breakpoints of `PanoramicViewer`.",
                lambda inner: inner.parse_comma_separated(
                    parse_breakpoint, TokenType.CURLY_BRACKET_CLOSE
                ),
                suggestion_on_open="Write it as `PanoramicViewer({ onMobile({ ... }) })`.",
                suggestion_on_close="Separate breakpoints with commas and close the block with `}`.",
            ),
            suggestion_on_open="Write it as `PanoramicViewer({ onMobile({ ... }) })`.",
            suggestion_on_close="Close `PanoramicViewer` with `})`.",
        )
        return responsive

    def _parse_responsive_patterns(self, breakpoint: str) -> dict[str, ir.PropertyMap]:
        patterns: dict[str, ir.PropertyMap] = {}

        def parse_pattern() -> None:
            if not self.match(*STYLE_PATTERNS):
                raise self.syntax_error(
                    f"Expected a style pattern inside the breakpoint `{breakpoint}`.",
                    "Use `Stylesheet` or a pseudo selector such as `Hover`.",
                )
            pattern = self.advance().value
            patterns[pattern] = self.parse_property_map(pattern)

        self.parse_comma_separated(parse_pattern, TokenType.CURLY_BRACKET_CLOSE)
        return patterns
