"""
Aliases, variables and themes parser mixin for the Nenyr language.

Syntax:

    Aliases({ bgd: "background", dsp: "display" }),
    Variables({ primaryColor: "#FF6677" }),
    Themes({
        Light({ Variables({ primaryColor: "#FFFFFF" }) }),
        Dark({ Variables({ primaryColor: "#000000" }) })
    })
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType


class ThemeParserMixin:
    """Parser mixin for aliases, variables and themes."""

    if TYPE_CHECKING:
        advance: Any
        match: Any
        syntax_error: Any
        parse_comma_separated: Any
        parse_property_map: Any
        parse_curly_bracketed_delimiter: Any
        parse_parenthesized_delimiter: Any

    def parse_aliases(self) -> ir.PropertyMap:
        """Parse an ``Aliases`` section (alias -> property name)."""
        self.advance()
        return self.parse_property_map("Aliases")

    def parse_variables(self) -> ir.PropertyMap:
        """Parse a ``Variables`` section (variable -> value)."""
        self.advance()
        return self.parse_property_map("Variables")

    def parse_themes(self) -> ir.Themes:
        """
        Parse a ``Themes`` section.

        Grammar:
            THEMES ( { ((LIGHT | DARK) ( { VARIABLES? } )),* } )
        """
        self.advance()
        schemes: dict[str, ir.PropertyMap] = {}

        def parse_scheme() -> None:
            if not self.match(TokenType.LIGHT, TokenType.DARK):
                raise self.syntax_error(
                    "Expected `Light` or `Dark` inside `Themes`.",
                    "Write it as `Light({ Variables({ ... }) })`.",
                )
            keyword = self.advance()
            schemes[keyword.value] = self.parse_parenthesized_delimiter(
                f"Expected `(` after `{keyword.value}`.",
                f"Expected `)` to close the `{keyword.value}` theme.",
                lambda parser: parser.parse_curly_bracketed_delimiter(
                    f"Expected `{{` to open the `{keyword.value}` theme.",
                    f"Expected `}}` to close the `{keyword.value}` theme.",
                    lambda inner: inner._parse_scheme_body(),
                    suggestion_on_open=f"Write it as `{keyword.value}({{ Variables({{ ... }}) }})`.",
                    suggestion_on_close="A theme only holds a `Variables` section.",
                ),
                suggestion_on_open=f"Write it as `{keyword.value}({{ Variables({{ ... }}) }})`.",
                suggestion_on_close="Close the theme with `})`.",
            )

        self.parse_parenthesized_delimiter(
            "Expected `(` after `Themes`.",
            "Expected `)` to close the `Themes` section.",
            lambda parser: parser.parse_curly_bracketed_delimiter(
                "Expected `{` to open the themes.",
                "Expected `}` to close the themes.",
                lambda inner: inner.parse_comma_separated(parse_scheme, TokenType.CURLY_BRACKET_CLOSE),
                suggestion_on_open="Write it as `Themes({ Light({ ... }), Dark({ ... }) })`.",
                suggestion_on_close="Separate themes with commas and close the block with `}`.",
            ),
            suggestion_on_open="Write it as `Themes({ Light({ ... }), Dark({ ... }) })`.",
            suggestion_on_close="Close the section with `})`.",
        )
        return ir.Themes(
            light=schemes.get(TokenType.LIGHT.value),
            dark=schemes.get(TokenType.DARK.value),
        )

    def _parse_scheme_body(self) -> ir.PropertyMap:
        if not self.match(TokenType.VARIABLES):
            return {}
        variables = self.parse_variables()
        if self.match(TokenType.COMMA):
            self.advance()
        return variables
