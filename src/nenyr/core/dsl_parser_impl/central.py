"""
Central-only parser mixin for the Nenyr language.

Parses the sections that may only appear in ``Construct Central``.

Syntax:

    Imports({
        Import('https://fonts.googleapis.com/css2?family=Roboto'),
        Import('./styles/reset.css')
    }),
    Typefaces({ roseMartin: "./typefaces/rosemartin.regular.otf" }),
    Breakpoints({
        MobileFirst({ onMobile: "360px", onTablet: "720px" }),
        DesktopFirst({ onDesktop: "1024px" })
    })
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ErrorRule
from ..lexer import TokenType
from ..validators import is_valid_import, is_valid_typeface


class CentralParserMixin:
    """Parser mixin for imports, typefaces and breakpoints."""

    if TYPE_CHECKING:
        advance: Any
        match: Any
        current_token: Any
        syntax_error: Any
        validation_error: Any
        parse_string_literal: Any
        parse_comma_separated: Any
        parse_property_map: Any
        parse_curly_bracketed_delimiter: Any
        parse_parenthesized_delimiter: Any

    def parse_imports(self) -> list[str]:
        """
        Parse an ``Imports`` section.

        Raises:
            ValidationError: If an import is neither a URL nor a stylesheet path
        """
        self.advance()
        return self.parse_parenthesized_delimiter(
            "Expected `(` after `Imports`.",
            "Expected `)` to close the `Imports` section.",
            lambda parser: parser.parse_curly_bracketed_delimiter(
                "Expected `{` to open the list of imports.",
                "Expected `}` to close the list of imports.",
                lambda inner: inner._parse_import_entries(),
                suggestion_on_open="Write it as `Imports({ Import('./styles.css') })`.",
                suggestion_on_close="Separate imports with commas and close the list with `}`.",
            ),
            suggestion_on_open="Write it as `Imports({ Import('./styles.css') })`.",
            suggestion_on_close="Close the section with `})`.",
        )

    def _parse_import_entries(self) -> list[str]:
        imports: list[str] = []

        def parse_import() -> None:
            if not self.match(TokenType.IMPORT):
                raise self.syntax_error(
                    "Expected `Import` inside `Imports`.",
                    "Each entry is written as `Import('https://...')`.",
                )
            self.advance()
            token = self.parse_parenthesized_delimiter(
                "Expected `(` after `Import`.",
                "Expected `)` after the import path.",
                lambda parser: parser.parse_string_literal(
                    "Expected a quoted URL or path in `Import`.",
                    "Write it as `Import('https://...')` or `Import('./file.css')`.",
                ),
                suggestion_on_open="Write it as `Import('./file.css')`.",
                suggestion_on_close="Close the import with `)`.",
            )
            if not is_valid_import(token.value):
                raise self.validation_error(
                    f"`{token.value}` is not a valid import.",
                    token,
                    rule=ErrorRule.INVALID_IMPORT,
                    suggestion="Use an http(s) or ftp URL, or a path such as `./styles/file.css`.",
                )
            imports.append(token.value)

        self.parse_comma_separated(parse_import, TokenType.CURLY_BRACKET_CLOSE)
        return imports

    def parse_typefaces(self) -> ir.PropertyMap:
        """
        Parse a ``Typefaces`` section.

        Raises:
            ValidationError: If a value does not name a font file
        """
        keyword = self.advance()
        typefaces = self.parse_property_map("Typefaces")
        for name, value in typefaces.items():
            if not is_valid_typeface(value):
                raise self.validation_error(
                    f"The typeface `{name}` points to `{value}`, which is not a font file.",
                    keyword,
                    rule=ErrorRule.INVALID_TYPEFACE,
                    suggestion="Point typefaces at .otf, .ttf, .woff, .woff2 or .eot files.",
                )
        return typefaces

    def parse_breakpoints(self) -> ir.Breakpoints:
        """Parse a ``Breakpoints`` section."""
        self.advance()
        schemas: dict[str, ir.PropertyMap] = {}

        def parse_schema() -> None:
            if not self.match(TokenType.MOBILE_FIRST, TokenType.DESKTOP_FIRST):
                raise self.syntax_error(
                    "Expected `MobileFirst` or `DesktopFirst` inside `Breakpoints`.",
                    'Write it as `MobileFirst({ onMobile: "360px" })`.',
                )
            keyword = self.advance()
            schemas[keyword.value] = self.parse_property_map(keyword.value)

        self.parse_parenthesized_delimiter(
            "Expected `(` after `Breakpoints`.",
            "Expected `)` to close the `Breakpoints` section.",
            lambda parser: parser.parse_curly_bracketed_delimiter(
                "Expected `{` to open the breakpoint schemas.",
                "Expected `}` to close the breakpoint schemas.",
                lambda inner: inner.parse_comma_separated(
                    parse_schema, TokenType.CURLY_BRACKET_CLOSE
                ),
                suggestion_on_open="Write it as `Breakpoints({ MobileFirst({ ... }) })`.",
                suggestion_on_close="Separate schemas with commas and close the block with `}`.",
            ),
            suggestion_on_open="Write it as `Breakpoints({ MobileFirst({ ... }) })`.",
            suggestion_on_close="Close the section with `})`.",
        )
        return ir.Breakpoints(
            mobile_first=schemas.get(TokenType.MOBILE_FIRST.value),
            desktop_first=schemas.get(TokenType.DESKTOP_FIRST.value),
        )
