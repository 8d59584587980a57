"""
Context parser mixin for the Nenyr language.

Every document declares one context:

    Construct Central { ... }
    Construct Layout('dashboard') { ... }
    Construct Module('checkout') Extending('dashboard') { ... }

The context's identity becomes the context name of every diagnostic
raised while its body is parsed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ErrorRule
from ..lexer import Token, TokenType

CENTRAL_ITEMS = (
    TokenType.IMPORTS,
    TokenType.TYPEFACES,
    TokenType.BREAKPOINTS,
    TokenType.ALIASES,
    TokenType.VARIABLES,
    TokenType.THEMES,
    TokenType.ANIMATION,
    TokenType.CLASS,
)

LAYOUT_ITEMS = (
    TokenType.ALIASES,
    TokenType.VARIABLES,
    TokenType.THEMES,
    TokenType.ANIMATION,
    TokenType.CLASS,
)

MODULE_ITEMS = (
    TokenType.ALIASES,
    TokenType.VARIABLES,
    TokenType.ANIMATION,
    TokenType.CLASS,
)


class ContextParserMixin:
    """Parser mixin for the top-level context declaration."""

    if TYPE_CHECKING:
        advance: Any
        match: Any
        expect: Any
        context: Any
        current_token: Any
        syntax_error: Any
        validation_error: Any
        parse_comma_separated: Any
        parse_declared_name: Any
        parse_curly_bracketed_delimiter: Any
        parse_imports: Any
        parse_typefaces: Any
        parse_breakpoints: Any
        parse_aliases: Any
        parse_variables: Any
        parse_themes: Any
        parse_animation: Any
        parse_class: Any

    def parse_document(self) -> ir.NenyrContext:
        """
        Parse a whole document.

        Grammar:
            CONSTRUCT (central | layout | module) EOF
        """
        self.expect(
            TokenType.CONSTRUCT,
            "Expected the document to start with `Construct`.",
            "Begin with `Construct Central { ... }`, `Construct Layout('name') { ... }` "
            "or `Construct Module('name') { ... }`.",
        )

        if self.match(TokenType.CENTRAL):
            document = self.parse_central()
        elif self.match(TokenType.LAYOUT):
            document = self.parse_layout()
        elif self.match(TokenType.MODULE):
            document = self.parse_module()
        else:
            raise self.syntax_error(
                "Expected `Central`, `Layout` or `Module` after `Construct`.",
                "Declare which context this document defines, e.g. `Construct Central { ... }`.",
            )

        if not self.match(TokenType.EOF):
            raise self.syntax_error(
                "Expected the end of the document after the context was closed.",
                "A document declares exactly one context.",
            )
        return document

    def parse_central(self) -> ir.CentralContext:
        self.advance()
        with self.context(name="Central"):
            items = self._parse_context_body("Central", CENTRAL_ITEMS)
        return ir.CentralContext(**items)

    def parse_layout(self) -> ir.LayoutContext:
        self.advance()
        name = self.parse_declared_name("Layout")
        with self.context(name=name):
            items = self._parse_context_body(f"Layout `{name}`", LAYOUT_ITEMS)
        return ir.LayoutContext(layout_name=name, **items)

    def parse_module(self) -> ir.ModuleContext:
        self.advance()
        name = self.parse_declared_name("Module")

        extending_from = None
        if self.match(TokenType.EXTENDING):
            self.advance()
            extending_from = self.parse_declared_name("Extending")

        with self.context(name=name):
            items = self._parse_context_body(f"Module `{name}`", MODULE_ITEMS)
        return ir.ModuleContext(module_name=name, extending_from=extending_from, **items)

    def _parse_context_body(self, label: str, allowed: tuple[TokenType, ...]) -> dict[str, Any]:
        return self.parse_curly_bracketed_delimiter(
            f"Expected `{{` to open the {label} context.",
            f"Expected `}}` to close the {label} context.",
            lambda parser: parser._parse_context_items(label, allowed),
            suggestion_on_open="The context body follows its declaration: `Construct Central { ... }`.",
            suggestion_on_close="Separate context items with commas and close the context with `}`.",
        )

    def _parse_context_items(self, label: str, allowed: tuple[TokenType, ...]) -> dict[str, Any]:
        items: dict[str, Any] = {}
        if TokenType.IMPORTS in allowed:
            items["imports"] = []
            items["typefaces"] = {}
        items["aliases"] = {}
        items["variables"] = {}
        items["animations"] = {}
        items["classes"] = {}

        def parse_item() -> None:
            token = self.current_token()
            if token.type not in allowed:
                raise self.syntax_error(
                    f"Unexpected item in the {label} context.",
                    "Allowed here: " + ", ".join(f"`{t.value}`" for t in allowed) + ".",
                )

            if token.type == TokenType.IMPORTS:
                items["imports"].extend(self.parse_imports())
            elif token.type == TokenType.TYPEFACES:
                items["typefaces"].update(self.parse_typefaces())
            elif token.type == TokenType.BREAKPOINTS:
                self._set_once(items, "breakpoints", self.parse_breakpoints(), token)
            elif token.type == TokenType.ALIASES:
                items["aliases"].update(self.parse_aliases())
            elif token.type == TokenType.VARIABLES:
                items["variables"].update(self.parse_variables())
            elif token.type == TokenType.THEMES:
                self._set_once(items, "themes", self.parse_themes(), token)
            elif token.type == TokenType.ANIMATION:
                animation = self.parse_animation()
                self._register(items["animations"], animation.name, animation, token, "animation")
            else:
                style_class = self.parse_class()
                self._register(items["classes"], style_class.name, style_class, token, "class")

        self.parse_comma_separated(parse_item, TokenType.CURLY_BRACKET_CLOSE)
        return items

    def _register(
        self, registry: dict[str, Any], name: str, value: Any, token: Token, what: str
    ) -> None:
        if name in registry:
            raise self.validation_error(
                f"The {what} `{name}` is declared more than once.",
                token,
                rule=ErrorRule.DUPLICATE_DEFINITION,
                suggestion=f"Rename one of the declarations or merge them into a single {what}.",
            )
        registry[name] = value

    def _set_once(self, items: dict[str, Any], key: str, value: Any, token: Token) -> None:
        if key in items:
            raise self.validation_error(
                f"`{token.value}` is declared more than once.",
                token,
                rule=ErrorRule.DUPLICATE_DEFINITION,
                suggestion=f"Merge both `{token.value}` sections into one.",
            )
        items[key] = value
