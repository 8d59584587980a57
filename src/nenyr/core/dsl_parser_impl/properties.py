"""
Property parser mixin for the Nenyr language.

Parses the building blocks shared by most constructs:

    Stylesheet({ backgroundColor: "#FF6677", padding: "10px" })
    Class('name')

i.e. a property map (parenthesized, curly-bracketed, comma-separated
``key: value`` pairs) and a quoted declaration name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ErrorRule
from ..lexer import KEYWORDS, TokenType
from ..validators import is_valid_identifier

NAME_RULES = "Names must start with a letter and contain only letters and digits."


class PropertyParserMixin:
    """Parser mixin for property maps and declaration names."""

    if TYPE_CHECKING:
        advance: Any
        match: Any
        current_token: Any
        syntax_error: Any
        validation_error: Any
        parse_string_literal: Any
        parse_comma_separated: Any
        parse_colon_delimiter: Any
        parse_curly_bracketed_delimiter: Any
        parse_parenthesized_delimiter: Any

    def parse_property_map(self, owner: str) -> ir.PropertyMap:
        """
        Parse ``({ key: value, ... })`` following ``owner``.

        Grammar:
            PARENTHESIS_OPEN property_block PARENTHESIS_CLOSE
        """
        return self.parse_parenthesized_delimiter(
            f"Expected `(` after `{owner}` to open its property block.",
            f"Expected `)` to close the `{owner}` property block.",
            lambda parser: parser.parse_property_block(owner),
            suggestion_on_open=f'Write it as `{owner}({{ key: "value" }})`.',
            suggestion_on_close=f"Close the block with `}})` right after the last `{owner}` property.",
        )

    def parse_property_block(self, owner: str) -> ir.PropertyMap:
        """
        Parse ``{ key: value, ... }``.

        Grammar:
            CURLY_BRACKET_OPEN (IDENTIFIER COLON (STRING | NUMBER)),* CURLY_BRACKET_CLOSE
        """
        return self.parse_curly_bracketed_delimiter(
            f"Expected `{{` to open the `{owner}` properties.",
            f"Expected `}}` to close the `{owner}` properties.",
            lambda parser: parser._parse_property_entries(owner),
            suggestion_on_open=f'Properties of `{owner}` go inside curly brackets: `{{ key: "value" }}`.',
            suggestion_on_close="Separate properties with commas and close the block with `}`.",
        )

    def _parse_property_entries(self, owner: str) -> ir.PropertyMap:
        properties: ir.PropertyMap = {}

        def parse_entry() -> None:
            key_token = self.current_token()
            if not (key_token.type == TokenType.IDENTIFIER or key_token.value in KEYWORDS):
                raise self.syntax_error(
                    f"Expected a property name in `{owner}`.",
                    'Each entry is written as `name: "value"`.',
                )
            if not is_valid_identifier(key_token.value):
                raise self.validation_error(
                    f"`{key_token.value}` is not a valid property name in `{owner}`.",
                    key_token,
                    rule=ErrorRule.INVALID_IDENTIFIER,
                    suggestion=f"Use camelCase, e.g. `backgroundColor`. {NAME_RULES}",
                )
            self.advance()

            self.parse_colon_delimiter(
                f"Expected `:` after the property `{key_token.value}` in `{owner}`.",
                suggestion=f'Separate the name from its value: `{key_token.value}: "value"`.',
                with_next_move=True,
            )

            if not self.match(TokenType.STRING, TokenType.NUMBER):
                raise self.syntax_error(
                    f"Expected a value for the property `{key_token.value}` in `{owner}`.",
                    "Values are quoted strings or numbers.",
                )
            properties[key_token.value] = self.advance().value

        self.parse_comma_separated(parse_entry, TokenType.CURLY_BRACKET_CLOSE)
        return properties

    def parse_declared_name(self, construct: str) -> str:
        """
        Parse ``('name')`` following a construct keyword.

        Raises:
            ValidationError: If the name is not a valid identifier
        """
        example = f"{construct}('myName')"

        def parse_name(parser: Any) -> str:
            token = parser.parse_string_literal(
                f"Expected a quoted name for `{construct}`.",
                f"Write the name as a string, e.g. `{example}`.",
            )
            if not is_valid_identifier(token.value):
                raise parser.validation_error(
                    f"`{token.value}` is not a valid {construct} name.",
                    token,
                    rule=ErrorRule.INVALID_IDENTIFIER,
                    suggestion=NAME_RULES,
                )
            return token.value

        return self.parse_parenthesized_delimiter(
            f"Expected `(` after `{construct}`.",
            f"Expected `)` after the {construct} name.",
            parse_name,
            suggestion_on_open=f"Declare it as `{example}`.",
            suggestion_on_close=f"Close the name with `)`, as in `{example}`.",
        )
