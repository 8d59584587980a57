"""
Animation parser mixin for the Nenyr language.

Syntax:

    Animation('slideScale') {
        Fraction(0, { transform: "scale(1)" }),
        Fraction([50, 75], { transform: "scale(1.2)" }),
        Fraction(100, { transform: "scale(1)" })
    }

or, with evenly spread keyframes:

    Animation('fadeIn') {
        Progressive({ opacity: "0" }),
        Progressive({ opacity: "1" })
    }

The two styles cannot be mixed in one animation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType


class AnimationParserMixin:
    """Parser mixin for animation blocks."""

    if TYPE_CHECKING:
        advance: Any
        match: Any
        current_token: Any
        syntax_error: Any
        parse_comma_separated: Any
        parse_declared_name: Any
        parse_property_map: Any
        parse_property_block: Any
        parse_curly_bracketed_delimiter: Any
        parse_parenthesized_delimiter: Any
        parse_square_bracketed_delimiter: Any

    def parse_animation(self) -> ir.Animation:
        """
        Parse an ``Animation`` block.

        Grammar:
            ANIMATION ( STRING ) { keyframe,* }
        """
        self.advance()
        name = self.parse_declared_name("Animation")

        kind, keyframes = self.parse_curly_bracketed_delimiter(
            f"Expected `{{` to open the body of the animation `{name}`.",
            f"Expected `}}` to close the animation `{name}`.",
            lambda parser: parser._parse_keyframes(name),
            suggestion_on_open=f"Write it as `Animation('{name}') {{ Fraction(0, {{ ... }}) }}`.",
            suggestion_on_close="Separate keyframes with commas and close the animation with `}`.",
        )
        return ir.Animation(name=name, kind=kind, keyframes=keyframes)

    def _parse_keyframes(self, name: str) -> tuple[ir.AnimationKind, list[ir.Keyframe]]:
        keyframes: list[ir.Keyframe] = []
        kind = ir.AnimationKind.NONE

        def parse_keyframe() -> None:
            nonlocal kind
            if self.match(TokenType.FRACTION):
                keyframe_kind = ir.AnimationKind.FRACTION
            elif self.match(TokenType.PROGRESSIVE):
                keyframe_kind = ir.AnimationKind.PROGRESSIVE
            else:
                raise self.syntax_error(
                    f"Expected `Fraction` or `Progressive` in the animation `{name}`.",
                    "Keyframes are written as `Fraction(50, { ... })` or `Progressive({ ... })`.",
                )

            if kind not in (ir.AnimationKind.NONE, keyframe_kind):
                raise self.syntax_error(
                    f"The animation `{name}` mixes `Fraction` and `Progressive` keyframes.",
                    "Use only one keyframe style per animation.",
                )
            kind = keyframe_kind

            self.advance()
            if keyframe_kind == ir.AnimationKind.PROGRESSIVE:
                keyframes.append(ir.Keyframe(properties=self.parse_property_map("Progressive")))
            else:
                keyframes.append(self._parse_fraction())

        self.parse_comma_separated(parse_keyframe, TokenType.CURLY_BRACKET_CLOSE)
        return kind, keyframes

    def _parse_fraction(self) -> ir.Keyframe:
        """
        Parse the arguments of ``Fraction``.

        Grammar:
            ( (NUMBER | [ NUMBER,* ]) , { properties } )
        """

        def parse_arguments(parser: Any) -> ir.Keyframe:
            if parser.match(TokenType.SQUARE_BRACKET_OPEN):
                stops = parser.parse_square_bracketed_delimiter(
                    "Expected `[` to open the list of stops.",
                    "Expected `]` to close the list of stops.",
                    lambda inner: inner._parse_stop_list(),
                    suggestion_on_close="Separate stops with commas and close the list with `]`.",
                )
            else:
                stops = [parser._parse_stop()]

            parser.expect(
                TokenType.COMMA,
                "Expected `,` between the stops and the properties of `Fraction`.",
                "Write it as `Fraction(50, { ... })`.",
            )
            properties = parser.parse_property_block("Fraction")
            return ir.Keyframe(stops=stops, properties=properties)

        return self.parse_parenthesized_delimiter(
            "Expected `(` after `Fraction`.",
            "Expected `)` to close `Fraction`.",
            parse_arguments,
            suggestion_on_open="Write it as `Fraction(50, { ... })`.",
            suggestion_on_close="`Fraction` takes only the stops and one property block.",
        )

    def _parse_stop_list(self) -> list[float]:
        stops: list[float] = []
        self.parse_comma_separated(
            lambda: stops.append(self._parse_stop()), TokenType.SQUARE_BRACKET_CLOSE
        )
        return stops

    def _parse_stop(self) -> float:
        if not self.match(TokenType.NUMBER):
            raise self.syntax_error(
                "Expected a number for the keyframe stop.",
                "Stops are percentages such as `0`, `50` or `100`.",
            )
        return float(self.advance().value)
