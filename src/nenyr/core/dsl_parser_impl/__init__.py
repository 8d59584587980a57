"""
Nenyr Parser Package.

The parser is built from mixins so that each construct keeps its own
grammar and error wording, while the delimiter checks and diagnostics
are shared.

The main exports are:
- Parser: The complete parser class
- parse_nenyr: Convenience function to parse a document

Usage:
    from nenyr.core.dsl_parser_impl import parse_nenyr

    context = parse_nenyr(text, "styles/central.nyr")
"""

from __future__ import annotations

from pathlib import Path

from .. import ir
from ..cursor import DEFAULT_TRACE_SIZE
from .animations import AnimationParserMixin
from .base import BaseParser
from .central import CentralParserMixin
from .classes import ClassParserMixin
from .contexts import ContextParserMixin
from .delimiters import DelimiterParserMixin
from .properties import PropertyParserMixin
from .themes import ThemeParserMixin


class Parser(
    BaseParser,
    DelimiterParserMixin,
    PropertyParserMixin,
    CentralParserMixin,
    ThemeParserMixin,
    AnimationParserMixin,
    ClassParserMixin,
    ContextParserMixin,
):
    """
    Complete Nenyr parser.

    - DelimiterParserMixin: `{}`, `()`, `[]` scopes and the `:` separator
    - PropertyParserMixin: property maps and declaration names
    - CentralParserMixin: imports, typefaces, breakpoints
    - ThemeParserMixin: aliases, variables, themes
    - AnimationParserMixin: animations and keyframes
    - ClassParserMixin: style classes and responsive patterns
    - ContextParserMixin: Central, Layout and Module documents
    """


def parse_nenyr(
    text: str,
    context_path: str | Path = "",
    *,
    trace_size: int = DEFAULT_TRACE_SIZE,
    max_nesting_depth: int | None = None,
) -> ir.NenyrContext:
    """
    Parse a Nenyr document.

    Args:
        text: Nenyr source text
        context_path: Source location reported in diagnostics
        trace_size: Number of recent tokens embedded in diagnostics
        max_nesting_depth: Optional limit on nested delimiter scopes

    Returns:
        The document's context

    Raises:
        NenyrError: On the first syntax or validation failure
    """
    parser = Parser(
        text,
        context_path,
        trace_size=trace_size,
        max_nesting_depth=max_nesting_depth,
    )
    return parser.parse_document()


__all__ = ["Parser", "parse_nenyr"]
