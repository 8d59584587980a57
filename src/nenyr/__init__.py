"""
Nenyr - a parser for the Nenyr styling language.

Turns Nenyr documents (Central, Layout and Module contexts) into
immutable IR, reporting failures as located diagnostics with fix
suggestions.
"""

from __future__ import annotations

from ._version import __version__
from .core import ir
from .core.dsl_parser_impl import Parser, parse_nenyr
from .core.errors import LexerError, NenyrError, ParseError, ValidationError

__all__ = [
    "__version__",
    "ir",
    "Parser",
    "parse_nenyr",
    "NenyrError",
    "ParseError",
    "LexerError",
    "ValidationError",
]
