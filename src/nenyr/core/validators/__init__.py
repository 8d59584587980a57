"""Shape checks applied by construct parsers to names, imports and typefaces."""

from .identifiers import is_valid_identifier
from .imports import is_url, is_valid_import
from .typefaces import is_valid_typeface

__all__ = ["is_url", "is_valid_identifier", "is_valid_import", "is_valid_typeface"]
