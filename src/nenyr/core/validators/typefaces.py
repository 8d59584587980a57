"""Typeface validation: values must name a font file."""

from pathlib import PurePosixPath

FONT_EXTENSIONS = frozenset({".otf", ".ttf", ".woff", ".woff2", ".eot"})


def is_valid_typeface(value: str) -> bool:
    if not value or any(ch.isspace() for ch in value):
        return False
    return PurePosixPath(value).suffix.lower() in FONT_EXTENSIONS
