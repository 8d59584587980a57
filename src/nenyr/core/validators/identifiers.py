"""Identifier rules for class, animation, layout and module names."""

import re

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")


def is_valid_identifier(name: str) -> bool:
    """Identifiers start with a letter and contain only letters and digits."""
    return bool(IDENTIFIER_PATTERN.match(name))
