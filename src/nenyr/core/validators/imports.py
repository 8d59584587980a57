"""
Import validation.

An import is either an external stylesheet URL or a path to a stylesheet
inside the project. Paths are checked for shape only; whether the file
exists is left to whoever assembles the project.
"""

import re
from pathlib import PurePosixPath

URL_PATTERN = re.compile(r"^(https?|ftp)://[^\s/$.?#].[^\s]*$")


def is_url(value: str) -> bool:
    return bool(URL_PATTERN.match(value))


def is_valid_import(value: str) -> bool:
    """
    Check whether ``value`` can be used in ``Import(...)``.

    Accepts http, https and ftp URLs, and absolute or relative paths that
    name a directory component (``./x.css``, ``../x.css``, ``/x.css``,
    ``styles/x.css``). Bare file names, whitespace and unknown URL
    schemes are rejected.
    """
    if not value or any(ch.isspace() for ch in value):
        return False

    if is_url(value):
        return True

    if "://" in value:
        return False

    path = PurePosixPath(value)
    return path.is_absolute() or len(path.parts) > 1 or value.startswith("./")
