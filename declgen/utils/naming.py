"""
Naming Utilities for declgen.

This module decides which strings are acceptable as declared names for
types, members, parameters and enum constants.
"""

from __future__ import annotations

import re

from .constants import HARD_KEYWORDS, IDENTIFIER_PATTERN, ESCAPED_IDENTIFIER_PATTERN


_NAME_RE = re.compile(f"(?:{IDENTIFIER_PATTERN})|(?:{ESCAPED_IDENTIFIER_PATTERN})")


def is_name(name: object) -> bool:
    """
    Check whether ``name`` can be used as a declared identifier.

    Plain identifiers must not be hard keywords; backtick-quoted names are
    accepted as long as they are non-empty and single-line.
    """
    if not isinstance(name, str):
        return False
    if not _NAME_RE.fullmatch(name):
        return False
    return name not in HARD_KEYWORDS
