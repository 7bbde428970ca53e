"""
String Manipulation Utilities for declgen.

This module provides the string helpers used when turning values into
source text.
"""

from __future__ import annotations

from typing import Optional


_ESCAPES = {
    "\\": "\\\\",
    "\"": "\\\"",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "$": "\\$",
}


def character_literal_without_quotes(c: str) -> str:
    """Escape a single character for use inside a string literal."""
    if c in _ESCAPES:
        return _ESCAPES[c]
    if ord(c) < 0x20:
        return f"\\u{ord(c):04x}"
    return c


def string_literal(value: Optional[str]) -> str:
    """
    Render ``value`` as a double-quoted string literal.

    Args:
        value: Text to quote, or None for the null literal

    Returns:
        Quoted and escaped literal text
    """
    if value is None:
        return "null"
    escaped = "".join(character_literal_without_quotes(c) for c in value)
    return f"\"{escaped}\""
