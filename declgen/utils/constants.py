"""
Constants for declgen.

This module consolidates the constant definitions used across the
package: rendering defaults and the keyword and identifier tables that
decide which names may be declared.
"""

from __future__ import annotations


# =============================================================================
# Rendering Constants
# =============================================================================

DEFAULT_INDENT_SIZE = 2

# Extra indentation applied to the continuation lines of a statement
STATEMENT_CONTINUATION_LEVELS = 2


# =============================================================================
# Identifier Constants
# =============================================================================

# Hard keywords can never be used as plain identifiers
HARD_KEYWORDS = frozenset({
    "as",
    "break",
    "class",
    "continue",
    "do",
    "else",
    "false",
    "for",
    "fun",
    "if",
    "in",
    "interface",
    "is",
    "null",
    "object",
    "package",
    "return",
    "super",
    "this",
    "throw",
    "true",
    "try",
    "typealias",
    "typeof",
    "val",
    "var",
    "when",
    "while",
})

IDENTIFIER_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"

# Backtick-quoted names may contain anything but backticks and line breaks
ESCAPED_IDENTIFIER_PATTERN = r"`[^`\r\n]+`"
