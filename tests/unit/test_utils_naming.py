"""
Unit tests for naming and string literal utilities.
"""

import pytest

from declgen.utils.naming import is_name
from declgen.utils.string_utils import character_literal_without_quotes, string_literal


class TestIsName:
    """Test identifier validation."""

    @pytest.mark.parametrize("name", ["x", "Point", "_private", "camelCase2", "`is`", "`with space`"])
    def test_valid_names(self, name):
        """Test names that can be declared."""
        assert is_name(name)

    @pytest.mark.parametrize("name", ["", "2d", "class", "fun", "with space", "a-b", "``", "`a\nb`", None, 3])
    def test_invalid_names(self, name):
        """Test names that cannot be declared."""
        assert not is_name(name)


class TestStringLiteral:
    """Test string literal escaping."""

    def test_plain(self):
        """Test a string without special characters."""
        assert string_literal("hello") == "\"hello\""

    def test_null(self):
        """Test the null literal."""
        assert string_literal(None) == "null"

    def test_escapes(self):
        """Test escaped characters."""
        assert string_literal("a\tb\\c") == "\"a\\tb\\\\c\""
        assert string_literal("${x}") == "\"\\${x}\""

    def test_control_character(self):
        """Test unicode escapes for other control characters."""
        assert character_literal_without_quotes("\x01") == "\\u0001"
