"""
Custom exception definitions.

This module defines the exception hierarchy for declgen. Every failure is
raised where the offending input is supplied: builder calls raise
ConfigurationError, ``build()`` raises ValidationError, and malformed code
format strings raise CodeFormatError.
"""

from typing import Optional


class DeclgenError(Exception):
    """
    Base exception for all declgen-related errors.

    This is the root exception class for all declgen-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize declgen error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(DeclgenError):
    """
    Raised when a builder call supplies a facet that is illegal.

    The error is raised by the call that introduced the facet, so the
    builder is left exactly as it was before the call.
    """

    def __init__(self, message: str, kind: Optional[object] = None, rule: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            kind: Declaration kind of the builder that rejected the facet
            rule: Short name of the rule that was violated
        """
        details = {}
        if kind is not None:
            details['kind'] = kind
        if rule:
            details['rule'] = rule

        super().__init__(message, details)
        self.kind = kind
        self.rule = rule


class ValidationError(DeclgenError):
    """
    Raised by ``build()`` when the accumulated facets are inconsistent.
    """

    def __init__(self, message: str, name: Optional[str] = None, rule: Optional[str] = None):
        """
        Initialize validation error.

        Args:
            message: Error description
            name: Name of the declaration being built
            rule: Short name of the rule that was violated
        """
        details = {}
        if name is not None:
            details['name'] = name
        if rule:
            details['rule'] = rule

        super().__init__(message, details)
        self.name = name
        self.rule = rule


class CodeFormatError(DeclgenError):
    """Raised when a code format string does not match its arguments."""

    def __init__(self, message: str, format_string: str = ""):
        details = {}
        if format_string:
            details['format'] = repr(format_string)

        super().__init__(message, details)
        self.format_string = format_string
