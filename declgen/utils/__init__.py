"""
Utils package for declgen.

This module provides the error hierarchy, logging, configuration and the
small naming and string helpers shared by the code generation modules.
"""

from .exceptions import DeclgenError, ConfigurationError, ValidationError, CodeFormatError
from .logging import setup_logging, get_logger
from .config import (
    DeclgenConfig,
    RenderConfig,
    get_config,
    set_config,
    load_config,
)
from .naming import is_name
from .string_utils import string_literal

__all__ = [
    # Core exceptions
    "DeclgenError",
    "ConfigurationError",
    "ValidationError",
    "CodeFormatError",

    # Logging
    "setup_logging",
    "get_logger",

    # Configuration
    "DeclgenConfig",
    "RenderConfig",
    "get_config",
    "set_config",
    "load_config",

    # Naming and strings
    "is_name",
    "string_literal",
]
