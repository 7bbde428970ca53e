"""
Declgen: Kotlin Type Declaration Generator

Builds Kotlin class, object, interface, enum and annotation declarations
from validated, immutable specs and renders them as source text.

Key Features:
- Builders that reject illegal declarations as soon as they are configured
- Constructor properties folded into the primary constructor automatically
- Enum constant bodies, anonymous objects and named declarations
- Configurable indentation through YAML or JSON config files

Usage:
    from declgen import TypeSpec, FunSpec, PropertySpec, INT

    point = TypeSpec.class_builder("Point").build()
    print(point)
"""

__version__ = "0.1.0"
__author__ = "Declgen Team"
__email__ = "declgen@example.com"

# Public API exports
from .codegen import (
    KModifier,
    TypeName,
    ClassName,
    ParameterizedTypeName,
    TypeVariableName,
    ANY,
    UNIT,
    BOOLEAN,
    INT,
    LONG,
    DOUBLE,
    STRING,
    CodeBlock,
    CodeWriter,
    AnnotationSpec,
    ParameterSpec,
    FunSpec,
    PropertySpec,
    Kind,
    TypeSpec,
)

from .utils import (
    DeclgenError,
    ConfigurationError,
    ValidationError,
    CodeFormatError,
    get_config,
    DeclgenConfig,
)

__all__ = [
    "KModifier",
    "TypeName",
    "ClassName",
    "ParameterizedTypeName",
    "TypeVariableName",
    "ANY",
    "UNIT",
    "BOOLEAN",
    "INT",
    "LONG",
    "DOUBLE",
    "STRING",
    "CodeBlock",
    "CodeWriter",
    "AnnotationSpec",
    "ParameterSpec",
    "FunSpec",
    "PropertySpec",
    "Kind",
    "TypeSpec",
    "DeclgenError",
    "ConfigurationError",
    "ValidationError",
    "CodeFormatError",
    "get_config",
    "DeclgenConfig",
]
