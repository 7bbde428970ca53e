"""
Code generation package for declgen.

This package holds the declaration model (TypeSpec and its members), the
format-string CodeBlock and the CodeWriter that renders everything into
Kotlin source text.
"""

from .modifiers import KModifier
from .names import (
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
)
from .code_block import CodeBlock, join_to_code
from .code_writer import CodeWriter
from .annotation_spec import AnnotationSpec
from .parameter_spec import ParameterSpec
from .fun_spec import FunSpec
from .property_spec import PropertySpec
from .kinds import Kind, Feature, KIND_FEATURES
from .constructor_properties import constructor_properties, has_no_body
from .type_renderer import TypeRenderer
from .type_spec import TypeSpec

__all__ = [
    # Names and modifiers
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

    # Code fragments
    "CodeBlock",
    "join_to_code",
    "CodeWriter",

    # Member specs
    "AnnotationSpec",
    "ParameterSpec",
    "FunSpec",
    "PropertySpec",

    # Type declarations
    "Kind",
    "Feature",
    "KIND_FEATURES",
    "constructor_properties",
    "has_no_body",
    "TypeRenderer",
    "TypeSpec",
]
