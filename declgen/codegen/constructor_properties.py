"""
Constructor-property elision and the no-body predicate.

A property that merely stores a primary constructor parameter of the same
name and type can be declared inline in the constructor's parameter list
(``class Point(val x: Int)``) instead of in the class body. The functions
here decide which properties qualify and, from that, whether a declaration
needs a body at all. Nothing is cached: both are recomputed per call.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .code_block import CodeBlock
from .fun_spec import FunSpec
from .kinds import Kind
from .property_spec import PropertySpec


def constructor_properties(
    primary_constructor: Optional[FunSpec],
    property_specs: Iterable[PropertySpec],
) -> Dict[str, PropertySpec]:
    """
    Return the properties that can be declared inline as constructor parameters.

    A property qualifies only when the primary constructor has a parameter
    with the same name and type, and the property's initializer is exactly
    a reference to that parameter (``CodeBlock.of("%N", parameter)``). Any
    other initializer, even an equivalent expression, keeps the property in
    the body.

    Args:
        primary_constructor: Primary constructor, or None
        property_specs: Properties in declaration order

    Returns:
        Insertion-ordered mapping of property name to property
    """
    if primary_constructor is None:
        return {}

    result: Dict[str, PropertySpec] = {}
    for property_spec in property_specs:
        parameter = primary_constructor.parameter(property_spec.name)
        if parameter is None:
            continue
        if parameter.type != property_spec.type:
            continue
        if property_spec.delegated or CodeBlock.of("%N", parameter) != property_spec.initializer:
            continue
        result[property_spec.name] = property_spec
    return result


def has_no_body(type_spec) -> bool:
    """
    Check whether ``type_spec`` can be rendered without a ``{ ... }`` block.

    Annotation declarations never have a body. Any other declaration has
    none when all of its properties fold into the primary constructor and
    it has no companion, enum constants, initializer code, functions or
    nested types.
    """
    if type_spec.kind is Kind.ANNOTATION:
        return True

    if type_spec.property_specs:
        elided = constructor_properties(type_spec.primary_constructor, type_spec.property_specs)
        for property_spec in type_spec.property_specs:
            if property_spec.name not in elided:
                return False

    primary_constructor = type_spec.primary_constructor
    return (
        type_spec.companion_object is None
        and not type_spec.enum_constants
        and type_spec.initializer_block.is_empty()
        and (primary_constructor is None or primary_constructor.body.is_empty())
        and not type_spec.fun_specs
        and not type_spec.type_specs
    )
