"""
Declaration kinds and the facets each kind accepts.

Every declaration is one of five kinds. A kind fixes the declaration
keyword, the modifiers its members get for free, and (through
KIND_FEATURES) which builder facets are legal for it. Builders consult
this table instead of testing kinds one facet at a time.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet

from .modifiers import KModifier


class Kind(Enum):
    """Categories of type declaration."""

    CLASS = (
        "class",
        frozenset({KModifier.PUBLIC}),
        frozenset({KModifier.PUBLIC}),
    )
    OBJECT = (
        "object",
        frozenset({KModifier.PUBLIC}),
        frozenset({KModifier.PUBLIC}),
    )
    INTERFACE = (
        "interface",
        frozenset({KModifier.PUBLIC}),
        frozenset({KModifier.PUBLIC, KModifier.ABSTRACT}),
    )
    ENUM = (
        "enum class",
        frozenset({KModifier.PUBLIC}),
        frozenset({KModifier.PUBLIC}),
    )
    ANNOTATION = (
        "annotation class",
        frozenset(),
        frozenset({KModifier.PUBLIC, KModifier.ABSTRACT}),
    )

    def __init__(
        self,
        declaration_keyword: str,
        implicit_property_modifiers: FrozenSet[KModifier],
        implicit_function_modifiers: FrozenSet[KModifier],
    ):
        self.declaration_keyword = declaration_keyword
        self.implicit_property_modifiers = implicit_property_modifiers
        self.implicit_function_modifiers = implicit_function_modifiers

    def accepts(self, feature: "Feature") -> bool:
        return feature in KIND_FEATURES[self]

    def __str__(self) -> str:
        return self.name


class Feature(Enum):
    """Builder facets whose legality depends on the declaration kind."""

    SUPERCLASS = "superclass"
    DELEGATION = "delegation"
    COMPANION = "companion object"
    PRIMARY_CONSTRUCTOR = "primary constructor"
    INITIALIZER_BLOCK = "initializer blocks"
    ENUM_CONSTANTS = "enum constants"


KIND_FEATURES: Dict[Kind, FrozenSet[Feature]] = {
    Kind.CLASS: frozenset({
        Feature.SUPERCLASS,
        Feature.DELEGATION,
        Feature.COMPANION,
        Feature.PRIMARY_CONSTRUCTOR,
        Feature.INITIALIZER_BLOCK,
    }),
    Kind.OBJECT: frozenset({
        Feature.SUPERCLASS,
        Feature.INITIALIZER_BLOCK,
    }),
    Kind.INTERFACE: frozenset({
        Feature.COMPANION,
    }),
    Kind.ENUM: frozenset({
        Feature.PRIMARY_CONSTRUCTOR,
        Feature.INITIALIZER_BLOCK,
        Feature.ENUM_CONSTANTS,
    }),
    Kind.ANNOTATION: frozenset({
        Feature.PRIMARY_CONSTRUCTOR,
    }),
}
