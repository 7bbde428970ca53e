"""
Type references used by generated declarations.

Type names are plain values: two references are equal when they name the
same type with the same nullability. They render as their simple-name
chain; qualifying and importing names is left to the caller.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .modifiers import KModifier
from ..utils.exceptions import ConfigurationError
from ..utils.naming import is_name


class TypeName:
    """Base class for all type references."""

    def __init__(self, nullable: bool = False):
        self.nullable = nullable

    def copy(self, nullable: bool) -> "TypeName":
        raise NotImplementedError

    def as_nullable(self) -> "TypeName":
        return self.copy(nullable=True)

    def as_non_nullable(self) -> "TypeName":
        return self.copy(nullable=False)

    def _key(self) -> tuple:
        raise NotImplementedError

    def _render(self) -> str:
        raise NotImplementedError

    def emit(self, code_writer) -> None:
        code_writer.emit(str(self))

    def __str__(self) -> str:
        suffix = "?" if self.nullable else ""
        return f"{self._render()}{suffix}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TypeName) or type(self) is not type(other):
            return False
        return self._key() == other._key() and self.nullable == other.nullable

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key(), self.nullable))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class ClassName(TypeName):
    """A fully-qualified class, interface, object or enum name."""

    def __init__(self, package_name: str, *simple_names: str, nullable: bool = False):
        super().__init__(nullable)
        if not simple_names:
            raise ConfigurationError("a class name needs at least one simple name", rule="class_name")
        for simple_name in simple_names:
            if not is_name(simple_name):
                raise ConfigurationError(f"not a valid name: {simple_name}", rule="class_name")
        self.package_name = package_name
        self.simple_names: Tuple[str, ...] = tuple(simple_names)

    @classmethod
    def best_guess(cls, canonical_name: str) -> "ClassName":
        """
        Split ``canonical_name`` at the first capitalized segment.

        ``"kotlin.collections.Map.Entry"`` becomes package ``kotlin.collections``
        with simple names ``Map`` and ``Entry``.
        """
        parts = canonical_name.split(".")
        for index, part in enumerate(parts):
            if part[:1].isupper():
                return cls(".".join(parts[:index]), *parts[index:])
        raise ConfigurationError(f"couldn't make a guess for {canonical_name}", rule="class_name")

    @property
    def simple_name(self) -> str:
        return self.simple_names[-1]

    @property
    def canonical_name(self) -> str:
        if self.package_name:
            return ".".join((self.package_name,) + self.simple_names)
        return ".".join(self.simple_names)

    def nested_class(self, name: str) -> "ClassName":
        return ClassName(self.package_name, *self.simple_names, name)

    def parameterized_by(self, *type_arguments: TypeName) -> "ParameterizedTypeName":
        return ParameterizedTypeName(self, *type_arguments)

    def copy(self, nullable: bool) -> "ClassName":
        return ClassName(self.package_name, *self.simple_names, nullable=nullable)

    def _key(self) -> tuple:
        return (self.package_name, self.simple_names)

    def _render(self) -> str:
        return ".".join(self.simple_names)


class ParameterizedTypeName(TypeName):
    """A generic type applied to type arguments, e.g. ``List<String>``."""

    def __init__(self, raw_type: ClassName, *type_arguments: TypeName, nullable: bool = False):
        super().__init__(nullable)
        if not type_arguments:
            raise ConfigurationError(f"no type arguments: {raw_type}", rule="type_arguments")
        self.raw_type = raw_type
        self.type_arguments: Tuple[TypeName, ...] = tuple(type_arguments)

    def copy(self, nullable: bool) -> "ParameterizedTypeName":
        return ParameterizedTypeName(self.raw_type, *self.type_arguments, nullable=nullable)

    def _key(self) -> tuple:
        return (self.raw_type, self.type_arguments)

    def _render(self) -> str:
        arguments = ", ".join(str(argument) for argument in self.type_arguments)
        return f"{self.raw_type}<{arguments}>"


class TypeVariableName(TypeName):
    """
    A type parameter such as ``T``, optionally bounded.

    With a single bound the bound is written inside the type parameter
    list (``<T : Number>``); with several bounds they are moved to a
    trailing ``where`` clause.
    """

    def __init__(
        self,
        name: str,
        *bounds: TypeName,
        variance: Optional[KModifier] = None,
        reified: bool = False,
        nullable: bool = False,
    ):
        super().__init__(nullable)
        if not is_name(name):
            raise ConfigurationError(f"not a valid name: {name}", rule="type_variable")
        if variance not in (None, KModifier.IN, KModifier.OUT):
            raise ConfigurationError(f"{variance} is not a variance", rule="type_variable")
        self.name = name
        self.bounds: Tuple[TypeName, ...] = tuple(bounds)
        self.variance = variance
        self.reified = reified

    def copy(self, nullable: bool) -> "TypeVariableName":
        return TypeVariableName(
            self.name, *self.bounds, variance=self.variance, reified=self.reified, nullable=nullable
        )

    def _key(self) -> tuple:
        return (self.name, self.bounds, self.variance, self.reified)

    def _render(self) -> str:
        return self.name


ANY = ClassName("kotlin", "Any")
UNIT = ClassName("kotlin", "Unit")
BOOLEAN = ClassName("kotlin", "Boolean")
INT = ClassName("kotlin", "Int")
LONG = ClassName("kotlin", "Long")
DOUBLE = ClassName("kotlin", "Double")
STRING = ClassName("kotlin", "String")
