"""Parameters of functions and constructors."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from .annotation_spec import AnnotationSpec
from .code_block import CodeBlock
from .modifiers import KModifier, ModifierSet
from .names import TypeName
from ..utils.exceptions import ConfigurationError
from ..utils.naming import is_name


ALLOWED_PARAMETER_MODIFIERS = frozenset({KModifier.VARARG, KModifier.NOINLINE, KModifier.CROSSINLINE})


class ParameterSpec:
    """A parameter such as ``vararg names: String`` or ``count: Int = 0``."""

    def __init__(self, builder: "ParameterSpec.Builder"):
        self.name: str = builder.name
        self.type: TypeName = builder.type
        self.annotations: Tuple[AnnotationSpec, ...] = tuple(builder.annotations)
        self.modifiers: Tuple[KModifier, ...] = tuple(builder.modifiers)
        self.default_value: Optional[CodeBlock] = builder.default_value_block

    @staticmethod
    def builder(name: str, type_name: TypeName, *modifiers: KModifier) -> "ParameterSpec.Builder":
        return ParameterSpec.Builder(name, type_name).add_modifiers(*modifiers)

    def emit(self, code_writer, include_type: bool = True) -> None:
        code_writer.emit_annotations(self.annotations, True)
        code_writer.emit_modifiers(self.modifiers)
        if include_type:
            code_writer.emit_code("%N: %T", self.name, self.type)
        else:
            code_writer.emit_code("%N", self.name)
        self.emit_default_value(code_writer)

    def emit_default_value(self, code_writer) -> None:
        if self.default_value is not None:
            code_writer.emit_code(" = %L", self.default_value)

    def to_builder(self, name: Optional[str] = None, type_name: Optional[TypeName] = None) -> "ParameterSpec.Builder":
        builder = ParameterSpec.Builder(name or self.name, type_name or self.type)
        builder.annotations.extend(self.annotations)
        builder.modifiers.update(self.modifiers)
        builder.default_value_block = self.default_value
        return builder

    def __eq__(self, other) -> bool:
        return isinstance(other, ParameterSpec) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        from .code_writer import CodeWriter

        code_writer = CodeWriter()
        self.emit(code_writer)
        return code_writer.getvalue()

    class Builder:
        def __init__(self, name: str, type_name: TypeName):
            if not is_name(name):
                raise ConfigurationError(f"not a valid name: {name}", rule="parameter_name")
            self.name = name
            self.type = type_name
            self.annotations: List[AnnotationSpec] = []
            self.modifiers = ModifierSet()
            self.default_value_block: Optional[CodeBlock] = None

        def add_annotation(self, annotation) -> "ParameterSpec.Builder":
            if isinstance(annotation, TypeName):
                annotation = AnnotationSpec.of(annotation)
            self.annotations.append(annotation)
            return self

        def add_annotations(self, annotations: Iterable[AnnotationSpec]) -> "ParameterSpec.Builder":
            for annotation in annotations:
                self.add_annotation(annotation)
            return self

        def add_modifiers(self, *modifiers: KModifier) -> "ParameterSpec.Builder":
            for modifier in modifiers:
                if modifier not in ALLOWED_PARAMETER_MODIFIERS:
                    raise ConfigurationError(
                        f"unexpected parameter modifier {modifier}", rule="parameter_modifier"
                    )
                self.modifiers.add(modifier)
            return self

        def default_value(self, format_string, *args: Any) -> "ParameterSpec.Builder":
            if isinstance(format_string, CodeBlock):
                self.default_value_block = format_string
            else:
                self.default_value_block = CodeBlock.of(format_string, *args)
            return self

        def build(self) -> "ParameterSpec":
            return ParameterSpec(self)


def emit_parameters(code_writer, parameters: Iterable[ParameterSpec], emit_parameter=None) -> None:
    """
    Write a parenthesized, comma separated parameter list.

    Args:
        code_writer: Destination writer
        parameters: Parameters in declaration order
        emit_parameter: Optional callback writing a single parameter;
            defaults to ``ParameterSpec.emit``
    """
    code_writer.emit("(")
    for index, parameter in enumerate(parameters):
        if index > 0:
            code_writer.emit(", ")
        if emit_parameter is None:
            parameter.emit(code_writer)
        else:
            emit_parameter(parameter)
    code_writer.emit(")")
