"""
Rendering of TypeSpecs into source text.

TypeRenderer writes a declaration in one of three shapes:

    1. Enum constant body    ``NAME(args) { ... }``
    2. Anonymous object      ``object : Base(args), Iface { ... }``
    3. Named declaration     ``@Ann public class Name<T>(val x: T) : Base(x) { ... }``

All three share the same member body. Statement continuation state of the
writer is suspended while a declaration is written, so a declaration used
as an expression (for example an anonymous object in a property
initializer) is not indented as a wrapped statement.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .code_block import CodeBlock, join_to_code
from .constructor_properties import constructor_properties, has_no_body
from .kinds import Kind
from .modifiers import KModifier
from .names import ANY
from .parameter_spec import emit_parameters
from .property_spec import PropertySpec


_PUBLIC = frozenset({KModifier.PUBLIC})


class TypeRenderer:
    """Writes TypeSpecs into a CodeWriter."""

    def render(self, type_spec, code_writer, enum_name: Optional[str] = None) -> None:
        """
        Write ``type_spec``.

        Args:
            type_spec: Declaration to write
            code_writer: Destination writer
            enum_name: Constant name when ``type_spec`` is the body of an
                enum constant, otherwise None
        """
        previous_statement_line = code_writer.statement_line
        code_writer.statement_line = -1

        try:
            elided = constructor_properties(type_spec.primary_constructor, type_spec.property_specs)

            if enum_name is not None:
                has_body = self._emit_enum_constant_header(type_spec, code_writer, enum_name)
            elif type_spec.anonymous_type_arguments is not None:
                has_body = self._emit_anonymous_header(type_spec, code_writer)
            else:
                has_body = self._emit_declaration_header(type_spec, code_writer, elided)
            if not has_body:
                return

            self._emit_body(type_spec, code_writer, elided)

            if type_spec.kind is not Kind.ANNOTATION:
                code_writer.emit("}")
            if enum_name is None and type_spec.anonymous_type_arguments is None:
                code_writer.emit("\n")
        finally:
            code_writer.statement_line = previous_statement_line

    # =========================================================================
    # Headers
    # =========================================================================

    def _emit_enum_constant_header(self, type_spec, code_writer, enum_name: str) -> bool:
        code_writer.emit_kdoc(type_spec.kdoc)
        code_writer.emit_annotations(type_spec.annotations, False)
        code_writer.emit_code("%L", enum_name)
        if type_spec.anonymous_type_arguments.is_not_empty():
            code_writer.emit("(")
            code_writer.emit_code(type_spec.anonymous_type_arguments)
            code_writer.emit(")")
        if has_no_body(type_spec):
            return False
        code_writer.emit(" {\n")
        return True

    def _emit_anonymous_header(self, type_spec, code_writer) -> bool:
        code_writer.emit_code("object")

        supertypes: List[CodeBlock] = []
        if type_spec.superclass != ANY:
            supertypes.append(
                CodeBlock.of(" %T(%L)", type_spec.superclass, type_spec.anonymous_type_arguments)
            )
        for superinterface in type_spec.superinterfaces:
            supertypes.append(CodeBlock.of(" %T", superinterface))

        if supertypes:
            code_writer.emit_code(" :")
            code_writer.emit_code(join_to_code(supertypes, ","))

        if has_no_body(type_spec):
            code_writer.emit(" { }")
            return False
        code_writer.emit(" {\n")
        return True

    def _emit_declaration_header(self, type_spec, code_writer, elided: Dict[str, PropertySpec]) -> bool:
        code_writer.emit_kdoc(type_spec.kdoc)
        code_writer.emit_annotations(type_spec.annotations, False)
        code_writer.emit_modifiers(type_spec.modifiers, _PUBLIC)
        code_writer.emit(type_spec.kind.declaration_keyword)
        if type_spec.name is not None:
            code_writer.emit_code(" %L", type_spec.name)
        code_writer.emit_type_variables(type_spec.type_variables)
        code_writer.emit_where_block(type_spec.type_variables)

        if type_spec.primary_constructor is not None:
            self._emit_primary_constructor(type_spec.primary_constructor, code_writer, elided)

        supertypes = self._declaration_supertypes(type_spec)
        if supertypes:
            code_writer.emit_code(join_to_code(supertypes, ",%W", prefix=" : "))

        if has_no_body(type_spec):
            code_writer.emit("\n")
            return False
        if type_spec.kind is not Kind.ANNOTATION:
            code_writer.emit(" {\n")
        return True

    def _emit_primary_constructor(self, primary_constructor, code_writer, elided: Dict[str, PropertySpec]) -> None:
        use_keyword = False
        if primary_constructor.annotations:
            code_writer.emit(" ")
            code_writer.emit_annotations(primary_constructor.annotations, True)
            use_keyword = True
        if primary_constructor.modifiers:
            if not use_keyword:
                code_writer.emit(" ")
            code_writer.emit_modifiers(primary_constructor.modifiers)
            use_keyword = True
        if use_keyword:
            code_writer.emit("constructor")

        def emit_parameter(parameter) -> None:
            property_spec = elided.get(parameter.name)
            if property_spec is None:
                parameter.emit(code_writer)
                return
            property_spec.emit(code_writer, _PUBLIC, with_initializer=False, inline=True)
            parameter.emit_default_value(code_writer)

        emit_parameters(code_writer, primary_constructor.parameters, emit_parameter)

    def _declaration_supertypes(self, type_spec) -> List[CodeBlock]:
        supertypes: List[CodeBlock] = []
        if type_spec.superclass != ANY:
            has_constructors = any(fun_spec.is_constructor for fun_spec in type_spec.fun_specs)
            if type_spec.primary_constructor is not None or not has_constructors:
                arguments = join_to_code(type_spec.superclass_constructor_parameters)
                supertypes.append(CodeBlock.of("%T(%L)", type_spec.superclass, arguments))
            else:
                # Secondary constructors call super themselves
                supertypes.append(CodeBlock.of("%T", type_spec.superclass))

        for superinterface, delegate in type_spec.superinterfaces.items():
            if delegate is None:
                supertypes.append(CodeBlock.of("%T", superinterface))
            else:
                supertypes.append(CodeBlock.builder().add("%T by ", superinterface).add(delegate).build())
        return supertypes

    # =========================================================================
    # Body
    # =========================================================================

    def _emit_body(self, type_spec, code_writer, elided: Dict[str, PropertySpec]) -> None:
        previous_indent_level = code_writer.indent_level
        code_writer.push_type(type_spec)
        code_writer.indent()
        try:
            self._emit_members(type_spec, code_writer, elided)
        finally:
            code_writer.indent_level = previous_indent_level
            code_writer.pop_type()

    def _emit_members(self, type_spec, code_writer, elided: Dict[str, PropertySpec]) -> None:
        first_member = True

        def separate() -> None:
            nonlocal first_member
            if not first_member:
                code_writer.emit("\n")
            first_member = False

        enum_constants = list(type_spec.enum_constants.items())
        members_follow = self._has_members_after_constants(type_spec, elided)
        for index, (name, constant) in enumerate(enum_constants):
            separate()
            constant.emit(code_writer, name)
            if index < len(enum_constants) - 1:
                code_writer.emit(",\n")
            elif members_follow:
                code_writer.emit(";\n")
            else:
                code_writer.emit("\n")

        for property_spec in type_spec.property_specs:
            if property_spec.name in elided:
                continue
            separate()
            property_spec.emit(code_writer, type_spec.implicit_property_modifiers)

        primary_constructor = type_spec.primary_constructor
        if primary_constructor is not None and primary_constructor.body.is_not_empty():
            separate()
            code_writer.emit("init {\n")
            code_writer.indent()
            code_writer.emit_code(primary_constructor.body)
            if not code_writer.trailing_newline:
                code_writer.emit("\n")
            code_writer.unindent()
            code_writer.emit("}\n")

        if type_spec.initializer_block.is_not_empty():
            separate()
            code_writer.emit_code(type_spec.initializer_block)

        for fun_spec in type_spec.fun_specs:
            if fun_spec.is_constructor:
                separate()
                fun_spec.emit(code_writer, type_spec.implicit_function_modifiers)
        for fun_spec in type_spec.fun_specs:
            if not fun_spec.is_constructor:
                separate()
                fun_spec.emit(code_writer, type_spec.implicit_function_modifiers)

        for nested in type_spec.type_specs:
            separate()
            nested.emit(code_writer, None)

        if type_spec.companion_object is not None:
            separate()
            type_spec.companion_object.emit(code_writer, None)

    @staticmethod
    def _has_members_after_constants(type_spec, elided: Dict[str, PropertySpec]) -> bool:
        primary_constructor = type_spec.primary_constructor
        return (
            any(property_spec.name not in elided for property_spec in type_spec.property_specs)
            or (primary_constructor is not None and primary_constructor.body.is_not_empty())
            or type_spec.initializer_block.is_not_empty()
            or bool(type_spec.fun_specs)
            or bool(type_spec.type_specs)
            or type_spec.companion_object is not None
        )
