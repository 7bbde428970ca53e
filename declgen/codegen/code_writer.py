"""
Text sink for generated source.

CodeWriter receives text and formatted code blocks and takes care of
indentation, KDoc comment framing and statement continuation lines. It
knows nothing about the declarations it writes; every spec emits itself
into a CodeWriter.
"""

from __future__ import annotations

import io
from typing import Any, Iterable, List, Optional

from .code_block import CodeBlock
from .modifiers import KModifier, sorted_modifiers
from .names import ANY
from ..utils.config import get_config
from ..utils.constants import STATEMENT_CONTINUATION_LEVELS
from ..utils.exceptions import CodeFormatError
from ..utils.string_utils import string_literal


_NULLABLE_ANY = ANY.as_nullable()


class CodeWriter:
    """
    Indentation-aware writer for generated code.

    Indentation is written lazily at the start of each non-empty line, so
    blank lines never carry trailing whitespace. Inside a statement
    (``%[`` ... ``%]``) every line after the first is indented two extra
    levels; ``statement_line`` counts those lines and is -1 outside a
    statement.
    """

    def __init__(self, out: Optional[Any] = None, indent: Optional[str] = None):
        """
        Initialize the writer.

        Args:
            out: Object with a ``write`` method; a StringIO is created if omitted
            indent: Indentation unit; defaults to the configured render indent
        """
        self.out = out if out is not None else io.StringIO()
        self.indent_string = indent if indent is not None else get_config().render.indent
        self.indent_level = 0
        self.kdoc = False
        self.trailing_newline = True
        self.statement_line = -1
        self.type_spec_stack: List[Any] = []

    def getvalue(self) -> str:
        """Return everything written so far (only for the default StringIO sink)."""
        return self.out.getvalue()

    # =========================================================================
    # Indentation and scopes
    # =========================================================================

    def indent(self, levels: int = 1) -> "CodeWriter":
        self.indent_level += levels
        return self

    def unindent(self, levels: int = 1) -> "CodeWriter":
        if self.indent_level - levels < 0:
            raise CodeFormatError(f"cannot unindent {levels} from {self.indent_level}")
        self.indent_level -= levels
        return self

    def push_type(self, type_spec: Any) -> "CodeWriter":
        self.type_spec_stack.append(type_spec)
        return self

    def pop_type(self) -> "CodeWriter":
        self.type_spec_stack.pop()
        return self

    # =========================================================================
    # Raw text
    # =========================================================================

    def emit(self, text: str) -> "CodeWriter":
        """Write ``text``, indenting each line that starts a new line."""
        first = True
        for line in text.split("\n"):
            if not first:
                if self.kdoc and self.trailing_newline:
                    self._emit_indentation()
                    self.out.write(" *")
                self.out.write("\n")
                self.trailing_newline = True
                if self.statement_line != -1:
                    if self.statement_line == 0:
                        # Begin multiple-line statement
                        self.indent(STATEMENT_CONTINUATION_LEVELS)
                    self.statement_line += 1
            first = False
            if not line:
                continue

            if self.trailing_newline:
                self._emit_indentation()
                if self.kdoc:
                    self.out.write(" * ")
            self.out.write(line)
            self.trailing_newline = False
        return self

    def _emit_indentation(self) -> None:
        self.out.write(self.indent_string * self.indent_level)

    # =========================================================================
    # Formatted code
    # =========================================================================

    def emit_code(self, code, *args: Any) -> "CodeWriter":
        """Write a CodeBlock, or a format string with its arguments."""
        code_block = code if isinstance(code, CodeBlock) else CodeBlock.of(code, *args)
        args_iter = iter(code_block.args)

        for part in code_block.format_parts:
            if part == "%L":
                self._emit_literal(next(args_iter))
            elif part == "%N":
                self.emit(next(args_iter))
            elif part == "%S":
                self.emit(string_literal(next(args_iter)))
            elif part == "%T":
                next(args_iter).emit(self)
            elif part == "%%":
                self.emit("%")
            elif part == "%>":
                self.indent()
            elif part == "%<":
                self.unindent()
            elif part == "%[":
                if self.statement_line != -1:
                    raise CodeFormatError("statement enter %[ followed by statement enter %[")
                self.statement_line = 0
            elif part == "%]":
                if self.statement_line == -1:
                    raise CodeFormatError("statement exit %] has no matching statement enter %[")
                if self.statement_line > 0:
                    # End multiple-line statement
                    self.unindent(STATEMENT_CONTINUATION_LEVELS)
                self.statement_line = -1
            elif part == "%W":
                self.emit(" ")
            else:
                self.emit(part)
        return self

    def _emit_literal(self, value: Any) -> None:
        from .annotation_spec import AnnotationSpec
        from .fun_spec import FunSpec
        from .property_spec import PropertySpec
        from .type_spec import TypeSpec

        if isinstance(value, TypeSpec):
            value.emit(self, None)
        elif isinstance(value, AnnotationSpec):
            value.emit(self, inline=True)
        elif isinstance(value, PropertySpec):
            value.emit(self, set())
        elif isinstance(value, FunSpec):
            value.emit(self, {KModifier.PUBLIC})
        elif isinstance(value, CodeBlock):
            self.emit_code(value)
        elif isinstance(value, bool):
            self.emit("true" if value else "false")
        elif value is None:
            self.emit("null")
        else:
            self.emit(str(value))

    # =========================================================================
    # Declaration fragments
    # =========================================================================

    def emit_kdoc(self, kdoc: CodeBlock) -> None:
        if kdoc.is_empty():
            return

        self.emit("/**\n")
        self.kdoc = True
        try:
            self.emit_code(kdoc)
            if not self.trailing_newline:
                self.emit("\n")
        finally:
            self.kdoc = False
        self.emit(" */\n")

    def emit_annotations(self, annotations: Iterable[Any], inline: bool) -> None:
        for annotation in annotations:
            annotation.emit(self, inline)
            self.emit(" " if inline else "\n")

    def emit_modifiers(self, modifiers: Iterable[KModifier], implicit_modifiers: Iterable[KModifier] = ()) -> None:
        """Write ``modifiers`` in canonical order, skipping the implicit ones."""
        implicit = set(implicit_modifiers)
        for modifier in sorted_modifiers(modifiers):
            if modifier in implicit:
                continue
            self.emit(modifier.keyword)
            self.emit(" ")

    def emit_type_variables(self, type_variables: Iterable[Any]) -> None:
        type_variables = list(type_variables)
        if not type_variables:
            return

        self.emit("<")
        for index, type_variable in enumerate(type_variables):
            if index > 0:
                self.emit(", ")
            if type_variable.variance is not None:
                self.emit(f"{type_variable.variance.keyword} ")
            if type_variable.reified:
                self.emit("reified ")
            self.emit_code("%L", type_variable.name)
            if len(type_variable.bounds) == 1 and type_variable.bounds[0] != _NULLABLE_ANY:
                self.emit_code(" : %T", type_variable.bounds[0])
        self.emit(">")

    def emit_where_block(self, type_variables: Iterable[Any]) -> None:
        first_bound = True
        for type_variable in type_variables:
            if len(type_variable.bounds) < 2:
                continue
            for bound in type_variable.bounds:
                self.emit(" where " if first_bound else ", ")
                self.emit_code("%L : %T", type_variable.name, bound)
                first_bound = False
