"""
Formatted code fragments.

A CodeBlock is an immutable sequence of literal text and placeholders,
each placeholder bound to one argument at construction time:

    %L  literal: emitted as-is (code blocks and specs are emitted in place)
    %S  string: emitted as an escaped, double-quoted string literal
    %N  name: a string, or anything with a ``name`` attribute
    %T  type: a TypeName
    %W  a space where a line may be wrapped
    %%  a literal percent sign
    %>  increase the indentation level
    %<  decrease the indentation level
    %[  begin a statement
    %]  end a statement

Arguments are normalized as they are bound (names become strings), so two
blocks built from the same format and equivalent arguments are equal.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

from .names import TypeName
from ..utils.exceptions import CodeFormatError


ARGUMENT_PLACEHOLDERS = frozenset("LSNT")
NO_ARGUMENT_PLACEHOLDERS = frozenset("%W><[]")


def _name_argument(arg: Any, format_string: str) -> str:
    if isinstance(arg, str):
        return arg
    name = getattr(arg, "name", None)
    if isinstance(name, str):
        return name
    raise CodeFormatError(f"expected name but was {arg!r}", format_string)


def _string_argument(arg: Any) -> Any:
    if arg is None or isinstance(arg, str):
        return arg
    return str(arg)


def _type_argument(arg: Any, format_string: str) -> TypeName:
    if isinstance(arg, TypeName):
        return arg
    raise CodeFormatError(f"expected type but was {arg!r}", format_string)


def _parse(format_string: str, args: Tuple[Any, ...]) -> Tuple[List[str], List[Any]]:
    """Split ``format_string`` into parts and bind ``args`` to placeholders."""
    parts: List[str] = []
    bound: List[Any] = []
    arg_index = 0
    position = 0
    length = len(format_string)

    while position < length:
        if format_string[position] != "%":
            next_percent = format_string.find("%", position)
            if next_percent == -1:
                next_percent = length
            parts.append(format_string[position:next_percent])
            position = next_percent
            continue

        if position + 1 >= length:
            raise CodeFormatError("dangling format characters", format_string)
        placeholder = format_string[position + 1]

        if placeholder in ARGUMENT_PLACEHOLDERS:
            if arg_index >= len(args):
                raise CodeFormatError(f"index {arg_index} for '%{placeholder}' is out of range", format_string)
            arg = args[arg_index]
            arg_index += 1
            if placeholder == "N":
                arg = _name_argument(arg, format_string)
            elif placeholder == "S":
                arg = _string_argument(arg)
            elif placeholder == "T":
                arg = _type_argument(arg, format_string)
            bound.append(arg)
        elif placeholder not in NO_ARGUMENT_PLACEHOLDERS:
            raise CodeFormatError(f"invalid format placeholder '%{placeholder}'", format_string)

        parts.append(format_string[position:position + 2])
        position += 2

    if arg_index != len(args):
        raise CodeFormatError(f"{len(args) - arg_index} unused arguments", format_string)
    return parts, bound


class CodeBlock:
    """An immutable fragment of code with bound placeholders."""

    EMPTY: "CodeBlock"

    def __init__(self, format_parts: Iterable[str], args: Iterable[Any]):
        self.format_parts: Tuple[str, ...] = tuple(format_parts)
        self.args: Tuple[Any, ...] = tuple(args)

    @classmethod
    def of(cls, format_string: str, *args: Any) -> "CodeBlock":
        return cls.builder().add(format_string, *args).build()

    @staticmethod
    def builder() -> "CodeBlock.Builder":
        return CodeBlock.Builder()

    def is_empty(self) -> bool:
        return not self.format_parts

    def is_not_empty(self) -> bool:
        return bool(self.format_parts)

    def to_builder(self) -> "CodeBlock.Builder":
        builder = CodeBlock.Builder()
        builder.format_parts.extend(self.format_parts)
        builder.args.extend(self.args)
        return builder

    def __eq__(self, other) -> bool:
        if not isinstance(other, CodeBlock):
            return False
        return self.format_parts == other.format_parts and self.args == other.args

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        from .code_writer import CodeWriter

        code_writer = CodeWriter()
        code_writer.emit_code(self)
        return code_writer.getvalue()

    def __repr__(self) -> str:
        return f"CodeBlock({''.join(self.format_parts)!r}, args={list(self.args)!r})"

    class Builder:
        """Accumulates format parts and arguments for a CodeBlock."""

        def __init__(self):
            self.format_parts: List[str] = []
            self.args: List[Any] = []

        def is_empty(self) -> bool:
            return not self.format_parts

        def add(self, format_string, *args: Any) -> "CodeBlock.Builder":
            """Append a format string with its arguments, or a whole CodeBlock."""
            if isinstance(format_string, CodeBlock):
                if args:
                    raise CodeFormatError("a code block takes no arguments")
                self.format_parts.extend(format_string.format_parts)
                self.args.extend(format_string.args)
                return self
            parts, bound = _parse(format_string, args)
            self.format_parts.extend(parts)
            self.args.extend(bound)
            return self

        def add_statement(self, format_string: str, *args: Any) -> "CodeBlock.Builder":
            self.add("%[")
            self.add(format_string, *args)
            self.add("\n%]")
            return self

        def begin_control_flow(self, control_flow: str, *args: Any) -> "CodeBlock.Builder":
            self.add(control_flow + " {\n", *args)
            self.indent()
            return self

        def next_control_flow(self, control_flow: str, *args: Any) -> "CodeBlock.Builder":
            self.unindent()
            self.add("} " + control_flow + " {\n", *args)
            self.indent()
            return self

        def end_control_flow(self) -> "CodeBlock.Builder":
            self.unindent()
            self.add("}\n")
            return self

        def indent(self) -> "CodeBlock.Builder":
            self.format_parts.append("%>")
            return self

        def unindent(self) -> "CodeBlock.Builder":
            self.format_parts.append("%<")
            return self

        def build(self) -> "CodeBlock":
            return CodeBlock(self.format_parts, self.args)


CodeBlock.EMPTY = CodeBlock((), ())


def join_to_code(
    blocks: Iterable[CodeBlock],
    separator: str = ", ",
    prefix: str = "",
    suffix: str = "",
) -> CodeBlock:
    """
    Join ``blocks`` into one block.

    ``separator``, ``prefix`` and ``suffix`` are format strings, so they may
    contain argument-free placeholders such as ``%W``.
    """
    builder = CodeBlock.builder()
    builder.add(prefix)
    for index, block in enumerate(blocks):
        if index > 0:
            builder.add(separator)
        builder.add(block)
    builder.add(suffix)
    return builder.build()
