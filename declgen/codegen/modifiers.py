"""
Modifier tokens for generated declarations.

Modifiers are a closed set of keywords. Declarations store them in an
insertion-ordered set, but the writer always prints them in the canonical
order of the enum below, so the same modifiers produce the same text no
matter how they were added.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, MutableSet


class KModifier(Enum):
    """Declaration modifiers, listed in the order they are rendered."""

    # Multiplatform
    EXPECT = "expect"
    ACTUAL = "actual"

    # Visibility
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    INTERNAL = "internal"

    EXTERNAL = "external"

    # Inheritance
    FINAL = "final"
    OPEN = "open"
    ABSTRACT = "abstract"
    SEALED = "sealed"
    CONST = "const"

    OVERRIDE = "override"
    LATEINIT = "lateinit"
    TAILREC = "tailrec"
    VARARG = "vararg"
    SUSPEND = "suspend"
    INNER = "inner"

    # Type kinds
    ENUM = "enum"
    ANNOTATION = "annotation"
    COMPANION = "companion"
    DATA = "data"

    # Functions
    INLINE = "inline"
    NOINLINE = "noinline"
    CROSSINLINE = "crossinline"
    REIFIED = "reified"
    INFIX = "infix"
    OPERATOR = "operator"

    # Variance
    IN = "in"
    OUT = "out"

    @property
    def keyword(self) -> str:
        return self.value


_ORDER = {modifier: index for index, modifier in enumerate(KModifier)}


def sorted_modifiers(modifiers: Iterable[KModifier]) -> List[KModifier]:
    """Return ``modifiers`` in canonical rendering order."""
    return sorted(set(modifiers), key=_ORDER.__getitem__)


class ModifierSet(MutableSet):
    """
    Insertion-ordered set of modifiers.

    Adding a modifier that is already present keeps its original position.
    Only KModifier members are accepted.
    """

    def __init__(self, modifiers: Iterable[KModifier] = ()):
        self._items = {}
        for modifier in modifiers:
            self.add(modifier)

    def __contains__(self, modifier: object) -> bool:
        return modifier in self._items

    def __iter__(self) -> Iterator[KModifier]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, modifier: KModifier) -> None:
        if not isinstance(modifier, KModifier):
            raise TypeError(f"expected a KModifier but was {modifier!r}")
        self._items.setdefault(modifier, None)

    def discard(self, modifier: KModifier) -> None:
        self._items.pop(modifier, None)

    def update(self, modifiers: Iterable[KModifier]) -> None:
        for modifier in modifiers:
            self.add(modifier)

    def __repr__(self) -> str:
        return f"ModifierSet({list(self._items)!r})"
