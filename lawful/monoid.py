"""
Monoid instances
================

A monoid is a stateless pairing of an identity element and an associative
combining operation over one type. Instances carry no data, so a single
module-level instance of each is enough.

Laws:
- Associativity: concat(concat(a, b), c) == concat(a, concat(b, c))
- Identity: concat(a, empty()) == concat(empty(), a) == a
"""

from __future__ import annotations

from collections.abc import Iterable

from .typeclasses import Monoid


class StringMonoid:
    """Strings under concatenation, "" as identity."""

    __slots__ = ()

    def empty(self) -> str:
        return ""

    def concat(self, a: str, b: str, /) -> str:
        return a + b


class ListMonoid[A]:
    """Lists under concatenation, [] as identity. Inputs are never mutated."""

    __slots__ = ()

    def empty(self) -> list[A]:
        return []

    def concat(self, a: list[A], b: list[A], /) -> list[A]:
        return [*a, *b]


STRING = StringMonoid()


def mconcat[T](monoid: Monoid[T], items: Iterable[T]) -> T:
    """
    Fold items with the monoid, starting from its identity.

    Usage:
        mconcat(STRING, ["Hello", " ", "World"])  # "Hello World"
        mconcat(STRING, [])                       # ""
    """
    result = monoid.empty()
    for item in items:
        result = monoid.concat(result, item)
    return result


__all__ = ("StringMonoid", "ListMonoid", "STRING", "mconcat")
