"""
List (Foldable)
===============

Immutable ordered sequence whose only consumer is a strict left fold.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._types import Reducer
from ..typeclasses import Monoid


class List[T]:
    """Foldable sequence. Holds a private tuple copy of its input."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[T] = (), /) -> None:
        self._values: tuple[T, ...] = tuple(values)

    def reduce[A](self, f: Reducer[A, T], initial: A, /) -> A:
        """
        Strict left fold: f(...f(f(initial, x0), x1)..., xn).

        Every element is visited exactly once, left to right.
        An empty list returns initial unchanged.
        """
        acc = initial
        for value in self._values:
            acc = f(acc, value)
        return acc

    def fold_map[M](self, monoid: Monoid[M], f: Callable[[T], M], /) -> M:
        """Map each element into the monoid and combine, left to right."""
        return self.reduce(lambda acc, value: monoid.concat(acc, f(value)), monoid.empty())

    def to_list(self) -> list[T]:
        return list(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"List({list(self._values)!r})"


def fold[A, T](
    items: Iterable[T],
    f: Reducer[A, T],
    *,
    initial: A,
) -> A:
    """Left fold over any iterable. Shortcut for List(items).reduce(f, initial)."""
    return List(items).reduce(f, initial)


__all__ = ("List", "fold")
