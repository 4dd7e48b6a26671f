"""Traversable list

Element-wise map plus traverse: run an applicative effect per element
and sequence the effects into one effect wrapping the rebuilt list."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator

from .._helpers import identity
from ..result import Ok
from ..typeclasses import Applicative


class TraversableList[T]:
    """Immutable sequence that is a Functor and a Traversable."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[T] = (), /) -> None:
        self._values: tuple[T, ...] = tuple(values)

    def map[U](self, f: Callable[[T], U], /) -> TraversableList[U]:
        """Functor fmap - new list with f applied to every element."""
        return TraversableList(f(value) for value in self._values)

    def traverse[U](
        self,
        f: Callable[[T], Applicative[U]],
        /,
        *,
        pure: Callable[[TraversableList[U]], Applicative[TraversableList[U]]] = Ok.of,
    ) -> Applicative[TraversableList[U]]:
        """
        Sequence per-element effects left to right with ap.

        Starts from pure(TraversableList()) and, for each element in order,
        folds acc = acc.ap(f(x).map(append)). Every effect must come from
        the same applicative as pure (Ok/Err with the default Ok.of,
        Writer with Writer.pure, ...).

        With Result: Ok(rebuilt list) when every effect is Ok, otherwise the
        first Err in fold order. f is still called for the remaining
        elements, but ap on an Err accumulator discards their results.

        Example:
            TraversableList([1, 2, 3]).traverse(lambda x: Ok(x + 1))
            # Ok(TraversableList([2, 3, 4]))
        """
        acc = pure(TraversableList[U]())
        for value in self._values:
            acc = acc.ap(f(value).map(_appender))
        return acc

    def _append(self, value: T) -> TraversableList[T]:
        return TraversableList((*self._values, value))

    def to_list(self) -> list[T]:
        return list(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraversableList):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"TraversableList({list(self._values)!r})"


def _appender[U](value: U) -> Callable[[TraversableList[U]], TraversableList[U]]:
    """Curried snoc: value -> (xs -> xs + [value])."""
    def append(values: TraversableList[U]) -> TraversableList[U]:
        return values._append(value)
    return append


def traverse[A, U](
    items: Iterable[A],
    f: Callable[[A], Applicative[U]],
    *,
    pure: Callable[[typing.Any], Applicative[TraversableList[U]]] = Ok.of,
) -> Applicative[TraversableList[U]]:
    """Monadic map over any iterable: A -> F[U] gives F[TraversableList[U]]."""
    return TraversableList(items).traverse(f, pure=pure)


def sequence[U](
    effects: Iterable[Applicative[U]],
    *,
    pure: Callable[[typing.Any], Applicative[TraversableList[U]]] = Ok.of,
) -> Applicative[TraversableList[U]]:
    """
    Flip structure: [F[U]] -> F[TraversableList[U]].

    Implemented as traverse(identity).
    """
    return traverse(effects, identity, pure=pure)


__all__ = ("TraversableList", "traverse", "sequence")
