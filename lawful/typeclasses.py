"""
Capability contracts
====================

Each capability is an independent structural Protocol. Concrete types
never inherit from these; they satisfy whichever subset they implement:

- Ok / Err     -> Functor, Applicative, Monad
- Writer       -> Functor, Applicative, Monad
- List         -> Foldable
- TraversableList -> Functor, Traversable
- StringMonoid / ListMonoid -> Monoid

Python has no higher-kinded types, so a Functor[T] mapping returns
Functor[U] rather than "the same container of U". Concrete classes narrow
the return type themselves.

Laws (not checked at runtime, covered by tests):
- Functor:     m.map(identity) == m; m.map(f).map(g) == m.map(compose(f, g))
- Applicative: m.ap(pure(f)) == m.map(f)
- Monad:       pure(a).flat_map(f) == f(a); m.flat_map(pure) == m
- Monoid:      concat(concat(a, b), c) == concat(a, concat(b, c));
               concat(a, empty()) == concat(empty(), a) == a
"""

from __future__ import annotations

import typing
from collections.abc import Callable


@typing.runtime_checkable
class Functor[T](typing.Protocol):
    """Container supporting a structure-preserving map."""

    def map[U](self, f: Callable[[T], U], /) -> Functor[U]: ...


@typing.runtime_checkable
class Applicative[T](typing.Protocol):
    """Functor that can apply a wrapped function to a wrapped value."""

    def map[U](self, f: Callable[[T], U], /) -> Applicative[U]: ...

    def ap[U](self, other: typing.Any, /) -> Applicative[U]: ...


@typing.runtime_checkable
class Monad[T](typing.Protocol):
    """Applicative with dependent sequencing."""

    def map[U](self, f: Callable[[T], U], /) -> Monad[U]: ...

    def ap[U](self, other: typing.Any, /) -> Monad[U]: ...

    def flat_map[U](self, f: Callable[[T], typing.Any], /) -> Monad[U]: ...


@typing.runtime_checkable
class Foldable[T](typing.Protocol):
    """Container supporting a strict left fold."""

    def reduce[A](self, f: Callable[[A, T], A], initial: A, /) -> A: ...


@typing.runtime_checkable
class Traversable[T](typing.Protocol):
    """Functor whose elements can be visited with an applicative effect."""

    def map[U](self, f: Callable[[T], U], /) -> Traversable[U]: ...

    def traverse(
        self,
        f: Callable[[T], typing.Any],
        /,
        *,
        pure: Callable[[typing.Any], typing.Any],
    ) -> typing.Any: ...


@typing.runtime_checkable
class Monoid[T](typing.Protocol):
    """Identity element plus an associative binary operation."""

    def empty(self) -> T: ...

    def concat(self, a: T, b: T, /) -> T: ...


__all__ = (
    "Functor",
    "Applicative",
    "Monad",
    "Foldable",
    "Traversable",
    "Monoid",
)
