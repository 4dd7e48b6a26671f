"""Internal helpers.

Small function combinators shared across modules and handy in tests."""

from __future__ import annotations

from collections.abc import Callable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def compose[A, B, C](f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """
    Left-to-right composition: compose(f, g)(x) == g(f(x)).

    Matches the order of chained calls, so
    r.map(f).map(g) == r.map(compose(f, g)).
    """
    def composed(x: A) -> C:
        return g(f(x))
    return composed


__all__ = ("identity", "compose")
