"""
Log - list-backed monoid for Writer
===================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Entries accumulated by a Writer, oldest first.

    Operations never mutate the receiver; they return a new Log.

    Monoid with Log() as identity:
    - Log().combine(x) == x == x.combine(Log())
    - x.combine(y).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Log.of("a").combine(Log.of("b", "c")) -> Log(["a", "b", "c"])"""
        return Log[A]([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        """New Log with item appended."""
        return Log[A]([*self, item])


class LogMonoid[A]:
    """Log as a Monoid instance, for mconcat and List.fold_map."""

    __slots__ = ()

    def empty(self) -> Log[A]:
        return Log[A]()

    def concat(self, a: Log[A], b: Log[A], /) -> Log[A]:
        return a.combine(b)


__all__ = ("Log", "LogMonoid")
