"""Writer Monad

Synchronous value + Log[W] pair. Log entries are accumulated as data
instead of being emitted, so a computation's trace is returned together
with its result and can be inspected, filtered or merged by the caller."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .log import Log


class Writer[T, W]:
    """Writer Monad.

    Combines: value T + Writer[Log[W]]

    Monadic laws:
    - Left identity: Writer.pure(a).then(f) == f(a)
    - Right identity: m.then(Writer.pure) == m
    - Associativity: m.then(f).then(g) == m.then(lambda x: f(x).then(g))
    """

    __slots__ = ("_value", "_log")
    __match_args__ = ("value", "log")

    def __init__(self, value: T, log: Log[W] | None = None, /) -> None:
        self._value = value
        self._log: Log[W] = Log[W]() if log is None else Log[W](log)

    @property
    def value(self) -> T:
        return self._value

    @property
    def log(self) -> Log[W]:
        """Copy of the accumulated log."""
        return Log[W](self._log)

    @staticmethod
    def pure[V](value: V) -> Writer[V, typing.Any]:
        """Lift a value into the monad with empty log."""
        return Writer(value)

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> Writer[None, LogEntry]:
        """Write entries to the log without producing a value."""
        return Writer(None, Log.of(*entries))

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Writer[U, W]:
        """Functor fmap - apply function to value, preserve log."""
        return Writer(f(self._value), self._log)

    # Applicative operations

    def ap[U](self, other: Writer[Callable[[T], U], W], /) -> Writer[U, W]:
        """Apply the function in other; receiver's log comes first."""
        return Writer(other.value(self._value), self._log.combine(other.log))

    # Monad operations

    def flat_map[U](self, f: Callable[[T], Writer[U, W]], /) -> Writer[U, W]:
        """Monadic bind (>>=): runs f and combines logs in order."""
        next_w = f(self._value)
        return Writer(next_w.value, self._log.combine(next_w.log))

    then = flat_map

    # Writer operations

    def with_log(self, *entries: W) -> Writer[T, W]:
        """Add entries to log without changing the value."""
        return Writer(self._value, self._log.combine(Log.of(*entries)))

    def listen(self) -> Writer[tuple[T, Log[W]], W]:
        """Get access to the log along with the value."""
        return Writer((self._value, self.log), self._log)

    def censor(self, f: Callable[[Log[W]], Log[W]], /) -> Writer[T, W]:
        """Modify the log."""
        return Writer(self._value, f(self.log))

    def run(self) -> tuple[T, Log[W]]:
        """Unwrap into (value, log)."""
        return self._value, self.log

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Writer):
            return NotImplemented
        return self._value == other._value and self._log == other._log

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Writer({self._value!r}, log={list(self._log)!r})"


__all__ = ("Writer",)
