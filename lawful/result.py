"""
Result
======

Two-variant sum type: Ok(value) | Err(error).

Both variants are frozen and slotted, so a Result never changes after
construction and every operation hands back a new instance. Callers
discriminate with match:

    match parse(raw):
        case Ok(value):
            ...
        case Err(error):
            ...

Expected failures are always Err values. Nothing here raises except
unwrap(), which is meant for tests and scripts.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

import kungfu

from ._errors import UnwrapError
from ._types import Effect, NoError


@dataclass(frozen=True, slots=True, repr=False)
class Ok[T]:
    """
    Success branch of a Result.

    Monadic laws:
    - Left identity: Ok.of(a).flat_map(f) == f(a)
    - Right identity: m.flat_map(Ok.of) == m
    - Associativity: m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))
    """

    value: T

    @staticmethod
    def of[V](value: V) -> Ok[V]:
        """Lift a plain value into a successful Result."""
        return Ok(value)

    # Functor

    def map[U](self, f: Callable[[T], U], /) -> Ok[U]:
        """Apply f to the wrapped value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[typing.Any], typing.Any], /) -> Ok[T]:
        """No error to map: returns an equal Ok."""
        _ = f
        return Ok(self.value)

    # Applicative

    def ap[U, F](self, other: Result[Callable[[T], U], F], /) -> Result[U, F]:
        """
        Apply the function wrapped in other to this value.

        - other is Ok(fn): Ok(fn(value))
        - other is Err(e): Err(e)
        """
        match other:
            case Ok(fn):
                return Ok(fn(self.value))
            case Err(error):
                return Err(error)
            case _ as unreachable:
                assert_never(unreachable)

    # Monad

    def flat_map[U, F](self, f: Callable[[T], Result[U, F]], /) -> Result[U, F]:
        """Monadic bind (>>=): the Result produced by f is returned as is."""
        return f(self.value)

    then = flat_map

    # Inspection

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: typing.Any, /) -> T:
        _ = default
        return self.value

    # Effects

    def tap(self, effect: Effect[T], /) -> Ok[T]:
        """Run effect on the value for observation; result unchanged."""
        effect(self.value)
        return self

    def tap_err(self, effect: Effect[typing.Any], /) -> Ok[T]:
        _ = effect
        return self

    # kungfu interop

    def to_kungfu(self) -> kungfu.Result[T, NoError]:
        """Convert to kungfu's Ok."""
        return kungfu.Ok(self.value)

    def to_async(self) -> kungfu.LazyCoroResult[T, NoError]:
        """Lift into kungfu's LazyCoroResult."""
        return _lazy(self.to_kungfu())

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Err[E]:
    """
    Failure branch of a Result.

    Every Functor/Applicative/Monad operation on an Err is a no-op that
    returns the same error and never invokes the supplied function.
    """

    error: E

    @staticmethod
    def of[V](value: V) -> Ok[V]:
        """Lift a plain value into a successful Result (same as Ok.of)."""
        return Ok(value)

    # Functor

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> Err[E]:
        _ = f
        return Err(self.error)

    def map_err[F](self, f: Callable[[E], F], /) -> Err[F]:
        """Apply f to the wrapped error."""
        return Err(f(self.error))

    # Applicative

    def ap(self, other: Result[typing.Any, typing.Any], /) -> Err[E]:
        """Receiver's error wins over anything in other."""
        _ = other
        return Err(self.error)

    # Monad

    def flat_map(self, f: Callable[[typing.Any], typing.Any], /) -> Err[E]:
        _ = f
        return Err(self.error)

    then = flat_map

    # Inspection

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> typing.NoReturn:
        raise UnwrapError(self.error)

    def unwrap_or[D](self, default: D, /) -> D:
        return default

    # Effects

    def tap(self, effect: Effect[typing.Any], /) -> Err[E]:
        _ = effect
        return self

    def tap_err(self, effect: Effect[E], /) -> Err[E]:
        """Run effect on the error for observation; result unchanged."""
        effect(self.error)
        return self

    # kungfu interop

    def to_kungfu(self) -> kungfu.Result[NoError, E]:
        """Convert to kungfu's Error."""
        return kungfu.Error(self.error)

    def to_async(self) -> kungfu.LazyCoroResult[NoError, E]:
        """Lift into kungfu's LazyCoroResult."""
        return _lazy(self.to_kungfu())

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def of[T](value: T) -> Ok[T]:
    """Lift a plain value into a successful Result."""
    return Ok(value)


def from_kungfu[T, E](result: kungfu.Result[T, E]) -> Result[T, E]:
    """Convert a kungfu Ok/Error into Ok/Err."""
    match result:
        case kungfu.Ok(value):
            return Ok(value)
        case kungfu.Error(error):
            return Err(error)
        case _ as unreachable:
            assert_never(unreachable)


def _lazy[T, E](result: kungfu.Result[T, E]) -> kungfu.LazyCoroResult[T, E]:
    async def run() -> kungfu.Result[T, E]:
        return result

    return kungfu.LazyCoroResult(run)


__all__ = (
    "Ok",
    "Err",
    "Result",
    "of",
    "from_kungfu",
)
