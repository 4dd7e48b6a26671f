"""
Lens
====

A get/set pair focused on one field of an immutable aggregate.

set never mutates its input: it builds a new aggregate equal to the old
one everywhere except the focused field.

Lens laws:
- Set-get: lens.set(lens.get(s), s) == s
- Get-set: lens.get(lens.set(a, s)) == a
- Set-set: lens.set(a2, lens.set(a1, s)) == lens.set(a2, s)
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Callable, Mapping

from ._types import Getter, Setter


@dataclasses.dataclass(frozen=True, slots=True)
class Lens[S, A]:
    """Focused, non-mutating read/update access to one field of S."""

    get: Getter[S, A]
    set: Setter[S, A]

    def modify(self, f: Callable[[A], A], s: S, /) -> S:
        """Replace the focused field with f(current value)."""
        return self.set(f(self.get(s)), s)


def lens[S, A](get: Getter[S, A], set: Setter[S, A]) -> Lens[S, A]:
    """
    Build a lens from a getter and a setter.

    Example:
        name = lens(
            lambda p: p.name,
            lambda name, p: dataclasses.replace(p, name=name),
        )
        name.set("Johnny", Person("John", 30))  # Person(name='Johnny', age=30)
    """
    return Lens(get, set)


def attr_lens[S](name: str) -> Lens[S, typing.Any]:
    """
    Lens on a dataclass field. set goes through dataclasses.replace,
    so frozen dataclasses work.

    The field is checked on first use: getting or setting a name that is
    not a dataclass field raises ValueError.
    """

    def check(s: S) -> None:
        if not dataclasses.is_dataclass(s) or isinstance(s, type):
            raise ValueError(f"attr_lens({name!r}) needs a dataclass instance, got {type(s).__name__}")
        if name not in {f.name for f in dataclasses.fields(s)}:
            raise ValueError(f"{type(s).__name__} has no field {name!r}")

    def get(s: S) -> typing.Any:
        check(s)
        return getattr(s, name)

    def set(a: typing.Any, s: S) -> S:
        check(s)
        return dataclasses.replace(s, **{name: a})  # type: ignore[type-var]

    return Lens(get, set)


def key_lens[K, V](key: K) -> Lens[Mapping[K, V], V]:
    """Lens on a mapping key. set returns a new dict; the input is untouched."""

    def get(s: Mapping[K, V]) -> V:
        return s[key]

    def set(a: V, s: Mapping[K, V]) -> Mapping[K, V]:
        return {**s, key: a}

    return Lens(get, set)


__all__ = ("Lens", "lens", "attr_lens", "key_lens")
