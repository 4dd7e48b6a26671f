"""
Core type aliases used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# Reducer = left-fold step (accumulator, element) -> accumulator
type Reducer[A, T] = Callable[[A, T], A]

# Getter / Setter = the two halves of a lens
type Getter[S, A] = Callable[[S], A]
type Setter[S, A] = Callable[[A, S], S]

# Effect = side effect used for observation only
type Effect[T] = Callable[[T], None]

# NoError = "never fails"
# NOTE: Never is the bottom type, so Ok.of(x) unifies with any Result[T, E].
type NoError = typing.Never

__all__ = (
    "Reducer",
    "Getter",
    "Setter",
    "Effect",
    "NoError",
)
