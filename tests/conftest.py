"""Shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass(slots=True)
class CallCounter:
    """Stub function that records every argument it is called with."""

    calls: list[object] = field(default_factory=list)

    def __call__(self, value: object) -> object:
        self.calls.append(value)
        return value

    @property
    def count(self) -> int:
        return len(self.calls)


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: int


@pytest.fixture
def counter() -> CallCounter:
    return CallCounter()


@pytest.fixture
def person() -> Person:
    return Person("John", 30)
