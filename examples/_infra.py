from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: int


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def show(label: str, value: object) -> None:  # pragma: no cover (examples only)
    print(f"{label}: {value!r}")
