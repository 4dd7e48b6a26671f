from __future__ import annotations

import typing


class UnwrapError(Exception):
    """unwrap() was called on an Err."""

    error: typing.Any

    def __init__(self, error: typing.Any) -> None:
        self.error = error
        super().__init__(f"Called unwrap() on Err({error!r})")


__all__ = ("UnwrapError",)
