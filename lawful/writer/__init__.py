"""
Writer Monad
============

Writer[T, W] - value paired with a Log[W] that accumulates as the
computation proceeds. Log is a list-backed monoid.
"""

from .log import Log, LogMonoid
from .monad import Writer

__all__ = (
    "Log",
    "LogMonoid",
    "Writer",
)
