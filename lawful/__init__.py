"""
Lawful functional building blocks.

Small immutable containers with Functor, Applicative, Monad, Monoid,
Foldable, Traversable and Lens instances.

Architecture:
- Result (Ok | Err) - Functor / Applicative / Monad, interop with kungfu
- List - Foldable (strict left fold)
- TraversableList - Functor / Traversable, generic over the applicative via pure=
- Writer - Monad carrying a Log monoid
- Monoid instances (StringMonoid, ListMonoid, LogMonoid) + mconcat
- Lens - get/set pair over immutable aggregates
- typeclasses - structural Protocols for each capability
"""

# Core types
from ._types import Effect, Getter, NoError, Reducer, Setter

# Internal helpers
from ._helpers import compose, identity

# Capabilities
from .typeclasses import Applicative, Foldable, Functor, Monad, Monoid, Traversable

# Result
from .result import Err, Ok, Result, from_kungfu, of

# Collections
from .collection import List, TraversableList, fold, sequence, traverse

# Monoids
from .monoid import STRING, ListMonoid, StringMonoid, mconcat

# Writer monad
from . import writer
from .writer import Log, LogMonoid, Writer

# Lens
from .lens import Lens, attr_lens, key_lens, lens

# Errors
from ._errors import UnwrapError

__all__ = (
    # Types
    "Effect",
    "Getter",
    "NoError",
    "Reducer",
    "Setter",
    # Helpers
    "compose",
    "identity",
    # Capabilities
    "Applicative",
    "Foldable",
    "Functor",
    "Monad",
    "Monoid",
    "Traversable",
    # Result
    "Err",
    "Ok",
    "Result",
    "from_kungfu",
    "of",
    # Collections
    "List",
    "TraversableList",
    "fold",
    "sequence",
    "traverse",
    # Monoids
    "STRING",
    "ListMonoid",
    "StringMonoid",
    "mconcat",
    # Writer
    "writer",
    "Log",
    "LogMonoid",
    "Writer",
    # Lens
    "Lens",
    "attr_lens",
    "key_lens",
    "lens",
    # Errors
    "UnwrapError",
)
