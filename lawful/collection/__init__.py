from .foldable import List, fold
from .traversable import TraversableList, sequence, traverse

__all__ = (
    # Foldable
    "List",
    "fold",
    # Traversable
    "TraversableList",
    "traverse",
    "sequence",
)
