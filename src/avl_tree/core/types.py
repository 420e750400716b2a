"""Common type definitions for the AVL tree.

Defines the ordering capability every element type must provide.
"""

from __future__ import annotations

from typing import Callable, Protocol, Self, TypeVar


# NOTE: the Comparable class here is used to specify that a generic
# supports the comparison operations the tree descends by
class Comparable(Protocol):
    def __lt__(self, other: Self) -> bool: ...
    def __gt__(self, other: Self) -> bool: ...


T = TypeVar("T")

# Three-way comparison: negative if a < b, zero if equal, positive if a > b.
# Same convention as functools.cmp_to_key.
Comparator = Callable[[T, T], int]


# NOTE: only the natural-order path needs Comparable; element types given
# an explicit comparator may not support < and > at all
def natural_order[C: Comparable](a: C, b: C) -> int:
    """Three-way comparison using the elements' own ``<`` and ``>``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
