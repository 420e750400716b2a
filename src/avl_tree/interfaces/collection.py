"""Protocol definition for the common collection contract."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class OrderedCollection(Protocol[T]):
    """Minimal contract shared by the library's containers."""

    def insert(self, value: T) -> bool:
        """Add value; return False if it was already present."""
        ...

    def contains(self, value: T) -> bool:
        """Return True if value is present."""
        ...

    def size(self) -> int:
        """Return the number of stored elements."""
        ...

    def clear(self) -> None:
        """Remove every element."""
        ...
