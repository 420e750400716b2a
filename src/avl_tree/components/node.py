from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class AVLNode(Generic[T]):
    """
    A node in an AVL tree.
    Contains:
        value: the stored element
        left/right: the exclusively owned child subtrees (None when empty)
        height: cached height of the subtree rooted here, counted in nodes
    """

    __slots__ = ("value", "left", "right", "height")

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional[AVLNode[T]] = None
        self.right: Optional[AVLNode[T]] = None
        self.height: int = 1

    def __repr__(self) -> str:
        return f"AVLNode({self.value!r}, height={self.height})"
