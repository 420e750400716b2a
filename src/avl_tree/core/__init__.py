"""AVL tree package."""

from .tree import AVLTree

__all__ = ["AVLTree"]
