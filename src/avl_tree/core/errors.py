"""Exception hierarchy for the AVL tree.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class AVLTreeError(Exception):
    """Base exception for all AVL tree errors."""
    pass


class NullElementError(AVLTreeError, ValueError):
    """Raised when None is passed where an element is required."""

    def __init__(self, message: str = "Null elements are not allowed") -> None:
        super().__init__(message)


class EmptyTreeError(AVLTreeError, LookupError):
    """Raised when querying an extreme value of an empty tree."""
    pass


class InvariantViolationError(AVLTreeError, AssertionError):
    """Raised when the tree's order, balance, height or size invariant is broken."""
    pass


class ConfigError(AVLTreeError):
    """Raised when a tree configuration cannot be loaded or is invalid."""
    pass
