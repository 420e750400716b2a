"""Structural invariant checks for an AVL tree."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from ..core.errors import InvariantViolationError
from ..core.types import Comparator
from .node import AVLNode

T = TypeVar("T")

_UNBOUNDED: Any = object()


def check_invariants(
    root: Optional[AVLNode[T]], size: int, compare: Comparator
) -> None:
    """
    Verify BST order, AVL balance, cached heights and the node count.
    Raises InvariantViolationError describing the first violation found.
    Time Complexity: O(n), every node is visited once
    """

    def _check(node: Optional[AVLNode[T]], low: Any, high: Any) -> tuple[int, int]:
        # returns (computed height, node count) of the subtree
        if node is None:
            return 0, 0

        if low is not _UNBOUNDED and compare(node.value, low) <= 0:
            raise InvariantViolationError(
                f"BST order violated: {node.value!r} is not greater than {low!r}"
            )
        if high is not _UNBOUNDED and compare(node.value, high) >= 0:
            raise InvariantViolationError(
                f"BST order violated: {node.value!r} is not less than {high!r}"
            )

        left_height, left_count = _check(node.left, low, node.value)
        right_height, right_count = _check(node.right, node.value, high)

        if abs(left_height - right_height) > 1:
            raise InvariantViolationError(
                f"Balance violated at {node.value!r}: "
                f"left height {left_height}, right height {right_height}"
            )

        expected = 1 + max(left_height, right_height)
        if node.height != expected:
            raise InvariantViolationError(
                f"Stale height at {node.value!r}: cached {node.height}, actual {expected}"
            )

        return expected, 1 + left_count + right_count

    _, count = _check(root, _UNBOUNDED, _UNBOUNDED)
    if count != size:
        raise InvariantViolationError(
            f"Size mismatch: counter says {size}, tree holds {count} nodes"
        )
