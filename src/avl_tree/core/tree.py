"""AVL tree implementation - main public API.

Orchestrates ordering, node creation, height bookkeeping and rotations.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator
from typing import Generic, List, Optional, TypeVar

from ..components.node import AVLNode
from ..components.render import render_tree
from ..components.rotations import RotationStats, height, rebalance, update_height
from ..components.validation import check_invariants
from .config import TreeConfig
from .errors import EmptyTreeError, InvariantViolationError, NullElementError
from .types import Comparator, natural_order

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AVLTree(Generic[T]):
    """Self-balancing binary search tree of unique, totally ordered values.

    Args:
        comparator: Optional three-way comparison; overrides config.comparator
        config: Tree configuration

    Public API:
        - insert(value): Add value, False if already present
        - contains(value): Membership test
        - traverse_in_order(): Ascending one-shot generator of values
        - size(), is_empty(), clear()

    Invariants:
        - Left subtree values < node value < right subtree values
        - |height(left) - height(right)| <= 1 at every node
        - Every cached height is 1 + max(child heights)
        - size() equals the number of nodes reachable from the root
    """

    __slots__ = ("_root", "_size", "_compare", "_config", "_stats")

    def __init__(
        self,
        comparator: Optional[Comparator] = None,
        config: Optional[TreeConfig] = None,
    ) -> None:
        self._config = config if config is not None else TreeConfig()
        self._compare: Comparator = (
            comparator or self._config.comparator or natural_order
        )
        self._root: Optional[AVLNode[T]] = None
        self._size = 0
        self._stats = RotationStats()

        if self._config.precheck_membership:
            logger.debug("Using two-descent insertion (membership precheck)")

    # -------------------------------
    # Insert
    # -------------------------------
    def insert(self, value: T) -> bool:
        """
        Inserts value at the leaf position dictated by the ordering and
        rebalances on the way back up.
        Returns False, leaving the tree untouched, if value is already present.
        Time Complexity: O(logn), the balance invariant bounds the descent
        """
        if value is None:
            raise NullElementError()

        if self._config.precheck_membership and self.contains(value):
            return False

        compare = self._compare
        stats = self._stats
        inserted = False

        def _insert(node: Optional[AVLNode[T]]) -> AVLNode[T]:
            nonlocal inserted
            if node is None:
                inserted = True
                return AVLNode(value)

            cmp = compare(value, node.value)
            if cmp < 0:
                node.left = _insert(node.left)
            elif cmp > 0:
                node.right = _insert(node.right)
            else:
                return node

            # duplicate found below: nothing changed on this path
            if not inserted:
                return node

            update_height(node)
            return rebalance(node, stats)

        self._root = _insert(self._root)
        if not inserted:
            return False

        self._size += 1
        if self._config.validate_after_insert:
            self.validate()
        return True

    def insert_all(self, values: Iterable[T]) -> int:
        """Inserts each value in turn. Returns how many were new."""
        count = 0
        for value in values:
            if self.insert(value):
                count += 1
        return count

    # -------------------------------
    # Search
    # -------------------------------
    def contains(self, value: T) -> bool:
        if value is None:
            raise NullElementError()

        node = self._root
        while node is not None:
            cmp = self._compare(value, node.value)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return True
        return False

    def first(self) -> T:
        """Returns the smallest value."""
        node = self._root
        if node is None:
            raise EmptyTreeError("first() on an empty tree")
        while node.left is not None:
            node = node.left
        return node.value

    def last(self) -> T:
        """Returns the largest value."""
        node = self._root
        if node is None:
            raise EmptyTreeError("last() on an empty tree")
        while node.right is not None:
            node = node.right
        return node.value

    # -------------------------------
    # Traversal
    # -------------------------------
    def traverse_in_order(self) -> Iterator[T]:
        """
        Yields the values in ascending order.
        Each call starts a new traversal; the tree must not be mutated
        while one is being consumed.
        """
        stack: List[AVLNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def to_list(self) -> List[T]:
        """Return all values of the tree in order as a list."""
        return list(self.traverse_in_order())

    # -------------------------------
    # Size and lifecycle
    # -------------------------------
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        logger.debug("Clearing tree of %d nodes", self._size)
        self._root = None
        self._size = 0

    # -------------------------------
    # Introspection
    # -------------------------------
    def height(self) -> int:
        return height(self._root)

    def root_value(self) -> Optional[T]:
        return None if self._root is None else self._root.value

    @property
    def rotation_stats(self) -> RotationStats:
        """Snapshot of the rebalancing counters."""
        return dataclasses.replace(self._stats)

    def reset_stats(self) -> None:
        self._stats.reset()

    def validate(self) -> None:
        """Raises InvariantViolationError if any structural invariant is broken."""
        check_invariants(self._root, self._size, self._compare)

    def is_balanced(self) -> bool:
        try:
            self.validate()
        except InvariantViolationError:
            return False
        return True

    def pretty_print(self, show_heights: bool = False) -> str:
        """Multi-line drawing of the tree; show_heights adds cached height and balance per node."""
        return render_tree(self._root, show_heights)

    # -------------------------------
    # Python protocols
    # -------------------------------
    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return self.traverse_in_order()

    def __repr__(self) -> str:
        return f"AVLTree({self.to_list()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
