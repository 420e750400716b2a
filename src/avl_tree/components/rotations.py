"""Height bookkeeping and rotations for AVL rebalancing.

All functions operate on detached subtrees and return the new subtree
root; the caller re-attaches it to whatever slot held the old one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, TypeVar

from .node import AVLNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RotationStats:
    """Counters for the rebalancing work done by a tree.

    Attributes:
        ll: Left-Left cases (single right rotation)
        lr: Left-Right cases (left rotation of the left child, then right rotation)
        rr: Right-Right cases (single left rotation)
        rl: Right-Left cases (right rotation of the right child, then left rotation)
        left_rotations: Individual left rotations performed
        right_rotations: Individual right rotations performed
    """

    ll: int = 0
    lr: int = 0
    rr: int = 0
    rl: int = 0
    left_rotations: int = 0
    right_rotations: int = 0

    @property
    def rebalances(self) -> int:
        return self.ll + self.lr + self.rr + self.rl

    def reset(self) -> None:
        self.ll = self.lr = self.rr = self.rl = 0
        self.left_rotations = self.right_rotations = 0


def height(node: Optional[AVLNode[T]]) -> int:
    return 0 if node is None else node.height


def update_height(node: AVLNode[T]) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def balance_factor(node: Optional[AVLNode[T]]) -> int:
    """height(left) - height(right); 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_right(y: AVLNode[T], stats: Optional[RotationStats] = None) -> AVLNode[T]:
    """
    Rotate y's left child x up into y's place:

            y               x
           / \\            / \\
          x   T3   ->    T1   y
         / \\                 / \\
        T1  T2              T2  T3

    Only called when y.left exists.
    """
    x = y.left
    assert x is not None
    t2 = x.right

    x.right = y
    y.left = t2

    # y is now below x, so its height has to be fixed first
    update_height(y)
    update_height(x)

    if stats is not None:
        stats.right_rotations += 1
    return x


def rotate_left(x: AVLNode[T], stats: Optional[RotationStats] = None) -> AVLNode[T]:
    """Mirror of rotate_right. Only called when x.right exists."""
    y = x.right
    assert y is not None
    t2 = y.left

    y.left = x
    x.right = t2

    update_height(x)
    update_height(y)

    if stats is not None:
        stats.left_rotations += 1
    return y


def rebalance(node: AVLNode[T], stats: Optional[RotationStats] = None) -> AVLNode[T]:
    """
    Restore the balance invariant at node.
    Expects the children's heights to be correct and node's own height
    to have just been recomputed. Returns the root of the rebalanced
    subtree, which is node itself when no rotation was needed.
    """
    balance = balance_factor(node)

    if balance > 1:
        assert node.left is not None
        if balance_factor(node.left) < 0:
            logger.debug("LR imbalance at %r", node.value)
            node.left = rotate_left(node.left, stats)
            if stats is not None:
                stats.lr += 1
        else:
            logger.debug("LL imbalance at %r", node.value)
            if stats is not None:
                stats.ll += 1
        return rotate_right(node, stats)

    if balance < -1:
        assert node.right is not None
        if balance_factor(node.right) > 0:
            logger.debug("RL imbalance at %r", node.value)
            node.right = rotate_right(node.right, stats)
            if stats is not None:
                stats.rl += 1
        else:
            logger.debug("RR imbalance at %r", node.value)
            if stats is not None:
                stats.rr += 1
        return rotate_left(node, stats)

    return node
