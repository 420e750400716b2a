"""AVL Tree - self-balancing binary search tree in Python."""

from .core.config import TreeConfig, load_config
from .core.errors import (
    AVLTreeError,
    NullElementError,
    EmptyTreeError,
    InvariantViolationError,
    ConfigError,
)
from .core.tree import AVLTree
from .core.types import Comparable, Comparator, natural_order
from .components.rotations import RotationStats
from .interfaces.collection import OrderedCollection

__all__ = [
    "AVLTree",
    "TreeConfig",
    "load_config",
    "AVLTreeError",
    "NullElementError",
    "EmptyTreeError",
    "InvariantViolationError",
    "ConfigError",
    "Comparable",
    "Comparator",
    "natural_order",
    "RotationStats",
    "OrderedCollection",
]
