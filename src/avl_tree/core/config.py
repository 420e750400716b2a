"""Configuration for the AVL tree.

Defines the tunable behaviour of a tree and loading it from TOML.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import tomllib  # Python 3.11+

from .errors import ConfigError
from .types import Comparator


@dataclass
class TreeConfig:
    """Configuration parameters for an AVL tree.

    Attributes:
        comparator: Three-way comparison function; None for natural ordering
        precheck_membership: Run a membership test before the structural
            insert (two descents) instead of detecting duplicates in one pass
        validate_after_insert: Check every invariant after each successful
            insert (debug aid, O(n) per insert)
    """

    comparator: Optional[Comparator] = None
    precheck_membership: bool = False
    validate_after_insert: bool = False

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TreeConfig":
        """Build a config from plain data, e.g. a parsed TOML table.

        Comparators are code, so they cannot be given here.
        """
        known = {f.name for f in fields(TreeConfig)} - {"comparator"}
        unknown = set(d) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        for name in known & set(d):
            if not isinstance(d[name], bool):
                raise ConfigError(
                    f"Config key '{name}' must be a boolean, got {type(d[name]).__name__}"
                )

        return TreeConfig(
            precheck_membership=d.get("precheck_membership", False),
            validate_after_insert=d.get("validate_after_insert", False),
        )


def load_config(path: Path) -> TreeConfig:
    """Load a TreeConfig from a TOML file.

    Settings are read from the ``[avl_tree]`` table if present,
    otherwise from the top level of the document.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    table = data.get("avl_tree", data)
    if not isinstance(table, dict):
        raise ConfigError(f"[avl_tree] in {path} must be a table")
    return TreeConfig.from_dict(table)
