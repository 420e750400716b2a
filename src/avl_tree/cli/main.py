# Minimal CLI using argparse that builds a tree from the given values and prints it in order.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from avl_tree.core.config import TreeConfig, load_config
from avl_tree.core.errors import AVLTreeError
from avl_tree.core.tree import AVLTree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="avl-tree", description="Build an AVL tree and print its values in order"
    )
    p.add_argument("values", nargs="*", help="Values to insert")
    p.add_argument("--file", type=Path, help="Read values from file, one per line")
    p.add_argument(
        "--numeric", action="store_true", help="Parse values as integers"
    )
    p.add_argument("--config", type=Path, help="TOML tree configuration")
    p.add_argument(
        "--show-tree", action="store_true", help="Print the tree shape"
    )
    p.add_argument(
        "--heights",
        action="store_true",
        help="With --show-tree, label nodes with height and balance factor",
    )
    p.add_argument(
        "--stats", action="store_true", help="Print size, height and rotation counts"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def read_values(args: argparse.Namespace) -> list[str]:
    raw = list(args.values)
    if args.file is not None:
        text = args.file.read_text(encoding="utf-8")
        raw.extend(line.strip() for line in text.splitlines() if line.strip())
    return raw


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else TreeConfig()
        raw = read_values(args)
        values = [int(v) for v in raw] if args.numeric else raw
    except (AVLTreeError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    tree: AVLTree = AVLTree(config=config)
    added = tree.insert_all(values)
    logger.info("Inserted %d of %d values", added, len(values))

    print(" ".join(str(v) for v in tree))

    if args.show_tree:
        print(tree.pretty_print(show_heights=args.heights))

    if args.stats:
        stats = tree.rotation_stats
        print(f"size={tree.size()} height={tree.height()}")
        print(
            f"rotations: left={stats.left_rotations} right={stats.right_rotations} "
            f"(LL={stats.ll} LR={stats.lr} RR={stats.rr} RL={stats.rl})"
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
