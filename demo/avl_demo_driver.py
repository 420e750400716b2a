#!/usr/bin/env python3
"""AVL Tree Demo Driver

Inserts a configurable workload into an AVL tree and samples height and
rotation metrics for visualization.

Usage:
    python demo/avl_demo_driver.py --count 100000 --order sorted
"""

from __future__ import annotations

import argparse
import csv
import math
import random
import time

from avl_tree import AVLTree, TreeConfig

# Worst-case AVL height is below 1.44 * log2(n + 2)
AVL_HEIGHT_FACTOR = 1.44


def workload(count: int, order: str, seed: int) -> list[int]:
    """Generate the insertion sequence."""
    values = list(range(count))
    if order == "reverse":
        values.reverse()
    elif order == "random":
        random.Random(seed).shuffle(values)
    return values


def height_bound(n: int) -> float:
    return AVL_HEIGHT_FACTOR * math.log2(n + 2)


def run_demo(args: argparse.Namespace) -> None:
    """Run the demo workload and collect metrics."""
    cfg = TreeConfig(precheck_membership=args.precheck_membership)
    tree: AVLTree[int] = AVLTree(config=cfg)
    values = workload(args.count, args.order, args.seed)

    print(f"Inserting {args.count} values in {args.order} order...")
    print(f"Output: {args.out_csv}")

    start = time.time()
    with open(args.out_csv, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(["n", "height", "bound", "ll", "lr", "rr", "rl"])

        for i, v in enumerate(values, start=1):
            tree.insert(v)
            if i % args.sample_every == 0 or i == len(values):
                stats = tree.rotation_stats
                w.writerow(
                    [
                        i,
                        tree.height(),
                        f"{height_bound(i):.3f}",
                        stats.ll,
                        stats.lr,
                        stats.rr,
                        stats.rl,
                    ]
                )
    duration = time.time() - start

    stats = tree.rotation_stats
    print(f"Done in {duration:.3f}s: size={tree.size()} height={tree.height()}")
    print(f"Bound: {height_bound(tree.size()):.2f}")
    print(f"Rebalances: LL={stats.ll} LR={stats.lr} RR={stats.rr} RL={stats.rl}")

    if args.show_tree:
        print(tree.pretty_print())


def main() -> None:
    """Parse arguments and run demo."""
    p = argparse.ArgumentParser(description="AVL tree demo driver")

    # Workload configuration
    p.add_argument("--count", type=int, default=10_000, help="Number of values")
    p.add_argument(
        "--order",
        choices=["sorted", "reverse", "random"],
        default="sorted",
        help="Insertion order",
    )
    p.add_argument("--seed", type=int, default=0, help="Shuffle seed for random order")
    p.add_argument(
        "--precheck-membership",
        action="store_true",
        help="Use two-descent insertion",
    )

    # Sampling configuration
    p.add_argument(
        "--sample-every", type=int, default=100, help="Sample every N inserts"
    )
    p.add_argument(
        "--out-csv", default="/tmp/avl_metrics.csv", help="Output CSV file"
    )
    p.add_argument(
        "--show-tree", action="store_true", help="Print the final tree (small counts only)"
    )

    args = p.parse_args()
    run_demo(args)


if __name__ == "__main__":
    main()
