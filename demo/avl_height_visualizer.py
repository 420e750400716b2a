#!/usr/bin/env python3
"""AVL Tree Height Visualizer

Reads the metrics CSV written by the demo driver and plots tree height
against the AVL worst-case bound, plus cumulative rebalancing work.

Usage:
    python demo/avl_demo_driver.py --count 100000 --order random
    python demo/avl_height_visualizer.py --csv /tmp/avl_metrics.csv --output height.png
"""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt


def load_csv_data(csv_path: str) -> list[dict]:
    """Load CSV data and return rows with numeric fields converted."""
    rows = []
    with open(csv_path) as f:
        reader = csv.DictReader(f)
        for row in reader:
            for key in ("n", "height", "ll", "lr", "rr", "rl"):
                row[key] = int(row[key])
            row["bound"] = float(row["bound"])
            rows.append(row)
    return rows


def plot_static(csv_path: str, output_path: str | None = None) -> None:
    """Generate static plots from CSV data."""
    rows = load_csv_data(csv_path)

    if not rows:
        print(f"No data found in {csv_path}")
        return

    n = [row["n"] for row in rows]

    fig, axes = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    # (1) Height against the bound
    axes[0].plot(n, [row["height"] for row in rows], label="height", linewidth=2)
    axes[0].plot(
        n,
        [row["bound"] for row in rows],
        label="1.44·log2(n+2)",
        linestyle="--",
        color="tab:red",
    )
    axes[0].set_ylabel("nodes", fontsize=11)
    axes[0].legend(loc="lower right")
    axes[0].set_title("Tree Height", fontsize=12, fontweight="bold")
    axes[0].grid(True, alpha=0.3)

    # (2) Cumulative rebalances by case
    for case, color in (("ll", "tab:blue"), ("lr", "tab:orange"), ("rr", "tab:green"), ("rl", "tab:purple")):
        axes[1].plot(n, [row[case] for row in rows], label=case.upper(), color=color, linewidth=2)
    axes[1].set_ylabel("rebalances (cumulative)", fontsize=11)
    axes[1].set_xlabel("values inserted", fontsize=11)
    axes[1].legend(loc="upper left", ncol=4, fontsize=9)
    axes[1].set_title("Rotation Cases", fontsize=12, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
        print(f"Plot saved to {output_path}")
    else:
        plt.show()


def main() -> None:
    """Parse arguments and run visualizer."""
    p = argparse.ArgumentParser(description="AVL tree height visualizer")
    p.add_argument(
        "--csv", default="/tmp/avl_metrics.csv", help="Path to metrics CSV file"
    )
    p.add_argument(
        "--output",
        help="Save plot to file (PNG/PDF/SVG) instead of showing it",
    )

    args = p.parse_args()

    csv_path = Path(args.csv)
    if not csv_path.exists():
        print(f"Error: CSV file not found: {csv_path}")
        sys.exit(1)

    if args.output is None:
        print(f"Using backend: {matplotlib.get_backend()}")
    plot_static(str(csv_path), args.output)


if __name__ == "__main__":
    main()
