from __future__ import annotations

from typing import Optional, TypeVar

from .node import AVLNode

T = TypeVar("T")


def render_tree(root: Optional[AVLNode[T]], show_heights: bool = False) -> str:
    """
    Renders the subtree at root as multi-line text, each value boxed as
    ┌value┐ with its children laid out below and to either side.
    With show_heights, each box also carries the node's cached height and
    balance factor as ┌value h=H b=B┐.
    """
    if root is None:
        return "<empty>"

    def _label(node: AVLNode[T]) -> str:
        if not show_heights:
            return f"┌{node.value}┐"
        left = node.left.height if node.left else 0
        right = node.right.height if node.right else 0
        return f"┌{node.value} h={node.height} b={left - right:+d}┐"

    def _display(node: Optional[AVLNode[T]]) -> tuple[list[str], int]:
        # returns (lines, width); every line of a block has the same width
        if node is None:
            return [], 0

        line = _label(node)
        width = len(line)

        if node.left is None and node.right is None:
            return [line], width

        left_lines, left_width = _display(node.left)
        right_lines, right_width = _display(node.right)

        # pad the shorter side so both columns have the same depth
        depth = max(len(left_lines), len(right_lines))
        left_lines += [" " * left_width] * (depth - len(left_lines))
        right_lines += [" " * right_width] * (depth - len(right_lines))

        lines = [" " * left_width + line + " " * right_width]
        lines.extend(l + " " * width + r for l, r in zip(left_lines, right_lines))
        return lines, left_width + width + right_width

    lines, _ = _display(root)
    return "\n".join(lines)
