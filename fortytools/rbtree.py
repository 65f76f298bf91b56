"""Red-black tree nodes with insertion, rotation, recolouring and level traversal."""

from __future__ import annotations

import enum
import sys
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

Compare = Callable[[Any, Any], int]


class Color(enum.IntEnum):
    """Colour of a red-black tree node."""

    BLACK = 0
    RED = 1


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree, linked to its children and its parent."""

    data: Any
    color: Color = Color.RED
    left: RBNode | None = None
    right: RBNode | None = None
    parent: RBNode | None = field(default=None, repr=False)


def rb_insert(root: RBNode | None, data: Any, cmp: Compare) -> RBNode:
    """Insert ``data`` as a new red node and return the root of the tree.

    ``cmp(existing, data)`` greater than zero sends the data left; otherwise
    it goes right. The tree is not rebalanced.
    """
    if root is None:
        return RBNode(data)
    current = root
    while True:
        if cmp(current.data, data) > 0:
            if current.left is None:
                current.left = RBNode(data, parent=current)
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = RBNode(data, parent=current)
                return root
            current = current.right


def rotate(root: RBNode, node: RBNode, clockwise: bool) -> RBNode:
    """Rotate around ``node`` and return the root of the tree.

    With ``clockwise`` true the right child of ``node`` takes its place and
    ``node`` becomes that child's left child; otherwise the left child takes
    its place and ``node`` becomes its right child. Raises ``ValueError`` if
    the child to move up is missing.
    """
    pivot = node.right if clockwise else node.left
    if pivot is None:
        side = "right" if clockwise else "left"
        raise ValueError(f"node has no {side} child to rotate with")
    parent = node.parent
    if clockwise:
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.left = node
    else:
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.right = node
    node.parent = pivot
    pivot.parent = parent
    if parent is None:
        return pivot
    if parent.left is node:
        parent.left = pivot
    else:
        parent.right = pivot
    return root


def recolor(node: RBNode, branch: bool) -> None:
    """Recolour around ``node`` when its parent is red.

    The parent becomes black and the grandparent red; the grandparent's left
    child is made black when ``branch`` is true, its right child otherwise.
    Raises ``ValueError`` if the node has no parent, or a red parent with
    no parent of its own.
    """
    parent = node.parent
    if parent is None:
        raise ValueError("node has no parent")
    if parent.color != Color.RED:
        return
    grandparent = parent.parent
    if grandparent is None:
        raise ValueError("node has no grandparent")
    uncle = grandparent.left if branch else grandparent.right
    if uncle is not None:
        uncle.color = Color.BLACK
    grandparent.color = Color.RED
    parent.color = Color.BLACK


def apply_by_level(
    root: RBNode | None, func: Callable[[Any, int, bool, Color], object]
) -> None:
    """Visit the tree breadth first, left to right.

    ``func`` receives the data, its level (the root is level 0), whether it
    is the first node visited on that level, and the node's colour.
    """
    if root is None:
        return
    order: list[tuple[RBNode, int]] = []
    queue: deque[tuple[RBNode, int]] = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        order.append((node, level))
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))
    previous_level: int | None = None
    for node, level in order:
        func(node.data, level, level == 0 or level != previous_level, node.color)
        previous_level = level


def _attach(parent: RBNode, left: RBNode | None, right: RBNode | None) -> None:
    parent.left = left
    parent.right = right
    for child in (left, right):
        if child is not None:
            child.parent = parent


def demo_tree() -> RBNode:
    """Build the sample tree used by :func:`main` and return its root."""
    eleven = RBNode(11, Color.BLACK)
    two = RBNode(2, Color.RED)
    fourteen = RBNode(14, Color.BLACK)
    one = RBNode(1, Color.BLACK)
    seven = RBNode(7, Color.BLACK)
    five = RBNode(5, Color.RED)
    eight = RBNode(8, Color.RED)
    four = RBNode(4, Color.RED)
    fifteen = RBNode(15, Color.RED)
    _attach(eleven, two, fourteen)
    _attach(two, one, seven)
    _attach(fourteen, None, fifteen)
    _attach(seven, five, eight)
    _attach(five, four, None)
    return eleven


def _print_levels(root: RBNode, out: TextIO) -> None:
    def show(data: Any, level: int, first: bool, color: Color) -> None:
        out.write(f"{data}, l:{level}, {int(first)}, c:{int(color)}\n")

    apply_by_level(root, show)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample tree by level, rotate around node 7, and print it again."""
    out = sys.stdout
    root = demo_tree()
    out.write("\n\n")
    _print_levels(root, out)
    seven = root.left.right if root.left is not None else None
    if seven is None:
        raise RuntimeError("sample tree is malformed")
    root = rotate(root, seven, False)
    out.write("\n\n")
    _print_levels(root, out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())