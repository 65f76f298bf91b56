"""Unbalanced binary search tree with traversal helpers."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

Compare = Callable[[Any, Any], int]


@dataclass(eq=False)
class Node:
    """A tree node holding one item and its two children."""

    item: Any
    left: Node | None = None
    right: Node | None = None


def apply_prefix(root: Node | None, func: Callable[[Any], object]) -> None:
    """Call ``func`` on every item: node first, then left and right subtrees."""
    if root is None:
        return
    func(root.item)
    apply_prefix(root.left, func)
    apply_prefix(root.right, func)


def apply_infix(root: Node | None, func: Callable[[Any], object]) -> None:
    """Call ``func`` on every item: left subtree, node, then right subtree."""
    if root is None:
        return
    apply_infix(root.left, func)
    func(root.item)
    apply_infix(root.right, func)


def apply_suffix(root: Node | None, func: Callable[[Any], object]) -> None:
    """Call ``func`` on every item: left and right subtrees, then the node."""
    if root is None:
        return
    apply_suffix(root.left, func)
    apply_suffix(root.right, func)
    func(root.item)


def insert_data(root: Node | None, item: Any, cmp: Compare) -> Node:
    """Insert ``item`` and return the root of the tree.

    ``cmp(existing, item)`` greater than zero sends the item left; otherwise
    it goes right, so equal items land to the right of those already there.
    """
    new = Node(item)
    if root is None:
        return new
    current = root
    while True:
        if cmp(current.item, item) > 0:
            if current.left is None:
                current.left = new
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = new
                return root
            current = current.right


def _infix_nodes(root: Node | None) -> Iterator[Node]:
    if root is None:
        return
    yield from _infix_nodes(root.left)
    yield root
    yield from _infix_nodes(root.right)


def search_item(root: Node | None, ref: Any, cmp: Compare) -> Any:
    """Return the first item, in infix order, for which ``cmp(ref, item)`` is zero.

    Returns ``None`` when no item matches.
    """
    return next((node.item for node in _infix_nodes(root) if cmp(ref, node.item) == 0), None)


def level_count(root: Node | None) -> int:
    """Return the number of levels in the tree; an empty tree has none."""
    if root is None:
        return 0
    return 1 + max(level_count(root.left), level_count(root.right))


def apply_by_level(root: Node | None, func: Callable[[Any, int, bool], object]) -> None:
    """Visit the tree breadth first, left to right.

    ``func`` receives the item, its level (the root is level 0) and whether
    it is the first item visited on that level.
    """
    if root is None:
        return
    order: list[tuple[Node, int]] = []
    queue: deque[tuple[Node, int]] = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        order.append((node, level))
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))
    previous_level: int | None = None
    for node, level in order:
        func(node.item, level, level == 0 or level != previous_level)
        previous_level = level