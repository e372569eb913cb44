"""Binary trees and in-order traversal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

__all__ = ["TreeNode", "inorder", "kth_smallest"]


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> Iterator[int]:
    """Yield the values of the tree in in-order sequence."""
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.val
        node = node.right


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the ``k``-th value (1-based) of a binary search tree in sorted order."""
    if k < 1:
        raise IndexError("k must be at least 1")
    try:
        return next(islice(inorder(root), k - 1, None))
    except StopIteration:
        raise IndexError("k exceeds the number of nodes") from None