"""Measurements and whole-tree operations on binary trees: size, height, leaves, deletion."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from dsaprep.tree import BSTNode

__all__ = [
    "size",
    "size_level_order",
    "reverse_level_order",
    "delete_tree",
    "height",
    "height_level_order",
    "deepest_node",
    "find_min_node",
    "delete_node",
    "count_leaves",
    "count_full_nodes",
    "max_level_sum",
]


def _levels(root: Optional[BSTNode]) -> Iterator[list[BSTNode]]:
    """Yield the nodes of each level, left to right, from the root down."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _level_order(root: Optional[BSTNode]) -> Iterator[BSTNode]:
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def size(root: Optional[BSTNode]) -> int:
    """Return the number of nodes, counting both subtrees recursively."""
    if root is None:
        return 0
    return size(root.left) + 1 + size(root.right)


def size_level_order(root: Optional[BSTNode]) -> int:
    """Return the number of nodes, counting them level by level."""
    return sum(1 for _ in _level_order(root))


def reverse_level_order(root: Optional[BSTNode]) -> list[int]:
    """Return the values in level order reversed: deepest level first, right to left."""
    return [node.data for node in _level_order(root)][::-1]


def delete_tree(root: Optional[BSTNode]) -> None:
    """Unlink every node of the tree from its children and parent; the tree is then gone."""
    for node in list(_level_order(root)):
        node.left = None
        node.right = None
        node.parent = None
    return None


def height(root: Optional[BSTNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path, recursively."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def height_level_order(root: Optional[BSTNode]) -> int:
    """Return the number of levels in the tree, counted level by level."""
    return sum(1 for _ in _levels(root))


def deepest_node(root: Optional[BSTNode]) -> BSTNode:
    """Return the last node met in level order: the rightmost node of the deepest level."""
    if root is None:
        raise ValueError("tree is empty")
    last = root
    for last in _level_order(root):
        pass
    return last


def find_min_node(root: Optional[BSTNode]) -> BSTNode:
    """Return the first node, in level order, that holds the smallest value."""
    if root is None:
        raise ValueError("tree is empty")
    best = root
    for node in _level_order(root):
        if node.data < best.data:
            best = node
    return best


def delete_node(root: Optional[BSTNode], data: int) -> Optional[BSTNode]:
    """Remove one node holding data from the search tree and return the new root.

    A node with two children takes the smallest value of its right subtree,
    which is then removed from there. A missing value leaves the tree as it is.
    """
    if root is None:
        return None
    if root.data < data:
        root.right = delete_node(root.right, data)
    elif root.data > data:
        root.left = delete_node(root.left, data)
    elif root.left is None or root.right is None:
        child = root.left if root.left is not None else root.right
        if child is not None:
            child.parent = root.parent
        root.left = root.right = root.parent = None
        return child
    else:
        successor = find_min_node(root.right)
        root.data = successor.data
        root.right = delete_node(root.right, successor.data)
    for child in (root.left, root.right):
        if child is not None:
            child.parent = root
    return root


def count_leaves(root: Optional[BSTNode]) -> int:
    """Return the number of nodes that have no children."""
    return sum(
        1 for node in _level_order(root) if node.left is None and node.right is None
    )


def count_full_nodes(root: Optional[BSTNode]) -> int:
    """Return the number of nodes that have both children."""
    return sum(
        1
        for node in _level_order(root)
        if node.left is not None and node.right is not None
    )


def max_level_sum(root: Optional[BSTNode]) -> int:
    """Return the largest sum of the values on any one level."""
    if root is None:
        raise ValueError("tree is empty")
    return max(sum(node.data for node in level) for level in _levels(root))