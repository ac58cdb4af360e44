"""Binary search tree nodes, insertion, traversals, maximum and search."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

__all__ = [
    "BSTNode",
    "insert",
    "build_bst",
    "in_order",
    "pre_order",
    "post_order",
    "find_max",
    "find_max_level_order",
    "contains",
    "contains_level_order",
]


@dataclass(eq=False, repr=False)
class BSTNode:
    """A binary tree node with links to both children and to its parent."""

    data: int
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None
    parent: Optional["BSTNode"] = None

    def __repr__(self) -> str:
        return f"BSTNode({self.data!r})"


def insert(root: Optional[BSTNode], data: int) -> BSTNode:
    """Insert data into the search tree and return its root; equal values go left."""
    node = BSTNode(data)
    if root is None:
        return node
    current = root
    while True:
        if current.data < data:
            if current.right is None:
                current.right = node
                break
            current = current.right
        else:
            if current.left is None:
                current.left = node
                break
            current = current.left
    node.parent = current
    return root


def build_bst(values: Iterable[int]) -> Optional[BSTNode]:
    """Insert the values in order into an empty tree and return the root."""
    root: Optional[BSTNode] = None
    for value in values:
        root = insert(root, value)
    return root


def in_order(root: Optional[BSTNode]) -> Iterator[int]:
    """Yield values left subtree first, then the node, then the right subtree."""
    stack: list[BSTNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


def pre_order(root: Optional[BSTNode]) -> Iterator[int]:
    """Yield values node first, then the left subtree, then the right subtree."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.data
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def post_order(root: Optional[BSTNode]) -> Iterator[int]:
    """Yield values left subtree first, then the right subtree, then the node."""
    stack = [root] if root is not None else []
    reversed_values: list[int] = []
    while stack:
        node = stack.pop()
        reversed_values.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_values)


def _level_order(root: Optional[BSTNode]) -> Iterator[BSTNode]:
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def find_max(root: Optional[BSTNode]) -> int:
    """Return the largest value anywhere in the tree, searching both subtrees recursively."""
    if root is None:
        raise ValueError("tree is empty")
    best = root.data
    for child in (root.left, root.right):
        if child is not None:
            best = max(best, find_max(child))
    return best


def find_max_level_order(root: Optional[BSTNode]) -> int:
    """Return the largest value in the tree, visiting nodes level by level."""
    if root is None:
        raise ValueError("tree is empty")
    return max(node.data for node in _level_order(root))


def contains(root: Optional[BSTNode], data: int) -> bool:
    """Return True if any node holds data, searching depth first without using order."""
    if root is None:
        return False
    if root.data == data:
        return True
    return contains(root.left, data) or contains(root.right, data)


def contains_level_order(root: Optional[BSTNode], data: int) -> bool:
    """Return True if any node holds data, searching level by level."""
    return any(node.data == data for node in _level_order(root))