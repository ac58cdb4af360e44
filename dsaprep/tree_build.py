"""Building trees from other shapes, and checking and converting search trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, Iterator, Optional, Sequence

from dsaprep.tree import BSTNode, find_max, in_order
from dsaprep.tree_metrics import find_min_node

__all__ = [
    "DLLNode",
    "build_from_preorder_inorder",
    "build_from_leaf_marks",
    "connect_siblings",
    "parent_array_height",
    "bst_lca",
    "is_bst_naive",
    "is_bst",
    "is_bst_in_order",
    "bst_to_circular_dll",
    "circular_dll_values",
    "dll_to_bst",
]


@dataclass(eq=False, repr=False)
class DLLNode:
    """A doubly linked list node; after conversion to a tree, prev and next act as children."""

    data: int
    prev: Optional["DLLNode"] = None
    next: Optional["DLLNode"] = None

    def __repr__(self) -> str:
        return f"DLLNode({self.data!r})"


def _link(parent: BSTNode) -> BSTNode:
    for child in (parent.left, parent.right):
        if child is not None:
            child.parent = parent
    return parent


def build_from_preorder_inorder(
    preorder: Iterable[Hashable], inorder: Iterable[Hashable]
) -> Optional[BSTNode]:
    """Rebuild a binary tree from its pre-order and in-order value sequences."""
    pre = list(preorder)
    ino = list(inorder)
    if len(pre) != len(ino):
        raise ValueError("pre-order and in-order sequences differ in length")
    values = iter(pre)

    def _build(start: int, end: int) -> Optional[BSTNode]:
        if start >= end:
            return None
        data = next(values)
        try:
            index = ino.index(data, start, end)
        except ValueError:
            raise ValueError(
                f"value {data!r} does not fit the in-order sequence"
            ) from None
        node = BSTNode(data)  # type: ignore[arg-type]
        node.left = _build(start, index)
        node.right = _build(index + 1, end)
        return _link(node)

    return _build(0, len(ino))


def build_from_leaf_marks(text: str) -> Optional[BSTNode]:
    """Rebuild a full binary tree from its pre-order marks.

    An "L" marks a leaf; any other character marks an internal node with two
    children. Each node holds its mark as data.
    """
    if not text:
        return None
    marks = iter(text)

    def _build() -> BSTNode:
        mark = next(marks, None)
        if mark is None:
            raise ValueError("marks end before the tree is complete")
        node = BSTNode(mark)  # type: ignore[arg-type]
        if mark != "L":
            node.left = _build()
            node.right = _build()
            _link(node)
        return node

    return _build()


def _levels(root: Optional[BSTNode]) -> Iterator[list[BSTNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def connect_siblings(root: Optional[BSTNode]) -> dict[BSTNode, Optional[BSTNode]]:
    """Map every node to the next node to its right on the same level, or None."""
    siblings: dict[BSTNode, Optional[BSTNode]] = {}
    for level in _levels(root):
        for node, following in zip(level, [*level[1:], None]):
            siblings[node] = following
    return siblings


def parent_array_height(parents: Sequence[int]) -> int:
    """Return the height in edges of a tree given as a parent array; -1 marks the root."""
    if not parents:
        raise ValueError("parent array is empty")
    best = 0
    for start in range(len(parents)):
        node = start
        depth = 0
        while parents[node] != -1:
            node = parents[node]
            depth += 1
            if depth > len(parents):
                raise ValueError("parent array contains a cycle")
        best = max(best, depth)
    return best


def bst_lca(root: Optional[BSTNode], alpha: int, beta: int) -> BSTNode:
    """Return the lowest common ancestor of two values in a search tree."""
    low, high = sorted((alpha, beta))
    node = root
    while node is not None:
        if high < node.data:
            node = node.left
        elif low > node.data:
            node = node.right
        else:
            return node
    raise ValueError("values do not share an ancestor in the tree")


def is_bst_naive(root: Optional[BSTNode]) -> bool:
    """Return True if every node is no smaller than its left subtree and no larger than its right."""
    if root is None:
        return True
    if root.left is not None and find_max(root.left) > root.data:
        return False
    if root.right is not None and find_min_node(root.right).data < root.data:
        return False
    return is_bst_naive(root.left) and is_bst_naive(root.right)


def is_bst(
    root: Optional[BSTNode],
    low: float = float("-inf"),
    high: float = float("inf"),
) -> bool:
    """Return True if every value lies strictly between the bounds its ancestors set."""
    if root is None:
        return True
    return (
        low < root.data < high
        and is_bst(root.left, low, root.data)
        and is_bst(root.right, root.data, high)
    )


def is_bst_in_order(root: Optional[BSTNode]) -> bool:
    """Return True if the in-order values never decrease."""
    values = list(in_order(root))
    return all(a <= b for a, b in zip(values, values[1:]))


def _in_order_nodes(root: Optional[BSTNode]) -> list[BSTNode]:
    nodes: list[BSTNode] = []
    stack: list[BSTNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        nodes.append(node)
        node = node.right
    return nodes


def bst_to_circular_dll(root: Optional[BSTNode]) -> Optional[BSTNode]:
    """Relink the tree in place into a sorted circular list and return its head.

    The left link becomes the previous node and the right link the next one.
    """
    nodes = _in_order_nodes(root)
    if not nodes:
        return None
    for before, after in zip(nodes, nodes[1:]):
        before.right = after
        after.left = before
    head, tail = nodes[0], nodes[-1]
    head.left = tail
    tail.right = head
    return head


def circular_dll_values(head: Optional[BSTNode]) -> list[int]:
    """Return the values of a circular list, following right links from the head."""
    if head is None:
        return []
    values = [head.data]
    node = head.right
    while node is not None and node is not head:
        values.append(node.data)
        node = node.right
    return values


def dll_to_bst(head: Optional[DLLNode]) -> Optional[DLLNode]:
    """Relink a sorted doubly linked list into a balanced search tree and return its root.

    The middle node becomes the root; prev and next then act as left and right.
    """
    nodes: list[DLLNode] = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next

    def _build(part: list[DLLNode]) -> Optional[DLLNode]:
        if not part:
            return None
        middle = len(part) // 2
        root = part[middle]
        root.prev = _build(part[:middle])
        root.next = _build(part[middle + 1 :])
        return root

    return _build(nodes)