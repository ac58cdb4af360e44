"""Path, shape and comparison puzzles on binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from dsaprep.tree import BSTNode
from dsaprep.tree_metrics import height

__all__ = [
    "identical",
    "diameter",
    "diameter_by_heights",
    "root_to_leaf_paths",
    "has_path_sum",
    "mirror",
    "is_mirror",
    "find_path",
    "lowest_common_ancestor",
    "ancestors",
    "zigzag_levels",
    "vertical_sums",
]


def _preorder_nodes(root: Optional[BSTNode]) -> Iterator[BSTNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def identical(first: Optional[BSTNode], second: Optional[BSTNode]) -> bool:
    """Return True if both trees have the same shape and the same values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.data == second.data
        and identical(first.left, second.left)
        and identical(first.right, second.right)
    )


def diameter(root: Optional[BSTNode]) -> int:
    """Return the number of edges on the longest path between any two nodes.

    Heights are computed once, bottom up, while the best sum is tracked.
    """
    best = 0

    def _height(node: Optional[BSTNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = _height(node.left)
        right = _height(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    _height(root)
    return best


def diameter_by_heights(root: Optional[BSTNode]) -> int:
    """Return the diameter by measuring both subtree heights at every node."""
    return max(
        (height(node.left) + height(node.right) for node in _preorder_nodes(root)),
        default=0,
    )


def root_to_leaf_paths(root: Optional[BSTNode]) -> list[str]:
    """Return every root-to-leaf path as text such as "10->15->25", left paths first."""
    paths: list[str] = []

    def _walk(node: BSTNode, prefix: str) -> None:
        path = prefix + str(node.data)
        if node.left is None and node.right is None:
            paths.append(path)
            return
        path += "->"
        if node.left is not None:
            _walk(node.left, path)
        if node.right is not None:
            _walk(node.right, path)

    if root is not None:
        _walk(root, "")
    return paths


def has_path_sum(root: Optional[BSTNode], total: int) -> bool:
    """Return True if the values along some downward path from the root add up to total.

    The path may stop at any node. Once the running remainder goes negative the
    branch is abandoned, so the check assumes non-negative values.
    """
    if total == 0:
        return True
    if root is None or total < 0:
        return False
    rest = total - root.data
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def mirror(root: Optional[BSTNode]) -> Optional[BSTNode]:
    """Swap the children of every node in place and return the root."""
    if root is None:
        return None
    left = mirror(root.left)
    right = mirror(root.right)
    root.left, root.right = right, left
    return root


def is_mirror(first: Optional[BSTNode], second: Optional[BSTNode]) -> bool:
    """Return True if the shape of one tree is the mirror image of the other's."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return is_mirror(first.right, second.left) and is_mirror(first.left, second.right)


def find_path(root: Optional[BSTNode], data: int) -> Optional[list[int]]:
    """Return the values from the root down to the first node holding data, or None."""
    if root is None:
        return None
    if root.data == data:
        return [root.data]
    for child in (root.left, root.right):
        rest = find_path(child, data)
        if rest is not None:
            return [root.data, *rest]
    return None


def lowest_common_ancestor(root: Optional[BSTNode], first: int, second: int) -> int:
    """Return the value of the deepest node that lies on the paths to both values."""
    path1 = find_path(root, first)
    path2 = find_path(root, second)
    if path1 is None or path2 is None:
        missing = first if path1 is None else second
        raise ValueError(f"value {missing} is not in the tree")
    common = [a for a, b in zip(path1, path2) if a == b]
    shared = 0
    for a, b in zip(path1, path2):
        if a != b:
            break
        shared += 1
    return path1[shared - 1] if shared else common[-1]


def ancestors(root: Optional[BSTNode], target: BSTNode) -> list[int]:
    """Return the values of the ancestors of the target node, nearest first."""
    found: list[int] = []

    def _search(node: Optional[BSTNode]) -> bool:
        if node is None:
            return False
        if node.left is target or node.right is target or _search(node.left) or _search(
            node.right
        ):
            found.append(node.data)
            return True
        return False

    _search(root)
    return found


def zigzag_levels(root: Optional[BSTNode]) -> list[list[int]]:
    """Return the levels of the tree, alternately read left to right and right to left."""
    result: list[list[int]] = []
    level = [root] if root is not None else []
    left_to_right = True
    while level:
        values = [node.data for node in level]
        result.append(values if left_to_right else values[::-1])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        left_to_right = not left_to_right
    return result


def vertical_sums(root: Optional[BSTNode]) -> dict[int, int]:
    """Return the sum of each vertical column, keyed by horizontal distance, left to right.

    The root is column 0; a left child is one column left, a right child one right.
    """
    sums: dict[int, int] = {}
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, column = stack.pop()
        sums[column] = sums.get(column, 0) + node.data
        if node.right is not None:
            stack.append((node.right, column + 1))
        if node.left is not None:
            stack.append((node.left, column - 1))
    return dict(sorted(sums.items()))