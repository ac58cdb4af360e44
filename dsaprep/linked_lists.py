"""Singly linked list puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

__all__ = [
    "Node",
    "from_iterable",
    "to_list",
    "remove_duplicates",
    "remove_duplicates_in_place",
    "kth_last",
    "delete_middle_node",
    "partition",
    "add_numbers",
    "is_palindrome",
    "find_loop_start",
]


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list."""

    data: int
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[Node] = self
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[int]) -> Optional[Node]:
    """Build a list from the values in order and return its head, or None if empty."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[Node]) -> list[int]:
    """Return the values of the list as a Python list."""
    return [] if head is None else list(head)


def remove_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Unlink every repeated value, keeping first occurrences, using a set of seen values."""
    seen: set[int] = set()
    prev: Optional[Node] = None
    node = head
    while node is not None:
        if node.data in seen:
            assert prev is not None
            prev.next = node.next
        else:
            seen.add(node.data)
            prev = node
        node = node.next
    return head


def remove_duplicates_in_place(head: Optional[Node]) -> None:
    """Unlink every repeated value without extra storage, using a runner for each node."""
    for current in _nodes(head):
        runner = current
        while runner.next is not None:
            if runner.next.data == current.data:
                runner.next = runner.next.next
            else:
                runner = runner.next


def kth_last(head: Optional[Node], k: int) -> int:
    """Return the value k places from the end; k = 1 is the last value."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if head is None:
        raise IndexError("list is empty")
    lead = head
    for _ in range(k - 1):
        lead = lead.next
        if lead is None:
            raise IndexError("k is larger than the list")
    trail = head
    while lead.next is not None:
        lead = lead.next
        assert trail.next is not None
        trail = trail.next
    return trail.data


def delete_middle_node(node: Node) -> None:
    """Remove the given node from its list, given access to that node only."""
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node of a list")
    node.data = following.data
    node.next = following.next


def partition(head: Optional[Node], pivot: int) -> Optional[Node]:
    """Return a new list with values below pivot first, then the rest, both in original order."""
    values = to_list(head)
    lower = [value for value in values if value < pivot]
    upper = [value for value in values if value >= pivot]
    return from_iterable(lower + upper)


def _digits_value(head: Optional[Node]) -> int:
    total = 0
    place = 1
    for digit in _nodes(head):
        total += digit.data * place
        place *= 10
    return total


def add_numbers(first: Optional[Node], second: Optional[Node]) -> int:
    """Add two numbers whose digits are stored ones-first and return the sum."""
    return _digits_value(first) + _digits_value(second)


def is_palindrome(head: Optional[Node]) -> bool:
    """Return True if the list reads the same forwards and backwards."""
    reversed_head: Optional[Node] = None
    for value in _nodes(head):
        reversed_head = Node(value.data, reversed_head)
    return all(
        a.data == b.data for a, b in zip(_nodes(head), _nodes(reversed_head))
    )


def find_loop_start(head: Optional[Node]) -> Optional[Node]:
    """Return the node where a loop begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    start = head
    while start is not slow:
        assert start is not None and slow is not None
        start = start.next
        slow = slow.next
    return start