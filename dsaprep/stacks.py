"""Stack puzzles: three stacks in one array, stacks with a minimum, sets of stacks."""

from __future__ import annotations

from typing import Generic, TypeVar

__all__ = [
    "StackOverflowError",
    "StackUnderflowError",
    "ThreeStacks",
    "MinStack",
    "CompactMinStack",
    "SetOfStacks",
]

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that is full."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking a stack that is empty."""


class ThreeStacks(Generic[T]):
    """Three stacks sharing one fixed array; stack i owns slots i, i + 3, i + 6, ..."""

    STACKS = 3

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[T | None] = [None] * capacity
        self._next = list(range(self.STACKS))

    def _check(self, stack: int) -> None:
        if stack not in range(self.STACKS):
            raise ValueError(f"stack must be one of 0..{self.STACKS - 1}")

    def push(self, stack: int, data: T) -> None:
        """Push data onto the given stack."""
        self._check(stack)
        index = self._next[stack]
        if index >= len(self._slots):
            raise StackOverflowError(f"stack {stack} is full")
        self._slots[index] = data
        self._next[stack] = index + self.STACKS

    def pop(self, stack: int) -> T:
        """Remove and return the top of the given stack."""
        value = self.peek(stack)
        self._next[stack] -= self.STACKS
        self._slots[self._next[stack]] = None
        return value

    def peek(self, stack: int) -> T:
        """Return the top of the given stack without removing it."""
        if self.is_empty(stack):
            raise StackUnderflowError(f"stack {stack} is empty")
        value = self._slots[self._next[stack] - self.STACKS]
        return value  # type: ignore[return-value]

    def is_empty(self, stack: int) -> bool:
        """Return True if the given stack holds nothing."""
        self._check(stack)
        return self._next[stack] == stack


class MinStack:
    """A bounded stack that records the running minimum beside every element."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = capacity
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, data: int) -> None:
        """Push data, remembering the minimum as of this element."""
        if len(self._items) >= self._capacity:
            raise StackOverflowError("stack is full")
        current = min(data, self._items[-1][1]) if self._items else data
        self._items.append((data, current))

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()[0]

    def peek(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1][0]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def find_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1][1]


class CompactMinStack:
    """A bounded stack that keeps a second stack holding only the successive minima."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = capacity
        self._items: list[int] = []
        self._minima: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, data: int) -> None:
        """Push data; it joins the minima stack if it is no larger than the current minimum."""
        if len(self._items) >= self._capacity:
            raise StackOverflowError("stack is full")
        self._items.append(data)
        if not self._minima or data <= self._minima[-1]:
            self._minima.append(data)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        value = self._items.pop()
        if value == self._minima[-1]:
            self._minima.pop()
        return value

    def find_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._minima:
            raise StackUnderflowError("stack is empty")
        return self._minima[-1]


class SetOfStacks(Generic[T]):
    """A stack made of fixed-size sub-stacks; a new one starts when the last is full."""

    def __init__(self, capacity: int = 4) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._stacks: list[list[T]] = []

    def __len__(self) -> int:
        return sum(len(stack) for stack in self._stacks)

    def push(self, data: T) -> None:
        """Push data onto the last sub-stack, starting a new one if it is full."""
        if not self._stacks or len(self._stacks[-1]) >= self._capacity:
            self._stacks.append([])
        self._stacks[-1].append(data)

    def pop(self) -> T:
        """Remove and return the top element, dropping a sub-stack once it empties."""
        if not self._stacks:
            raise StackUnderflowError("stack is empty")
        value = self._stacks[-1].pop()
        if not self._stacks[-1]:
            self._stacks.pop()
        return value

    def peek(self) -> T:
        """Return the top element without removing it."""
        if not self._stacks:
            raise StackUnderflowError("stack is empty")
        return self._stacks[-1][-1]

    def is_empty(self) -> bool:
        """Return True if no sub-stack holds anything."""
        return not self._stacks