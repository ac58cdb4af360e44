import pytest

from dsaprep.stacks import (
    CompactMinStack,
    MinStack,
    SetOfStacks,
    StackOverflowError,
    StackUnderflowError,
    ThreeStacks,
)


def test_three_stacks_are_independent():
    stacks = ThreeStacks()
    stacks.push(0, 1)
    stacks.push(1, 2)
    stacks.push(2, 3)
    stacks.push(0, 4)
    assert stacks.peek(0) == 4
    assert stacks.peek(1) == 2
    assert stacks.pop(2) == 3
    assert stacks.is_empty(2)
    assert not stacks.is_empty(0)
    assert stacks.pop(0) == 4
    assert stacks.pop(0) == 1
    assert stacks.is_empty(0)


def test_three_stacks_underflow():
    stacks = ThreeStacks()
    with pytest.raises(StackUnderflowError):
        stacks.pop(1)
    with pytest.raises(StackUnderflowError):
        stacks.peek(2)


def _fill(stacks, stack):
    pushed = 0
    while True:
        try:
            stacks.push(stack, pushed)
        except StackOverflowError:
            return pushed
        pushed += 1


def test_three_stacks_share_the_capacity():
    capacity = 10
    stacks = ThreeStacks(capacity)
    counts = [_fill(stacks, stack) for stack in range(3)]
    assert sum(counts) == capacity
    assert counts[0] >= counts[1] >= counts[2] > 0
    for stack, count in enumerate(counts):
        assert stacks.peek(stack) == count - 1
        popped = [stacks.pop(stack) for _ in range(count)]
        assert popped == list(range(count))[::-1]
        assert stacks.is_empty(stack)


def test_three_stacks_rejects_bad_index():
    stacks = ThreeStacks()
    with pytest.raises(ValueError):
        stacks.push(3, 1)


@pytest.mark.parametrize("cls", [MinStack, CompactMinStack])
def test_min_follows_source_sequence(cls):
    stack = cls()
    mins = []
    for value in (5, 6, 3, 7):
        stack.push(value)
        mins.append(stack.find_min())
    assert mins == [5, 5, 3, 3]
    stack.pop()
    assert stack.find_min() == 3
    stack.pop()
    assert stack.find_min() == 5


@pytest.mark.parametrize("cls", [MinStack, CompactMinStack])
def test_min_with_repeated_minimum(cls):
    stack = cls()
    for value in (3, 3, 4):
        stack.push(value)
    assert stack.pop() == 4
    assert stack.pop() == 3
    assert stack.find_min() == 3


@pytest.mark.parametrize("cls", [MinStack, CompactMinStack])
def test_min_stack_overflow_and_underflow(cls):
    stack = cls(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2
    stack.pop()
    stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.find_min()


def test_min_stack_peek_and_empty():
    stack = MinStack()
    assert stack.is_empty()
    stack.push(9)
    assert stack.peek() == 9
    assert not stack.is_empty()


def test_set_of_stacks_source_sequence():
    stacks = SetOfStacks()
    for _ in range(8):
        stacks.push(5)
        assert stacks.peek() == 5
    for _ in range(4):
        stacks.pop()
        assert stacks.peek() == 5
    for _ in range(5):
        stacks.push(6)
        assert stacks.peek() == 6
    assert len(stacks) == 9


def test_set_of_stacks_is_lifo_across_substacks():
    stacks = SetOfStacks(capacity=3)
    values = list(range(10))
    for value in values:
        stacks.push(value)
    popped = [stacks.pop() for _ in values]
    assert popped == values[::-1]
    assert stacks.is_empty()
    with pytest.raises(StackUnderflowError):
        stacks.pop()
    with pytest.raises(StackUnderflowError):
        stacks.peek()


def test_set_of_stacks_rejects_zero_capacity():
    with pytest.raises(ValueError):
        SetOfStacks(capacity=0)