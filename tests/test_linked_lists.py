import pytest

from dsaprep.linked_lists import (
    Node,
    add_numbers,
    delete_middle_node,
    find_loop_start,
    from_iterable,
    is_palindrome,
    kth_last,
    partition,
    remove_duplicates,
    remove_duplicates_in_place,
    to_list,
)

SAMPLES = [[], [7], [1, 2, 3], [4, 4, 4], [3, 1, 3, 2, 1, 5], [9, 8, 9, 7, 8]]


@pytest.mark.parametrize("values", SAMPLES)
def test_round_trip(values):
    assert to_list(from_iterable(values)) == values


def test_empty_builds_none():
    assert from_iterable([]) is None


def test_node_iteration():
    head = Node(1, Node(2))
    assert list(head) == [1, 2]


def _check_dedup(values, result):
    assert len(result) == len(set(result))
    assert set(result) == set(values)
    assert result == sorted(set(values), key=values.index)


@pytest.mark.parametrize("values", SAMPLES)
def test_remove_duplicates(values):
    head = from_iterable(values)
    _check_dedup(values, to_list(remove_duplicates(head)))


@pytest.mark.parametrize("values", SAMPLES)
def test_remove_duplicates_in_place(values):
    head = from_iterable(values)
    remove_duplicates_in_place(head)
    _check_dedup(values, to_list(head))


def test_remove_duplicates_value():
    assert to_list(remove_duplicates(from_iterable([1, 2, 1, 3, 2]))) == [1, 2, 3]


@pytest.mark.parametrize("values", [[5], [1, 2, 3, 4, 5], [10, 20, 30]])
def test_kth_last_matches_index(values):
    head = from_iterable(values)
    for k in range(1, len(values) + 1):
        assert kth_last(head, k) == values[-k]


def test_kth_last_too_large():
    with pytest.raises(IndexError):
        kth_last(from_iterable([1, 2]), 3)


def test_kth_last_empty():
    with pytest.raises(IndexError):
        kth_last(None, 1)


def test_kth_last_bad_k():
    with pytest.raises(ValueError):
        kth_last(from_iterable([1]), 0)


def test_delete_middle_node():
    values = [1, 2, 3, 4, 5]
    head = from_iterable(values)
    delete_middle_node(head.next.next)
    assert to_list(head) == values[:2] + values[3:]


def test_delete_last_node_rejected():
    head = from_iterable([1, 2])
    with pytest.raises(ValueError):
        delete_middle_node(head.next)


@pytest.mark.parametrize("values,pivot", [
    ([3, 5, 8, 5, 10, 2, 1], 5),
    ([1, 2, 3], 10),
    ([4, 5, 6], 0),
    ([], 3),
])
def test_partition(values, pivot):
    result = to_list(partition(from_iterable(values), pivot))
    assert sorted(result) == sorted(values)
    below = sum(1 for v in values if v < pivot)
    assert all(v < pivot for v in result[:below])
    assert all(v >= pivot for v in result[below:])
    assert [v for v in result if v < pivot] == [v for v in values if v < pivot]
    assert [v for v in result if v >= pivot] == [v for v in values if v >= pivot]


def _digits(number):
    return from_iterable(int(c) for c in reversed(str(number)))


@pytest.mark.parametrize("a,b", [(0, 0), (617, 295), (9, 991), (12345, 0)])
def test_add_numbers(a, b):
    assert add_numbers(_digits(a), _digits(b)) == a + b


def test_add_numbers_empty():
    assert add_numbers(None, None) == 0


@pytest.mark.parametrize("values", [[], [1], [1, 2, 1], [3, 4, 4, 3]])
def test_palindrome_lists(values):
    assert is_palindrome(from_iterable(values)) is True


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 2, 3]])
def test_not_palindrome_lists(values):
    assert is_palindrome(from_iterable(values)) is False


def test_palindrome_leaves_list_intact():
    values = [1, 2, 3]
    head = from_iterable(values)
    is_palindrome(head)
    assert to_list(head) == values


def test_find_loop_start_source_shape():
    head = from_iterable(range(6))
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head.next
    assert find_loop_start(head) is head.next


def test_find_loop_start_whole_list():
    head = from_iterable([1, 2, 3])
    head.next.next.next = head
    assert find_loop_start(head) is head


def test_find_loop_start_no_loop():
    assert find_loop_start(from_iterable([1, 2, 3])) is None
    assert find_loop_start(None) is None