# dsaprep

A small library of classic data-structure and algorithm exercises: singly
linked lists, stacks and binary trees. Each one is a plain Python function or
class with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsaprep.linked_lists`

- `Node(data, next=None)`: a singly linked list node; iterating over a node
  yields the values from it to the end of the list.
- `from_iterable(values)` builds a list and returns its head (or `None`);
  `to_list(head)` returns the values as a Python list.
- `remove_duplicates(head)` drops repeated values using a set of seen values
  and returns the head; `remove_duplicates_in_place(head)` does the same
  without extra storage.
- `kth_last(head, k)` returns the value `k` places from the end (`k = 1` is the
  last). It raises `ValueError` for `k < 1` and `IndexError` if the list is
  empty or shorter than `k`.
- `delete_middle_node(node)` removes a node given only that node; it raises
  `ValueError` for the last node.
- `partition(head, pivot)` returns a new list with the values below `pivot`
  first, then the rest, each part in its original order.
- `add_numbers(first, second)` adds two numbers whose digits are stored ones
  first and returns the sum as an `int`.
- `is_palindrome(head)` checks whether the list reads the same both ways.
- `find_loop_start(head)` returns the node where a loop begins, or `None`.

### `dsaprep.stacks`

- `ThreeStacks(capacity=100)`: three stacks (numbered 0, 1, 2) sharing one
  fixed array, with `push(stack, data)`, `pop(stack)`, `peek(stack)` and
  `is_empty(stack)`.
- `MinStack(capacity=100)`: a bounded stack that stores the running minimum
  beside each element; `push`, `pop`, `peek`, `is_empty`, `find_min` and
  `len()`.
- `CompactMinStack(capacity=100)`: a bounded stack that keeps a second stack
  of successive minima only; `push`, `pop`, `find_min` and `len()`.
- `SetOfStacks(capacity=4)`: a stack made of sub-stacks of a fixed size; a new
  sub-stack starts when the last one is full and is dropped once it empties.
  `push`, `pop`, `peek`, `is_empty` and `len()`.

Pushing onto a full stack raises `StackOverflowError`; popping, peeking or
asking for the minimum of an empty one raises `StackUnderflowError`.

### `dsaprep.tree`

- `BSTNode(data, left=None, right=None, parent=None)`.
- `insert(root, data)` inserts into a binary search tree (equal values go
  left) and returns the root; `build_bst(values)` inserts a sequence into an
  empty tree.
- `in_order`, `pre_order` and `post_order` are generators of values.
- `find_max` and `find_max_level_order` return the largest value (they raise
  `ValueError` on an empty tree); `contains` and `contains_level_order` search
  every node without relying on order.

### `dsaprep.tree_metrics`

- `size`, `size_level_order`, `height` (in nodes), `height_level_order`.
- `reverse_level_order(root)`: values deepest level first, right to left.
- `deepest_node`, `find_min_node`, `count_leaves`, `count_full_nodes`,
  `max_level_sum`.
- `delete_node(root, data)` removes a value from a search tree and returns the
  new root; `delete_tree(root)` unlinks every node.

### `dsaprep.tree_paths`

- `identical(first, second)`, `mirror(root)` (in place), `is_mirror(first, second)`.
- `diameter(root)` and `diameter_by_heights(root)`: longest path in edges.
- `root_to_leaf_paths(root)`: strings such as `"10->15->25"`.
- `has_path_sum(root, total)`: a downward path from the root that may stop at
  any node; it assumes non-negative values.
- `find_path(root, data)`, `lowest_common_ancestor(root, first, second)`
  (raises `ValueError` if a value is missing), `ancestors(root, target)`
  (nearest first).
- `zigzag_levels(root)` and `vertical_sums(root)` (a dict keyed by column,
  left to right, the root at column 0).

### `dsaprep.tree_build`

- `build_from_preorder_inorder(preorder, inorder)` and
  `build_from_leaf_marks(text)` (pre-order marks where `"L"` is a leaf).
- `connect_siblings(root)`: a dict mapping each node to its right neighbour on
  the same level, or `None`.
- `parent_array_height(parents)`: height in edges of a tree given as a parent
  array with `-1` for the root.
- `bst_lca(root, alpha, beta)`: lowest common ancestor in a search tree.
- `is_bst_naive`, `is_bst(root, low=-inf, high=inf)` (strict bounds) and
  `is_bst_in_order`.
- `bst_to_circular_dll(root)` relinks a tree into a sorted circular list
  (left is previous, right is next); `circular_dll_values(head)` reads it back.
- `DLLNode(data, prev=None, next=None)` and `dll_to_bst(head)`, which relinks a
  sorted doubly linked list into a balanced tree with `prev`/`next` as children.

## Example

```python
from dsaprep.tree import build_bst, in_order
from dsaprep.tree_metrics import height
from dsaprep.tree_paths import root_to_leaf_paths

root = build_bst([10, 15, 5, 25, 20])
print(list(in_order(root)))       # [5, 10, 15, 20, 25]
print(height(root))               # 4
print(root_to_leaf_paths(root))   # ['10->5', '10->15->25->20']
```

## What it does not include

The package is a library only: it has no command-line program, and it holds
no string exercises (uniqueness, permutation, palindrome or reversal checks on
text).