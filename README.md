# offerkit

A small collection of classic interview algorithms, written as plain Python
functions over Python data types and a few lightweight node classes.

## Installation

```
pip install offerkit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

### `offerkit.linked`

Singly linked lists built from `ListNode` (`val`, `next`). A `ListNode` can be
iterated to walk its nodes.

- `from_values(values)` builds a list and returns its head (None when empty);
  `to_values(head)` returns the values in order.
- `reverse_list(head)` and `reverse_list_recursive(head)` reverse in place.
- `merge_sorted(head1, head2)` and `merge_sorted_recursive(head1, head2)` merge
  two ascending lists.
- `kth_from_tail(head, k)` returns the k-th node from the tail (1 is the tail)
  or None.
- `delete_node(head, node)` removes a node and returns the head; it raises
  `ValueError` if a tail node is not in the list.
- `remove_duplicates(head)` drops every node whose value repeats in a run of a
  sorted list.
- `first_common_node(head1, head2)` returns the first shared node or None.
- `values_from_tail(head)` returns the values from tail to head.
- `copy_random_list(head)` deep-copies a list of `RandomListNode`
  (`label`, `next`, `random`).

### `offerkit.trees`

Binary trees built from `TreeNode` (`val`, `left`, `right`, `parent`); the
children passed to the constructor get their `parent` set.

- `reconstruct(preorder, inorder_values)` rebuilds a tree from two walks and
  raises `ValueError` when they do not fit together.
- `inorder(root)` returns the in-order values.
- `mirror(root)` swaps children throughout the tree, in place.
- `depth(root)` and `is_balanced(root)`.
- `has_subtree(root1, root2)` tells whether `root2` matches part of `root1`.
- `bst_to_list(root)` relinks a search tree into a sorted doubly linked list
  (`left` is previous, `right` is next) and returns its head.
- `kth_node(root, k)` returns the k-th smallest node (1-based) or None.
- `inorder_successor(root, node)` follows parent links to the next node.
- `serialize(root)` writes pre-order with `-1` for missing children;
  `deserialize(values)` reads that form back.
- `is_valid_postorder(values)` tells whether a sequence can be the post-order
  walk of a binary search tree.

### `offerkit.arrays`

`odd_before_even`, `spiral_order`, `is_pop_order`, `k_smallest_heap`,
`k_smallest_partition`, `max_subarray_sum`, `count_inversions`,
`count_occurrences`, `two_singles`, `pair_with_sum`,
`consecutive_runs_with_sum`, `is_straight`, `find_duplicate`,
`product_except_self`, `min_in_rotated`. These take sequences and return new
values; invalid input (such as an out-of-range `k` for `k_smallest_heap`, a
hand that is not five cards, or an empty sequence for `min_in_rotated`) raises
`ValueError`.

### `offerkit.strings`

`replace_spaces`, `permutations`, `combinations`, `first_unique_char`,
`reverse_words`, `rotate_left`.

### `offerkit.numbers`

`bit_count`, `bit_count_kernighan` (both over the low `width` bits, 32 by
default), `power` (raises `ZeroDivisionError` for a near-zero base with a
non-positive exponent), `one_to_n_digits` (a generator of decimal strings),
`nth_ugly`, `dice_probabilities`, `dice_probabilities_dp`,
`add_without_plus` (32-bit wrapping), `fibonacci`.

## Example

```python
from offerkit.linked import from_values, to_values, reverse_list
from offerkit.trees import reconstruct, inorder
from offerkit.arrays import max_subarray_sum
from offerkit.numbers import nth_ugly

print(to_values(reverse_list(from_values([1, 2, 3]))))   # [3, 2, 1]

root = reconstruct([1, 2, 4, 7, 3, 5, 6, 8], [4, 7, 2, 1, 5, 3, 8, 6])
print(inorder(root))   # [4, 7, 2, 1, 5, 3, 8, 6]

print(max_subarray_sum([1, -2, 3, 10, -4, 7, 2, -5]))   # 18
print(nth_ugly(1500))   # 859963392
```

## What it does not do

offerkit is a library only. It installs no command-line programs, and its
functions return their results rather than printing them.