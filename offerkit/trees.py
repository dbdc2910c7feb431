"""Binary trees and the classic algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; children get their ``parent`` set on construction."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None
    parent: Optional[TreeNode] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in (self.left, self.right):
            if child is not None:
                child.parent = self


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    yield from _inorder_nodes(root.left)
    yield root
    yield from _inorder_nodes(root.right)


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in in-order."""
    return [node.val for node in _inorder_nodes(root)]


def _matches(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    if root2 is None:
        return True
    if root1 is None or root1.val != root2.val:
        return False
    return _matches(root1.left, root2.left) and _matches(root1.right, root2.right)


def has_subtree(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Tell whether ``root2`` matches the shape and values of part of ``root1``."""
    if root1 is None or root2 is None:
        return False
    if root1.val == root2.val and _matches(root1, root2):
        return True
    return has_subtree(root1.left, root2) or has_subtree(root1.right, root2)


def mirror(root: Optional[TreeNode]) -> None:
    """Swap left and right children throughout the tree, in place."""
    if root is None:
        return
    root.left, root.right = root.right, root.left
    mirror(root.left)
    mirror(root.right)


def is_valid_postorder(values: Sequence[int]) -> bool:
    """Tell whether ``values`` can be the post-order walk of a binary search tree."""
    seq = list(values)

    def check(lo: int, hi: int) -> bool:
        if hi - lo <= 1:
            return True
        root = seq[hi - 1]
        split = lo
        while split < hi and seq[split] < root:
            split += 1
        if any(value <= root for value in seq[split:hi - 1]):
            return False
        return check(lo, split) and check(split, hi - 1)

    return check(0, len(seq))


def bst_to_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink a search tree into a sorted doubly linked list and return its head.

    ``left`` points to the previous node and ``right`` to the next one.
    """
    head: Optional[TreeNode] = None
    last: Optional[TreeNode] = None

    def visit(node: Optional[TreeNode]) -> None:
        nonlocal head, last
        if node is None:
            return
        visit(node.left)
        if head is None:
            head = last = node
            node.left = None
        else:
            last.right = node
            node.left = last
            last = node
        visit(node.right)

    visit(root)
    return head


def depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(depth(root.left), depth(root.right)) + 1


def _balanced_height(root: Optional[TreeNode]) -> Optional[int]:
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether subtree heights differ by at most one at every node."""
    return _balanced_height(root) is not None


def inorder_successor(
    root: Optional[TreeNode], node: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Return the node after ``node`` in in-order, using parent links."""
    if root is None or node is None:
        return None
    if node.right is not None:
        node = node.right
        while node.left is not None:
            node = node.left
        return node
    while node.parent is not None:
        if node.parent.left is node:
            return node.parent
        node = node.parent
    return None


def serialize(root: Optional[TreeNode]) -> list[int]:
    """Write the tree in pre-order with -1 for every missing child."""
    if root is None:
        return []
    out: list[int] = []
    stack: list[Optional[TreeNode]] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            out.append(-1)
            continue
        out.append(node.val)
        stack.append(node.right)
        stack.append(node.left)
    return out


def deserialize(values: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its pre-order form; negative values mark no node."""
    if not values:
        return None
    items = iter(values)

    def build() -> Optional[TreeNode]:
        value = next(items, None)
        if value is None or value < 0:
            return None
        left = build()
        right = build()
        return TreeNode(value, left, right)

    return build()


def kth_node(root: Optional[TreeNode], k: int) -> Optional[TreeNode]:
    """Return the k-th smallest node of a search tree (1-based), or None."""
    if root is None or k <= 0:
        return None
    return next(islice(_inorder_nodes(root), k - 1, None), None)


def reconstruct(
    preorder: Sequence[int], inorder_values: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its pre-order and in-order walks."""
    pre = list(preorder)
    ino = list(inorder_values)
    if len(pre) != len(ino):
        raise ValueError("pre-order and in-order walks differ in length")

    def build(pre: list[int], ino: list[int]) -> Optional[TreeNode]:
        if not pre:
            return None
        value = pre[0]
        try:
            split = ino.index(value)
        except ValueError:
            raise ValueError(f"value {value} missing from in-order walk") from None
        left = build(pre[1:split + 1], ino[:split])
        right = build(pre[split + 1:], ino[split + 1:])
        return TreeNode(value, left, right)

    return build(pre, ino)