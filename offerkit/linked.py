"""Singly linked lists and the classic algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        return _nodes(self)


@dataclass(eq=False)
class RandomListNode:
    """A list node that also points to an arbitrary node of its list."""

    label: int
    next: Optional[RandomListNode] = None
    random: Optional[RandomListNode] = field(default=None, repr=False)


def _nodes(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; an empty input gives None."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def delete_node(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Remove ``node`` from the list and return the (possibly new) head.

    A node with a successor is removed by taking over the successor's value.
    """
    if head is None or node is None:
        return head
    if node.next is not None:
        successor = node.next
        node.val = successor.val
        node.next = successor.next
        return head
    if head is node:
        return None
    for current in _nodes(head):
        if current.next is node:
            current.next = None
            return head
    raise ValueError("node is not in the list")


def kth_from_tail(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Return the k-th node counted from the tail (1 is the tail), or None."""
    if k <= 0 or head is None:
        return None
    lead = head
    for _ in range(k - 1):
        lead = lead.next
        if lead is None:
            return None
    trail = head
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    return trail


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    new_head = None
    while head is not None:
        node = head
        head = head.next
        node.next = new_head
        new_head = node
    return new_head


def reverse_list_recursive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place by recursion and return its new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_list_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def merge_sorted(head1: Optional[ListNode], head2: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two ascending lists; on equal values the node of ``head2`` comes first."""
    anchor = ListNode(0)
    tail = anchor
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return anchor.next


def merge_sorted_recursive(
    head1: Optional[ListNode], head2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two ascending lists recursively."""
    if head1 is None:
        return head2
    if head2 is None:
        return head1
    if head1.val < head2.val:
        head1.next = merge_sorted_recursive(head1.next, head2)
        return head1
    head2.next = merge_sorted_recursive(head2.next, head1)
    return head2


def copy_random_list(head: Optional[RandomListNode]) -> Optional[RandomListNode]:
    """Deep-copy a list whose nodes carry random pointers."""
    if head is None:
        return None
    clones = {node: RandomListNode(node.label) for node in _nodes(head)}
    for original, clone in clones.items():
        clone.next = clones.get(original.next)
        clone.random = clones.get(original.random)
    return clones[head]


def first_common_node(
    head1: Optional[ListNode], head2: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    if head1 is None or head2 is None:
        return None
    len1 = sum(1 for _ in _nodes(head1))
    len2 = sum(1 for _ in _nodes(head2))
    for _ in range(len1 - len2):
        head1 = head1.next
    for _ in range(len2 - len1):
        head2 = head2.next
    while head1 is not head2:
        head1 = head1.next
        head2 = head2.next
    return head1


def remove_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node whose value repeats in a run of a sorted list."""
    anchor = ListNode(0)
    tail = anchor
    node = head
    while node is not None:
        run_end = node.next
        while run_end is not None and run_end.val == node.val:
            run_end = run_end.next
        if node.next is run_end:
            tail.next = node
            tail = node
        node = run_end
    tail.next = None
    return anchor.next


def values_from_tail(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list from the tail to the head."""
    stack = [node.val for node in _nodes(head)]
    return stack[::-1]