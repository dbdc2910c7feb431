"""Classic algorithms over integer sequences and matrices."""

from __future__ import annotations

from bisect import bisect_left
from functools import reduce
from itertools import islice, takewhile
from operator import xor
from typing import Iterable, Optional, Sequence


def odd_before_even(nums: Iterable[int]) -> list[int]:
    """Return the values with every odd number moved before the even ones.

    Odd numbers keep their relative order; even numbers are swapped out
    of the way as the odd ones are gathered at the front.
    """
    values = list(nums)
    boundary = 0
    for index, value in enumerate(values):
        if value & 1:
            values[boundary], values[index] = value, values[boundary]
            boundary += 1
    return values


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` walked clockwise from the outside in."""
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows differ in length")

    out: list[int] = []
    up, left, down, right = 0, 0, len(rows) - 1, width - 1
    while up < down and left < right:
        out.extend(rows[up][left:right])
        out.extend(rows[i][right] for i in range(up, down))
        out.extend(rows[down][i] for i in range(right, left, -1))
        out.extend(rows[i][left] for i in range(down, up, -1))
        up, left, down, right = up + 1, left + 1, down - 1, right - 1
    if up == down and left == right:
        out.append(rows[up][left])
    elif up == down:
        out.extend(rows[up][left:right + 1])
    elif left == right:
        out.extend(rows[i][left] for i in range(up, down + 1))
    return out


def is_pop_order(push_seq: Sequence[int], pop_seq: Sequence[int]) -> bool:
    """Tell whether ``pop_seq`` can come out of a stack fed with ``push_seq``."""
    pushes = list(push_seq)
    pops = list(pop_seq)
    if not pops or len(pushes) != len(pops):
        return False
    pending = iter(pushes)
    stack: list[int] = []
    for target in pops:
        while not stack or stack[-1] != target:
            try:
                stack.append(next(pending))
            except StopIteration:
                return False
        stack.pop()
    return True


def _sift_up(heap: list[int], index: int) -> None:
    while index > 1:
        parent = index // 2
        if heap[parent] >= heap[index]:
            break
        heap[parent], heap[index] = heap[index], heap[parent]
        index = parent


def _sift_down(heap: list[int], size: int) -> None:
    parent = 1
    while True:
        child = parent * 2
        if child > size:
            break
        if child + 1 <= size and heap[child + 1] > heap[child]:
            child += 1
        if heap[child] <= heap[parent]:
            break
        heap[child], heap[parent] = heap[parent], heap[child]
        parent = child


def k_smallest_heap(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` smallest values using a bounded max-heap.

    The values come out in reverse heap order, so the largest of them is last.
    """
    values = list(nums)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    heap = [0] * (k + 1)
    for index, value in enumerate(values):
        if index < k:
            heap[index + 1] = value
            _sift_up(heap, index + 1)
        elif value < heap[1]:
            heap[1] = value
            _sift_down(heap, k)
    return heap[k:0:-1]


def k_smallest_partition(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` smallest values found by repeated partitioning.

    The first value returned is the k-th smallest; an out-of-range ``k``
    gives an empty list.
    """
    values = list(nums)
    if not 1 <= k <= len(values):
        return []
    left, right = 0, len(values) - 1
    while True:
        pivot = left
        for j in range(left + 1, right + 1):
            if values[j] < values[left]:
                pivot += 1
                values[pivot], values[j] = values[j], values[pivot]
        values[pivot], values[left] = values[left], values[pivot]
        if pivot + 1 == k:
            break
        if pivot + 1 < k:
            left = pivot + 1
        else:
            right = pivot - 1
    return values[k - 1::-1]


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run; 0 for no values."""
    values = iter(nums)
    first = next(values, None)
    if first is None:
        return 0
    current = best = first
    for value in values:
        current = max(current + value, value)
        best = max(best, current)
    return best


def count_inversions(nums: Iterable[int]) -> int:
    """Return the number of pairs that appear in decreasing order."""

    def sort_count(seq: list[int]) -> tuple[list[int], int]:
        if len(seq) <= 1:
            return seq, 0
        mid = len(seq) // 2
        left, left_count = sort_count(seq[:mid])
        right, right_count = sort_count(seq[mid:])
        merged: list[int] = []
        count = left_count + right_count
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                count += len(left) - i
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged, count

    return sort_count(list(nums))[1]


def count_occurrences(nums: Sequence[int], target: int) -> int:
    """Return how many times ``target`` occurs in the ascending ``nums``."""
    start = bisect_left(nums, target)
    return sum(1 for _ in takewhile(lambda value: value == target, islice(nums, start, None)))


def two_singles(nums: Iterable[int]) -> tuple[int, int]:
    """Return the two values that occur once when every other occurs twice.

    The first value returned has the lowest differing bit set.
    """
    values = list(nums)
    if len(values) < 2:
        raise ValueError("need at least two values")
    combined = reduce(xor, values, 0)
    if combined == 0:
        raise ValueError("no two distinct single values")
    bit = combined & -combined
    with_bit = reduce(xor, (value for value in values if value & bit), 0)
    without_bit = reduce(xor, (value for value in values if not value & bit), 0)
    return with_bit, without_bit


def pair_with_sum(nums: Sequence[int], total: int) -> Optional[tuple[int, int]]:
    """Return the outermost pair of the ascending ``nums`` adding up to ``total``."""
    values = list(nums)
    lo, hi = 0, len(values) - 1
    while lo < hi:
        current = values[lo] + values[hi]
        if current == total:
            return values[lo], values[hi]
        if current > total:
            hi -= 1
        else:
            lo += 1
    return None


def consecutive_runs_with_sum(nums: Sequence[int], total: int) -> list[list[int]]:
    """Return every run of two or more adjacent values adding up to ``total``."""
    values = list(nums)
    size = len(values)
    if size < 2:
        return []
    runs: list[list[int]] = []
    lo, hi = 0, 1
    acc = values[0] + values[1]
    while hi < size:
        while acc < total:
            hi += 1
            if hi >= size:
                break
            acc += values[hi]
        if hi >= size:
            break
        while acc > total and lo + 1 < hi:
            acc -= values[lo]
            lo += 1
        if acc == total:
            runs.append(values[lo:hi + 1])
        hi += 1
        if hi < size:
            acc += values[hi]
    return runs


def is_straight(cards: Iterable[int]) -> bool:
    """Tell whether five cards form a straight, with 0 standing for a joker.

    Three or more jokers never count as a straight.
    """
    hand = sorted(cards)
    if len(hand) != 5:
        raise ValueError("a hand holds exactly five cards")
    jokers = sum(1 for _ in takewhile(lambda card: card == 0, hand))
    if jokers > 2:
        return False
    gaps = 0
    for previous, card in zip(hand[jokers:], hand[jokers + 1:]):
        gap = card - previous - 1
        if gap < 0:
            return False
        gaps += gap
    return jokers >= gaps


def find_duplicate(nums: Iterable[int]) -> int:
    """Return a repeated value of ``nums``, whose values lie in 0..len-1."""
    values = list(nums)
    size = len(values)
    if any(not 0 <= value < size for value in values):
        raise ValueError(f"values must lie between 0 and {size - 1}")
    for index in range(size):
        while values[index] != index:
            value = values[index]
            if values[value] == value:
                return value
            values[index], values[value] = values[value], value
    raise ValueError("no value is repeated")


def product_except_self(nums: Iterable[int]) -> list[int]:
    """Return, for each position, the product of all the other values."""
    values = list(nums)
    if len(values) < 2:
        return values
    result = [1] * len(values)
    for index in range(1, len(values)):
        result[index] = result[index - 1] * values[index - 1]
    suffix = 1
    for index in range(len(values) - 1, -1, -1):
        result[index] *= suffix
        suffix *= values[index]
    return result


def min_in_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending sequence."""
    values = list(nums)
    if not values:
        raise ValueError("empty sequence has no minimum")
    left, right = 0, len(values) - 1
    while left < right and values[left] >= values[right]:
        if left + 1 == right:
            return values[right]
        mid = (left + right) // 2
        if values[left] == values[mid] == values[right]:
            left += 1
            continue
        if values[mid] >= values[left]:
            left = mid
        else:
            right = mid
    return values[left]