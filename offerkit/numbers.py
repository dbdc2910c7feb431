"""Classic algorithms over integers and probabilities."""

from __future__ import annotations

from typing import Iterator

_INT_BITS = 32


def bit_count(n: int, width: int = _INT_BITS) -> int:
    """Count the set bits among the low ``width`` bits of ``n`` by testing each bit."""
    if width <= 0:
        raise ValueError("width must be positive")
    return sum(1 for shift in range(width) if (n >> shift) & 1)


def bit_count_kernighan(n: int, width: int = _INT_BITS) -> int:
    """Count the set bits among the low ``width`` bits of ``n`` by clearing the lowest."""
    if width <= 0:
        raise ValueError("width must be positive")
    value = n & ((1 << width) - 1)
    count = 0
    while value:
        count += 1
        value &= value - 1
    return count


def _unsigned_power(base: float, exp: int) -> float:
    if exp == 0:
        return 1.0
    if exp == 1:
        return base
    if exp % 2:
        return _unsigned_power(base, exp - 1) * base
    half = _unsigned_power(base, exp // 2)
    return half * half


def power(base: float, exp: int) -> float:
    """Raise ``base`` to the integer ``exp`` by repeated squaring.

    A base within 1e-5 of zero with an exponent of zero or less is refused.
    """
    if abs(base) <= 1e-5 and exp <= 0:
        raise ZeroDivisionError("zero base with a non-positive exponent")
    result = _unsigned_power(float(base), abs(exp))
    return 1 / result if exp < 0 else result


def one_to_n_digits(n: int) -> Iterator[str]:
    """Yield the decimal numbers from 1 up to the largest with ``n`` digits."""
    if n <= 0:
        return
    for value in range(1, 10 ** n):
        yield str(value)


def nth_ugly(n: int) -> int:
    """Return the n-th number whose only prime factors are 2, 3 and 5; 0 for n <= 0."""
    if n <= 0:
        return 0
    uglies = [1]
    i2 = i3 = i5 = 0
    while len(uglies) < n:
        t2, t3, t5 = uglies[i2] * 2, uglies[i3] * 3, uglies[i5] * 5
        nxt = min(t2, t3, t5)
        uglies.append(nxt)
        if nxt == t2:
            i2 += 1
        if nxt == t3:
            i3 += 1
        if nxt == t5:
            i5 += 1
    return uglies[n - 1]


def dice_probabilities(n: int) -> dict[int, float]:
    """Map every possible total of ``n`` dice to its probability, by enumeration."""
    if n <= 0:
        return {}
    counts = [0] * (6 * n + 1)

    def roll(total: int, left: int) -> None:
        if left <= 0:
            counts[total] += 1
            return
        for face in range(1, 7):
            roll(total + face, left - 1)

    roll(0, n)
    outcomes = 6 ** n
    return {total: counts[total] / outcomes for total in range(n, 6 * n + 1)}


def dice_probabilities_dp(n: int) -> dict[int, float]:
    """Map every possible total of ``n`` dice to its probability, by dynamic programming."""
    if n <= 0:
        return {}
    size = 6 * n + 1
    counts = [0] * size
    for face in range(1, 7):
        counts[face] = 1
    for dice in range(2, n + 1):
        following = [0] * size
        for total in range(dice, 6 * dice + 1):
            following[total] = sum(
                counts[total - face] for face in range(1, min(6, total - 1) + 1)
            )
        counts = following
    outcomes = 6 ** n
    return {total: counts[total] / outcomes for total in range(n, 6 * n + 1)}


def add_without_plus(a: int, b: int) -> int:
    """Add two 32-bit signed integers using only bit operations, wrapping on overflow."""
    mask = (1 << _INT_BITS) - 1
    a &= mask
    b &= mask
    while b:
        a, b = a ^ b, ((a & b) << 1) & mask
    if a >> (_INT_BITS - 1):
        a -= 1 << _INT_BITS
    return a


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; 0 for n <= 0."""
    if n <= 0:
        return 0
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current