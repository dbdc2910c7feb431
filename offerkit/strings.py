"""Classic algorithms over strings."""

from __future__ import annotations

from collections import Counter
from typing import Optional


def replace_spaces(text: str) -> str:
    """Return ``text`` with every space replaced by ``%20``."""
    return text.replace(" ", "%20")


def permutations(text: str) -> list[str]:
    """Return every arrangement of the characters of ``text``.

    Arrangements are produced by swapping each character into the front
    position in turn. Repeated characters give repeated arrangements.
    """
    chars = list(text)
    out: list[str] = []

    def permute(start: int) -> None:
        if start >= len(chars):
            out.append("".join(chars))
            return
        for index in range(start, len(chars)):
            chars[start], chars[index] = chars[index], chars[start]
            permute(start + 1)
            chars[start], chars[index] = chars[index], chars[start]

    permute(0)
    return out


def combinations(text: str) -> list[str]:
    """Return every selection of characters of ``text``, keeping their order.

    Selections that take a character come before those that skip it, so the
    whole text comes first and the empty string last.
    """
    out: list[str] = []

    def pick(index: int, prefix: str) -> None:
        if index >= len(text):
            out.append(prefix)
            return
        pick(index + 1, prefix + text[index])
        pick(index + 1, prefix)

    pick(0, "")
    return out


def first_unique_char(text: Optional[str]) -> Optional[str]:
    """Return the character of lowest code that occurs exactly once, or None."""
    if not text:
        return None
    counts = Counter(text)
    return min((char for char, count in counts.items() if count == 1), default=None)


def reverse_words(text: str) -> str:
    """Reverse the order of the words in ``text``, keeping each word intact.

    Runs of spaces are kept and end up in mirrored positions.
    """
    return " ".join(reversed(text.split(" ")))


def rotate_left(text: str, k: int) -> str:
    """Move the last ``k`` characters of ``text`` to its front.

    ``k`` is taken modulo the length; a ``k`` of 1 or less leaves the text
    unchanged.
    """
    if not text or k <= 1:
        return text
    k %= len(text)
    if k == 0:
        return text
    return text[-k:] + text[:-k]