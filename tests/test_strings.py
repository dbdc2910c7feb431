from itertools import combinations as iter_combinations
from itertools import permutations as iter_permutations

import pytest

from offerkit.strings import (
    combinations,
    first_unique_char,
    permutations,
    replace_spaces,
    reverse_words,
    rotate_left,
)


@pytest.mark.parametrize("text", ["", "abc", " lead", "trail ", "a  b", "   "])
def test_replace_spaces_round_trip(text):
    result = replace_spaces(text)
    assert " " not in result
    assert result.replace("%20", " ") == text
    assert len(result) == len(text) + 2 * text.count(" ")


def test_replace_spaces_uses_percent_twenty():
    assert replace_spaces(" ") == "%20"


def test_permutations_cover_all_arrangements():
    result = permutations("abc")
    assert len(result) == 6
    assert result[0] == "abc"
    assert sorted(result) == sorted("".join(p) for p in iter_permutations("abc"))


def test_permutations_keep_duplicates():
    result = permutations("aab")
    assert len(result) == 6
    assert set(result) == {"".join(p) for p in iter_permutations("aab")}


def test_permutations_of_empty_text():
    assert permutations("") == [""]


def test_combinations_cover_all_selections():
    text = "abcd"
    result = combinations(text)
    expected = {
        "".join(chosen)
        for size in range(len(text) + 1)
        for chosen in iter_combinations(text, size)
    }
    assert len(result) == 2 ** len(text)
    assert set(result) == expected
    assert result[0] == text
    assert result[-1] == ""


def test_first_unique_char_picks_lowest_code():
    assert first_unique_char("abaccdeff") == "b"


@pytest.mark.parametrize("text", ["zyxzq", "hello world", "google"])
def test_first_unique_char_invariant(text):
    result = first_unique_char(text)
    assert text.count(result) == 1
    assert all(char >= result for char in text if text.count(char) == 1)


@pytest.mark.parametrize("text", ["", None, "aabb", "zz"])
def test_first_unique_char_none(text):
    assert first_unique_char(text) is None


def test_reverse_words_example():
    assert reverse_words("I am a student.") == "student. a am I"


@pytest.mark.parametrize("text", ["", "one", "  two  words ", "a b c d"])
def test_reverse_words_is_an_involution(text):
    result = reverse_words(text)
    assert reverse_words(result) == text
    assert result.split() == text.split()[::-1]
    assert len(result) == len(text)


def test_rotate_left_moves_tail_to_front():
    assert rotate_left("abcdef", 2) == "efabcd"


@pytest.mark.parametrize("k", [-3, 0, 1, 6, 12])
def test_rotate_left_unchanged(k):
    assert rotate_left("abcdef", k) == "abcdef"


@pytest.mark.parametrize("k", [2, 3, 4, 5])
def test_rotate_left_is_a_rotation(k):
    text = "abcdef"
    result = rotate_left(text, k)
    assert len(result) == len(text)
    assert result in text + text
    assert rotate_left(text, k + len(text)) == result


def test_rotate_left_empty():
    assert rotate_left("", 3) == ""