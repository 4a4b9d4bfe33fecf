import random
import string

import pytest

from discretesets import letter_sets as ls

A = ["A", "B", "C", "D", "E"]
B = ["C", "D", "E", "F", "G"]
C = ["E", "G", "H", "A", "C"]


def test_random_letters_are_distinct_capitals():
    letters = ls.random_letters(10, random.Random(3))
    assert len(letters) == 10
    assert len(set(letters)) == 10
    assert all(letter in string.ascii_uppercase for letter in letters)


def test_random_letters_full_alphabet_is_permutation():
    letters = ls.create_set(26, random.Random(1))
    assert sorted(letters) == list(string.ascii_uppercase)


def test_random_letters_rejects_too_many():
    with pytest.raises(ValueError):
        ls.random_letters(27)


def test_random_letters_rejects_negative():
    with pytest.raises(ValueError):
        ls.random_letters(-1)


def test_seeded_sets_repeat():
    first = ls.create_set(8, random.Random(42))
    second = ls.create_set(8, random.Random(42))
    assert len(first) == 8
    assert len(set(first)) == 8
    assert all(letter in string.ascii_uppercase for letter in first)
    assert first == second


def test_format_set():
    assert ls.format_set(["A", "B"]) == "A B "


def test_intersection_two_sets_follows_order_of_second():
    assert ls.intersection_two_sets(["A", "B", "C"], ["C", "B", "D"]) == ["C", "B"]


def test_intersection_two_sets_empty_raises():
    with pytest.raises(ls.EmptyIntersectionError):
        ls.intersection_two_sets(["A", "B"], ["C", "D"])


def test_union_two_sets_keeps_first_and_adds_rest():
    result = ls.union_two_sets(A, B)
    assert result[: len(A)] == A
    assert set(result) == set(A) | set(B)
    assert len(result) == len(set(result))


def test_union_of_disjoint_sets_raises():
    with pytest.raises(ls.EmptyIntersectionError):
        ls.union_two_sets(["A"], ["B"])


def test_difference_two_sets():
    result = ls.difference_two_sets(A, B)
    assert set(result) == set(A) - set(B)
    assert [x for x in A if x in result] == result


def test_difference_of_disjoint_sets_raises():
    with pytest.raises(ls.EmptyIntersectionError):
        ls.difference_two_sets(["A"], ["B"])


def test_three_set_union():
    result = ls.union(A, B, C)
    assert set(result) == set(A) | set(B) | set(C)
    assert len(result) == len(set(result))


def test_three_set_intersection():
    assert set(ls.intersection(A, B, C)) == set(A) & set(B) & set(C)


def test_three_set_intersection_empty_raises():
    with pytest.raises(ls.EmptyIntersectionError):
        ls.intersection(["A", "B"], ["B", "C"], ["C", "A"])


def test_three_set_difference():
    result = ls.difference(A, ["A", "Z"], ["B", "Y"])
    assert set(result) == set(A) - {"A", "B"}


def test_symmetric_difference_is_union_without_common():
    result = ls.symmetric_difference(A, B, C)
    assert set(result) == (set(A) | set(B) | set(C)) - (set(A) & set(B) & set(C))


def test_main_prints_all_headings(capsys):
    assert ls.main(["--seed", "7"]) == 0
    out = capsys.readouterr().out
    for heading in (
        "Set A: ",
        "Set ABI: ",
        "Union between A, B and C is:",
        "Symmetric difference between A, B and C is:",
    ):
        assert heading in out