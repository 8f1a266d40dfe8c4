import random

import pytest

from algoshelf.sorting import (
    bubble_sort,
    counting_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    wave_sort,
)

SAMPLES = [
    [],
    [1],
    [12, 11, 13, 5, 6, 7],
    [8, 7, 2, 1, 0, 9, 6],
    [3, 3, 1, 1, 2, 2],
    [-5, 10, -20, 0, 7],
    list(range(10, 0, -1)),
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_sorts_agree_with_sorted(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quick_sort(sample) == expected


def test_sorts_do_not_mutate_input():
    data = [5, 3, 4, 1]
    assert bubble_sort(data) == [1, 3, 4, 5]
    assert insertion_sort(data) == [1, 3, 4, 5]
    assert selection_sort(data) == [1, 3, 4, 5]
    assert merge_sort(data) == [1, 3, 4, 5]
    assert quick_sort(data) == [1, 3, 4, 5]
    assert data == [5, 3, 4, 1]


def test_sorts_random_data():
    rng = random.Random(1234)
    data = [rng.randint(-100, 100) for _ in range(200)]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


def test_sorts_accept_iterables():
    assert bubble_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert insertion_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert selection_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert quick_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_merge_sort_is_stable():
    pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort([Key(p) for p in pairs])]
    assert result == [(0, "b"), (0, "d"), (1, "a"), (1, "c")]


def test_wave_sort_source_example():
    assert wave_sort([10, 90, 49, 2, 1, 5, 23]) == [2, 1, 10, 5, 49, 23, 90]


@pytest.mark.parametrize("sample", SAMPLES)
def test_wave_sort_shape(sample):
    result = wave_sort(sample)
    assert sorted(result) == sorted(sample)
    for i in range(0, len(result) - 1, 2):
        assert result[i] >= result[i + 1]
    for i in range(1, len(result) - 1, 2):
        assert result[i] <= result[i + 1]


@pytest.mark.parametrize("text", ["HelloGenius", "", "zyxwv", "a b c!"])
def test_counting_sort_matches_sorted(text):
    assert counting_sort(text) == "".join(sorted(text))


def test_counting_sort_rejects_wide_characters():
    with pytest.raises(ValueError):
        counting_sort("abc\u20ac")