import pytest

from algoshelf.arrays import (
    binary_search,
    kth_largest_and_smallest,
    linear_search,
    max_subarray_sum,
    subset_sums,
)

SORTED = [2, 5, 6, 8, 9, 12, 15, 18, 23]
UNSORTED = [5, 4, 8, 9, 6, 5, 21, 2]


def test_max_subarray_source_example():
    assert max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3]) == 7


def test_max_subarray_all_negative_picks_largest():
    assert max_subarray_sum([-8, -3, -6]) == -3


def test_max_subarray_all_positive_is_total():
    data = [1, 2, 3, 4]
    assert max_subarray_sum(data) == sum(data)


def test_max_subarray_at_least_any_element():
    data = [3, -10, 4, -1, 2, -20, 6]
    assert max_subarray_sum(data) >= max(data)


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_kth_source_example():
    largest, smallest = kth_largest_and_smallest([1, 2, 6, 4, 5, 3], 3)
    assert (largest, smallest) == (4, 3)


def test_kth_extremes():
    data = [7, 1, 9, 4]
    assert kth_largest_and_smallest(data, 1) == (max(data), min(data))
    assert data == [7, 1, 9, 4]


@pytest.mark.parametrize("k", [0, 5, -1])
def test_kth_out_of_range(k):
    with pytest.raises(ValueError):
        kth_largest_and_smallest([1, 2, 3, 4], k)


def test_subset_sums_count_and_order():
    result = subset_sums([3, 1, 2])
    assert len(result) == 8
    assert result == sorted(result)
    assert result[0] == 0
    assert result[-1] == 6


def test_subset_sums_empty():
    assert subset_sums([]) == [0]


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_every_element(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("key", [1, 7, 24, 10])
def test_binary_search_missing(key):
    assert binary_search(SORTED, key) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_linear_search_first_occurrence():
    assert linear_search(UNSORTED, 5) == 0
    assert linear_search(UNSORTED, 21) == UNSORTED.index(21)


def test_linear_search_missing():
    assert linear_search(UNSORTED, 100) is None