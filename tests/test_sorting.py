import random

import pytest

from algolab.sorting import merge_sort, quick_sort, random_array, selection_sort

SORTS = [selection_sort, quick_sort, merge_sort]


@pytest.mark.parametrize(
    "values",
    [[], [1], [2, 1], [3, 3, 3], [5, 4, 3, 2, 1], [1, 2, 3, 4, 5], [0, -2, 7, -2, 9, 1]],
)
def test_sorts_small_inputs(values):
    expected = sorted(values)
    assert selection_sort(values) == expected
    assert quick_sort(values) == expected
    assert merge_sort(values) == expected


@pytest.mark.parametrize("sort", SORTS)
def test_sorts_random_inputs(sort):
    rng = random.Random(42)
    for n in (10, 101, 500):
        data = random_array(n, 1, 50, rng)
        assert sort(data) == sorted(data)


def test_sort_leaves_input_untouched():
    data = [3, 1, 2]
    assert selection_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]
    assert quick_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]
    assert merge_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_quick_sort_handles_long_sorted_input():
    data = list(range(5000))
    assert quick_sort(data) == data


def test_random_array_bounds_and_length():
    data = random_array(1000, 1, 10, random.Random(1))
    assert len(data) == 1000
    assert all(1 <= v <= 10 for v in data)


def test_random_array_repeatable_with_seed():
    first = random_array(20, 1, 100, random.Random(7))
    second = random_array(20, 1, 100, random.Random(7))
    assert len(first) == 20
    assert all(1 <= v <= 100 for v in first)
    assert first == second


def test_random_array_single_value_range():
    assert random_array(4, 5, 5) == [5, 5, 5, 5]


@pytest.mark.parametrize("n, low, high", [(-1, 1, 2), (3, 5, 1)])
def test_random_array_rejects_bad_arguments(n, low, high):
    with pytest.raises(ValueError):
        random_array(n, low, high)