import random

import pytest

from algokit.sorting import (
    binary_insertion_sort,
    bogo_sort,
    bubble_sort,
    counting_sort,
    exchange_sort,
    heap_sort,
    insertion_sort,
    is_sorted,
    merge_sort,
    quick_sort,
    selection_sort,
    shaker_sort,
    shell_sort,
)


def _random_lists():
    rng = random.Random(1234)
    lists = [[], [7], [2, 1], [1, 2], [5, 5, 5], list(range(20)), list(range(20, 0, -1))]
    for size in (3, 8, 17, 50):
        lists.append([rng.randint(-100, 100) for _ in range(size)])
    return lists


@pytest.mark.parametrize("data", _random_lists())
def test_sorts_match_builtin(data):
    expected = sorted(data)
    results = {
        "bubble": bubble_sort(data),
        "heap": heap_sort(data),
        "insertion": insertion_sort(data),
        "quick": quick_sort(data),
        "selection": selection_sort(data),
        "binary_insertion": binary_insertion_sort(data),
        "merge": merge_sort(data),
        "shaker": shaker_sort(data),
        "shell": shell_sort(data),
        "exchange": exchange_sort(data),
    }
    for name, result in results.items():
        assert result == expected, name


@pytest.mark.parametrize(
    "data, expected",
    [
        ([10, 11, 9, 8, 4, 7, 3, 8], [3, 4, 7, 8, 8, 9, 10, 11]),
        ([12, 11, 13, 5, 6, 7], [5, 6, 7, 11, 12, 13]),
        ([9, 8, 7, 6, 5, 4, 3, 2, 1], [1, 2, 3, 4, 5, 6, 7, 8, 9]),
    ],
)
def test_source_examples(data, expected):
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert binary_insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert shaker_sort(data) == expected
    assert shell_sort(data) == expected
    assert exchange_sort(data) == expected


def test_input_is_not_modified():
    data = [3, 1, 2]
    results = {
        "bubble": bubble_sort(data),
        "heap": heap_sort(data),
        "insertion": insertion_sort(data),
        "quick": quick_sort(data),
        "selection": selection_sort(data),
        "binary_insertion": binary_insertion_sort(data),
        "merge": merge_sort(data),
        "shaker": shaker_sort(data),
        "shell": shell_sort(data),
        "exchange": exchange_sort(data),
        "counting": counting_sort(data),
    }
    assert data == [3, 1, 2]
    for name, result in results.items():
        assert result == [1, 2, 3], name


def test_accepts_iterables():
    assert bubble_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert heap_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert insertion_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert quick_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert selection_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert binary_insertion_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert shaker_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert shell_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert exchange_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_sorts_strings():
    data = ["pear", "apple", "fig"]
    expected = ["apple", "fig", "pear"]
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert binary_insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert shaker_sort(data) == expected
    assert shell_sort(data) == expected
    assert exchange_sort(data) == expected


def test_quick_sort_large_sorted_input():
    data = list(range(3000))
    assert quick_sort(data) == data


def test_counting_sort_matches_builtin():
    rng = random.Random(99)
    data = [rng.randint(0, 30) for _ in range(100)]
    assert counting_sort(data) == sorted(data)


def test_counting_sort_empty():
    assert counting_sort([]) == []


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_bogo_sort_small_list():
    data = [4, 1, 3, 2, 0]
    assert bogo_sort(data, random.Random(7)) == [0, 1, 2, 3, 4]


def test_bogo_sort_default_rng():
    assert bogo_sort([2, 1, 3]) == [1, 2, 3]


def test_bogo_sort_already_sorted_untouched():
    assert bogo_sort([1, 2, 2, 3], random.Random(0)) == [1, 2, 2, 3]


@pytest.mark.parametrize(
    "data, expected",
    [
        ([], True),
        ([1], True),
        ([1, 1, 2], True),
        ([2, 1], False),
        ([1, 3, 2, 4], False),
    ],
)
def test_is_sorted(data, expected):
    assert is_sorted(data) is expected


def test_result_is_permutation_and_sorted():
    rng = random.Random(5)
    data = [rng.randint(0, 9) for _ in range(40)]
    results = {
        "bubble": bubble_sort(data),
        "heap": heap_sort(data),
        "insertion": insertion_sort(data),
        "quick": quick_sort(data),
        "selection": selection_sort(data),
        "binary_insertion": binary_insertion_sort(data),
        "merge": merge_sort(data),
        "shaker": shaker_sort(data),
        "shell": shell_sort(data),
        "exchange": exchange_sort(data),
    }
    for name, result in results.items():
        assert is_sorted(result), name
        assert sorted(result) == sorted(data), name