"""Unit tests for the counted in-place sorting algorithms."""

import random

import pytest

from tower_inventory.sorting.algorithms import bubble_sort, insertion_sort, selection_sort


def identity(x):
    return x


ALGORITHMS = [bubble_sort, insertion_sort, selection_sort]

# ---- Ordering -------------------------------------------------------------


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_sorts_ascending(algorithm):
    rng = random.Random(42)
    items = [rng.randint(1, 10) for _ in range(20)]
    expected = sorted(items)
    algorithm(items, identity)
    assert items == expected


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("items", [[], [7]])
def test_zero_comparisons_for_trivial_input(algorithm, items):
    assert algorithm(items, identity) == 0


@pytest.mark.parametrize("algorithm", [bubble_sort, insertion_sort])
def test_stable_algorithms_keep_equal_keys_in_order(algorithm):
    items = [("b", 1), ("a", 1), ("b", 2), ("a", 2), ("b", 3)]
    algorithm(items, key=lambda pair: pair[0])
    assert items == [("a", 1), ("a", 2), ("b", 1), ("b", 2), ("b", 3)]


def test_selection_sort_is_not_stable():
    # The first 2 is swapped behind its twin when 1 is brought to the front.
    items = [(2, "first"), (2, "second"), (1, "min")]
    selection_sort(items, key=lambda pair: pair[0])
    assert items == [(1, "min"), (2, "second"), (2, "first")]


# ---- Comparison counts ----------------------------------------------------


def test_bubble_sort_sorted_input_exits_after_one_pass():
    items = [1, 2, 3, 4, 5]
    assert bubble_sort(items, identity) == 4


def test_bubble_sort_reversed_input_runs_every_pass():
    items = [5, 4, 3, 2, 1]
    # 4 + 3 + 2 + 1
    assert bubble_sort(items, identity) == 10
    assert items == [1, 2, 3, 4, 5]


def test_bubble_sort_counts_final_clean_pass():
    # Pass 1 swaps (2 comparisons), pass 2 is clean (1 comparison).
    items = [2, 1, 3]
    assert bubble_sort(items, identity) == 3


def test_insertion_sort_sorted_input_one_check_per_element():
    assert insertion_sort([1, 2, 3, 4], identity) == 3


def test_insertion_sort_counts_stopping_comparison():
    # 3: vs 1 (stop) -> 1; 2: vs 3 (shift), vs 1 (stop) -> 2.
    items = [1, 3, 2]
    assert insertion_sort(items, identity) == 3
    assert items == [1, 2, 3]


def test_insertion_sort_reversed_input():
    # Each element shifts all the way left with no stopping comparison.
    assert insertion_sort([4, 3, 2, 1], identity) == 1 + 2 + 3


@pytest.mark.parametrize("items", [[5, 2, 9], [1, 2, 3], [3, 2, 1]])
def test_selection_sort_three_elements_always_three_comparisons(items):
    assert selection_sort(items, identity) == 3
    assert items == sorted(items)


def test_selection_sort_quadratic_count():
    items = list(range(10, 0, -1))
    assert selection_sort(items, identity) == 10 * 9 // 2
