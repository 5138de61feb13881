"""In-place textbook sorts that count their comparisons.

Each function reorders *items* in place by ``key(item)`` and returns the
number of key comparisons it made.  Counting rules:

* bubble sort: one per adjacent pair inspected;
* insertion sort: one per shift candidate, including the one that stops
  the shift;
* selection sort: one per step of the minimum scan.

Bubble and insertion sort only move an element past a strictly greater
key, so both are stable.  Selection sort is not.
"""

from __future__ import annotations

from typing import Any, Callable, List, TypeVar

T = TypeVar("T")
Key = Callable[[T], Any]


def bubble_sort(items: List[T], key: Key) -> int:
    """Bubble sort with early exit after a pass without swaps."""
    comparisons = 0
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            comparisons += 1
            if key(items[j]) > key(items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return comparisons


def insertion_sort(items: List[T], key: Key) -> int:
    """Insertion sort shifting greater keys one slot right."""
    comparisons = 0
    for i in range(1, len(items)):
        current = items[i]
        current_key = key(current)
        j = i - 1
        while j >= 0:
            comparisons += 1
            if key(items[j]) > current_key:
                items[j + 1] = items[j]
                j -= 1
            else:
                break
        items[j + 1] = current
    return comparisons


def selection_sort(items: List[T], key: Key) -> int:
    """Selection sort; swaps only when the minimum is not already in place."""
    comparisons = 0
    n = len(items)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            comparisons += 1
            if key(items[j]) < key(items[smallest]):
                smallest = j
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return comparisons
