"""Sorting: three counted, timed in-place sorts over a store."""

from .algorithms import bubble_sort, insertion_sort, selection_sort
from .sorters import SORTERS, sort_by_category, sort_by_name, sort_by_priority

__all__ = [
    "SORTERS",
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "sort_by_category",
    "sort_by_name",
    "sort_by_priority",
]
