"""Store-level sorters: run an algorithm, time it, and mark the store.

Timing uses :func:`time.perf_counter` sampled directly around the
algorithm, so logging and bookkeeping are not included.
"""

from __future__ import annotations

import time
from typing import Callable, List

from ..collation import fold
from ..event_logger import get_event_logger
from ..models import Component, SortOrder, SortReport
from ..store import ComponentStore
from .algorithms import Key, bubble_sort, insertion_sort, selection_sort

_log = get_event_logger()


def _run(
    store: ComponentStore,
    algorithm: Callable[[List[Component], Key], int],
    label: str,
    key: Key,
    order: SortOrder,
) -> SortReport:
    items = store._sequence()

    start = time.perf_counter()
    comparisons = algorithm(items, key)
    elapsed = time.perf_counter() - start

    store._mark_sorted(order)
    report = SortReport(
        algorithm=label,
        order=order,
        comparisons=comparisons,
        elapsed_seconds=elapsed,
    )
    _log.log_event("store_sorted", store=store, **report.to_dict())
    return report


def sort_by_name(store: ComponentStore) -> SortReport:
    """Bubble-sort *store* by case-insensitive name.

    This is the only sorter that enables :func:`tower_inventory.lookup.locate`.
    """
    return _run(store, bubble_sort, "bubble", lambda c: fold(c.name), SortOrder.BY_NAME)


def sort_by_category(store: ComponentStore) -> SortReport:
    """Insertion-sort *store* by case-insensitive category (stable)."""
    return _run(
        store, insertion_sort, "insertion", lambda c: fold(c.category), SortOrder.BY_CATEGORY
    )


def sort_by_priority(store: ComponentStore) -> SortReport:
    """Selection-sort *store* by priority, 1 first (not stable)."""
    return _run(store, selection_sort, "selection", lambda c: c.priority, SortOrder.BY_PRIORITY)


SORTERS = {
    SortOrder.BY_NAME: sort_by_name,
    SortOrder.BY_CATEGORY: sort_by_category,
    SortOrder.BY_PRIORITY: sort_by_priority,
}
