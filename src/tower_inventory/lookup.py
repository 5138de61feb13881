"""Binary search by name over a name-ordered store."""

from __future__ import annotations

import logging

from .collation import fold
from .errors import ComponentNotFoundError, PreconditionViolatedError
from .event_logger import get_event_logger
from .models import SearchResult, SortOrder
from .store import ComponentStore

_log = get_event_logger()


def locate(store: ComponentStore, query: str) -> SearchResult:
    """Find *query* in *store* by case-insensitive binary search on name.

    The store must be marked :attr:`SortOrder.BY_NAME`; the marker is
    trusted as-is.  Each midpoint probe counts as one comparison.  With
    duplicate names, whichever match the search lands on first is returned.

    Raises
    ------
    PreconditionViolatedError
        If ``store.last_order`` is not ``BY_NAME``.  No element is probed.
    ComponentNotFoundError
        If the interval empties without a match; ``comparisons`` on the
        error holds the number of probes made.
    """
    if store.last_order is not SortOrder.BY_NAME:
        _log.log_event(
            "locate_refused",
            level=logging.WARNING,
            query=query,
            last_order=store.last_order.value,
        )
        raise PreconditionViolatedError(SortOrder.BY_NAME, store.last_order)

    items = store.list()
    target = fold(query)
    comparisons = 0
    low, high = 0, len(items) - 1

    while low <= high:
        mid = (low + high) // 2
        probe = fold(items[mid].name)
        comparisons += 1
        if probe == target:
            _log.log_event(
                "component_located", query=query, index=mid, comparisons=comparisons
            )
            return SearchResult(index=mid, component=items[mid], comparisons=comparisons)
        if probe < target:
            low = mid + 1
        else:
            high = mid - 1

    _log.log_event(
        "component_locate_missed", level=logging.WARNING, query=query, comparisons=comparisons
    )
    raise ComponentNotFoundError(query, comparisons=comparisons)
