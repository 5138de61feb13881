"""Data models for the component inventory."""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator

PRIORITY_RANGE = range(1, 11)


class SortOrder(enum.Enum):
    """Which ordering, if any, currently holds for a store."""

    UNORDERED = "unordered"
    BY_NAME = "name"
    BY_CATEGORY = "category"
    BY_PRIORITY = "priority"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Component:
    """A named, categorised, prioritised inventory entry.

    ``priority`` runs from 1 (most important) to 10.  Components are
    immutable so a store snapshot cannot reorder or corrupt the store.
    """

    name: str
    category: str
    priority: int

    def __post_init__(self) -> None:
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise ValueError(f"priority must be an integer, got {self.priority!r}")
        if self.priority not in PRIORITY_RANGE:
            raise ValueError(
                f"priority must be between {PRIORITY_RANGE.start} and "
                f"{PRIORITY_RANGE.stop - 1}, got {self.priority}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SortReport:
    """Metrics returned by every sorter.

    Unpacks as ``(comparisons, elapsed_seconds)``::

        comparisons, elapsed = sort_by_name(store)
    """

    algorithm: str
    order: SortOrder
    comparisons: int
    elapsed_seconds: float

    def __iter__(self) -> Iterator[Any]:
        yield self.comparisons
        yield self.elapsed_seconds

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["order"] = self.order.value
        return d


@dataclass
class SearchResult:
    """A binary-search hit: position in the store, the component, and cost."""

    index: int
    component: Component
    comparisons: int
