"""ComponentStore: bounded, ordered collection of components."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .collation import same
from .config import InventoryConfig
from .errors import ComponentNotFoundError, StoreFullError
from .event_logger import get_event_logger
from .models import Component, SortOrder

_log = get_event_logger()


class ComponentStore:
    """Holds up to ``config.capacity`` components in insertion order.

    ``last_order`` records which sort, if any, describes the current
    sequence.  Any insertion or removal resets it to
    :attr:`SortOrder.UNORDERED`; only the sorters set anything else.  The
    store never checks that the sequence really is ordered.

    Parameters
    ----------
    config : InventoryConfig, optional
        Capacity and field bounds.  Defaults to :class:`InventoryConfig`.
    """

    def __init__(self, config: Optional[InventoryConfig] = None) -> None:
        self._config = config or InventoryConfig()
        self._components: List[Component] = []
        self._last_order = SortOrder.UNORDERED

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def config(self) -> InventoryConfig:
        return self._config

    @property
    def capacity(self) -> int:
        return self._config.capacity

    @property
    def size(self) -> int:
        return len(self._components)

    @property
    def last_order(self) -> SortOrder:
        """The ordering the sequence is known to satisfy."""
        return self._last_order

    @property
    def is_full(self) -> bool:
        return self.size >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._components

    def __len__(self) -> int:
        return len(self._components)

    def list(self) -> List[Component]:
        """Return a snapshot of the components in current order."""
        return list(self._components)

    def summary(self) -> Dict:
        """Return size, capacity and the current order marker."""
        return {
            "size": self.size,
            "capacity": self.capacity,
            "last_order": self.last_order.value,
        }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, component: Component) -> None:
        """Append *component*.

        Raises
        ------
        ValueError
            If the name or category is longer than the configured limit.
        StoreFullError
            If the store already holds ``capacity`` components.  The store
            is left unchanged.
        """
        self._check_lengths(component)
        if self.is_full:
            _log.log_event(
                "component_rejected",
                level=logging.WARNING,
                name=component.name,
                store=self,
            )
            raise StoreFullError(self.capacity)

        self._components.append(component)
        self._last_order = SortOrder.UNORDERED
        _log.log_event("component_added", store=self, **component.to_dict())

    def _check_lengths(self, component: Component) -> None:
        limits = (
            ("name", component.name, self._config.name_max_length),
            ("category", component.category, self._config.category_max_length),
        )
        for field_name, value, limit in limits:
            if len(value) > limit:
                raise ValueError(
                    f"{field_name} must be at most {limit} characters, got {len(value)}"
                )

    def remove_by_name(self, name: str) -> Component:
        """Remove and return the first component whose name matches *name*.

        Names are compared case-insensitively.  Later components move up
        one position.

        Raises
        ------
        ComponentNotFoundError
            If nothing matches.  The store and its order marker are left
            unchanged.
        """
        for index, component in enumerate(self._components):
            if same(component.name, name):
                del self._components[index]
                self._last_order = SortOrder.UNORDERED
                _log.log_event(
                    "component_removed", index=index, store=self, **component.to_dict()
                )
                return component

        _log.log_event("component_remove_missed", level=logging.WARNING, name=name)
        raise ComponentNotFoundError(name)

    # ------------------------------------------------------------------
    # Sorter access
    # ------------------------------------------------------------------

    def _sequence(self) -> List[Component]:
        """Return the live backing list for in-place reordering."""
        return self._components

    def _mark_sorted(self, order: SortOrder) -> None:
        """Record that the sequence now satisfies *order*."""
        self._last_order = order
