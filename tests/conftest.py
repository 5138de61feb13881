"""Shared fixtures."""

import pytest

from tower_inventory.config import InventoryConfig
from tower_inventory.models import Component
from tower_inventory.store import ComponentStore


@pytest.fixture()
def make_store():
    """Factory: build a store holding *components* in the given order."""

    def _make(components, capacity=20):
        store = ComponentStore(InventoryConfig(capacity=capacity))
        for c in components:
            store.add(c)
        return store

    return _make


@pytest.fixture()
def tower_store(make_store):
    """Motor / Antena / motor, in that insertion order."""
    return make_store([
        Component("Motor", "propulsao", 5),
        Component("Antena", "controle", 2),
        Component("motor", "suporte", 9),
    ])
