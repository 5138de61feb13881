"""Example: basic usage of tower-inventory."""

from tower_inventory import (
    Component,
    ComponentNotFoundError,
    ComponentStore,
    configure_logging,
    locate,
    sort_by_name,
)

configure_logging("WARNING")
store = ComponentStore()

# Register some tower components
store.add(Component("Motor", "propulsao", 5))
store.add(Component("Antena", "controle", 2))
store.add(Component("Chip central", "controle", 1))
store.add(Component("Cabo", "suporte", 8))

summary = store.summary()
print(f"Components  : {summary['size']}/{summary['capacity']}")
print(f"Order marker: {summary['last_order']}")

# Binary search needs name order first
comparisons, elapsed = sort_by_name(store)
print(f"Sorted by name with {comparisons} comparisons in {elapsed:.6f}s")

for query in ("chip CENTRAL", "Escudo"):
    try:
        hit = locate(store, query)
    except ComponentNotFoundError as exc:
        print(f"  {query!r}: not found after {exc.comparisons} comparisons")
    else:
        print(f"  {query!r}: index {hit.index}, priority {hit.component.priority}, "
              f"{hit.comparisons} comparisons")
