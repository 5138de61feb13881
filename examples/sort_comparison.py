"""Run all three sorters over the same components and compare their metrics.

Usage:
    pip install -e ".[dev]"
    python examples/sort_comparison.py
"""

import random

from tower_inventory import (
    Component,
    ComponentStore,
    InventoryConfig,
    configure_logging,
    sort_by_category,
    sort_by_name,
    sort_by_priority,
)

CATEGORIES = ["controle", "suporte", "propulsao", "energia"]
NAMES = [
    "Motor", "Antena", "Cabo", "Bateria", "Escudo", "Helice", "Radar",
    "Leme", "Gerador", "Chip central", "Painel", "Sensor", "Valvula",
    "Turbina", "Bobina", "Capacitor", "Filtro", "Rotor", "Trava", "Mola",
]

configure_logging("WARNING")
rng = random.Random(7)
components = [Component(n, rng.choice(CATEGORIES), rng.randint(1, 10)) for n in NAMES]

print("=" * 60)
print(f"  {len(components)} components, three algorithms")
print("=" * 60)

for sorter in (sort_by_name, sort_by_category, sort_by_priority):
    store = ComponentStore(InventoryConfig(capacity=len(components)))
    for c in components:
        store.add(c)
    report = sorter(store)
    print(f"{report.algorithm:<10} by {report.order.value:<9} "
          f"comparisons={report.comparisons:<4} elapsed={report.elapsed_seconds:.6f}s")
