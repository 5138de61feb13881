"""Interactive text menu over a :class:`ComponentStore`.

Start with::

    python -m tower_inventory --capacity 20

Bad numeric input is re-prompted here and never reaches the store.  End of
input (Ctrl-D, or a closed pipe) leaves the menu cleanly.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, TextIO

from .config import DEFAULT_CAPACITY, InventoryConfig
from .errors import ComponentNotFoundError, PreconditionViolatedError, StoreFullError
from .event_logger import configure_logging
from .lookup import locate
from .models import PRIORITY_RANGE, Component, SortOrder
from .sorting import SORTERS
from .store import ComponentStore

_MENU = """
--- MENU ---
1) Add component
2) Remove component by name
3) List components
4) Sort components (choose algorithm)
5) Find key component by name (binary search, requires name order)
0) Exit"""

_SORT_MENU = """
Choose the sorting algorithm:
1) Bubble sort by NAME  [enables binary search]
2) Insertion sort by CATEGORY
3) Selection sort by PRIORITY  (1 = highest priority)"""

_SORT_CHOICES = {
    1: (SORTERS[SortOrder.BY_NAME], "Bubble sort by NAME"),
    2: (SORTERS[SortOrder.BY_CATEGORY], "Insertion sort by CATEGORY"),
    3: (SORTERS[SortOrder.BY_PRIORITY], "Selection sort by PRIORITY"),
}


def format_components(components: List[Component], summary: Optional[Dict] = None) -> str:
    """Render *components* as the numbered listing shown after each change.

    With a store *summary*, the header also shows capacity and current order.
    """
    if summary is None:
        header = f"\n=== COMPONENTS ({len(components)}) ==="
    else:
        header = (
            f"\n=== COMPONENTS ({summary['size']}/{summary['capacity']}, "
            f"order: {summary['last_order']}) ==="
        )
    lines = [header]
    if not components:
        lines.append("No components registered.")
    for number, c in enumerate(components, start=1):
        lines.append(
            f"{number:2d}) Name: {c.name:<28} | Category: {c.category:<12} | "
            f"Priority: {c.priority}"
        )
    return "\n".join(lines)


class Console:
    """Menu loop driving a store.

    Parameters
    ----------
    store : ComponentStore
        The inventory being edited.
    input_fn : callable, optional
        ``f(prompt) -> str``; raises :class:`EOFError` at end of input.
        Defaults to :func:`input`.
    out : text stream
        Where menus and results are written.
    """

    def __init__(
        self,
        store: ComponentStore,
        input_fn: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._store = store
        self._input = input_fn if input_fn is not None else input
        self._out = out if out is not None else sys.stdout

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        return self._input("")

    def _ask_text(self, prompt: str, limit: int) -> str:
        return self._ask(prompt).rstrip("\n")[:limit]

    def _ask_int(self, prompt: str) -> Optional[int]:
        raw = self._ask(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def _ask_priority(self) -> int:
        low, high = PRIORITY_RANGE.start, PRIORITY_RANGE.stop - 1
        while True:
            value = self._ask_int(f"Priority ({low}..{high}) ({low} = highest priority): ")
            if value is None:
                self._say("Invalid input. Try again.")
            elif value not in PRIORITY_RANGE:
                self._say("Value out of range. Try again.")
            else:
                return value

    def _show(self) -> None:
        self._say(format_components(self._store.list(), self._store.summary()))

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def add_component(self) -> None:
        store = self._store
        if store.is_full:
            self._say(f"\nComponent pack is full (max {store.capacity})!")
            return
        self._say(f"\nNew component ({store.size + 1}/{store.capacity})")
        name = self._ask_text("Name: ", store.config.name_max_length)
        category = self._ask_text(
            "Category (controle, suporte, propulsao, etc): ",
            store.config.category_max_length,
        )
        priority = self._ask_priority()
        try:
            store.add(Component(name=name, category=category, priority=priority))
        except StoreFullError as exc:
            self._say(f"Could not add component: {exc}.")
            return
        self._say("Component added.")

    def remove_component(self) -> None:
        if self._store.is_empty:
            self._say("\nNo components to remove.")
            return
        name = self._ask_text(
            "\nName of the component to remove: ", self._store.config.name_max_length
        )
        try:
            self._store.remove_by_name(name)
        except ComponentNotFoundError:
            self._say(f"Component '{name}' not found.")
            return
        self._say(f"Component '{name}' removed.")

    def sort_components(self) -> None:
        if self._store.is_empty:
            self._say("\nThere are no components to sort.")
            return
        self._say(_SORT_MENU)
        choice = self._ask_int("Choice: ")
        if choice not in _SORT_CHOICES:
            self._say("Invalid option.")
            return
        sorter, label = _SORT_CHOICES[choice]
        comparisons, elapsed = sorter(self._store)
        self._say(f"\n{label} finished.")
        self._say(f"Comparisons: {comparisons}")
        self._say(f"Elapsed time: {elapsed:.6f} seconds")
        self._show()

    def find_component(self) -> None:
        store = self._store
        if store.is_empty:
            self._say("\nThere are no components to search.")
            return
        if store.last_order is not SortOrder.BY_NAME:
            self._say("\nBinary search requires the components to be sorted by NAME.")
            self._say("Sort by NAME (bubble sort) before searching.")
            return
        query = self._ask_text(
            "\nName of the key component to find: ", store.config.name_max_length
        )
        try:
            result = locate(store, query)
        except ComponentNotFoundError as exc:
            self._say(f"\nComponent '{query}' NOT found. Comparisons: {exc.comparisons}")
            return
        except PreconditionViolatedError as exc:
            self._say(f"\nSearch refused: {exc}.")
            return
        found = result.component
        self._say("\n--- KEY COMPONENT FOUND ---")
        self._say(f"Name: {found.name}\nCategory: {found.category}\nPriority: {found.priority}")
        self._say(f"Binary search comparisons: {result.comparisons}")
        self._say("=> Confirmed: component present. The tower can be activated!")

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Show the menu until the user picks 0 or input runs out."""
        self._say("=== Module: Rescue Tower Assembly ===")
        self._say("Organise components, pick algorithms and find the key component.")
        try:
            while True:
                self._say(_MENU)
                choice = self._ask_int("Choose an option: ")
                if choice == 0:
                    break
                if choice == 1:
                    self.add_component()
                    self._show()
                elif choice == 2:
                    self.remove_component()
                    self._show()
                elif choice == 3:
                    self._show()
                elif choice == 4:
                    self.sort_components()
                elif choice == 5:
                    self.find_component()
                else:
                    self._say("Invalid option. Try again.")
        except EOFError:
            self._say()
        self._say("Closing module. Good luck on the escape!")


# ------------------------------------------------------------------
# CLI entry-point
# ------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Rescue tower component inventory")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="threshold for JSON event lines on stderr",
    )
    args = parser.parse_args(argv)

    try:
        config = InventoryConfig(capacity=args.capacity)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(args.log_level)
    Console(ComponentStore(config)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
