"""Error kinds raised by the inventory core.

The console catches these and renders them; nothing in the core aborts the
process or retries on its own.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for every error raised by :mod:`tower_inventory`."""


class StoreFullError(InventoryError):
    """Raised when adding to a store that already holds *capacity* items."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"store is full (capacity {capacity})")
        self.capacity = capacity


class ComponentNotFoundError(InventoryError):
    """Raised when no component matches *name*.

    Parameters
    ----------
    name : str
        The name that was looked up (as given by the caller).
    comparisons : int
        Comparisons spent before giving up.  Only the binary search fills
        this in; removal scans report ``0``.
    """

    def __init__(self, name: str, comparisons: int = 0) -> None:
        super().__init__(f"component {name!r} not found")
        self.name = name
        self.comparisons = comparisons


class PreconditionViolatedError(InventoryError):
    """Raised when an operation needs an ordering the store does not claim."""

    def __init__(self, required: object, actual: object) -> None:
        super().__init__(f"requires order {required}, store is {actual}")
        self.required = required
        self.actual = actual
