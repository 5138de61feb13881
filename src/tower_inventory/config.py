"""Configuration for the component inventory."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CAPACITY = 20


@dataclass
class InventoryConfig:
    """Bounds applied to the store and to console input.

    Parameters
    ----------
    capacity : int
        Maximum number of components the store holds.  Must be at least 1.
    name_max_length : int
        Names longer than this are truncated by the console.
    category_max_length : int
        Categories longer than this are truncated by the console.
    """

    capacity: int = DEFAULT_CAPACITY
    name_max_length: int = 29
    category_max_length: int = 19

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.name_max_length < 1 or self.category_max_length < 1:
            raise ValueError("field length limits must be >= 1")
