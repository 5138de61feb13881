"""tower-inventory: a bounded component inventory with counted sorts and binary search."""

from .config import InventoryConfig
from .errors import (
    ComponentNotFoundError,
    InventoryError,
    PreconditionViolatedError,
    StoreFullError,
)
from .event_logger import EventLogger, configure_logging, get_event_logger
from .lookup import locate
from .models import Component, SearchResult, SortOrder, SortReport
from .sorting import sort_by_category, sort_by_name, sort_by_priority
from .store import ComponentStore

__version__ = "0.1.0"
__all__ = [
    "Component",
    "ComponentNotFoundError",
    "ComponentStore",
    "EventLogger",
    "InventoryConfig",
    "InventoryError",
    "PreconditionViolatedError",
    "SearchResult",
    "SortOrder",
    "SortReport",
    "StoreFullError",
    "configure_logging",
    "get_event_logger",
    "locate",
    "sort_by_category",
    "sort_by_name",
    "sort_by_priority",
]
