"""Structured event log for inventory operations.

Every store mutation, sort and lookup is reported as one JSON line on
stderr so that a session can be replayed after the fact::

    add → sort → locate

Usage::

    from tower_inventory.event_logger import get_event_logger

    log = get_event_logger()
    log.log_event("store_sorted", algorithm="bubble", comparisons=3)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

LOGGER_NAME = "tower_inventory.events"


def _store_fields(summary: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Flatten a ``ComponentStore.summary()`` into event fields."""
    if not summary:
        return {}
    return {
        "store_size": summary["size"],
        "store_capacity": summary["capacity"],
        "last_order": summary["last_order"],
    }


class _JsonFormatter(logging.Formatter):
    """One JSON object per event: when, what, then the store it touched."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        payload.update(getattr(record, "_fields", None) or {})
        payload.update(_store_fields(getattr(record, "_store", None)))
        return json.dumps(payload, default=str)


def get_event_logger(name: str = LOGGER_NAME) -> "EventLogger":
    """Return an :class:`EventLogger` bound to the logger called *name*."""
    return EventLogger(name)


def configure_logging(level: Union[int, str], name: str = LOGGER_NAME) -> None:
    """Set the threshold of the event logger *name*.

    *level* may be a number or a level name such as ``"WARNING"``.
    """
    if isinstance(level, str):
        number = logging.getLevelName(level.upper())
        if not isinstance(number, int):
            raise ValueError(f"unknown log level: {level}")
        level = number
    get_event_logger(name).logger.setLevel(level)


class EventLogger:
    """Wraps a :class:`logging.Logger` that emits JSON event lines.

    Parameters
    ----------
    name : str
        Logger name passed to :func:`logging.getLogger`.
    """

    def __init__(self, name: str = LOGGER_NAME) -> None:
        self._logger = logging.getLogger(name)
        # One stderr handler per logger name, however many wrappers exist.
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(_JsonFormatter())
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
            self._logger.propagate = False

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log_event(
        self,
        event: str,
        *,
        level: int = logging.INFO,
        store: Any = None,
        **fields: Any,
    ) -> Dict[str, Any]:
        """Emit *event* with *fields* and return the structured payload.

        When *store* is given, its size, capacity and order marker (after
        the operation) are attached as ``store_size``, ``store_capacity``
        and ``last_order``.  The payload is returned even when *level* is
        below the logger's threshold and nothing is written.
        """
        summary = store.summary() if store is not None else None
        structured: Dict[str, Any] = {"event": event, **fields}
        if self._logger.isEnabledFor(level):
            self._logger.log(level, event, extra={"_fields": fields, "_store": summary})
        structured.update(_store_fields(summary))
        return structured
