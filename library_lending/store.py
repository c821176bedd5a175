"""
store.py

Pluggable persistence for the lending components.

The lending components call `save(entity)` whenever an entity is created or
changes state. Nothing is written anywhere by default: `NullStore` is an
explicit no-op and `MemoryStore` only remembers what it was handed.
"""

from __future__ import annotations

import logging
from typing import List, Protocol

logger = logging.getLogger(__name__)


class Store(Protocol):
    def save(self, entity: object) -> None:
        ...


class NullStore:
    """Store that discards everything."""

    def save(self, entity: object) -> None:
        logger.debug("NullStore: not persisting %r", entity)


class MemoryStore:
    """Store that keeps every saved entity, in save order."""

    def __init__(self) -> None:
        self.saved: List[object] = []

    def save(self, entity: object) -> None:
        self.saved.append(entity)

    def saved_of(self, kind: type) -> List[object]:
        """Return the saved entities of the given type."""
        return [e for e in self.saved if isinstance(e, kind)]

    def clear(self) -> None:
        self.saved.clear()
