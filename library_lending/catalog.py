"""
catalog.py

The set of loanable items and their availability.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from .exceptions import InvalidArgumentError, NotFoundError
from .models import Item
from .store import NullStore, Store

logger = logging.getLogger(__name__)


def _matches(value: str, needle: Optional[str]) -> bool:
    """Case-insensitive substring match; a None or blank needle matches everything."""
    if needle is None or needle.strip() == "":
        return True
    return needle.casefold() in value.casefold()


class Catalog:
    """
    Catalog keeps the items the library can lend.

    Items are held in insertion order. Adding does not check for duplicates and
    removal is by identity, so the catalog may carry several copies of a title.
    """

    def __init__(self, store: Optional[Store] = None):
        self._items: List[Item] = []
        self._store = store or NullStore()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    # ---------------- Mutations ----------------
    def add(self, item: Item) -> None:
        """Append `item`; the same item may be added more than once."""
        if item is None:
            raise InvalidArgumentError("item is required")
        self._items.append(item)
        self._store.save(item)
        logger.info("Added item %s", item.identifier)

    def remove(self, item: Item) -> bool:
        """
        Remove `item` from the catalog.

        Returns True if the item was present, False otherwise.
        """
        if item is None:
            raise InvalidArgumentError("item is required")
        for index, existing in enumerate(self._items):
            if existing is item:
                del self._items[index]
                if not item.available:
                    logger.warning("Removed item %s while it is on loan", item.identifier)
                logger.info("Removed item %s", item.identifier)
                return True
        logger.debug("Attempt to remove unknown item: %s", item.identifier)
        return False

    # ---------------- Queries ----------------
    def get(self, identifier: str) -> Item:
        """
        Return the first item with `identifier`.

        Raises NotFoundError when no item carries that identifier.
        """
        for item in self._items:
            if item.identifier == identifier:
                return item
        raise NotFoundError(f"Item not found: {identifier}")

    def find(self, title: Optional[str] = None, creator: Optional[str] = None) -> List[Item]:
        """
        Search by title and/or creator using a case-insensitive substring match.

        Filters that are None or blank are ignored; with no filters every item is returned.
        A non-blank filter is matched as given, surrounding spaces included.
        """
        return [item for item in self._items
                if _matches(item.title, title) and _matches(item.creator, creator)]

    def available(self) -> List[Item]:
        """Items currently on the shelf, in catalog order."""
        return [item for item in self._items if item.available]

    def by_genre(self, genre: str, available_only: bool = True) -> List[Item]:
        """Items whose genre equals `genre` (case-insensitive)."""
        g = (genre or "").strip().casefold()
        if g == "":
            return []
        return [item for item in self._items
                if item.genre.casefold() == g and (item.available or not available_only)]
