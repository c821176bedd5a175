"""
membership.py

Registered borrowers and staff.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .exceptions import DuplicateIdentifierError, InvalidArgumentError, NotFoundError
from .models import Borrower, Staff
from .store import NullStore, Store

logger = logging.getLogger(__name__)


class Membership:
    """
    Membership holds the people known to the library.

    Borrower identifiers are unique among borrowers and staff identifiers are
    unique among staff; the two ranges are independent.
    """

    def __init__(self, store: Optional[Store] = None):
        self._borrowers: Dict[int, Borrower] = {}
        self._staff: Dict[int, Staff] = {}
        self._store = store or NullStore()

    def __len__(self) -> int:
        return len(self._borrowers)

    def __contains__(self, borrower: object) -> bool:
        return any(existing is borrower for existing in self._borrowers.values())

    @property
    def borrowers(self) -> Tuple[Borrower, ...]:
        return tuple(self._borrowers.values())

    @property
    def staff(self) -> Tuple[Staff, ...]:
        return tuple(self._staff.values())

    def register(self, borrower: Borrower) -> None:
        """Register a new borrower; the identifier must not be taken."""
        if borrower is None:
            raise InvalidArgumentError("borrower is required")
        if borrower.identifier in self._borrowers:
            logger.warning("Attempt to register existing borrower: %s", borrower.identifier)
            raise DuplicateIdentifierError(f"Borrower already registered: {borrower.identifier}")
        self._borrowers[borrower.identifier] = borrower
        self._store.save(borrower)
        logger.info("Registered borrower %s", borrower.identifier)

    def add_staff(self, staff: Staff) -> None:
        """Add a staff member; the identifier must not be taken by other staff."""
        if staff is None:
            raise InvalidArgumentError("staff is required")
        if staff.identifier in self._staff:
            logger.warning("Attempt to add existing staff member: %s", staff.identifier)
            raise DuplicateIdentifierError(f"Staff member already registered: {staff.identifier}")
        self._staff[staff.identifier] = staff
        self._store.save(staff)
        logger.info("Added staff member %s", staff.identifier)

    def get(self, identifier: int) -> Borrower:
        """Return the borrower with `identifier`, or raise NotFoundError."""
        try:
            return self._borrowers[identifier]
        except KeyError:
            raise NotFoundError(f"Borrower not found: {identifier}") from None

    def get_staff(self, identifier: int) -> Staff:
        """Return the staff member with `identifier`, or raise NotFoundError."""
        try:
            return self._staff[identifier]
        except KeyError:
            raise NotFoundError(f"Staff member not found: {identifier}") from None

    def find(self, name: str) -> List[Borrower]:
        """Borrowers whose name contains `name` (case-insensitive); empty for a blank query."""
        q = (name or "").strip().casefold()
        if q == "":
            return []
        return [b for b in self._borrowers.values() if q in b.name.casefold()]
