"""
library.py

Staff-facing facade over the catalog, the membership and the ledger.
"""

from __future__ import annotations

import logging
from typing import Optional

from .catalog import Catalog
from .exceptions import InvalidArgumentError
from .ledger import Clock, Ledger
from .membership import Membership
from .models import Borrower, Item, LoanRecord, Person, Staff, utc_now
from .notifications import Notifier
from .store import NullStore, Store

logger = logging.getLogger(__name__)


class Library:
    """
    Library wires the three components together around one store.

    Every action is performed on behalf of a staff member, who is recorded in
    the log and, for loans, on the record itself.
    """

    def __init__(self,
                 store: Optional[Store] = None,
                 clock: Clock = utc_now,
                 loan_days: Optional[int] = None,
                 notifier: Optional[Notifier] = None):
        self.store = store or NullStore()
        self.catalog = Catalog(store=self.store)
        self.membership = Membership(store=self.store)
        self.ledger = Ledger(clock=clock, loan_days=loan_days, store=self.store, notifier=notifier)

    # ---------------- Staff actions ----------------
    def add_item(self, item: Item, staff: Staff) -> None:
        actor = _require_staff(staff)
        self.catalog.add(item)
        logger.info("%s added item %s", actor.display_name, item.identifier)

    def remove_item(self, item: Item, staff: Staff) -> bool:
        actor = _require_staff(staff)
        removed = self.catalog.remove(item)
        if removed:
            logger.info("%s removed item %s", actor.display_name, item.identifier)
        return removed

    def register_borrower(self, borrower: Borrower, staff: Staff) -> None:
        actor = _require_staff(staff)
        self.membership.register(borrower)
        logger.info("%s registered borrower %s", actor.display_name, borrower.identifier)

    def issue_loan(self, item: Item, borrower: Borrower, staff: Staff,
                   loan_days: Optional[int] = None) -> LoanRecord:
        _require_staff(staff)
        return self.ledger.issue(item, borrower, loan_days=loan_days, issued_by=staff)

    def complete_loan(self, record: LoanRecord, staff: Staff) -> None:
        _require_staff(staff)
        self.ledger.complete(record)

    # ---------------- Borrower actions ----------------
    def borrow(self, item: Item, borrower: Borrower, staff: Staff,
               loan_days: Optional[int] = None) -> LoanRecord:
        """A borrower takes `item` out at the desk of `staff`."""
        if borrower is None:
            raise InvalidArgumentError("borrower is required")
        return self.issue_loan(item, borrower, staff, loan_days=loan_days)

    def return_loan(self, record: LoanRecord, staff: Staff) -> None:
        """A borrower hands back the item of `record` at the desk of `staff`."""
        self.complete_loan(record, staff)

    # ---------------- Persisting ----------------
    def save_state(self) -> None:
        """Push every item, person and loan record through the store."""
        for item in self.catalog:
            self.store.save(item)
        for borrower in self.membership.borrowers:
            self.store.save(borrower)
        for staff in self.membership.staff:
            self.store.save(staff)
        for record in self.ledger.records:
            self.store.save(record)
        logger.info("Saved %d items, %d borrowers, %d staff, %d loans",
                    len(self.catalog), len(self.membership.borrowers),
                    len(self.membership.staff), len(self.ledger))


def _require_staff(staff: Optional[Person]) -> Person:
    """Return the acting person, or raise if nobody is named."""
    if staff is None:
        raise InvalidArgumentError("staff is required")
    return staff
