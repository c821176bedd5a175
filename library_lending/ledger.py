"""
ledger.py

The lending ledger: loan records and the availability transitions they drive.
"""

from __future__ import annotations

import datetime
import itertools
import logging
from typing import Callable, Dict, List, Optional, Tuple

from . import config
from .exceptions import InvalidArgumentError, InvalidStateError, NotFoundError
from .models import Borrower, Item, LoanRecord, Staff, utc_now
from .notifications import LoggingNotifier, Notifier
from .store import NullStore, Store

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.datetime]


class Ledger:
    """
    Ledger owns every loan record ever issued.

    A record is created active by `issue()` and moves to completed through
    `complete()`; records are never removed. While a record is active its item
    is flagged unavailable, which is what stops a second loan of the same item.
    """

    def __init__(self,
                 clock: Clock = utc_now,
                 loan_days: Optional[int] = None,
                 store: Optional[Store] = None,
                 notifier: Optional[Notifier] = None):
        """
        Args:
            clock: returns the current time; used for issue and return timestamps.
            loan_days: default loan length in days (config.DEFAULT_LOAN_DAYS if None).
            store: persistence collaborator, no-op by default.
            notifier: receives loan events, logs them by default.
        """
        self.clock = clock
        self.loan_days = _validate_loan_days(config.DEFAULT_LOAN_DAYS if loan_days is None else loan_days)
        self._store = store or NullStore()
        self._notifier = notifier or LoggingNotifier()
        self._records: List[LoanRecord] = []
        self._next_id = itertools.count(1)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record: object) -> bool:
        return any(existing is record for existing in self._records)

    @property
    def records(self) -> Tuple[LoanRecord, ...]:
        return tuple(self._records)

    # ---------------- Core operations ----------------
    def issue(self, item: Item, borrower: Borrower, loan_days: Optional[int] = None,
              issued_by: Optional[Staff] = None) -> LoanRecord:
        """
        Lend `item` to `borrower`.

        Raises InvalidStateError if the item is already out. On success the item
        is marked unavailable and the new record is appended and returned.
        """
        if item is None:
            raise InvalidArgumentError("item is required")
        if borrower is None:
            raise InvalidArgumentError("borrower is required")
        if not item.available:
            logger.warning("Item %s is not available; loan to %s refused", item.identifier, borrower.identifier)
            raise InvalidStateError(f"Item '{item.title}' ({item.identifier}) is not available.")

        days = self.loan_days if loan_days is None else _validate_loan_days(loan_days)
        now = self.clock()
        record = LoanRecord(identifier=next(self._next_id), item=item, borrower=borrower,
                            issued_at=now, due_at=now + datetime.timedelta(days=days),
                            issued_by=issued_by)
        item.mark_loaned()
        self._records.append(record)
        try:
            self._store.save(record)
        except Exception:
            self._records.pop()
            item.mark_available()
            logger.warning("Loan %d: store refused the record; issue rolled back", record.identifier)
            raise
        logger.info("Loan %d: item %s issued to %s until %s",
                    record.identifier, item.identifier, borrower.identifier, record.due_at.date().isoformat())
        self._notify(self._notifier.loan_issued, record)
        return record

    def complete(self, record: LoanRecord) -> None:
        """
        Close an active loan and make its item available again.

        Raises NotFoundError for a record this ledger did not issue. Completing
        an already completed record does nothing.
        """
        if record is None:
            raise InvalidArgumentError("record is required")
        if record not in self:
            logger.warning("Attempt to complete unknown loan %s", record.identifier)
            raise NotFoundError(f"Loan not found: {record.identifier}")
        if not record.is_active:
            logger.debug("Loan %d already completed", record.identifier)
            return

        record.complete(self.clock())
        try:
            self._store.save(record)
        except Exception:
            record.returned_at = None
            record.item.mark_loaned()
            logger.warning("Loan %d: store refused the record; return rolled back", record.identifier)
            raise
        logger.info("Loan %d: item %s returned by %s",
                    record.identifier, record.item.identifier, record.borrower.identifier)
        self._notify(self._notifier.loan_completed, record)

    def _notify(self, send: Callable[[LoanRecord], None], record: LoanRecord) -> None:
        """
        Pass `record` to a notifier callback.

        Notices are best-effort: the loan has already been recorded, so a
        failing notifier is logged and the operation still succeeds.
        """
        try:
            send(record)
        except Exception:
            logger.warning("Loan %d: notification failed", record.identifier, exc_info=True)

    # ---------------- Queries ----------------
    def active(self) -> List[LoanRecord]:
        """Records whose item is still out, in issue order."""
        return [r for r in self._records if r.is_active]

    def active_loan_for(self, item: Item) -> Optional[LoanRecord]:
        """Return the active record for `item`, or None if it is on the shelf."""
        return next((r for r in self._records if r.is_active and r.item is item), None)

    def loans_for(self, borrower: Borrower, active_only: bool = False) -> List[LoanRecord]:
        """
        Loans taken out by `borrower`, oldest first.

        Args:
            borrower: the borrower to look up (matched by identity).
            active_only: skip loans that have already been returned.
        """
        return [r for r in self._records
                if r.borrower is borrower and (r.is_active or not active_only)]

    def overdue(self, now: Optional[datetime.datetime] = None) -> List[LoanRecord]:
        """Active loans whose due date is before `now` (the ledger clock if None)."""
        when = now or self.clock()
        return [r for r in self._records if r.is_overdue(when)]

    def borrowers_with_active_loans(self) -> Dict[Borrower, List[Item]]:
        """
        Map each borrower that currently holds items to those items.

        Borrowers appear in the order of their earliest active loan.
        """
        holding: Dict[Borrower, List[Item]] = {}
        for record in self._records:
            if record.is_active:
                holding.setdefault(record.borrower, []).append(record.item)
        return holding


def _validate_loan_days(days: int) -> int:
    # bool is an int subclass
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidArgumentError(f"loan_days must be an integer, got {days!r}")
    if days <= 0:
        raise InvalidArgumentError(f"loan_days must be positive, got {days}")
    return days
