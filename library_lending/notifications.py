"""Loan notifications. The default notifier only writes log lines."""

from __future__ import annotations

import logging
from typing import Protocol

from .models import LoanRecord

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def loan_issued(self, record: LoanRecord) -> None:
        ...

    def loan_completed(self, record: LoanRecord) -> None:
        ...


class LoggingNotifier:
    """Reports loan events to the log instead of contacting borrowers."""

    def loan_issued(self, record: LoanRecord) -> None:
        logger.info("[Notice] Loan %d: '%s' issued to %s (%s), due %s",
                    record.identifier, record.item.title, record.borrower.display_name,
                    record.borrower.contact, record.due_at.date().isoformat())

    def loan_completed(self, record: LoanRecord) -> None:
        logger.info("[Notice] Loan %d: '%s' returned by %s",
                    record.identifier, record.item.title, record.borrower.display_name)
