"""
library_lending

In-memory lending library: a catalog of items, a membership of borrowers and
staff, and a ledger of loans that keeps item availability in step.
"""

from .catalog import Catalog
from .config import DEFAULT_LOAN_DAYS, configure_logging
from .exceptions import (
    DuplicateIdentifierError,
    InvalidArgumentError,
    InvalidStateError,
    LendingError,
    NotFoundError,
)
from .ledger import Ledger
from .library import Library
from .membership import Membership
from .models import Borrower, Item, LoanRecord, Person, Staff, utc_now
from .notifications import LoggingNotifier, Notifier
from .store import MemoryStore, NullStore, Store

__all__ = [
    "Catalog",
    "Membership",
    "Ledger",
    "Library",
    "Item",
    "Borrower",
    "Staff",
    "Person",
    "LoanRecord",
    "utc_now",
    "Store",
    "NullStore",
    "MemoryStore",
    "Notifier",
    "LoggingNotifier",
    "LendingError",
    "InvalidArgumentError",
    "InvalidStateError",
    "DuplicateIdentifierError",
    "NotFoundError",
    "DEFAULT_LOAN_DAYS",
    "configure_logging",
]
