"""
models.py

Entities of the lending system: items, borrowers, staff and loan records.

Entities compare by identity, so two items with the same title are still two
copies on the shelf. Loan records hold plain references to the item and the
borrower; they never own them.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional, Protocol

from .exceptions import InvalidArgumentError

STATUS_ACTIVE = "ACTIVE"
STATUS_COMPLETED = "COMPLETED"


def utc_now() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def _require_text(value: Optional[str], name: str) -> str:
    if value is None:
        raise InvalidArgumentError(f"{name} is required")
    text = str(value).strip()
    if text == "":
        raise InvalidArgumentError(f"{name} must not be blank")
    return text


def _require(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} is required")


class Person(Protocol):
    """Anything registered in the membership: borrowers and staff."""

    identifier: int
    name: str

    @property
    def display_name(self) -> str:
        ...


@dataclass(eq=False)
class Item:
    """A loanable item in the catalog."""

    identifier: str
    title: str
    creator: str
    genre: str = ""
    available: bool = True

    def __post_init__(self) -> None:
        self.identifier = _require_text(self.identifier, "identifier")
        self.title = _require_text(self.title, "title")
        self.creator = _require_text(self.creator, "creator")
        self.genre = (self.genre or "").strip()
        if not isinstance(self.available, bool):
            raise InvalidArgumentError(f"available must be a bool, got {self.available!r}")

    def mark_loaned(self) -> None:
        self.available = False

    def mark_available(self) -> None:
        self.available = True

    def __str__(self) -> str:
        return f"{self.title} ({self.creator}), ID: {self.identifier}"


@dataclass(eq=False)
class Borrower:
    """A registered reader who can take items on loan."""

    identifier: int
    name: str
    contact: str

    def __post_init__(self) -> None:
        _require(self.identifier, "identifier")
        self.name = _require_text(self.name, "name")
        self.contact = _require_text(self.contact, "contact")

    @property
    def display_name(self) -> str:
        return f"{self.name} (#{self.identifier})"

    def __str__(self) -> str:
        return self.display_name


@dataclass(eq=False)
class Staff:
    """A staff member who performs catalog and lending actions."""

    identifier: int
    name: str
    position: str

    def __post_init__(self) -> None:
        _require(self.identifier, "identifier")
        self.name = _require_text(self.name, "name")
        self.position = _require_text(self.position, "position")

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.position})"

    def __str__(self) -> str:
        return self.display_name


@dataclass(eq=False)
class LoanRecord:
    """
    A single lending of an item to a borrower.

    Attributes:
        identifier: ledger-assigned, increasing loan number.
        item: the lent item.
        borrower: who has the item.
        issued_at: when the loan was issued.
        due_at: when the item should be back.
        issued_by: staff member who issued the loan, if known.
        returned_at: set once the loan is completed; None while active.
    """

    identifier: int
    item: Item
    borrower: Borrower
    issued_at: datetime.datetime
    due_at: datetime.datetime
    issued_by: Optional[Staff] = None
    returned_at: Optional[datetime.datetime] = None

    def __post_init__(self) -> None:
        _require(self.item, "item")
        _require(self.borrower, "borrower")
        _require(self.issued_at, "issued_at")
        _require(self.due_at, "due_at")

    @property
    def is_active(self) -> bool:
        return self.returned_at is None

    @property
    def status(self) -> str:
        """ACTIVE or COMPLETED."""
        return STATUS_ACTIVE if self.is_active else STATUS_COMPLETED

    def is_overdue(self, now: Optional[datetime.datetime] = None) -> bool:
        """Return True if the loan is still active and its due date has passed."""
        if not self.is_active:
            return False
        return self.due_at < (now or utc_now())

    def complete(self, returned_at: datetime.datetime) -> None:
        """
        Close the loan and put the item back on the shelf.

        A completed loan stays as it is: the return time is kept and the item,
        which may be out on a newer loan by now, is left alone.
        """
        if not self.is_active:
            return
        self.returned_at = returned_at
        self.item.mark_available()
