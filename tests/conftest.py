import datetime

import pytest

from library_lending import Borrower, Catalog, Item, Ledger, Library, MemoryStore, Membership, Staff

START = datetime.datetime(2024, 3, 1, 9, 0, tzinfo=datetime.timezone.utc)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now=START):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + datetime.timedelta(**kwargs)


class RecordingNotifier:
    def __init__(self):
        self.events = []

    def loan_issued(self, record):
        self.events.append(("issued", record))

    def loan_completed(self, record):
        self.events.append(("completed", record))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def items():
    return [
        Item("B001", "The Pragmatic Programmer", "Andrew Hunt", "Software"),
        Item("B002", "Digital Fortress", "Dan Brown", "Thriller"),
        Item("B003", "A Brief History of Time", "Stephen Hawking", "Science"),
        Item("B004", "Digital Minimalism", "Cal Newport", "Self-help"),
    ]


@pytest.fixture
def catalog(items):
    cat = Catalog()
    for item in items:
        cat.add(item)
    return cat


@pytest.fixture
def alice():
    return Borrower(1, "Alice Reader", "alice@example.com")


@pytest.fixture
def bob():
    return Borrower(2, "Bob Borrower", "bob@example.com")


@pytest.fixture
def librarian():
    return Staff(100, "Lena Shelf", "Librarian")


@pytest.fixture
def membership(alice, bob, librarian):
    members = Membership()
    members.register(alice)
    members.register(bob)
    members.add_staff(librarian)
    return members


@pytest.fixture
def ledger(clock, store, notifier):
    return Ledger(clock=clock, loan_days=14, store=store, notifier=notifier)


@pytest.fixture
def library(clock, store, notifier, items, alice, bob, librarian):
    lib = Library(store=store, clock=clock, loan_days=14, notifier=notifier)
    lib.membership.add_staff(librarian)
    for item in items:
        lib.add_item(item, librarian)
    lib.register_borrower(alice, librarian)
    lib.register_borrower(bob, librarian)
    return lib
