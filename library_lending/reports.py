"""
reports.py

pandas views of the lending state for reporting.

Each function builds a fresh DataFrame from the live objects; nothing here
mutates the catalog, membership or ledger.
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from .catalog import Catalog
from .config import AVAILABILITY_LABELS
from .ledger import Ledger
from .membership import Membership

logger = logging.getLogger(__name__)

INVENTORY_COLUMNS = ["Item ID", "Title", "Creator", "Genre", "Availability"]
MEMBERSHIP_COLUMNS = ["Borrower ID", "Name", "Contact", "ActiveCount", "ActiveItems"]
LOAN_HISTORY_COLUMNS = ["Loan ID", "Item ID", "Borrower ID", "Issued At", "Due At", "Returned At", "Status"]


def inventory_frame(catalog: Catalog) -> pd.DataFrame:
    """
    Produce a DataFrame suitable for reporting the catalog inventory.

    Availability is shown as "Available" / "Issued".
    """
    rows = [{"Item ID": item.identifier, "Title": item.title, "Creator": item.creator,
             "Genre": item.genre, "Availability": AVAILABILITY_LABELS[item.available]}
            for item in catalog]
    return pd.DataFrame(rows, columns=INVENTORY_COLUMNS)


def membership_frame(membership: Membership, ledger: Ledger) -> pd.DataFrame:
    """
    Build a DataFrame summarizing borrowers and the items they currently hold.

    Returns columns: Borrower ID, Name, Contact, ActiveCount, ActiveItems (comma separated).
    """
    holding = ledger.borrowers_with_active_loans()
    rows = []
    for borrower in membership.borrowers:
        items = holding.get(borrower, [])
        rows.append({
            "Borrower ID": borrower.identifier,
            "Name": borrower.name,
            "Contact": borrower.contact,
            "ActiveCount": len(items),
            "ActiveItems": ",".join(item.identifier for item in items),
        })
    return pd.DataFrame(rows, columns=MEMBERSHIP_COLUMNS)


def loan_history_frame(ledger: Ledger) -> pd.DataFrame:
    """One row per loan record, in issue order. Open loans have a NaT return time."""
    rows = [{"Loan ID": r.identifier, "Item ID": r.item.identifier, "Borrower ID": r.borrower.identifier,
             "Issued At": r.issued_at, "Due At": r.due_at, "Returned At": r.returned_at,
             "Status": r.status}
            for r in ledger.records]
    df = pd.DataFrame(rows, columns=LOAN_HISTORY_COLUMNS)
    for col in ["Issued At", "Due At", "Returned At"]:
        df[col] = pd.to_datetime(df[col], utc=True)
    return df


def _most_frequent(ledger: Ledger, attribute: str) -> Optional[str]:
    values = [getattr(r.item, attribute) for r in ledger.records]
    if not values:
        return None
    counts = pd.Series(values, dtype=str).str.strip()
    counts = counts[counts != ""]
    if counts.empty:
        return None
    tally = counts.groupby(counts).size().reset_index(name="count")
    tally.columns = ["value", "count"]
    # stable sort keeps the alphabetical order of groupby among ties
    top = tally.sort_values("count", ascending=False, kind="mergesort").iloc[0]
    logger.debug("Most frequent %s: %s (%d loans)", attribute, top["value"], top["count"])
    return top["value"]


def most_popular_genre(ledger: Ledger) -> Optional[str]:
    """
    Compute the most frequently-borrowed genre from the loan history.

    Returns the genre string or None if there is insufficient data.
    """
    return _most_frequent(ledger, "genre")


def most_borrowed_creator(ledger: Ledger) -> Optional[str]:
    """Return the creator whose items were lent most often, or None without loans."""
    return _most_frequent(ledger, "creator")
