"""Mini README: Tests covering ledger mutations and identity handling.

Structure:
    * add/remove scenarios taken from the desktop tracker's data entry tests.
    * identity tests - equal transactions stay individually addressable.
    * notification tests - subscribers hear about every committed change.
"""

from __future__ import annotations

import logging
from datetime import date

import pytest

from budgettracker.ledger import Ledger, LedgerChange, NotFoundError, Transaction, ValidationError


def _expense(title: str, amount: str, category: str = "Other") -> Transaction:
    return Transaction.create(title, amount, category, "Expense", date(2024, 5, 1))


def test_add_appends_and_assigns_identity() -> None:
    """Adding a paycheck grows the ledger by one with identical fields."""

    ledger = Ledger()
    stored = ledger.add(Transaction.create("Paycheck", "2000.0", "Income", "Income", date.today()))

    snapshot = ledger.all()
    assert len(snapshot) == 1
    assert snapshot[0] == stored
    assert stored.transaction_id == 1
    assert (stored.title, stored.amount, stored.category, stored.transaction_type.value) == (
        "Paycheck",
        2000.0,
        "Income",
        "Income",
    )


def test_remove_by_identity_keeps_other_entries() -> None:
    ledger = Ledger()
    netflix = ledger.add(_expense("Netflix", "15.99", "Entertainment"))
    ledger.add(Transaction.create("Salary", "3000.0", "Income", "Income", date.today()))

    ledger.remove(netflix.transaction_id)

    assert len(ledger) == 1
    assert ledger.all()[0].title == "Salary"


def test_identical_transactions_get_distinct_identities() -> None:
    """Field-for-field equal entries are still removed one at a time."""

    ledger = Ledger()
    first = ledger.add(_expense("Coffee", "3.5", "Dining Out"))
    second = ledger.add(_expense("Coffee", "3.5", "Dining Out"))
    assert first.transaction_id != second.transaction_id

    ledger.remove(first.transaction_id)

    assert [transaction.transaction_id for transaction in ledger] == [second.transaction_id]


def test_identities_are_not_reused_after_removal() -> None:
    ledger = Ledger()
    removed = ledger.add(_expense("Parking", "4"))
    ledger.remove(removed.transaction_id)

    replacement = ledger.add(_expense("Parking", "4"))

    assert replacement.transaction_id != removed.transaction_id
    with pytest.raises(NotFoundError):
        ledger.get(removed.transaction_id)


def test_update_replaces_in_place() -> None:
    """An edit keeps the position and identity while swapping every field."""

    ledger = Ledger()
    ledger.add(_expense("Rent", "900", "Bills"))
    groceries = ledger.add(_expense("Groceries", "150", "Groceries"))
    ledger.add(_expense("Cinema", "24", "Entertainment"))

    updated = ledger.update(groceries.transaction_id, _expense("Groceries", "175", "Dining Out"))

    snapshot = ledger.all()
    assert len(snapshot) == 3
    assert snapshot[1] == updated
    assert updated.transaction_id == groceries.transaction_id
    assert updated.amount == pytest.approx(175.0)
    assert updated.category == "Dining Out"


def test_update_and_remove_reject_unknown_identity() -> None:
    ledger = Ledger()
    ledger.add(_expense("Rent", "900", "Bills"))

    with pytest.raises(NotFoundError):
        ledger.update(42, _expense("Rent", "950", "Bills"))
    with pytest.raises(NotFoundError):
        ledger.remove(42)
    assert ledger.all()[0].amount == pytest.approx(900.0)


def test_add_rejects_non_transactions() -> None:
    ledger = Ledger()
    with pytest.raises(ValidationError):
        ledger.add({"title": "Rent"})  # type: ignore[arg-type]
    assert len(ledger) == 0


def test_all_returns_read_only_snapshot() -> None:
    ledger = Ledger()
    ledger.add(_expense("Rent", "900", "Bills"))

    snapshot = ledger.all()
    assert isinstance(snapshot, tuple)
    ledger.add(_expense("Gas", "40", "Gas"))
    assert len(snapshot) == 1
    assert len(ledger.all()) == 2


def test_subscribers_receive_changes() -> None:
    ledger = Ledger()
    changes = []
    unsubscribe = ledger.subscribe(changes.append)

    stored = ledger.add(_expense("Rent", "900", "Bills"))
    ledger.update(stored.transaction_id, _expense("Rent", "950", "Bills"))
    ledger.remove(stored.transaction_id)
    unsubscribe()
    ledger.add(_expense("Gas", "40", "Gas"))

    assert changes == [
        LedgerChange("added", stored.transaction_id),
        LedgerChange("updated", stored.transaction_id),
        LedgerChange("removed", stored.transaction_id),
    ]


def test_failing_subscriber_does_not_undo_mutation(caplog) -> None:
    """A broken view is logged while the ledger and other views carry on."""

    ledger = Ledger()
    seen = []

    def broken(change: LedgerChange) -> None:
        raise RuntimeError("render failed")

    ledger.subscribe(broken)
    ledger.subscribe(seen.append)

    with caplog.at_level(logging.ERROR):
        ledger.add(_expense("Rent", "900", "Bills"))

    assert len(ledger) == 1
    assert len(seen) == 1
    assert "listener failed" in caplog.text
