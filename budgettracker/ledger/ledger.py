"""Mini README: In-memory ledger owning every recorded transaction.

Structure:
    * LedgerChange - notification payload describing a committed mutation.
    * Ledger - add/update/remove/all operations keyed by synthetic identity.
    * seed_demo_transactions - deterministic sample data for the dashboard.

Each stored transaction receives an integer identity from a monotonic counter
when it is added. Identities are never reused, so two entries with identical
fields stay individually addressable and a stale identity fails loudly with
``NotFoundError`` instead of hitting a neighbour. Insertion order is kept and
an update replaces the entry where it stands.

The ledger holds no lock; hosts that mutate it from several threads must
serialise those calls themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..logging_utils import get_logger
from .errors import NotFoundError, ValidationError
from .transaction import Transaction, TransactionType

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LedgerChange:
    """Describe a committed mutation for subscribed views."""

    action: str
    transaction_id: int


Listener = Callable[[LedgerChange], None]


class Ledger:
    """Ordered, single-owner collection of transactions."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: Dict[int, Transaction] = {}
        self._listeners: List[Listener] = []
        self._sequence = 0
        for transaction in transactions or ():
            self._store(transaction)
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.all())

    def _next_id(self) -> int:
        self._sequence += 1
        return self._sequence

    def _store(self, transaction: Transaction) -> Transaction:
        if not isinstance(transaction, Transaction):
            raise ValidationError("Only Transaction instances can be stored.")
        transaction.validate()
        stored = transaction.with_id(self._next_id())
        self._transactions[stored.transaction_id] = stored
        return stored

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for change notifications.

        Returns a callable that removes the listener again.
        """

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, action: str, transaction_id: int) -> None:
        change = LedgerChange(action=action, transaction_id=transaction_id)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                LOGGER.exception("Ledger listener failed while handling %s", change)

    def add(self, transaction: Transaction) -> Transaction:
        """Append a transaction and return it with its assigned identity."""

        stored = self._store(transaction)
        LOGGER.info(
            "Added transaction %s (%s %.2f, %s)",
            stored.transaction_id,
            stored.transaction_type.value,
            stored.amount,
            stored.category,
        )
        self._notify("added", stored.transaction_id)
        return stored

    def get(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising ``NotFoundError`` when missing."""

        try:
            return self._transactions[transaction_id]
        except KeyError:
            raise NotFoundError(transaction_id) from None

    def update(self, transaction_id: int, transaction: Transaction) -> Transaction:
        """Replace the transaction at ``transaction_id`` keeping its position."""

        if transaction_id not in self._transactions:
            raise NotFoundError(transaction_id)
        if not isinstance(transaction, Transaction):
            raise ValidationError("Only Transaction instances can be stored.")
        transaction.validate()
        replacement = transaction.with_id(transaction_id)
        self._transactions[transaction_id] = replacement
        LOGGER.info("Updated transaction %s", transaction_id)
        self._notify("updated", transaction_id)
        return replacement

    def remove(self, transaction_id: int) -> Transaction:
        """Delete a transaction; callers obtain user confirmation beforehand."""

        if transaction_id not in self._transactions:
            raise NotFoundError(transaction_id)
        removed = self._transactions.pop(transaction_id)
        LOGGER.info("Removed transaction %s", transaction_id)
        self._notify("removed", transaction_id)
        return removed

    def all(self) -> Tuple[Transaction, ...]:
        """Return an insertion-ordered snapshot of every transaction."""

        return tuple(self._transactions.values())


def seed_demo_transactions(ledger: Ledger) -> None:
    """Populate ``ledger`` with deterministic demo data."""

    demo_transactions = [
        Transaction("Salary", 3000.0, "Income", TransactionType.INCOME, date(2024, 5, 1)),
        Transaction("Electricity", 120.0, "Bills", TransactionType.EXPENSE, date(2024, 5, 3)),
        Transaction("Weekly shop", 86.4, "Groceries", TransactionType.EXPENSE, date(2024, 5, 4)),
        Transaction("Netflix", 15.99, "Entertainment", TransactionType.EXPENSE, date(2024, 5, 6)),
        Transaction("Fuel", 54.0, "Gas", TransactionType.EXPENSE, date(2024, 5, 9)),
        Transaction("Freelance invoice", 450.0, "Income", TransactionType.INCOME, date(2024, 5, 15)),
        Transaction("Dinner out", 62.5, "Dining Out", TransactionType.EXPENSE, date(2024, 5, 18)),
    ]
    for transaction in demo_transactions:
        ledger.add(transaction)
