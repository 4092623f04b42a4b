"""Mini README: Operation boundary between interfaces and the ledger model.

Structure:
    * OperationResult - structured outcome of a mutating request.
    * LedgerSession - wraps one ledger and turns model errors into results.

Interfaces call the session rather than the ledger so that validation,
format and lookup failures arrive as data with a user-facing message instead
of as exceptions. A failed request never changes the ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..logging_utils import get_logger
from .errors import FormatError, LedgerError, ValidationError
from .filtering import ALL, apply_filter
from .ledger import Ledger
from .sorting import SortDirection, SortKey, apply_sort
from .summary import OVERSPENDING_WARNING, LedgerSummary, summarize
from .transaction import Transaction

LOGGER = get_logger(__name__)

MISSING_INPUT_MESSAGE = "Please fill in all fields."
INVALID_AMOUNT_MESSAGE = "Amount must be numeric."


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a session request."""

    ok: bool
    transaction: Optional[Transaction] = None
    error: Optional[str] = None
    field: Optional[str] = None
    message: str = ""

    @classmethod
    def success(cls, transaction: Transaction, message: str = "") -> "OperationResult":
        return cls(ok=True, transaction=transaction, message=message)

    @classmethod
    def failure(cls, error: LedgerError) -> "OperationResult":
        return cls(ok=False, error=error.kind, field=error.field, message=_user_message(error))

    def as_dict(self) -> Dict[str, object]:
        return {
            "ok": self.ok,
            "transaction": self.transaction.as_dict() if self.transaction else None,
            "error": self.error,
            "field": self.field,
            "message": self.message,
        }


def _user_message(error: LedgerError) -> str:
    """Pick the message shown to the user for ``error``."""

    if isinstance(error, ValidationError) and error.missing:
        return MISSING_INPUT_MESSAGE
    if isinstance(error, FormatError) and error.field == "amount":
        return INVALID_AMOUNT_MESSAGE
    return str(error)


class LedgerSession:
    """Run user requests against a ledger owned by the caller."""

    def __init__(self, ledger: Optional[Ledger] = None) -> None:
        self.ledger = ledger if ledger is not None else Ledger()

    def record(
        self,
        title: object,
        amount: object,
        category: object,
        transaction_type: object,
        occurred_on: object,
    ) -> OperationResult:
        """Validate form input and append it to the ledger."""

        try:
            transaction = Transaction.create(title, amount, category, transaction_type, occurred_on)
            stored = self.ledger.add(transaction)
        except LedgerError as error:
            LOGGER.info("Rejected new transaction: %s (%s)", error, error.kind)
            return OperationResult.failure(error)
        return OperationResult.success(stored, "Transaction added.")

    def edit(
        self,
        transaction_id: int,
        title: object,
        amount: object,
        category: object,
        transaction_type: object,
        occurred_on: object,
    ) -> OperationResult:
        """Replace an existing transaction with freshly validated values."""

        try:
            self.ledger.get(transaction_id)
            transaction = Transaction.create(title, amount, category, transaction_type, occurred_on)
            updated = self.ledger.update(transaction_id, transaction)
        except LedgerError as error:
            LOGGER.info("Rejected edit of %s: %s (%s)", transaction_id, error, error.kind)
            return OperationResult.failure(error)
        return OperationResult.success(updated, "Transaction updated.")

    def delete(self, transaction_id: int) -> OperationResult:
        """Remove a transaction the user has already confirmed."""

        try:
            removed = self.ledger.remove(transaction_id)
        except LedgerError as error:
            LOGGER.info("Rejected removal of %s: %s", transaction_id, error)
            return OperationResult.failure(error)
        return OperationResult.success(removed, "Transaction deleted.")

    def view(
        self,
        type_filter: Optional[str] = ALL,
        category_filter: Optional[str] = ALL,
        sort_key: str = SortKey.NONE.value,
        direction: str = SortDirection.ASCENDING.value,
    ) -> List[Transaction]:
        """Rows for the transaction table after filtering and sorting."""

        visible = apply_filter(self.ledger.all(), type_filter, category_filter)
        rows = apply_sort(visible, sort_key, direction)
        LOGGER.debug(
            "Table view type=%s category=%s sort=%s/%s -> %s rows",
            type_filter,
            category_filter,
            sort_key,
            direction,
            len(rows),
        )
        return rows

    def summary(self) -> LedgerSummary:
        return summarize(self.ledger.all())

    def overspending_warning(self) -> Optional[str]:
        """Warning text for the summary screen, or ``None`` when solvent."""

        if self.summary().is_overspending:
            return OVERSPENDING_WARNING
        return None
