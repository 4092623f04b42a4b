"""Mini README: Type and category filters for the transaction table.

Structure:
    * ALL - sentinel filter value that matches everything.
    * TransactionFilter - frozen predicate built from user-facing filter values.
    * apply_filter - functional shortcut used by the session and web routes.

Filters are pure: they never touch the ledger and always return a new list in
the input order, so applying the same filter twice changes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .transaction import ALL_CATEGORIES, Transaction, TransactionType, canonical_category

ALL = "All"


def _is_all(value: Optional[str]) -> bool:
    return value is None or value.strip().lower() in {"", ALL.lower()}


@dataclass(frozen=True, slots=True)
class TransactionFilter:
    """Predicate over transaction type and category, both case-insensitive."""

    transaction_type: Optional[TransactionType] = None
    category: Optional[str] = None

    @classmethod
    def from_values(
        cls, type_filter: Optional[str] = ALL, category_filter: Optional[str] = ALL
    ) -> "TransactionFilter":
        """Build a filter from the strings offered in the UI drop-downs."""

        transaction_type = None if _is_all(type_filter) else TransactionType.from_str(type_filter)
        category = None
        if not _is_all(category_filter):
            category = canonical_category(category_filter)
            if category is None:
                raise ValueError(f"Unsupported category filter: {category_filter}")
        return cls(transaction_type=transaction_type, category=category)

    def matches(self, transaction: Transaction) -> bool:
        if self.transaction_type is not None and transaction.transaction_type is not self.transaction_type:
            return False
        if self.category is not None and transaction.category.lower() != self.category.lower():
            return False
        return True

    def apply(self, transactions: Iterable[Transaction]) -> List[Transaction]:
        return [transaction for transaction in transactions if self.matches(transaction)]


def apply_filter(
    transactions: Iterable[Transaction],
    type_filter: Optional[str] = ALL,
    category_filter: Optional[str] = ALL,
) -> List[Transaction]:
    """Return the transactions passing both filters, order preserved."""

    return TransactionFilter.from_values(type_filter, category_filter).apply(transactions)


def filter_choices() -> dict:
    """Values the UI offers for the type and category drop-downs."""

    return {
        "types": [ALL] + [member.value for member in TransactionType],
        "categories": [ALL] + list(ALL_CATEGORIES),
    }
