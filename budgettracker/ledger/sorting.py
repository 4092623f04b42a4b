"""Mini README: Stable column sorting for the transaction table.

Structure:
    * SortKey - columns that may be sorted (``none`` keeps ledger order).
    * SortDirection - ascending or descending.
    * apply_sort - returns a new, stably sorted list.

Python's ``sorted`` is stable in both directions, so rows with equal amounts
or dates keep their insertion order whichever way the column is toggled.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from .transaction import Transaction


class SortKey(str, Enum):
    NONE = "none"
    AMOUNT = "amount"
    DATE = "date"

    @classmethod
    def from_str(cls, value: str) -> "SortKey":
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported sort key: {value}") from error


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def from_str(cls, value: str) -> "SortDirection":
        normalised = str(value).strip().lower()
        aliases = {"asc": "ascending", "desc": "descending"}
        try:
            return cls(aliases.get(normalised, normalised))
        except ValueError as error:
            raise ValueError(f"Unsupported sort direction: {value}") from error


_SORT_FIELDS: Dict[SortKey, Callable[[Transaction], object]] = {
    SortKey.AMOUNT: lambda transaction: transaction.amount,
    SortKey.DATE: lambda transaction: transaction.occurred_on,
}


def apply_sort(
    transactions: Iterable[Transaction],
    sort_key: Union[SortKey, str] = SortKey.NONE,
    direction: Union[SortDirection, str] = SortDirection.ASCENDING,
) -> List[Transaction]:
    """Return ``transactions`` ordered by the chosen column."""

    key = sort_key if isinstance(sort_key, SortKey) else SortKey.from_str(sort_key)
    order = direction if isinstance(direction, SortDirection) else SortDirection.from_str(direction)
    if key is SortKey.NONE:
        return list(transactions)
    return sorted(
        transactions,
        key=_SORT_FIELDS[key],
        reverse=order is SortDirection.DESCENDING,
    )
