"""Mini README: Transaction ledger model and its derived views.

The ``ledger`` module owns the transactions, ``filtering`` and ``sorting``
build the visible table, ``summary`` produces totals for the summary screen
and ``session`` is the error-catching boundary used by interfaces. Nothing in
this package performs I/O.
"""

from .errors import FormatError, LedgerError, NotFoundError, ValidationError
from .filtering import ALL, TransactionFilter, apply_filter, filter_choices
from .ledger import Ledger, LedgerChange, seed_demo_transactions
from .session import LedgerSession, OperationResult
from .sorting import SortDirection, SortKey, apply_sort
from .summary import OVERSPENDING_WARNING, LedgerSummary, summarize
from .transaction import (
    ALL_CATEGORIES,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    Transaction,
    TransactionType,
)

__all__ = [
    "ALL",
    "ALL_CATEGORIES",
    "EXPENSE_CATEGORIES",
    "FormatError",
    "INCOME_CATEGORIES",
    "Ledger",
    "LedgerChange",
    "LedgerError",
    "LedgerSession",
    "LedgerSummary",
    "NotFoundError",
    "OVERSPENDING_WARNING",
    "OperationResult",
    "SortDirection",
    "SortKey",
    "Transaction",
    "TransactionFilter",
    "TransactionType",
    "ValidationError",
    "apply_filter",
    "apply_sort",
    "filter_choices",
    "seed_demo_transactions",
    "summarize",
]
