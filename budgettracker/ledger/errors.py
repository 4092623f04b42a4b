"""Mini README: Error types raised by the ledger model.

Structure:
    * LedgerError - base class carrying the offending field and an error kind.
    * ValidationError - a required value is missing or outside its allowed set.
    * FormatError - text could not be parsed (amounts and dates).
    * NotFoundError - an identity no longer exists in the ledger.

The ``kind`` attribute is a short stable label (``validation``, ``format``,
``not_found``) that interface layers use to pick messages and status codes.
"""

from __future__ import annotations

from typing import Optional


class LedgerError(Exception):
    """Base class for every error raised by the ledger model."""

    kind = "ledger"

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ValidationError(LedgerError):
    """A required field is missing or holds a value that is not allowed."""

    kind = "validation"

    def __init__(
        self, message: str, *, field: Optional[str] = None, missing: bool = False
    ) -> None:
        super().__init__(message, field=field)
        self.missing = missing


class FormatError(LedgerError):
    """Text supplied for a numeric or date field could not be parsed."""

    kind = "format"


class NotFoundError(LedgerError, LookupError):
    """An update or removal targeted an identity that is not in the ledger."""

    kind = "not_found"

    def __init__(self, transaction_id: int) -> None:
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id
