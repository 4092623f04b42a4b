"""Mini README: Transaction entity and the category rules it enforces.

Structure:
    * TransactionType - enum of income versus expense entries.
    * INCOME_CATEGORIES / EXPENSE_CATEGORIES - the closed category sets.
    * Transaction - frozen dataclass validated on every construction.

Every ``Transaction`` passes through the same checks whether it is built from
raw form text via ``Transaction.create`` or from typed values, so an edit can
never smuggle in a value that a new entry would have been refused. Missing
fields are reported first, in form order (title, amount, category, type,
date), followed by parse failures and finally by range and category rules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import FormatError, ValidationError

INCOME_CATEGORIES: Tuple[str, ...] = ("Income",)
EXPENSE_CATEGORIES: Tuple[str, ...] = (
    "Dining Out",
    "Bills",
    "Entertainment",
    "Gas",
    "Groceries",
    "Shopping",
    "Other",
)
ALL_CATEGORIES: Tuple[str, ...] = INCOME_CATEGORIES + EXPENSE_CATEGORIES


class TransactionType(str, Enum):
    """Enumerate the supported transaction types."""

    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported transaction type: {value}")

    @property
    def categories(self) -> Tuple[str, ...]:
        """Categories a transaction of this type may use."""

        if self is TransactionType.INCOME:
            return INCOME_CATEGORIES
        return EXPENSE_CATEGORIES


def canonical_category(value: str, allowed: Tuple[str, ...] = ALL_CATEGORIES) -> Optional[str]:
    """Return the canonical spelling of ``value`` or ``None`` when unknown."""

    lowered = value.strip().lower()
    for category in allowed:
        if category.lower() == lowered:
            return category
    return None


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_amount(value: object) -> float:
    """Parse numeric text or numbers into a positive finite float."""

    if isinstance(value, bool):
        raise FormatError("Amount must be numeric.", field="amount")
    try:
        amount = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError) as error:
        raise FormatError("Amount must be numeric.", field="amount") from error
    if not math.isfinite(amount):
        raise FormatError("Amount must be a finite number.", field="amount")
    if amount <= 0:
        raise ValidationError("Amount must be greater than zero.", field="amount")
    return amount


def _parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise FormatError(f"Unrecognised date: {value}", field="date") from error
    raise FormatError("Dates must be ISO strings or date/datetime instances.", field="date")


def _validate_fields(
    title: object,
    amount: object,
    category: object,
    transaction_type: object,
    occurred_on: object,
) -> Tuple[str, float, str, TransactionType, date]:
    """Run every transaction check and return the normalised values."""

    required = (
        ("title", title),
        ("amount", amount),
        ("category", category),
        ("type", transaction_type),
        ("date", occurred_on),
    )
    for field_name, value in required:
        if _is_blank(value):
            raise ValidationError(f"Missing {field_name}.", field=field_name, missing=True)

    parsed_amount = _parse_amount(amount)
    parsed_date = _parse_date(occurred_on)
    if isinstance(transaction_type, TransactionType):
        parsed_type = transaction_type
    else:
        try:
            parsed_type = TransactionType.from_str(str(transaction_type))
        except ValueError as error:
            raise ValidationError(str(error), field="type") from error

    parsed_category = canonical_category(str(category), parsed_type.categories)
    if parsed_category is None:
        raise ValidationError(
            f"Category '{category}' is not valid for {parsed_type.value} transactions.",
            field="category",
        )
    return str(title).strip(), parsed_amount, parsed_category, parsed_type, parsed_date


@dataclass(frozen=True, slots=True)
class Transaction:
    """One recorded income or expense event."""

    title: str
    amount: float
    category: str
    transaction_type: TransactionType
    occurred_on: date
    transaction_id: Optional[int] = None

    def __post_init__(self) -> None:
        values = _validate_fields(
            self.title, self.amount, self.category, self.transaction_type, self.occurred_on
        )
        for name, value in zip(
            ("title", "amount", "category", "transaction_type", "occurred_on"), values
        ):
            object.__setattr__(self, name, value)

    @classmethod
    def create(
        cls,
        title: object,
        amount: object,
        category: object,
        transaction_type: object,
        occurred_on: object,
    ) -> "Transaction":
        """Build a transaction from raw form values such as ``"15.99"``."""

        return cls(
            title=title,  # type: ignore[arg-type]
            amount=amount,  # type: ignore[arg-type]
            category=category,  # type: ignore[arg-type]
            transaction_type=transaction_type,  # type: ignore[arg-type]
            occurred_on=occurred_on,  # type: ignore[arg-type]
        )

    def validate(self) -> None:
        """Re-run the construction checks, raising on the first failure."""

        _validate_fields(
            self.title, self.amount, self.category, self.transaction_type, self.occurred_on
        )

    def with_id(self, transaction_id: Optional[int]) -> "Transaction":
        """Return the same transaction carrying another identity."""

        return replace(self, transaction_id=transaction_id)

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "title": self.title,
            "amount": self.amount,
            "category": self.category,
            "transaction_type": self.transaction_type.value,
            "occurred_on": self.occurred_on.isoformat(),
        }
