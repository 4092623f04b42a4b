"""Mini README: Income, expense and category totals for the summary screen.

Structure:
    * LedgerSummary - dataclass of totals plus export and label helpers.
    * summarize - folds a transaction sequence into a ``LedgerSummary``.

Totals use ``math.fsum`` so they are exactly rounded and do not drift with
the order transactions were entered. The category breakdown only covers
expenses; all income shares the single ``Income`` category and would only
flatten the spending chart. Categories appear in first-seen order to keep
chart legends stable between renders.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from ..logging_utils import get_logger
from .transaction import Transaction, TransactionType

LOGGER = get_logger(__name__)

OVERSPENDING_WARNING = "Your net balance is negative. You may be overspending."


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Aggregate figures derived from the full ledger."""

    total_income: float = 0.0
    total_expense: float = 0.0
    net_balance: float = 0.0
    category_totals: Dict[str, float] = field(default_factory=dict)

    @property
    def is_overspending(self) -> bool:
        return self.net_balance < 0

    def category_breakdown(self) -> List[Tuple[str, float, float]]:
        """Return ``(category, total, share)`` rows for the spending chart."""

        if not self.total_expense:
            return [(category, total, 0.0) for category, total in self.category_totals.items()]
        return [
            (category, total, total / self.total_expense)
            for category, total in self.category_totals.items()
        ]

    def summary_lines(self, currency_symbol: str = "$") -> List[str]:
        """Human readable labels in the style of the summary screen."""

        return [
            f"Total Income: {_format_money(self.total_income, currency_symbol)}",
            f"Total Expenses: {_format_money(self.total_expense, currency_symbol)}",
            f"Net Balance: {_format_money(self.net_balance, currency_symbol)}",
        ]

    def as_dict(self) -> Dict[str, object]:
        return {
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "net_balance": self.net_balance,
            "is_overspending": self.is_overspending,
            "category_totals": dict(self.category_totals),
            "category_breakdown": [
                {"category": category, "total": total, "share": share}
                for category, total, share in self.category_breakdown()
            ],
        }


def _format_money(value: float, currency_symbol: str) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{currency_symbol}{abs(value):.2f}"


def summarize(transactions: Iterable[Transaction]) -> LedgerSummary:
    """Compute totals and the expense category breakdown."""

    income: List[float] = []
    expenses: List[float] = []
    per_category: Dict[str, List[float]] = {}
    for transaction in transactions:
        if transaction.transaction_type is TransactionType.INCOME:
            income.append(transaction.amount)
        else:
            expenses.append(transaction.amount)
            per_category.setdefault(transaction.category, []).append(transaction.amount)

    total_income = math.fsum(income)
    total_expense = math.fsum(expenses)
    summary = LedgerSummary(
        total_income=total_income,
        total_expense=total_expense,
        net_balance=total_income - total_expense,
        category_totals={category: math.fsum(amounts) for category, amounts in per_category.items()},
    )
    LOGGER.debug(
        "Summary -> income: %.2f expense: %.2f balance: %.2f categories: %s",
        summary.total_income,
        summary.total_expense,
        summary.net_balance,
        len(summary.category_totals),
    )
    return summary
