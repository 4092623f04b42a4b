"""Mini README: Core package initializer for the budget tracker.

The package records income and expense transactions in an in-memory ledger
and derives filtered tables and spending summaries from it. ``ledger`` holds
the model, ``interface`` the browser dashboard that drives it.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
