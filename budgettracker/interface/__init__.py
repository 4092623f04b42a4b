"""Mini README: Interactive interfaces for the budget tracker.

Exports the FastAPI application factory that powers the browser dashboard.
The CLI entry point lives in ``budget_tracker.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
