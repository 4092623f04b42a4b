"""Mini README: FastAPI dashboard for the budget tracker.

Structure:
    * create_application - application factory wiring routes and templates.
    * _result_response - maps session results onto HTTP status codes.

The dashboard mirrors the three screens of the desktop tracker: an entry
form, the transaction table with filters and sortable columns, and the
summary with its spending breakdown. All ledger work goes through one
``LedgerSession`` created per application; routes only translate HTTP input
into session calls and session results into JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..ledger import (
    ALL,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    LedgerChange,
    LedgerSession,
    OperationResult,
    filter_choices,
    seed_demo_transactions,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

_ERROR_STATUS = {"validation": 400, "format": 400, "not_found": 404}


def _result_response(result: OperationResult, success_status: int = 200) -> JSONResponse:
    """Translate a session result into a JSON response."""

    status = success_status if result.ok else _ERROR_STATUS.get(result.error or "", 400)
    return JSONResponse(result.as_dict(), status_code=status)


def create_application(session: Optional[LedgerSession] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="Budget Tracker", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    settings = get_settings()

    if session is None:
        session = LedgerSession()
        if settings.seed_demo_data:
            seed_demo_transactions(session.ledger)
    app.state.session = session

    dashboard_state: Dict[str, int] = {"revision": 0}

    def _track_change(change: LedgerChange) -> None:
        dashboard_state["revision"] += 1
        LOGGER.debug("Ledger %s -> revision %s", change, dashboard_state["revision"])

    session.ledger.subscribe(_track_change)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the entry form, transaction table and summary."""

        summary = session.summary()
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "transactions": session.view(),
                "income_categories": INCOME_CATEGORIES,
                "expense_categories": EXPENSE_CATEGORIES,
                "choices": filter_choices(),
                "summary": summary,
                "summary_lines": summary.summary_lines(settings.currency_symbol),
                "warning": session.overspending_warning(),
                "currency_symbol": settings.currency_symbol,
            },
        )

    @app.get("/categories")
    async def categories() -> JSONResponse:
        """Return the category sets the entry form must offer."""

        return JSONResponse(
            {
                "income": list(INCOME_CATEGORIES),
                "expense": list(EXPENSE_CATEGORIES),
                **filter_choices(),
            }
        )

    @app.get("/transactions")
    async def list_transactions(
        type_filter: str = Query(ALL, alias="type"),
        category_filter: str = Query(ALL, alias="category"),
        sort: str = Query("none"),
        direction: str = Query("ascending"),
    ) -> JSONResponse:
        """Return the filtered and sorted table rows."""

        try:
            rows = session.view(type_filter, category_filter, sort, direction)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {
                "revision": dashboard_state["revision"],
                "transactions": [transaction.as_dict() for transaction in rows],
            }
        )

    @app.post("/transactions")
    async def add_transaction(
        title: Optional[str] = Form(None),
        amount: Optional[str] = Form(None),
        category: Optional[str] = Form(None),
        transaction_type: Optional[str] = Form(None, alias="type"),
        occurred_on: Optional[str] = Form(None, alias="date"),
    ) -> JSONResponse:
        """Record a new transaction from the entry form."""

        result = session.record(title, amount, category, transaction_type, occurred_on)
        return _result_response(result, success_status=201)

    @app.put("/transactions/{transaction_id}")
    async def edit_transaction(
        transaction_id: int,
        title: Optional[str] = Form(None),
        amount: Optional[str] = Form(None),
        category: Optional[str] = Form(None),
        transaction_type: Optional[str] = Form(None, alias="type"),
        occurred_on: Optional[str] = Form(None, alias="date"),
    ) -> JSONResponse:
        """Replace a transaction with the values from the edit dialog."""

        result = session.edit(transaction_id, title, amount, category, transaction_type, occurred_on)
        return _result_response(result)

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: int, confirm: bool = Query(False)) -> JSONResponse:
        """Delete a transaction once the user has confirmed the removal."""

        if not confirm:
            return JSONResponse(
                {
                    "ok": False,
                    "transaction": None,
                    "error": "confirmation_required",
                    "field": None,
                    "message": "Confirm the deletion to remove this transaction.",
                },
                status_code=409,
            )
        return _result_response(session.delete(transaction_id))

    @app.get("/summary")
    async def summary() -> JSONResponse:
        """Return totals, the spending breakdown and any overspending warning."""

        current = session.summary()
        payload = current.as_dict()
        payload["summary_lines"] = current.summary_lines(settings.currency_symbol)
        payload["warning"] = session.overspending_warning()
        payload["revision"] = dashboard_state["revision"]
        return JSONResponse(payload)

    return app
