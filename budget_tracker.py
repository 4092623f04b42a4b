"""Mini README: Entry point CLI for the budget tracker dashboard.

This script exposes a Typer CLI that starts the FastAPI dashboard with
configurable host and port, and prints the summary of the demo ledger for a
quick look without a browser. Settings come from ``BUDGETTRACKER_*``
environment variables when options are omitted.
"""

from __future__ import annotations

import typer
import uvicorn

from budgettracker.configuration import get_settings
from budgettracker.ledger import Ledger, OVERSPENDING_WARNING, seed_demo_transactions, summarize
from budgettracker.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and inspect the personal budget tracker.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI dashboard using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 wildcard, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Budget Tracker on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "budgettracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print income, expense and balance figures for the demo ledger."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    ledger = Ledger()
    seed_demo_transactions(ledger)
    result = summarize(ledger.all())
    for line in result.summary_lines(settings.currency_symbol):
        typer.echo(line)
    for category, total, share in result.category_breakdown():
        typer.echo(f"  {category:<14} {settings.currency_symbol}{total:>9.2f}  {share:6.1%}")
    if result.is_overspending:
        typer.echo(OVERSPENDING_WARNING, err=True)


if __name__ == "__main__":
    cli()
