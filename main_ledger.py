"""Mini README: Entry point CLI for the Pocket Ledger personal finance tool.

This script exposes a Typer CLI with an interactive menu for recording and
maintaining a ledger, plus non-interactive helpers for monthly reports and
description suggestions. Defaults come from ``POCKETLEDGER_*`` environment
variables via the shared settings model.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from pocketledger.configuration import PocketLedgerSettings, get_settings
from pocketledger.interface import LedgerMenu, TyperConsole
from pocketledger.logging_utils import configure_root_logger
from pocketledger.session import LedgerSession

cli = typer.Typer(help="Record income, spending and investments in a personal ledger.")


def _open_session(
    username: Optional[str],
    opening_balance: Optional[float],
    data_directory: Optional[Path],
) -> LedgerSession:
    settings = get_settings()
    if data_directory is not None:
        settings = PocketLedgerSettings(
            **{**settings.model_dump(), "data_directory": data_directory}
        )
    configure_root_logger(settings.log_level)
    session = LedgerSession(username, opening_balance, settings=settings)
    if session.load():
        typer.echo(f"Loaded existing data for {session.username}.")
    elif session.unreadable_data_file:
        typer.echo(
            f"Could not read {session.data_file}. Starting with a fresh account; "
            "the old file will be backed up before saving."
        )
    else:
        typer.echo("No existing data found. Starting with a fresh account.")
    return session


@cli.command()
def run(
    username: Optional[str] = typer.Option(None, help="Account whose ledger file is used."),
    opening_balance: Optional[float] = typer.Option(
        None, help="Balance the account starts from before stored records are replayed."
    ),
    data_directory: Optional[Path] = typer.Option(None, help="Directory holding ledger files."),
    pause: bool = typer.Option(True, help="Wait for Enter after each action."),
) -> None:
    """Start the interactive ledger menu."""

    typer.echo("---Welcome to Finance Management System!!---")
    if username is None:
        username = typer.prompt("Enter your username", default=get_settings().default_username)
    session = _open_session(username, opening_balance, data_directory)
    LedgerMenu(session, TyperConsole(pause_after_action=pause)).run()


@cli.command()
def report(
    month: int = typer.Option(..., min=1, max=12, help="Month to summarise."),
    year: int = typer.Option(..., help="Year to summarise."),
    username: Optional[str] = typer.Option(None, help="Account whose ledger file is used."),
    data_directory: Optional[Path] = typer.Option(None, help="Directory holding ledger files."),
) -> None:
    """Print the monthly income and expenditure report."""

    session = _open_session(username, None, data_directory)
    for line in session.monthly_report(month, year).as_lines():
        typer.echo(line)


@cli.command()
def suggest(
    prefix: str = typer.Argument(..., help="Start of the description to complete."),
    username: Optional[str] = typer.Option(None, help="Account whose ledger file is used."),
    data_directory: Optional[Path] = typer.Option(None, help="Directory holding ledger files."),
) -> None:
    """List previously used descriptions starting with PREFIX."""

    session = _open_session(username, None, data_directory)
    suggestions = session.suggest_descriptions(prefix)
    if not suggestions:
        typer.echo("No suggestions.")
    for text in suggestions:
        typer.echo(text)


if __name__ == "__main__":
    cli()
