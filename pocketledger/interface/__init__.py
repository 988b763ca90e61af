"""Mini README: Interactive interfaces for Pocket Ledger.

Exports the abstract ``Console`` collaborator, its Typer-backed terminal
implementation, and the numbered ``LedgerMenu`` loop used by the CLI.
"""

from .console import Console, TyperConsole, format_table
from .menu import LedgerMenu

__all__ = ["Console", "LedgerMenu", "TyperConsole", "format_table"]
