"""Mini README: Core package initialiser for the Pocket Ledger application.

Pocket Ledger records income, expenditure and long-term investments for a
single user, keeps them in an in-memory store, and snapshots that store to a
plain text file per account. Subpackages:

    * records - dates, categories and the record variants.
    * indexing - description trie and upcoming payment queue.
    * finance - the ledger store and monthly reporting.
    * persistence - flat-file save/load.
    * interface - console collaborators and the interactive menu.

The file stays lightweight so importing the package never pulls in the CLI.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
