"""Mini README: Flat-file persistence for ledger snapshots.

One plain text file per account holds the full ledger. ``save_ledger``
rewrites it from the store and ``load_ledger`` replaces the store from it,
returning the recomputed balance (or ``None`` when the file is unusable).
"""

from .flat_file import (
    LedgerFormatError,
    backup_ledger,
    decode_investment,
    decode_transaction,
    encode_investment,
    encode_transaction,
    load_ledger,
    parse_ledger,
    save_ledger,
)

__all__ = [
    "LedgerFormatError",
    "backup_ledger",
    "decode_investment",
    "decode_transaction",
    "encode_investment",
    "encode_transaction",
    "load_ledger",
    "parse_ledger",
    "save_ledger",
]
