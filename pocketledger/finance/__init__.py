"""Mini README: Ledger bookkeeping for Pocket Ledger.

This package groups the in-memory ``LedgerStore`` that owns every
transaction and investment together with the monthly reporting helpers that
summarise them. The store exposes positional update/delete so the
interactive menu can address records exactly as it lists them.
"""

from .ledger import LedgerStore
from .reports import CategoryShare, MonthlyReport, build_monthly_report

__all__ = ["CategoryShare", "LedgerStore", "MonthlyReport", "build_monthly_report"]
