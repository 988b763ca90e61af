"""Mini README: Value types shared by every Pocket Ledger component.

``calendar`` holds the unvalidated ledger date, ``categories`` the closed set
of classifications and ``entries`` the transaction/investment variants plus
the upcoming payment reminder. Everything here is immutable.
"""

from .calendar import LedgerDate
from .categories import Category
from .entries import (
    Investment,
    InvestmentKind,
    LedgerRecord,
    Transaction,
    TransactionKind,
    UpcomingPayment,
    balance_delta,
)

__all__ = [
    "Category",
    "Investment",
    "InvestmentKind",
    "LedgerDate",
    "LedgerRecord",
    "Transaction",
    "TransactionKind",
    "UpcomingPayment",
    "balance_delta",
]
