"""Mini README: Per-user ledger session that owns the running balance.

Structure:
    * LedgerSession - pairs a LedgerStore with a balance and a data file.

The store never touches the balance. Every mutation made through the session
computes the signed balance change with ``balance_delta`` and applies it only
when the store reports success, so the invariant

    balance == opening + income - expenditure - invested principal

holds for whatever records the store currently contains. Validation problems
are reported by returning ``False`` and logging the reason.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional

from .configuration import PocketLedgerSettings, get_settings
from .finance import LedgerStore, MonthlyReport
from .logging_utils import get_logger
from .persistence import backup_ledger, load_ledger, save_ledger
from .records import (
    Category,
    Investment,
    InvestmentKind,
    LedgerDate,
    LedgerRecord,
    Transaction,
    UpcomingPayment,
    balance_delta,
)

LOGGER = get_logger(__name__)


def _is_positive_amount(value: Optional[float]) -> bool:
    """NaN and infinities never count as amounts."""

    return value is not None and math.isfinite(value) and value > 0


def _is_valid_contribution(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value >= 0


class LedgerSession:
    """Coordinate a user's ledger store, balance and persisted file."""

    def __init__(
        self,
        username: Optional[str] = None,
        opening_balance: Optional[float] = None,
        *,
        settings: Optional[PocketLedgerSettings] = None,
        store: Optional[LedgerStore] = None,
        data_file: Optional[Path] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.username = (username or "").strip() or self.settings.default_username
        self.opening_balance = (
            float(opening_balance) if opening_balance is not None else self.settings.opening_balance
        )
        self.balance = self.opening_balance
        self.store = store or LedgerStore()
        self.data_file = Path(data_file) if data_file else self.settings.data_file_for(self.username)
        self.unreadable_data_file = False
        self.backup_file: Optional[Path] = None
        LOGGER.debug(
            "Session for %s opened with balance %.2f (file %s)",
            self.username,
            self.balance,
            self.data_file,
        )

    def load(self) -> bool:
        """Replace the ledger from the data file, replaying balances from the opening balance.

        When the file exists but cannot be decoded it is flagged so the next
        save copies it aside instead of silently overwriting it.
        """

        balance = load_ledger(self.store, self.data_file, self.opening_balance)
        if balance is None:
            self.unreadable_data_file = self.data_file.exists()
            LOGGER.info("No usable ledger for %s; starting a fresh account", self.username)
            return False
        self.unreadable_data_file = False
        self.balance = balance
        return True

    def save(self) -> bool:
        if self.unreadable_data_file:
            backup = backup_ledger(self.data_file)
            if backup is None:
                return False
            self.backup_file = backup
            self.unreadable_data_file = False
        return save_ledger(self.store, self.data_file)

    def apply_record_change(self, old: Optional[LedgerRecord], new: Optional[LedgerRecord]) -> float:
        """Apply the balance change of replacing ``old`` with ``new`` and return it."""

        delta = balance_delta(old, new)
        self.balance += delta
        LOGGER.debug("Balance moved by %+.2f to %.2f", delta, self.balance)
        return delta

    def record_income(
        self,
        amount: float,
        description: str,
        date: Optional[LedgerDate] = None,
    ) -> bool:
        if not _is_positive_amount(amount):
            LOGGER.warning("Rejected income with non-positive amount %s", amount)
            return False
        transaction = Transaction.income(amount, description, date=date)
        self.store.add_transaction(transaction)
        self.apply_record_change(None, transaction)
        return True

    def record_expenditure(
        self,
        amount: float,
        description: str,
        category: Category = Category.OTHER,
        date: Optional[LedgerDate] = None,
    ) -> bool:
        """Record spending, which must be positive and covered by the balance."""

        if not _is_positive_amount(amount) or amount > self.balance:
            LOGGER.warning(
                "Rejected expenditure of %s with balance %.2f", amount, self.balance
            )
            return False
        transaction = Transaction.expenditure(amount, description, date=date, category=category)
        self.store.add_transaction(transaction)
        self.apply_record_change(None, transaction)
        return True

    def make_investment(
        self,
        kind: InvestmentKind,
        amount: float,
        duration_years: int,
        monthly_contribution: Optional[float] = None,
        start_date: Optional[LedgerDate] = None,
    ) -> bool:
        """Move ``amount`` from the balance into a new investment."""

        if not _is_positive_amount(amount) or duration_years <= 0 or amount > self.balance:
            LOGGER.warning(
                "Rejected %s investment amount=%s duration=%s balance=%.2f",
                kind.value,
                amount,
                duration_years,
                self.balance,
            )
            return False
        if kind is InvestmentKind.RECURRING_PLAN:
            if not _is_valid_contribution(monthly_contribution):
                LOGGER.warning("Rejected SIP with monthly contribution %s", monthly_contribution)
                return False
            investment = Investment.recurring_plan(
                amount, duration_years, monthly_contribution, start_date=start_date
            )
        else:
            investment = Investment.fixed_deposit(amount, duration_years, start_date=start_date)
        self.store.add_investment(investment)
        self.apply_record_change(None, investment)
        return True

    def update_transaction(self, index: int, transaction: Transaction) -> bool:
        if not _is_positive_amount(transaction.amount):
            LOGGER.warning("Rejected transaction update with amount %s", transaction.amount)
            return False
        old = self.store.get_transaction(index)
        if old is None or not self.store.update_transaction(index, transaction):
            return False
        self.apply_record_change(old, transaction)
        return True

    def update_investment(self, index: int, investment: Investment) -> bool:
        sip_contribution_ok = investment.kind is not InvestmentKind.RECURRING_PLAN or _is_valid_contribution(
            investment.monthly_contribution
        )
        if not _is_positive_amount(investment.amount) or investment.duration_years <= 0 or not sip_contribution_ok:
            LOGGER.warning("Rejected investment update %s", investment)
            return False
        old = self.store.get_investment(index)
        if old is None or not self.store.update_investment(index, investment):
            return False
        self.apply_record_change(old, investment)
        return True

    def delete_transaction(self, index: int) -> bool:
        old = self.store.get_transaction(index)
        if old is None or not self.store.delete_transaction(index):
            return False
        self.apply_record_change(old, None)
        return True

    def delete_investment(self, index: int) -> bool:
        old = self.store.get_investment(index)
        if old is None or not self.store.delete_investment(index):
            return False
        self.apply_record_change(old, None)
        return True

    def schedule_payment(
        self,
        due_date: LedgerDate,
        description: str,
        amount: float,
        is_investment: bool = False,
    ) -> bool:
        if not _is_positive_amount(amount):
            LOGGER.warning("Rejected upcoming payment with amount %s", amount)
            return False
        self.store.add_upcoming_payment(
            UpcomingPayment(
                due_date=due_date,
                description=description,
                amount=float(amount),
                is_investment=is_investment,
            )
        )
        return True

    def suggest_descriptions(self, prefix: str) -> List[str]:
        return self.store.description_suggestions(prefix)

    def monthly_report(self, month: int, year: int) -> MonthlyReport:
        return self.store.generate_monthly_report(month, year)
