"""Mini README: In-memory ledger store for transactions and investments.

Structure:
    * LedgerStore - owns the record lists, description index and payment queue.

The store is the single owner of every record it holds. Records are addressed
by their position in display order, so any index captured before a delete or
sort may point at a different record afterwards. Operations report problems
through return values (``False``, ``None`` or an empty list) instead of raising.
The running balance is not tracked here: the session applies
each record's balance effect around the store mutation.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..indexing import DescriptionIndex, UpcomingPaymentQueue
from ..logging_utils import get_logger
from ..records import (
    Category,
    Investment,
    InvestmentKind,
    LedgerDate,
    Transaction,
    TransactionKind,
    UpcomingPayment,
)
from .reports import MonthlyReport, build_monthly_report

LOGGER = get_logger(__name__)


class LedgerStore:
    """Manage ledger records with search, sort, update and delete helpers."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        investments: Optional[Iterable[Investment]] = None,
    ) -> None:
        self._transactions: List[Transaction] = []
        self._investments: List[Investment] = []
        self._descriptions = DescriptionIndex()
        self._upcoming = UpcomingPaymentQueue()
        for transaction in transactions or ():
            self.add_transaction(transaction)
        for investment in investments or ():
            self.add_investment(investment)
        LOGGER.debug(
            "Ledger store initialised with %s transactions and %s investments",
            len(self._transactions),
            len(self._investments),
        )

    @property
    def transactions(self) -> List[Transaction]:
        """Transactions in display order (a copy)."""

        return list(self._transactions)

    @property
    def investments(self) -> List[Investment]:
        """Investments in display order (a copy)."""

        return list(self._investments)

    @property
    def transaction_count(self) -> int:
        return len(self._transactions)

    @property
    def investment_count(self) -> int:
        return len(self._investments)

    def get_transaction(self, index: int) -> Optional[Transaction]:
        if not _in_range(index, self._transactions):
            return None
        return self._transactions[index]

    def get_investment(self, index: int) -> Optional[Investment]:
        if not _in_range(index, self._investments):
            return None
        return self._investments[index]

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction and remember its description for suggestions."""

        self._transactions.append(transaction)
        self._descriptions.insert(transaction.description)
        LOGGER.debug(
            "Added %s of %.2f (%s)",
            transaction.kind.value,
            transaction.amount,
            transaction.description,
        )

    def add_investment(self, investment: Investment) -> None:
        self._investments.append(investment)
        LOGGER.debug(
            "Added %s investment of %.2f for %s years",
            investment.kind.value,
            investment.amount,
            investment.duration_years,
        )

    def search_transactions_by_description(self, text: str) -> List[Transaction]:
        """Case-sensitive substring match over descriptions, in store order."""

        return [transaction for transaction in self._transactions if text in transaction.description]

    def search_transactions_by_date(self, date: LedgerDate) -> List[Transaction]:
        return [transaction for transaction in self._transactions if transaction.date == date]

    def search_transactions_by_category(self, category: Category) -> List[Transaction]:
        return [transaction for transaction in self._transactions if transaction.category is category]

    def search_investments_by_amount_range(self, minimum: float, maximum: float) -> List[Investment]:
        """Investments whose principal lies within ``[minimum, maximum]``."""

        return [investment for investment in self._investments if minimum <= investment.amount <= maximum]

    def search_investments_by_type(self, kind: InvestmentKind) -> List[Investment]:
        return [investment for investment in self._investments if investment.kind is kind]

    def delete_transaction(self, index: int) -> bool:
        """Remove the transaction at ``index``; later entries shift down by one."""

        if not _in_range(index, self._transactions):
            LOGGER.warning("Rejected transaction delete at index %s", index)
            return False
        removed = self._transactions.pop(index)
        LOGGER.info("Deleted transaction %s (%s)", index, removed.description)
        return True

    def delete_investment(self, index: int) -> bool:
        if not _in_range(index, self._investments):
            LOGGER.warning("Rejected investment delete at index %s", index)
            return False
        removed = self._investments.pop(index)
        LOGGER.info("Deleted %s investment %s", removed.kind.value, index)
        return True

    def update_transaction(self, index: int, transaction: Transaction) -> bool:
        """Replace the transaction at ``index`` with a new record."""

        if not _in_range(index, self._transactions):
            LOGGER.warning("Rejected transaction update at index %s", index)
            return False
        self._transactions[index] = transaction
        self._descriptions.insert(transaction.description)
        LOGGER.info("Updated transaction %s", index)
        return True

    def update_investment(self, index: int, investment: Investment) -> bool:
        if not _in_range(index, self._investments):
            LOGGER.warning("Rejected investment update at index %s", index)
            return False
        self._investments[index] = investment
        LOGGER.info("Updated investment %s", index)
        return True

    def sort_transactions_by_amount(self, ascending: bool = True) -> None:
        self._transactions.sort(key=lambda transaction: transaction.amount, reverse=not ascending)

    def sort_transactions_by_date(self, ascending: bool = True) -> None:
        self._transactions.sort(key=lambda transaction: transaction.date.sort_key, reverse=not ascending)

    def sort_transactions_by_category(self) -> None:
        """Order by category declaration order, not alphabetically."""

        self._transactions.sort(key=lambda transaction: transaction.category.rank)

    def sort_investments_by_amount(self, ascending: bool = True) -> None:
        self._investments.sort(key=lambda investment: investment.amount, reverse=not ascending)

    def sort_investments_by_duration(self, ascending: bool = True) -> None:
        self._investments.sort(key=lambda investment: investment.duration_years, reverse=not ascending)

    def description_suggestions(self, prefix: str) -> List[str]:
        return self._descriptions.suggestions(prefix)

    def add_upcoming_payment(self, payment: UpcomingPayment) -> None:
        self._upcoming.push(payment)

    def upcoming_payments(self) -> List[UpcomingPayment]:
        """Scheduled payments ordered by due date; reading never consumes them."""

        return self._upcoming.peek_all_ordered_by_due_date()

    def next_upcoming_payment(self) -> Optional[UpcomingPayment]:
        return self._upcoming.peek()

    def generate_monthly_report(self, month: int, year: int) -> MonthlyReport:
        report = build_monthly_report(self._transactions, month, year)
        LOGGER.debug(
            "Monthly report %s/%s income=%.2f expense=%.2f",
            month,
            year,
            report.total_income,
            report.total_expense,
        )
        return report

    def replace_contents(
        self,
        transactions: Iterable[Transaction],
        investments: Iterable[Investment],
    ) -> None:
        """Discard every record and repopulate from the provided iterables."""

        self._transactions = []
        self._investments = []
        for transaction in transactions:
            self.add_transaction(transaction)
        for investment in investments:
            self.add_investment(investment)
        LOGGER.info(
            "Ledger replaced with %s transactions and %s investments",
            len(self._transactions),
            len(self._investments),
        )

    def export_snapshot(self) -> Dict[str, List[Dict[str, object]]]:
        """Export records grouped by type for display or debugging."""

        income: List[Dict[str, object]] = []
        expenses: List[Dict[str, object]] = []
        for transaction in self._transactions:
            if transaction.kind is TransactionKind.INCOME:
                income.append(transaction.as_dict())
            else:
                expenses.append(transaction.as_dict())
        return {
            "income": income,
            "expenses": expenses,
            "investments": [investment.as_dict() for investment in self._investments],
        }


def _in_range(index: int, records: List) -> bool:
    """Positional bounds check without Python's negative index wrap-around."""

    return isinstance(index, int) and 0 <= index < len(records)
