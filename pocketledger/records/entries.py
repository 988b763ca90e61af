"""Mini README: Ledger record variants and their balance contract.

Structure:
    * TransactionKind - income versus expenditure, with single-letter file codes.
    * Transaction - immutable income/expenditure entry.
    * InvestmentKind - fixed deposit versus recurring contribution plan.
    * Investment - immutable investment with the maturity formulas.
    * UpcomingPayment - advisory scheduled obligation, not linked to records.
    * balance_delta - signed balance change when one record replaces another.

Records are value objects: an update swaps the whole record rather than
mutating fields. Behaviour that differs per variant (maturity value, display
columns) is resolved by checking the ``kind`` tag so every variant is handled
in one place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .calendar import LedgerDate
from .categories import Category

FIXED_DEPOSIT_ANNUAL_RATE = 0.071
RECURRING_PLAN_ANNUAL_RATE = 0.096


class TransactionKind(str, Enum):
    """Enumerate the two transaction directions."""

    INCOME = "Income"
    EXPENDITURE = "Expenditure"

    @property
    def code(self) -> str:
        """Single-letter code written to ledger files."""

        return self.value[0]

    @classmethod
    def from_code(cls, value: str) -> "TransactionKind":
        """Resolve a file code (``I`` or ``E``) into a kind."""

        for kind in cls:
            if kind.code == value:
                return kind
        raise ValueError(f"Unsupported transaction code: {value!r}")


class InvestmentKind(str, Enum):
    """Enumerate the supported investment products."""

    FIXED_DEPOSIT = "FD"
    RECURRING_PLAN = "SIP"

    @classmethod
    def from_name(cls, value: str) -> "InvestmentKind":
        """Coerce arbitrary casing into a valid investment kind."""

        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported investment type: {value}") from error

    @property
    def label(self) -> str:
        if self is InvestmentKind.FIXED_DEPOSIT:
            return "Fixed Deposit (FD)"
        return "Systematic Investment Plan (SIP)"


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent an income or expenditure entry."""

    amount: float
    description: str
    date: LedgerDate
    category: Category
    kind: TransactionKind

    @classmethod
    def income(
        cls,
        amount: float,
        description: str,
        date: Optional[LedgerDate] = None,
        category: Category = Category.INCOME,
    ) -> "Transaction":
        return cls(
            amount=float(amount),
            description=description,
            date=date or LedgerDate.today(),
            category=category,
            kind=TransactionKind.INCOME,
        )

    @classmethod
    def expenditure(
        cls,
        amount: float,
        description: str,
        date: Optional[LedgerDate] = None,
        category: Category = Category.OTHER,
    ) -> "Transaction":
        return cls(
            amount=float(amount),
            description=description,
            date=date or LedgerDate.today(),
            category=category,
            kind=TransactionKind.EXPENDITURE,
        )

    @property
    def balance_effect(self) -> float:
        """Signed change this entry applies to the running balance."""

        if self.kind is TransactionKind.INCOME:
            return self.amount
        return -self.amount

    def display_fields(self) -> Tuple[str, str, str, str, str]:
        """Columns shown in ledger listings: type, date, amount, category, description."""

        return (
            self.kind.value,
            self.date.to_display_string(),
            f"{self.amount:.2f}",
            self.category.value,
            self.description,
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "kind": self.kind.value,
            "amount": self.amount,
            "description": self.description,
            "date": self.date.to_display_string(),
            "category": self.category.value,
        }


@dataclass(frozen=True, slots=True)
class Investment:
    """Represent a long-term investment and its maturity value."""

    amount: float
    duration_years: int
    start_date: LedgerDate
    kind: InvestmentKind
    monthly_contribution: Optional[float] = field(default=None)

    @classmethod
    def fixed_deposit(
        cls,
        amount: float,
        duration_years: int,
        start_date: Optional[LedgerDate] = None,
    ) -> "Investment":
        return cls(
            amount=float(amount),
            duration_years=int(duration_years),
            start_date=start_date or LedgerDate.today(),
            kind=InvestmentKind.FIXED_DEPOSIT,
        )

    @classmethod
    def recurring_plan(
        cls,
        amount: float,
        duration_years: int,
        monthly_contribution: float,
        start_date: Optional[LedgerDate] = None,
    ) -> "Investment":
        return cls(
            amount=float(amount),
            duration_years=int(duration_years),
            start_date=start_date or LedgerDate.today(),
            kind=InvestmentKind.RECURRING_PLAN,
            monthly_contribution=float(monthly_contribution),
        )

    @property
    def balance_effect(self) -> float:
        """Investing moves the principal out of the running balance."""

        return -self.amount

    def maturity_amount(self) -> float:
        """Value of the investment at the end of its duration.

        Fixed deposits compound annually at 7.1%. Recurring plans compound the
        lump principal monthly at a 9.6% nominal annual rate and add the monthly
        contributions without any growth on them.
        """

        if self.kind is InvestmentKind.FIXED_DEPOSIT:
            return self.amount * (1 + FIXED_DEPOSIT_ANNUAL_RATE) ** self.duration_years
        monthly_rate = RECURRING_PLAN_ANNUAL_RATE / 12
        compounded = self.amount * (1 + monthly_rate) ** (self.duration_years * 12)
        contributions = (self.monthly_contribution or 0.0) * 12 * self.duration_years
        return compounded + contributions

    def display_fields(self) -> Tuple[str, str, str, str, str, str]:
        """Columns: type, amount, duration, start date, monthly amount, maturity."""

        if self.kind is InvestmentKind.RECURRING_PLAN:
            monthly = f"{self.monthly_contribution or 0.0:.2f}"
        else:
            monthly = "-"
        return (
            self.kind.value,
            f"{self.amount:.2f}",
            f"{self.duration_years} years",
            self.start_date.to_display_string(),
            monthly,
            f"{self.maturity_amount():.2f}",
        )

    def as_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind.value,
            "amount": self.amount,
            "duration_years": self.duration_years,
            "start_date": self.start_date.to_display_string(),
            "monthly_contribution": self.monthly_contribution,
            "maturity_amount": self.maturity_amount(),
        }


@dataclass(frozen=True, slots=True)
class UpcomingPayment:
    """Scheduled future obligation shown to the user as a reminder."""

    due_date: LedgerDate
    description: str
    amount: float
    is_investment: bool = False

    def display_fields(self) -> Tuple[str, str, str, str]:
        return (
            self.due_date.to_display_string(),
            self.description,
            f"{self.amount:.2f}",
            "Investment" if self.is_investment else "Payment",
        )


LedgerRecord = Union[Transaction, Investment]


def balance_delta(old: Optional[LedgerRecord], new: Optional[LedgerRecord]) -> float:
    """Return the balance change for replacing ``old`` with ``new``.

    ``None`` stands for "no record": adding is ``balance_delta(None, record)``
    and deleting is ``balance_delta(record, None)``.
    """

    removed = old.balance_effect if old is not None else 0.0
    added = new.balance_effect if new is not None else 0.0
    return added - removed
