"""Mini README: Monthly income/expenditure summaries.

Structure:
    * CategoryShare - one category's expenditure and share of the month.
    * MonthlyReport - totals plus the per-category breakdown.
    * build_monthly_report - scan transactions for a (month, year) pair.

Only categories with expenditure in the month appear in the breakdown, in
category declaration order. Percentages are left as ``None`` when the month
has no expenditure at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..records import Category, Transaction, TransactionKind


@dataclass(slots=True)
class CategoryShare:
    """Expenditure attributed to a single category."""

    category: Category
    amount: float
    percentage: Optional[float]


@dataclass(slots=True)
class MonthlyReport:
    """Summary of a single calendar month."""

    month: int
    year: int
    total_income: float
    total_expense: float
    breakdown: List[CategoryShare] = field(default_factory=list)

    @property
    def net_savings(self) -> float:
        return self.total_income - self.total_expense

    def as_lines(self) -> List[str]:
        """Render the report as display lines."""

        lines = [
            f"----- Monthly Report for {self.month}/{self.year} -----",
            f"Total Income: {self.total_income:.2f}",
            f"Total Expenses: {self.total_expense:.2f}",
            f"Net Savings: {self.net_savings:.2f}",
            "",
            "Expense Breakdown by Category:",
        ]
        for share in self.breakdown:
            line = f"{share.category.value:>20}: {share.amount:.2f}"
            if share.percentage is not None:
                line += f" ({share.percentage:.1f}%)"
            lines.append(line)
        return lines

    def as_dict(self) -> Dict[str, object]:
        return {
            "month": self.month,
            "year": self.year,
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "net_savings": self.net_savings,
            "breakdown": [
                {
                    "category": share.category.value,
                    "amount": share.amount,
                    "percentage": share.percentage,
                }
                for share in self.breakdown
            ],
        }


def build_monthly_report(transactions: Iterable[Transaction], month: int, year: int) -> MonthlyReport:
    """Sum income and expenditure dated in ``month``/``year``."""

    total_income = 0.0
    total_expense = 0.0
    per_category: Dict[Category, float] = {category: 0.0 for category in Category}

    for transaction in transactions:
        if transaction.date.month != month or transaction.date.year != year:
            continue
        if transaction.kind is TransactionKind.INCOME:
            total_income += transaction.amount
        else:
            total_expense += transaction.amount
            per_category[transaction.category] += transaction.amount

    breakdown = [
        CategoryShare(
            category=category,
            amount=amount,
            percentage=(amount / total_expense * 100) if total_expense > 0 else None,
        )
        for category, amount in per_category.items()
        if amount > 0
    ]
    return MonthlyReport(
        month=month,
        year=year,
        total_income=total_income,
        total_expense=total_expense,
        breakdown=breakdown,
    )
