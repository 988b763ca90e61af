"""Mini README: Tests covering the ledger store operations.

Structure:
    * delete/update tests - positional bounds checks and shifting.
    * sort tests - amount, date, category and investment orderings.
    * search tests - description, date, category, amount range and type.
    * report tests - monthly totals and the percentage guard.
"""

from __future__ import annotations

import pytest

from pocketledger.finance import LedgerStore
from pocketledger.records import (
    Category,
    Investment,
    InvestmentKind,
    LedgerDate,
    Transaction,
    UpcomingPayment,
)


def _day(day: int, month: int = 5, year: int = 2024) -> LedgerDate:
    return LedgerDate.from_fields(day, month, year)


@pytest.fixture()
def store() -> LedgerStore:
    return LedgerStore(
        transactions=[
            Transaction.income(1500, "Salary", date=_day(1)),
            Transaction.expenditure(80, "Groceries", date=_day(3), category=Category.FOOD),
            Transaction.expenditure(600, "Rent", date=_day(2), category=Category.HOUSING),
            Transaction.expenditure(45, "Bus pass", date=_day(3), category=Category.TRANSPORTATION),
            Transaction.expenditure(30, "Cinema", date=_day(9, 4), category=Category.ENTERTAINMENT),
        ],
        investments=[
            Investment.fixed_deposit(1000, 3, start_date=_day(1)),
            Investment.recurring_plan(500, 1, 50, start_date=_day(2)),
            Investment.fixed_deposit(250, 5, start_date=_day(3)),
        ],
    )


def test_delete_transaction_removes_one_and_shifts(store: LedgerStore) -> None:
    assert store.delete_transaction(1) is True
    assert store.transaction_count == 4
    assert [t.description for t in store.transactions] == ["Salary", "Rent", "Bus pass", "Cinema"]


@pytest.mark.parametrize("index", [-1, 5, 99])
def test_delete_out_of_range_leaves_store_unchanged(store: LedgerStore, index: int) -> None:
    before = store.transactions
    assert store.delete_transaction(index) is False
    assert store.transactions == before
    assert store.delete_investment(index if index < 0 else 3) is False
    assert store.investment_count == 3


def test_update_replaces_in_place(store: LedgerStore) -> None:
    replacement = Transaction.expenditure(90, "Market", date=_day(4), category=Category.FOOD)
    assert store.update_transaction(1, replacement) is True
    assert store.get_transaction(1) == replacement
    assert store.transaction_count == 5
    assert store.update_transaction(5, replacement) is False

    deposit = Investment.fixed_deposit(2000, 2, start_date=_day(5))
    assert store.update_investment(0, deposit) is True
    assert store.get_investment(0) == deposit
    assert store.update_investment(-1, deposit) is False
    assert store.get_investment(3) is None


def test_sort_transactions_by_amount(store: LedgerStore) -> None:
    store.sort_transactions_by_amount(True)
    amounts = [t.amount for t in store.transactions]
    assert amounts == sorted(amounts)

    store.sort_transactions_by_amount(False)
    amounts = [t.amount for t in store.transactions]
    assert amounts == sorted(amounts, reverse=True)


def test_sort_transactions_by_date_and_category(store: LedgerStore) -> None:
    store.sort_transactions_by_date(True)
    keys = [t.date.sort_key for t in store.transactions]
    assert keys == sorted(keys)
    assert store.transactions[0].description == "Cinema"

    store.sort_transactions_by_date(False)
    assert store.transactions[-1].description == "Cinema"

    store.sort_transactions_by_category()
    assert [t.category for t in store.transactions] == [
        Category.INCOME,
        Category.FOOD,
        Category.HOUSING,
        Category.TRANSPORTATION,
        Category.ENTERTAINMENT,
    ]


def test_sort_investments(store: LedgerStore) -> None:
    store.sort_investments_by_amount(True)
    assert [i.amount for i in store.investments] == [250, 500, 1000]
    store.sort_investments_by_duration(False)
    assert [i.duration_years for i in store.investments] == [5, 3, 1]


def test_searches_preserve_store_order(store: LedgerStore) -> None:
    assert [t.description for t in store.search_transactions_by_description("s")] == [
        "Groceries",
        "Bus pass",
    ]
    assert store.search_transactions_by_description("salary") == []
    assert [t.description for t in store.search_transactions_by_date(_day(3))] == ["Groceries", "Bus pass"]
    assert [t.description for t in store.search_transactions_by_category(Category.HOUSING)] == ["Rent"]
    assert [i.amount for i in store.search_investments_by_amount_range(250, 500)] == [500, 250]
    assert [i.amount for i in store.search_investments_by_type(InvestmentKind.FIXED_DEPOSIT)] == [1000, 250]


def test_description_index_keeps_deleted_descriptions(store: LedgerStore) -> None:
    """Suggestions accumulate; deleting a transaction does not forget its text."""

    assert store.description_suggestions("Ren") == ["Rent"]
    store.delete_transaction(2)
    assert store.search_transactions_by_description("Rent") == []
    assert store.description_suggestions("Ren") == ["Rent"]


def test_monthly_report_breakdown(store: LedgerStore) -> None:
    report = store.generate_monthly_report(5, 2024)

    assert report.total_income == pytest.approx(1500)
    assert report.total_expense == pytest.approx(725)
    assert report.net_savings == pytest.approx(775)
    assert [share.category for share in report.breakdown] == [
        Category.FOOD,
        Category.HOUSING,
        Category.TRANSPORTATION,
    ]
    assert report.breakdown[1].percentage == pytest.approx(600 / 725 * 100)
    lines = report.as_lines()
    assert lines[0] == "----- Monthly Report for 5/2024 -----"
    assert any(line.strip().startswith("Housing: 600.00 (82.8%)") for line in lines)


def test_monthly_report_without_expenditure_omits_percentages() -> None:
    store = LedgerStore(transactions=[Transaction.income(900, "Salary", date=_day(1, 6))])
    report = store.generate_monthly_report(6, 2024)

    assert report.breakdown == []
    assert report.net_savings == pytest.approx(report.total_income)
    assert not any("%" in line for line in report.as_lines())


def test_upcoming_payments_through_store() -> None:
    store = LedgerStore()
    store.add_upcoming_payment(UpcomingPayment(_day(9), "Insurance", 120.0))
    store.add_upcoming_payment(UpcomingPayment(_day(1), "Rent", 600.0, is_investment=False))
    assert [p.description for p in store.upcoming_payments()] == ["Rent", "Insurance"]
    assert len(store.upcoming_payments()) == 2


def test_export_snapshot_groups_records(store: LedgerStore) -> None:
    snapshot = store.export_snapshot()
    assert len(snapshot["income"]) == 1
    assert len(snapshot["expenses"]) == 4
    assert snapshot["investments"][0]["maturity_amount"] == pytest.approx(1000 * 1.071**3)
