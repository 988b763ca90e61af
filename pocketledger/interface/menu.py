"""Mini README: Numbered interactive menu driving a ledger session.

Structure:
    * LedgerMenu - reads selections from a Console and calls the session.

Every action returns to the menu; bad input is reported and never aborts the
loop. Typing a description ending in ``?`` lists suggestions for the text
before it (for example ``Gro?``) and asks again. The session is saved when the
user exits with ``0``.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..logging_utils import get_logger
from ..records import Category, Investment, InvestmentKind, LedgerDate, Transaction
from ..session import LedgerSession
from .console import Console, format_table

LOGGER = get_logger(__name__)

TRANSACTION_HEADERS = ("Type", "Date", "Amount", "Category", "Description")
TRANSACTION_WIDTHS = (15, 12, 15, 15, 20)
INVESTMENT_HEADERS = ("Type", "Amount", "Duration", "Start Date", "Monthly amount", "Maturity")
INVESTMENT_WIDTHS = (15, 15, 15, 15, 20, 15)
PAYMENT_HEADERS = ("Date", "Description", "Amount", "Type")
PAYMENT_WIDTHS = (12, 20, 15, 15)


class _InvalidInput(ValueError):
    """Raised by prompt helpers when an answer cannot be parsed."""


class LedgerMenu:
    """Interactive loop over the ledger operations."""

    def __init__(self, session: LedgerSession, console: Console) -> None:
        self.session = session
        self.console = console
        self._actions: List[Tuple[int, str, Callable[[], None]]] = [
            (1, "Record Income", self.record_income),
            (2, "Record Expenditure", self.record_expenditure),
            (3, "Make Investment", self.make_investment),
            (4, "Finance Information", self.show_ledger),
            (5, "Investment Information", self.show_investments),
            (6, "Monthly Report", self.monthly_report),
            (7, "Save Data", self.save),
            (8, "Add Upcoming Payment", self.add_upcoming_payment),
            (9, "Upcoming Payments", self.show_upcoming_payments),
            (10, "Search Transactions", self.search_transactions),
            (11, "Search Investments", self.search_investments),
            (12, "Delete Record", self.delete_record),
            (13, "Update Record", self.update_record),
            (14, "Sort Records", self.sort_records),
        ]
        self._dispatch: Dict[int, Callable[[], None]] = {key: action for key, _, action in self._actions}

    def run(self) -> None:
        """Serve menu selections until the user chooses ``0``."""

        while True:
            lines = ["", "--CHOOSE--"]
            lines.extend(f"{key}. {label}" for key, label, _ in self._actions)
            lines.append("0. Exit")
            self.console.present(lines)
            choice = _parse_int(self.console.ask("Enter choice"))
            if choice == 0:
                self.console.say("Exiting...")
                break
            action = self._dispatch.get(choice) if choice is not None else None
            if action is None:
                self.console.say("Invalid choice!")
                continue
            try:
                action()
            except _InvalidInput as error:
                LOGGER.debug("Menu input rejected: %s", error)
                self.console.say(f"Invalid input! {error}")
            self.console.pause()

        if self.session.save():
            self.console.say("Data saved.")
            if self.session.backup_file is not None:
                self.console.say(f"Previous unreadable data kept in {self.session.backup_file}")
        else:
            self.console.say("Error saving data!")

    def _ask_int(self, prompt: str) -> int:
        answer = self.console.ask(prompt)
        value = _parse_int(answer)
        if value is None:
            raise _InvalidInput(f"expected a whole number, got {answer!r}")
        return value

    def _ask_float(self, prompt: str) -> float:
        answer = self.console.ask(prompt)
        try:
            value = float(answer.strip())
        except ValueError as error:
            raise _InvalidInput(f"expected a number, got {answer!r}") from error
        if not math.isfinite(value):
            raise _InvalidInput(f"expected a finite number, got {answer!r}")
        return value

    def _ask_date(self, prompt: str) -> LedgerDate:
        answer = self.console.ask(f"{prompt} (day month year)")
        parts = answer.replace("/", " ").split()
        values = [_parse_int(part) for part in parts]
        if len(values) != 3 or any(value is None for value in values):
            raise _InvalidInput(f"expected day month year, got {answer!r}")
        return LedgerDate.from_fields(*values)

    def _ask_description(self, prompt: str) -> str:
        while True:
            answer = self.console.ask(f"{prompt} (end with ? for suggestions)")
            if not answer.endswith("?"):
                return answer
            suggestions = self.session.suggest_descriptions(answer[:-1])
            if suggestions:
                self.console.present(["Suggestions:", *(f"  {text}" for text in suggestions)])
            else:
                self.console.say("No suggestions.")

    def _choose(self, title: str, options: Sequence[str]) -> int:
        lines = [title]
        lines.extend(f"{number}. {option}" for number, option in enumerate(options, start=1))
        self.console.present(lines)
        return self._ask_int("Enter choice")

    def _choose_expense_category(self) -> Category:
        categories = Category.expense_categories()
        choice = self._choose("Select category:", [category.value for category in categories])
        if 1 <= choice <= len(categories):
            return categories[choice - 1]
        return Category.OTHER

    def _choose_any_category(self) -> Category:
        categories = list(Category)
        choice = self._choose("Select category:", [category.value for category in categories])
        if 1 <= choice <= len(categories):
            return categories[choice - 1]
        return Category.OTHER

    def _choose_investment_kind(self) -> Optional[InvestmentKind]:
        """Pick a kind by number, or by its short name such as ``FD`` or ``sip``."""

        kinds = list(InvestmentKind)
        lines = ["Select investment type:"]
        lines.extend(f"{number}. {kind.label}" for number, kind in enumerate(kinds, start=1))
        self.console.present(lines)
        answer = self.console.ask("Enter choice or type (FD/SIP)")
        choice = _parse_int(answer)
        if choice is None:
            try:
                return InvestmentKind.from_name(answer)
            except ValueError as error:
                raise _InvalidInput(str(error)) from error
        if 1 <= choice <= len(kinds):
            return kinds[choice - 1]
        return None

    def _present_transactions(self, transactions: Sequence[Transaction], *, indexed: bool = False) -> None:
        headers: Tuple[str, ...] = TRANSACTION_HEADERS
        widths: Tuple[int, ...] = TRANSACTION_WIDTHS
        rows = [transaction.display_fields() for transaction in transactions]
        if indexed:
            headers = ("Index", *headers)
            widths = (5, *widths)
            rows = [(str(index), *row) for index, row in enumerate(rows)]
        self.console.present(format_table(headers, rows, widths))

    def _present_investments(self, investments: Sequence[Investment], *, indexed: bool = False) -> None:
        headers: Tuple[str, ...] = INVESTMENT_HEADERS
        widths: Tuple[int, ...] = INVESTMENT_WIDTHS
        rows = [investment.display_fields() for investment in investments]
        if indexed:
            headers = ("Index", *headers)
            widths = (5, *widths)
            rows = [(str(index), *row) for index, row in enumerate(rows)]
        self.console.present(format_table(headers, rows, widths))

    def record_income(self) -> None:
        amount = self._ask_float("Enter amount")
        description = self._ask_description("Enter description")
        if self.session.record_income(amount, description):
            self.console.say("Income recorded successfully!")
        else:
            self.console.say("Invalid amount!")

    def record_expenditure(self) -> None:
        amount = self._ask_float("Enter amount")
        description = self._ask_description("Enter description")
        category = self._choose_expense_category()
        if self.session.record_expenditure(amount, description, category):
            self.console.say("Expenditure recorded successfully!")
        else:
            self.console.say("Invalid amount or insufficient balance!")

    def make_investment(self) -> None:
        kind = self._choose_investment_kind()
        if kind is None:
            self.console.say("Invalid choice!")
            return
        amount = self._ask_float("Enter amount")
        duration = self._ask_int("Enter duration (in years)")
        monthly = None
        if kind is InvestmentKind.RECURRING_PLAN:
            monthly = self._ask_float("Enter monthly investment amount")
        if self.session.make_investment(kind, amount, duration, monthly):
            self.console.say(f"{kind.value} created successfully!")
        else:
            self.console.say("Invalid amount, duration or insufficient balance!")

    def show_ledger(self) -> None:
        self.console.present(
            [
                "-----------------------------------",
                "|        Personal Finance         |",
                "-----------------------------------",
                "",
                f"||--BALANCE--: {self.session.balance:.2f}||",
                "",
                "--TRANSACTIONS--",
            ]
        )
        self._present_transactions(self.session.store.transactions)
        self.console.present(["", "--INVESTMENTS--"])
        self._present_investments(self.session.store.investments)

    def show_investments(self) -> None:
        investments = self.session.store.investments
        self.console.present(["--INVESTMENTS--"])
        self._present_investments(investments)
        total = sum(investment.maturity_amount() for investment in investments)
        self.console.say(f"Total value at maturity: {total:.2f}")

    def monthly_report(self) -> None:
        month = self._ask_int("Enter month (1-12)")
        year = self._ask_int("Enter year")
        self.console.present(self.session.monthly_report(month, year).as_lines())

    def save(self) -> None:
        if self.session.save():
            self.console.say("Data saved successfully!")
        else:
            self.console.say("Error saving data!")

    def add_upcoming_payment(self) -> None:
        due_date = self._ask_date("Enter due date")
        amount = self._ask_float("Enter amount")
        description = self._ask_description("Enter description")
        if self.session.schedule_payment(due_date, description, amount):
            self.console.say("Upcoming payment added successfully!")
        else:
            self.console.say("Invalid amount!")

    def show_upcoming_payments(self) -> None:
        store = self.session.store
        upcoming = store.next_upcoming_payment()
        if upcoming is None:
            self.console.say("No upcoming payments.")
            return
        payments = store.upcoming_payments()
        self.console.present(["--UPCOMING PAYMENTS--"])
        self.console.present(
            format_table(PAYMENT_HEADERS, [payment.display_fields() for payment in payments], PAYMENT_WIDTHS)
        )
        self.console.say(f"Next due: {upcoming.description} on {upcoming.due_date} ({upcoming.amount:.2f})")

    def search_transactions(self) -> None:
        choice = self._choose(
            "--SEARCH TRANSACTIONS--",
            ["Search by Description", "Search by Date", "Search by Category"],
        )
        store = self.session.store
        if choice == 1:
            results = store.search_transactions_by_description(self.console.ask("Enter description to search for"))
        elif choice == 2:
            results = store.search_transactions_by_date(self._ask_date("Enter date"))
        elif choice == 3:
            results = store.search_transactions_by_category(self._choose_any_category())
        else:
            self.console.say("Invalid option!")
            return
        if not results:
            self.console.say("No matching transactions found.")
            return
        self.console.present(["", "--SEARCH RESULTS--"])
        self._present_transactions(results)

    def search_investments(self) -> None:
        choice = self._choose("--SEARCH INVESTMENTS--", ["Search by Amount Range", "Search by Type (FD/SIP)"])
        store = self.session.store
        if choice == 1:
            minimum = self._ask_float("Enter minimum amount")
            maximum = self._ask_float("Enter maximum amount")
            results = store.search_investments_by_amount_range(minimum, maximum)
        elif choice == 2:
            kind = self._choose_investment_kind() or InvestmentKind.RECURRING_PLAN
            results = store.search_investments_by_type(kind)
        else:
            self.console.say("Invalid option!")
            return
        if not results:
            self.console.say("No matching investments found.")
            return
        self.console.present(["", "--SEARCH RESULTS--"])
        self._present_investments(results)

    def delete_record(self) -> None:
        choice = self._choose("--DELETE RECORD--", ["Delete Transaction", "Delete Investment"])
        store = self.session.store
        if choice == 1:
            if not store.transaction_count:
                self.console.say("No transactions to delete!")
                return
            self._present_transactions(store.transactions, indexed=True)
            index = self._ask_int("Enter index of transaction to delete")
            deleted = self.session.delete_transaction(index)
            self.console.say("Transaction deleted successfully!" if deleted else "Invalid index!")
        elif choice == 2:
            if not store.investment_count:
                self.console.say("No investments to delete!")
                return
            self._present_investments(store.investments, indexed=True)
            index = self._ask_int("Enter index of investment to delete")
            deleted = self.session.delete_investment(index)
            self.console.say("Investment deleted successfully!" if deleted else "Invalid index!")
        else:
            self.console.say("Invalid option!")

    def update_record(self) -> None:
        choice = self._choose("--UPDATE RECORD--", ["Update Transaction", "Update Investment"])
        if choice == 1:
            self._update_transaction()
        elif choice == 2:
            self._update_investment()
        else:
            self.console.say("Invalid option!")

    def _update_transaction(self) -> None:
        store = self.session.store
        if not store.transaction_count:
            self.console.say("No transactions to update!")
            return
        self._present_transactions(store.transactions, indexed=True)
        index = self._ask_int("Enter index of transaction to update")
        if store.get_transaction(index) is None:
            self.console.say("Invalid index!")
            return
        kind_choice = self._choose("Select new transaction type:", ["Income", "Expenditure"])
        amount = self._ask_float("Enter new amount")
        description = self._ask_description("Enter new description")
        date = self._ask_date("Enter new date")
        if kind_choice == 1:
            replacement = Transaction.income(amount, description, date=date)
        else:
            replacement = Transaction.expenditure(
                amount, description, date=date, category=self._choose_expense_category()
            )
        updated = self.session.update_transaction(index, replacement)
        self.console.say("Transaction updated successfully!" if updated else "Update failed!")

    def _update_investment(self) -> None:
        store = self.session.store
        if not store.investment_count:
            self.console.say("No investments to update!")
            return
        self._present_investments(store.investments, indexed=True)
        index = self._ask_int("Enter index of investment to update")
        if store.get_investment(index) is None:
            self.console.say("Invalid index!")
            return
        kind = self._choose_investment_kind() or InvestmentKind.RECURRING_PLAN
        amount = self._ask_float("Enter new amount")
        duration = self._ask_int("Enter new duration (in years)")
        start_date = self._ask_date("Enter new start date")
        if kind is InvestmentKind.FIXED_DEPOSIT:
            replacement = Investment.fixed_deposit(amount, duration, start_date=start_date)
        else:
            monthly = self._ask_float("Enter new monthly investment amount")
            replacement = Investment.recurring_plan(amount, duration, monthly, start_date=start_date)
        updated = self.session.update_investment(index, replacement)
        self.console.say("Investment updated successfully!" if updated else "Update failed!")

    def sort_records(self) -> None:
        choice = self._choose("--SORT RECORDS--", ["Sort Transactions", "Sort Investments"])
        store = self.session.store
        if choice == 1:
            field = self._choose(
                "Sort transactions by:",
                [
                    "Amount (Ascending)",
                    "Amount (Descending)",
                    "Date (Newest First)",
                    "Date (Oldest First)",
                    "Category",
                ],
            )
            sorters = {
                1: lambda: store.sort_transactions_by_amount(True),
                2: lambda: store.sort_transactions_by_amount(False),
                3: lambda: store.sort_transactions_by_date(False),
                4: lambda: store.sort_transactions_by_date(True),
                5: store.sort_transactions_by_category,
            }
            if field not in sorters:
                self.console.say("Invalid option!")
                return
            sorters[field]()
            self.console.present(["Transactions sorted successfully!", ""])
            self._present_transactions(store.transactions)
        elif choice == 2:
            field = self._choose(
                "Sort investments by:",
                [
                    "Amount (Ascending)",
                    "Amount (Descending)",
                    "Duration (Ascending)",
                    "Duration (Descending)",
                ],
            )
            sorters = {
                1: lambda: store.sort_investments_by_amount(True),
                2: lambda: store.sort_investments_by_amount(False),
                3: lambda: store.sort_investments_by_duration(True),
                4: lambda: store.sort_investments_by_duration(False),
            }
            if field not in sorters:
                self.console.say("Invalid option!")
                return
            sorters[field]()
            self.console.present(["Investments sorted successfully!", ""])
            self._present_investments(store.investments)
        else:
            self.console.say("Invalid option!")


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except (ValueError, AttributeError):
        return None
