"""Mini README: Whole-ledger snapshots in a whitespace-delimited text file.

Structure:
    * LedgerFormatError - raised by the line codecs for unreadable content.
    * encode_transaction / decode_transaction - one transaction per line.
    * encode_investment / decode_investment - one investment per line.
    * save_ledger - rewrite the file from the store.
    * load_ledger - replace the store from the file and recompute the balance.
    * backup_ledger - keep a ``.bak`` copy of a file before it is rewritten.

File layout::

    <transactionCount>
    <I|E> <amount> <description> <day> <month> <year> <categoryName>
    <investmentCount>
    <FD|SIP> <amount> <durationYears> <day> <month> <year> [<monthly> for SIP]

Descriptions that are empty or contain whitespace, quotes or backslashes are
written shell-quoted so they survive a reload. Older files wrote descriptions
bare: such a description runs to the next single space, so an empty one is two
adjacent spaces and backslashes or inner quotes are kept verbatim. When a bare
line carries a multi-word description only its first word is kept and the date
and category are read from the end of the line. A bare description that itself
starts with a quote character is read as a quoted one. Line breaks inside a
description are flattened to spaces. Unknown category names load as ``Other`` and dates are
never validated.
"""

from __future__ import annotations

import shlex
import shutil
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from ..finance import LedgerStore
from ..logging_utils import get_logger
from ..records import (
    Category,
    Investment,
    InvestmentKind,
    LedgerDate,
    Transaction,
    TransactionKind,
)

LOGGER = get_logger(__name__)

# day, month, year and category follow every transaction description
_TRAILING_FIELDS = 4
_FIXED_DEPOSIT_FIELDS = 6
_RECURRING_PLAN_FIELDS = 7

_Number = TypeVar("_Number", int, float)
_Record = TypeVar("_Record", Transaction, Investment)


class LedgerFormatError(ValueError):
    """Raised when a ledger file line cannot be decoded."""


def _encode_description(description: str) -> str:
    flattened = " ".join(description.splitlines()) if description else description
    if flattened and not any(character.isspace() or character in "'\"\\" for character in flattened):
        return flattened
    return shlex.quote(flattened)


def _split_description(remainder: str) -> Tuple[str, List[str]]:
    """Split the text after the amount into the description and trailing fields."""

    if remainder[:1] in ("'", '"'):
        try:
            tokens = shlex.split(remainder)
        except ValueError:
            LOGGER.debug("Unbalanced quotes in %r; reading it as a bare description", remainder)
        else:
            if tokens:
                return tokens[0], tokens[1:]
    # Bare descriptions end at the next single space, so an empty one shows up
    # as two adjacent spaces.
    description, _, rest = remainder.partition(" ")
    return description, rest.split()


def _parse_number(token: str, cast: Callable[[str], _Number], label: str) -> _Number:
    try:
        return cast(token)
    except ValueError as error:
        raise LedgerFormatError(f"Invalid {label}: {token!r}") from error


def _parse_date(tokens: List[str]) -> LedgerDate:
    day, month, year = (_parse_number(token, int, "date field") for token in tokens)
    return LedgerDate.from_fields(day, month, year)


def encode_transaction(transaction: Transaction) -> str:
    date = transaction.date
    return " ".join(
        [
            transaction.kind.code,
            repr(transaction.amount),
            _encode_description(transaction.description),
            str(date.day),
            str(date.month),
            str(date.year),
            transaction.category.value,
        ]
    )


def decode_transaction(line: str) -> Transaction:
    """Decode a transaction line, accepting the legacy bare-description form."""

    parts = line.strip().split(" ", 2)
    if len(parts) < 3:
        raise LedgerFormatError(f"Transaction line has too few fields: {line!r}")
    code, amount_token, remainder = parts
    try:
        kind = TransactionKind.from_code(code)
    except ValueError as error:
        raise LedgerFormatError(str(error)) from error
    amount = _parse_number(amount_token, float, "amount")
    description, trailing = _split_description(remainder)
    if len(trailing) < _TRAILING_FIELDS:
        raise LedgerFormatError(f"Transaction line has too few fields: {line!r}")
    if len(trailing) > _TRAILING_FIELDS:
        LOGGER.warning("Truncated multi-word description to %r", description)
    date = _parse_date(trailing[-4:-1])
    category = Category.from_name(trailing[-1])
    return Transaction(amount=amount, description=description, date=date, category=category, kind=kind)


def encode_investment(investment: Investment) -> str:
    date = investment.start_date
    fields = [
        investment.kind.value,
        repr(investment.amount),
        str(investment.duration_years),
        str(date.day),
        str(date.month),
        str(date.year),
    ]
    if investment.kind is InvestmentKind.RECURRING_PLAN:
        fields.append(repr(investment.monthly_contribution or 0.0))
    return " ".join(fields)


def decode_investment(line: str) -> Investment:
    tokens = line.split()
    if not tokens:
        raise LedgerFormatError("Investment line is empty")
    try:
        kind = InvestmentKind(tokens[0])
    except ValueError as error:
        raise LedgerFormatError(f"Unsupported investment type: {tokens[0]!r}") from error
    expected = _RECURRING_PLAN_FIELDS if kind is InvestmentKind.RECURRING_PLAN else _FIXED_DEPOSIT_FIELDS
    if len(tokens) != expected:
        raise LedgerFormatError(f"{kind.value} line expects {expected} fields: {line!r}")
    amount = _parse_number(tokens[1], float, "amount")
    duration = _parse_number(tokens[2], int, "duration")
    start_date = _parse_date(tokens[3:6])
    if kind is InvestmentKind.RECURRING_PLAN:
        monthly = _parse_number(tokens[6], float, "monthly contribution")
        return Investment.recurring_plan(amount, duration, monthly, start_date=start_date)
    return Investment.fixed_deposit(amount, duration, start_date=start_date)


def save_ledger(store: LedgerStore, path: Path) -> bool:
    """Rewrite ``path`` with every record in the store."""

    path = Path(path)
    transactions = store.transactions
    investments = store.investments
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as ledger_file:
            ledger_file.write(f"{len(transactions)}\n")
            for transaction in transactions:
                ledger_file.write(encode_transaction(transaction) + "\n")
            ledger_file.write(f"{len(investments)}\n")
            for investment in investments:
                ledger_file.write(encode_investment(investment) + "\n")
    except OSError as error:
        LOGGER.warning("Unable to save ledger to %s: %s", path, error)
        return False
    LOGGER.info(
        "Saved %s transactions and %s investments to %s",
        len(transactions),
        len(investments),
        path,
    )
    return True


def backup_ledger(path: Path) -> Optional[Path]:
    """Copy ``path`` to ``<name>.bak`` beside it and return the copy's path."""

    path = Path(path)
    backup = path.with_name(f"{path.name}.bak")
    try:
        shutil.copy2(path, backup)
    except OSError as error:
        LOGGER.warning("Unable to back up ledger %s: %s", path, error)
        return None
    LOGGER.info("Backed up ledger %s to %s", path, backup)
    return backup


def _read_count(lines: Iterator[str], label: str) -> int:
    line = next(lines, None)
    if line is None:
        raise LedgerFormatError(f"Missing {label} count")
    count = _parse_number(line.strip(), int, f"{label} count")
    if count < 0:
        raise LedgerFormatError(f"Negative {label} count: {count}")
    return count


def _read_records(
    lines: Iterator[str],
    count: int,
    decoder: Callable[[str], _Record],
    label: str,
) -> List[_Record]:
    records: List[_Record] = []
    for _ in range(count):
        line = next(lines, None)
        if line is None:
            raise LedgerFormatError(f"Expected {count} {label} lines, found {len(records)}")
        records.append(decoder(line))
    return records


def parse_ledger(text: str) -> Tuple[List[Transaction], List[Investment]]:
    """Decode the full file contents into transactions and investments."""

    lines = (line for line in text.splitlines() if line.strip())
    transactions = _read_records(lines, _read_count(lines, "transaction"), decode_transaction, "transaction")
    investments = _read_records(lines, _read_count(lines, "investment"), decode_investment, "investment")
    return transactions, investments


def load_ledger(store: LedgerStore, path: Path, opening_balance: float) -> Optional[float]:
    """Replace the store contents from ``path``.

    Returns the balance obtained by applying every loaded record's effect to
    ``opening_balance``, or ``None`` when the file cannot be read or decoded.
    The store is only modified when the whole file decodes successfully.
    """

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as ledger_file:
            text = ledger_file.read()
    except FileNotFoundError:
        LOGGER.info("No ledger file at %s yet", path)
        return None
    except OSError as error:
        LOGGER.warning("Unable to open ledger %s: %s", path, error)
        return None

    try:
        transactions, investments = parse_ledger(text)
    except LedgerFormatError as error:
        LOGGER.warning("Ledger %s is malformed: %s", path, error)
        return None

    store.replace_contents(transactions, investments)
    balance = opening_balance
    for record in [*transactions, *investments]:
        balance += record.balance_effect
    LOGGER.info("Loaded ledger %s; balance recomputed to %.2f", path, balance)
    return balance
