"""Mini README: Tests for the flat-file ledger format.

These tests confirm snapshots reload with the same amounts, dates and
categories, that multi-word descriptions survive the quoted encoding, and that
older bare-description files still load with their documented lossy quirks
(first-word truncation, unknown categories becoming ``Other``, unvalidated
dates). Failures must leave the store untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pocketledger.finance import LedgerStore
from pocketledger.persistence import (
    LedgerFormatError,
    backup_ledger,
    decode_investment,
    decode_transaction,
    encode_investment,
    encode_transaction,
    load_ledger,
    save_ledger,
)
from pocketledger.records import Category, Investment, InvestmentKind, LedgerDate, Transaction, TransactionKind


def _populated_store() -> LedgerStore:
    return LedgerStore(
        transactions=[
            Transaction.income(1500.5, "Salary", date=LedgerDate.from_fields(1, 5, 2024)),
            Transaction.expenditure(
                80.25, "Groceries", date=LedgerDate.from_fields(3, 5, 2024), category=Category.FOOD
            ),
        ],
        investments=[
            Investment.fixed_deposit(1000, 3, start_date=LedgerDate.from_fields(1, 1, 2024)),
            Investment.recurring_plan(500, 2, 75.5, start_date=LedgerDate.from_fields(2, 2, 2024)),
        ],
    )


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    original = _populated_store()
    path = tmp_path / "nested" / "alice_finance_data.txt"
    assert save_ledger(original, path) is True

    restored = LedgerStore(transactions=[Transaction.income(1, "Stale")])
    balance = load_ledger(restored, path, 2000.0)

    assert restored.transactions == original.transactions
    assert restored.investments == original.investments
    assert balance == pytest.approx(2000.0 + 1500.5 - 80.25 - 1000 - 500)


def test_file_layout_matches_count_prefixed_format(tmp_path: Path) -> None:
    path = tmp_path / "ledger.txt"
    save_ledger(_populated_store(), path)
    lines = path.read_text(encoding="utf-8").splitlines()

    assert lines[0] == "2"
    assert lines[1] == "I 1500.5 Salary 1 5 2024 Income"
    assert lines[2] == "E 80.25 Groceries 3 5 2024 Food"
    assert lines[3] == "2"
    assert lines[4] == "FD 1000.0 3 1 1 2024"
    assert lines[5] == "SIP 500.0 2 2 2 2024 75.5"


def test_multi_word_descriptions_are_quoted_and_survive(tmp_path: Path) -> None:
    store = LedgerStore(
        transactions=[
            Transaction.expenditure(12, "Weekly groceries", date=LedgerDate.from_fields(1, 1, 2024)),
            Transaction.expenditure(3, "Mom's gift", date=LedgerDate.from_fields(2, 1, 2024)),
            Transaction.income(7, "", date=LedgerDate.from_fields(3, 1, 2024)),
        ]
    )
    path = tmp_path / "ledger.txt"
    save_ledger(store, path)

    restored = LedgerStore()
    assert load_ledger(restored, path, 0.0) is not None
    assert [t.description for t in restored.transactions] == ["Weekly groceries", "Mom's gift", ""]


def test_legacy_multi_word_description_is_truncated_at_first_space() -> None:
    """Bare multi-word descriptions from older files keep only their first word."""

    transaction = decode_transaction("E 200 Weekly groceries run 3 5 2024 Food")

    assert transaction.description == "Weekly"
    assert transaction.date == LedgerDate.from_fields(3, 5, 2024)
    assert transaction.category is Category.FOOD
    assert transaction.kind is TransactionKind.EXPENDITURE


def test_legacy_lines_with_quotes_and_unknown_categories() -> None:
    transaction = decode_transaction("E 20 Mom's 1 2 2024 Gifts")
    assert transaction.description == "Mom's"
    assert transaction.category is Category.OTHER

    odd_date = decode_transaction("I 10 Bonus 31 2 2024 Income")
    assert odd_date.date.to_display_string() == "31/2/2024"


def test_codecs_reject_malformed_lines() -> None:
    with pytest.raises(LedgerFormatError):
        decode_transaction("X 10 Thing 1 1 2024 Food")
    with pytest.raises(LedgerFormatError):
        decode_transaction("I ten Thing 1 1 2024 Food")
    with pytest.raises(LedgerFormatError):
        decode_transaction("I 10 Thing 1 1")
    with pytest.raises(LedgerFormatError):
        decode_investment("SIP 500 2 1 1 2024")
    with pytest.raises(LedgerFormatError):
        decode_investment("BOND 500 2 1 1 2024")


def test_investment_codec_keeps_conditional_monthly_field() -> None:
    deposit = Investment.fixed_deposit(1000, 2, start_date=LedgerDate.from_fields(1, 1, 2024))
    plan = decode_investment("SIP 500 2 2 2 2024 75")

    assert encode_investment(deposit) == "FD 1000.0 2 1 1 2024"
    assert plan.kind is InvestmentKind.RECURRING_PLAN
    assert plan.monthly_contribution == pytest.approx(75)
    assert encode_transaction(Transaction.income(5, "Tip", date=LedgerDate.from_fields(9, 9, 2024))) == (
        "I 5.0 Tip 9 9 2024 Income"
    )


def test_load_missing_file_returns_none_and_keeps_store(tmp_path: Path) -> None:
    store = _populated_store()
    assert load_ledger(store, tmp_path / "absent.txt", 2000.0) is None
    assert store.transaction_count == 2


def test_load_malformed_file_returns_none_and_keeps_store(tmp_path: Path) -> None:
    path = tmp_path / "broken.txt"
    path.write_text("3\nI 10 Tip 1 1 2024 Income\n", encoding="utf-8")
    store = _populated_store()

    assert load_ledger(store, path, 2000.0) is None
    assert store.transaction_count == 2
    assert store.investment_count == 2


def test_load_legacy_file(tmp_path: Path) -> None:
    path = tmp_path / "legacy.txt"
    path.write_text(
        "2\nI 500 Salary 1 5 2024 Income\nE 200 Food 2 5 2024 Food\n1\nFD 100 2 3 5 2024\n",
        encoding="utf-8",
    )
    store = LedgerStore()

    balance = load_ledger(store, path, 2000.0)

    assert balance == pytest.approx(2000 + 500 - 200 - 100)
    assert [t.amount for t in store.transactions] == [500.0, 200.0]
    assert store.description_suggestions("Sal") == ["Salary"]


def test_save_failure_returns_false(tmp_path: Path) -> None:
    assert save_ledger(_populated_store(), tmp_path) is False


def test_legacy_empty_description_reads_as_two_adjacent_spaces(tmp_path: Path) -> None:
    blank = decode_transaction("I 7  3 1 2024 Income")
    assert blank.description == ""
    assert blank.amount == pytest.approx(7)
    assert blank.date == LedgerDate.from_fields(3, 1, 2024)

    path = tmp_path / "legacy.txt"
    path.write_text("2\nI 500 Salary 1 5 2024 Income\nI 7  3 1 2024 Income\n0\n", encoding="utf-8")
    store = LedgerStore()

    assert load_ledger(store, path, 2000.0) == pytest.approx(2507)
    assert [t.description for t in store.transactions] == ["Salary", ""]


def test_legacy_bare_descriptions_keep_backslashes_and_inner_quotes() -> None:
    assert decode_transaction(r"E 10 C:\bills 1 1 2024 Food").description == r"C:\bills"
    assert decode_transaction('E 5 say"hi" 1 1 2024 Other').description == 'say"hi"'
    assert decode_transaction("E 5 it's 1 1 2024 Other").description == "it's"


def test_encoded_awkward_descriptions_decode_unchanged() -> None:
    for text in (r"C:\bills", 'say "hi"', "'quoted'", ""):
        line = encode_transaction(Transaction.expenditure(5, text, date=LedgerDate.from_fields(1, 1, 2024)))
        assert decode_transaction(line).description == text


def test_missing_file_is_not_logged_as_a_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    assert load_ledger(LedgerStore(), tmp_path / "absent.txt", 0.0) is None

    assert not [record for record in caplog.records if record.levelno >= logging.WARNING]


def test_backup_ledger_copies_file_aside(tmp_path: Path) -> None:
    path = tmp_path / "bob_finance_data.txt"
    path.write_text("garbage\n", encoding="utf-8")

    backup = backup_ledger(path)

    assert backup == tmp_path / "bob_finance_data.txt.bak"
    assert backup.read_text(encoding="utf-8") == "garbage\n"
    assert backup_ledger(tmp_path / "absent.txt") is None
