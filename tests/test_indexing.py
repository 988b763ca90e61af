"""Mini README: Tests for the description trie and the upcoming payment queue.

These tests confirm prefix suggestions behave as an auto-complete source
(case-sensitive, idempotent, empty on unknown prefixes) and that payments are
always presented by due date without being consumed.
"""

from __future__ import annotations

from pocketledger.indexing import DescriptionIndex, UpcomingPaymentQueue
from pocketledger.records import LedgerDate, UpcomingPayment


def test_suggestions_return_every_description_with_prefix() -> None:
    index = DescriptionIndex()
    index.insert("Groceries")
    index.insert("Gross")
    index.insert("Salary")

    assert sorted(index.suggestions("Gro")) == ["Groceries", "Gross"]
    assert index.suggestions("Sal") == ["Salary"]
    assert index.suggestions("Salary") == ["Salary"]
    assert index.suggestions("Rent") == []


def test_suggestions_empty_when_only_unrelated_text_indexed() -> None:
    index = DescriptionIndex()
    index.insert("Salary")
    assert index.suggestions("Gro") == []


def test_insert_is_idempotent_and_case_sensitive() -> None:
    index = DescriptionIndex()
    index.insert("Rent")
    index.insert("Rent")
    index.insert("rent")
    index.insert("")

    assert len(index) == 2
    assert "Rent" in index
    assert "Ren" not in index
    assert "" not in index
    assert index.suggestions("R") == ["Rent"]
    assert sorted(index.suggestions("")) == ["Rent", "rent"]


def test_prefix_words_and_longer_words_both_suggested() -> None:
    index = DescriptionIndex()
    index.insert("Bus")
    index.insert("Bus pass")
    assert index.suggestions("Bu") == ["Bus", "Bus pass"]


def _payment(day: int, month: int, year: int, description: str) -> UpcomingPayment:
    return UpcomingPayment(
        due_date=LedgerDate.from_fields(day, month, year),
        description=description,
        amount=100.0,
    )


def test_queue_orders_by_due_date_without_consuming() -> None:
    queue = UpcomingPaymentQueue()
    queue.push(_payment(1, 3, 2025, "Insurance"))
    queue.push(_payment(15, 1, 2025, "Rent"))
    queue.push(_payment(2, 12, 2024, "Phone"))
    queue.push(_payment(20, 1, 2025, "Gym"))

    first = [payment.description for payment in queue.peek_all_ordered_by_due_date()]
    second = [payment.description for payment in queue.peek_all_ordered_by_due_date()]

    assert first == ["Phone", "Rent", "Gym", "Insurance"]
    assert second == first
    assert len(queue) == 4
    assert queue.peek().description == "Phone"


def test_queue_keeps_scheduling_order_for_same_day() -> None:
    queue = UpcomingPaymentQueue()
    queue.push(_payment(5, 5, 2025, "First"))
    queue.push(_payment(5, 5, 2025, "Second"))
    queue.push(_payment(4, 5, 2025, "Earlier"))

    ordered = [payment.description for payment in queue.peek_all_ordered_by_due_date()]
    assert ordered == ["Earlier", "First", "Second"]


def test_empty_queue() -> None:
    queue = UpcomingPaymentQueue()
    assert queue.peek() is None
    assert queue.peek_all_ordered_by_due_date() == []
    assert len(queue) == 0
