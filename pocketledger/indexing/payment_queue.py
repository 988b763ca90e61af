"""Mini README: Due-date ordered queue of upcoming payments.

Structure:
    * UpcomingPaymentQueue - binary heap keyed on (year, month, day).

Payments are reminders only: nothing is ever dequeued, cancelled or edited.
Reading the full ordered list drains a copy of the heap so the queue keeps
every payment. Payments due on the same day keep their scheduling order.
"""

from __future__ import annotations

import heapq
from itertools import count
from typing import List, Optional, Tuple

from ..logging_utils import get_logger
from ..records import UpcomingPayment

LOGGER = get_logger(__name__)

_HeapEntry = Tuple[Tuple[int, int, int], int, UpcomingPayment]


class UpcomingPaymentQueue:
    """Append-only priority queue with the nearest due date on top."""

    def __init__(self) -> None:
        self._heap: List[_HeapEntry] = []
        self._sequence = count()

    def push(self, payment: UpcomingPayment) -> None:
        """Schedule ``payment`` in O(log n)."""

        heapq.heappush(self._heap, (payment.due_date.sort_key, next(self._sequence), payment))
        LOGGER.debug(
            "Scheduled payment %r due %s (%s queued)",
            payment.description,
            payment.due_date,
            len(self._heap),
        )

    def peek(self) -> Optional[UpcomingPayment]:
        """Return the payment due soonest without removing it."""

        if not self._heap:
            return None
        return self._heap[0][2]

    def peek_all_ordered_by_due_date(self) -> List[UpcomingPayment]:
        """Return all payments ascending by due date, leaving the queue intact."""

        working = list(self._heap)
        ordered: List[UpcomingPayment] = []
        while working:
            ordered.append(heapq.heappop(working)[2])
        return ordered

    def __len__(self) -> int:
        return len(self._heap)
