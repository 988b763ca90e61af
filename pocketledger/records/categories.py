"""Mini README: Spending and income classifications.

Structure:
    * Category - closed enumeration with exact-name string encoding.

Declaration order is significant: it is the order used when sorting
transactions by category and when listing the monthly expense breakdown.
Decoding is lossy on purpose; any unrecognised name becomes ``Other``.
"""

from __future__ import annotations

from enum import Enum
from typing import List


class Category(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "Income"
    FOOD = "Food"
    HOUSING = "Housing"
    TRANSPORTATION = "Transportation"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    OTHER = "Other"

    @classmethod
    def from_name(cls, value: str) -> "Category":
        """Decode an exact category name, falling back to ``Other``."""

        try:
            return cls(value)
        except ValueError:
            return cls.OTHER

    @classmethod
    def expense_categories(cls) -> List["Category"]:
        """Categories offered when recording an expenditure."""

        return [category for category in cls if category is not cls.INCOME]

    @property
    def rank(self) -> int:
        """Position of the category in declaration order."""

        return list(type(self)).index(self)

    def __str__(self) -> str:
        return self.value
