"""
models.py - Data model definitions

This file defines the Category enumeration and the Expense dataclass used
across the store, the derived views and the UI.
Expenses only live in memory for the current session; to_dict() produces the
flat rows shown in the expense table.
"""

import datetime
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Union


class Category(Enum):
    """
    Fixed set of spending categories.

    Declaration order is the order shown in dropdowns and totals.
    """
    GROCERIES = "groceries"
    UTILITIES = "utilities"
    FOOD = "food"
    ELECTRICITY = "electricity"
    RENT = "rent"
    FUEL = "fuel"
    HOUSE_HELP = "houseHelp"

    @classmethod
    def all_values(cls) -> List["Category"]:
        """Return every category in declaration order."""
        return list(cls)

    @property
    def display_name(self) -> str:
        # only the first character changes: "houseHelp" -> "HouseHelp"
        return self.value[:1].upper() + self.value[1:]


def display_name(category: Category) -> str:
    return category.display_name


@dataclass(frozen=True)
class Expense:
    """
    Represents a single spending event.

    Fields:
      - date: when the expense happened (datetime, or a plain date)
      - amount: numeric amount in the configured currency; not validated here
      - description: optional free-text description
      - category: one of the Category values
      - id: unique id generated at creation, never reused

    Instances are immutable. Correcting an expense means removing it from the
    store and adding a new one.
    """
    date: Union[datetime.datetime, datetime.date]
    amount: float
    description: str = ""
    category: Category = Category.GROCERIES
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict:
        """
        Convert to a plain dict suitable for a table row.
        """
        return {
            "id": str(self.id),
            "date": self.date,
            "description": self.description,
            "category": self.category.display_name,
            "amount": self.amount,
        }
