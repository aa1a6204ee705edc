"""
views.py - values derived from the store or from raw form input

filter_by_category / total_for / totals_by_category are pure functions over
the current contents of an ExpenseStore. remaining() and SavingsGoal back the
Saver screen and never touch the store.

Amounts are returned unrounded; rounding to two decimals is done when
formatting for display.
"""

import logging
from typing import Dict, List, Optional

from expense_log.models import Category, Expense
from expense_log.parsing import InvalidNumberError, parse_decimal
from expense_log.tracker import ExpenseStore

logger = logging.getLogger(__name__)


def filter_by_category(store: ExpenseStore, category: Category) -> List[Expense]:
    """Expenses of `category`, in the store's insertion order."""
    return [e for e in store.list() if e.category == category]


def total_for(store: ExpenseStore, category: Category) -> float:
    """
    Sum of the amounts of `category`, accumulated left to right in list order.
    An empty category totals exactly 0.
    """
    total = 0.0
    for e in filter_by_category(store, category):
        total += e.amount
    return total


def totals_by_category(store: ExpenseStore) -> Dict[Category, float]:
    """total_for() for every category, in declaration order."""
    return {c: total_for(store, c) for c in Category.all_values()}


class CategoryTotals:
    """Per-category totals kept current by subscribing to the store."""

    def __init__(self, store: ExpenseStore):
        self.totals = totals_by_category(store)
        store.subscribe(self.refresh)

    def refresh(self, store: ExpenseStore) -> None:
        self.totals = totals_by_category(store)


def remaining(goal_text: str, saved_text: str) -> Optional[float]:
    """
    Amount still to save: max(0, goal - saved).

    Returns None when either text is not a number.
    """
    try:
        goal = parse_decimal(goal_text)
        saved = parse_decimal(saved_text)
    except InvalidNumberError as exc:
        logger.debug("Savings inputs not numeric: %s", exc)
        return None
    return max(0.0, goal - saved)


class SavingsGoal:
    """
    State of the Saver screen: the two raw inputs and the remaining amount.

    remaining_amount starts at 0 and is only replaced by a successful
    recompute; invalid input keeps the previous value.
    """

    def __init__(self, monthly_saving_goal: str = "", saved_amount: str = ""):
        self.monthly_saving_goal = monthly_saving_goal
        self.saved_amount = saved_amount
        self.remaining_amount = 0.0
        self.computed = False
        # the screen computes once when it is first shown
        self.recompute()

    def recompute(self) -> float:
        value = remaining(self.monthly_saving_goal, self.saved_amount)
        if value is not None:
            self.remaining_amount = value
            self.computed = True
        return self.remaining_amount

    def set_saved_amount(self, text: str) -> float:
        self.saved_amount = text
        return self.recompute()

    def set_monthly_saving_goal(self, text: str) -> float:
        self.monthly_saving_goal = text
        return self.recompute()
