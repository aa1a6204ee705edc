"""
tracker.py - in-memory expense store

Responsibilities:
 - keep the ordered in-memory list of Expense objects for one session
 - create and remove expenses (expenses are never edited in place)
 - notify subscribers synchronously after every mutation so the views
   shown by the UI always reflect the post-mutation state

Nothing is persisted: the store lives for as long as the Streamlit session
that created it.
"""

import datetime
import logging
from typing import Callable, Iterator, List, Optional, Union

from expense_log import config
from expense_log.models import Category, Expense
from expense_log.parsing import InvalidNumberError, parse_decimal

# ensure a logger is available
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))


Subscriber = Callable[["ExpenseStore"], None]


class ExpenseStore:
    """
    Owns every Expense of a session, in insertion order.

    The UI creates one ExpenseStore per session and passes it to every
    component that reads or mutates it.
    """

    def __init__(self):
        # in-memory list of Expense objects, oldest first
        self._expenses: List[Expense] = []
        self._subscribers: List[Subscriber] = []

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self.list())

    def subscribe(self, callback: Subscriber) -> None:
        """Register `callback(store)`, invoked after every add/remove."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _notify(self) -> None:
        # copy so a callback may unsubscribe itself
        for callback in list(self._subscribers):
            callback(self)

    def add(
        self,
        date: Union[datetime.datetime, datetime.date],
        amount: float,
        description: str,
        category: Category,
    ) -> Expense:
        """
        Create an Expense with a fresh id, append it and notify subscribers.
        No validation is done on amount or description.
        """
        exp = Expense(date=date, amount=amount, description=description, category=category)
        self._expenses.append(exp)
        logger.info("Added expense id=%s (category=%s, amount=%s). Expenses=%d.",
                    exp.id, category.value, amount, len(self._expenses))
        self._notify()
        return exp

    def add_from_text(
        self,
        date: Union[datetime.datetime, datetime.date],
        amount_text: str,
        description: str,
        category: Category,
    ) -> Optional[Expense]:
        """
        Form boundary for add(): parse the raw amount text first.
        Returns None, without touching the store, when the amount is not a number.
        """
        try:
            amount = parse_decimal(amount_text)
        except InvalidNumberError as exc:
            logger.debug("Ignoring expense with invalid amount: %s", exc)
            return None
        return self.add(date, amount, description, category)

    def remove(self, expense: Expense) -> None:
        """Remove every record with the expense's id. Absent ids are a no-op."""
        before = len(self._expenses)
        self._expenses = [e for e in self._expenses if e.id != expense.id]
        if len(self._expenses) == before:
            logger.info("Expense id=%s not found", expense.id)
        else:
            logger.info("Deleted expense id=%s. Remaining expenses=%d.", expense.id, len(self._expenses))
        self._notify()

    def list(self) -> List[Expense]:
        """Return a copy of the expenses in insertion order."""
        return list(self._expenses)
