import datetime

import pytest
from expense_log.tracker import ExpenseStore
from expense_log.models import Category, Expense

D1 = datetime.datetime(2024, 3, 1, 9, 30)
D2 = datetime.datetime(2024, 3, 2, 18, 0)


def test_add_expense():
    store = ExpenseStore()
    exp = store.add(D1, 12.5, "milk", Category.GROCERIES)
    assert len(store) == 1
    assert store.list()[-1] is exp
    assert exp.amount == 12.5
    assert exp.description == "milk"
    assert exp.category == Category.GROCERIES
    assert exp.date == D1


def test_add_accepts_unvalidated_values():
    store = ExpenseStore()
    store.add(D1, 0.0, "", Category.FOOD)
    store.add(D1, -3.0, "refund", Category.FOOD)
    store.add(D1, float("inf"), "", Category.FOOD)
    assert [e.amount for e in store.list()] == [0.0, -3.0, float("inf")]


def test_ids_are_unique():
    store = ExpenseStore()
    for i in range(50):
        store.add(D1, float(i), "", Category.RENT)
    ids = [e.id for e in store.list()]
    assert len(set(ids)) == 50


def test_expense_is_immutable():
    store = ExpenseStore()
    exp = store.add(D1, 10.0, "fuel", Category.FUEL)
    with pytest.raises(AttributeError):
        exp.amount = 20.0


def test_insertion_order_preserved_across_removes():
    store = ExpenseStore()
    a = store.add(D1, 1.0, "a", Category.FOOD)
    b = store.add(D1, 2.0, "b", Category.RENT)
    c = store.add(D2, 3.0, "c", Category.FOOD)
    store.remove(b)
    d = store.add(D2, 4.0, "d", Category.FUEL)
    assert store.list() == [a, c, d]


def test_list_returns_snapshot():
    store = ExpenseStore()
    store.add(D1, 1.0, "a", Category.FOOD)
    snapshot = store.list()
    snapshot.clear()
    assert len(store.list()) == 1


def test_remove_twice_is_noop():
    store = ExpenseStore()
    a = store.add(D1, 1.0, "a", Category.FOOD)
    b = store.add(D1, 2.0, "b", Category.FOOD)
    store.remove(a)
    after_first = store.list()
    store.remove(a)
    assert store.list() == after_first == [b]


def test_remove_absent_expense_leaves_store_unchanged():
    store = ExpenseStore()
    a = store.add(D1, 1.0, "a", Category.FOOD)
    stranger = Expense(date=D2, amount=5.0, description="other", category=Category.FOOD)
    store.remove(stranger)
    assert store.list() == [a]


def test_subscribers_see_post_mutation_state():
    store = ExpenseStore()
    seen = []
    store.subscribe(lambda s: seen.append(len(s.list())))
    a = store.add(D1, 1.0, "a", Category.FOOD)
    store.add(D1, 2.0, "b", Category.FOOD)
    store.remove(a)
    assert seen == [1, 2, 1]


def test_unsubscribe_stops_notifications():
    store = ExpenseStore()
    calls = []

    def callback(s):
        calls.append(s)

    store.subscribe(callback)
    store.add(D1, 1.0, "a", Category.FOOD)
    store.unsubscribe(callback)
    store.add(D1, 2.0, "b", Category.FOOD)
    assert calls == [store]
    # unknown callbacks are ignored
    store.unsubscribe(callback)


def test_add_from_text_parses_amount():
    store = ExpenseStore()
    exp = store.add_from_text(D1, "40.00", "electric bill", Category.ELECTRICITY)
    assert exp is not None
    assert exp.amount == 40.0
    assert store.list() == [exp]


@pytest.mark.parametrize("text", ["", "abc", "12..5", "1,000", "  "])
def test_add_from_text_ignores_invalid_amount(text):
    store = ExpenseStore()
    calls = []
    store.subscribe(lambda s: calls.append(s))
    assert store.add_from_text(D1, text, "milk", Category.GROCERIES) is None
    assert store.list() == []
    assert calls == []
