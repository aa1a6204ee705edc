"""
dashboard.py - Streamlit UI entrypoint and orchestration

This module wires the UI components (expense_log.ui.components) with the
expense store (expense_log.tracker) and the derived views (expense_log.views).
The main() function builds the sidebar menu and routes to the three screens.

Design notes:
 - One ExpenseStore per browser session, kept in st.session_state and passed
   explicitly to the components that need it.
 - CategoryTotals subscribes to the store, so the totals shown on the log are
   recomputed synchronously after every add/remove.
 - The Saver state is independent of the store.
"""

import streamlit as st

from expense_log.tracker import ExpenseStore
from expense_log.ui import components
from expense_log.views import CategoryTotals, SavingsGoal, filter_by_category

MENU = ["Daily Expenses", "Add Expense", "Saver"]


def _session_store() -> ExpenseStore:
    if "expense_store" not in st.session_state:
        store = ExpenseStore()
        st.session_state["expense_store"] = store
        st.session_state["category_totals"] = CategoryTotals(store)
    return st.session_state["expense_store"]


def _session_savings_goal() -> SavingsGoal:
    if "savings_goal" not in st.session_state:
        st.session_state["savings_goal"] = SavingsGoal()
    return st.session_state["savings_goal"]


def main():
    """
    Streamlit page: sidebar menu controls which view is shown.
    Views:
      - Daily Expenses: category filter, expense table, per-category totals, delete
      - Add Expense: form; amounts that are not numbers add nothing
      - Saver: remaining amount for the monthly saving goal
    """
    st.title("Expense Log")
    store = _session_store()
    category_totals: CategoryTotals = st.session_state["category_totals"]

    choice = st.sidebar.selectbox("Select an option", MENU)
    st.sidebar.caption(f"{len(store)} expense(s) this session. Data is not saved.")

    if choice == "Daily Expenses":
        st.header("Daily Expenses")
        category = components.select_category_filter()
        expenses = store.list() if category is None else filter_by_category(store, category)
        components.display_expense_list(expenses)
        components.display_category_totals(category_totals.totals, only=category)
        components.display_delete_expense(store, expenses)

    elif choice == "Add Expense":
        def on_submit(exp_input: components.ExpenseInput):
            return store.add_from_text(
                date=exp_input.date,
                amount_text=exp_input.amount_text,
                description=exp_input.description,
                category=exp_input.category,
            )

        components.display_expense_form(on_submit)

    elif choice == "Saver":
        components.display_saver(_session_savings_goal())


if __name__ == "__main__":
    main()
