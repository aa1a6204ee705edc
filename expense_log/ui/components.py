"""
components.py - reusable Streamlit components / forms / displays

This module contains pure-UI helpers used by the dashboard:
 - display_expense_form(on_submit)
 - display_expense_list / category totals / delete expense
 - display_saver(goal)

Amount, goal and saved values are typed as text. The form does not validate
them itself: the store ignores an amount that is not a number and the Saver
keeps its previous result, and the components only report that back.
"""

import datetime
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import altair as alt
import pandas as pd
import streamlit as st

from expense_log.formatting import format_date, format_money
from expense_log.models import Category, Expense
from expense_log.tracker import ExpenseStore
from expense_log.views import SavingsGoal


# Trigger a Streamlit rerun in a way compatible with multiple Streamlit versions.
def _trigger_rerun():
    if hasattr(st, "rerun"):
        st.rerun()
    elif hasattr(st, "experimental_rerun"):
        st.experimental_rerun()


@dataclass
class ExpenseInput:
    """Lightweight container passed to the on_submit callback."""
    date: datetime.datetime
    amount_text: str
    description: str
    category: Category


PALETTE = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf"
]


def _category_color_scale() -> alt.Scale:
    # one fixed color per category so charts stay comparable between filters
    labels = [c.display_name for c in Category.all_values()]
    return alt.Scale(domain=labels, range=PALETTE[: len(labels)])


def display_expense_form(on_submit: Callable[[ExpenseInput], Optional[Expense]]):
    """
    Display the 'Add Expense' form.

    on_submit receives the ExpenseInput and returns the created Expense, or
    None when the amount could not be parsed.
    """
    st.header("Add Expense")
    with st.form(key="expense_form", clear_on_submit=False):
        date_val = st.date_input("Date", value=datetime.date.today())
        time_val = st.time_input("Time", value=datetime.datetime.now().time().replace(second=0, microsecond=0))
        amount_text = st.text_input("Amount", placeholder="0.00")
        description = st.text_input("Description (optional)")
        category = st.selectbox(
            "Category",
            options=Category.all_values(),
            format_func=lambda c: c.display_name,
        )
        submit_button = st.form_submit_button("Add Expense")

    if submit_button:
        expense_input = ExpenseInput(
            date=datetime.datetime.combine(date_val, time_val),
            amount_text=amount_text,
            description=description,
            category=category,
        )
        created = on_submit(expense_input)
        if created is None:
            st.error("Amount must be a number, e.g. 12.50. Nothing was added.")
        else:
            st.success(f"Added {format_money(created.amount)} for {created.category.display_name}.")


def select_category_filter(key: str = "log_category_filter") -> Optional[Category]:
    """Category filter for the log; None means all categories."""
    return st.selectbox(
        "Category",
        options=[None] + Category.all_values(),
        format_func=lambda c: "All" if c is None else c.display_name,
        key=key,
    )


def display_expense_list(expenses: List[Expense]):
    """
    Render expenses as a table in insertion order.

    Input:
      - expenses: list of Expense objects (store.list() or a filtered subset)
    """
    if not expenses:
        st.write("No expenses recorded.")
        return

    rows = []
    for e in expenses:
        row = e.to_dict()
        row["date"] = format_date(e.date)
        rows.append(row)
    df = pd.DataFrame(rows, columns=["date", "description", "category", "amount"])
    st.dataframe(df.style.format({"amount": format_money}), use_container_width=True, hide_index=True)


def display_category_totals(totals: Dict[Category, float], only: Optional[Category] = None):
    """
    Show total spending per category as text and a bar chart.
    When `only` is set, just that category's total is shown.
    """
    st.subheader("Totals per Category")
    if only is not None:
        st.markdown(f"**{only.display_name}: {format_money(totals.get(only, 0.0))}**")
        return

    grand_total = 0.0
    for total in totals.values():
        grand_total += total
    st.markdown(f"**Total: {format_money(grand_total)}**")
    for cat, total in totals.items():
        st.write(f"  {cat.display_name}: {format_money(total)}")

    df = pd.DataFrame(
        [{"category": cat.display_name, "amount": float(total)} for cat, total in totals.items()]
    )
    # Avoid rendering empty/zero-only charts
    if df.empty or df["amount"].abs().sum() <= 0:
        return

    order = [c.display_name for c in Category.all_values()]
    chart = alt.Chart(df).mark_bar().encode(
        x=alt.X("category:N", title="Category", sort=order),
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color("category:N", scale=_category_color_scale(), sort=order, legend=None),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("amount:Q", title="Amount", format=".2f"),
        ],
    ).properties(width="container", height=300)
    st.altair_chart(chart, use_container_width=True)


def display_delete_expense(store: ExpenseStore, expenses: List[Expense]):
    """
    UI to pick one of `expenses` and remove it from the store.
    Expenses cannot be edited: delete and add again instead.
    """
    if not expenses:
        return
    st.markdown("---")
    st.write("Delete an expense")
    # numbered so two identical-looking expenses stay separate entries
    options = {
        f"#{i} {format_date(e.date)} {e.category.display_name} {format_money(e.amount)} {e.description}".strip(): e
        for i, e in enumerate(expenses, start=1)
    }
    sel_label = st.selectbox("Select expense", options=list(options.keys()), key="delete_expense_select")
    delete_confirm = st.checkbox("I confirm I want to delete this expense", key="delete_expense_confirm")
    if st.button("Delete expense") and delete_confirm:
        store.remove(options[sel_label])
        st.success("Expense deleted.")
        # refresh so the table above reflects the removal
        _trigger_rerun()


def display_saver(goal: SavingsGoal):
    """
    Monthly savings screen. Editing either field recomputes the remaining
    amount; invalid text leaves the last computed value on screen.
    """
    st.header("Saver")

    def _on_goal_change():
        goal.set_monthly_saving_goal(st.session_state["saver_goal"])

    def _on_saved_change():
        goal.set_saved_amount(st.session_state["saver_saved"])

    st.text_input(
        "Monthly saving goal",
        value=goal.monthly_saving_goal,
        key="saver_goal",
        on_change=_on_goal_change,
    )
    st.text_input(
        "Saved amount",
        value=goal.saved_amount,
        key="saver_saved",
        on_change=_on_saved_change,
    )
    st.metric("Remaining to save", format_money(goal.remaining_amount))
    if goal.computed and goal.remaining_amount == 0:
        st.success("Goal reached.")
