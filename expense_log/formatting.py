"""
formatting.py - presentation helpers for money and dates
"""

import datetime
from typing import Optional, Union

from expense_log import config

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_money(amount: float, symbol: Optional[str] = None) -> str:
    """Two decimals with a currency prefix, e.g. "$12.50" or "-$5.00"."""
    if symbol is None:
        symbol = config.CURRENCY_SYMBOL
    amount = float(amount)
    if amount < 0:
        return f"-{symbol}{-amount:.2f}"
    return f"{symbol}{amount:.2f}"


def format_date(value: Union[datetime.datetime, datetime.date]) -> str:
    """
    Medium date and short time, e.g. "Oct 19, 2026 at 3:04 PM".
    Plain dates render without the time part.
    """
    # month names are spelled out here so the output does not depend on the process locale
    date_part = f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"
    if not isinstance(value, datetime.datetime):
        return date_part
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{date_part} at {hour}:{value.minute:02d} {suffix}"
