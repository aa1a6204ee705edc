import datetime

from expense_log import config
from expense_log.formatting import format_date, format_money


def test_format_money_two_decimals():
    assert format_money(12.5, symbol="$") == "$12.50"
    assert format_money(0, symbol="$") == "$0.00"
    assert format_money(1234.567, symbol="€") == "€1234.57"


def test_format_money_negative():
    assert format_money(-5, symbol="$") == "-$5.00"


def test_format_money_uses_configured_symbol(monkeypatch):
    monkeypatch.setattr(config, "CURRENCY_SYMBOL", "£")
    assert format_money(3) == "£3.00"


def test_format_date_medium_date_short_time():
    assert format_date(datetime.datetime(2026, 10, 19, 15, 4)) == "Oct 19, 2026 at 3:04 PM"
    assert format_date(datetime.datetime(2024, 3, 5, 0, 7)) == "Mar 5, 2024 at 12:07 AM"
    assert format_date(datetime.datetime(2024, 3, 5, 12, 0)) == "Mar 5, 2024 at 12:00 PM"


def test_format_date_plain_date():
    assert format_date(datetime.date(2024, 1, 31)) == "Jan 31, 2024"
