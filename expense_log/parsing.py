"""
parsing.py - numeric input parsing for the form fields

Amount, goal and saved values arrive as raw text from the UI. They are parsed
locale-independently: "." is the decimal point and grouping separators such as
"1,000" are rejected.
"""

from typing import Any, Optional


class InvalidNumberError(ValueError):
    """Raised when a text field does not hold a valid decimal number."""

    def __init__(self, text: Any):
        super().__init__(f"not a valid number: {text!r}")
        self.text = text


def parse_decimal(text: Any) -> float:
    """
    Parse `text` as a decimal number.

    Raises InvalidNumberError for None, empty text, non-numeric text and
    malformed numbers.
    """
    if not isinstance(text, str):
        raise InvalidNumberError(text)
    # float() also accepts "1_000", which is not a number anyone types into a form
    if "_" in text:
        raise InvalidNumberError(text)
    try:
        return float(text)
    except ValueError:
        raise InvalidNumberError(text) from None


def try_parse_decimal(text: Any) -> Optional[float]:
    try:
        return parse_decimal(text)
    except InvalidNumberError:
        return None
