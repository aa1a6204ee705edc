"""
config.py - environment driven settings

Values are read once at import time. When running on Streamlit Cloud, app.py
copies matching secrets into the environment before this module is imported.
"""

import os

# prefix shown in front of every money value
CURRENCY_SYMBOL = os.getenv("EXPENSE_LOG_CURRENCY_SYMBOL", "$")

LOG_LEVEL = (os.getenv("EXPENSE_LOG_LOG_LEVEL") or "INFO").strip().upper()
