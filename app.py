"""
app.py - minimal entrypoint for Streamlit app

Keep this file tiny so streamlit can import it without side-effects.
Run the app with:
    streamlit run app.py

This module simply delegates to expense_log.ui.dashboard.main().

"""
import os

try:
    # If running on Streamlit Cloud, transfer secrets to env vars so expense_log.config can read them
    import streamlit as _st
    try:
        _secrets = dict(_st.secrets)
    except FileNotFoundError:
        # no secrets.toml: configuration comes from the environment only
        _secrets = {}
    for _k in ("EXPENSE_LOG_CURRENCY_SYMBOL", "EXPENSE_LOG_LOG_LEVEL"):
        if _secrets.get(_k) and _k not in os.environ:
            os.environ[_k] = str(_secrets[_k])
except ImportError:
    # keep import-time side-effects minimal if streamlit isn't available
    pass

from expense_log.ui import dashboard


def main():
    dashboard.main()


if __name__ == "__main__":
    main()
