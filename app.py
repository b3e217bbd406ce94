from __future__ import annotations

import logging

import streamlit as st

from stockinsight.config import LOG_FORMAT, LOG_LEVEL, LOOKUP_TTL_SECONDS
from stockinsight.screens import build_stock_report
from stockinsight.ui_components import render_hero, render_report, render_symbol_input
from stockinsight.ui_theme import inject_theme

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


@st.cache_data(show_spinner=False, ttl=LOOKUP_TTL_SECONDS)
def _lookup_symbol(symbol_input: str):
    return build_stock_report(symbol_input)


def main() -> None:
    st.set_page_config(page_title="StockInsight Compliance Screener", layout="centered")
    st.markdown(inject_theme(), unsafe_allow_html=True)

    render_hero()
    symbol_input = render_symbol_input()

    report = None
    if symbol_input.strip():
        with st.spinner("Fetching market data..."):
            report = _lookup_symbol(symbol_input.strip().upper())
    render_report(report)


if __name__ == "__main__":
    main()
