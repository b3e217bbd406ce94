from __future__ import annotations

import json

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from .config import COMPLIANCE_THRESHOLD, DOWNLOAD_FILENAME_TEMPLATE
from .models import CompanyInfo, ComplianceResult, FinancialFigures, PricePoint, StockReport


def _fmt_money(value: float | None) -> str:
    if value is None or pd.isna(value):
        return "N/A"
    return f"${float(value):,.0f}"


def _fmt_pct(value: float | None) -> str:
    if value is None or pd.isna(value):
        return "-"
    return f"{float(value):.2f}%"


def render_hero() -> None:
    st.markdown(
        """
<div class="hero">
  <h2 style="margin:0">StockInsight</h2>
  <p style="margin:.3rem 0 0 0">Islamic compliance screen: debt, liquidity, receivables and business activity</p>
</div>
""",
        unsafe_allow_html=True,
    )


def render_symbol_input() -> str:
    st.sidebar.subheader("Lookup")
    return st.sidebar.text_input("Stock symbol", value="", placeholder="e.g. AAPL, MSFT, BRK.B")


def render_company_info(symbol: str, info: CompanyInfo) -> None:
    name = info.company_name or symbol
    st.subheader(f"{name} ({symbol})")
    c1, c2, c3 = st.columns(3)
    c1.metric("Sector", info.sector or "N/A")
    c2.metric("Industry", info.industry or "N/A")
    c3.metric("Market Cap", _fmt_money(info.market_cap))
    if info.business_summary:
        with st.expander("Business summary"):
            st.write(info.business_summary)


def render_price_chart(history: list[PricePoint]) -> None:
    if not history:
        st.info("No price history available.")
        return

    chart_df = pd.DataFrame([{"date": p.date, "close": p.close} for p in history])
    chart_df["date"] = pd.to_datetime(chart_df["date"])
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=chart_df["date"],
            y=chart_df["close"],
            mode="lines",
            name="Close",
            line=dict(color="#1565c0", width=2),
        )
    )
    fig.update_layout(
        height=360,
        margin=dict(t=16, b=12, l=12, r=12),
        xaxis_title="Date",
        yaxis_title="Close",
    )
    st.plotly_chart(fig, use_container_width=True)


def render_financials(figures: FinancialFigures) -> None:
    st.subheader("Key Financials")
    table = pd.DataFrame(
        {
            "item": ["Long Term Debt", "Total Assets", "Goodwill & Intangibles"],
            "value": [
                _fmt_money(figures.long_term_debt),
                _fmt_money(figures.total_assets),
                _fmt_money(figures.goodwill_and_intangibles),
            ],
        }
    )
    st.dataframe(table, use_container_width=True, hide_index=True)


def render_ratios(compliance: ComplianceResult) -> None:
    ratios = pd.DataFrame(
        {
            "ratio": ["Debt", "Liquidity", "Receivables"],
            "value": [compliance.debt_ratio, compliance.liquidity_ratio, compliance.receivables_ratio],
            "compliant": [
                compliance.is_debt_compliant,
                compliance.is_liquidity_compliant,
                compliance.is_receivables_compliant,
            ],
        }
    )
    ratios["value"] = ratios["value"].map(_fmt_pct)
    ratios["status"] = np.where(ratios["compliant"], "PASS", "FAIL")
    st.caption(f"Each ratio must stay below {COMPLIANCE_THRESHOLD:g}%")
    st.dataframe(ratios[["ratio", "value", "status"]], use_container_width=True, hide_index=True)


def render_compliance(compliance: ComplianceResult | None) -> None:
    st.subheader("Islamic Compliance Status")
    if compliance is None:
        st.warning("Compliance indeterminate")
        return

    render_ratios(compliance)
    if compliance.is_fully_compliant:
        st.markdown('<span class="badge badge-pass">Compliant</span>', unsafe_allow_html=True)
        return
    st.markdown('<span class="badge badge-fail">Not Compliant</span>', unsafe_allow_html=True)
    st.markdown("\n".join(f"- {reason}" for reason in compliance.non_compliant_reasons))


def render_download(report: StockReport) -> None:
    st.download_button(
        "Download Data",
        data=json.dumps(report.to_dict(), ensure_ascii=False, indent=2).encode("utf-8"),
        file_name=DOWNLOAD_FILENAME_TEMPLATE.format(symbol=report.symbol),
        mime="application/json",
    )


def render_report(report: StockReport | None) -> None:
    if report is None:
        st.info("Enter a stock symbol in the sidebar to run the compliance screen.")
        return

    if report.error and report.info == CompanyInfo() and report.figures == FinancialFigures():
        st.error(report.error)
        return

    render_company_info(report.symbol, report.info)
    render_price_chart(report.history)
    render_financials(report.figures)
    if report.error:
        st.warning(report.error)
    render_compliance(report.compliance)
    render_download(report)
