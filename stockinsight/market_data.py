from __future__ import annotations

import logging

import pandas as pd
import yfinance as yf

from .config import HISTORY_INTERVAL, HISTORY_PERIOD
from .models import CompanyInfo, FinancialFigures, PricePoint

logger = logging.getLogger(__name__)

LONG_TERM_DEBT_KEYS = [
    "Long Term Debt",
    "Long Term Debt And Capital Lease Obligation",
    "LongTermDebt",
]
TOTAL_ASSETS_KEYS = ["Total Assets", "TotalAssets"]
GOODWILL_AND_INTANGIBLES_KEYS = [
    "Goodwill And Other Intangible Assets",
    "GoodwillAndOtherIntangibleAssets",
]
GOODWILL_KEYS = ["Goodwill"]
INTANGIBLES_KEYS = ["Other Intangible Assets", "OtherIntangibleAssets"]
SHORT_TERM_INVESTMENT_KEYS = [
    "Other Short Term Investments",
    "Short Term Investments",
    "OtherShortTermInvestments",
]
LONG_TERM_INVESTMENT_KEYS = [
    "Long Term Equity Investment",
    "Investments And Advances",
    "Investmentin Financial Assets",
]
RECEIVABLE_KEYS = ["Receivables", "Accounts Receivable", "Net Receivables"]


class MarketDataError(RuntimeError):
    pass


def _safe_float(value) -> float | None:
    if value is None:
        return None
    try:
        num = float(value)
    except Exception:
        return None
    if pd.isna(num):
        return None
    return num


def _pick_row(df: pd.DataFrame | None, keys: list[str]) -> pd.Series | None:
    if df is None or df.empty:
        return None
    for key in keys:
        if key in df.index:
            selected = df.loc[key]
            return selected.iloc[0] if isinstance(selected, pd.DataFrame) else selected
    for idx in df.index:
        idx_text = str(idx).lower().replace(" ", "")
        if any(key.lower().replace(" ", "") == idx_text for key in keys):
            selected = df.loc[idx]
            return selected.iloc[0] if isinstance(selected, pd.DataFrame) else selected
    return None


def _latest_value(df: pd.DataFrame | None, keys: list[str]) -> float | None:
    """Value of the first matching row in the most recent statement column.

    A gap in the latest column stays None rather than falling back to an
    older period.
    """
    row = _pick_row(df, keys)
    if row is None or row.empty:
        return None
    if isinstance(row.index, pd.DatetimeIndex):
        row = row.sort_index(ascending=False)
    return _safe_float(row.iloc[0])


def _balance_sheet(ticker: yf.Ticker) -> pd.DataFrame:
    sheet = getattr(ticker, "balance_sheet", None)
    if not isinstance(sheet, pd.DataFrame):
        return pd.DataFrame()
    if isinstance(sheet.columns, pd.DatetimeIndex):
        sheet = sheet.sort_index(axis=1, ascending=False)
    return sheet


def _goodwill_and_intangibles(sheet: pd.DataFrame) -> float | None:
    combined = _latest_value(sheet, GOODWILL_AND_INTANGIBLES_KEYS)
    if combined is not None:
        return combined
    parts = [_latest_value(sheet, GOODWILL_KEYS), _latest_value(sheet, INTANGIBLES_KEYS)]
    reported = [p for p in parts if p is not None]
    if not reported:
        return None
    return float(sum(reported))


def _extract_market_cap(ticker: yf.Ticker, info: dict) -> float | None:
    candidates = [info.get("marketCap")]
    try:
        fi = ticker.fast_info
        candidates.extend([fi.get("market_cap"), fi.get("marketCap")])
    except Exception:
        pass

    for candidate in candidates:
        val = _safe_float(candidate)
        if val and val > 0:
            return val
    return None


def fetch_financial_figures(ticker: yf.Ticker) -> FinancialFigures:
    sheet = _balance_sheet(ticker)
    return FinancialFigures(
        long_term_debt=_latest_value(sheet, LONG_TERM_DEBT_KEYS),
        total_assets=_latest_value(sheet, TOTAL_ASSETS_KEYS),
        goodwill_and_intangibles=_goodwill_and_intangibles(sheet),
    )


def fetch_company_info(ticker: yf.Ticker) -> CompanyInfo:
    info = ticker.info or {}
    sheets: list[pd.DataFrame] = []

    def _fallback_sheet() -> pd.DataFrame:
        # read once, and only when info lacks a figure; a failure here must not drop the profile
        if not sheets:
            try:
                sheets.append(_balance_sheet(ticker))
            except Exception:
                logger.warning("Balance sheet fallback unavailable for company info", exc_info=True)
                sheets.append(pd.DataFrame())
        return sheets[0]

    def _info_or_sheet(info_key: str, sheet_keys: list[str]) -> float | None:
        val = _safe_float(info.get(info_key))
        if val is not None:
            return val
        return _latest_value(_fallback_sheet(), sheet_keys)

    return CompanyInfo(
        market_cap=_extract_market_cap(ticker, info),
        total_cash=_safe_float(info.get("totalCash")),
        short_term_investments=_info_or_sheet("shortTermInvestments", SHORT_TERM_INVESTMENT_KEYS),
        long_term_investments=_info_or_sheet("longTermInvestments", LONG_TERM_INVESTMENT_KEYS),
        net_receivables=_info_or_sheet("netReceivables", RECEIVABLE_KEYS),
        sector=info.get("sector") or None,
        industry=info.get("industry") or None,
        company_name=info.get("longName") or info.get("shortName") or None,
        business_summary=info.get("longBusinessSummary") or None,
    )


def fetch_price_history(ticker: yf.Ticker) -> list[PricePoint]:
    hist = ticker.history(period=HISTORY_PERIOD, interval=HISTORY_INTERVAL, auto_adjust=False)
    if not isinstance(hist, pd.DataFrame) or hist.empty or "Close" not in hist.columns:
        return []
    close = pd.to_numeric(hist["Close"], errors="coerce").dropna()
    return [PricePoint(date=pd.Timestamp(ts).strftime("%Y-%m-%d"), close=float(v)) for ts, v in close.items()]


def _has_values(record) -> bool:
    return any(v is not None for v in vars(record).values())


def fetch_stock_data(symbol: str) -> tuple[CompanyInfo, FinancialFigures, list[PricePoint]]:
    """Fetch the company profile, latest balance sheet and one year of closes.

    Sections fail independently; MarketDataError only when nothing usable
    came back for the symbol.
    """
    ticker = yf.Ticker(symbol)

    try:
        info = fetch_company_info(ticker)
    except Exception:
        logger.warning("Company info fetch failed for %s", symbol, exc_info=True)
        info = CompanyInfo()

    try:
        figures = fetch_financial_figures(ticker)
    except Exception:
        logger.warning("Balance sheet fetch failed for %s", symbol, exc_info=True)
        figures = FinancialFigures()

    try:
        history = fetch_price_history(ticker)
    except Exception:
        logger.warning("Price history fetch failed for %s", symbol, exc_info=True)
        history = []

    if not (_has_values(info) or _has_values(figures) or history):
        raise MarketDataError(f"No market data found for {symbol}")
    return info, figures, history
