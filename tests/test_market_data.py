from __future__ import annotations

import pandas as pd
import pytest

from stockinsight import market_data
from stockinsight.market_data import (
    MarketDataError,
    fetch_company_info,
    fetch_financial_figures,
    fetch_price_history,
    fetch_stock_data,
)
from stockinsight.models import CompanyInfo, FinancialFigures


class _DummyTicker:
    def __init__(self, info=None, balance_sheet=None, history=None):
        self.info = info or {}
        self.balance_sheet = balance_sheet if balance_sheet is not None else pd.DataFrame()
        self._history = history if history is not None else pd.DataFrame()

    def history(self, period: str, interval: str, auto_adjust: bool = False) -> pd.DataFrame:
        return self._history


def _sheet(rows: dict[str, list[float]]) -> pd.DataFrame:
    # oldest period first, so the newest-column lookup has to sort
    cols = [pd.Timestamp("2023-12-31"), pd.Timestamp("2024-12-31")]
    return pd.DataFrame(rows, index=cols).T


def test_figures_from_latest_balance_sheet_column() -> None:
    sheet = _sheet(
        {
            "Long Term Debt": [50.0, 100.0],
            "Total Assets": [900.0, 1000.0],
            "Goodwill And Other Intangible Assets": [80.0, 100.0],
        }
    )
    figures = fetch_financial_figures(_DummyTicker(balance_sheet=sheet))

    assert figures == FinancialFigures(long_term_debt=100.0, total_assets=1000.0, goodwill_and_intangibles=100.0)


def test_goodwill_summed_from_parts() -> None:
    sheet = _sheet(
        {
            "Total Assets": [900.0, 1000.0],
            "Goodwill": [10.0, 30.0],
            "Other Intangible Assets": [5.0, 20.0],
        }
    )
    figures = fetch_financial_figures(_DummyTicker(balance_sheet=sheet))

    assert figures.goodwill_and_intangibles == 50.0
    assert figures.long_term_debt is None


def test_missing_rows_stay_none() -> None:
    figures = fetch_financial_figures(_DummyTicker())

    assert figures == FinancialFigures()


def test_latest_gap_does_not_fall_back_to_older_period() -> None:
    sheet = _sheet({"Long Term Debt": [50.0, float("nan")], "Total Assets": [900.0, 1000.0]})
    figures = fetch_financial_figures(_DummyTicker(balance_sheet=sheet))

    assert figures.long_term_debt is None
    assert figures.total_assets == 1000.0


def test_company_info_from_info_and_sheet() -> None:
    info = {
        "marketCap": 5000,
        "totalCash": 300,
        "sector": "Technology",
        "industry": "Software—Infrastructure",
        "shortName": "Test",
        "longName": "Test Corp",
        "longBusinessSummary": "A tech company.",
    }
    sheet = _sheet(
        {
            "Other Short Term Investments": [1.0, 40.0],
            "Investments And Advances": [2.0, 60.0],
            "Receivables": [3.0, 250.0],
        }
    )
    company = fetch_company_info(_DummyTicker(info=info, balance_sheet=sheet))

    assert company == CompanyInfo(
        market_cap=5000.0,
        total_cash=300.0,
        short_term_investments=40.0,
        long_term_investments=60.0,
        net_receivables=250.0,
        sector="Technology",
        industry="Software—Infrastructure",
        company_name="Test Corp",
        business_summary="A tech company.",
    )


def test_company_info_blank_strings_are_absent() -> None:
    company = fetch_company_info(_DummyTicker(info={"sector": "", "marketCap": "n/a"}))

    assert company.sector is None
    assert company.market_cap is None


def test_price_history_points() -> None:
    idx = pd.to_datetime(["2025-01-02", "2025-01-03", "2025-01-06"])
    hist = pd.DataFrame({"Close": [10.0, None, 12.5]}, index=idx)
    points = fetch_price_history(_DummyTicker(history=hist))

    assert [(p.date, p.close) for p in points] == [("2025-01-02", 10.0), ("2025-01-06", 12.5)]


def test_fetch_stock_data_survives_failing_section(monkeypatch) -> None:
    class _BrokenHistoryTicker(_DummyTicker):
        def history(self, period: str, interval: str, auto_adjust: bool = False) -> pd.DataFrame:
            raise ConnectionError("boom")

    ticker = _BrokenHistoryTicker(info={"marketCap": 1000, "longName": "Test Corp"})
    monkeypatch.setattr(market_data.yf, "Ticker", lambda symbol: ticker)

    info, figures, history = fetch_stock_data("TEST")

    assert info.company_name == "Test Corp"
    assert figures == FinancialFigures()
    assert history == []


class _BrokenSheetTicker(_DummyTicker):
    @property
    def balance_sheet(self) -> pd.DataFrame:
        raise ConnectionError("balance sheet down")

    @balance_sheet.setter
    def balance_sheet(self, value) -> None:
        pass


class _BrokenInfoTicker(_DummyTicker):
    @property
    def info(self) -> dict:
        raise ConnectionError("quote summary down")

    @info.setter
    def info(self, value) -> None:
        pass


def test_company_info_survives_failing_balance_sheet() -> None:
    ticker = _BrokenSheetTicker(info={"marketCap": 1000, "longName": "Test Corp", "sector": "Banks"})

    company = fetch_company_info(ticker)

    assert company.company_name == "Test Corp"
    assert company.market_cap == 1000.0
    assert company.sector == "Banks"
    assert company.net_receivables is None


def test_fetch_stock_data_keeps_info_when_balance_sheet_fails(monkeypatch) -> None:
    ticker = _BrokenSheetTicker(info={"marketCap": 1000, "longName": "Test Corp", "sector": "Banks"})
    monkeypatch.setattr(market_data.yf, "Ticker", lambda symbol: ticker)

    info, figures, history = fetch_stock_data("TEST")

    assert info.company_name == "Test Corp"
    assert info.market_cap == 1000.0
    assert figures == FinancialFigures()
    assert history == []


def test_fetch_stock_data_keeps_sheet_and_history_when_info_fails(monkeypatch) -> None:
    sheet = _sheet({"Long Term Debt": [50.0, 100.0], "Total Assets": [900.0, 1000.0]})
    hist = pd.DataFrame({"Close": [10.0]}, index=pd.to_datetime(["2025-01-02"]))
    ticker = _BrokenInfoTicker(balance_sheet=sheet, history=hist)
    monkeypatch.setattr(market_data.yf, "Ticker", lambda symbol: ticker)

    info, figures, history = fetch_stock_data("TEST")

    assert info == CompanyInfo()
    assert figures.long_term_debt == 100.0
    assert figures.total_assets == 1000.0
    assert [(p.date, p.close) for p in history] == [("2025-01-02", 10.0)]


def test_fetch_stock_data_raises_when_nothing_found(monkeypatch) -> None:
    monkeypatch.setattr(market_data.yf, "Ticker", lambda symbol: _DummyTicker())

    with pytest.raises(MarketDataError):
        fetch_stock_data("NOPE")
