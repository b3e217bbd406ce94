from __future__ import annotations

import logging

from .compliance import evaluate_compliance
from .market_data import MarketDataError, fetch_stock_data
from .models import CompanyInfo, FinancialFigures, StockReport

logger = logging.getLogger(__name__)

SHARE_CLASS_SUFFIXES = {"A", "B", "C"}
INDETERMINATE_MESSAGE = "Compliance could not be determined: assets net of goodwill are not positive or figures are invalid"
FIGURE_LABELS = {
    "long_term_debt": "long-term debt",
    "total_assets": "total assets",
    "goodwill_and_intangibles": "goodwill and intangibles",
}


def normalize_symbol(symbol_input: str) -> str:
    symbol = (symbol_input or "").strip().upper()
    if not symbol:
        return ""
    # Yahoo quotes share classes with a dash (BRK.B -> BRK-B)
    base, dot, suffix = symbol.partition(".")
    if dot and suffix in SHARE_CLASS_SUFFIXES:
        return f"{base}-{suffix}"
    return symbol


def indeterminate_message(figures: FinancialFigures) -> str:
    missing = [label for field, label in FIGURE_LABELS.items() if getattr(figures, field) is None]
    if missing:
        return f"Compliance could not be determined: {', '.join(missing)} not reported"
    return INDETERMINATE_MESSAGE


def build_stock_report(symbol_input: str) -> StockReport | None:
    symbol = normalize_symbol(symbol_input)
    if not symbol:
        return None

    try:
        info, figures, history = fetch_stock_data(symbol)
    except MarketDataError as exc:
        logger.warning("Lookup failed for %s: %s", symbol, exc)
        return StockReport(symbol=symbol, info=CompanyInfo(), figures=FinancialFigures(), error=str(exc))

    compliance = evaluate_compliance(figures, info)
    return StockReport(
        symbol=symbol,
        info=info,
        figures=figures,
        history=history,
        compliance=compliance,
        error=indeterminate_message(figures) if compliance is None else None,
    )
