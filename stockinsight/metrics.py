from __future__ import annotations

import math

from .config import RATIO_DECIMALS
from .models import CompanyInfo, FinancialFigures


def _round_ratio(value: float) -> float:
    ratio = float(value)
    if not math.isfinite(ratio):
        raise ValueError(f"non-finite ratio: {ratio!r}")
    return round(ratio, RATIO_DECIMALS)


def _or_zero(value: float | None) -> float:
    return 0.0 if value is None else float(value)


def has_market_cap(info: CompanyInfo) -> bool:
    return info.market_cap is not None and info.market_cap > 0


def compute_debt_ratio(figures: FinancialFigures) -> float | None:
    """Long-term debt over assets net of goodwill/intangibles, in percent.

    None when any input is unreported or the adjusted asset base is not
    positive. A reported zero debt gives 0.0, not None.
    """
    debt = figures.long_term_debt
    assets = figures.total_assets
    goodwill = figures.goodwill_and_intangibles
    if debt is None or assets is None or goodwill is None:
        return None

    adjusted_assets = float(assets) - float(goodwill)
    if adjusted_assets <= 0:
        return None
    return _round_ratio(float(debt) / adjusted_assets * 100.0)


def compute_liquidity_ratio(info: CompanyInfo) -> float:
    # 0.0 also means "not evaluable" when market cap is missing
    if not has_market_cap(info):
        return 0.0
    cash_and_investments = (
        _or_zero(info.total_cash)
        + _or_zero(info.short_term_investments)
        + _or_zero(info.long_term_investments)
    )
    return _round_ratio(cash_and_investments / float(info.market_cap) * 100.0)


def compute_receivables_ratio(info: CompanyInfo) -> float:
    if not has_market_cap(info):
        return 0.0
    return _round_ratio(_or_zero(info.net_receivables) / float(info.market_cap) * 100.0)
