from __future__ import annotations

import logging

from .business_screen import evaluate_business
from .config import COMPLIANCE_THRESHOLD, DEBT_REASON, LIQUIDITY_REASON, RECEIVABLES_REASON
from .metrics import (
    compute_debt_ratio,
    compute_liquidity_ratio,
    compute_receivables_ratio,
    has_market_cap,
)
from .models import CompanyInfo, ComplianceResult, FinancialFigures

logger = logging.getLogger(__name__)


def _evaluate(figures: FinancialFigures, info: CompanyInfo) -> ComplianceResult | None:
    debt_ratio = compute_debt_ratio(figures)
    if debt_ratio is None:
        logger.info("Debt ratio not computable, compliance indeterminate: %s", figures)
        return None
    is_debt_compliant = debt_ratio < COMPLIANCE_THRESHOLD

    # Without a market cap the two ratios cannot disprove compliance.
    liquidity_ratio = 0.0
    is_liquidity_compliant = True
    receivables_ratio = 0.0
    is_receivables_compliant = True
    if has_market_cap(info):
        liquidity_ratio = compute_liquidity_ratio(info)
        is_liquidity_compliant = liquidity_ratio < COMPLIANCE_THRESHOLD
        receivables_ratio = compute_receivables_ratio(info)
        is_receivables_compliant = receivables_ratio < COMPLIANCE_THRESHOLD

    business = evaluate_business(info)

    reasons: list[str] = []
    if not is_debt_compliant:
        reasons.append(DEBT_REASON)
    if not is_liquidity_compliant:
        reasons.append(LIQUIDITY_REASON)
    if not is_receivables_compliant:
        reasons.append(RECEIVABLES_REASON)
    if not business.compliant:
        reasons.extend(business.reasons)

    return ComplianceResult(
        debt_ratio=debt_ratio,
        liquidity_ratio=liquidity_ratio,
        receivables_ratio=receivables_ratio,
        is_debt_compliant=is_debt_compliant,
        is_liquidity_compliant=is_liquidity_compliant,
        is_receivables_compliant=is_receivables_compliant,
        is_business_compliant=business.compliant,
        non_compliant_reasons=tuple(reasons),
        is_fully_compliant=(
            is_debt_compliant
            and is_liquidity_compliant
            and is_receivables_compliant
            and business.compliant
        ),
    )


def evaluate_compliance(figures: FinancialFigures, info: CompanyInfo) -> ComplianceResult | None:
    """Evaluate the full compliance screen for one company.

    Returns None when the verdict is indeterminate: the debt ratio cannot be
    computed, or any step fails on malformed input. Never raises.
    """
    try:
        return _evaluate(figures, info)
    except Exception:
        logger.warning("Compliance evaluation failed", exc_info=True)
        return None
