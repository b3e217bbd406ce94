from __future__ import annotations

from .config import (
    BUSINESS_EXCLUSION_INDUSTRIES,
    BUSINESS_EXCLUSION_KEYWORDS,
    BUSINESS_EXCLUSION_SECTORS,
)
from .models import BusinessScreenResult, CompanyInfo


def contains_exclusion_keyword(text: str | None) -> bool:
    if not text:
        return False
    lower = text.lower()
    return any(keyword in lower for keyword in BUSINESS_EXCLUSION_KEYWORDS)


def evaluate_business(info: CompanyInfo) -> BusinessScreenResult:
    """Screen company metadata for prohibited business activities.

    Every matching rule adds a reason; fields that are not reported add none.
    """
    reasons: list[str] = []
    keyword_fields = [
        ("Company name", info.company_name),
        ("Sector", info.sector),
        ("Industry", info.industry),
        ("Business summary", info.business_summary),
    ]
    for label, text in keyword_fields:
        if contains_exclusion_keyword(text):
            reasons.append(f"{label} contains exclusion keyword")

    if info.sector and info.sector in BUSINESS_EXCLUSION_SECTORS:
        reasons.append(f'Sector "{info.sector}" is excluded')
    if info.industry and info.industry in BUSINESS_EXCLUSION_INDUSTRIES:
        reasons.append(f'Industry "{info.industry}" is excluded')

    return BusinessScreenResult(compliant=not reasons, reasons=tuple(reasons))
