from dataclasses import asdict, dataclass, field


@dataclass
class FinancialFigures:
    long_term_debt: float | None = None
    total_assets: float | None = None
    goodwill_and_intangibles: float | None = None


@dataclass
class CompanyInfo:
    market_cap: float | None = None
    total_cash: float | None = None
    short_term_investments: float | None = None
    long_term_investments: float | None = None
    net_receivables: float | None = None
    sector: str | None = None
    industry: str | None = None
    company_name: str | None = None
    business_summary: str | None = None


@dataclass(frozen=True)
class BusinessScreenResult:
    compliant: bool
    reasons: tuple[str, ...] = ()


@dataclass(frozen=True)
class ComplianceResult:
    debt_ratio: float | None
    liquidity_ratio: float
    receivables_ratio: float
    is_debt_compliant: bool
    is_liquidity_compliant: bool
    is_receivables_compliant: bool
    is_business_compliant: bool
    non_compliant_reasons: tuple[str, ...]
    is_fully_compliant: bool


@dataclass
class PricePoint:
    date: str
    close: float


@dataclass
class StockReport:
    symbol: str
    info: CompanyInfo
    figures: FinancialFigures
    history: list[PricePoint] = field(default_factory=list)
    compliance: ComplianceResult | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        compliance = None
        if self.compliance is not None:
            compliance = asdict(self.compliance)
            compliance["non_compliant_reasons"] = list(self.compliance.non_compliant_reasons)
        return {
            "symbol": self.symbol,
            "info": asdict(self.info),
            "financials": asdict(self.figures),
            "history": [asdict(p) for p in self.history],
            "compliance": compliance,
            "error": self.error,
        }
