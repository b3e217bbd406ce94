import logging
import os

COMPLIANCE_THRESHOLD = 33.0
RATIO_DECIMALS = 2

BUSINESS_EXCLUSION_KEYWORDS = (
    "alcohol",
    "gambling",
    "casino",
    "betting",
    "tobacco",
    "cigarette",
    "pork",
    "swine",
    "weapons",
    "firearm",
    "defense",
    "adult",
    "porn",
    "sex",
    "bank",
    "insurance",
    "asset management",
    "interest",
    "mortgage",
    "loan",
    "credit",
)

BUSINESS_EXCLUSION_SECTORS = frozenset(
    {
        "Banks",
        "Insurance",
        "Diversified Financials",
        "Consumer Finance",
        "Tobacco",
        "Casinos & Gaming",
        "Aerospace & Defense",
        "Beverages",
        "Food Products",
    }
)

BUSINESS_EXCLUSION_INDUSTRIES = frozenset(
    {
        "Tobacco",
        "Casinos & Gaming",
        "Aerospace & Defense",
        "Brewers",
        "Distillers & Vintners",
        "Packaged Foods & Meats",
        "Pornography",
        "Adult Entertainment",
        "Banks",
        "Insurance",
    }
)

DEBT_REASON = "Debt ratio >= 33%"
LIQUIDITY_REASON = "Liquidity ratio >= 33%"
RECEIVABLES_REASON = "Receivables ratio >= 33%"

HISTORY_PERIOD = "1y"
HISTORY_INTERVAL = "1d"
LOOKUP_TTL_SECONDS = 60 * 10

DOWNLOAD_FILENAME_TEMPLATE = "{symbol}-stockinsight.json"


def resolve_log_level(value: str | None) -> str:
    level = (value or "").strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


LOG_LEVEL = resolve_log_level(os.environ.get("STOCKINSIGHT_LOG_LEVEL"))
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
