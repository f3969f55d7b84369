"""Topic categories and their static metadata.

Every category carries an ordered keyword list (lowercase, matched as
plain substrings), a priority weight used as the base relevance score,
and a display label. The table is built once at import time and is
read-only afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final


class TopicCategory(str, Enum):
    """Closed set of topic categories for content items.

    - MACRO_DATA: Economic releases, Fed, central banks
    - MARKETS: Equities, credit, currencies, commodities
    - POLICY_MARKET: Tariffs, regulation with clear market impact
    - POLICY_OTHER: Domestic policy without clear market impact
    - GEOPOLITICAL: Wars, international relations affecting markets
    - CORPORATE: Earnings, M&A, company news
    - POLITICAL: Elections, campaigns, domestic politics
    - OTHER: Everything else
    """

    MACRO_DATA = "MACRO_DATA"
    MARKETS = "MARKETS"
    POLICY_MARKET = "POLICY_MARKET"
    POLICY_OTHER = "POLICY_OTHER"
    GEOPOLITICAL = "GEOPOLITICAL"
    CORPORATE = "CORPORATE"
    POLITICAL = "POLITICAL"
    OTHER = "OTHER"


@dataclass(frozen=True)
class CategoryProfile:
    """Static metadata for one topic category.

    Attributes:
        keywords: Lowercase keywords/phrases, matched as substrings.
        weight: Base relevance score for items in this category.
        label: Human-readable label.
        market_moving: Whether the category counts as market-moving.
    """

    keywords: tuple[str, ...]
    weight: int
    label: str
    market_moving: bool = False


_PROFILES: dict[TopicCategory, CategoryProfile] = {
    TopicCategory.MACRO_DATA: CategoryProfile(
        keywords=(
            "fed", "federal reserve", "fomc", "powell", "interest rate",
            "rate cut", "rate hike",
            "inflation", "cpi", "pce", "core inflation", "deflation",
            "disinflation",
            "gdp", "growth", "recession", "slowdown", "contraction", "expansion",
            "employment", "jobs report", "nfp", "payrolls", "unemployment",
            "jobless claims",
            "ism", "pmi", "manufacturing", "services",
            "retail sales", "consumer spending", "consumer confidence",
            "central bank", "boj", "ecb", "pboc", "boe", "rba", "snb",
            "monetary policy", "quantitative", "balance sheet", "taper",
            "housing starts", "building permits", "existing home sales",
        ),
        weight=10,
        label="Economic Data",
        market_moving=True,
    ),
    TopicCategory.MARKETS: CategoryProfile(
        keywords=(
            "stock", "equities", "s&p", "dow", "nasdaq", "russell",
            "bond", "treasury", "treasuries", "yield", "yields",
            "credit spread", "high yield",
            "vix", "volatility", "implied vol",
            "dollar", "euro", "yen", "yuan", "currency", "forex", "fx", "dxy",
            "oil", "crude", "wti", "brent", "gold", "copper", "commodities",
            "silver",
            "futures", "options", "derivatives",
            "rally", "selloff", "correction", "bear market", "bull market",
            "support", "resistance", "breakout", "breakdown",
            "risk-off", "risk-on", "flight to quality",
        ),
        weight=9,
        label="Markets",
        market_moving=True,
    ),
    TopicCategory.POLICY_MARKET: CategoryProfile(
        keywords=(
            "tariff", "tariffs", "trade war", "trade deal", "import tax",
            "export ban",
            "sanctions", "embargo", "trade policy", "trade talks",
            "regulation", "sec", "cftc", "banking regulation", "basel",
            "tax", "taxes", "fiscal", "deficit", "debt ceiling",
            "government shutdown",
            "antitrust", "breakup", "merger blocked",
            "stimulus", "fiscal stimulus", "infrastructure bill",
            "crypto regulation", "bitcoin etf",
        ),
        weight=8,
        label="Market Policy",
        market_moving=True,
    ),
    TopicCategory.GEOPOLITICAL: CategoryProfile(
        keywords=(
            "war", "military", "invasion", "conflict", "attack",
            "nato", "alliance", "treaty",
            "china", "taiwan", "south china sea",
            "russia", "ukraine", "putin",
            "middle east", "iran", "israel", "saudi",
            "north korea", "nuclear",
            "oil supply", "strait", "shipping lane",
            "coup", "revolution", "regime change",
        ),
        weight=7,
        label="Geopolitical",
        market_moving=True,
    ),
    TopicCategory.CORPORATE: CategoryProfile(
        keywords=(
            "earnings", "revenue", "profit", "guidance", "eps", "beat", "miss",
            "ipo", "merger", "acquisition", "buyout", "takeover", "deal",
            "layoffs", "restructuring", "cost cutting",
            "ceo", "management", "board",
            "dividend", "buyback", "share repurchase",
            "bankruptcy", "default", "credit downgrade",
        ),
        weight=5,
        label="Corporate",
    ),
    TopicCategory.POLITICAL: CategoryProfile(
        keywords=(
            "election", "campaign", "poll", "polls", "vote", "voting", "ballot",
            "congress", "senate", "house", "speaker", "majority",
            "republican", "democrat", "gop", "partisan", "bipartisan",
            "immigration", "border", "deportation",
            "impeach", "investigation", "subpoena",
            "supreme court", "judicial",
        ),
        weight=2,
        label="Politics",
    ),
    TopicCategory.POLICY_OTHER: CategoryProfile(
        keywords=(
            "401k", "401(k)", "retirement", "social security", "pension",
            "healthcare", "medicare", "medicaid", "obamacare", "aca",
            "education", "student loan", "college",
            "housing policy", "rent control", "zoning",
            "minimum wage", "labor law",
            "climate policy", "green new deal", "carbon tax",
        ),
        weight=3,
        label="Other Policy",
    ),
    TopicCategory.OTHER: CategoryProfile(
        keywords=(),
        weight=1,
        label="Other",
    ),
}

_missing = set(TopicCategory) - set(_PROFILES)
if _missing:
    msg = f"Category profiles missing for: {sorted(c.value for c in _missing)}"
    raise RuntimeError(msg)

CATEGORY_PROFILES: Final = MappingProxyType(_PROFILES)

# Scan order for classification; earlier categories win ties.
CLASSIFICATION_ORDER: Final[tuple[TopicCategory, ...]] = (
    TopicCategory.MACRO_DATA,
    TopicCategory.MARKETS,
    TopicCategory.POLICY_MARKET,
    TopicCategory.GEOPOLITICAL,
    TopicCategory.CORPORATE,
    TopicCategory.POLITICAL,
    TopicCategory.POLICY_OTHER,
    TopicCategory.OTHER,
)

MARKET_MOVING_CATEGORIES: Final[frozenset[TopicCategory]] = frozenset(
    category for category, profile in _PROFILES.items() if profile.market_moving
)


def category_weight(category: TopicCategory) -> int:
    """Get the base priority weight for a category."""
    return CATEGORY_PROFILES[category].weight


def category_label(category: TopicCategory) -> str:
    """Get the display label for a category."""
    return CATEGORY_PROFILES[category].label


def category_keywords(category: TopicCategory) -> tuple[str, ...]:
    """Get the ordered keyword list for a category."""
    return CATEGORY_PROFILES[category].keywords
