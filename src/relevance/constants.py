"""Constants for the relevance module."""

from typing import Final


# Urgency keywords; the first one found marks an item as breaking.
BREAKING_KEYWORDS: Final[tuple[str, ...]] = (
    "breaking", "just in", "alert", "urgent", "developing",
    "announces", "declares", "unveils", "confirms",
    "crash", "crashes", "surge", "surges", "plunge", "plunges", "spike", "spikes",
    "emergency", "crisis", "shock", "collapse",
    "halted", "suspended", "intervention",
)

# Added once per item, however many breaking keywords appear
BREAKING_BONUS: Final[int] = 5

# Added per MACRO_DATA/MARKETS keyword found in the title
TITLE_KEYWORD_BONUS: Final[int] = 1

# Number of ranked items handed to the digest prompt
DEFAULT_TOP_N: Final[int] = 20

# Default floor for filter_by_minimum_score
DEFAULT_MIN_SCORE: Final[int] = 3

# Entries shown by the ranking diagnostics
DIAGNOSTIC_LIMIT: Final[int] = 20

# Characters of content used when an item has no title
DISPLAY_TITLE_CHARS: Final[int] = 60

# Log component name
COMPONENT_RELEVANCE = "relevance"
