"""Limits applied to content before it reaches the ranker."""

from typing import Final


# Submitted item batch limits
MAX_ITEMS_PER_BATCH: Final[int] = 100
MAX_CONTENT_CHARS: Final[int] = 50_000
MAX_TITLE_CHARS: Final[int] = 1_000
MAX_SOURCE_CHARS: Final[int] = 500
MAX_URL_CHARS: Final[int] = 2_000

# Feed entry bodies are cut to this many characters
DEFAULT_FEED_MAX_CHARS: Final[int] = 500

TRUNCATION_SUFFIX: Final[str] = "..."

COMPONENT_INGEST = "ingest"
