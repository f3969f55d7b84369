"""Turning submitted files and feed documents into content items.

This is the caller side of the ranker: it strips markup, truncates
feed bodies, and enforces the submitted-batch limits before items
are ranked.
"""

from src.ingest.errors import (
    FeedParseError,
    IngestError,
    ItemsFileError,
    ItemsValidationError,
)
from src.ingest.feeds import parse_feed
from src.ingest.html import strip_html, truncate_content
from src.ingest.items import SubmittedItem, load_items, validate_items
from src.relevance.models import ContentItem


def merge_items(*batches: list[ContentItem]) -> list[ContentItem]:
    """Concatenate item batches, preserving order.

    Args:
        batches: Item lists, e.g. submitted items then feed items.

    Returns:
        Single list holding every item.
    """
    return [item for batch in batches for item in batch]


__all__ = [
    "FeedParseError",
    "IngestError",
    "ItemsFileError",
    "ItemsValidationError",
    "SubmittedItem",
    "load_items",
    "merge_items",
    "parse_feed",
    "strip_html",
    "truncate_content",
    "validate_items",
]
