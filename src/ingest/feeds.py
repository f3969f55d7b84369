"""RSS/Atom feed documents to content items.

Parses feed documents already on hand (no network access) with
feedparser and turns each entry into a plain-text ContentItem.
"""

from pathlib import Path

import feedparser  # type: ignore[import-untyped]
import structlog

from src.ingest.constants import COMPONENT_INGEST, DEFAULT_FEED_MAX_CHARS
from src.ingest.errors import FeedParseError
from src.ingest.html import strip_html, truncate_content
from src.relevance.models import ContentItem


logger = structlog.get_logger()


def _entry_body(entry: feedparser.FeedParserDict) -> str:
    """Pick the richest body available for an entry.

    Full content (content:encoded) wins over the summary/description.
    """
    for content in entry.get("content", []):
        value = content.get("value", "")
        if value:
            return str(value)
    return str(entry.get("summary", "") or entry.get("description", "") or "")


def _entry_link(entry: feedparser.FeedParserDict) -> str:
    """Get the entry's link, falling back to its alternate links."""
    link = entry.get("link", "")
    if link:
        return str(link)
    links = entry.get("links", [])
    for link_entry in links:
        if link_entry.get("rel") == "alternate":
            return str(link_entry.get("href", ""))
    if links:
        return str(links[0].get("href", ""))
    return ""


def parse_feed(
    document: Path | bytes | str,
    source: str,
    max_chars: int = DEFAULT_FEED_MAX_CHARS,
    limit: int | None = None,
) -> list[ContentItem]:
    """Parse an RSS/Atom document into content items.

    Args:
        document: Feed file path, raw bytes, or XML text.
        source: Source name attached to every item.
        max_chars: Entry bodies are stripped and cut to this length.
        limit: Optional maximum number of entries kept.

    Returns:
        ContentItems in feed order.

    Raises:
        FeedParseError: If the document is unreadable or yields no
            entries because it is malformed.
    """
    log = logger.bind(component=COMPONENT_INGEST, source=source)

    if isinstance(document, Path):
        try:
            document = document.read_bytes()
        except OSError as e:
            raise FeedParseError(source, e.strerror or str(e)) from e
    elif isinstance(document, str):
        document = document.encode("utf-8")

    feed = feedparser.parse(document)

    if feed.bozo and feed.bozo_exception:
        if not feed.entries:
            raise FeedParseError(source, str(feed.bozo_exception))
        log.warning("feed_parse_warning", bozo_exception=str(feed.bozo_exception))

    items: list[ContentItem] = []
    for entry in feed.entries:
        title = strip_html(str(entry.get("title", "") or ""))
        body = truncate_content(_entry_body(entry), max_chars)
        if not title and not body:
            continue

        link = _entry_link(entry)
        items.append(
            ContentItem(
                title=title or None,
                content=body,
                source=source,
                url=link or None,
            )
        )
        if limit is not None and len(items) >= limit:
            break

    log.info("feed_parsed", entries=len(feed.entries), items_emitted=len(items))
    return items
