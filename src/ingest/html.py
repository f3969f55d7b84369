"""Plain-text extraction for feed and submitted content."""

import re

from bs4 import BeautifulSoup

from src.ingest.constants import DEFAULT_FEED_MAX_CHARS, TRUNCATION_SUFFIX


_WHITESPACE_RUN = re.compile(r"[ \t\r\f\v\xa0]+")


def strip_html(html: str) -> str:
    """Remove markup and decode entities.

    Args:
        html: HTML fragment or plain text.

    Returns:
        Trimmed plain text with runs of spaces collapsed.
    """
    if not html:
        return ""
    text = html
    if "<" in html or "&" in html:
        text = BeautifulSoup(html, "lxml").get_text()
    return _WHITESPACE_RUN.sub(" ", text).strip()


def truncate_content(content: str, max_length: int = DEFAULT_FEED_MAX_CHARS) -> str:
    """Strip markup and cut text to max_length characters.

    Args:
        content: HTML or plain text.
        max_length: Maximum characters kept before the suffix.

    Returns:
        Plain text, with "..." appended when it was cut.
    """
    stripped = strip_html(content)
    if len(stripped) <= max_length:
        return stripped
    return stripped[:max_length] + TRUNCATION_SUFFIX
