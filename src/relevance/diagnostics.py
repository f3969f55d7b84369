"""Debug helpers for inspecting a ranking."""

import structlog

from src.relevance.constants import (
    COMPONENT_RELEVANCE,
    DIAGNOSTIC_LIMIT,
    DISPLAY_TITLE_CHARS,
)
from src.relevance.models import ScoredContent


logger = structlog.get_logger()


def format_ranking(
    ranked: list[ScoredContent],
    label: str = "Content ranking",
    limit: int = DIAGNOSTIC_LIMIT,
) -> list[str]:
    """Render the head of a ranking as human-readable lines.

    Args:
        ranked: Ranked items.
        label: Heading for the listing.
        limit: Maximum entries shown.

    Returns:
        Heading line followed by one line per entry.
    """
    lines = [f"{label}:"]
    for position, item in enumerate(ranked[: max(limit, 0)], start=1):
        breaking_tag = " [BREAKING]" if item.is_breaking else ""
        title = item.display_title[:DISPLAY_TITLE_CHARS]
        lines.append(
            f"  {position}. [{item.relevance_score}] "
            f"{item.category.value}{breaking_tag}: {title}"
        )
    return lines


def log_content_ranking(
    ranked: list[ScoredContent],
    label: str = "Content ranking",
    limit: int = DIAGNOSTIC_LIMIT,
) -> None:
    """Emit one debug event per ranked entry.

    Args:
        ranked: Ranked items.
        label: Label attached to every event.
        limit: Maximum entries logged.
    """
    log = logger.bind(
        component=COMPONENT_RELEVANCE, subcomponent="diagnostics", label=label
    )
    for position, item in enumerate(ranked[: max(limit, 0)], start=1):
        log.debug(
            "ranked_item",
            position=position,
            score=item.relevance_score,
            category=item.category.value,
            breaking=item.is_breaking,
            source=item.source,
            title=item.display_title[:DISPLAY_TITLE_CHARS],
        )
