"""Content ranker: classify, score, and order a batch of items."""

import time
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from src.relevance.categories import MARKET_MOVING_CATEGORIES
from src.relevance.classifier import TopicClassifier
from src.relevance.constants import (
    COMPONENT_RELEVANCE,
    DEFAULT_MIN_SCORE,
    DEFAULT_TOP_N,
)
from src.relevance.metrics import RelevanceMetrics
from src.relevance.models import ContentItem, ScoredContent
from src.relevance.scorer import RelevanceScorer


logger = structlog.get_logger()

ItemLike = ContentItem | Mapping[str, Any]


def _ranking_key(item: ScoredContent) -> tuple[bool, int]:
    """Sort key: breaking items first, then score descending."""
    return (not item.is_breaking, -item.relevance_score)


def sort_scored(items: Iterable[ScoredContent]) -> list[ScoredContent]:
    """Order scored items for the digest.

    Breaking items always come before non-breaking ones; within each
    group higher scores come first. Equal items keep their input order.

    Args:
        items: Scored items.

    Returns:
        New sorted list.
    """
    return sorted(items, key=_ranking_key)


def top_n(ranked: list[ScoredContent], n: int) -> list[ScoredContent]:
    """Take the first n items of an already ranked list.

    Args:
        ranked: Output of rank_content.
        n: Number of items wanted; n <= 0 yields an empty list.

    Returns:
        Slice of at most n items, order unchanged.
    """
    if n <= 0:
        return []
    return ranked[:n]


def filter_by_minimum_score(
    ranked: list[ScoredContent], min_score: int = DEFAULT_MIN_SCORE
) -> list[ScoredContent]:
    """Drop items scoring below min_score, preserving order.

    Args:
        ranked: Scored items.
        min_score: Lowest score kept.

    Returns:
        Filtered list.
    """
    return [item for item in ranked if item.relevance_score >= min_score]


def filter_market_moving(ranked: list[ScoredContent]) -> list[ScoredContent]:
    """Keep only market-moving categories, preserving order.

    Args:
        ranked: Scored items.

    Returns:
        Items in MACRO_DATA, MARKETS, POLICY_MARKET or GEOPOLITICAL.
    """
    return [item for item in ranked if item.category in MARKET_MOVING_CATEGORIES]


class ContentRanker:
    """Classifies, scores, and orders content items.

    Holds no state between calls apart from the metrics sink; every
    rank call depends only on its arguments.
    """

    def __init__(
        self,
        classifier: TopicClassifier | None = None,
        scorer: RelevanceScorer | None = None,
        metrics: RelevanceMetrics | None = None,
    ) -> None:
        """Initialize the ranker.

        Args:
            classifier: Topic classifier (default keyword table).
            scorer: Relevance scorer (default keyword tables).
            metrics: Optional metrics instance.
        """
        self._classifier = classifier or TopicClassifier()
        self._scorer = scorer or RelevanceScorer()
        self._metrics = metrics or RelevanceMetrics.get_instance()
        self._log = logger.bind(component=COMPONENT_RELEVANCE, subcomponent="ranker")

    def score_item(self, item: ItemLike) -> ScoredContent:
        """Classify and score a single item.

        Args:
            item: ContentItem or mapping with the same keys.

        Returns:
            ScoredContent for the item.
        """
        if not isinstance(item, ContentItem):
            item = ContentItem.model_validate(item)

        category = self._classifier.classify(item.title, item.content)
        result = self._scorer.score(item.title, item.content, category)

        return ScoredContent(
            title=item.title,
            content=item.content,
            source=item.source,
            url=item.url,
            category=category,
            relevance_score=result.score,
            is_breaking=result.is_breaking,
        )

    def rank(self, items: Iterable[ItemLike]) -> list[ScoredContent]:
        """Score every item and return the whole batch in ranked order.

        Args:
            items: Content items to rank.

        Returns:
            All items as ScoredContent, breaking first then by score.
        """
        start = time.perf_counter()
        scored = [self.score_item(item) for item in items]
        ranked = sort_scored(scored)
        duration_ms = (time.perf_counter() - start) * 1000

        for s in ranked:
            self._metrics.record_item(
                s.category.value, s.relevance_score, is_breaking=s.is_breaking
            )
        self._metrics.record_ranking_duration(duration_ms)

        self._log.info(
            "ranking_complete",
            items_in=len(ranked),
            breaking_count=sum(1 for s in ranked if s.is_breaking),
            min_score=min((s.relevance_score for s in ranked), default=0),
            max_score=max((s.relevance_score for s in ranked), default=0),
        )

        return ranked

    def top_n(self, ranked: list[ScoredContent], n: int) -> list[ScoredContent]:
        """Take the first n ranked items."""
        return top_n(ranked, n)

    def filter_by_minimum_score(
        self, ranked: list[ScoredContent], min_score: int = DEFAULT_MIN_SCORE
    ) -> list[ScoredContent]:
        """Drop items scoring below min_score."""
        return filter_by_minimum_score(ranked, min_score)

    def filter_market_moving(
        self, ranked: list[ScoredContent]
    ) -> list[ScoredContent]:
        """Keep only market-moving items."""
        return filter_market_moving(ranked)

    def select_for_digest(
        self,
        items: Iterable[ItemLike],
        n: int = DEFAULT_TOP_N,
        min_score: int | None = None,
        *,
        market_moving_only: bool = False,
    ) -> list[ScoredContent]:
        """Rank, filter, and take the items worth sending to the digest.

        Args:
            items: Content items to rank.
            n: Maximum number of items returned.
            min_score: Optional score floor.
            market_moving_only: Keep only market-moving categories.

        Returns:
            At most n ranked items.
        """
        ranked = self.rank(items)
        if min_score is not None:
            ranked = filter_by_minimum_score(ranked, min_score)
        if market_moving_only:
            ranked = filter_market_moving(ranked)

        selected = top_n(ranked, n)
        self._log.debug(
            "digest_selection",
            candidates=len(ranked),
            selected=len(selected),
            top_n=n,
            min_score=min_score,
            market_moving_only=market_moving_only,
        )
        return selected


def rank_content(items: Iterable[ItemLike]) -> list[ScoredContent]:
    """Pure function API for ranking content.

    Args:
        items: Content items to rank.

    Returns:
        All items as ScoredContent in ranked order.
    """
    return ContentRanker().rank(items)
