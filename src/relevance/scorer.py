"""Relevance scoring for classified content."""

from collections.abc import Sequence

from src.relevance.categories import (
    TopicCategory,
    category_keywords,
    category_weight,
)
from src.relevance.classifier import build_match_text
from src.relevance.constants import (
    BREAKING_BONUS,
    BREAKING_KEYWORDS,
    TITLE_KEYWORD_BONUS,
)
from src.relevance.models import RelevanceScore


class RelevanceScorer:
    """Computes an integer relevance score and a breaking flag.

    Scoring formula:
        score = category_weight + breaking_bonus + title_bonus

    Where:
        - category_weight: Static priority weight of the category
        - breaking_bonus: BREAKING_BONUS once if any urgency keyword
          appears in title + content, else 0
        - title_bonus: TITLE_KEYWORD_BONUS for every MACRO_DATA or
          MARKETS keyword found in the title
    """

    def __init__(
        self,
        breaking_keywords: Sequence[str] = BREAKING_KEYWORDS,
        title_keywords: Sequence[str] | None = None,
    ) -> None:
        """Initialize the scorer.

        Args:
            breaking_keywords: Urgency keywords, scanned in order.
            title_keywords: Keywords rewarded in titles. Defaults to the
                MACRO_DATA keywords followed by the MARKETS keywords.
        """
        if title_keywords is None:
            title_keywords = category_keywords(
                TopicCategory.MACRO_DATA
            ) + category_keywords(TopicCategory.MARKETS)

        self._breaking_keywords = tuple(kw.lower() for kw in breaking_keywords)
        self._title_keywords = tuple(kw.lower() for kw in title_keywords)

    def score(
        self, title: str | None, content: str, category: TopicCategory
    ) -> RelevanceScore:
        """Score one item.

        Args:
            title: Optional title.
            content: Body text.
            category: Category assigned by the classifier.

        Returns:
            RelevanceScore with the total and the breaking flag.
        """
        score = category_weight(category)

        is_breaking = self._is_breaking(build_match_text(title, content))
        if is_breaking:
            score += BREAKING_BONUS

        score += self._title_bonus(title)

        return RelevanceScore(score=score, is_breaking=is_breaking)

    def _is_breaking(self, text: str) -> bool:
        """Check for any urgency keyword, stopping at the first hit."""
        return any(keyword in text for keyword in self._breaking_keywords)

    def _title_bonus(self, title: str | None) -> int:
        """Compute the cumulative title keyword bonus.

        Args:
            title: Optional title.

        Returns:
            TITLE_KEYWORD_BONUS per title keyword present.
        """
        title_lower = (title or "").lower()
        hits = sum(1 for keyword in self._title_keywords if keyword in title_lower)
        return hits * TITLE_KEYWORD_BONUS


_default_scorer = RelevanceScorer()


def score_relevance(
    title: str | None, content: str, category: TopicCategory
) -> RelevanceScore:
    """Score with the built-in keyword tables.

    Args:
        title: Optional title.
        content: Body text.
        category: Category assigned by the classifier.

    Returns:
        RelevanceScore with the total and the breaking flag.
    """
    return _default_scorer.score(title, content, category)
