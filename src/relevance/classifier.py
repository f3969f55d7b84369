"""Keyword-based topic classification.

Each category scores one point per distinct keyword found anywhere in
the lowercased title + content. The category with the strictly highest
tally wins; ties go to the category scanned first in
CLASSIFICATION_ORDER, and a text with no hits at all is OTHER.
"""

from collections.abc import Mapping, Sequence

from src.relevance.categories import (
    CATEGORY_PROFILES,
    CLASSIFICATION_ORDER,
    TopicCategory,
)


def build_match_text(title: str | None, content: str) -> str:
    """Join title and content into the lowercased text used for matching.

    Args:
        title: Optional title.
        content: Body text.

    Returns:
        Lowercased "title content" string.
    """
    return f"{title or ''} {content}".lower()


class TopicClassifier:
    """Assigns exactly one TopicCategory to a piece of text.

    Keyword lists are lowercased once at construction so classification
    does no per-call table work.
    """

    def __init__(
        self, keywords: Mapping[TopicCategory, Sequence[str]] | None = None
    ) -> None:
        """Initialize the classifier.

        Args:
            keywords: Optional category -> keywords table. Defaults to the
                built-in category profiles. Categories missing from a
                custom table have no keywords.
        """
        if keywords is None:
            keywords = {c: p.keywords for c, p in CATEGORY_PROFILES.items()}

        self._keywords: tuple[tuple[TopicCategory, tuple[str, ...]], ...] = tuple(
            (category, tuple(kw.lower() for kw in keywords.get(category, ())))
            for category in CLASSIFICATION_ORDER
            if category is not TopicCategory.OTHER
        )

    def tally_text(self, text: str) -> dict[TopicCategory, int]:
        """Count distinct keyword hits per category in lowercased text.

        Args:
            text: Already-lowercased text.

        Returns:
            Category -> number of its keywords present, in scan order.
        """
        return {
            category: sum(1 for keyword in keywords if keyword in text)
            for category, keywords in self._keywords
        }

    def tally(self, title: str | None, content: str) -> dict[TopicCategory, int]:
        """Count distinct keyword hits per category.

        Args:
            title: Optional title.
            content: Body text.

        Returns:
            Category -> number of its keywords present.
        """
        return self.tally_text(build_match_text(title, content))

    def classify(self, title: str | None, content: str) -> TopicCategory:
        """Classify an item into a single topic category.

        Args:
            title: Optional title.
            content: Body text.

        Returns:
            Winning TopicCategory, OTHER when nothing matches.
        """
        best_category = TopicCategory.OTHER
        best_hits = 0

        for category, hits in self.tally(title, content).items():
            if hits > best_hits:
                best_category = category
                best_hits = hits

        return best_category


_default_classifier = TopicClassifier()


def classify_content(title: str | None, content: str) -> TopicCategory:
    """Classify with the built-in keyword table.

    Args:
        title: Optional title.
        content: Body text.

    Returns:
        Winning TopicCategory.
    """
    return _default_classifier.classify(title, content)
