"""Data models for content relevance ranking."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from src.relevance.categories import TopicCategory
from src.relevance.constants import DISPLAY_TITLE_CHARS


class ContentItem(BaseModel):
    """A piece of content offered for the digest.

    Text is expected to be plain (HTML already stripped by the caller).

    Attributes:
        title: Optional headline.
        content: Body text.
        source: Name of the source the item came from.
        url: Optional link to the original.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str | None = None
    content: str
    source: str
    url: str | None = None


class ScoredContent(ContentItem):
    """A ContentItem with its category and relevance score.

    Attributes:
        category: Topic category assigned by the classifier.
        relevance_score: Integer relevance score.
        is_breaking: Whether the item matched an urgency keyword.
    """

    category: TopicCategory
    relevance_score: int
    is_breaking: bool = False

    @property
    def display_title(self) -> str:
        """Title, or the start of the content when there is none."""
        return self.title or self.content[:DISPLAY_TITLE_CHARS]


@dataclass(frozen=True)
class RelevanceScore:
    """Result of scoring one item.

    Attributes:
        score: Relevance score.
        is_breaking: Whether a breaking keyword was found.
    """

    score: int
    is_breaking: bool
