"""Relevance configuration schema."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from src.ingest.constants import DEFAULT_FEED_MAX_CHARS, MAX_CONTENT_CHARS
from src.relevance.constants import DEFAULT_TOP_N, DIAGNOSTIC_LIMIT


class RelevanceConfig(BaseModel):
    """Root configuration for relevance.yaml.

    Attributes:
        version: Schema version.
        top_n: Number of ranked items handed to the digest.
        min_score: Optional score floor applied before taking top N.
        market_moving_only: Keep only market-moving categories.
        feed_max_chars: Characters kept from each feed entry body.
        diagnostic_limit: Entries shown in ranking diagnostics.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: Annotated[str, Field(pattern=r"^\d+\.\d+$")] = "1.0"
    top_n: Annotated[int, Field(ge=0)] = DEFAULT_TOP_N
    min_score: int | None = None
    market_moving_only: bool = False
    feed_max_chars: Annotated[int, Field(ge=1, le=MAX_CONTENT_CHARS)] = (
        DEFAULT_FEED_MAX_CHARS
    )
    diagnostic_limit: Annotated[int, Field(ge=0)] = DIAGNOSTIC_LIMIT
