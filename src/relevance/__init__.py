"""Content relevance ranking for the daily macro digest.

This module classifies content items into topic categories by keyword
hits, scores them by category weight plus breaking-news and title
bonuses, and orders a batch so the most market-relevant items can be
handed to the digest prompt.
"""

from src.relevance.categories import (
    CATEGORY_PROFILES,
    CLASSIFICATION_ORDER,
    MARKET_MOVING_CATEGORIES,
    CategoryProfile,
    TopicCategory,
    category_label,
    category_weight,
)
from src.relevance.classifier import TopicClassifier, classify_content
from src.relevance.diagnostics import format_ranking, log_content_ranking
from src.relevance.metrics import RelevanceMetrics
from src.relevance.models import ContentItem, RelevanceScore, ScoredContent
from src.relevance.ranker import (
    ContentRanker,
    filter_by_minimum_score,
    filter_market_moving,
    rank_content,
    sort_scored,
    top_n,
)
from src.relevance.scorer import RelevanceScorer, score_relevance


__all__ = [
    "CATEGORY_PROFILES",
    "CLASSIFICATION_ORDER",
    "MARKET_MOVING_CATEGORIES",
    "CategoryProfile",
    "ContentItem",
    "ContentRanker",
    "RelevanceMetrics",
    "RelevanceScore",
    "RelevanceScorer",
    "ScoredContent",
    "TopicCategory",
    "TopicClassifier",
    "category_label",
    "category_weight",
    "classify_content",
    "filter_by_minimum_score",
    "filter_market_moving",
    "format_ranking",
    "log_content_ranking",
    "rank_content",
    "score_relevance",
    "sort_scored",
    "top_n",
]
