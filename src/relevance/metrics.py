"""Metrics collection for the relevance module."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class RelevanceMetrics:
    """Metrics for ranking operations.

    Counters accumulate across rank calls until reset.

    Attributes:
        items_ranked: Number of items ranked.
        breaking_count: Items flagged as breaking.
        category_counts: Ranked items per category value.
        score_values: All scores for percentile calculation.
        ranking_duration_ms: Duration of the most recent rank call.
    """

    items_ranked: int = 0
    breaking_count: int = 0
    category_counts: dict[str, int] = field(default_factory=dict)
    score_values: list[int] = field(default_factory=list)
    ranking_duration_ms: float = 0.0

    _instance: ClassVar["RelevanceMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "RelevanceMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_item(self, category: str, score: int, *, is_breaking: bool) -> None:
        """Record one ranked item.

        Args:
            category: Category value of the item.
            score: Relevance score.
            is_breaking: Whether the item is breaking.
        """
        self.items_ranked += 1
        if is_breaking:
            self.breaking_count += 1
        self.category_counts[category] = self.category_counts.get(category, 0) + 1
        self.score_values.append(score)

    def record_ranking_duration(self, duration_ms: float) -> None:
        """Record ranking duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.ranking_duration_ms = duration_ms

    def get_score_percentiles(self) -> dict[str, float]:
        """Calculate score percentiles (p50/p90/p99).

        Returns:
            Dictionary with p50, p90, p99 values.
        """
        if not self.score_values:
            return {"p50": 0.0, "p90": 0.0, "p99": 0.0}

        sorted_scores = sorted(self.score_values)
        n = len(sorted_scores)

        def percentile(p: float) -> float:
            idx = int(p * n / 100)
            return float(sorted_scores[min(idx, n - 1)])

        return {
            "p50": percentile(50),
            "p90": percentile(90),
            "p99": percentile(99),
        }

    def to_dict(self) -> dict[str, object]:
        """Convert metrics to dictionary."""
        return {
            "items_ranked": self.items_ranked,
            "breaking_count": self.breaking_count,
            "category_counts": dict(self.category_counts),
            "ranking_duration_ms": self.ranking_duration_ms,
            "score_percentiles": self.get_score_percentiles(),
        }
