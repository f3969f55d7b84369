"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from src.relevance.metrics import RelevanceMetrics


@pytest.fixture(autouse=True)
def _isolate_global_state() -> Iterator[None]:
    """Reset the metrics singleton and logging configuration per test."""
    RelevanceMetrics.reset()
    yield
    RelevanceMetrics.reset()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
