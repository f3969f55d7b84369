"""Configuration schema definitions."""

from src.config.schemas.relevance import RelevanceConfig


__all__ = ["RelevanceConfig"]
