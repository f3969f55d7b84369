"""Configuration loading and validation module."""

from src.config.loader import ConfigLoader, ConfigValidationError, load_config
from src.config.schemas.relevance import RelevanceConfig


__all__ = [
    "ConfigLoader",
    "ConfigValidationError",
    "RelevanceConfig",
    "load_config",
]
