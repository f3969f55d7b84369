"""Environment settings for the digest ranker."""

from .app import AppSettings, get_settings


__all__ = ["AppSettings", "get_settings"]
