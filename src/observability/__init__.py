"""Observability module for structured logging."""

from src.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_logging,
    parse_log_level,
)


__all__ = [
    "bind_run_context",
    "clear_run_context",
    "configure_logging",
    "parse_log_level",
]
