"""Observability: diagnostic logging for the patterns package."""

from patterns.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
