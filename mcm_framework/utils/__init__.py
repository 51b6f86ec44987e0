"""Shared utilities."""

from .logger import MillisecondsFormatter, configure_global_logging, get_logger

__all__ = ["MillisecondsFormatter", "configure_global_logging", "get_logger"]
