"""
Logging infrastructure for the assessment tooling.

Provides:
- Timestamped, level-aligned log lines with millisecond precision
- Optional phase prefix (e.g., "assess", "validate")
- Console output on stderr and optional file output
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class MillisecondsFormatter(logging.Formatter):
    """Custom formatter that includes milliseconds and aligns log levels."""

    def formatTime(self, record, datefmt=None):  # noqa: N802 - must match parent class method name
        """Override formatTime to include milliseconds."""
        ct = datetime.fromtimestamp(record.created)
        if datefmt and "%f" in datefmt:
            s = ct.strftime(datefmt.replace(",%f", ""))
            return s + f",{int(record.msecs):03d}"
        elif datefmt:
            return ct.strftime(datefmt)
        else:
            return ct.strftime("%Y-%m-%d %H:%M:%S") + f",{int(record.msecs):03d}"


def _format_string(phase: Optional[str] = None) -> str:
    if phase:
        return f"%(asctime)s | %(levelname)-8s | {phase} | %(filename)s:%(lineno)d | %(message)s"
    return "%(asctime)s | %(levelname)-8s | %(filename)s:%(lineno)d | %(message)s"


def _make_formatter(phase: Optional[str] = None) -> MillisecondsFormatter:
    return MillisecondsFormatter(_format_string(phase), datefmt="%Y-%m-%d %H:%M:%S,%f")


def get_logger(
    name: str = "mcm_framework",
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    phase: Optional[str] = None,
) -> logging.Logger:
    """
    Get a logger with its own console (and optional file) handler.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to also log to. The file receives DEBUG and
            above; the console handler keeps log_level.
        phase: Optional phase name shown in every line

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if log_file else getattr(logging, log_level.upper()))

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(_make_formatter(phase))
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_make_formatter(phase))
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_file}")

    return logger


# ============================================================================
# Global Logging Configuration
# ============================================================================


def configure_global_logging(log_level: str = "INFO", phase: Optional[str] = None):
    """
    Configure the root logger with the unified format.

    Call this early in application startup. Logs go to stderr so that
    command output on stdout (e.g., --json) stays machine-readable.

    Args:
        log_level: Logging level to apply globally (DEBUG, INFO, WARNING, ERROR)
        phase: Optional phase name (e.g., "assess")
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.handlers.clear()

    root_handler = logging.StreamHandler(sys.stderr)
    root_handler.setLevel(getattr(logging, log_level.upper()))
    root_handler.setFormatter(_make_formatter(phase))
    root_logger.addHandler(root_handler)
