from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Console output format is `LABEL message` with labels DEBUG|INFO|WARN|ERROR|SUMMARY.
- DEBUG / INFO / SUMMARY -> stdout
- WARN / ERROR -> stderr (diagnostic stream, mirrors logs/warning.log)

Standard logging only. The persisted warning log lives in
mtd_export.logging.warning_log.
"""

__all__ = [
    "setup_logging",
    "get_logger",
    "log_summary",
    "reset_logging",
    "set_debug",
]

LOGGER_NAME = "mtd_export"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter that prefixes every message with its level label."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging() -> logging.Logger:
    """Setup the application logger (idempotent).

    Returns:
        Configured logger instance for the application
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = LabeledFormatter()

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.setLevel(logging.INFO)
    out_handler.addFilter(_BelowWarningFilter())
    out_handler.setFormatter(formatter)

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)

    logger.addHandler(out_handler)
    logger.addHandler(err_handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def set_debug(logger: logging.Logger) -> None:
    """Lower logger and stdout handler to DEBUG (--debug)."""
    logger.setLevel(logging.DEBUG)
    for h in logger.handlers:
        if h.level < logging.WARNING:
            h.setLevel(logging.DEBUG)
    logger.debug("debug mode enabled")


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
