"""Compact stderr logging for a single ka run."""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO


class KaLogFormatter(logging.Formatter):
    """Timestamped, level-coloured single-line formatter."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        if self.use_colors:
            level_color = self.LEVEL_COLORS.get(record.levelname, "")
            reset = self.RESET
        else:
            level_color = ""
            reset = ""

        message = (
            f"{timestamp} {level_color}{record.levelname:8s}{reset} "
            f"[{record.name}] {record.getMessage()}"
        )
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the ``ka`` logger hierarchy.

    Args:
        verbose: Log at DEBUG instead of WARNING
        stream: Destination (defaults to stderr)

    Returns:
        The package logger
    """
    stream = stream or sys.stderr
    logger = logging.getLogger("ka")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Close existing handlers before clearing (repeated runs in one interpreter)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    use_colors = stream.isatty() if hasattr(stream, "isatty") else False
    handler = logging.StreamHandler(stream)
    handler.setFormatter(KaLogFormatter(use_colors=use_colors))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
