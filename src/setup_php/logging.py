"""Logging for setup-php: one JSON object per line on stderr.

Stdout belongs to the setup script, so nothing here writes to it.
"""

import json
import logging
import sys
from typing import Any, Dict

RESET = "\033[0m"

# Keyed by level number so custom levels fall back to no color
LEVEL_COLORS = {
    logging.DEBUG: "\033[34m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[35m\033[1m",
}


class JsonFormatter(logging.Formatter):
    """Render records as color-coded single line JSON."""

    def __init__(self, colored: bool = True):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S")
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        output = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if hasattr(record, "data"):
            output["data"] = record.data
        if record.exc_info:
            output["exc"] = self.formatException(record.exc_info)

        line = json.dumps(output, default=str)
        if not self.colored:
            return line
        return f"{LEVEL_COLORS.get(record.levelno, '')}{line}{RESET}"


def configure_logging(level: int = logging.DEBUG) -> None:
    """Attach the JSON stderr handler to the ``setup_php`` logger once."""
    app_logger = logging.getLogger("setup_php")
    if app_logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter(colored=sys.stderr.isatty()))
    handler.setLevel(level)

    app_logger.setLevel(level)
    app_logger.addHandler(handler)
    app_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``setup_php`` namespace; module names pass through."""
    if name == "setup_php" or name.startswith("setup_php."):
        return logging.getLogger(name)
    return logging.getLogger(f"setup_php.{name}")


def log_with_data(
    logger: logging.Logger, level: int, msg: str, data: Dict[str, Any] = None
):
    """Log ``msg`` with ``data`` attached as the record's structured payload."""
    if data:
        logger.log(level, msg, extra={"data": data})
    else:
        logger.log(level, msg)
