"""Logging setup shared by the server and the config tools."""

import json
import logging
import sys
from typing import List, Optional, TextIO

LOGGER_NAME = "ezredirect"

# uvicorn accepts the lower-case form of each of these
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str) -> int:
    """Map a level name to its ``logging`` constant.

    Raises:
        ValueError: If ``level`` is not one of LOG_LEVELS
    """
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``ezredirect`` logger.

    Module loggers (``ezredirect.lib.rules`` and so on) are its children and
    inherit its level and handlers. Calling this again replaces the handlers.

    Args:
        level: One of LOG_LEVELS, case-insensitive
        log_file: Also append records to this file
        json_format: Emit JSON objects instead of text lines
        stream: Console stream, stdout by default

    Returns:
        The configured logger
    """
    numeric_level = parse_level(level)
    formatter = JsonFormatter() if json_format else logging.Formatter(TEXT_FORMAT, DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
