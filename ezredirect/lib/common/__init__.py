"""Common utilities for the redirector."""

from .validators import is_valid_uri, is_valid_shortcut_key, normalize_uri
from .logging_config import LOG_LEVELS, parse_level, setup_logging

__all__ = [
    "is_valid_uri",
    "is_valid_shortcut_key",
    "normalize_uri",
    "LOG_LEVELS",
    "parse_level",
    "setup_logging",
]
