"""Line-based shortcut config file loader.

Each mapping is one line of the form ``<shortcut> = <url>`` with exactly one
space either side of ``=``. Blank lines and ``#`` comments are skipped.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import ConfigError

RULE_RE = re.compile(r"^(?P<key>\S+) = (?P<url>\S.*)$")


@dataclass(frozen=True)
class ConfigEntry:
    """One ``key = template`` line from the config file."""

    key: str
    template: str
    line_no: int = 0


def parse_config_lines(
    lines: Iterable[str],
    strict: bool = True,
    logger: Optional[logging.Logger] = None,
) -> List[ConfigEntry]:
    """Parse config lines into entries, keeping file order.
    
    Args:
        lines: Lines of the config file
        strict: Raise on malformed lines instead of skipping them
        logger: Optional logger
        
    Returns:
        List of ConfigEntry
        
    Raises:
        ConfigError: If ``strict`` and a line is malformed
    """
    logger = logger or logging.getLogger(__name__)
    entries = []
    
    for line_no, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        
        match = RULE_RE.match(line)
        if not match:
            message = f"Malformed config line {line_no}: {line!r}: expected (kw) = (url)"
            if strict:
                raise ConfigError(message)
            logger.warning(f"{message}; skipping")
            continue
        
        entries.append(ConfigEntry(match.group("key"), match.group("url"), line_no))
    
    return entries


def load_config_file(
    path: Union[str, Path],
    strict: bool = True,
    logger: Optional[logging.Logger] = None,
) -> List[ConfigEntry]:
    """Read and parse a UTF-8 shortcut config file.
    
    A leading byte-order mark, as some Windows editors write, is dropped.
    
    Raises:
        ConfigError: If the file cannot be read or (when strict) has bad lines
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e
    
    return parse_config_lines(text.splitlines(), strict=strict, logger=logger)
