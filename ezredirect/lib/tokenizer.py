"""Split raw address-bar input into a command and its arguments."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ParsedQuery:
    """One tokenized query.

    ``all`` is the raw input exactly as received, never re-joined from the
    tokens, so it keeps the original spacing.
    """

    command: str
    args: Tuple[str, ...]
    all: str

    @property
    def args_text(self) -> str:
        """Arguments re-joined with single spaces."""
        return " ".join(self.args)


def tokenize(raw: str) -> ParsedQuery:
    """Tokenize ``raw`` on runs of whitespace.

    Args:
        raw: Decoded value of the ``q`` query parameter

    Returns:
        ParsedQuery; empty or blank input gives an empty command and no args
    """
    tokens = raw.split()
    if not tokens:
        return ParsedQuery(command="", args=(), all=raw)
    return ParsedQuery(command=tokens[0], args=tuple(tokens[1:]), all=raw)
