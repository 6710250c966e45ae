"""Exceptions raised by the rule resolution engine."""


class RedirectError(Exception):
    """Base class for all redirector errors."""


class ConfigError(RedirectError):
    """The rule set could not be built (bad line, duplicate key, bad template)."""


class NoFallbackError(RedirectError):
    """No rule matched the command and no fallback rule is configured."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(
            f"Could not find rule for cmd {command!r}, and no default given"
        )


class RuleError(RedirectError):
    """A rule failed to produce a destination URI."""


class SubstitutionError(RuleError):
    """A template rule produced a string that is not a valid absolute URI."""
