"""Immutable mapping from shortcut key to rule."""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .common.validators import is_valid_shortcut_key
from .config_file import ConfigEntry, load_config_file
from .errors import ConfigError, NoFallbackError
from .rules import Rule, TemplateRule

FALLBACK_KEY = "_"


class RuleSet(Mapping):
    """Read-only shortcut table.

    Built once by :func:`build_ruleset` and shared by every request handler
    without locking; nothing writes to it after construction.
    """

    def __init__(self, rules: Mapping[str, Rule]):
        self._rules = MappingProxyType(dict(rules))

    def __getitem__(self, key: str) -> Rule:
        return self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def fallback(self) -> Optional[Rule]:
        return self._rules.get(FALLBACK_KEY)

    def lookup(self, command: str) -> Tuple[str, Rule]:
        """Find the rule for ``command``: exact match, else the fallback.

        Returns:
            Tuple of (matched key, rule)

        Raises:
            NoFallbackError: If nothing matches and no fallback is configured
        """
        rule = self._rules.get(command)
        if rule is not None:
            return command, rule

        fallback = self.fallback
        if fallback is None:
            raise NoFallbackError(command)
        return FALLBACK_KEY, fallback

    def __repr__(self) -> str:
        return f"RuleSet({list(self._rules)})"


def build_ruleset(
    config_entries: Iterable[ConfigEntry] = (),
    code_rules: Iterable[Tuple[str, Rule]] = (),
    logger: Optional[logging.Logger] = None,
) -> RuleSet:
    """Build the rule set from config entries and code-registered rules.
    
    Duplicate keys are rejected, whether they repeat within the config,
    within the code rules, or across the two.
    
    Args:
        config_entries: Parsed config lines, in file order
        code_rules: (key, rule) pairs registered in code
        logger: Optional logger
        
    Returns:
        RuleSet
        
    Raises:
        ConfigError: On an invalid key, duplicate key or invalid template
    """
    logger = logger or logging.getLogger(__name__)
    rules: Dict[str, Rule] = {}
    origins: Dict[str, str] = {}
    
    def insert(key: str, rule: Rule, origin: str) -> None:
        is_valid, error = is_valid_shortcut_key(key)
        if not is_valid:
            raise ConfigError(f"{error} ({origin})")
        if key in rules:
            raise ConfigError(
                f"Duplicate shortcut {key!r} ({origin}); first defined at {origins[key]}"
            )
        if not isinstance(rule, Rule):
            raise ConfigError(f"Rule for {key!r} ({origin}) does not implement Rule")
        if isinstance(rule, TemplateRule):
            try:
                rule.validate()
            except ConfigError as e:
                raise ConfigError(f"{e} ({origin})") from e
        
        logger.info(f"Insert {key}")
        rules[key] = rule
        origins[key] = origin
    
    for entry in config_entries:
        insert(entry.key, TemplateRule(entry.template), f"config line {entry.line_no}")
    
    for key, rule in code_rules:
        insert(key, rule, "code")
    
    if FALLBACK_KEY not in rules:
        logger.warning("No fallback rule '_' configured; unmatched commands will fail")
    
    return RuleSet(rules)


def load_ruleset(
    rules_file=None,
    strict: bool = True,
    code_rules: Iterable[Tuple[str, Rule]] = (),
    logger: Optional[logging.Logger] = None,
) -> RuleSet:
    """Load the config file (if any) and build the rule set from it.
    
    Raises:
        ConfigError: If the file is unreadable or the rule set cannot be built
    """
    code_rules = list(code_rules)
    if rules_file is None and not code_rules:
        raise ConfigError("No config file given and no code rules registered")
    
    entries = load_config_file(rules_file, strict=strict, logger=logger) if rules_file else []
    return build_ruleset(entries, code_rules, logger=logger)
