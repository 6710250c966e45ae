"""Core rule resolution engine."""

from .errors import ConfigError, NoFallbackError, RedirectError, RuleError, SubstitutionError
from .tokenizer import ParsedQuery, tokenize
from .rules import CodeRule, FunctionRule, Rule, TemplateRule, code_rule
from .config_file import ConfigEntry, load_config_file, parse_config_lines
from .ruleset import FALLBACK_KEY, RuleSet, build_ruleset, load_ruleset
from .resolver import Failed, Redirected, Resolver
from .code_rules import builtin_code_rules

__all__ = [
    "RedirectError",
    "ConfigError",
    "NoFallbackError",
    "RuleError",
    "SubstitutionError",
    "ParsedQuery",
    "tokenize",
    "Rule",
    "TemplateRule",
    "CodeRule",
    "FunctionRule",
    "code_rule",
    "ConfigEntry",
    "load_config_file",
    "parse_config_lines",
    "FALLBACK_KEY",
    "RuleSet",
    "build_ruleset",
    "load_ruleset",
    "Resolver",
    "Redirected",
    "Failed",
    "builtin_code_rules",
]
