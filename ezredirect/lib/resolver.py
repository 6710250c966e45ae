"""Resolve raw address-bar input to a destination URI."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .common.validators import is_valid_uri, normalize_uri
from .errors import RedirectError, RuleError
from .ruleset import FALLBACK_KEY, RuleSet
from .tokenizer import tokenize


@dataclass(frozen=True)
class Redirected:
    """Successful resolution."""

    target: str
    key: str
    fallback: bool = False


@dataclass(frozen=True)
class Failed:
    """Resolution failure; ``reason`` is safe to show to the user."""

    reason: str
    error: Optional[RedirectError] = None


Outcome = Union[Redirected, Failed]


class Resolver:
    """Tokenize, look up and invoke the matching rule."""
    
    def __init__(self, ruleset: RuleSet, logger: Optional[logging.Logger] = None):
        """Initialize resolver.
        
        Args:
            ruleset: Rule set built at startup
            logger: Optional logger
        """
        self.ruleset = ruleset
        self.logger = logger or logging.getLogger(__name__)
    
    def resolve_with_key(self, raw: str) -> Redirected:
        """Resolve ``raw`` and report which key handled it.
        
        Raises:
            NoFallbackError: If nothing matches and there is no fallback
            RuleError: If the rule fails (SubstitutionError for templates)
        """
        query = tokenize(raw)
        self.logger.debug(f"Attempting redirect for {query}")
        
        key, rule = self.ruleset.lookup(query.command)
        if key != query.command:
            self.logger.debug(f"No rule found for {query.command!r}. Using default")
        
        try:
            uri = rule.produce_for(query)
        except RedirectError:
            raise
        except Exception as e:
            raise RuleError(f"Rule {key!r} failed: {e}") from e
        
        if not isinstance(uri, str):
            raise RuleError(f"Rule {key!r} returned {type(uri).__name__}, expected a URI string")
        is_valid, error = is_valid_uri(uri)
        if not is_valid:
            raise RuleError(f"Rule {key!r} produced an invalid URI {uri!r}: {error}")
        
        return Redirected(target=normalize_uri(uri), key=key, fallback=key == FALLBACK_KEY and query.command != FALLBACK_KEY)
    
    def resolve(self, raw: str) -> str:
        """Resolve ``raw`` to a URI, raising on failure."""
        return self.resolve_with_key(raw).target
    
    def handle(self, raw: str) -> Outcome:
        """Resolve ``raw`` without raising.
        
        Args:
            raw: Decoded ``q`` parameter
            
        Returns:
            Redirected on success, Failed with the reason otherwise
        """
        try:
            outcome = self.resolve_with_key(raw)
        except RedirectError as e:
            self.logger.warning(f"Error evaluating request {raw!r}: {e}")
            return Failed(reason=str(e), error=e)
        
        self.logger.info(f"Returning uri {outcome.target}")
        return outcome
