"""Rule types: the producers of destination URIs."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Sequence
from urllib.parse import quote, urlencode, urlunsplit

from .common.validators import is_valid_uri
from .errors import ConfigError, SubstitutionError
from .substitution import placeholders_in, substitute, template_skeleton
from .tokenizer import ParsedQuery

logger = logging.getLogger(__name__)


class Rule(ABC):
    """Anything that can turn a command and its arguments into a URI."""

    kind = "rule"

    @abstractmethod
    def produce_uri(self, command: str, args: Sequence[str]) -> str:
        """Produce the destination URI.

        Args:
            command: First token of the input
            args: Remaining tokens, in order

        Returns:
            Absolute URI string

        Raises:
            RuleError: If no URI can be produced for these arguments
        """
        ...

    def produce_for(self, query: ParsedQuery) -> str:
        """Produce the URI for a tokenized query.

        Rules that need more than the command and its arguments override this.
        """
        return self.produce_uri(query.command, list(query.args))

    def describe(self) -> Optional[str]:
        """Short human-readable form used by the rules listing."""
        return None


class TemplateRule(Rule):
    """Rule backed by a URL template with ``{ARGS}``/``{ALL}`` placeholders."""

    kind = "template"

    def __init__(self, template: str):
        self._template = template

    @property
    def template(self) -> str:
        return self._template

    @property
    def placeholders(self):
        return placeholders_in(self._template)

    def validate(self) -> None:
        """Check that the template is a valid URI independent of any input.

        Raises:
            ConfigError: If the placeholder-free skeleton is not a valid URI
        """
        is_valid, error = is_valid_uri(template_skeleton(self._template))
        if not is_valid:
            raise ConfigError(f"Invalid URL template {self._template!r}: {error}")

    def produce_uri(
        self,
        command: str,
        args: Sequence[str],
        raw: Optional[str] = None,
    ) -> str:
        args_text = " ".join(args)
        if raw is None:
            raw = " ".join([command, *args])
        uri = substitute(self._template, args_text, raw)
        logger.debug(f"Produce URI {uri}")

        is_valid, error = is_valid_uri(uri)
        if not is_valid:
            raise SubstitutionError(f"URI Parse error for {uri}: {error}")
        return uri

    def produce_for(self, query: ParsedQuery) -> str:
        return self.produce_uri(query.command, query.args, query.all)

    def describe(self) -> str:
        return self._template

    def __repr__(self) -> str:
        return f"TemplateRule[uri={self._template}]"


class CodeRule(Rule):
    """Base class for rules written in Python rather than as templates.

    Subclasses implement :meth:`produce_uri` and raise :class:`RuleError`
    with a descriptive message when the arguments do not suit them.
    """

    kind = "code"

    @staticmethod
    def build_uri(
        scheme: str,
        authority: str,
        path: str = "/",
        query: Optional[Dict[str, str]] = None,
    ) -> str:
        """Assemble a URI from components, percent-encoding the query."""
        # %20 rather than + for spaces, matching template substitution
        query_string = urlencode(query, safe="", quote_via=quote) if query else ""
        return urlunsplit((scheme, authority, path, query_string, ""))

    def describe(self) -> str:
        return self.__class__.__name__


class FunctionRule(CodeRule):
    """Adapt a plain ``(command, args) -> str`` callable into a rule."""

    def __init__(self, func: Callable[[str, Sequence[str]], str], name: Optional[str] = None):
        self.func = func
        self.name = name or getattr(func, "__name__", "function")

    def produce_uri(self, command: str, args: Sequence[str]) -> str:
        return self.func(command, list(args))

    def describe(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"FunctionRule[{self.name}]"


def code_rule(func: Callable[[str, Sequence[str]], str]) -> FunctionRule:
    """Decorator turning a function into a :class:`FunctionRule`."""
    return FunctionRule(func)


__all__ = [
    "Rule",
    "TemplateRule",
    "CodeRule",
    "FunctionRule",
    "code_rule",
]
