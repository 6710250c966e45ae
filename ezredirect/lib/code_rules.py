"""Built-in code rules.

These cover shortcuts whose behaviour depends on the arguments, e.g. landing
on a site's home page when nothing was typed after the command and on its
search page otherwise.
"""

import logging
from typing import List, Sequence, Tuple

from .rules import CodeRule, Rule

logger = logging.getLogger(__name__)


class GoogleSearchRule(CodeRule):
    """Search Google for the arguments."""

    def produce_uri(self, command: str, args: Sequence[str]) -> str:
        query = " ".join(args)
        logger.debug(f"Encoding query {query!r} from args {list(args)}")
        return self.build_uri("https", "www.google.com", "/search", {"q": query})


class GmailRule(CodeRule):
    def produce_uri(self, command: str, args: Sequence[str]) -> str:
        return self.build_uri("https", "gmail.com")


class CalendarRule(CodeRule):
    def produce_uri(self, command: str, args: Sequence[str]) -> str:
        return self.build_uri("https", "calendar.google.com")


class SiteSearchRule(CodeRule):
    """Home page without arguments, the site's search page with them."""

    authority = ""
    search_path = "/search"
    search_param = "q"

    def produce_uri(self, command: str, args: Sequence[str]) -> str:
        if not args:
            return self.build_uri("https", self.authority)
        return self.build_uri(
            "https",
            self.authority,
            self.search_path,
            {self.search_param: " ".join(args)},
        )


class NpmRule(SiteSearchRule):
    authority = "npmjs.com"


class YouTubeRule(SiteSearchRule):
    authority = "youtube.com"
    search_path = "/results"
    search_param = "search_query"


def builtin_code_rules() -> List[Tuple[str, Rule]]:
    """Return the built-in rules keyed by their default shortcut."""
    return [
        ("g", GoogleSearchRule()),
        ("gmail", GmailRule()),
        ("cal", CalendarRule()),
        ("npm", NpmRule()),
        ("yt", YouTubeRule()),
    ]
