"""Placeholder substitution for template rules.

Two tokens are recognised literally inside a template:

- ``{ARGS}`` becomes the arguments after the command, joined by single spaces
- ``{ALL}`` becomes the whole raw input, command included

Both values are percent-encoded as a URI component before insertion. The
replacement is a single pass over the template, so text inserted for one
placeholder is never scanned again for the other.
"""

import re
from typing import Set
from urllib.parse import quote

ARGS_PLACEHOLDER = "{ARGS}"
ALL_PLACEHOLDER = "{ALL}"

_PLACEHOLDER_RE = re.compile(
    "|".join(re.escape(p) for p in (ARGS_PLACEHOLDER, ALL_PLACEHOLDER))
)


def encode_component(value: str) -> str:
    """Percent-encode ``value`` for use inside a URI path or query value.

    Only the unreserved characters (letters, digits, ``-_.~``) are left as
    they are. Spaces become ``%20``.
    """
    return quote(value, safe="")


def placeholders_in(template: str) -> Set[str]:
    """Return the placeholders that occur in ``template``."""
    return set(_PLACEHOLDER_RE.findall(template))


def substitute(template: str, args_text: str, all_text: str) -> str:
    """Replace every placeholder occurrence in ``template``.

    Args:
        template: URL template
        args_text: Arguments joined with single spaces (unencoded)
        all_text: Entire raw input (unencoded)

    Returns:
        The substituted string; the template unchanged if it has no placeholders
    """
    values = {
        ARGS_PLACEHOLDER: encode_component(args_text),
        ALL_PLACEHOLDER: encode_component(all_text),
    }
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(0)], template)


def template_skeleton(template: str) -> str:
    """Template with every placeholder replaced by the empty string."""
    return _PLACEHOLDER_RE.sub("", template)
