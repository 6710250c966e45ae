"""Validation utilities for shortcut keys and destination URIs."""

import re
from urllib.parse import quote, urlsplit
from typing import Tuple

# RFC 3986 section 3.1
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_UNSAFE_RE = re.compile(r"[\s\x00-\x1f\x7f]")

HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def is_valid_uri(uri: str) -> Tuple[bool, str]:
    """Validate an absolute destination URI.
    
    Args:
        uri: The URI to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not uri or not isinstance(uri, str):
        return False, "URI is required"
    
    if _UNSAFE_RE.search(uri):
        return False, "URI contains whitespace or control characters"
    
    try:
        result = urlsplit(uri)
        # Accessing port raises for a non-numeric port
        result.port
    except ValueError as e:
        return False, f"Invalid URI format: {e}"
    
    if not result.scheme:
        return False, "URI must be absolute (missing scheme)"
    
    if not _SCHEME_RE.match(result.scheme):
        return False, f"Invalid URI scheme '{result.scheme}'"
    
    if result.scheme.lower() in HOST_SCHEMES and not result.netloc:
        return False, f"{result.scheme} URI must have a host"
    
    return True, ""


def is_valid_shortcut_key(key: str) -> Tuple[bool, str]:
    """Validate a shortcut key.
    
    Args:
        key: The key to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not key or not isinstance(key, str):
        return False, "Shortcut key is required"
    
    if any(ch.isspace() for ch in key):
        return False, f"Shortcut key {key!r} must not contain whitespace"
    
    return True, ""


# Characters Starlette's RedirectResponse leaves unquoted in Location
LOCATION_SAFE = ":/%#?=@[]!$&'()*+,;"


def normalize_uri(uri: str) -> str:
    """Percent-encode characters a Location header would have escaped anyway.
    
    Existing escapes are kept, so the result is stable under re-quoting and
    the reported target matches the redirect that is actually sent.
    """
    return quote(uri, safe=LOCATION_SAFE)
