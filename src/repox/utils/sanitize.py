"""Input sanitizers for values that arrive from the settings form and the search box."""

import re
from urllib.parse import urlsplit

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")
_KEY_RE = re.compile(r"[^a-z0-9_\-]")


def sanitize_text_field(value: object) -> str:
    """
    Strip markup and collapse whitespace in a single-line text value.

    Non-string input yields an empty string.
    """
    if not isinstance(value, str):
        return ""
    text = _SCRIPT_STYLE_RE.sub("", value)
    text = _TAG_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def sanitize_key(value: object) -> str:
    """Lower-case a key and drop every character outside [a-z0-9_-]."""
    if not isinstance(value, str):
        return ""
    return _KEY_RE.sub("", value.lower())


def sanitize_url(value: object) -> str:
    """
    Validate an absolute http(s) URL and normalize it to exactly one trailing slash.

    Args:
        value: Raw URL input

    Returns:
        Normalized URL, or an empty string when the input is not a usable URL
    """
    if not isinstance(value, str):
        return ""
    url = value.strip()
    if not url or any(ch.isspace() for ch in url):
        return ""

    try:
        parts = urlsplit(url)
        # .port raises ValueError for a malformed port
        if parts.scheme.lower() not in ("http", "https") or not parts.hostname or parts.port == 0:
            return ""
    except ValueError:
        return ""

    return url.rstrip("/") + "/"
