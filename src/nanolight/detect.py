"""Language auto-detection.

A deliberately small heuristic: anything that looks like markup is HTML,
everything else is the default (JavaScript).
"""

from __future__ import annotations

import re

# Opening tag, comment, doctype or processing instruction; closing tag;
# DOCTYPE in any case; comment start.
_HTML_INDICATORS = (
    re.compile(r"<[a-zA-Z!?]"),
    re.compile(r"</[a-zA-Z]"),
    re.compile(r"<!DOCTYPE", re.IGNORECASE),
    re.compile(r"<!--"),
)


def looks_like_html(code: str) -> bool:
    """Check whether ``code`` contains markup indicators."""
    return any(pattern.search(code) for pattern in _HTML_INDICATORS)


def detect_language(code: str | None, default: str = "js") -> str:
    """Detect the grammar id for ``code``.

    Args:
        code: Source to inspect
        default: Id returned for blank input and non-markup input

    Returns:
        "html" when markup is found, otherwise ``default``

    Examples:
        >>> detect_language("<div>Hello</div>")
        'html'
        >>> detect_language("2 < 3 && 4 > 1")
        'js'
        >>> detect_language("   ")
        'js'
    """
    if not code or not code.strip():
        return default
    if looks_like_html(code):
        return "html"
    return default
