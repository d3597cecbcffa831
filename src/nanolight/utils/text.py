"""Text processing utilities for nanolight.

Example:
    >>> from nanolight.utils.text import escape_html
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import re

# Reserved characters and their entity replacements
HTML_ENTITIES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#39;",
}

_HTML_SPECIAL = re.compile(r"""[<>&"']""")


def escape_html(text: object) -> str:
    """Escape HTML special characters.

    Converts the five reserved characters to entities:
    - < becomes &lt;
    - > becomes &gt;
    - & becomes &amp;
    - " becomes &quot;
    - ' becomes &#39;

    Args:
        text: Text to escape. ``None`` yields ``""``; other non-string
            values are converted with ``str()`` first.

    Returns:
        Escaped text safe for element content and attribute values

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#39;xss&#39;)&lt;/script&gt;'
        >>> escape_html(None)
        ''
        >>> escape_html(42)
        '42'
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    if not text:
        return ""
    return _HTML_SPECIAL.sub(lambda m: HTML_ENTITIES[m.group()], text)
