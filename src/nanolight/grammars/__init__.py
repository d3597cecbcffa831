"""Built-in grammars.

Each grammar is an immutable value built once at import time and passed
explicitly to the lexer; nothing here is mutated afterwards.

Available grammars:
- js: JavaScript (aliases: javascript, mjs, cjs)
- html: HTML with JavaScript inside <script> (aliases: htm, xhtml)
"""

from nanolight.grammars.html import HTML, HTML_PATTERNS, SCRIPT_EMBEDDING
from nanolight.grammars.javascript import JAVASCRIPT, JAVASCRIPT_PATTERNS, KEYWORDS

BUILTIN_GRAMMARS = (JAVASCRIPT, HTML)

__all__ = [
    "BUILTIN_GRAMMARS",
    "HTML",
    "HTML_PATTERNS",
    "JAVASCRIPT",
    "JAVASCRIPT_PATTERNS",
    "KEYWORDS",
    "SCRIPT_EMBEDDING",
]
