"""HTML pattern table and script embedding.

Ordered by priority: comments first, then quoted attribute values, then
attribute names, then whole tags. A tag carrying quoted attributes loses
to those attributes (its span is already partly claimed), so only bare
tags such as ``<div>`` and ``</div>`` come out as tag tokens.

``<script>`` bodies are lexed with the JavaScript grammar; the opening and
closing tags themselves stay HTML tokens.
"""

from __future__ import annotations

import re

from nanolight.grammar import Embedding, Grammar, Pattern
from nanolight.grammars.javascript import JAVASCRIPT
from nanolight.tokens import TokenKind

HTML_PATTERNS: tuple[Pattern, ...] = (
    # Comments (highest priority)
    Pattern.compile(
        "html-comment",
        r"<!--[\s\S]*?-->",
        TokenKind.COMMENT,
        closer="-->",
    ),
    # Attribute values
    Pattern.compile(
        "attr-value-double",
        r'"(?:[^"\\]|\\.)*+"',
        TokenKind.ATTR_VALUE,
        closer='"',
    ),
    Pattern.compile(
        "attr-value-single",
        r"'(?:[^'\\]|\\.)*+'",
        TokenKind.ATTR_VALUE,
        closer="'",
    ),
    # Attribute names: must come after values, before tags
    Pattern.compile(
        "attr-name",
        r"\b[a-zA-Z][a-zA-Z0-9:_-]*+(?=\s*=)",
        TokenKind.ATTR_NAME,
        re.ASCII,
    ),
    Pattern.compile(
        "tag",
        r"</?[a-zA-Z][\w:-]*+[^>]*+>",
        TokenKind.TAG,
        re.IGNORECASE | re.ASCII,
        closer=">",
    ),
)

# Non-greedy: each opener binds to the nearest closer; nesting is unsupported.
# The open tag may not contain "<".
SCRIPT_EMBEDDING = Embedding.compile(
    "script",
    r"<script\b[^<>]*+>(?P<inner>[\s\S]*?)</script>",
    JAVASCRIPT,
    closer=r"</script>",
)

HTML = Grammar(
    name="html",
    patterns=HTML_PATTERNS,
    embeddings=(SCRIPT_EMBEDDING,),
    aliases=frozenset({"htm", "xhtml"}),
)
