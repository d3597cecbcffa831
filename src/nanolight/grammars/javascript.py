"""JavaScript pattern table.

Ordered by priority: more specific patterns come first. Comments claim
their span before strings and operators see it, and strings claim theirs
before numbers and keywords, so ``"return 1"`` stays a single string.

Regex literals and the division operator have no pattern: telling ``/``
apart from the start of a comment or a regex needs the preceding token,
which a priority table cannot express.
"""

from __future__ import annotations

import re

from nanolight.grammar import Grammar, Pattern
from nanolight.tokens import TokenKind

KEYWORDS: tuple[str, ...] = (
    "alert",
    "arguments",
    "async",
    "await",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "eval",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "let",
    "new",
    "null",
    "return",
    "static",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "undefined",
    "var",
    "void",
    "while",
    "with",
    "yield",
)

JAVASCRIPT_PATTERNS: tuple[Pattern, ...] = (
    # Comments (highest priority)
    Pattern.compile(
        "single-line-comment",
        r"//[^\r\n\u2028\u2029]*",
        TokenKind.COMMENT,
    ),
    Pattern.compile(
        "multi-line-comment",
        r"/\*[\s\S]*?\*/",
        TokenKind.COMMENT,
        closer=r"\*/",
    ),
    # Template literals with ${...} expressions; an expression ends at "}"
    # and may not hold a backtick, so nested templates split into pieces
    Pattern.compile(
        "template-literal",
        r"`(?:[^`\\$]|\\.|\$(?!\{)|\$\{[^`}]*+\})*+`",
        TokenKind.STRING,
        closer="`",
    ),
    # String literals
    Pattern.compile(
        "double-string",
        r'"(?:[^"\\]|\\[\s\S])*+"',
        TokenKind.STRING,
        closer='"',
    ),
    Pattern.compile(
        "single-string",
        r"'(?:[^'\\]|\\[\s\S])*+'",
        TokenKind.STRING,
        closer="'",
    ),
    # Numbers, including BigInt suffixes
    Pattern.compile(
        "number",
        r"\b(?:0[xX][\da-fA-F]+[nN]?|0[bB][01]+[nN]?|0[oO][0-7]+[nN]?|\d+[nN]|\d*\.?\d+(?:[eE][+-]?\d+)?)\b",
        TokenKind.NUMBER,
        re.ASCII,
    ),
    Pattern.compile(
        "keyword",
        r"\b(?:" + "|".join(KEYWORDS) + r")\b",
        TokenKind.KEYWORD,
        re.ASCII,
    ),
    Pattern.compile(
        "operator",
        r"[+\-*%=!<>&|^~?:]+|\.\.\.",
        TokenKind.OPERATOR,
    ),
)

JAVASCRIPT = Grammar(
    name="js",
    patterns=JAVASCRIPT_PATTERNS,
    aliases=frozenset({"javascript", "mjs", "cjs"}),
)
