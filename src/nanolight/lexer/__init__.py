"""Priority-ordered regex lexer for nanolight.

The lexer applies a grammar's pattern table in priority order, letting
each pattern claim spans no earlier pattern owns, and switches grammar
inside embedded regions (script bodies inside markup).

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer and the tokenize functions
├── core.py              # Lexer class (priority scan + dispatch)
├── embedding.py         # Region location + context-switching scan mixin
└── claims.py            # ClaimSet (disjoint interval bookkeeping)

Usage:
    >>> from nanolight.grammars import JAVASCRIPT
    >>> from nanolight.lexer import tokenize_grammar
    >>> for token in tokenize_grammar("42 + 1", JAVASCRIPT):
    ...     print(token)
Token(NUMBER, '42', 0:2)
Token(OPERATOR, '+', 3:4)
Token(NUMBER, '1', 5:6)

"""

from nanolight.lexer.claims import ClaimSet
from nanolight.lexer.core import Lexer, tokenize_embedded, tokenize_grammar, tokenize_patterns
from nanolight.lexer.embedding import locate_regions

__all__ = [
    "ClaimSet",
    "Lexer",
    "locate_regions",
    "tokenize_embedded",
    "tokenize_grammar",
    "tokenize_patterns",
]
