"""Token and TokenKind definitions for the nanolight lexer.

The lexer produces a list of Token objects that the renderer consumes.
Each Token has a kind, the matched text, and its half-open span in the
source buffer.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    The closed set of lexical classes a highlighter can assign. Each
    value doubles as the CSS class suffix used by the HTML renderer.

    """

    # Script
    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    OPERATOR = "operator"

    # Markup
    TAG = "tag"
    ATTR_NAME = "attr-name"
    ATTR_VALUE = "attr-value"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of source text.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: The matched substring, equal to ``source[start:end]``
        start: Absolute start offset in source (inclusive)
        end: Absolute end offset in source (exclusive)

    Invariant:
        ``0 <= start < end <= len(source)``. Tokens produced by a single
        tokenize call never overlap.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenKind
    text: str
    start: int
    end: int

    def shifted(self, offset: int) -> Token:
        """Return a copy translated by ``offset`` characters.

        Used to move tokens lexed from an embedded region back into the
        coordinate space of the enclosing buffer.
        """
        return Token(self.kind, self.text, self.start + offset, self.end + offset)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.start}:{self.end})"

    def __len__(self) -> int:
        return self.end - self.start
