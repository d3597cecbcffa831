"""Priority lexer: resolves overlapping pattern matches into one token stream.

Each pattern of a grammar scans the whole buffer in table order. A match
is accepted only if none of its characters has been claimed by an earlier
(higher-priority) pattern; accepted matches claim their span. The result is
sorted by start offset. Because claimed spans are disjoint, that order is
total.

Malformed input never raises: a pattern that cannot match contributes no
tokens and the uncovered text is left for the renderer to emit as-is.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; grammars are read-only.

"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from operator import attrgetter

from nanolight.grammar import EmbeddedRegion, Embedding, Grammar, Pattern, last_closer_end
from nanolight.lexer.claims import ClaimSet
from nanolight.lexer.embedding import EmbeddingScannerMixin
from nanolight.tokens import Token

_by_start = attrgetter("start")
_by_inner_offset = attrgetter("inner_offset")


class Lexer(
    # Scanners
    EmbeddingScannerMixin,
):
    """Priority-ordered greedy lexer.

    Usage:
            >>> from nanolight.grammars import JAVASCRIPT
            >>> for token in Lexer("42 + 1", JAVASCRIPT).tokenize():
            ...     print(token)
        Token(NUMBER, '42', 0:2)
        Token(OPERATOR, '+', 3:4)
        Token(NUMBER, '1', 5:6)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_grammar",
        "_claims",
        "_tokens",
    )

    def __init__(self, source: str, grammar: Grammar) -> None:
        """Initialize lexer with source text.

        Args:
            source: Text to tokenize
            grammar: Grammar to apply
        """
        self._source = source
        self._grammar = grammar
        self._claims = ClaimSet()
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize source into a start-sorted, non-overlapping token list.

        Returns:
            Tokens ordered by start offset

        Complexity: O(m log m) bookkeeping over m candidate matches, plus
        the cost of the pattern scans themselves.
        """
        self._claims = ClaimSet()
        self._tokens = []
        if not self._source:
            return []

        grammar = self._grammar
        if grammar.embeds:
            self._scan_embedded(grammar.embeddings, grammar.patterns)
        else:
            self._scan_patterns(grammar.patterns)

        self._tokens.sort(key=_by_start)
        return self._tokens

    def _scan_patterns(
        self,
        patterns: Sequence[Pattern],
        regions: Sequence[EmbeddedRegion] = (),
    ) -> None:
        """Claim matches of each pattern in priority order.

        A pattern with a closer is only searched up to the last closer in
        the buffer.

        Args:
            patterns: Pattern table, highest priority first
            regions: Embedded regions whose inner text is off-limits
        """
        source = self._source
        inner_starts, inner_ends = _inner_spans(regions)
        for pattern in patterns:
            limit = last_closer_end(pattern.closer, source)
            if limit < 0:
                continue
            search = pattern.regex.search
            kind = pattern.kind
            pos = 0
            while (match := search(source, pos, limit)) is not None:
                start, end = match.span()
                idx = bisect_right(inner_starts, start) - 1
                if idx >= 0 and start < inner_ends[idx]:
                    # Dropped even when the match runs past the inner text;
                    # the embedded grammar owns every offset it starts at
                    pos = inner_ends[idx]
                    continue
                if end > start:
                    self._accept(Token(kind, match.group(), start, end))
                # Zero-width matches must not stall the scan
                pos = end if end > start else start + 1

    def _accept(self, token: Token) -> bool:
        """Record ``token`` if its span is still unclaimed.

        Returns:
            True if the token was accepted
        """
        if self._claims.claim(token.start, token.end):
            self._tokens.append(token)
            return True
        return False


def _inner_spans(regions: Sequence[EmbeddedRegion]) -> tuple[list[int], list[int]]:
    """Merge the regions' inner texts into sorted, disjoint spans.

    Returns:
        Parallel lists of span starts and ends, for bisect lookups
    """
    starts: list[int] = []
    ends: list[int] = []
    for region in sorted(regions, key=_by_inner_offset):
        start, end = region.inner_offset, region.inner_end
        if start >= end:
            continue
        if ends and start <= ends[-1]:
            ends[-1] = max(ends[-1], end)
        else:
            starts.append(start)
            ends.append(end)
    return starts, ends


def tokenize_patterns(source: str, patterns: Sequence[Pattern]) -> list[Token]:
    """Tokenize ``source`` with a bare pattern table.

    Args:
        source: Text to tokenize
        patterns: Patterns in priority order

    Returns:
        Start-sorted, non-overlapping tokens. Empty text yields ``[]``.

    Example:
        >>> from nanolight.grammars.javascript import JAVASCRIPT_PATTERNS
        >>> [t.text for t in tokenize_patterns("// a", JAVASCRIPT_PATTERNS)]
        ['// a']
    """
    grammar = Grammar(name="<patterns>", patterns=tuple(patterns))
    return Lexer(source, grammar).tokenize()


def tokenize_embedded(
    source: str,
    patterns: Sequence[Pattern],
    embeddings: Sequence[Embedding],
) -> list[Token]:
    """Tokenize ``source`` with a host pattern table and its embeddings.

    Args:
        source: Host text
        patterns: Host patterns in priority order
        embeddings: Regions to lex with other grammars

    Returns:
        Host and embedded tokens merged into one start-sorted list

    Example:
        >>> from nanolight.grammars.html import HTML_PATTERNS, SCRIPT_EMBEDDING
        >>> tokens = tokenize_embedded("<script>let x</script>", HTML_PATTERNS, [SCRIPT_EMBEDDING])
        >>> [(t.kind.value, t.text) for t in tokens]
        [('tag', '<script>'), ('keyword', 'let'), ('tag', '</script>')]
    """
    grammar = Grammar(name="<embedded>", patterns=tuple(patterns), embeddings=tuple(embeddings))
    return Lexer(source, grammar).tokenize()


def tokenize_grammar(source: str, grammar: Grammar) -> list[Token]:
    """Tokenize ``source`` with ``grammar``.

    Dispatches to the context-switching scan when the grammar declares
    embeddings, otherwise to plain priority scanning.

    Args:
        source: Text to tokenize
        grammar: Grammar to apply

    Returns:
        Start-sorted, non-overlapping tokens
    """
    return Lexer(source, grammar).tokenize()
