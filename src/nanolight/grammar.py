"""Grammar model: patterns, embeddings and embedded regions.

A grammar is an ordered table of patterns plus an optional list of
embeddings. Pattern order is the grammar's precedence rule: the lexer
lets earlier patterns claim text before later ones see it.

Thread Safety:
All types here are frozen dataclasses holding compiled ``re.Pattern``
objects, which are themselves safe to use from many threads. Build a
grammar once and share it freely.

Example:
    >>> from nanolight.grammar import Grammar, Pattern
    >>> from nanolight.tokens import TokenKind
    >>> numbers = Grammar(
    ...     name="calc",
    ...     patterns=(
    ...         Pattern.compile("number", r"\\d+", TokenKind.NUMBER),
    ...         Pattern.compile("operator", r"[+*/-]", TokenKind.OPERATOR),
    ...     ),
    ... )
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from nanolight.errors import GrammarError
from nanolight.tokens import TokenKind

# Name of the capture group delimiting an embedding's inner text
INNER_GROUP = "inner"


def last_closer_end(closer: re.Pattern[str] | None, source: str) -> int:
    """End offset of the last ``closer`` match in ``source``.

    Returns ``len(source)`` when there is no closer, and -1 when the
    closer never occurs (nothing that needs it can match).
    """
    if closer is None:
        return len(source)
    end = -1
    for match in closer.finditer(source):
        end = match.end()
    return end


def _compile_closer(closer: str | None, flags: int, name: str) -> re.Pattern[str] | None:
    if closer is None:
        return None
    try:
        return re.compile(closer, flags)
    except re.error as exc:
        raise GrammarError(f"invalid closer: {exc}", pattern=name) from exc


@dataclass(frozen=True, slots=True)
class Pattern:
    """One lexical rule of a grammar.

    Attributes:
        name: Pattern name for debugging
        regex: Compiled expression; every non-overlapping match is a candidate
        kind: Token kind assigned to accepted matches
        closer: Expression every match must end with, if any. Scans stop
            at the last closer in the buffer, so an unterminated opener
            costs nothing past it.
    """

    name: str
    regex: re.Pattern[str]
    kind: TokenKind
    closer: re.Pattern[str] | None = None

    @classmethod
    def compile(
        cls,
        name: str,
        source: str,
        kind: TokenKind,
        flags: int = 0,
        closer: str | None = None,
    ) -> Pattern:
        """Compile a pattern from an expression string.

        Args:
            name: Pattern name
            source: Regular expression source
            kind: Token kind for matches
            flags: ``re`` flags (e.g. ``re.MULTILINE``), shared with ``closer``
            closer: Expression the match always ends with (e.g. ``"-->"``)

        Returns:
            Immutable Pattern

        Raises:
            GrammarError: If the expression does not compile
        """
        try:
            regex = re.compile(source, flags)
        except re.error as exc:
            raise GrammarError(f"invalid expression: {exc}", pattern=name) from exc
        return cls(name=name, regex=regex, kind=kind, closer=_compile_closer(closer, flags, name))


@dataclass(frozen=True, slots=True)
class Embedding:
    """A region of a host grammar that is lexed with another grammar.

    The locator's whole match is the outer region (delimiters included).
    Its ``inner`` group, or group 1 when no such group is named, is the
    text handed to the embedded grammar.

    Attributes:
        name: Embedding name for debugging
        locator: Compiled expression finding regions
        grammar: Grammar used for the inner text
        closer: Expression the locator match always ends with, if any
    """

    name: str
    locator: re.Pattern[str]
    grammar: Grammar
    closer: re.Pattern[str] | None = None

    def __post_init__(self) -> None:
        if INNER_GROUP not in self.locator.groupindex and self.locator.groups < 1:
            msg = "locator must capture the embedded text as group 'inner' or group 1"
            raise GrammarError(msg, pattern=self.name)

    @property
    def inner_group(self) -> str | int:
        """Group reference for the embedded text."""
        return INNER_GROUP if INNER_GROUP in self.locator.groupindex else 1

    @classmethod
    def compile(
        cls,
        name: str,
        source: str,
        grammar: Grammar,
        flags: int = re.IGNORECASE,
        closer: str | None = None,
    ) -> Embedding:
        """Compile an embedding locator.

        Delimiters match case-insensitively unless other flags are given.

        Raises:
            GrammarError: If the expression does not compile or has no inner group
        """
        try:
            locator = re.compile(source, flags)
        except re.error as exc:
            raise GrammarError(f"invalid locator: {exc}", pattern=name) from exc
        return cls(
            name=name,
            locator=locator,
            grammar=grammar,
            closer=_compile_closer(closer, flags, name),
        )


@dataclass(frozen=True, slots=True)
class EmbeddedRegion:
    """A located zone of the host buffer owned by an embedded grammar.

    Attributes:
        outer_start: Start of the region, delimiters included
        outer_end: End of the region, delimiters included
        inner_text: Text between the delimiters
        inner_offset: Host offset of ``inner_text[0]``; added to every
            token lexed from the region
        grammar: Grammar used for ``inner_text``
    """

    outer_start: int
    outer_end: int
    inner_text: str
    inner_offset: int
    grammar: Grammar

    @property
    def inner_end(self) -> int:
        return self.inner_offset + len(self.inner_text)

    def owns(self, offset: int) -> bool:
        """Check whether ``offset`` falls inside the inner text."""
        return self.inner_offset <= offset < self.inner_end

    @property
    def is_blank(self) -> bool:
        return not self.inner_text.strip()


@dataclass(frozen=True, slots=True)
class Grammar:
    """An ordered pattern table with optional embeddings.

    Attributes:
        name: Canonical grammar id (e.g. "js", "html")
        patterns: Patterns in priority order (earlier wins)
        embeddings: Regions lexed with other grammars
        aliases: Additional ids resolving to this grammar
    """

    name: str
    patterns: tuple[Pattern, ...]
    embeddings: tuple[Embedding, ...] = ()
    aliases: frozenset[str] = frozenset()

    @property
    def embeds(self) -> bool:
        """Whether this grammar carries embedded grammars."""
        return bool(self.embeddings)

    @property
    def ids(self) -> frozenset[str]:
        """Canonical name plus aliases."""
        return self.aliases | {self.name}

    def __repr__(self) -> str:
        return f"Grammar({self.name!r}, patterns={len(self.patterns)}, embeddings={len(self.embeddings)})"


__all__ = [
    "INNER_GROUP",
    "last_closer_end",
    "EmbeddedRegion",
    "Embedding",
    "Grammar",
    "Pattern",
]
