"""Context-switching scanner mixin for grammars with embedded languages.

Handles host grammars that carry another language inside designated
regions (script bodies inside markup). The host table runs over the whole
buffer except the regions' inner text; each inner text is lexed on its own
with the embedded grammar, shifted back into host coordinates, and merged
through the same claim set as the host tokens.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from nanolight.grammar import EmbeddedRegion, Embedding, Pattern, last_closer_end
from nanolight.lexer.claims import ClaimSet
from nanolight.tokens import Token
from nanolight.utils.logger import get_logger

logger = get_logger(__name__)


def locate_regions(source: str, embeddings: Iterable[Embedding]) -> list[EmbeddedRegion]:
    """Find every embedded region of ``source``.

    Each locator scans independently; a region without its closing
    delimiter is simply not matched, so its text falls back to the host
    grammar. A locator with a closer stops at the last closer in the
    buffer. Regions from different embeddings may overlap; they are
    candidate windows and the claim set settles any conflict.

    Args:
        source: Host buffer
        embeddings: Embeddings declared by the host grammar

    Returns:
        Regions sorted by outer start
    """
    regions: list[EmbeddedRegion] = []
    for embedding in embeddings:
        limit = last_closer_end(embedding.closer, source)
        if limit < 0:
            continue
        group = embedding.inner_group
        for match in embedding.locator.finditer(source, 0, limit):
            inner_start, inner_end = match.span(group)
            if inner_start < 0:
                # Optional inner group did not participate
                continue
            regions.append(
                EmbeddedRegion(
                    outer_start=match.start(),
                    outer_end=match.end(),
                    inner_text=source[inner_start:inner_end],
                    inner_offset=inner_start,
                    grammar=embedding.grammar,
                )
            )
    regions.sort(key=lambda region: region.outer_start)
    return regions


class EmbeddingScannerMixin:
    """Mixin providing the context-switching scan.

    Steps:
    1. Locate regions
    2. Scan host patterns, skipping matches that start in a region's inner text
    3. Lex each non-blank inner text with its grammar (recursively)
    4. Shift the inner tokens by the region offset and merge them through
       the claim set

    """

    # These will be set by the Lexer class
    _source: str
    _claims: ClaimSet
    _tokens: list[Token]

    def _scan_patterns(
        self,
        patterns: Sequence[Pattern],
        regions: Sequence[EmbeddedRegion] = (),
    ) -> None:
        """Claim pattern matches. Implemented by Lexer."""
        raise NotImplementedError

    def _accept(self, token: Token) -> bool:
        """Claim and record a token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_embedded(self, embeddings: Sequence[Embedding], patterns: Sequence[Pattern]) -> None:
        """Scan a host grammar that embeds other grammars.

        Args:
            embeddings: Embeddings of the host grammar
            patterns: Host pattern table
        """
        regions = locate_regions(self._source, embeddings)
        self._scan_patterns(patterns, regions)

        for region in regions:
            if region.is_blank:
                logger.debug(
                    "Skipping blank %s region at %d", region.grammar.name, region.outer_start
                )
                continue
            # Fresh lexer: embedded grammars may embed again
            inner = type(self)(region.inner_text, region.grammar)
            for token in inner.tokenize():
                self._accept(token.shifted(region.inner_offset))

    def tokenize(self) -> list[Token]:
        """Tokenize source. Implemented by Lexer."""
        raise NotImplementedError
