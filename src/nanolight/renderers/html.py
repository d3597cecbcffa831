"""HTML renderer for nanolight token streams.

Walks the sorted tokens once, emitting escaped literal text for the gaps
between tokens and a ``<span>`` per token. Every character of the source
reaches the output exactly once, escaped.

Thread Safety:
    HtmlRenderer holds only its immutable settings. Safe to share.
"""

from __future__ import annotations

from collections.abc import Sequence

from nanolight.config import get_highlight_config
from nanolight.errors import RenderError
from nanolight.tokens import Token, TokenKind
from nanolight.utils.text import escape_html


def wrap_token(value: str, kind: TokenKind | str, class_prefix: str = "token") -> str:
    """Wrap an already-escaped token value in a span.

    Args:
        value: Escaped token text
        kind: Token kind (its value becomes the second CSS class)
        class_prefix: First CSS class

    Returns:
        ``<span class="{class_prefix} {kind}">{value}</span>``
    """
    kind_name = kind.value if isinstance(kind, TokenKind) else kind
    return f'<span class="{class_prefix} {kind_name}">{value}</span>'


class HtmlRenderer:
    """Render a token stream over its source as HTML spans.

    Usage:
        >>> from nanolight import tokenize
        >>> source = "let x"
        >>> HtmlRenderer().render(source, tokenize(source, "js"))
        '<span class="token keyword">let</span> x'

    """

    __slots__ = ("_class_prefix",)

    def __init__(self, class_prefix: str | None = None) -> None:
        """Initialize renderer.

        Args:
            class_prefix: First CSS class of every span. Defaults to the
                active HighlightConfig's prefix.
        """
        if class_prefix is None:
            class_prefix = get_highlight_config().class_prefix
        self._class_prefix = class_prefix

    @property
    def class_prefix(self) -> str:
        return self._class_prefix

    def render(self, source: str, tokens: Sequence[Token]) -> str:
        """Render ``tokens`` over ``source``.

        Args:
            source: The buffer the tokens were produced from
            tokens: Start-sorted, non-overlapping tokens

        Returns:
            HTML string

        Raises:
            RenderError: If a token overlaps its predecessor or runs past
                the end of ``source``
        """
        if not tokens:
            return escape_html(source)

        parts: list[str] = []
        last_end = 0
        prefix = self._class_prefix

        for token in tokens:
            if token.start < last_end or token.end > len(source):
                msg = f"{token!r} does not fit source (previous end {last_end}, length {len(source)})"
                raise RenderError(msg)
            # Untokenized text before this token
            if token.start > last_end:
                parts.append(escape_html(source[last_end : token.start]))
            parts.append(wrap_token(escape_html(token.text), token.kind, prefix))
            last_end = token.end

        if last_end < len(source):
            parts.append(escape_html(source[last_end:]))

        return "".join(parts)
