"""Code-block highlighting for markdown renderers.

Wraps the span output in a ``<pre><code>`` block and exposes the small
protocol markdown renderers expect from a syntax highlighter:

    - highlight(code, language) -> str
    - supports_language(language) -> bool

An instance is also a plain ``(code, language) -> str`` callable, so it
can be injected wherever a simple highlighter function is accepted.

Usage:
    >>> from nanolight.highlighting import CodeBlockHighlighter
    >>> blocks = CodeBlockHighlighter()
    >>> blocks.highlight("let x", "javascript")
    '<pre class="highlight-code"><code class="language-js"><span class="token keyword">let</span> x</code></pre>'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from nanolight.utils.text import escape_html

if TYPE_CHECKING:
    from nanolight import Highlighter


class BlockHighlighter(Protocol):
    """Protocol for code-block highlighters.

    Thread Safety:
        Implementations must be thread-safe. highlight() may be called
        concurrently from multiple render threads.
    """

    def highlight(self, code: str, language: str) -> str:
        """Highlight code as an HTML block.

        Contract:
            - MUST return valid HTML (never raise for bad input)
            - MUST escape HTML entities in code
            - MUST use CSS classes (not inline styles)
            - SHOULD fall back to plain text for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if the language can be highlighted.

        Contract:
            - MUST NOT raise exceptions
            - SHOULD handle common aliases (javascript -> js)
        """
        ...


class CodeBlockHighlighter:
    """Block highlighter backed by a nanolight Highlighter.

    Unknown languages are rendered as plain escaped text; they are not
    auto-detected, since a fenced block's info string is authoritative.
    """

    __slots__ = ("_highlighter", "_block_class")

    def __init__(
        self,
        highlighter: Highlighter | None = None,
        *,
        block_class: str = "highlight-code",
    ) -> None:
        """Initialize block highlighter.

        Args:
            highlighter: Span highlighter to use (default settings if None)
            block_class: CSS class of the ``<pre>`` element
        """
        if highlighter is None:
            from nanolight import Highlighter

            highlighter = Highlighter()
        self._highlighter = highlighter
        self._block_class = block_class

    def supports_language(self, language: str) -> bool:
        """Check if a grammar is registered for ``language``."""
        try:
            return bool(language) and self._highlighter.registry.has(language)
        except Exception:
            return False

    def highlight(self, code: str, language: str) -> str:
        """Highlight ``code`` as a ``<pre><code>`` block.

        Args:
            code: Source code
            language: Grammar id or alias (from a fence info string)

        Returns:
            HTML block; plain escaped code for unsupported languages
        """
        if self.supports_language(language):
            grammar = self._highlighter.registry.require(language)
            body = self._highlighter(code, grammar.name)
            lang_class = f' class="language-{grammar.name}"'
        else:
            body = escape_html(code)
            lang_class = f' class="language-{escape_html(language)}"' if language else ""
        return f'<pre class="{self._block_class}"><code{lang_class}>{body}</code></pre>'

    __call__ = highlight
