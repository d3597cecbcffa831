"""
nanolight: minimal code highlighter for JavaScript and HTML

Turns source text into classified spans (keyword, string, number, comment,
operator, tag, attr-name, attr-value) with a priority-ordered regex lexer,
and renders them as HTML. ``<script>`` bodies inside HTML are lexed as
JavaScript. Never raises on input text; zero runtime dependencies.

Quick Start:
    >>> from nanolight import highlight
    >>> highlight("const x = 42;")
    '<span class="token keyword">const</span> x <span class="token operator">=</span> <span class="token number">42</span>;'

    >>> # Tokens instead of markup
    >>> from nanolight import tokenize
    >>> tokenize("42 + 1", "js")[0]
    Token(NUMBER, '42', 0:2)

    >>> # Reusable processor with its own settings
    >>> from nanolight import Highlighter, HighlightConfig
    >>> hl = Highlighter(HighlightConfig(class_prefix="hl"))
    >>> html = hl("<b>bold</b>")

Custom Grammars:
    >>> from nanolight import Highlighter, create_registry_with_defaults
    >>>
    >>> builder = create_registry_with_defaults()
    >>> builder.register(my_grammar)
    >>> hl = Highlighter(registry=builder.build())

Installation:
    pip install nanolight
"""

from __future__ import annotations

from nanolight.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from nanolight.detect import detect_language
from nanolight.errors import GrammarError, NanolightError, RenderError, UnknownLanguageError
from nanolight.grammar import EmbeddedRegion, Embedding, Grammar, Pattern
from nanolight.grammars import HTML, JAVASCRIPT
from nanolight.lexer import (
    Lexer,
    tokenize_embedded,
    tokenize_grammar,
    tokenize_patterns,
)
from nanolight.profiling import get_tokenize_accumulator, profiled_tokenize
from nanolight.registry import (
    GrammarRegistry,
    GrammarRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from nanolight.renderers.html import HtmlRenderer, wrap_token
from nanolight.tokens import Token, TokenKind
from nanolight.utils.logger import get_logger
from nanolight.utils.text import escape_html

__version__ = "1.0.0"

logger = get_logger(__name__)

# Built once at import; immutable, shared by every call that does not
# bring its own registry.
DEFAULT_REGISTRY: GrammarRegistry = create_default_registry()


def resolve_grammar(
    code: str,
    language: str | None,
    *,
    config: HighlightConfig,
    registry: GrammarRegistry,
) -> Grammar:
    """Pick the grammar for ``code``.

    Order: the explicit ``language`` if registered, then the config's forced
    language if registered, then detection (or the default language when
    detection is off).

    Raises:
        UnknownLanguageError: If the default language is not registered either
    """
    if language:
        grammar = registry.get(language)
        if grammar is not None:
            return grammar
        logger.debug("Unknown language %r; falling back", language)

    grammar = registry.get(config.language)
    if grammar is not None:
        return grammar

    if config.detect:
        grammar = registry.get(detect_language(code, config.default_language))
        if grammar is not None:
            return grammar
    return registry.require(config.default_language)


def tokenize(
    source: str,
    language: str | None = None,
    *,
    registry: GrammarRegistry | None = None,
) -> list[Token]:
    """Tokenize source with a registered grammar.

    Args:
        source: Source text
        language: Grammar id or alias; detected when missing or unknown
        registry: Grammar registry (uses the built-in grammars if None)

    Returns:
        Start-sorted, non-overlapping tokens

    Example:
        >>> [t.kind.value for t in tokenize("// a")]
        ['comment']
    """
    if not source:
        return []
    grammar = resolve_grammar(
        source,
        language,
        config=get_highlight_config(),
        registry=registry if registry is not None else DEFAULT_REGISTRY,
    )
    tokens = tokenize_grammar(source, grammar)

    # Record profiling metrics if accumulator is active
    acc = get_tokenize_accumulator()
    if acc is not None:
        acc.record_tokenize(source_length=len(source), token_count=len(tokens))

    return tokens


def highlight(code: object, language: str | None = None) -> str:
    """Highlight source code as HTML spans.

    Uses the active HighlightConfig (see ``highlight_config_context``) and
    the built-in grammars.

    Args:
        code: Source code; ``None`` and any non-string yield ``""``
        language: Grammar id or alias; detected when missing or unknown

    Returns:
        HTML string. Never raises: on any internal fault the escaped
        source is returned.

    Example:
        >>> highlight("<b>x</b>", "html")
        '<span class="token tag">&lt;b&gt;</span>x<span class="token tag">&lt;/b&gt;</span>'
    """
    return Highlighter(get_highlight_config())(code, language)


class Highlighter:
    """High-level highlighter combining lexer and renderer.

    Usage:
        >>> hl = Highlighter()
        >>> hl("let a = 1")
        '<span class="token keyword">let</span> a <span class="token operator">=</span> <span class="token number">1</span>'

        >>> # Tokens only
        >>> hl.tokenize("let a")[0].text
        'let'

        >>> # Custom grammars
        >>> builder = create_registry_with_defaults()
        >>> builder.register(my_grammar)
        >>> hl = Highlighter(registry=builder.build())

    Thread Safety:
        Holds only an immutable config and registry; sets config via
        ContextVar (thread-local) for the duration of each call. Safe to
        share across threads.

    """

    __slots__ = ("_config", "_registry")

    def __init__(
        self,
        config: HighlightConfig | None = None,
        *,
        registry: GrammarRegistry | None = None,
    ) -> None:
        """Initialize highlighter.

        Args:
            config: Highlight settings (defaults if None)
            registry: Grammar registry (built-in grammars if None)
        """
        self._config = config or HighlightConfig()
        self._registry = registry if registry is not None else DEFAULT_REGISTRY

    @property
    def config(self) -> HighlightConfig:
        return self._config

    @property
    def registry(self) -> GrammarRegistry:
        return self._registry

    def __call__(self, code: object, language: str | None = None) -> str:
        """Tokenize and render in one call.

        Args:
            code: Source code; ``None`` and any non-string yield ``""``
            language: Grammar id or alias

        Returns:
            HTML string; the escaped source if anything goes wrong
        """
        if not isinstance(code, str) or not code:
            return ""

        with highlight_config_context(self._config):
            try:
                tokens = self.tokenize(code, language)
                return self.render(code, tokens)
            except Exception:
                # Never throw: degrade to plain escaped text
                logger.warning("Highlighting failed; returning escaped source", exc_info=True)
                return escape_html(code)

    def resolve_language(self, code: str, language: str | None = None) -> str:
        """Canonical id of the grammar that would be used for ``code``."""
        grammar = resolve_grammar(code, language, config=self._config, registry=self._registry)
        return grammar.name

    def tokenize(self, code: str, language: str | None = None) -> list[Token]:
        """Tokenize ``code`` with this highlighter's config and registry.

        Raises:
            UnknownLanguageError: If no usable grammar is registered
        """
        with highlight_config_context(self._config):
            return tokenize(code, language, registry=self._registry)

    def render(self, code: str, tokens: list[Token]) -> str:
        """Render tokens over ``code`` as HTML spans."""
        return HtmlRenderer(self._config.class_prefix).render(code, tokens)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "highlight",
    "tokenize",
    "Highlighter",
    "resolve_grammar",
    "detect_language",
    # Lexer
    "Lexer",
    "tokenize_embedded",
    "tokenize_grammar",
    "tokenize_patterns",
    # Tokens
    "Token",
    "TokenKind",
    # Grammars
    "EmbeddedRegion",
    "Embedding",
    "Grammar",
    "Pattern",
    "HTML",
    "JAVASCRIPT",
    # Registry
    "DEFAULT_REGISTRY",
    "GrammarRegistry",
    "GrammarRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Renderer
    "HtmlRenderer",
    "wrap_token",
    "escape_html",
    # Configuration (ContextVar-based)
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
    # Profiling
    "get_tokenize_accumulator",
    "profiled_tokenize",
    # Errors
    "NanolightError",
    "GrammarError",
    "UnknownLanguageError",
    "RenderError",
]
