"""ContextVar-based highlight configuration for nanolight.

Each Highlighter call installs its HighlightConfig in a ContextVar
for the duration of the call. Language resolution and the renderer
read it from there instead of taking it as an argument.

Thread Safety:
    A thread (or asyncio task) sees only the value it set itself, so
    concurrent highlighters with different prefixes never mix classes.

Usage:
    # In Highlighter class
    hl = Highlighter(HighlightConfig(class_prefix="hl"))
    html = hl("const x = 1;")  # Sets config internally via ContextVar

    # Module-level highlight() with a temporary config
    from nanolight.config import highlight_config_context, HighlightConfig

    with highlight_config_context(HighlightConfig(language="html")):
        html = highlight("<b>x</b>")

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Attributes:
        language: Force this grammar id instead of detecting one.
            Ignored when the registry does not know it.
        default_language: Grammar used when detection finds no markup
            (or when detection is off)
        class_prefix: First CSS class of every token span
        detect: Auto-detect the language when none is given

    """

    language: str | None = None
    default_language: str = "js"
    class_prefix: str = "token"
    detect: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "HighlightConfig":
        """Create HighlightConfig from a mapping.

        Useful for framework integration where config comes from external
        sources (YAML files, site settings). Unknown keys are silently
        ignored.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "class_prefix": "hl",
            ...     "theme": "dark",
            ... })
            >>> config.class_prefix
            'hl'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Shared default; reset_highlight_config() reinstalls this instance
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context.

    Thread Safety:
        The value is visible to the current context only.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Put the default HighlightConfig back in the current context."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Use ``config`` inside the ``with`` block only.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with highlight_config_context(HighlightConfig(class_prefix="hl")):
        ...     get_highlight_config().class_prefix
        'hl'
        >>> get_highlight_config().class_prefix
        'token'

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "highlight_config_context",
    "reset_highlight_config",
    "set_highlight_config",
]
