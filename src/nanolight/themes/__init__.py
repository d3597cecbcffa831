"""Bundled CSS themes.

Themes style the spans emitted by the HTML renderer (``.token.<kind>``)
and the ``.highlight-code`` block wrapper.

Example:
    >>> from nanolight.themes import available_themes, get_theme_css
    >>> available_themes()
    ('dark', 'light')
    >>> ".token.keyword" in get_theme_css("light")
    True
"""

from __future__ import annotations

from pathlib import Path

THEMES_DIR = Path(__file__).parent

THEMES: tuple[str, ...] = ("dark", "light")


def available_themes() -> tuple[str, ...]:
    """Names of the bundled themes."""
    return THEMES


def get_theme_css(name: str) -> str:
    """Read a bundled theme stylesheet.

    Args:
        name: Theme name ("light" or "dark")

    Returns:
        CSS source

    Raises:
        ValueError: If no theme has that name
    """
    if name not in THEMES:
        msg = f"Unknown theme '{name}' (available: {', '.join(THEMES)})"
        raise ValueError(msg)
    return (THEMES_DIR / f"{name}.css").read_text(encoding="utf-8")


__all__ = ["THEMES", "available_themes", "get_theme_css"]
