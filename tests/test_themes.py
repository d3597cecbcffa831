"""Tests for the bundled CSS themes."""

import re

import pytest

from nanolight.themes import THEMES, available_themes, get_theme_css
from nanolight.tokens import TokenKind


def rule(css: str, selector: str) -> str:
    """Body of the rule for ``selector``."""
    match = re.search(re.escape(selector) + r"\s*\{([^}]*)\}", css)
    assert match is not None, f"no rule for {selector}"
    return match.group(1)


def color(css: str, selector: str) -> str:
    match = re.search(r"(?<![-\w])color:\s*(#[0-9a-fA-F]{3,6})", rule(css, selector))
    assert match is not None, f"no color for {selector}"
    return match.group(1).lower()


class TestThemeLookup:
    def test_available(self) -> None:
        assert available_themes() == ("dark", "light")
        assert available_themes() is THEMES

    def test_unknown_theme(self) -> None:
        with pytest.raises(ValueError, match="Unknown theme 'solarized'"):
            get_theme_css("solarized")


@pytest.mark.parametrize("theme", THEMES)
class TestThemeContent:
    def test_every_kind_has_a_color(self, theme: str) -> None:
        css = get_theme_css(theme)
        for kind in TokenKind:
            assert color(css, f".token.{kind.value}")

    def test_code_block_font(self, theme: str) -> None:
        body = rule(get_theme_css(theme), ".highlight-code")
        assert "'Courier New', monospace" in body
        assert "font-size: 14px" in body
        assert "line-height: 1.4" in body

    def test_comments_italic(self, theme: str) -> None:
        assert "font-style: italic" in rule(get_theme_css(theme), ".token.comment")

    def test_shared_colors(self, theme: str) -> None:
        css = get_theme_css(theme)
        assert color(css, ".token.operator") == color(css, ".token.keyword")
        assert color(css, ".token.attr-value") == color(css, ".token.string")


class TestPalettes:
    def test_light_palette(self) -> None:
        css = get_theme_css("light")
        assert color(css, ".token.keyword") == "#d73a49"
        assert color(css, ".token.string") == "#032f62"
        assert color(css, ".token.number") == "#005cc5"
        assert color(css, ".token.comment") == "#6a737d"
        assert color(css, ".token.tag") == "#22863a"
        assert color(css, ".token.attr-name") == "#6f42c1"

    def test_dark_differs_from_light(self) -> None:
        light, dark = get_theme_css("light"), get_theme_css("dark")
        for selector in (".token.keyword", ".token.string"):
            assert color(light, selector) != color(dark, selector)
