"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


def make_javascript_file(lines: int = 1000) -> str:
    """Generate a JavaScript file with one declaration and comment per line."""
    return "\n".join(f'const variable{i} = "value{i}"; // Comment {i}' for i in range(lines))


def make_html_page(sections: int = 100) -> str:
    """Generate an HTML page mixing attributes, comments and scripts."""
    parts = ["<!DOCTYPE html>", "<html>", "<body>"]
    for i in range(sections):
        parts.append(f"""
<!-- Section {i} -->
<div class="section-{i}" data-index="{i}">
  <a href='/page/{i}' title="Page {i}">Link {i}</a>
  <script>
    const total{i} = items.length * {i} + 0x1F; // running total
    if (total{i} > 10) {{ console.log(`over ${{total{i}}}`); }}
  </script>
</div>""")
    parts.extend(["</body>", "</html>"])
    return "\n".join(parts)


@pytest.fixture
def large_javascript() -> str:
    """~50KB of JavaScript."""
    return make_javascript_file()


@pytest.fixture
def large_html() -> str:
    """~30KB of HTML with embedded scripts."""
    return make_html_page()


@pytest.fixture
def snippets() -> list[str]:
    """Short snippets typical of documentation code blocks."""
    return [
        'function hello() { return "world"; }',
        "const fn = ({ a, b = 10 }) => a + b;",
        '<div class="container">Hello</div>',
        "<script>let x = 1;</script>",
        "`Hello ${user.name}`",
        "<!-- note --><br/>",
    ]
