"""Use nanolight as a fenced-code-block highlighter with a bundled theme."""

from nanolight.highlighting import CodeBlockHighlighter
from nanolight.themes import get_theme_css

blocks = CodeBlockHighlighter()

fences = [
    ("javascript", "async function load() {\n  return await fetch('/api');\n}"),
    ("html", '<button onclick="load()">Load</button>\n<script>load();</script>'),
    ("text", "plain <text> stays escaped"),
]

body = "\n".join(blocks(code, language) for language, code in fences)
page = f"<style>\n{get_theme_css('light')}</style>\n{body}"
print(page)
