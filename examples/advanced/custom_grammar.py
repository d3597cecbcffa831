"""Register a custom grammar that embeds JavaScript.

A tiny template language: ``{{ ... }}`` holds a JavaScript expression,
everything else is plain text with ``#`` line comments.
"""

from nanolight import (
    JAVASCRIPT,
    Embedding,
    Grammar,
    Highlighter,
    Pattern,
    TokenKind,
    create_registry_with_defaults,
)

TEMPLATE = Grammar(
    name="tmpl",
    patterns=(
        Pattern.compile("comment", r"#[^\n]*", TokenKind.COMMENT),
        Pattern.compile("braces", r"\{\{|\}\}", TokenKind.TAG),
    ),
    embeddings=(Embedding.compile("expr", r"\{\{(?P<inner>[\s\S]*?)\}\}", JAVASCRIPT),),
    aliases=frozenset({"template"}),
)

registry = create_registry_with_defaults().register(TEMPLATE).build()
hl = Highlighter(registry=registry)

print(hl("# greeting\nHello {{ user.name || \"guest\" }}!", "template"))
for token in hl.tokenize("{{ 1 + 2 }}", "tmpl"):
    print(token)
