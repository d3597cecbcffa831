"""Tests for the built-in JavaScript and HTML pattern tables."""

import pytest

from nanolight.grammars import BUILTIN_GRAMMARS, HTML, JAVASCRIPT
from nanolight.grammars.javascript import KEYWORDS
from nanolight.lexer import tokenize_grammar
from nanolight.tokens import TokenKind


def kinds(source: str, grammar=JAVASCRIPT) -> list[tuple[str, str]]:
    return [(t.kind.value, t.text) for t in tokenize_grammar(source, grammar)]


class TestJavaScriptComments:
    def test_single_line(self) -> None:
        assert kinds("x // note\ny") == [("comment", "// note")]

    def test_single_line_stops_at_line_separator(self) -> None:
        assert kinds("// a\u2028let") == [("comment", "// a"), ("keyword", "let")]

    def test_multi_line(self) -> None:
        assert kinds("/* a\n * b\n */") == [("comment", "/* a\n * b\n */")]

    def test_unterminated_block_comment(self) -> None:
        """An unclosed block comment is not a comment; its contents lex normally."""
        assert kinds("/* let") == [("operator", "*"), ("keyword", "let")]


class TestJavaScriptStrings:
    @pytest.mark.parametrize(
        "source",
        ['"hello"', "'hello'", '"with \\" escape"', "'it\\'s'", '"tab\\tnew\\n"', '""'],
    )
    def test_quoted(self, source: str) -> None:
        assert kinds(source) == [("string", source)]

    def test_template_literal_with_expressions(self) -> None:
        source = (
            '`Hello ${user.name || "Anonymous"}, you have ${items.length} '
            'item${items.length !== 1 ? "s" : ""}.`'
        )
        assert kinds(source) == [("string", source)]

    def test_template_literal_multiline(self) -> None:
        source = "`line one\nline two`"
        assert kinds(source) == [("string", source)]

    def test_template_literal_lone_dollar(self) -> None:
        assert kinds("`costs $5`") == [("string", "`costs $5`")]

    def test_escaped_line_continuation(self) -> None:
        source = '"a\\\nb"'
        assert kinds(source) == [("string", source)]


class TestJavaScriptNumbers:
    @pytest.mark.parametrize(
        "source",
        ["0", "42", "3.14", "1e10", "2.5E-3", "0xFF", "0b1010", "0o17", "123n", "0x1Fn"],
    )
    def test_literals(self, source: str) -> None:
        assert kinds(source) == [("number", source)]

    def test_number_inside_identifier_ignored(self) -> None:
        """Digits that are part of a name are not numbers."""
        assert kinds("variable1") == []

    def test_leading_dot_fraction(self) -> None:
        assert kinds("x = .5") == [("operator", "="), ("number", "5")]


class TestJavaScriptKeywords:
    @pytest.mark.parametrize("keyword", KEYWORDS)
    def test_each_keyword(self, keyword: str) -> None:
        assert kinds(keyword) == [("keyword", keyword)]

    def test_keyword_prefix_of_identifier(self) -> None:
        """Word boundaries keep 'letter' from being 'let'."""
        assert kinds("letter iffy format") == []

    def test_keywords_case_sensitive(self) -> None:
        assert kinds("Return IF") == []

    def test_async_function(self) -> None:
        source = "async function fetchData() { try { await fetch('/api'); } catch (e) { throw e; } }"
        found = {text for kind, text in kinds(source) if kind == "keyword"}
        assert found == {"async", "function", "try", "await", "catch", "throw"}

    def test_unicode_identifier_adjacent(self) -> None:
        """Emoji and accented text next to keywords lex cleanly."""
        assert ("keyword", "const") in kinds('const 🚀emoji = "émojis";')


class TestJavaScriptOperators:
    @pytest.mark.parametrize("op", ["=", "==", "===", "!==", "=>", "&&", "||", "??", "+=", "...", "?", ":"])
    def test_operator(self, op: str) -> None:
        assert kinds(f"a {op} b") == [("operator", op)]

    def test_division_not_tokenized(self) -> None:
        assert kinds("a / b") == []

    def test_arrow_function(self) -> None:
        result = kinds("const fn = ({ a, b = 10 }) => a + b;")
        assert ("keyword", "const") in result
        assert ("operator", "=>") in result
        assert ("number", "10") in result


class TestHtmlTokens:
    def test_bare_tags(self) -> None:
        assert kinds("<div>Hello</div>", HTML) == [("tag", "<div>"), ("tag", "</div>")]

    def test_tag_with_attributes_yields_attributes(self) -> None:
        """Quoted values and names claim part of the tag, so the tag itself is dropped."""
        assert kinds('<div class="container">Hello</div>', HTML) == [
            ("attr-name", "class"),
            ("attr-value", '"container"'),
            ("tag", "</div>"),
        ]

    def test_comment(self) -> None:
        assert kinds("<!-- <b>note</b> -->", HTML) == [("comment", "<!-- <b>note</b> -->")]

    def test_self_closing(self) -> None:
        assert kinds("<br/>", HTML) == [("tag", "<br/>")]

    def test_custom_element_attributes(self) -> None:
        result = kinds('<my-component data-value="test"></my-component>', HTML)
        assert ("attr-name", "data-value") in result
        assert ("tag", "</my-component>") in result

    def test_single_quoted_value(self) -> None:
        result = kinds("<a href='x'>", HTML)
        assert result == [("attr-name", "href"), ("attr-value", "'x'")]

    def test_unquoted_value_attr_names(self) -> None:
        result = kinds('<img src=x onerror=alert("XSS2")>', HTML)
        assert ("attr-name", "src") in result
        assert ("attr-name", "onerror") in result
        assert ("attr-value", '"XSS2"') in result

    def test_boolean_attribute_not_named(self) -> None:
        result = kinds('<input type="email" required>', HTML)
        assert ("attr-name", "type") in result
        assert all(text != "required" for _, text in result)

    def test_svg_attributes(self) -> None:
        result = kinds('<svg viewBox="0 0 100 100"><circle cx="50" cy="50" r="40"/></svg>', HTML)
        for name in ("viewBox", "cx", "cy", "r"):
            assert ("attr-name", name) in result
        assert ("attr-value", '"50"') in result

    def test_style_attribute_is_one_value(self) -> None:
        result = kinds('<div style="color: red; font-size: 14px;">x</div>', HTML)
        assert ("attr-value", '"color: red; font-size: 14px;"') in result

    def test_doctype_is_not_a_tag(self) -> None:
        assert kinds("<!DOCTYPE html>", HTML) == []

    def test_stray_angle_brackets(self) -> None:
        assert kinds("a < b > c", HTML) == []


class TestHtmlScripts:
    def test_script_body_is_javascript(self) -> None:
        result = kinds("<script>const x = 1;</script>", HTML)
        assert result == [
            ("tag", "<script>"),
            ("keyword", "const"),
            ("operator", "="),
            ("number", "1"),
            ("tag", "</script>"),
        ]

    def test_multiple_scripts(self) -> None:
        source = (
            '<script type="application/json">{"name": "config"}</script>\n'
            "<script>const config = JSON.parse(data);</script>"
        )
        result = kinds(source, HTML)
        assert ("attr-name", "type") in result
        assert ("string", '"name"') in result
        assert ("keyword", "const") in result

    def test_script_tag_attributes(self) -> None:
        source = '<script src="lib.js" integrity="sha256-abc" crossorigin="anonymous"></script>'
        result = kinds(source, HTML)
        for name in ("src", "integrity", "crossorigin"):
            assert ("attr-name", name) in result

    def test_script_body_markup_is_javascript(self) -> None:
        """Tags written inside a string in a script stay in the string."""
        result = kinds("<script>let s = '<b>';</script>", HTML)
        assert ("string", "'<b>'") in result
        assert ("tag", "<b>") not in result


class TestGrammarObjects:
    def test_builtin_names(self) -> None:
        assert [g.name for g in BUILTIN_GRAMMARS] == ["js", "html"]

    def test_aliases(self) -> None:
        assert JAVASCRIPT.ids == {"js", "javascript", "mjs", "cjs"}
        assert HTML.ids == {"html", "htm", "xhtml"}

    def test_only_html_embeds(self) -> None:
        assert HTML.embeds
        assert not JAVASCRIPT.embeds

    def test_all_kinds_reachable(self) -> None:
        produced = {p.kind for g in BUILTIN_GRAMMARS for p in g.patterns}
        assert produced == set(TokenKind)

    def test_repr(self) -> None:
        assert repr(HTML) == "Grammar('html', patterns=5, embeddings=1)"
