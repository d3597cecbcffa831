"""Tests for GrammarRegistry and GrammarRegistryBuilder."""

import pytest

from nanolight.grammar import Grammar, Pattern
from nanolight.grammars import HTML, JAVASCRIPT
from nanolight.registry import (
    GrammarRegistry,
    GrammarRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from nanolight.tokens import TokenKind

CSV = Grammar(
    name="csv",
    patterns=(Pattern.compile("number", r"\d+", TokenKind.NUMBER),),
    aliases=frozenset({"tsv"}),
)


class TestDefaultRegistry:
    def test_canonical_names(self) -> None:
        registry = create_default_registry()
        assert registry.names == {"js", "html"}
        assert len(registry) == 2

    @pytest.mark.parametrize("alias", ["js", "javascript", "mjs", "cjs"])
    def test_javascript_aliases(self, alias: str) -> None:
        assert create_default_registry().get(alias) is JAVASCRIPT

    @pytest.mark.parametrize("alias", ["html", "htm", "xhtml"])
    def test_html_aliases(self, alias: str) -> None:
        assert create_default_registry().get(alias) is HTML

    def test_lookup_is_case_sensitive(self) -> None:
        registry = create_default_registry()
        assert registry.get("JS") is None
        assert not registry.has("HTML")

    def test_get_missing(self) -> None:
        registry = create_default_registry()
        assert registry.get("cobol") is None
        assert registry.get("") is None
        assert registry.get(None) is None

    def test_contains(self) -> None:
        registry = create_default_registry()
        assert "javascript" in registry
        assert "cobol" not in registry
        assert 42 not in registry

    def test_grammars_in_registration_order(self) -> None:
        assert create_default_registry().grammars == (JAVASCRIPT, HTML)


class TestBuilder:
    def test_register_chains(self) -> None:
        builder = GrammarRegistryBuilder()
        assert builder.register(CSV) is builder
        assert len(builder) == 1

    def test_custom_grammar_extends_defaults(self) -> None:
        registry = create_registry_with_defaults().register(CSV).build()
        assert registry.require("tsv") is CSV
        assert registry.names == {"js", "html", "csv"}

    def test_duplicate_name_rejected(self) -> None:
        builder = create_registry_with_defaults()
        clash = Grammar(name="js", patterns=())
        with pytest.raises(ValueError, match="Language 'js' already registered by grammar 'js'"):
            builder.register(clash)

    def test_duplicate_alias_rejected(self) -> None:
        builder = create_registry_with_defaults()
        clash = Grammar(name="typescript", patterns=(), aliases=frozenset({"mjs"}))
        with pytest.raises(ValueError, match="'mjs'"):
            builder.register(clash)

    def test_failed_register_leaves_builder_unchanged(self) -> None:
        builder = create_registry_with_defaults()
        clash = Grammar(name="new", patterns=(), aliases=frozenset({"htm"}))
        with pytest.raises(ValueError):
            builder.register(clash)
        assert "new" not in builder.build()
        assert len(builder) == 2

    def test_build_is_snapshot(self) -> None:
        builder = GrammarRegistryBuilder().register(JAVASCRIPT)
        registry = builder.build()
        builder.register(CSV)
        assert "csv" not in registry
        assert "csv" in builder.build()

    def test_register_all(self) -> None:
        registry = GrammarRegistryBuilder().register_all([JAVASCRIPT, CSV]).build()
        assert registry.names == {"js", "csv"}

    def test_empty_registry(self) -> None:
        registry = GrammarRegistryBuilder().build()
        assert isinstance(registry, GrammarRegistry)
        assert len(registry) == 0
        assert registry.names == frozenset()
