"""Grammar registry for language lookup and registration.

The registry maps grammar ids and aliases to grammars, so callers can
select a language by name and applications can plug in their own tables.

Thread Safety:
GrammarRegistry is immutable after creation. Safe to share.
Use GrammarRegistryBuilder for mutable construction.

Example:
    >>> from nanolight.grammars import JAVASCRIPT
    >>> builder = GrammarRegistryBuilder()
    >>> builder.register(JAVASCRIPT)
    >>> registry = builder.build()
    >>> registry.get("javascript").name
    'js'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nanolight.errors import UnknownLanguageError

if TYPE_CHECKING:
    from nanolight.grammar import Grammar


class GrammarRegistry:
    """Immutable registry of grammars.

    Lookups are case-sensitive and accept either a grammar's canonical
    name or one of its aliases.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_grammars", "_by_id")

    def __init__(
        self,
        grammars: tuple[Grammar, ...],
        by_id: dict[str, Grammar],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use GrammarRegistryBuilder to create instances.
        """
        self._grammars = grammars
        self._by_id = by_id

    def get(self, name: str | None) -> Grammar | None:
        """Get grammar for an id or alias.

        Args:
            name: Grammar id (e.g., "js", "html", "javascript")

        Returns:
            Grammar if registered, None otherwise
        """
        if not name:
            return None
        return self._by_id.get(name)

    def require(self, name: str) -> Grammar:
        """Get grammar for an id or alias, failing loudly.

        Raises:
            UnknownLanguageError: If nothing is registered under ``name``
        """
        grammar = self.get(name)
        if grammar is None:
            raise UnknownLanguageError(name, self.names)
        return grammar

    def has(self, name: str) -> bool:
        """Check if an id or alias is registered."""
        return name in self._by_id

    @property
    def names(self) -> frozenset[str]:
        """Canonical names of all registered grammars."""
        return frozenset(grammar.name for grammar in self._grammars)

    @property
    def grammars(self) -> tuple[Grammar, ...]:
        """Get all registered grammars."""
        return self._grammars

    def __contains__(self, name: object) -> bool:
        """Support 'name in registry' syntax."""
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        """Number of registered grammars."""
        return len(self._grammars)


class GrammarRegistryBuilder:
    """Mutable builder for GrammarRegistry.

    Use this to register grammars, then call build() to create
    an immutable registry.

    Example:
        >>> builder = create_registry_with_defaults()
        >>> builder.register(my_grammar)
        >>> registry = builder.build()
    """

    __slots__ = ("_grammars", "_by_id")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._grammars: list[Grammar] = []
        self._by_id: dict[str, Grammar] = {}

    def register(self, grammar: Grammar) -> GrammarRegistryBuilder:
        """Register a grammar under its name and aliases.

        Args:
            grammar: Grammar to register

        Returns:
            Self for chaining

        Raises:
            ValueError: If the name or an alias is already registered
        """
        for grammar_id in sorted(grammar.ids):
            if grammar_id in self._by_id:
                existing = self._by_id[grammar_id]
                msg = f"Language '{grammar_id}' already registered by grammar '{existing.name}'"
                raise ValueError(msg)

        for grammar_id in grammar.ids:
            self._by_id[grammar_id] = grammar
        self._grammars.append(grammar)
        return self

    def register_all(self, grammars: list[Grammar] | tuple[Grammar, ...]) -> GrammarRegistryBuilder:
        """Register multiple grammars.

        Returns:
            Self for chaining
        """
        for grammar in grammars:
            self.register(grammar)
        return self

    def build(self) -> GrammarRegistry:
        """Build immutable registry from registered grammars."""
        return GrammarRegistry(
            grammars=tuple(self._grammars),
            by_id=dict(self._by_id),
        )

    def __len__(self) -> int:
        """Number of registered grammars."""
        return len(self._grammars)


def create_registry_with_defaults() -> GrammarRegistryBuilder:
    """Create a builder pre-populated with the built-in grammars.

    Use this to extend the default set with custom grammars:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(my_grammar)
        >>> registry = builder.build()

    Returns:
        GrammarRegistryBuilder with js and html already registered
    """
    from nanolight.grammars import BUILTIN_GRAMMARS

    return GrammarRegistryBuilder().register_all(BUILTIN_GRAMMARS)


def create_default_registry() -> GrammarRegistry:
    """Build the default registry.

    Returns:
        Registry with the built-in grammars:
        - js (javascript, mjs, cjs)
        - html (htm, xhtml)

    Thread Safety:
        Returns a new immutable registry. Build it once and pass it
        around; the grammars inside are shared, not copied.
    """
    return create_registry_with_defaults().build()


__all__ = [
    "GrammarRegistry",
    "GrammarRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
]
