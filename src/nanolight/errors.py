"""Exception classes for nanolight.

The tokenizer itself never raises for any input text; these exceptions
cover misconfiguration (bad pattern tables, unknown grammar ids) and are
caught by the public highlight() boundary.
"""

from __future__ import annotations

from collections.abc import Iterable


class NanolightError(Exception):
    """Base exception for all nanolight errors.

    Subclass this for specific error categories.
    """

    pass


class GrammarError(NanolightError):
    """Error in a grammar definition.

    Raised when a pattern expression does not compile or an embedding
    locator does not delimit its inner text.
    """

    def __init__(
        self,
        message: str,
        grammar: str | None = None,
        pattern: str | None = None,
    ) -> None:
        """Initialize grammar error with optional location.

        Args:
            message: Error description
            grammar: Name of the grammar being built (optional)
            pattern: Name of the offending pattern or embedding (optional)
        """
        self.message = message
        self.grammar = grammar
        self.pattern = pattern

        location = ""
        if grammar:
            location = f"{grammar}:"
        if pattern:
            location += f"{pattern}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnknownLanguageError(NanolightError):
    """Error when a grammar id is not registered."""

    def __init__(self, language: str, available: Iterable[str] = ()) -> None:
        """Initialize unknown language error.

        Args:
            language: The requested grammar id
            available: Registered grammar ids, listed in the message
        """
        self.language = language
        self.available = tuple(sorted(available))

        hint = f" (available: {', '.join(self.available)})" if self.available else ""
        super().__init__(f"Unknown language '{language}'{hint}")


class RenderError(NanolightError):
    """Error during HTML rendering.

    Raised when the renderer is handed tokens that do not fit the
    source they claim to describe.
    """

    pass
