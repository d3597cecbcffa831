"""Verify package imports work correctly."""


def test_import_nanolight() -> None:
    """Test that nanolight can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import nanolight

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert nanolight.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from nanolight import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    """Test that every name in __all__ resolves."""
    import nanolight

    for name in nanolight.__all__:
        assert hasattr(nanolight, name), name


def test_subpackages_import() -> None:
    """Test that lexer, grammars, renderers, themes and utils import standalone."""
    import nanolight.grammars
    import nanolight.highlighting
    import nanolight.lexer
    import nanolight.renderers
    import nanolight.themes
    import nanolight.utils

    assert nanolight.lexer.Lexer
    assert nanolight.grammars.BUILTIN_GRAMMARS
