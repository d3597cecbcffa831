"""Renderers turning token streams into presentation markup."""

from nanolight.renderers.html import HtmlRenderer, wrap_token

__all__ = ["HtmlRenderer", "wrap_token"]
