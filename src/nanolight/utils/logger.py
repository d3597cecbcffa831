"""Logging helpers for nanolight.

All loggers live under the ``nanolight`` namespace. The library never
installs handlers; applications decide where records go.

Events:
    nanolight                     WARNING  highlight() degraded to escaped text
                                           (record carries the traceback)
    nanolight                     DEBUG    unknown language id, falling back
    nanolight.lexer.embedding     DEBUG    blank embedded region skipped

Logging Configuration:
    # See fallbacks while debugging a page:
    from nanolight.utils.logger import set_log_level
    set_log_level(logging.DEBUG)
    logging.basicConfig()

    # Silence degradation warnings in production:
    logging.getLogger("nanolight").setLevel(logging.ERROR)
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "nanolight"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the nanolight namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'nanolight.mymodule'
        >>> get_logger("nanolight.lexer.core").name
        'nanolight.lexer.core'
    """
    if not (name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}.")):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Set the level of the package logger (and so of every module logger).

    Args:
        level: A ``logging`` level number or name (e.g. ``"DEBUG"``)
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
