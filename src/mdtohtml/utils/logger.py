"""Logging setup for command-line use.

Library modules log through ``logging.getLogger(__name__)`` and install no
handlers. The CLI calls configure_logging() once per invocation to send
the package's records to stderr.

Example:
    >>> from mdtohtml.utils.logger import configure_logging
    >>> configure_logging(verbose=True).level
    10
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "mdtohtml"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Handler installed by the last configure_logging() call
_handler: logging.Handler | None = None


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Repeated calls replace the previous handler instead of stacking a new
    one, and bind to the current ``sys.stderr``.

    Args:
        verbose: Log DEBUG and up; otherwise WARNING and up

    Returns:
        The configured ``mdtohtml`` logger
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


def reset_logging() -> None:
    """Remove the handler added by configure_logging() and clear the level."""
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
