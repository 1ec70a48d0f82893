"""Developer-facing log helpers.

Two pure functions that take an explicit ``verbose`` flag and an optional
logger from the host application. Nothing here reads the environment or
keeps module-level switches; the caller decides whether messages matter.

Usage::

    from wren.log import warning

    warning("choice 'a' was converted to ('a', 'a')", verbose=config.verbose)
"""

import logging

logger = logging.getLogger("wren")


def info(message: str, *, verbose: bool = True, log: logging.Logger | None = None) -> None:
    """Log an informational developer message when *verbose* is set."""
    if verbose:
        (log or logger).info("[wren] %s", message)


def warning(message: str, *, verbose: bool = True, log: logging.Logger | None = None) -> None:
    """Log a developer warning when *verbose* is set."""
    if verbose:
        (log or logger).warning("[wren] Warning: %s", message)
