"""Logging setup shared by every entry point."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Route ``fifteen.*`` loggers through rich (DEBUG when *verbose*)."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("fifteen")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    logger.propagate = False
