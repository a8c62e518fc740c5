"""Logging setup shared by the library and the CLI."""

from __future__ import annotations

import logging
import sys

from nestedbook.config import NESTEDBOOK_LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> None:
    """Install a single stderr handler on the ``nestedbook`` logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Args:
        level: Logging level name or number. Defaults to NESTEDBOOK_LOG_LEVEL.
    """
    root = logging.getLogger("nestedbook")
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)

    resolved = level if level is not None else NESTEDBOOK_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root.setLevel(resolved)
