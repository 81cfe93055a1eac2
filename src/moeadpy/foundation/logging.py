"""
Opt-in console logging for moeadpy.

Every module logs through ``logging.getLogger(__name__)`` below the
``moeadpy`` logger:

- INFO: run initialization and termination, stop requests from callbacks
- DEBUG: per-generation progress, loaded weight files, rejected archive candidates
- WARNING: neighbourhood sizes clamped to the population size, objectives
  with no finite value in the initial population
"""

from __future__ import annotations

import logging
from typing import IO

PACKAGE_LOGGER = "moeadpy"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_moeadpy_logging(
    *,
    level: int | str = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: IO[str] | None = None,
) -> logging.Handler | None:
    """
    Attach a console handler to the ``moeadpy`` logger.

    Library code never calls ``logging.basicConfig()``; applications call this
    instead. Nothing is changed when the root logger or the ``moeadpy`` logger
    already has handlers.

    Args:
        level: Logging level or its name (``"DEBUG"``, ``"INFO"``, ...).
        fmt: Format string for the handler.
        stream: Target stream; defaults to ``sys.stderr``.

    Returns:
        The attached handler, or None when logging was already configured.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level {level!r}.")
        level = resolved

    root = logging.getLogger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if root.handlers or package_logger.handlers:
        return None

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler


__all__ = ["DEFAULT_FORMAT", "PACKAGE_LOGGER", "configure_moeadpy_logging"]
