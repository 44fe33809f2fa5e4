"""Logging for the ``objectid`` logger namespace.

Library modules log at DEBUG only and never attach handlers themselves;
front ends (the CLI) call :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import sys
import threading

ROOT = "objectid"

_lock = threading.Lock()


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever ``sys.stderr`` is when a record is emitted."""

    def __init__(self, level: int = logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach one stderr handler to the ``objectid`` logger (idempotent).

    Level is WARNING, or DEBUG when *verbose*. A later verbose call raises
    the level; a later quiet call leaves it alone.
    """
    logger = logging.getLogger(ROOT)
    with _lock:
        if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
            handler = _StderrHandler()
            handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
            logger.addHandler(handler)
            logger.propagate = False
            logger.setLevel(logging.WARNING)
        if verbose:
            logger.setLevel(logging.DEBUG)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT}.{name}")
