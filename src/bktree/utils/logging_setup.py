"""Console logging for the ``bktree`` logger.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here by entry points such as the CLI.
"""
from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "bktree"
_logger: logging.Logger | None = None
_handler: logging.Handler | None = None


def setup_logging(level: int = logging.INFO) -> None:
    """Set the ``bktree`` level and (re)attach one console handler.

    Calling again replaces the handler so it writes to the current
    ``sys.stderr``; at most one console handler is ever attached.
    """
    global _logger, _handler
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    if _handler is not None:
        logger.removeHandler(_handler)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    _handler = ch
    _logger = logger


def get_logger() -> logging.Logger:
    if _logger is None:
        setup_logging()
    assert _logger is not None
    return _logger
