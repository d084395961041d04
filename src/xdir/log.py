from __future__ import annotations

import logging
import sys

LOGGER_NAME = "xdir"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Safe to call more than once: an existing stream handler is reused and only
    the level changes.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    has_stream = any(type(h) is logging.StreamHandler for h in logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger
