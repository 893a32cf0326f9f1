"""Diagnostic log sinks for configuration changes."""

import logging
from typing import TextIO

LOG_PREFIX = "[resolvconf] "
LOG_FORMAT = LOG_PREFIX + "%(asctime)s %(message)s"
LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


def stream_logger(name: str, stream: TextIO, level: int = logging.DEBUG) -> logging.Logger:
    """
    Point the named logger at the given stream.

    Any handlers previously attached to the logger are replaced, and records
    do not propagate to the package or root loggers.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
