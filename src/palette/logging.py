"""Logger factory writing to stderr"""

import logging
import sys


def get_logger(name: str = "palette", verbose: bool = False) -> logging.Logger:
    """Return the named logger with a single stderr handler; DEBUG when verbose."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
