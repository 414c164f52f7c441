import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "HEAP_LOG_LEVEL"


def log_level():
    """Level named by HEAP_LOG_LEVEL, WARNING when unset or not a level name."""
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level


def init_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr, level taken from HEAP_LOG_LEVEL."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(log_level())
    return logger


def print_(*args, **kwargs):
    """Diagnostic sink for printers and the demo driver."""
    kwargs.setdefault("flush", True)
    print(*args, **kwargs)
