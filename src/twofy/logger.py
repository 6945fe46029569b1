"""Logging setup.

2fy logs through ``loguru``. Diagnostics go to stderr so they never mix
with converted output on stdout.
"""

import sys

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level} | {message}"


def setup_logger(debug: bool = False, sink=None) -> None:
    """Configure the global loguru logger for one run.

    Args:
        debug: log pipeline steps at DEBUG level instead of warnings only.
        sink: where log records go; defaults to ``sys.stderr``.
    """
    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        format=LOG_FORMAT,
        level="DEBUG" if debug else "WARNING",
    )


def get_logger():
    """Return the shared logger instance."""
    return logger
