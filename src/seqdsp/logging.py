"""This module implements some helpers for setting up logging."""

from __future__ import annotations

import logging

import colorlog

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
FATAL = logging.FATAL
CRITICAL = logging.CRITICAL


def setup(
    level: int | str = logging.INFO, logger: logging.Logger = None
) -> logging.Logger:
    """Setup a colorful logging output.

    If `logger` is None, sets up only the ``seqdsp`` logger. The operations
    themselves only emit ``DEBUG`` records (clamped windows, degenerate
    resampling branches), so pass ``level=logging.DEBUG`` to see them.

    Parameters
    ----------
    level
        logging level (see :mod:`logging` module), or its name, e.g.
        ``"debug"``.
    logger
        if not `None`, setup this logger.

    Returns
    -------
    the configured logger.

    Examples
    --------
    >>> from seqdsp import logging
    >>> logging.setup(level=logging.DEBUG)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter("%(log_color)s%(name)s [%(levelname)s] %(message)s")
    )

    if logger is None:
        logger = colorlog.getLogger("seqdsp")

    logger.setLevel(level)
    logger.addHandler(handler)
    return logger
