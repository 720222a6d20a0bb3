"""Logging setup for applications that want to see spatial_types messages."""

import sys
from pathlib import Path

from loguru import logger

PACKAGE_NAME = "spatial_types"
CONSOLE_FORMAT = "<level>{level}</level>: {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{line} | {message}"


def setup_logging(
    filename: Path | str | None = None,
    level: str = "INFO",
    console: bool = True,
) -> list[int]:
    """Enable the package logger and replace all existing loguru sinks.

    Parameters
    ----------
    filename : Path | str | None
        Also write messages to this file.
    level : str
        Minimum level for every sink, such as "DEBUG" to see default SRID resolution.
    console : bool
        Write messages to stderr.

    Returns
    -------
    list[int]
        Handler IDs of the added sinks, for use with ``logger.remove``.
    """
    logger.remove()
    logger.enable(PACKAGE_NAME)
    handler_ids = []
    if console:
        handler_ids.append(logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT))
    if filename is not None:
        handler_ids.append(logger.add(filename, level=level, format=FILE_FORMAT))
    return handler_ids
