"""Loguru sink setup for the command line."""

import sys

from loguru import logger


def configure_logging(level: str = "WARNING") -> None:
    """Route danhxung log records to stderr at the given level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
    )
    logger.enable("danhxung")
