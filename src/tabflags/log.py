"""Logging configuration for tabflags using loguru.

Completion lines go to stdout and are read by the shell, so diagnostics are
only ever written to stderr or to a log file, and only when asked for.
"""

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(
    log_level: str = "WARNING",
    console_output: bool = False,
    log_file: str | None = None,
) -> None:
    """
    Configure the loguru logger.

    Args:
        log_level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to log to stderr
        log_file: Optional path of a log file to append to
    """
    logger.remove()
    logger.enable("tabflags")

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_file:
        logger.add(
            log_file,
            level=log_level,
            format=LOG_FORMAT,
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )


def verbosity_level(verbose: int, default: str = "WARNING") -> str:
    """Map a repeated ``-v`` count onto a loguru level name."""
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return default
