"""Logging helpers built on loguru.

The package logs through loguru but is silent by default, so that importing
it as a library does not emit anything. Callers opt in with enable_logging.
"""

import sys
from typing import Optional

from loguru import logger

from gitresource.config.loader import load_config

PACKAGE_NAME = "gitresource"


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}\n{exception}"


def disable_logging() -> None:
    logger.disable(PACKAGE_NAME)


def enable_logging(level: Optional[str] = None) -> int:
    """Enable package logging to stderr.

    Args:
        level: Minimum loguru level to emit. Defaults to the configured
            ``log_level`` (config files or GITRESOURCE_LOG_LEVEL).

    Returns:
        The loguru handler id, usable with ``logger.remove``
    """
    if level is None:
        level = load_config().log_level

    logger.enable(PACKAGE_NAME)
    return logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        filter=PACKAGE_NAME,
        colorize=False,
    )
