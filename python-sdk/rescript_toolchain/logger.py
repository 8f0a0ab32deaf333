"""
Unified logging for rescript-toolchain.

Every module gets its logger through get_logger() so that output format and
verbosity stay consistent between the library and the CLI.
"""

import logging
import sys
from typing import Optional

from .config.env_config import get_verbose_from_env

# Default logger name
DEFAULT_LOGGER_NAME = "rescript_toolchain"

# Logger instance cache
_logger_cache: Optional[logging.Logger] = None


def _level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.WARNING


def get_logger(name: Optional[str] = None, verbose: Optional[bool] = None) -> logging.Logger:
    """
    Get or create a logger instance.

    Args:
        name: Logger name (default: "rescript_toolchain")
        verbose: Emit DEBUG records. Defaults to RESCRIPT_TOOLCHAIN_VERBOSE.

    Returns:
        Configured logger instance
    """
    global _logger_cache

    logger_name = name or DEFAULT_LOGGER_NAME

    if _logger_cache is not None and _logger_cache.name == logger_name:
        return _logger_cache

    if verbose is None:
        verbose = get_verbose_from_env()

    logger = logging.getLogger(logger_name)

    # Only configure once (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_level(verbose))

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(_level(verbose))
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

        logger.propagate = False

    _logger_cache = logger
    return logger


def set_verbose(verbose: bool) -> None:
    """Switch every rescript_toolchain logger between DEBUG and WARNING."""
    prefix = DEFAULT_LOGGER_NAME
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name != prefix and not name.startswith(prefix + "."):
            continue
        logger.setLevel(_level(verbose))
        for handler in logger.handlers:
            handler.setLevel(_level(verbose))
