"""
Logging configuration for the OpenAPI generation pipeline.

Usage in generator modules:
    from prisma_openapi.api.gen_logging import get_logger
    logger = get_logger(__name__)

The root logger name is "prisma_openapi.gen". Log levels are controlled by the
CLI, falling back to the LOG_LEVEL environment variable.
"""

import logging
import os
import sys

_LOGGER_NAME = "prisma_openapi.gen"


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a child logger under the prisma_openapi.gen hierarchy.

    Args:
        name: Module __name__, or None for the root prisma_openapi.gen logger.

    Returns:
        logging.Logger instance
    """
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    # "prisma_openapi.api.generators.openapi_generator" -> "prisma_openapi.gen.openapi_generator"
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def _env_level() -> int:
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_gen_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the prisma_openapi.gen logger hierarchy.

    Levels:
        --verbose / -v  -> DEBUG
        (default)       -> $LOG_LEVEL, or INFO when unset
        --quiet / -q    -> WARNING (warnings and errors only)

    Args:
        verbose: Enable DEBUG-level output.
        quiet:   Suppress INFO output (WARNING+ only).
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = _env_level()

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)

    # Avoid duplicate handlers when called multiple times
    if root_logger.handlers:
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_GenFormatter())
    root_logger.addHandler(handler)

    # Don't propagate to the root logger (keeps output clean)
    root_logger.propagate = False


class _GenFormatter(logging.Formatter):
    """`[LEVEL] message`, with no timestamps (CLI output)."""

    def format(self, record: logging.LogRecord) -> str:
        return f"[{record.levelname}] {record.getMessage()}"
