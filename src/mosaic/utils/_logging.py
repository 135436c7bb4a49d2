"""Logging utilities for Mosaic.

This module provides a standalone structlog logger factory that writes
JSON-formatted or text-formatted logs to a file or to stderr. Loggers are
self-contained and do not modify global structlog configuration.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import Literal, cast

import structlog
from structlog.typing import FilteringBoundLogger

from mosaic.config import DEFAULT_LOG_LEVEL, LoggingConfig

LogFormatType = Literal["json", "text"]


def _log_level_from_string(level: str | None) -> int:
    """Convert a log level string to a logging level integer.

    The level is determined by (in order of precedence):
    1. MOSAIC_DEBUG environment variable (if set, enables DEBUG level)
    2. The `level` argument (if provided)
    3. MOSAIC_LOG_LEVEL environment variable
    4. Default: WARNING

    Args:
        level: Log level string (debug, info, warning, error), or None.

    Returns:
        The logging level as an integer.
    """
    if getenv("MOSAIC_DEBUG", None):
        return logging.DEBUG

    if level is None:
        level = getenv("MOSAIC_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def create_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "text",
    log_file: str = "",
    **bindings: object,
) -> FilteringBoundLogger:
    """Create a standalone structlog logger.

    Args:
        level: Log level threshold (debug, info, warning, error). Falls back to
            MOSAIC_LOG_LEVEL; MOSAIC_DEBUG overrides both.
        log_format: Output format, either "json" or "text".
        log_file: Path to the log file (opened in append mode). Logs go to
            stderr when empty.
        **bindings: Key-value pairs bound to every log entry.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = _log_level_from_string(level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))
    else:
        logger_factory = structlog.WriteLoggerFactory(file=sys.stderr)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    logger = cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(effective_level),
            context_class=dict,
        ),
    )

    if bindings:
        return logger.bind(**bindings)
    return logger


def create_logger_from_config(
    config: LoggingConfig,
    **bindings: object,
) -> FilteringBoundLogger:
    """Create a logger from a LoggingConfig section.

    Args:
        config: Logging configuration.
        **bindings: Key-value pairs bound to every log entry.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    return create_logger(
        level=config.level.value,
        log_format=cast("LogFormatType", config.format.value),
        log_file=config.file,
        **bindings,
    )
