"""
Centralized logging configuration for the stockchart pipeline.

This module provides standardized logging configuration using structlog
for all components. Every module logs through this configuration so that
load outcomes can be rendered either for a console or as JSON lines.
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include an ISO timestamp in log output
    """
    log_level = getattr(logging, level.upper())

    # Logs go to stderr so CSV written to stdout stays clean
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_pipeline_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with pipeline context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for load operations
    """
    return get_logger(name).bind(subsystem="pipeline")


def log_load_result(
    logger: FilteringBoundLogger,
    symbol: str,
    window: int,
    success: bool,
    counts: Optional[dict[str, int]] = None,
    error: Optional[BaseException] = None
) -> None:
    """
    Log the outcome of a series load with standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Symbol that was requested
        window: Averaging window used for the load
        success: Whether the load produced a series
        counts: Row counts per stage (parsed, smoothed, padded)
        error: Exception that aborted the load, if any
    """
    bound_logger = logger.bind(
        symbol=symbol,
        window=window,
        load_result="OK" if success else "FAILED",
    )

    if counts:
        bound_logger = bound_logger.bind(**counts)

    if success:
        bound_logger.info("Series load finished")
    else:
        bound_logger.warning(
            "Series load failed",
            error_type=type(error).__name__ if error else None,
            error=str(error) if error else None
        )
