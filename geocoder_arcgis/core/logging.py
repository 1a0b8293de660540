"""Logging configuration module."""

from logging import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    Handler,
    Logger,
    StreamHandler,
    getLogger,
)
from typing import Any, cast

import structlog
from structlog import dev, processors, stdlib
from structlog.processors import JSONRenderer, TimeStamper, dict_tracebacks
from structlog.stdlib import BoundLogger

from geocoder_arcgis.core.config import settings

# Define log levels
LOG_LEVELS: dict[str, int] = {
    "debug": DEBUG,
    "info": INFO,
    "warning": WARNING,
    "error": ERROR,
    "critical": CRITICAL,
}


def configure_logging(
    testing: bool = False,
    level: str | None = None,
    json_logs: bool | None = None,
) -> None:
    """Configure structured logging for the geocoder.

    Args:
        testing: Whether the geocoder is running in test mode
        level: Log level name, defaults to the LOG_LEVEL setting
        json_logs: Render JSON lines, defaults to the JSON_LOGS setting
    """
    log_level = LOG_LEVELS.get((level or settings.LOG_LEVEL).lower(), INFO)
    use_json = settings.JSON_LOGS if json_logs is None else json_logs
    if testing:
        use_json = False

    # Configure root logger
    root_logger: Logger = getLogger()
    root_logger.setLevel(log_level)

    # Create and configure package logger
    package_logger: Logger = getLogger("geocoder_arcgis")
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    # Create handler
    handler: Handler = StreamHandler()
    handler.setLevel(log_level)

    # Define shared processors
    shared_processors = [
        stdlib.add_logger_name,
        stdlib.add_log_level,
        stdlib.PositionalArgumentsFormatter(),
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f"),
        dict_tracebacks,
    ]

    # Configure structlog
    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            *shared_processors,
            processors.format_exc_info,
            JSONRenderer() if use_json else processors.KeyValueRenderer(),
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure handler formatter
    formatter = stdlib.ProcessorFormatter(
        processor=processors.JSONRenderer() if use_json else dev.ConsoleRenderer(),
        foreign_pre_chain=shared_processors,
    )
    handler.setFormatter(formatter)

    # Clear existing handlers to prevent duplicates
    root_logger.handlers = []
    package_logger.handlers = []

    root_logger.addHandler(handler)
    package_logger.addHandler(handler)


def get_logger(name: str | None = None, **initial_values: Any) -> BoundLogger:
    """Get a configured logger instance.

    The logger is resolved lazily, so module level loggers pick up the
    configuration applied later by configure_logging().

    Args:
        name: Optional logger name, usually the calling module's __name__
        **initial_values: Context bound to every entry, e.g. module

    Returns:
        A structured logger instance.
    """
    args = (name,) if name else ()
    return cast(BoundLogger, structlog.get_logger(*args, **initial_values))
