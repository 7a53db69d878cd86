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
from typing import cast

import structlog
from structlog import processors, stdlib
from structlog.processors import JSONRenderer, TimeStamper, dict_tracebacks
from structlog.stdlib import BoundLogger

from spatial_geocoder.core.config import settings

# Define log levels
LOG_LEVELS: dict[str, int] = {
    "debug": DEBUG,
    "info": INFO,
    "warning": WARNING,
    "error": ERROR,
    "critical": CRITICAL,
}


def configure_logging(testing: bool = False, level: str | None = None) -> None:
    """Configure structured logging for the geocoder.

    Only the ``spatial_geocoder`` logger is touched; the root logger and its
    handlers are left to the host application.

    Args:
        testing: Whether the library is running in test mode
        level: Log level name (debug, info, warning, error, critical);
            defaults to settings.LOG_LEVEL
    """
    log_level = LOG_LEVELS.get((level or settings.LOG_LEVEL).lower(), INFO)
    json_logs = settings.JSON_LOGS and not testing

    package_logger: Logger = getLogger("spatial_geocoder")
    package_logger.setLevel(log_level)
    # Records are rendered by structlog and written once, by our handler
    package_logger.propagate = False

    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            stdlib.add_logger_name,
            stdlib.add_log_level,
            TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f"),
            dict_tracebacks,
            JSONRenderer() if json_logs else processors.KeyValueRenderer(),
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler: Handler = StreamHandler()
    handler.setLevel(log_level)

    # Clear existing handlers to prevent duplicates
    package_logger.handlers = []
    package_logger.addHandler(handler)


def get_logger() -> BoundLogger:
    """Get a configured logger instance.

    Returns:
        A structured logger instance.
    """
    return cast(BoundLogger, structlog.get_logger())


def get_provider_logger(provider: str | None = None) -> BoundLogger:
    """Get a logger with provider context.

    Args:
        provider: Optional provider name to bind to logger

    Returns:
        Configured logger with provider context
    """
    logger: BoundLogger = get_logger()
    if provider:
        logger = logger.bind(provider=provider)
    return logger
