"""structlog configuration shared by every entry point."""

import logging
import sys

import structlog

from riskdesk.config import settings

LOG_FORMATS = ("console", "json")


def setup_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Falls back to ``settings.log_level`` / ``settings.log_format`` when no
    explicit values are given. ``settings.debug`` lowers the fallback level to
    DEBUG; an explicit ``log_level`` still wins.
    """
    if log_level is None:
        log_level = "DEBUG" if settings.debug else settings.log_level
    log_level = log_level.upper()
    log_format = (log_format or settings.log_format).lower()

    levels = logging.getLevelNamesMapping()
    if log_level not in levels:
        raise ValueError(f"Unknown log level: {log_level}")
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {log_format} (expected one of {LOG_FORMATS})")

    level = levels[log_level]
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=False,
    )
