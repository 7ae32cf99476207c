"""
RecordSearch Structured Logging

Configures structlog for the translation layer. Every log line carries the
service name, version and environment from Settings so index and search
logs can be told apart when several services write to one sink.
"""

import logging
import sys

import structlog

from recordsearch.platform.config import settings


def service_context() -> dict:
    """Context bound to every log line of this service."""
    return {
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "env": settings.APP_ENV,
    }


def configure_logging() -> None:
    """Configure structured logging and bind the service context."""

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            # JSON for log shippers in production, readable lines elsewhere
            structlog.processors.JSONRenderer()
            if settings.APP_ENV == "production"
            else structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(**service_context())

    # Gateways log through the standard library
    logging.basicConfig(
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger, e.g. get_logger(__name__) in storage adapters."""
    return structlog.get_logger(name)
