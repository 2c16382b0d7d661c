"""
Structured logging utilities for the Duolingo client, built on structlog.

Loggers created here always write through the standard library logger of the
same name, so a host application that never calls configure_logging sees
only what its own logging setup lets through. Applications that want
formatted output call configure_logging once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor

from duolingo_client.config import Environment, settings


def configure_logging(
    log_level: str | None = None,
    environment: Environment | str | None = None,
) -> None:
    """
    Configure structlog and the standard library root logger.

    Production gets one JSON object per line; every other environment gets
    the human-readable console renderer.

    Args:
        log_level: Logging level name (e.g. "DEBUG", "INFO"); defaults to
            settings.LOG_LEVEL
        environment: Runtime environment deciding the output format; defaults
            to settings.ENVIRONMENT
    """
    log_level = log_level or settings.LOG_LEVEL
    use_json = Environment(environment or settings.ENVIRONMENT) == Environment.PRODUCTION

    shared_processors: list[Processor] = [
        merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]

    if use_json:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_logger(name: str) -> Any:
    """
    Create a structlog logger backed by the stdlib logger ``name``.

    Processors are resolved on first use, so loggers created at import time
    pick up a later configure_logging call.

    Args:
        name: Logger name (e.g. "duolingo_client.client")

    Returns:
        A lazily bound structlog stdlib BoundLogger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
