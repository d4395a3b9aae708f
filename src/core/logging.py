"""Structured logging setup."""

import logging
import sys
from typing import TextIO

import structlog

from core.config import settings


def setup_logging(stream: TextIO = sys.stdout) -> None:
    """Configure structlog and route stdlib logging through the same level.

    Console rendering is used for local development; production (or
    ``LOG_JSON=true``) emits one JSON object per line. Stdio servers pass
    ``sys.stderr`` so logs stay off the protocol stream.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=stream, level=level)

    renderer: structlog.types.Processor
    if settings.log_json or settings.is_production:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

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
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
