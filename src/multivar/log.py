"""Structured logging configuration (structlog over stdlib logging)."""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

import structlog


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Configure structlog for human-readable console output.

    Call once at process startup. Events are rendered by structlog and
    written through a stdlib handler on the root logger (stdout unless
    *stream* is given). The library itself never calls this; until a host
    does, library loggers follow stdlib defaults and drop debug events.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger *name*.

    Wrapping the stdlib logger directly keeps level filtering with stdlib
    logging even when structlog has not been configured.
    """
    return structlog.wrap_logger(
        logging.getLogger(name if name is not None else "multivar"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
