"""Structured logging setup for the metasearch command line.

Adapters never call this; they log through the structlog logger they are
handed. The CLI calls ``setup_logging`` once, before the first search.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from metasearch.config.settings import ObservabilitySettings

# Third-party loggers that announce every request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def _renderer(log_format: str) -> Any:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(settings: ObservabilitySettings | None = None, stream: IO[str] | None = None) -> None:
    """Route structlog events through stdlib logging to *stream*.

    Args:
        settings: Observability settings. Uses defaults if None.
        stream: Where log lines are written. Defaults to stderr, since
            stdout carries the search results.
    """
    level_name = settings.log_level.upper() if settings else "INFO"
    level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(settings.log_format if settings else "json"),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=stream or sys.stderr, level=level, force=True)

    # Request lines are only useful when debugging.
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
