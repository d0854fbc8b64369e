"""Catallaxy — Structured logging setup for entry points."""

from __future__ import annotations

import logging
from typing import Any

import structlog

from catallaxy.config import settings


def build_processors(log_format: str) -> list[Any]:
    """Processor chain for the given output format (``json`` or ``console``)."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]
    return processors


def configure_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog for entry points and the stdlib level for library modules.

    Arguments override ``LOG_LEVEL`` / ``LOG_FORMAT`` from settings.
    """
    level_name = (log_level or settings.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("catallaxy").setLevel(level)

    structlog.configure(
        processors=build_processors(log_format or settings.log_format),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
