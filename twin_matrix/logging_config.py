"""
Logging Setup - Twin Matrix Scoring Core
twin_matrix/logging_config.py

Configures structlog once per process. Modules obtain loggers with
structlog.get_logger(__name__) and emit snake_case events with keyword
context, e.g. logger.info("smoothing_explained", code="0071", final_score=150).

The package never configures logging on import. The embedding application
calls configure_logging() once at startup; until then structlog uses its
defaults.
"""

import logging
from typing import Optional

import structlog

from twin_matrix.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog rendering and level from settings."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == "json"
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
        cache_logger_on_first_use=True,
    )
