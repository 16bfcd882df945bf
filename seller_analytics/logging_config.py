"""
Seller Analytics - Structlog Configuration

Library code only calls structlog.get_logger(); applications embedding the
analytics call configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from seller_analytics.config import settings


def configure_logging(log_level: str | None = None, json: bool | None = None) -> None:
    """
    Set up structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
            Defaults to settings.LOG_LEVEL.
        json: Render JSON lines instead of console output.
            Defaults to settings.LOG_JSON.
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'")
    use_json = settings.LOG_JSON if json is None else json

    # Configure stdlib logging first (for third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
